"""
Application errors that are shown to the user on the page that caused them.

Anything raised from a form action that is a PlanItError is rendered inline on
the form as an action result. Everything else falls through to the error
boundary registered in planit.api.errors.
"""

from typing import Optional

from fastapi import status


class PlanItError(Exception):
    """Base class for errors with a user-facing message and an HTTP status."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"status": self.status_code, "message": self.message}


class FormValidationError(PlanItError):
    """Submitted form is missing fields or has malformed values."""


class AuthenticationError(PlanItError):
    """Credentials could not be verified.

    Messages for "no password on file" and "wrong password" are worded
    identically so the response does not reveal which one happened.
    """


MISSING_FIELDS = "Missing required fields"
EMAIL_NOT_IN_USE = "Email not in use. Please sign up instead."
CREDENTIALS_MISMATCH = "Credentials don't match. Please try again."
EMAIL_IN_USE = "Email already in use. Please log in instead."
INVALID_EMAIL = "Please enter a valid email address."
PASSWORD_TOO_SHORT = "Password must be at least 8 characters."
PASSWORD_TOO_LONG = "Password must be at most 128 characters."
NAME_TOO_LONG = "Name must be at most 100 characters."
