from planit.schemas.user import SignupData, CurrentUser
from planit.schemas.event import EventResponse, GroupResponse
from planit.schemas.page import RootData, ActionResult

__all__ = [
    "SignupData", "CurrentUser",
    "EventResponse", "GroupResponse",
    "RootData", "ActionResult",
]
