from planit.models.user import User, Password
from planit.models.group import Group
from planit.models.event import Event

__all__ = ["User", "Password", "Group", "Event"]
