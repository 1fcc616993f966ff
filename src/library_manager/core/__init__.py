"""Core functionality for Library Manager."""

from .catalog import Catalog
from .models import Account, Book, Command, Role
from .session import AppContext, Session, SessionState

__all__ = ["AppContext", "Account", "Book", "Catalog", "Command", "Role", "Session", "SessionState"]
