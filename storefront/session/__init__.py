from .menu_session import MenuSession
from .store import SessionStore

__all__ = ["MenuSession", "SessionStore"]
