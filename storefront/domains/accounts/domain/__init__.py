from .entities.user import User

__all__ = ["User"]
