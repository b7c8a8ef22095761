"""Local authentication."""

from .users import User, UserRegistry

__all__ = ["User", "UserRegistry"]
