"""
Authentication app managers.
"""

from .user import UserManager

__all__ = ["UserManager"]
