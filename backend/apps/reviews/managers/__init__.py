"""
Reviews app managers.
"""

from .review import ReviewManager

__all__ = ["ReviewManager"]
