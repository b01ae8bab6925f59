"""
Lists Services Module
"""

from .list_service import ListService

__all__ = ["ListService"]
