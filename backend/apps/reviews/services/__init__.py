"""
Reviews Services Module
"""

from .review_service import ReviewService

__all__ = ["ReviewService"]
