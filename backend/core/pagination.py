"""
Offset pagination helpers shared by services.
"""

import math
from typing import Any, Dict, List, Tuple

from .validators import validate_pagination_params


def build_pagination(page: int, limit: int, total: int) -> Dict[str, int]:
    """Return the ``{page, limit, total, pages}`` block used in list responses."""
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit) if limit else 0,
    }


def paginate_queryset(queryset, page=None, limit=None) -> Tuple[List[Any], Dict]:
    """
    Slice a queryset into one page.

    Args:
        queryset: Ordered queryset to page through
        page: Raw page number (normalized, floored at 1)
        limit: Raw page size (normalized, clamped to the configured maximum)

    Returns:
        Tuple of (items on the page, pagination block)
    """
    page, limit = validate_pagination_params(page, limit)
    total = queryset.count()
    offset = (page - 1) * limit
    items = list(queryset[offset : offset + limit])
    return items, build_pagination(page, limit, total)
