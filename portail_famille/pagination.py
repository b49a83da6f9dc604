# portail_famille/pagination.py
"""
Pagination helpers.

Pages are 1-based. Listing endpoints return a ``pagination``
object ``{page, limit, total}`` next to the requested slice.
"""

from typing import Dict, Sequence, Tuple

from django.core.paginator import EmptyPage, Paginator

from .errors import ErrorCode, create_error

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def build_range(page: int, limit: int) -> Tuple[int, int]:
    """
    Compute the slice bounds of a page.

    Parameters
    ----------
    page : int
        Page number, starting at 1.
    limit : int
        Page size, at least 1.

    Returns
    -------
    tuple
        ``(offset, end)`` where ``end`` is exclusive.

    Raises
    ------
    ApiError
        ``VALIDATION_ERROR`` on a page or limit below 1.
    """
    if page < 1:
        raise create_error(ErrorCode.VALIDATION_ERROR, "Page must be >= 1")
    if limit < 1:
        raise create_error(ErrorCode.VALIDATION_ERROR, "Limit must be >= 1")
    offset = (page - 1) * limit
    return offset, offset + limit


def build_pagination(page: int, limit: int, total: int) -> Dict[str, int]:
    """Build the ``pagination`` object of a listing response."""
    if total < 0:
        raise create_error(ErrorCode.VALIDATION_ERROR, "Total must be a non-negative number")
    build_range(page, limit)
    return {"page": page, "limit": limit, "total": total}


def paginate(items: Sequence, page: int, limit: int):
    """
    Return one page of an already filtered and ordered sequence or queryset.

    A page past the end yields an empty list while ``total`` still
    reports the full size.

    Returns
    -------
    tuple
        ``(page_items, pagination)``
    """
    build_range(page, limit)
    paginator = Paginator(items, limit)
    try:
        page_items = list(paginator.page(page).object_list)
    except EmptyPage:
        page_items = []
    return page_items, build_pagination(page, limit, paginator.count)
