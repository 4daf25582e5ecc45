"""Page slicing shared by every listing operation."""

from typing import Sequence, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the zero-indexed page ``page`` of ``items``.

    The page covers ``[page * page_size, page * page_size + page_size)``.
    A start beyond the data returns an empty list and a partial last page
    returns the remainder.

    Args:
        items: Fully materialized, already ordered sequence.
        page: Zero-indexed page number.
        page_size: Maximum number of items per page.

    Returns:
        The items on the requested page.

    Raises:
        ValueError: If page or page_size is negative.
    """
    if page < 0 or page_size < 0:
        raise ValueError(f"page and page_size must be non-negative, got page={page}, page_size={page_size}")

    start = page * page_size
    if start >= len(items):
        return []
    return list(items[start : start + page_size])
