"""
Pagination helpers.

Pure functions for turning raw query values into a page request and for
deriving pagination metadata from a total count. No database access here.
"""

import math
import re
from typing import Any, Optional

from app.schemas.pagination import PageRequest, PaginationMeta

# Leading ASCII integer, the same prefix a lenient integer parse would accept
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int_param(raw: Any, default: int) -> int:
    """
    Parse a raw query value as an integer, falling back to ``default``.

    Only a leading integer is read, so ``"5abc"`` gives 5 and ``"2.9"`` gives 2.
    Missing, empty or non-numeric values give ``default``. Zero and negative
    values are returned unchanged.
    """
    if raw is None:
        return default
    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    return int(match.group(1))


def resolve_page_request(
    raw_page: Any,
    raw_limit: Any,
    default_page: int = 1,
    default_limit: int = 10,
    max_limit: Optional[int] = None,
) -> PageRequest:
    """
    Normalize raw ``page``/``limit`` values.

    When ``max_limit`` is set, any limit outside ``1..max_limit`` becomes
    ``max_limit``. Without it, limits pass through unchanged.
    """
    page = parse_int_param(raw_page, default_page)
    limit = parse_int_param(raw_limit, default_limit)
    if max_limit is not None and not 1 <= limit <= max_limit:
        limit = max_limit
    return PageRequest(page=page, limit=limit)


def build_pagination_meta(total_docs: int, page: int, limit: int) -> PaginationMeta:
    """
    Derive pagination metadata from the total count and the requested window.

    A page past the last one is not rejected; the metadata is still filled in.
    Raises ZeroDivisionError when ``limit`` is 0.
    """
    total_pages = math.ceil(total_docs / limit)
    has_prev_page = page > 1
    has_next_page = page < total_pages
    return PaginationMeta(
        total_docs=total_docs,
        limit=limit,
        page=page,
        total_pages=total_pages,
        paging_counter=(page - 1) * limit + 1,
        has_prev_page=has_prev_page,
        has_next_page=has_next_page,
        prev_page=page - 1 if has_prev_page else None,
        next_page=page + 1 if has_next_page else None,
    )
