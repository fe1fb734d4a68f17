"""
Search and pagination helpers for list endpoints.
"""
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from sqlalchemy import String, cast, or_, true
from sqlalchemy.sql.elements import ColumnElement

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class PageWindow:
    """Requested page plus the offset/limit window sent to the store"""
    page: int
    limit: int
    offset: int


def build_filter(search: Optional[str], fields: Sequence[Any]) -> ColumnElement:
    """
    Build a store filter from a free-text search term

    Args:
        search: Search term from the query string; empty matches everything
        fields: Searchable model columns. Non-string columns are cast to
            text so a partial number matches too

    Returns:
        A SQLAlchemy boolean expression
    """
    term = (search or "").strip()
    if not term or not fields:
        return true()

    return or_(*[cast(field, String).icontains(term, autoescape=True) for field in fields])


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def build_page(page: Any = None, limit: Any = None) -> PageWindow:
    """Page/limit default to 1/10 when absent, non-numeric or below 1. No upper bound on limit."""
    page_num = _positive_int(page, DEFAULT_PAGE)
    limit_num = _positive_int(limit, DEFAULT_LIMIT)
    return PageWindow(page=page_num, limit=limit_num, offset=(page_num - 1) * limit_num)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0
