# recordtable/pagination.py
from typing import Any, List, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel):
    rows: List[Any]
    page: int            # 0-based
    page_size: int
    total: int           # rows before windowing
    page_count: int
    empty_rows: int = 0  # filler rows so a short last page keeps its height


def page_count(total: int, page_size: int) -> int:
    return (total + page_size - 1) // page_size if total else 0


def window(view: Sequence[T], page: int, page_size: int) -> List[T]:
    """Rows [page*size, page*size+size) of `view`; past the end is empty."""
    if page < 0:
        raise ValueError(f"page must be >= 0, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    start = page * page_size
    return list(view[start:start + page_size])


def empty_rows(total: int, page: int, page_size: int) -> int:
    """Only pages after the first are padded."""
    return max(0, (1 + page) * page_size - total) if page > 0 else 0


def paginate(view: Sequence[Any], page: int, page_size: int) -> Page:
    rows = window(view, page, page_size)
    total = len(view)
    return Page(
        rows=rows,
        page=page,
        page_size=page_size,
        total=total,
        page_count=page_count(total, page_size),
        empty_rows=empty_rows(total, page, page_size),
    )
