"""Stable, non-mutating ordering of normalized rows.

Values are compared through an explicit total order, since Python refuses
`<` between str, numbers and None:

    None/NaN  <  real numbers  <  strings  <  anything else (by str())

Nulls therefore lead an ascending view and trail a descending one.
"""

import numbers
from decimal import Decimal
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, List, Mapping, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")
Row = Mapping[str, Any]
Comparator = Callable[[Row, Row], int]


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


def parse_order(value: Union[Order, str, None]) -> Order:
    """Anything other than "desc" sorts ascending."""
    if isinstance(value, Order):
        return value
    return Order.DESC if str(value or "").strip().lower() == "desc" else Order.ASC


def _is_null(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, Decimal):
        return v.is_nan()
    if isinstance(v, numbers.Real):
        return v != v
    return False


def sort_key(v: Any) -> Tuple[int, Any]:
    """Rank a value into its type group, then compare within the group."""
    if _is_null(v):
        return (0, 0)
    if isinstance(v, (numbers.Real, Decimal)):
        return (1, v)
    if isinstance(v, str):
        return (2, v)
    return (3, str(v))


def compare_values(a: Any, b: Any) -> int:
    ka, kb = sort_key(a), sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def descending_comparator(a: Row, b: Row, order_by: str) -> int:
    # a before b when b[order_by] < a[order_by]
    return compare_values(b.get(order_by), a.get(order_by))


def get_comparator(order: Union[Order, str], order_by: str) -> Comparator:
    if parse_order(order) == Order.DESC:
        return lambda a, b: descending_comparator(a, b, order_by)
    return lambda a, b: -descending_comparator(a, b, order_by)


def stable_sort(array: Sequence[T], comparator: Callable[[T, T], int]) -> List[T]:
    """
    Sort a copy of `array`; ties fall back to the original index, so equal
    elements keep their input order whatever the comparator's direction.
    """
    indexed = [(el, i) for i, el in enumerate(array)]

    def _cmp(x: Tuple[T, int], y: Tuple[T, int]) -> int:
        return comparator(x[0], y[0]) or x[1] - y[1]

    indexed.sort(key=cmp_to_key(_cmp))
    return [el for el, _ in indexed]


def sorted_view(records: Sequence[Row], order_by: str, order: Union[Order, str] = Order.ASC) -> List[Row]:
    """
    New list with the same row objects ordered by `order_by`.
    Never raises: an unknown column compares every row equal and keeps
    input order.
    """
    return stable_sort(records, get_comparator(order, order_by))
