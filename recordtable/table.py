"""
Table view model for the display layer.

The pipeline itself stays pure: `TableState` is owned by the host (the
Streamlit session in `client/`) and handed to `visible_rows` as plain
parameters. Every transition returns a new state.
"""
import logging
import numbers
from decimal import Decimal
from typing import Any, List, Mapping, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from recordtable.pagination import Page, paginate
from recordtable.settings import DEFAULT_ORDER_BY, DEFAULT_ROWS_PER_PAGE, ID_FIELD
from recordtable.sorting import Order, parse_order, sorted_view

log = logging.getLogger(__name__)


class HeadCell(BaseModel):
    id: str
    label: str
    numeric: bool = False
    disable_padding: bool = False


def header_label(attr: str) -> str:
    return attr.upper().replace("_", " ")


def _is_number(v: Any) -> bool:
    return isinstance(v, (numbers.Real, Decimal)) and not isinstance(v, bool)


def build_head_cells(attributes: Sequence[str], rows: Sequence[Mapping[str, Any]]) -> List[HeadCell]:
    """One header per attribute; numeric columns are detected from the first row."""
    first = rows[0] if rows else {}
    return [
        HeadCell(id=attr, label=header_label(attr), numeric=_is_number(first.get(attr)))
        for attr in attributes
    ]


def row_link(detail_path: str, value: Any) -> str:
    """Target of the optional first-column link."""
    return f"{detail_path}/{value}"


class TableState(BaseModel):
    model_config = ConfigDict(frozen=True)

    order: Order = Order.ASC
    order_by: str = DEFAULT_ORDER_BY
    page: int = Field(default=0, ge=0)
    rows_per_page: int = Field(default=DEFAULT_ROWS_PER_PAGE, ge=1)
    selected: Tuple[Any, ...] = ()

    def request_sort(self, prop: str) -> "TableState":
        """Clicking the ascending column flips it; any other click sorts ascending."""
        is_asc = self.order_by == prop and self.order == Order.ASC
        return self.model_copy(update={"order": Order.DESC if is_asc else Order.ASC, "order_by": prop})

    def is_selected(self, row_id: Any) -> bool:
        return row_id in self.selected

    def toggle_row(self, row_id: Any) -> "TableState":
        if row_id in self.selected:
            selected = tuple(s for s in self.selected if s != row_id)
        else:
            selected = self.selected + (row_id,)
        return self.model_copy(update={"selected": selected})

    def select_all(self, rows: Sequence[Mapping[str, Any]], checked: bool = True) -> "TableState":
        selected = tuple(r.get(ID_FIELD) for r in rows) if checked else ()
        return self.model_copy(update={"selected": selected})

    def change_page(self, page: int) -> "TableState":
        if page < 0:
            raise ValueError(f"page must be >= 0, got {page}")
        return self.model_copy(update={"page": page})

    def change_rows_per_page(self, rows_per_page: int) -> "TableState":
        if rows_per_page < 1:
            raise ValueError(f"rows_per_page must be >= 1, got {rows_per_page}")
        return self.model_copy(update={"rows_per_page": rows_per_page, "page": 0})


def visible_rows(rows: Sequence[Mapping[str, Any]], state: TableState) -> Page:
    """Sort, then window: the rows the table shows for `state`."""
    view = sorted_view(rows, state.order_by, state.order)
    page = paginate(view, state.page, state.rows_per_page)
    log.debug(
        "table view order_by=%s order=%s page=%d/%d",
        state.order_by, state.order.value, page.page, page.page_count,
    )
    return page


def view_rows(
    rows: Sequence[Mapping[str, Any]],
    order_by: str,
    order: Union[Order, str] = Order.ASC,
    page: int = 0,
    rows_per_page: int = DEFAULT_ROWS_PER_PAGE,
) -> Page:
    """Same as `visible_rows` for callers that keep plain parameters."""
    state = TableState(order=parse_order(order), order_by=order_by, page=page, rows_per_page=rows_per_page)
    return visible_rows(rows, state)
