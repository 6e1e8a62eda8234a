from recordtable.errors import ConfigurationError
from recordtable.normalizers import ColumnMapping, SchemaPolicy, get_default_normalizer, normalize
from recordtable.pagination import Page, paginate
from recordtable.sorting import Order, sorted_view, stable_sort
from recordtable.table import HeadCell, TableState, build_head_cells, visible_rows

__all__ = [
    "ConfigurationError",
    "ColumnMapping",
    "SchemaPolicy",
    "get_default_normalizer",
    "normalize",
    "Page",
    "paginate",
    "Order",
    "sorted_view",
    "stable_sort",
    "HeadCell",
    "TableState",
    "build_head_cells",
    "visible_rows",
]
