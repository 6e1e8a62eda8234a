# recordtable/settings.py
import os

LOG_LEVEL = os.getenv("RECORDTABLE_LOG_LEVEL", "INFO")

# Table defaults (match the page-size selector in the client)
ROWS_PER_PAGE_OPTIONS = (5, 10, 25)

def read_page_size(raw: str) -> int:
    size = int(raw)
    if size < 1:
        raise ValueError(f"RECORDTABLE_PAGE_SIZE must be >= 1, got {raw!r}")
    return size

DEFAULT_ROWS_PER_PAGE = read_page_size(os.getenv("RECORDTABLE_PAGE_SIZE", "5"))

# Sort the first render by this column; a missing column is a stable no-op
DEFAULT_ORDER_BY = "id"

# Identity field passed through every normalized record
ID_FIELD = "id"
