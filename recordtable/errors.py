# recordtable/errors.py
from typing import Optional


class ConfigurationError(ValueError):
    """
    The column configuration (attributes + filter keys) is invalid.

    Raised before any record is produced, so a failed call never yields
    partial output. `key` names the offending filter key when there is one.
    """
    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
