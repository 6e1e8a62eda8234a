# recordtable/normalizers/base.py
from typing import List, Protocol, Sequence
from .types import ColumnMapping, NormalizedRecord, Record

class Normalizer(Protocol):
    def normalize(self, mapping: ColumnMapping, records: Sequence[Record]) -> List[NormalizedRecord]:
        """Return a NEW list of normalized records. Do not mutate `records`."""
        ...
