import logging
from collections import Counter
from typing import Any, Iterable, List, Optional, Sequence, Set

from recordtable.errors import ConfigurationError
from recordtable.settings import ID_FIELD
from .base import Normalizer
from .types import ColumnMapping, NormalizedRecord, Record, SchemaPolicy

log = logging.getLogger(__name__)


class ColumnNormalizer(Normalizer):
    """
    Reshapes heterogeneous records into one uniform row shape:
    every attribute from the mapping (None when the source value is missing)
    plus the `id` identity field. Output order matches input order, one row
    per record.
    """
    def normalize(self, mapping: ColumnMapping, records: Sequence[Record]) -> List[NormalizedRecord]:
        if not records:
            # nothing to validate the keys against
            return []

        validate_filter_keys(records, mapping.filter_keys, mapping.schema_policy, mapping.schema_keys)

        base = create_base_record(mapping.attributes)
        rows = [self.normalize_record(mapping, rec, i, base) for i, rec in enumerate(records)]

        warn_duplicate_ids(rows)
        log.debug("normalized %d record(s) into %d column(s)", len(rows), len(mapping.attributes))
        return rows

    def normalize_record(
        self, mapping: ColumnMapping, rec: Record, index: int, base: NormalizedRecord
    ) -> NormalizedRecord:
        out = dict(base)  # fresh row; never share the base between rows
        # later pairs overwrite earlier ones when an attribute repeats
        for attr, value in zip(mapping.attributes, extract_values(rec, mapping.filter_keys)):
            out[attr] = value
        if ID_FIELD not in mapping.attributes:
            out[ID_FIELD] = pick_id(rec, index)
        return out


# --- Helpers ---

def create_base_record(attributes: Iterable[str]) -> NormalizedRecord:
    """Every attribute present, every value None."""
    return dict.fromkeys(attributes)

def schema_keys(
    records: Sequence[Record],
    policy: SchemaPolicy = SchemaPolicy.FIRST,
    explicit: Optional[Sequence[str]] = None,
) -> Set[str]:
    """The key set filter keys must belong to."""
    if explicit is not None:
        return set(explicit)
    if not records:
        return set()
    if policy == SchemaPolicy.UNION:
        keys: Set[str] = set()
        for rec in records:
            keys.update(rec.keys())
        return keys
    return set(records[0].keys())

def validate_filter_keys(
    records: Sequence[Record],
    filter_keys: Sequence[str],
    policy: SchemaPolicy = SchemaPolicy.FIRST,
    explicit: Optional[Sequence[str]] = None,
) -> None:
    """Raise ConfigurationError for the first filter key outside the schema."""
    if not records:
        return
    available = schema_keys(records, policy, explicit)
    for key in filter_keys:
        if key not in available:
            log.warning("unknown filter key %r (policy=%s)", key, policy.value)
            raise ConfigurationError(
                f"unknown filter key: '{key}' does not match any key in the input records",
                key=key,
            )

def extract_values(rec: Record, keys: Sequence[str]) -> List[Any]:
    """Values for `keys` in order; a key missing on this record yields None."""
    return [rec.get(k) for k in keys]

def pick_id(rec: Record, index: int) -> Any:
    """Pass the record's own id through, falling back to its input position."""
    rid = rec.get(ID_FIELD)
    return index if rid is None else rid

def warn_duplicate_ids(rows: Sequence[NormalizedRecord]) -> None:
    counts = Counter(_hashable(r.get(ID_FIELD)) for r in rows)
    dupes = [rid for rid, n in counts.items() if n > 1]
    if dupes:
        log.warning("duplicate row ids: %s", dupes[:10])

def _hashable(v: Any) -> Any:
    try:
        hash(v)
        return v
    except TypeError:
        return repr(v)
