# recordtable/normalizers/types.py
import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from recordtable.errors import ConfigurationError

log = logging.getLogger(__name__)

Record = Mapping[str, Any]            # raw input row, any shape
NormalizedRecord = Dict[str, Any]     # attributes + id


class SchemaPolicy(str, Enum):
    """Which key set the filter keys are validated against."""
    FIRST = "first"   # keys of records[0]
    UNION = "union"   # keys seen on any record


def check_lengths(attributes: Sequence[str], filter_keys: Sequence[str]) -> None:
    if len(attributes) != len(filter_keys):
        log.warning("attribute/key length mismatch: %d attributes, %d filter keys", len(attributes), len(filter_keys))
        raise ConfigurationError(
            f"attribute/key length mismatch: {len(attributes)} attributes, "
            f"{len(filter_keys)} filter keys"
        )


class ColumnMapping(BaseModel):
    """
    Declarative column configuration.
    `filter_keys[i]` is the raw-record key whose value becomes `attributes[i]`.
    """
    model_config = ConfigDict(frozen=True)

    attributes: Tuple[str, ...] = ()
    filter_keys: Tuple[str, ...] = ()
    schema_policy: SchemaPolicy = SchemaPolicy.FIRST
    schema_keys: Optional[Tuple[str, ...]] = None  # explicit schema overrides the policy

    def __init__(self, **data: Any):
        super().__init__(**data)
        check_lengths(self.attributes, self.filter_keys)

    @classmethod
    def from_pairs(cls, pairs: Mapping[str, str], **kwargs: Any) -> "ColumnMapping":
        """Build from an ordered {attribute: filter_key} mapping."""
        return cls(attributes=tuple(pairs.keys()), filter_keys=tuple(pairs.values()), **kwargs)

    def pairs(self) -> List[Tuple[str, str]]:
        return list(zip(self.attributes, self.filter_keys))
