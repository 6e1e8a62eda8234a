from .pipeline import get_default_normalizer, normalize, MemoizedNormalizer
from .columns import ColumnNormalizer
from .types import ColumnMapping, NormalizedRecord, Record, SchemaPolicy
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "normalize",
    "MemoizedNormalizer",
    "ColumnNormalizer",
    "ColumnMapping",
    "NormalizedRecord",
    "Record",
    "SchemaPolicy",
    "Normalizer",
]
