"""Stats subpackage: the statistics data model and the extraction walk.

Re-exports the public API for the stats module:
- ScalarStat, ObjectStat, ArrayStat: the three statistics node kinds
- AttributeStat: per-name size/count statistics
- StatKind: StrEnum tag carried by every node
- ObjectPairs: object representation that keeps repeated member names
- StatExtractor: converts a parsed JSON value into a statistics tree
"""

from json_stat_extractor.stats.extractor import StatExtractor
from json_stat_extractor.stats.nodes import (
    ArrayStat,
    AttributeStat,
    JsonStat,
    ObjectPairs,
    ObjectStat,
    ScalarStat,
    StatKind,
)

__all__ = [
    "ArrayStat",
    "AttributeStat",
    "JsonStat",
    "ObjectPairs",
    "ObjectStat",
    "ScalarStat",
    "StatExtractor",
    "StatKind",
]
