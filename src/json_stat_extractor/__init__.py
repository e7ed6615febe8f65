"""JSON stat extractor - structural size statistics for JSON documents."""

from __future__ import annotations

from json_stat_extractor.api import extract_stats, extract_stats_from_source
from json_stat_extractor.config import ExtractorConfig
from json_stat_extractor.errors import JsonStatError, RecursionLimitExceeded
from json_stat_extractor.render import dumps, to_dict
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

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayStat",
    "AttributeStat",
    "ExtractorConfig",
    "JsonStat",
    "JsonStatError",
    "ObjectPairs",
    "ObjectStat",
    "RecursionLimitExceeded",
    "ScalarStat",
    "StatExtractor",
    "StatKind",
    "dumps",
    "extract_stats",
    "extract_stats_from_source",
    "to_dict",
]
