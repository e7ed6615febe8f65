"""Public API functions for json-stat-extractor.

This module provides the user-facing functions: extract_stats and
extract_stats_from_source.  Each call creates a fresh StatExtractor, so no
state is shared between calls.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_stat_extractor.config import ExtractorConfig
from json_stat_extractor.io import JsonSource, load_json
from json_stat_extractor.stats.extractor import StatExtractor
from json_stat_extractor.stats.nodes import JsonStat

__all__ = ["extract_stats", "extract_stats_from_source"]

logger = logging.getLogger(__name__)


def extract_stats(value: Any, config: ExtractorConfig | None = None) -> JsonStat:
    """Return the statistics tree for an already parsed JSON value.

    Args:
        value:  Any JSON value (dict, ObjectPairs, list, str, int, float,
                bool, None).
        config: Extraction settings.  Defaults to ``ExtractorConfig()`` when None.

    Returns:
        A ``ScalarStat``, ``ObjectStat`` or ``ArrayStat`` mirroring ``value``.

    Raises:
        RecursionLimitExceeded: If ``value`` nests deeper than ``config.max_depth``.
        TypeError: If ``value`` contains a non-JSON Python type.
    """
    extractor = StatExtractor(config=config if config is not None else ExtractorConfig())
    t0 = time.perf_counter()
    stat = extractor.extract(value)
    logger.debug(
        "extracted %s stat (size=%d) in %.3f ms",
        stat.kind,
        stat.size,
        (time.perf_counter() - t0) * 1000.0,
    )
    return stat


def extract_stats_from_source(
    source: JsonSource = None,
    config: ExtractorConfig | None = None,
) -> JsonStat:
    """Load a JSON document and return its statistics tree.

    Args:
        source: File path, open text stream, or None / "-" for stdin.
        config: Settings shared by the loader and the extractor.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the content is not valid JSON.
        RecursionLimitExceeded: If the document nests too deeply.
    """
    config = config if config is not None else ExtractorConfig()
    return extract_stats(load_json(source, config=config), config=config)
