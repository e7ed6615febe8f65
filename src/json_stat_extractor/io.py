"""Loading JSON documents from files or standard input.

The loader is the only place raw text becomes a value: malformed input raises
``json.JSONDecodeError`` and unreadable files raise ``OSError``, both left to
the caller.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from json_stat_extractor.config import ExtractorConfig
from json_stat_extractor.errors import RecursionLimitExceeded
from json_stat_extractor.stats.nodes import ObjectPairs

__all__ = ["JsonSource", "load_json"]

logger = logging.getLogger(__name__)

# A path, an open text stream, or None / "-" for standard input
JsonSource = str | Path | TextIO | None


def _parse(stream: TextIO, config: ExtractorConfig) -> Any:
    hook = ObjectPairs if config.keep_duplicate_keys else None
    try:
        return json.load(stream, object_pairs_hook=hook)
    except RecursionError as exc:
        raise RecursionLimitExceeded(config.max_depth) from exc


def load_json(source: JsonSource = None, config: ExtractorConfig | None = None) -> Any:
    """Parse one JSON document from ``source``.

    Args:
        source: File path, open text stream, or None / "-" for stdin.
        config: Controls duplicate-key handling.  Defaults to
            ``ExtractorConfig()``.

    Returns:
        The parsed value.  Objects are ``ObjectPairs`` when
        ``config.keep_duplicate_keys`` is True, plain dicts otherwise.

    Raises:
        OSError: If the file cannot be opened or read.
        json.JSONDecodeError: If the content is not valid JSON.
        RecursionLimitExceeded: If the parser itself runs out of stack.
    """
    config = config if config is not None else ExtractorConfig()

    if source is None or source == "-":
        logger.info("will parse <stdin>")
        return _parse(sys.stdin, config)

    if isinstance(source, (str, Path)):
        logger.info("will parse %s", source)
        with open(source, encoding="utf-8") as fh:
            return _parse(fh, config)

    logger.info("will parse %s", getattr(source, "name", "<stream>"))
    return _parse(source, config)
