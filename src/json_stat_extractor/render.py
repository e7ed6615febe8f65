"""Rendering of statistics trees as plain data and JSON text."""

from __future__ import annotations

import json
from typing import Any

from json_stat_extractor.stats.nodes import (
    ArrayStat,
    AttributeStat,
    JsonStat,
    ObjectStat,
    ScalarStat,
)

__all__ = ["dumps", "to_dict"]


def _attribute_to_dict(attr: AttributeStat) -> dict[str, Any]:
    return {
        "name": attr.name,
        "size": attr.size,
        "count": attr.count,
        "max_size": attr.max_size,
        "min_size": attr.min_size,
    }


def to_dict(stat: JsonStat) -> dict[str, Any]:
    """Convert a statistics node into nested dicts and lists.

    Every node starts with its ``kind``; object and array nodes add
    ``count`` and their ``attributes``.

    Raises:
        TypeError: If ``stat`` is not a statistics node.
    """
    if isinstance(stat, ScalarStat):
        return {
            "kind": str(stat.kind),
            "size": stat.size,
            "max_size": stat.max_size,
            "min_size": stat.min_size,
        }
    if isinstance(stat, (ObjectStat, ArrayStat)):
        return {
            "kind": str(stat.kind),
            "size": stat.size,
            "count": stat.count,
            "max_size": stat.max_size,
            "min_size": stat.min_size,
            "attributes": [_attribute_to_dict(a) for a in stat.attributes],
        }
    raise TypeError(f"Unsupported statistics node: {type(stat)!r}")


def dumps(stat: JsonStat, indent: int | None = 2) -> str:
    """Serialize a statistics node to JSON text.

    Args:
        stat:   The node to render.
        indent: Indentation width for pretty output; None for compact output.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        to_dict(stat), indent=indent, separators=separators, ensure_ascii=False
    )
