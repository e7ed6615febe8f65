"""Tests for to_dict() and dumps() rendering of statistics trees."""

from __future__ import annotations

import json

import pytest

from json_stat_extractor import extract_stats
from json_stat_extractor.render import dumps, to_dict
from json_stat_extractor.stats.nodes import ScalarStat


class TestToDict:
    def test_scalar(self) -> None:
        assert to_dict(ScalarStat(size=6, max_size=6, min_size=6)) == {
            "kind": "scalar",
            "size": 6,
            "max_size": 6,
            "min_size": 6,
        }

    def test_object(self) -> None:
        assert to_dict(extract_stats({"test": "test"})) == {
            "kind": "object",
            "size": 15,
            "count": 1,
            "max_size": 15,
            "min_size": 15,
            "attributes": [
                {"name": "test", "size": 6, "count": 1, "max_size": 6, "min_size": 6}
            ],
        }

    def test_empty_array(self) -> None:
        assert to_dict(extract_stats([])) == {
            "kind": "array",
            "size": 0,
            "count": 0,
            "max_size": 0,
            "min_size": 0,
            "attributes": [],
        }

    def test_key_order(self) -> None:
        keys = list(to_dict(extract_stats([1])))
        assert keys == ["kind", "size", "count", "max_size", "min_size", "attributes"]

    def test_kind_is_plain_str(self) -> None:
        assert type(to_dict(extract_stats(None))["kind"]) is str

    def test_unknown_node_raises(self) -> None:
        with pytest.raises(TypeError):
            to_dict({"size": 1})  # type: ignore[arg-type]


class TestDumps:
    def test_pretty_by_default(self) -> None:
        text = dumps(extract_stats({"a": 1}))
        assert "\n" in text
        assert '  "kind": "object"' in text

    def test_compact(self) -> None:
        text = dumps(extract_stats(["x"]), indent=None)
        assert text == (
            '{"kind":"array","size":5,"count":1,"max_size":3,"min_size":3,'
            '"attributes":[]}'
        )

    def test_round_trips_through_json(self) -> None:
        stat = extract_stats([{"name": "ünï"}, {"name": "b"}])
        assert json.loads(dumps(stat)) == to_dict(stat)

    def test_non_ascii_names_unescaped(self) -> None:
        assert "ключ" in dumps(extract_stats({"ключ": 1}))
