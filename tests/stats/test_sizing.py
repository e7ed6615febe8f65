"""Tests for scalar sizing rules and punctuation constants."""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_stat_extractor.stats.nodes import ScalarStat
from json_stat_extractor.stats.sizing import (
    int_size,
    name_size,
    scalar_size,
    scalar_stat,
    text_size,
)


class TestScalarSize:
    def test_null(self) -> None:
        assert scalar_size(None) == 4

    def test_true(self) -> None:
        assert scalar_size(True) == 4

    def test_false(self) -> None:
        assert scalar_size(False) == 5

    def test_bool_not_measured_as_int(self) -> None:
        # bool subclasses int: True would otherwise render as "1"
        assert scalar_size(True) != len(str(int(True)))

    def test_ascii_string(self) -> None:
        assert scalar_size("test") == 6

    def test_empty_string(self) -> None:
        assert scalar_size("") == 2

    def test_multibyte_string_counts_utf8_bytes(self) -> None:
        assert scalar_size("日本") == 6 + 2

    def test_escapes_not_expanded(self) -> None:
        # serialized as "a\"b" (6 bytes) but only raw content is counted
        assert scalar_size('a"b') == 5

    def test_lone_surrogate_is_sized(self) -> None:
        assert scalar_size("\ud800") == 3 + 2

    @pytest.mark.parametrize("value", [0, 7, -15, 123456789, 0.5, 2.0, -1e-07, 1e100])
    def test_number_matches_json_rendering(self, value: Any) -> None:
        assert scalar_size(value) == len(json.dumps(value))

    @pytest.mark.parametrize(
        "value", [0, 9, 10, 99, 100, -1, -10, 2**63, -(2**64) + 1, 10**18 - 1]
    )
    def test_int_size_matches_str(self, value: int) -> None:
        assert int_size(value) == len(str(value))

    def test_int_beyond_str_conversion_limit(self) -> None:
        assert scalar_size(10**5000) == 5001
        assert scalar_size(-(10**5000) + 1) == 5001

    def test_integral_float_keeps_decimal_point(self) -> None:
        assert scalar_size(2.0) == 3

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON scalar type"):
            scalar_size(b"bytes")  # type: ignore[arg-type]


class TestScalarStat:
    @pytest.mark.parametrize("value", [None, True, False, 0, -3.25, "", "héllo"])
    def test_all_sizes_equal(self, value: Any) -> None:
        stat = scalar_stat(value)
        assert stat.size == stat.max_size == stat.min_size

    def test_returns_scalar_stat(self) -> None:
        assert scalar_stat("test") == ScalarStat(size=6, max_size=6, min_size=6)


class TestNameSize:
    def test_quotes_and_colon(self) -> None:
        assert name_size("test") == 2 + 4 + 1

    def test_empty_name(self) -> None:
        assert name_size("") == 3

    def test_text_size_is_utf8(self) -> None:
        assert text_size("é") == 2
