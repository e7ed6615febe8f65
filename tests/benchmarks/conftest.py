"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: a 100-record flat array, a 1,000-record array of nested
objects, and a 10,000-record array of mixed elements.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_records(num_records: int) -> list[dict[str, Any]]:
    """Generate an array of flat records with deterministic values."""
    return [
        {"id": i, "name": f"name_{i}", "active": i % 2 == 0, "score": i / 4}
        for i in range(num_records)
    ]


def _make_nested_records(num_records: int) -> list[dict[str, Any]]:
    """Generate records with a nested object and a short tag array each."""
    return [
        {
            "id": i,
            "owner": {"login": f"user_{i % 37}", "site_admin": i % 11 == 0},
            "tags": [f"t{j}" for j in range(i % 5)],
            "description": None if i % 3 else "x" * (i % 50),
        }
        for i in range(num_records)
    ]


def _make_mixed_elements(num_elements: int) -> list[Any]:
    """Generate an array cycling through every JSON value kind."""
    kinds: list[Any] = [
        None,
        True,
        12345,
        "text",
        [1, 2, 3],
        {"a": 1, "b": [None]},
    ]
    return [kinds[i % len(kinds)] for i in range(num_elements)]


@pytest.fixture
def doc_100_flat() -> list[dict[str, Any]]:
    """100 flat records with four attributes each."""
    return generate_flat_records(100)


@pytest.fixture
def doc_1000_nested() -> list[dict[str, Any]]:
    """1,000 records with nested objects and arrays."""
    return _make_nested_records(1000)


@pytest.fixture
def doc_10000_mixed() -> list[Any]:
    """10,000 elements of mixed kinds."""
    return _make_mixed_elements(10000)
