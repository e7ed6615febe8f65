"""pytest plugin for json-stat-extractor.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_stat_extractor import ExtractorConfig, extract_stats

_LARGEST_SHOWN = 5


@pytest.fixture(scope="session")
def assert_json_size_within() -> Any:
    """Fixture that returns a callable JSON size-budget asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to extract_stats() which creates a fresh StatExtractor per call).

    Usage in tests::

        def test_payload_budget(assert_json_size_within):
            assert_json_size_within(build_payload(), max_size=4096)

    Returns:
        A callable ``_assert(value, max_size, config=None) -> None`` that raises
        ``AssertionError`` when the serialized size of ``value`` exceeds
        ``max_size`` bytes.
    """

    def _assert(
        value: Any,
        max_size: int,
        config: ExtractorConfig | None = None,
    ) -> None:
        """Assert that a JSON value serializes to at most ``max_size`` bytes.

        Raises:
            AssertionError: When the size exceeds the budget, with a message
                including the size, the budget, and the largest attributes.
        """
        stat = extract_stats(value, config=config)
        if stat.size > max_size:
            largest = sorted(
                getattr(stat, "attributes", ()), key=lambda a: a.size, reverse=True
            )[:_LARGEST_SHOWN]
            shown = ", ".join(f"{a.name}={a.size}" for a in largest)
            raise AssertionError(
                f"JSON document over budget: size={stat.size} > max_size={max_size}\n"
                f"  kind: {stat.kind}\n"
                f"  largest attributes: {shown or '-'}"
            )

    return _assert
