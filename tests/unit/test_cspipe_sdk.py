"""Unit tests for the public cspipe SDK surface."""

from __future__ import annotations

import cspipe


def test_sdk_exports_pipeline_entry_points() -> None:
    """The SDK module should expose every name listed in __all__."""
    missing = [name for name in cspipe.__all__ if not hasattr(cspipe, name)]

    assert missing == []


def test_sdk_run_transducer_squashes_with_strict_policy(run_bounded) -> None:
    """SDK users should reach the strict squash variant without internal imports."""
    squashed = run_bounded(lambda: cspipe.run_transducer(cspipe.squash_pairs_strict, "x***"))

    assert "".join(squashed) == "x↑"
