"""Unit tests for the identity transducer."""

from __future__ import annotations

from pipelines.composition import run_transducer
from transducers.element_copy import copy_elements


def test_copy_elements_is_order_preserving_identity(run_bounded) -> None:
    """Copy should relay every element unchanged and in order."""
    values = list("hello, **world**")

    copied = run_bounded(lambda: run_transducer(copy_elements, values, name="copy"))

    assert copied == values


def test_copy_elements_closes_output_for_empty_input(run_bounded) -> None:
    """Copy of an empty stream should close output without emitting."""
    copied = run_bounded(lambda: run_transducer(copy_elements, [], name="copy"))

    assert copied == []
