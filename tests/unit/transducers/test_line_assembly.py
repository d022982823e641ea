"""Unit tests for line assembly."""

from __future__ import annotations

from functools import partial

from pipelines.composition import run_transducer
from transducers.line_assembly import assemble_lines


def _assemble(run_bounded, elements, transducer=assemble_lines) -> list[str]:
    return run_bounded(lambda: run_transducer(transducer, elements, name="assemble"))


def test_exactly_one_line_of_elements_is_emitted_without_padding(run_bounded) -> None:
    """125 elements should produce exactly one unpadded line."""
    elements = [chr(ord("a") + index % 26) for index in range(125)]

    lines = _assemble(run_bounded, elements)

    assert lines == ["".join(elements)]


def test_last_element_of_full_line_is_kept(run_bounded) -> None:
    """The element that fills a line should not be overwritten."""
    lines = _assemble(run_bounded, "x" * 124 + "y")

    assert len(lines) == 1
    assert lines[0][-1] == "y"


def test_partial_final_line_is_padded_with_fill(run_bounded) -> None:
    """130 elements should produce one full line and one padded line."""
    elements = "q" * 125 + "abcde"

    lines = _assemble(run_bounded, elements)

    assert lines == ["q" * 125, "abcde" + " " * 120]
    assert all(len(line) == 125 for line in lines)


def test_empty_input_emits_no_line(run_bounded) -> None:
    """Closing with an empty buffer should emit nothing."""
    assert _assemble(run_bounded, []) == []


def test_line_width_and_fill_are_injectable(run_bounded) -> None:
    """Line width and fill should be named parameters."""
    transducer = partial(assemble_lines, line_width=4, fill=".")

    lines = _assemble(run_bounded, "abcdefgh" + "ij", transducer)

    assert lines == ["abcd", "efgh", "ij.."]
