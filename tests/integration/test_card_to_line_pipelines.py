"""Integration tests for full card-to-line pipelines."""

from __future__ import annotations

import threading

from channels.channel import Channel
from channels.endpoints import receive_all, send_all
from pipelines.composition import conway, reformat


def _deck(card_count: int) -> list[str]:
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    return [
        "".join(alphabet[(card_index + column) % len(alphabet)] for column in range(80))
        for card_index in range(card_count)
    ]


def _print_deck(pipeline, cards: list[str]) -> list[str]:
    cardfile: Channel[str] = Channel("cardfile")
    lineprinter: Channel[str] = Channel("lineprinter")
    lines: list[str] = []
    supplier = threading.Thread(target=lambda: send_all(cardfile, cards), daemon=True)
    consumer = threading.Thread(target=lambda: lines.extend(receive_all(lineprinter)), daemon=True)
    supplier.start()
    consumer.start()
    pipeline(cardfile, lineprinter)
    supplier.join(10.0)
    consumer.join(10.0)
    assert lineprinter.closed
    return lines


def test_reformat_round_trip_rechunks_cards_into_full_lines(run_bounded) -> None:
    """125 cards of 81 elements each should fill exactly 81 lines with no padding."""
    cards = _deck(125)
    expected_stream = "".join(card + " " for card in cards)

    lines = run_bounded(lambda: _print_deck(reformat, cards))

    assert len(lines) == 81
    assert "".join(lines) == expected_stream
    assert lines == [expected_stream[start : start + 125] for start in range(0, 10125, 125)]


def test_conway_deck_squashes_pairs_and_pads_last_line(run_bounded) -> None:
    """Conway over several cards should squash pairs and pad only the final line."""
    cards = ["**" * 40, "a***b".ljust(80, "."), "end*"]
    expected_stream = "↑" * 40 + " " + "a↑*b".ljust(79, ".") + " " + "end* "

    lines = run_bounded(lambda: _print_deck(conway, cards))

    assert "".join(lines).rstrip(" ") == expected_stream.rstrip(" ")
    assert len(lines) == 2
    assert lines[-1].endswith(" " * 10)
    assert all(len(line) == 125 for line in lines)
