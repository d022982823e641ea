"""Card disassembly transducer.

This module flattens card records into single elements and appends
one separator after every card. Cards longer than the record width are
truncated; shorter cards are emitted as-is without padding.
"""

from __future__ import annotations

from typing import Sequence

from channels.channel import Channel
from core.constants import DEFAULT_RECORD_WIDTH, DEFAULT_SEPARATOR
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def disassemble_cards(
    cardfile: Channel[Sequence[str]],
    east: Channel[str],
    *,
    record_width: int = DEFAULT_RECORD_WIDTH,
    separator: str = DEFAULT_SEPARATOR,
) -> None:
    """Emit the elements of each card followed by one separator.

    Args:
        cardfile: Input channel of card records.
        east: Output channel owned by this stage.
        record_width: Maximum number of elements taken from one card.
        separator: Element emitted after every card.
    """
    card_count = 0
    emitted_count = 0
    for card in cardfile:
        card_image = list(card[:record_width])
        for element in card_image:
            east.send(element)
        east.send(separator)
        card_count += 1
        emitted_count += len(card_image) + 1
    east.close()
    _LOGGER.debug("stage_completed", stage="disassemble", received=card_count, emitted=emitted_count)
