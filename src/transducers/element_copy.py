"""Identity transducer.

This module relays elements from west to east unchanged. It is the
middle stage of the reformat pipeline.
"""

from __future__ import annotations

from typing import TypeVar

from channels.channel import Channel
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

T = TypeVar("T")


def copy_elements(west: Channel[T], east: Channel[T]) -> None:
    """Relay every west element to east in order, then close east.

    Args:
        west: Input channel.
        east: Output channel owned by this stage.
    """
    relayed_count = 0
    for value in west:
        east.send(value)
        relayed_count += 1
    east.close()
    _LOGGER.debug("stage_completed", stage="copy", received=relayed_count, emitted=relayed_count)
