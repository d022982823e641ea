"""Marker-pair substitution transducer.

This module collapses each adjacent pair of marker elements into one
replacement element. A lone marker followed by another element passes
through unchanged. The trailing policy decides what happens to a marker
left unpaired when the input closes.
"""

from __future__ import annotations

from functools import partial

from channels.channel import Channel
from core.config import TrailingMarkerPolicy
from core.constants import (
    DEFAULT_MARKER,
    DEFAULT_REPLACEMENT,
    LENIENT_TRAILING_MARKER_POLICY,
    STRICT_TRAILING_MARKER_POLICY,
    SUPPORTED_TRAILING_MARKER_POLICIES,
)
from core.errors import CspConfigError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def squash_pairs(
    west: Channel[str],
    east: Channel[str],
    *,
    marker: str = DEFAULT_MARKER,
    replacement: str = DEFAULT_REPLACEMENT,
    trailing_policy: TrailingMarkerPolicy = "lenient",
) -> None:
    """Replace every adjacent marker pair with the replacement element.

    Args:
        west: Input channel.
        east: Output channel owned by this stage.
        marker: Element whose adjacent pairs are squashed.
        replacement: Element emitted for each pair.
        trailing_policy: "lenient" emits an unpaired final marker,
            "strict" drops it.

    Raises:
        CspConfigError: If trailing_policy is not supported.
    """
    if trailing_policy not in SUPPORTED_TRAILING_MARKER_POLICIES:
        raise CspConfigError(f"Unsupported trailing marker policy '{trailing_policy}'.")
    received_count = 0
    emitted_count = 0
    pending_marker = False
    for value in west:
        received_count += 1
        if not pending_marker:
            if value == marker:
                pending_marker = True
                continue
            east.send(value)
            emitted_count += 1
            continue
        pending_marker = False
        if value == marker:
            east.send(replacement)
            emitted_count += 1
        else:
            east.send(marker)
            east.send(value)
            emitted_count += 2
    if pending_marker and trailing_policy == LENIENT_TRAILING_MARKER_POLICY:
        east.send(marker)
        emitted_count += 1
    east.close()
    _LOGGER.debug(
        "stage_completed",
        stage="squash",
        received=received_count,
        emitted=emitted_count,
        dangling_marker=pending_marker,
        trailing_policy=trailing_policy,
    )


squash_pairs_strict = partial(squash_pairs, trailing_policy=STRICT_TRAILING_MARKER_POLICY)
squash_pairs_lenient = partial(squash_pairs, trailing_policy=LENIENT_TRAILING_MARKER_POLICY)
