"""Line assembly transducer.

This module packs single elements into fixed-width lines. The final
partial line is padded with the fill element; an empty final buffer
produces no line.
"""

from __future__ import annotations

from channels.channel import Channel
from core.constants import DEFAULT_FILL, DEFAULT_LINE_WIDTH
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def assemble_lines(
    west: Channel[str],
    lineprinter: Channel[str],
    *,
    line_width: int = DEFAULT_LINE_WIDTH,
    fill: str = DEFAULT_FILL,
) -> None:
    """Pack west elements into lines of line_width elements.

    Args:
        west: Input channel of single elements.
        lineprinter: Output channel of completed lines, owned by this stage.
        line_width: Number of elements per line.
        fill: Element used to pad the final partial line.
    """
    line_image = [fill] * line_width
    position = 0
    received_count = 0
    line_count = 0
    for element in west:
        received_count += 1
        line_image[position] = element
        position += 1
        if position == line_width:
            lineprinter.send("".join(line_image))
            line_count += 1
            position = 0
    if position > 0:
        for index in range(position, line_width):
            line_image[index] = fill
        lineprinter.send("".join(line_image))
        line_count += 1
    lineprinter.close()
    _LOGGER.debug("stage_completed", stage="assemble", received=received_count, emitted=line_count)
