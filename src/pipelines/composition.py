"""Pipeline composition for the card-to-line reformatters.

This module wires disassembly, a middle transducer and assembly through
two fresh channels. Disassembly and the middle stage run on their own
threads while assembly runs in the caller until the output closes.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Iterable, Sequence

from channels.channel import Channel
from channels.endpoints import receive_all, send_all
from core.config import PipelineConfig
from core.logging_config import get_logger
from pipelines.stage_group import StageGroup
from transducers.card_disassembly import disassemble_cards
from transducers.element_copy import copy_elements
from transducers.line_assembly import assemble_lines
from transducers.pair_squash import squash_pairs

_LOGGER = get_logger(__name__)

Transducer = Callable[[Channel[Any], Channel[Any]], None]


def compose_pipeline(
    pipeline_name: str,
    cardfile: Channel[Sequence[str]],
    lineprinter: Channel[str],
    middle_name: str,
    middle: Transducer,
    config: PipelineConfig,
) -> None:
    """Run disassemble, middle and assemble stages to completion.

    Args:
        pipeline_name: Label used in logs, thread names and errors.
        cardfile: Input channel of cards, closed by its supplier.
        lineprinter: Output channel of lines, closed by the assemble stage.
        middle_name: Label of the middle stage.
        middle: Transducer reading disassembled elements.
        config: Widths and symbols for the outer stages.

    Raises:
        CspConfigError: If config is invalid.
        PipelineError: If any stage fails.
    """
    config.validate()
    west: Channel[str] = Channel(f"{pipeline_name}.west")
    east: Channel[str] = Channel(f"{pipeline_name}.east")
    group = StageGroup(pipeline_name, (cardfile, west, east, lineprinter))
    _LOGGER.info("pipeline_started", pipeline=pipeline_name, middle_stage=middle_name)
    group.spawn(
        "disassemble",
        partial(
            disassemble_cards,
            cardfile,
            west,
            record_width=config.record_width,
            separator=config.separator,
        ),
    )
    group.spawn(middle_name, partial(middle, west, east))
    group.run_final(
        "assemble",
        partial(
            assemble_lines,
            east,
            lineprinter,
            line_width=config.line_width,
            fill=config.fill,
        ),
    )
    _LOGGER.info("pipeline_completed", pipeline=pipeline_name)


def reformat(
    cardfile: Channel[Sequence[str]],
    lineprinter: Channel[str],
    config: PipelineConfig | None = None,
) -> None:
    """Reprint cards as fixed-width lines with a space after every card.

    Args:
        cardfile: Input channel of cards.
        lineprinter: Output channel of lines.
        config: Optional config, defaults to the standard card and line widths.
    """
    compose_pipeline(
        "reformat",
        cardfile,
        lineprinter,
        "copy",
        copy_elements,
        config or PipelineConfig(),
    )


def conway(
    cardfile: Channel[Sequence[str]],
    lineprinter: Channel[str],
    config: PipelineConfig | None = None,
) -> None:
    """Reformat cards while squashing every marker pair into the replacement.

    Args:
        cardfile: Input channel of cards.
        lineprinter: Output channel of lines.
        config: Optional config; its trailing policy applies to the squash stage.
    """
    resolved_config = config or PipelineConfig()
    squash = partial(
        squash_pairs,
        marker=resolved_config.marker,
        replacement=resolved_config.replacement,
        trailing_policy=resolved_config.trailing_marker_policy,
    )
    compose_pipeline("conway", cardfile, lineprinter, "squash", squash, resolved_config)


def run_transducer(
    transducer: Transducer,
    values: Iterable[Any],
    name: str = "transducer",
) -> list[Any]:
    """Run one transducer over a finite iterable and collect its output.

    Args:
        transducer: Callable taking (west, east) channels.
        values: Finite input sequence.
        name: Label used in logs and errors.

    Returns:
        Everything the transducer emitted, in order.

    Raises:
        PipelineError: If the transducer or the supplier fails.
    """
    west: Channel[Any] = Channel(f"{name}.west")
    east: Channel[Any] = Channel(f"{name}.east")
    collected: list[Any] = []
    group = StageGroup(name, (west, east))
    group.spawn("supply", partial(send_all, west, values))
    group.spawn(name, partial(transducer, west, east))
    group.run_final("collect", lambda: collected.extend(receive_all(east)))
    return collected
