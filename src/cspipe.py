"""Public SDK surface for cspipe.

This module provides a stable import path for pipeline users.
It re-exports channels, transducers, pipelines and typed config.
"""

from __future__ import annotations

from channels.channel import CLOSED, Channel
from channels.endpoints import receive_all, send_all
from core.config import PipelineConfig, TrailingMarkerPolicy
from core.errors import (
    ChannelAbortedError,
    ChannelError,
    ChannelProtocolError,
    CspConfigError,
    CspError,
    PipelineError,
)
from pipelines.composition import compose_pipeline, conway, reformat, run_transducer
from pipelines.stage_group import StageGroup
from transducers.card_disassembly import disassemble_cards
from transducers.element_copy import copy_elements
from transducers.line_assembly import assemble_lines
from transducers.pair_squash import squash_pairs, squash_pairs_lenient, squash_pairs_strict

__all__ = [
    "CLOSED",
    "Channel",
    "ChannelAbortedError",
    "ChannelError",
    "ChannelProtocolError",
    "CspConfigError",
    "CspError",
    "PipelineConfig",
    "PipelineError",
    "StageGroup",
    "TrailingMarkerPolicy",
    "assemble_lines",
    "compose_pipeline",
    "conway",
    "copy_elements",
    "disassemble_cards",
    "receive_all",
    "reformat",
    "run_transducer",
    "send_all",
    "squash_pairs",
    "squash_pairs_lenient",
    "squash_pairs_strict",
]
