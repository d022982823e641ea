"""cspipe exception hierarchy.

This module defines traceable errors for channel-protocol violations
and stage failures. Boundary policies of the transducers never raise.
"""

from __future__ import annotations


class CspError(Exception):
    """Base exception for all cspipe failures."""


class CspConfigError(CspError):
    """Raised for invalid pipeline configuration."""


class ChannelError(CspError):
    """Base exception for channel-protocol failures."""


class ChannelProtocolError(ChannelError):
    """Raised when a channel is used against its ownership contract."""


class ChannelAbortedError(ChannelError):
    """Raised for any operation on a channel that was aborted."""


class PipelineError(CspError):
    """Raised in the caller when a stage of a composed pipeline fails."""

    def __init__(self, pipeline_name: str, stage_name: str, message: str) -> None:
        super().__init__(message)
        self.pipeline_name = pipeline_name
        self.stage_name = stage_name
