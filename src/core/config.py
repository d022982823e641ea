"""Pipeline configuration model for cspipe.

This module owns all environment variable parsing and validation.
Transducers and pipelines consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, cast

from core.constants import (
    DEFAULT_FILL,
    DEFAULT_LINE_WIDTH,
    DEFAULT_MARKER,
    DEFAULT_RECORD_WIDTH,
    DEFAULT_REPLACEMENT,
    DEFAULT_SEPARATOR,
    DEFAULT_TRAILING_MARKER_POLICY,
    SUPPORTED_TRAILING_MARKER_POLICIES,
)
from core.errors import CspConfigError

TrailingMarkerPolicy = Literal["lenient", "strict"]


@dataclass(frozen=True)
class PipelineConfig:
    """Validated pipeline configuration.

    Attributes:
        record_width: Maximum number of elements taken from one card.
        line_width: Number of elements in one assembled line.
        marker: Element whose adjacent pairs are squashed.
        replacement: Element emitted for one squashed marker pair.
        separator: Element emitted after every disassembled card.
        fill: Element used to pad the final partial line.
        trailing_marker_policy: What squash does with an unpaired final marker.
    """

    record_width: int = DEFAULT_RECORD_WIDTH
    line_width: int = DEFAULT_LINE_WIDTH
    marker: str = DEFAULT_MARKER
    replacement: str = DEFAULT_REPLACEMENT
    separator: str = DEFAULT_SEPARATOR
    fill: str = DEFAULT_FILL
    trailing_marker_policy: TrailingMarkerPolicy = cast(
        TrailingMarkerPolicy, DEFAULT_TRAILING_MARKER_POLICY
    )

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CspConfigError: If environment values are invalid.
        """
        config = cls(
            record_width=_parse_width("CSP_RECORD_WIDTH", DEFAULT_RECORD_WIDTH),
            line_width=_parse_width("CSP_LINE_WIDTH", DEFAULT_LINE_WIDTH),
            marker=os.getenv("CSP_MARKER", DEFAULT_MARKER),
            replacement=os.getenv("CSP_REPLACEMENT", DEFAULT_REPLACEMENT),
            separator=os.getenv("CSP_SEPARATOR", DEFAULT_SEPARATOR),
            fill=os.getenv("CSP_FILL", DEFAULT_FILL),
            trailing_marker_policy=cast(
                TrailingMarkerPolicy,
                os.getenv("CSP_TRAILING_MARKER_POLICY", DEFAULT_TRAILING_MARKER_POLICY),
            ),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check widths, symbols and policy for consistency.

        Raises:
            CspConfigError: If any field is out of range.
        """
        for field_name in ("record_width", "line_width"):
            if getattr(self, field_name) <= 0:
                raise CspConfigError(
                    f"Invalid {field_name}: expected a positive integer, "
                    f"got {getattr(self, field_name)}."
                )
        for field_name in ("marker", "replacement", "separator", "fill"):
            _require_single_character(field_name, getattr(self, field_name))
        if self.marker == self.replacement:
            raise CspConfigError(
                f"Marker and replacement must differ, both are '{self.marker}'."
            )
        if self.trailing_marker_policy not in SUPPORTED_TRAILING_MARKER_POLICIES:
            supported = ", ".join(SUPPORTED_TRAILING_MARKER_POLICIES)
            raise CspConfigError(
                f"Unsupported trailing marker policy '{self.trailing_marker_policy}'. "
                f"Supported policies: {supported}."
            )


def _parse_width(env_name: str, default: int) -> int:
    """Parse a width environment value.

    Args:
        env_name: Environment variable name.
        default: Value used when the variable is unset.

    Returns:
        Parsed integer width.

    Raises:
        CspConfigError: If value cannot be parsed into int.
    """
    raw_value = os.getenv(env_name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError as error:
        raise CspConfigError(
            f"Invalid {env_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {env_name} to a numeric value."
        ) from error


def _require_single_character(field_name: str, value: str) -> None:
    if len(value) != 1:
        raise CspConfigError(
            f"Invalid {field_name}: expected exactly one character, got '{value}'."
        )
