"""Core constants used across cspipe modules.

This module centralizes the fixed widths and symbols of the card and
line formats. Keeping values here avoids magic literals in transducers.
"""

from __future__ import annotations

DEFAULT_RECORD_WIDTH = 80
DEFAULT_LINE_WIDTH = 125
DEFAULT_MARKER = "*"
DEFAULT_REPLACEMENT = "↑"
DEFAULT_SEPARATOR = " "
DEFAULT_FILL = " "
LENIENT_TRAILING_MARKER_POLICY = "lenient"
STRICT_TRAILING_MARKER_POLICY = "strict"
DEFAULT_TRAILING_MARKER_POLICY = LENIENT_TRAILING_MARKER_POLICY
SUPPORTED_TRAILING_MARKER_POLICIES = (
    LENIENT_TRAILING_MARKER_POLICY,
    STRICT_TRAILING_MARKER_POLICY,
)
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV_VAR = "CSP_LOG_LEVEL"
