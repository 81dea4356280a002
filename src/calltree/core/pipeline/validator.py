from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the pipeline, ensuring that the configuration
dictionary conforms to the expected schema. Checks field types and
injects default values so that stages receive well-typed parameters.
"""

import logging
from typing import Any, Dict, List, Tuple

from calltree.domain.config import (
    DEFAULT_FRAME_MARKER,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    get_default_config,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (e.g., from the CLI) into strictly typed
    parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing
    schema = {
        "input_path": str,
        "output_path": str,
        "output_format": str,
        "html_title": str,
        "frame_marker": str,
        "flush_trailing_trace": bool,
    }
    for field, expected in schema.items():
        merged[field] = _checked(
            merged.get(field), expected, defaults[field], field, warnings, strict
        )

    # 3. Domain-Specific Normalization
    merged["output_format"] = _normalize_format(merged["output_format"], warnings, strict)
    merged["frame_marker"] = _normalize_marker(merged["frame_marker"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE CHECKS
# -----------------------------------------------------------------------------

def _checked(
        value: Any,
        expected: type,
        fallback: Any,
        field: str,
        warnings: List[str],
        strict: bool,
) -> Any:
    """Accept values of the expected type; strings are trimmed, blanks fall back."""
    if value is None:
        return fallback
    if type(value) is expected:
        if expected is str:
            value = value.strip()
            return value if value else fallback
        return value

    msg = f"Invalid field '{field}': expected {expected.__name__}, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_format(fmt: str, warnings: List[str], strict: bool) -> str:
    """Lower-case the output format and reject unknown targets."""
    f = fmt.lower()
    if f in OUTPUT_FORMATS:
        return f
    msg = f"Unknown output format '{fmt}': expected one of {', '.join(OUTPUT_FORMATS)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{DEFAULT_OUTPUT_FORMAT}'.")
    return DEFAULT_OUTPUT_FORMAT


def _normalize_marker(marker: str, warnings: List[str], strict: bool) -> str:
    """Frame markers are a single non-whitespace character."""
    if len(marker) == 1 and not marker.isspace():
        return marker
    msg = f"Invalid frame marker '{marker}': expected a single character."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{DEFAULT_FRAME_MARKER}'.")
    return DEFAULT_FRAME_MARKER
