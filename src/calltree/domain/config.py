from __future__ import annotations

"""
Configuration Domain Defaults.

Defines the session configuration that drives a pipeline run. The
configuration is a plain dictionary so CLI overrides can be merged
shallowly before validation.
"""

from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_FRAME_MARKER = "#"
DEFAULT_OUTPUT_FILE = "out.html"
DEFAULT_OUTPUT_FORMAT = "html"
DEFAULT_HTML_TITLE = "Call Frequency Tree"

OUTPUT_FORMATS: List[str] = ["html", "json"]


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "output_path": DEFAULT_OUTPUT_FILE,

        # Output Format
        "output_format": DEFAULT_OUTPUT_FORMAT,
        "html_title": DEFAULT_HTML_TITLE,

        # Scanning
        "frame_marker": DEFAULT_FRAME_MARKER,
        "flush_trailing_trace": False,
    }
