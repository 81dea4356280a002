from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the pipeline.
"""

import argparse
from typing import Any, Dict

from calltree.domain.config import DEFAULT_OUTPUT_FILE, OUTPUT_FORMATS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the calltree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="calltree",
        description="Build a call-frequency tree from profiler stack traces.",
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--in",
        dest="input_path",
        default=None,
        help="Input file: profiler output made of '#'-prefixed frame lines.",
    )
    p.add_argument(
        "-o", "--out",
        dest="output_path",
        default=None,
        help=f"Output document (default: {DEFAULT_OUTPUT_FILE}).",
    )

    # --- Output Strategies ---
    p.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Document format (default: html).",
    )

    # --- Scanning ---
    p.add_argument(
        "--marker",
        dest="frame_marker",
        default=None,
        help="Character that starts a frame line (default: '#').",
    )
    p.add_argument(
        "--flush-trailing",
        action="store_true",
        help="Treat a final trace without a terminating separator as a root.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset options map to None so the merge keeps the defaults.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["output_format"] = args.output_format
    overrides["frame_marker"] = args.frame_marker

    if args.flush_trailing:
        overrides["flush_trailing_trace"] = True

    return overrides
