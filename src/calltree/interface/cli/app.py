from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults
with command-line overrides, pipeline execution and result reporting.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from calltree.core.pipeline.engine import run_pipeline
from calltree.core.pipeline.validator import validate_config
from calltree.domain.config import get_default_config
from calltree.domain.pipeline_models import PipelineResult
from calltree.infra.fs import normalize_path
from calltree.infra.logging import LoggingConfig, configure_logging, get_logger
from calltree.interface.cli import args as cli_args

logger = get_logger(__name__)

_MERGE_KEYS = (
    "input_path", "output_path", "output_format",
    "frame_marker", "flush_trailing_trace",
)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 2 missing input, 1 other failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))
    logger.debug("CLI execution initiated.")

    # 3. Merge overrides over defaults and validate
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    input_path = clean_conf.get("input_path", "")
    if not input_path:
        parser.print_usage(sys.stderr)
        print("ERROR: an input file is required (-i/--in).", file=sys.stderr)
        return 2
    input_path = normalize_path(input_path, "")
    if not os.path.isfile(input_path):
        msg = f"Input file does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    _print_human_summary(result)
    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into the base configuration."""
    out = dict(base)
    for k in _MERGE_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """Report the outcome of a run on the terminal."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Call tree written to: {result.output_path}")
    print(f"Distinct frames: {result.node_count}")
    print(f"Root sections: {result.root_count}")
    if result.backlink_count:
        print(f"Cycles cut into back links: {result.backlink_count}")


if __name__ == "__main__":
    sys.exit(main())
