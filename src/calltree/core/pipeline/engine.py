from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the whole conversion as one synchronous batch:
1. Validates configuration and resolves paths.
2. Scans the profiler output into the frame registry.
3. Orders children and roots by frequency.
4. Cuts cycles on every root path.
5. Renders the forest (HTML or JSON).
6. Writes the document atomically.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from calltree.core.analysis.json_renderer import render_json_document
from calltree.core.analysis.linearizer import active_nodes, linearize
from calltree.core.analysis.scanner import scan_file
from calltree.core.analysis.sorter import sort_by_frequency
from calltree.core.analysis.tree_renderer import render_html_document
from calltree.core.pipeline.validator import validate_config
from calltree.domain.config import DEFAULT_OUTPUT_FILE
from calltree.domain.graph_models import FrameNode
from calltree.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from calltree.infra.fs import normalize_path, write_text_atomic

logger = logging.getLogger(__name__)


def run_pipeline(config: Optional[Dict[str, Any]]) -> PipelineResult:
    """
    Execute the full profile-to-tree conversion.

    I/O problems are reported through the returned result; nothing is
    written unless the whole document was produced.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        PipelineResult: Object containing status, counters and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    if not cfg["input_path"]:
        msg = "No input file given."
        logger.error(msg)
        return create_error_result(msg, cfg)

    input_path = normalize_path(cfg["input_path"], "")
    output_path = normalize_path(cfg["output_path"], DEFAULT_OUTPUT_FILE)

    if not os.path.isfile(input_path):
        msg = f"Input file not found: {input_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, input_path, output_path)

    # -------------------------------------------------------------------------
    # 2) Scan
    # -------------------------------------------------------------------------
    try:
        registry, scan_stats = scan_file(
            input_path,
            marker=cfg["frame_marker"],
            flush_trailing_trace=cfg["flush_trailing_trace"],
        )
    except OSError as e:
        msg = f"Failed to read '{input_path}': {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, input_path, output_path)

    if scan_stats.unterminated_trace and not cfg["flush_trailing_trace"]:
        logger.warning("Input ends without a separator; the last trace is not listed as a root.")

    # -------------------------------------------------------------------------
    # 3) Sort & Linearize
    # -------------------------------------------------------------------------
    roots = sort_by_frequency(registry)
    lin_stats = linearize(roots)
    assert not active_nodes(registry), "Walk flags left raised after linearization"

    # -------------------------------------------------------------------------
    # 4) Render & Persist
    # -------------------------------------------------------------------------
    document = _render(roots, cfg)

    try:
        write_text_atomic(output_path, document)
    except OSError as e:
        msg = f"Failed to write '{output_path}': {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, input_path, output_path)

    logger.info(f"Call tree written to {output_path} ({len(roots)} roots).")

    summary = {
        "lines": scan_stats.lines,
        "frame_lines": scan_stats.frame_lines,
        "traces": scan_stats.traces,
        "edges": registry.edge_count(),
        "visits": lin_stats.visits,
        "unterminated_trace": scan_stats.unterminated_trace,
    }
    return create_success_result(
        cfg,
        input_path=input_path,
        output_path=output_path,
        node_count=len(registry),
        root_count=len(roots),
        backlink_count=lin_stats.backlinks,
        summary_extra=summary,
    )


def _render(roots: List[FrameNode], cfg: Dict[str, Any]) -> str:
    """Dispatch to the renderer selected by `output_format`."""
    if cfg["output_format"] == "json":
        return render_json_document(roots, marker=cfg["frame_marker"])
    return render_html_document(roots, marker=cfg["frame_marker"], title=cfg["html_title"])
