from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the statistics records produced by the analysis stages and the
result object passed from the pipeline engine to the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# STAGE STATISTICS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanStats:
    """
    Counters collected while scanning the input.

    Attributes:
        lines: Total lines read.
        frame_lines: Lines classified as frames.
        traces: Traces registered as terminated.
        roots: Distinct root frames after scanning.
        unterminated_trace: Whether the input ended inside a trace.
    """
    lines: int = 0
    frame_lines: int = 0
    traces: int = 0
    roots: int = 0
    unterminated_trace: bool = False


@dataclass
class LinearizeStats:
    """Counters collected by the cycle-breaking walk."""
    roots: int = 0
    visits: int = 0
    backlinks: int = 0

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Normalized profiler output path.
        output_path: Normalized document path.
        output_format: Rendering target (html/json).
        node_count: Distinct frames in the registry.
        root_count: Root sections rendered.
        backlink_count: Edges cut into back links.
        summary: Technical execution summary and statistics.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str
    output_format: str

    node_count: int = 0
    root_count: int = 0
    backlink_count: int = 0

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        input_path: str = "",
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        input_path: Resolved input path, if known.
        output_path: Resolved output path, if known.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        input_path=input_path or cfg.get("input_path", ""),
        output_path=output_path or cfg.get("output_path", ""),
        output_format=cfg.get("output_format", ""),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        output_path: str,
        node_count: int,
        root_count: int,
        backlink_count: int = 0,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """Create a successful pipeline result instance."""
    return PipelineResult(
        ok=True,
        error="",
        input_path=input_path,
        output_path=output_path,
        output_format=cfg.get("output_format", ""),
        node_count=node_count,
        root_count=root_count,
        backlink_count=backlink_count,
        summary=summary_extra or {},
    )
