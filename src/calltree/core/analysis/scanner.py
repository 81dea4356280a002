from __future__ import annotations

"""
Trace Scanner.

Consumes profiler output line by line, groups contiguous frame lines into
traces and feeds frame adjacency into the FrameRegistry. The last frame of
every separator-terminated trace is registered as a root.
"""

import logging
from typing import Iterable, Optional, Tuple

from calltree.core.services.registry import FrameRegistry
from calltree.domain.config import DEFAULT_FRAME_MARKER
from calltree.domain.graph_models import FrameNode
from calltree.domain.pipeline_models import ScanStats

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_frame_line(line: str, marker: str = DEFAULT_FRAME_MARKER) -> bool:
    """Return True if the line is a non-empty frame line starting with the marker."""
    return bool(line) and line.startswith(marker)


def scan_lines(
        lines: Iterable[str],
        registry: Optional[FrameRegistry] = None,
        *,
        marker: str = DEFAULT_FRAME_MARKER,
        flush_trailing_trace: bool = False,
) -> Tuple[FrameRegistry, ScanStats]:
    """
    Build the frame graph from a stream of text lines.

    Each frame line records the preceding frame of the same trace as an
    association. A separator (any non-frame line) closes the current trace
    and registers its last frame as a root. A trace still open at the end
    of the input is only registered when `flush_trailing_trace` is set.

    Args:
        lines: Input lines, with or without trailing line terminators.
        registry: Registry to populate. A new one is created if omitted.
        marker: Prefix identifying frame lines.
        flush_trailing_trace: Register an unterminated final trace as a root.

    Returns:
        Tuple[FrameRegistry, ScanStats]: The populated registry and counters.
    """
    if registry is None:
        registry = FrameRegistry()

    previous: Optional[FrameNode] = None
    total_lines = 0
    frame_lines = 0
    traces = 0

    for raw in lines:
        total_lines += 1
        # One "\n", then at most one "\r"; any other "\r" belongs to the frame
        line = raw[:-1] if raw.endswith("\n") else raw
        if line.endswith("\r"):
            line = line[:-1]

        if is_frame_line(line, marker):
            frame_lines += 1
            node = registry.observe(line)
            if previous is not None:
                registry.link(node, previous)
            previous = node
            continue

        # Separator: close the running trace, if any
        if previous is not None:
            registry.add_root(previous)
            traces += 1
        previous = None

    unterminated = previous is not None
    if unterminated:
        if flush_trailing_trace:
            registry.add_root(previous)
            traces += 1
        else:
            logger.debug(
                f"Input ended inside a trace; '{previous.name}' not registered as root."
            )

    stats = ScanStats(
        lines=total_lines,
        frame_lines=frame_lines,
        traces=traces,
        roots=len(registry.roots),
        unterminated_trace=unterminated,
    )
    logger.debug(
        f"Scanned {stats.lines} lines: {stats.frame_lines} frames, "
        f"{stats.traces} traces, {len(registry)} distinct frames."
    )
    return registry, stats


def scan_file(
        path: str,
        registry: Optional[FrameRegistry] = None,
        *,
        marker: str = DEFAULT_FRAME_MARKER,
        flush_trailing_trace: bool = False,
) -> Tuple[FrameRegistry, ScanStats]:
    """
    Stream a profiler output file through `scan_lines`.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    logger.info(f"Scanning profiler output: {path}")
    with open(path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
        return scan_lines(
            f,
            registry,
            marker=marker,
            flush_trailing_trace=flush_trailing_trace,
        )
