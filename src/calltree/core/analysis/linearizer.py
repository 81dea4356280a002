from __future__ import annotations

"""
Cycle-Safe Linearizer.

Walks the frame graph depth-first from every root and cuts each edge that
re-enters a frame already on the current path, replacing it in place with
a BackLink marker. Afterwards every path from a root is acyclic and the
forest can be rendered without revisiting a frame on any path.

Shared frames reached through different non-cyclic paths are walked again
each time. On dense graphs with many shared descendants the number of
visits grows exponentially; realistic call graphs have bounded fan-out.
"""

import logging
from typing import Iterable, List

from calltree.domain.graph_models import BackLink, FrameNode
from calltree.domain.pipeline_models import LinearizeStats

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def linearize(roots: Iterable[FrameNode]) -> LinearizeStats:
    """
    Break every cycle reachable from the given roots.

    Each root gets an independent walk. The `active` flag of every node is
    False again once this returns, including when a walk raises.

    Args:
        roots: Root nodes in render order (already frequency-sorted).

    Returns:
        LinearizeStats: Visit and back-link counters.
    """
    stats = LinearizeStats()
    for root in roots:
        stats.roots += 1
        _walk(root, stats)

    logger.debug(
        f"Linearized {stats.roots} roots: {stats.visits} visits, "
        f"{stats.backlinks} back links."
    )
    return stats


def active_nodes(nodes: Iterable[FrameNode]) -> List[FrameNode]:
    """Return the nodes whose walk flag is still raised."""
    return [node for node in nodes if node.active]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk(root: FrameNode, stats: LinearizeStats) -> None:
    """
    Iterative depth-first walk from one root.

    The stack holds `[node, next_child_index]` for every node on the
    current path; a node is active exactly while it is on the stack.
    """
    root.active = True
    stats.visits += 1
    stack: List[List] = [[root, 0]]
    try:
        while stack:
            frame = stack[-1]
            node, idx = frame
            if idx >= len(node.children):
                node.active = False
                stack.pop()
                continue

            frame[1] = idx + 1
            edge = node.children[idx]
            if not isinstance(edge, FrameNode):
                continue
            if edge.active:
                node.children[idx] = BackLink(edge.name)
                stats.backlinks += 1
            else:
                edge.active = True
                stats.visits += 1
                stack.append([edge, 0])
    finally:
        # Aborted walk: release the rest of the path
        for node, _ in stack:
            node.active = False
