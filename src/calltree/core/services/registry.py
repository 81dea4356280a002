from __future__ import annotations

"""
Frame Registry Service.

Acts as the single authority for frame nodes during a run. Deduplicates
repeated observations of the same frame, accumulates occurrence counts,
records adjacency between frames and tracks which frames terminate a
trace (the roots of the rendered forest).
"""

import logging
from typing import Dict, Iterator, List, Optional

from calltree.domain.graph_models import FrameNode

logger = logging.getLogger(__name__)


class FrameRegistry:
    """
    Name-keyed store of FrameNode instances.

    Holds exactly one node per distinct frame identifier for its whole
    lifetime. Every other component references nodes obtained from here
    and never copies node state.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, FrameNode] = {}
        self._roots: Dict[str, FrameNode] = {}

    # -------------------------------------------------------------------------
    # MUTATION API (SCANNING PHASE)
    # -------------------------------------------------------------------------

    def observe(self, name: str) -> FrameNode:
        """
        Register one occurrence of a frame.

        Args:
            name: Frame identifier.

        Returns:
            FrameNode: The existing node with its count incremented, or a
            new node with a count of one.
        """
        node = self._nodes.get(name)
        if node is None:
            node = FrameNode(name=name)
            self._nodes[name] = node
        else:
            node.count += 1
        return node

    def link(self, source: FrameNode, target: FrameNode) -> None:
        """
        Record `target` as associated with `source`.

        Idempotent: the first association recorded under a name is kept.
        """
        assert source.name in self._nodes and target.name in self._nodes, (
            f"Unregistered frame in link: {source.name!r} -> {target.name!r}"
        )
        if target.name not in source.associations:
            source.associations[target.name] = target

    def add_root(self, node: FrameNode) -> None:
        """Designate a node as a top-level frame. Re-adding keeps its position."""
        if node.name not in self._roots:
            self._roots[node.name] = node

    # -------------------------------------------------------------------------
    # READ API
    # -------------------------------------------------------------------------

    def get(self, name: str) -> Optional[FrameNode]:
        return self._nodes.get(name)

    @property
    def nodes(self) -> List[FrameNode]:
        """All nodes in first-observation order."""
        return list(self._nodes.values())

    @property
    def roots(self) -> Dict[str, FrameNode]:
        """Root nodes keyed by name, in first-registration order."""
        return dict(self._roots)

    def counts(self) -> Dict[str, int]:
        return {name: node.count for name, node in self._nodes.items()}

    def edge_count(self) -> int:
        return sum(len(node.associations) for node in self._nodes.values())

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[FrameNode]:
        return iter(list(self._nodes.values()))
