from __future__ import annotations

"""
Call Graph Data Models.

Provides the node and edge types shared by the scanning, sorting,
linearization and rendering stages. A frame node is a single shared
instance per frame identifier; edges between nodes are either live
references or back-link markers produced when a cycle is cut.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class FrameNode:
    """
    Represents one distinct call frame observed in the profiler output.

    Nodes compare by identity: the registry guarantees a single instance
    per name, and the graph may contain cycles.

    Attributes:
        name: Raw frame identifier (the full frame line, marker included).
        count: Number of frame lines matching this name across the input.
        associations: Adjacent frames discovered while scanning, keyed by
            name in first-observation order.
        children: Ordered edges materialized by the frequency sorter.
        active: True only while the node is on the current walk path.
    """
    name: str
    count: int = 1
    associations: Dict[str, "FrameNode"] = field(default_factory=dict, repr=False)
    children: List["Edge"] = field(default_factory=list, repr=False)
    active: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class BackLink:
    """
    Terminal marker that replaces an edge closing a cycle.

    Attributes:
        name: Raw identifier of the frame the cut edge pointed to.
    """
    name: str

    @property
    def is_leaf(self) -> bool:
        return True


Edge = Union[FrameNode, BackLink]
