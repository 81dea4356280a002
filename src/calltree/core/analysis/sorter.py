from __future__ import annotations

"""
Frequency Sorter.

Materializes each node's ordered children from its associations and
orders the root set, both by descending occurrence count.
"""

import logging
from typing import Iterable, List

from calltree.core.services.registry import FrameRegistry
from calltree.domain.graph_models import FrameNode

logger = logging.getLogger(__name__)


def order_by_count(nodes: Iterable[FrameNode]) -> List[FrameNode]:
    """
    Sort nodes by descending count.

    Ties keep their input order (stable sort), i.e. the order in which
    they were first recorded.
    """
    return sorted(nodes, key=lambda node: node.count, reverse=True)


def sort_by_frequency(registry: FrameRegistry) -> List[FrameNode]:
    """
    Rebuild every node's children and return the roots, all frequency-ordered.

    Args:
        registry: Fully scanned registry.

    Returns:
        List[FrameNode]: Root nodes, most frequent first.
    """
    for node in registry:
        node.children = order_by_count(node.associations.values())

    roots = order_by_count(registry.roots.values())
    logger.debug(f"Sorted {len(registry)} frames and {len(roots)} roots by frequency.")
    return roots
