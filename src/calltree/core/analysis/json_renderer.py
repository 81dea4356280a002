from __future__ import annotations

"""
JSON Tree Renderer.

Serializes the linearized call forest as a JSON array of nested frame
objects. Back links are emitted as plain strings so the structure stays
a tree.

The document is laid out exactly like `json.dumps(..., indent=4)`, but it
is written from an explicit stack: call paths can be far deeper than the
nesting the json module encodes before hitting the recursion limit.
"""

import json
from typing import Iterable, List

from calltree.core.analysis.tree_renderer import format_backlink, format_frame_name
from calltree.domain.config import DEFAULT_FRAME_MARKER
from calltree.domain.graph_models import BackLink, FrameNode

_INDENT = "    "


def render_json_document(
        roots: Iterable[FrameNode],
        *,
        marker: str = DEFAULT_FRAME_MARKER,
) -> str:
    """
    Render the forest as an indented JSON array, one entry per root.

    Frames become `{"count", "name", "called"}` objects, with `called`
    omitted for leaves. Back links become `"Backlink: <name>"` strings.
    """
    forest = list(roots)
    if not forest:
        return "[]\n"

    parts: List[str] = ["["]
    # Open arrays as [items, next_index, nesting level, text after "]"]
    stack: List[list] = [[forest, 0, 0, ""]]

    while stack:
        frame = stack[-1]
        items, idx, level, closer = frame

        if idx >= len(items):
            parts.append("\n" + _INDENT * level + "]" + closer)
            stack.pop()
            continue

        frame[1] = idx + 1
        parts.append(("," if idx else "") + "\n" + _INDENT * (level + 1))
        edge = items[idx]

        if isinstance(edge, BackLink):
            parts.append(_dump(format_backlink(edge)))
            continue

        node_level = level + 1
        pad = _INDENT * (node_level + 1)
        parts.append(
            "{\n"
            f"{pad}\"count\": {edge.count},\n"
            f"{pad}\"name\": {_dump(format_frame_name(edge.name, marker))}"
        )
        if edge.is_leaf:
            parts.append("\n" + _INDENT * node_level + "}")
            continue

        parts.append(f",\n{pad}\"called\": [")
        stack.append([edge.children, 0, node_level + 1, "\n" + _INDENT * node_level + "}"])

    parts.append("\n")
    return "".join(parts)


def _dump(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)
