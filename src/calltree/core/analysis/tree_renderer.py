from __future__ import annotations

"""
Tree Renderer.

Converts the linearized call forest into a self-contained HTML document
made of nested collapsible sections. Nodes with children become
<details> blocks; leaves and back links render as plain text.
"""

import html
from typing import Iterable, List

from calltree.domain.config import DEFAULT_FRAME_MARKER, DEFAULT_HTML_TITLE
from calltree.domain.graph_models import BackLink, Edge, FrameNode

BACKLINK_PREFIX = "Backlink: "

# -----------------------------------------------------------------------------
# TITLE FORMATTING
# -----------------------------------------------------------------------------

def format_frame_name(name: str, marker: str = DEFAULT_FRAME_MARKER) -> str:
    """
    Derive the display name of a frame identifier.

    Drops the leading marker and collapses each tab-space separator
    into a single space.
    """
    if name.startswith(marker):
        name = name[len(marker):]
    return " ".join(name.split("\t "))


def format_title(node: FrameNode, marker: str = DEFAULT_FRAME_MARKER) -> str:
    """Title of a frame section: `calls: <count>, <display name>`."""
    return f"calls: {node.count}, {format_frame_name(node.name, marker)}"


def format_backlink(link: BackLink) -> str:
    """Inline text of a cut cycle: the prefix and the stored frame name."""
    return f"{BACKLINK_PREFIX}{link.name}"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_html_document(
        roots: Iterable[FrameNode],
        *,
        marker: str = DEFAULT_FRAME_MARKER,
        title: str = DEFAULT_HTML_TITLE,
) -> str:
    """
    Render the forest as a complete HTML document.

    Args:
        roots: Linearized root nodes, in display order.
        marker: Frame marker stripped from display names.
        title: Document title.

    Returns:
        str: The HTML document.
    """
    parts: List[str] = [
        "<!DOCTYPE html>\n",
        "<html><head><meta charset=\"utf-8\">"
        f"<title>{html.escape(title)}</title></head><body>\n",
    ]
    for root in roots:
        render_edge(root, parts, marker=marker)
        parts.append("\n")
    parts.append("</body></html>\n")
    return "".join(parts)


def render_edge(edge: Edge, parts: List[str], *, marker: str = DEFAULT_FRAME_MARKER) -> None:
    """
    Append the HTML of one edge and everything below it to the accumulator.

    Back links and childless nodes are plain text. Nodes with children
    open a collapsible section listing every child in order. Sections are
    tracked on an explicit stack, so path depth is not bounded by the
    interpreter's recursion limit.

    Args:
        edge: Node or back link to render.
        parts: Accumulator list for output fragments.
        marker: Frame marker stripped from display names.
    """
    # Open sections as [children, next_child_index]
    stack: List[list] = []

    if _open_edge(edge, parts, marker):
        stack.append([edge.children, 0])

    while stack:
        frame = stack[-1]
        children, idx = frame

        if idx >= len(children):
            parts.append("</ul>\n")
            parts.append("</details>")
            stack.pop()
            if stack:
                parts.append("</li>\n")
            continue

        frame[1] = idx + 1
        child = children[idx]
        parts.append("<li>")
        if _open_edge(child, parts, marker):
            stack.append([child.children, 0])
        else:
            parts.append("</li>\n")


def _open_edge(edge: Edge, parts: List[str], marker: str) -> bool:
    """Append the edge's own text; return True if it opened a section."""
    # Scenario A: Cut cycle, never expanded
    if isinstance(edge, BackLink):
        parts.append(html.escape(format_backlink(edge)))
        return False

    text = html.escape(format_title(edge, marker))

    # Scenario B: Leaf frame
    if edge.is_leaf:
        parts.append(text)
        return False

    # Scenario C: Expandable frame
    parts.append(f"<details><summary><b>Expand/Collapse</b> {text}</summary>\n")
    parts.append("<ul>\n")
    return True
