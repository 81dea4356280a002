from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for profiler traces and configuration dictionaries.
"""

import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def two_trace_lines() -> List[str]:
    """Two traces, A->B and A->C, each closed by a blank line."""
    return ["#A\n", "#B\n", "\n", "#A\n", "#C\n", "\n"]


@pytest.fixture
def profile_text() -> str:
    """
    A small profiler dump with repeated, shared and recursive frames.

    Frames use the tab-space separator found in real profiler output.
    """
    return (
        "goroutine 1 [running]:\n"
        "#main.handler\t server.go:10\n"
        "#db.Query\t db.go:42\n"
        "#net.Read\t conn.go:7\n"
        "\n"
        "#main.handler\t server.go:10\n"
        "#db.Query\t db.go:42\n"
        "\n"
        "#walk\t tree.go:3\n"
        "#visit\t tree.go:9\n"
        "#walk\t tree.go:3\n"
        "\n"
    )


@pytest.fixture
def profile_file(tmp_path, profile_text):
    path = tmp_path / "profile.txt"
    path.write_text(profile_text, encoding="utf-8")
    return path


@pytest.fixture
def mock_config_dict(tmp_path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'calltree.domain.config'.
    """
    return {
        "input_path": str(tmp_path / "profile.txt"),
        "output_path": str(tmp_path / "out" / "tree.html"),
        "output_format": "html",
        "html_title": "Call Frequency Tree",
        "frame_marker": "#",
        "flush_trailing_trace": False,
    }
