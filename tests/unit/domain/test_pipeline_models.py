from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Data integrity of PipelineResult factories (Success/Error).
2. Immutability of frozen dataclasses.
3. Identity semantics of frame nodes and value semantics of back links.
"""

import dataclasses

import pytest

from calltree.domain.graph_models import BackLink, FrameNode
from calltree.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)


def test_create_success_result_populates_fields(mock_config_dict):
    result = create_success_result(
        cfg=mock_config_dict,
        input_path="/tmp/in.txt",
        output_path="/tmp/out.html",
        node_count=5,
        root_count=3,
        backlink_count=1,
        summary_extra={"traces": 3},
    )

    assert isinstance(result, PipelineResult)
    assert result.ok is True
    assert result.error == ""
    assert result.output_format == "html"
    assert result.root_count == 3
    assert result.summary == {"traces": 3}


def test_create_error_result_handles_defaults(mock_config_dict):
    result = create_error_result("Disk full", mock_config_dict)

    assert result.ok is False
    assert result.error == "Disk full"
    assert result.input_path == mock_config_dict["input_path"]
    assert result.node_count == 0
    assert result.summary == {}


def test_pipeline_result_is_immutable(mock_config_dict):
    result = create_error_result("x", mock_config_dict)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = True  # type: ignore[misc]


def test_frame_nodes_compare_by_identity():
    assert FrameNode("#A") != FrameNode("#A")
    node = FrameNode("#A")
    assert node == node
    assert node.count == 1
    assert node.is_leaf
    assert node.active is False


def test_backlinks_compare_by_value():
    assert BackLink("#A") == BackLink("#A")
    assert BackLink("#A").is_leaf
    with pytest.raises(dataclasses.FrozenInstanceError):
        BackLink("#A").name = "#B"  # type: ignore[misc]
