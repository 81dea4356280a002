from __future__ import annotations

"""
Unit tests for Configuration Validation.

Verifies default injection, type fallback with warnings, and strict-mode
rejection of invalid values.
"""

import pytest

from calltree.core.pipeline.validator import validate_config
from calltree.domain.config import get_default_config


def test_valid_config_passes_without_warnings(mock_config_dict):
    cfg, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert cfg == mock_config_dict


def test_missing_keys_filled_with_defaults():
    cfg, warnings = validate_config({"input_path": "trace.txt"})

    defaults = get_default_config()
    assert warnings == []
    assert cfg["input_path"] == "trace.txt"
    assert cfg["output_path"] == defaults["output_path"] == "out.html"
    assert cfg["frame_marker"] == "#"
    assert cfg["flush_trailing_trace"] is False


def test_non_dict_config_falls_back_to_defaults():
    cfg, warnings = validate_config(["not", "a", "dict"])

    assert cfg == get_default_config()
    assert len(warnings) == 1

    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_output_format_normalized_and_validated():
    cfg, warnings = validate_config({"output_format": " JSON "})
    assert cfg["output_format"] == "json"
    assert warnings == []

    cfg, warnings = validate_config({"output_format": "xml"})
    assert cfg["output_format"] == "html"
    assert any("xml" in w for w in warnings)

    with pytest.raises(ValueError):
        validate_config({"output_format": "xml"}, strict=True)


def test_frame_marker_must_be_single_character():
    cfg, warnings = validate_config({"frame_marker": "@"})
    assert cfg["frame_marker"] == "@"
    assert warnings == []

    cfg, warnings = validate_config({"frame_marker": "##"})
    assert cfg["frame_marker"] == "#"
    assert len(warnings) == 1

    with pytest.raises(ValueError):
        validate_config({"frame_marker": "##"}, strict=True)


def test_bool_field_accepts_only_real_booleans():
    cfg, warnings = validate_config({"flush_trailing_trace": True})
    assert cfg["flush_trailing_trace"] is True
    assert warnings == []

    for raw in ("yes", 1, 0):
        cfg, warnings = validate_config({"flush_trailing_trace": raw})
        assert cfg["flush_trailing_trace"] is False
        assert "flush_trailing_trace" in warnings[0]

    with pytest.raises(TypeError):
        validate_config({"flush_trailing_trace": "yes"}, strict=True)


def test_wrong_string_type_uses_fallback():
    cfg, warnings = validate_config({"output_path": 42})

    assert cfg["output_path"] == "out.html"
    assert "output_path" in warnings[0]
