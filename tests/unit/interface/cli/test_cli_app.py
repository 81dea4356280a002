from __future__ import annotations

"""
Unit tests for the CLI application controller.

Verifies exit codes, configuration dumping and the human summary.
"""

import json

import pytest

from calltree.infra.logging import shutdown_logging
from calltree.interface.cli.app import _merge_config, main


@pytest.fixture(autouse=True)
def reset_logging(capsys):
    """Detach the handlers bound to pytest's captured stderr."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_main_writes_tree_and_reports(profile_file, tmp_path, capsys):
    out = tmp_path / "tree.html"

    code = main(["-i", str(profile_file), "-o", str(out)])

    assert code == 0
    assert out.exists()
    stdout = capsys.readouterr().out
    assert "Call tree written to" in stdout
    assert "Root sections: 3" in stdout
    assert "Cycles cut into back links: 1" in stdout


def test_main_missing_input_returns_2(tmp_path, capsys):
    code = main(["-i", str(tmp_path / "absent.txt"), "-o", str(tmp_path / "o.html")])

    assert code == 2
    assert "does not exist" in capsys.readouterr().err
    assert not (tmp_path / "o.html").exists()


def test_main_without_input_returns_2(capsys):
    assert main([]) == 2
    assert "input file is required" in capsys.readouterr().err


def test_main_unwritable_output_returns_1(profile_file, tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    code = main(["-i", str(profile_file), "-o", str(blocker / "tree.html")])

    assert code == 1
    assert "ERROR: Failed to write" in capsys.readouterr().err


def test_dump_config_prints_resolved_config(capsys):
    code = main(["--dump-config", "--format", "json", "--marker", "@"])

    assert code == 0
    dumped = json.loads(capsys.readouterr().out)
    assert dumped["output_format"] == "json"
    assert dumped["frame_marker"] == "@"
    assert dumped["output_path"] == "out.html"


def test_merge_config_ignores_none_and_unknown_keys():
    base = {"input_path": "", "output_path": "out.html"}

    merged = _merge_config(base, {"input_path": "in.txt", "output_path": None, "bogus": 1})

    assert merged == {"input_path": "in.txt", "output_path": "out.html"}
