"""Tests for the selrange CLI"""

import pytest
from typer.testing import CliRunner

from selrange import __version__
from selrange.cli import app
from selrange.core.config import get_config_path, load_config
from selrange.core.snapshot import load_snapshot, save_snapshot
from selrange.models.editor_state import EditorState
from selrange.models.range import Range
from selrange.models.range_list import RangeList

runner = CliRunner()


def make(anchor: int, focus: int) -> Range:
    return Range(anchor_offset=anchor, focus_offset=focus)


@pytest.fixture
def snapshot(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = EditorState(
        text="hello brave new world",
        selection=RangeList(ranges=[make(0, 5), make(16, 21)], focused_range_index=1),
    )
    return save_snapshot(tmp_path / "doc.sel.yaml", state)


def test_version():
    """Test --version prints the package version"""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_show(snapshot):
    """Test show lists every range"""
    result = runner.invoke(app, ["show", str(snapshot)])

    assert result.exit_code == 0
    assert "forwards" in result.output
    assert "hello" in result.output
    assert "world" in result.output


def test_show_missing_snapshot(tmp_path, monkeypatch):
    """Test show reports a missing file"""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["show", "missing.sel.yaml"])

    assert result.exit_code == 1
    assert "Snapshot not found" in result.output


def test_add_merges_and_saves(snapshot):
    """Test add saves the normalized selection"""
    result = runner.invoke(app, ["add", str(snapshot), "--anchor", "3", "--focus", "8"])

    assert result.exit_code == 0
    selection = load_snapshot(snapshot).selection
    assert selection.ranges == (make(0, 8), make(16, 21))
    assert selection.focused_range_index == 0


def test_focus_and_remove(snapshot):
    """Test focus and remove update the snapshot"""
    result = runner.invoke(app, ["focus", str(snapshot), "0"])
    assert result.exit_code == 0
    assert load_snapshot(snapshot).selection.focused_range_index == 0

    result = runner.invoke(app, ["remove", str(snapshot), "0"])
    assert result.exit_code == 0
    assert load_snapshot(snapshot).selection.ranges == (make(16, 21),)


def test_remove_errors_exit_nonzero(snapshot):
    """Test selection errors are reported without touching the file"""
    before = snapshot.read_text()

    result = runner.invoke(app, ["remove", str(snapshot), "5"])
    assert result.exit_code == 1
    assert "Error" in result.output

    runner.invoke(app, ["remove", str(snapshot), "1"])
    result = runner.invoke(app, ["remove", str(snapshot), "0"])
    assert result.exit_code == 1
    assert "only range" in result.output
    assert load_snapshot(snapshot).selection.range_count == 1
    assert snapshot.read_text() != before


def test_normalize(snapshot):
    """Test normalize only writes with --write"""
    state = EditorState(
        text="abcdefghij",
        selection=RangeList(ranges=[make(0, 4), make(2, 6), make(8, 9)]),
    )
    save_snapshot(snapshot, state)

    result = runner.invoke(app, ["normalize", str(snapshot)])
    assert result.exit_code == 0
    assert "Merged away 1" in result.output
    assert load_snapshot(snapshot).selection.range_count == 3

    result = runner.invoke(app, ["normalize", str(snapshot), "--write"])
    assert result.exit_code == 0
    assert load_snapshot(snapshot).selection.ranges == (make(0, 6), make(8, 9))


def test_init_creates_config(tmp_path, monkeypatch):
    """Test init writes .selrange/config.yaml"""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--log-level", "debug"])

    assert result.exit_code == 0
    assert (tmp_path / get_config_path()).exists()
    assert load_config().log_level == "DEBUG"

    result = runner.invoke(app, ["init"], input="n\n")
    assert result.exit_code == 0
    assert load_config().log_level == "DEBUG"


def test_invalid_config_exits(tmp_path, monkeypatch):
    """Test a broken config file stops every command"""
    monkeypatch.chdir(tmp_path)
    path = tmp_path / get_config_path()
    path.parent.mkdir()
    path.write_text("log_level: LOUD\n")

    result = runner.invoke(app, ["show", "doc.sel.yaml"])
    assert result.exit_code == 1
    assert "Invalid config" in result.output
