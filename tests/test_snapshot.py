"""Tests for snapshot file I/O"""

from pathlib import Path

import pytest

from selrange.core.snapshot import (
    SnapshotInvalidError,
    load_snapshot,
    save_snapshot,
    snapshot_path_for,
)
from selrange.models.editor_state import EditorState
from selrange.models.range import Range
from selrange.models.range_list import RangeList


def test_snapshot_path_for():
    """Test snapshot path sits beside the source file"""
    assert snapshot_path_for(Path("notes/doc.md")) == Path("notes/doc.md.sel.yaml")
    assert snapshot_path_for(Path("doc.txt"), ".snap.yaml") == Path("doc.txt.snap.yaml")


def test_save_and_load_snapshot(tmp_path):
    """Test a saved snapshot loads back to an equal state"""
    state = EditorState(
        text="hello world",
        selection=RangeList(
            ranges=[Range(anchor_offset=0, focus_offset=5), Range(anchor_offset=11, focus_offset=6)],
            focused_range_index=1,
        ),
    )
    path = save_snapshot(tmp_path / "doc.sel.yaml", state)

    assert path.exists()
    assert "focused_range_index: 1" in path.read_text()
    assert load_snapshot(path) == state


def test_load_snapshot_defaults(tmp_path):
    """Test missing keys fall back to model defaults"""
    path = tmp_path / "empty.sel.yaml"
    path.write_text("")
    assert load_snapshot(path) == EditorState()

    path.write_text("text: abc\n")
    assert load_snapshot(path).selection == RangeList()


def test_load_snapshot_missing_file(tmp_path):
    """Test a missing snapshot raises FileNotFoundError"""
    with pytest.raises(FileNotFoundError):
        load_snapshot(tmp_path / "missing.sel.yaml")


def test_load_snapshot_invalid_yaml(tmp_path):
    """Test malformed YAML is reported"""
    path = tmp_path / "bad.sel.yaml"
    path.write_text("selection: [unclosed\n")

    with pytest.raises(SnapshotInvalidError, match="Invalid YAML"):
        load_snapshot(path)


def test_load_snapshot_not_a_mapping(tmp_path):
    """Test a YAML list is rejected"""
    path = tmp_path / "list.sel.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(SnapshotInvalidError, match="mapping"):
        load_snapshot(path)


def test_load_snapshot_invalid_selection(tmp_path):
    """Test selection errors are wrapped as SnapshotInvalidError"""
    path = tmp_path / "focus.sel.yaml"
    path.write_text(
        "selection:\n"
        "  focused_range_index: 4\n"
        "  ranges:\n"
        "    - {anchor_offset: 0, focus_offset: 1}\n"
    )
    with pytest.raises(SnapshotInvalidError, match="focused_range_index"):
        load_snapshot(path)

    path.write_text("selection:\n  ranges:\n    - {anchor_offset: .nan}\n")
    with pytest.raises(SnapshotInvalidError, match="NaN"):
        load_snapshot(path)

    path.write_text("selection:\n  ranges: []\n")
    with pytest.raises(SnapshotInvalidError):
        load_snapshot(path)

    path.write_text("text: [1, 2]\n")
    with pytest.raises(SnapshotInvalidError):
        load_snapshot(path)
