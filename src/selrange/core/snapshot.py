"""Snapshot file I/O - YAML storage for editor state"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from selrange.errors import SelectionError
from selrange.models.editor_state import EditorState


class SnapshotInvalidError(Exception):
    """Raised when a snapshot file cannot be turned into an EditorState"""

    pass


def snapshot_path_for(source_file: Path, suffix: str = ".sel.yaml") -> Path:
    """Get the snapshot file path for a source file"""
    return source_file.with_suffix(source_file.suffix + suffix)


def load_snapshot(snapshot_file: Path) -> EditorState:
    """Load editor state from a snapshot file

    Raises:
        FileNotFoundError: If the snapshot file doesn't exist
        SnapshotInvalidError: If the YAML or its contents are invalid
    """
    with open(snapshot_file, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SnapshotInvalidError(f"Invalid YAML in snapshot file: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SnapshotInvalidError(f"Snapshot must be a mapping: {snapshot_file}")

    try:
        return EditorState.model_validate(data)
    except (ValidationError, SelectionError) as e:
        raise SnapshotInvalidError(f"Invalid snapshot: {e}")


def save_snapshot(snapshot_file: Path, state: EditorState) -> Path:
    """Save editor state to a snapshot file"""
    data = state.model_dump(mode="json")

    with open(snapshot_file, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    return snapshot_file
