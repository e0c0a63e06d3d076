"""Data models for selrange"""

from selrange.models.range import Range, is_range
from selrange.models.range_list import RangeList, is_range_list
from selrange.models.editor_state import EditorState
from selrange.models.config import SelrangeConfig

__all__ = [
    "Range",
    "RangeList",
    "EditorState",
    "SelrangeConfig",
    "is_range",
    "is_range_list",
]
