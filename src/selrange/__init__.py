"""selrange - immutable multi-range text selections"""

__version__ = "0.1.0"

from selrange.errors import (
    SelectionError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    RangeNotFoundError,
    InvariantViolationError,
)
from selrange.models import EditorState, Range, RangeList, is_range, is_range_list

__all__ = [
    "__version__",
    "EditorState",
    "Range",
    "RangeList",
    "is_range",
    "is_range_list",
    "SelectionError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "RangeNotFoundError",
    "InvariantViolationError",
]
