"""RangeList model - an ordered set of selection ranges with one focused range"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from selrange.errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvariantViolationError,
    RangeNotFoundError,
)
from selrange.models.range import Range


LOGGER = logging.getLogger(__name__)


def _default_ranges() -> Tuple[Range, ...]:
    return (Range(),)


class RangeList(BaseModel):
    """Multi-range selection.

    Every mutator returns a new, normalized RangeList: ranges are sorted,
    disjoint and never empty, and ``focused_range_index`` always points at
    one of them.
    """

    model_config = ConfigDict(frozen=True)

    ranges: Tuple[Range, ...] = Field(default_factory=_default_ranges)
    focused_range_index: int = 0

    @model_validator(mode="after")
    def validate_focus(self) -> "RangeList":
        """Ensure there is at least one range and the focus points at one"""
        if not self.ranges:
            raise InvalidArgumentError(
                "[RangeList] constructor: The ranges must have a size greater than zero"
            )
        if not 0 <= self.focused_range_index < len(self.ranges):
            raise IndexOutOfRangeError(
                f"[RangeList] constructor: The focused_range_index ({self.focused_range_index}) "
                f"is either greater than the size of the ranges ({len(self.ranges)}) "
                f"or less than zero"
            )
        return self

    @property
    def range_count(self) -> int:
        return len(self.ranges)

    @property
    def focused_range(self) -> Range:
        """The range single-cursor edits apply to"""
        return self.ranges[self.focused_range_index]

    def _check_index(self, index: int, operation: str) -> None:
        if index < 0 or index >= len(self.ranges):
            raise IndexOutOfRangeError(
                f"[RangeList] {operation}: the index ({index}) is either less than zero "
                f"or greater than the amount of ranges ({len(self.ranges)})"
            )

    def _replace(self, ranges: Iterable[Range], focused_range_index: int) -> "RangeList":
        return type(self)(ranges=tuple(ranges), focused_range_index=focused_range_index)

    def get_range(self, index: int) -> Range:
        self._check_index(index, "get_range")
        return self.ranges[index]

    def set_focused_range_index(self, index: int) -> "RangeList":
        self._check_index(index, "set_focused_range_index")
        return self._replace(self.ranges, index)

    def set_ranges(self, ranges: Iterable[Range]) -> "RangeList":
        """Replace every range, keeping the focus index where it still fits"""
        new_ranges = tuple(ranges)
        if not new_ranges:
            raise InvalidArgumentError("[RangeList] set_ranges: The ranges must not be empty")
        focused_range_index = min(self.focused_range_index, len(new_ranges) - 1)
        return self._replace(new_ranges, focused_range_index).normalize()

    def add_range(self, range_: Range) -> "RangeList":
        """Add a range and focus it"""
        new_ranges = self.ranges + (range_,)
        return self._replace(new_ranges, len(new_ranges) - 1).normalize()

    def remove_range_at_index(self, index: int) -> "RangeList":
        self._check_index(index, "remove_range_at_index")
        if len(self.ranges) == 1:
            raise InvalidArgumentError(
                "[RangeList] remove_range_at_index: Cannot remove the only range"
            )

        if index == self.focused_range_index:
            focused_range_index = 0
        elif index < self.focused_range_index:
            focused_range_index = self.focused_range_index - 1
        else:
            focused_range_index = self.focused_range_index

        new_ranges = self.ranges[:index] + self.ranges[index + 1:]
        return self._replace(new_ranges, focused_range_index).normalize()

    def remove_range(self, range_: Range) -> "RangeList":
        """Remove a range by identity, not by value"""
        for index, other in enumerate(self.ranges):
            if other is range_:
                return self.remove_range_at_index(index)
        raise RangeNotFoundError(
            "[RangeList] remove_range: The given range is not one of the current ranges"
        )

    def normalize(self) -> "RangeList":
        """Merge overlapping or touching ranges and sort the result.

        Ranges are closed intervals [first_offset, last_offset], so [0, 2]
        and [2, 5] merge into [0, 5]. A range that merges with nothing is
        kept as the same object. The focus moves to whichever result
        contains the previously focused range.
        """
        previous_focus = self.focused_range
        ordered = sorted(self.ranges, key=lambda r: (r.first_offset, r.last_offset))
        groups = _group_overlapping(ordered)

        if len(groups) == len(ordered):
            focused_range_index = next(
                i for i, other in enumerate(ordered) if other is previous_focus
            )
            return self._replace(ordered, focused_range_index)

        merged = [_merge_group(group, previous_focus) for group in groups]
        focused_range_index = _find_containing(merged, previous_focus)
        if focused_range_index is None:
            raise InvariantViolationError(
                "[RangeList] normalize: no merged range contains the previously focused "
                f"range {previous_focus.to_tuple()}"
            )

        LOGGER.debug("Merged %d ranges into %d", len(ordered), len(merged))
        return self._replace(merged, focused_range_index)


def _group_overlapping(ordered: List[Range]) -> List[List[Range]]:
    groups: List[List[Range]] = []
    group_last = 0
    for range_ in ordered:
        if groups and range_.first_offset <= group_last:
            groups[-1].append(range_)
            group_last = max(group_last, range_.last_offset)
        else:
            groups.append([range_])
            group_last = range_.last_offset
    return groups


def _merge_group(group: List[Range], focus: Range) -> Range:
    """Collapse a group into one range, taking the focused range's direction"""
    if len(group) == 1:
        return group[0]
    first = group[0].first_offset
    last = max(r.last_offset for r in group)
    if focus.is_backwards and any(r is focus for r in group):
        return Range(anchor_offset=last, focus_offset=first)
    return Range(anchor_offset=first, focus_offset=last)


def _find_containing(ranges: List[Range], target: Range) -> Optional[int]:
    for index, range_ in enumerate(ranges):
        if range_.contains(target):
            return index
    return None


def is_range_list(candidate: Any) -> bool:
    """Check if candidate is a RangeList"""
    return isinstance(candidate, RangeList)
