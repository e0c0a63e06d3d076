"""Range model - one anchor/focus selection span"""

import math
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from selrange.errors import InvalidArgumentError


OFFSET_FIELDS = ("anchor_offset", "focus_offset")


def _check_offset(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"[Range] constructor: the {name} must be a number")
    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidArgumentError(f"[Range] constructor: the {name} cannot be NaN")
        if not value.is_integer():
            raise InvalidArgumentError(
                f"[Range] constructor: the {name} must be a whole number, got {value}"
            )


class Range(BaseModel):
    """A selection span between an anchor and a focus offset.

    The anchor is where the selection started and the focus is where it
    currently ends, so a range dragged right-to-left is backwards.
    """

    model_config = ConfigDict(frozen=True)

    anchor_offset: int = 0
    focus_offset: int = 0

    @model_validator(mode="before")
    @classmethod
    def validate_offsets(cls, data: Any) -> Any:
        """Reject non-numeric and NaN offsets"""
        if isinstance(data, dict):
            for name in OFFSET_FIELDS:
                if name in data:
                    _check_offset(name, data[name])
        return data

    @property
    def is_collapsed(self) -> bool:
        return self.anchor_offset == self.focus_offset

    @property
    def is_expanded(self) -> bool:
        return not self.is_collapsed

    @property
    def is_backwards(self) -> bool:
        return self.anchor_offset > self.focus_offset

    @property
    def is_forwards(self) -> bool:
        """Collapsed ranges count as forwards"""
        return not self.is_backwards

    @property
    def first_offset(self) -> int:
        return min(self.anchor_offset, self.focus_offset)

    @property
    def last_offset(self) -> int:
        return max(self.anchor_offset, self.focus_offset)

    def contains(self, other: "Range") -> bool:
        """Check if other lies within this range (closed interval)"""
        return (
            other.first_offset >= self.first_offset
            and other.last_offset <= self.last_offset
        )

    def overlaps(self, other: "Range") -> bool:
        """Check if the two ranges share at least one offset, endpoints included"""
        return (
            other.first_offset <= self.last_offset
            and other.last_offset >= self.first_offset
        )

    def flip(self) -> "Range":
        return self.model_copy(
            update={"anchor_offset": self.focus_offset, "focus_offset": self.anchor_offset}
        )

    def set_backwards(self) -> "Range":
        return self if self.is_backwards else self.flip()

    def set_forwards(self) -> "Range":
        return self if self.is_forwards else self.flip()

    def set_anchor_offset(self, offset: int) -> "Range":
        return Range(anchor_offset=offset, focus_offset=self.focus_offset)

    def set_focus_offset(self, offset: int) -> "Range":
        return Range(anchor_offset=self.anchor_offset, focus_offset=offset)

    def move_anchor_offset(self, amount: int) -> "Range":
        return self.set_anchor_offset(self.anchor_offset + amount)

    def move_focus_offset(self, amount: int) -> "Range":
        return self.set_focus_offset(self.focus_offset + amount)

    def collapse_anchor(self) -> "Range":
        """Move the focus onto the anchor"""
        return self.set_focus_offset(self.anchor_offset)

    def collapse_focus(self) -> "Range":
        """Move the anchor onto the focus"""
        return self.set_anchor_offset(self.focus_offset)

    def collapse_backwards(self) -> "Range":
        """Collapse both offsets to first_offset"""
        return self.set_backwards().collapse_focus()

    def collapse_forwards(self) -> "Range":
        """Collapse both offsets to last_offset"""
        return self.set_forwards().collapse_focus()

    def to_tuple(self) -> Tuple[int, int]:
        """Get (anchor_offset, focus_offset)"""
        return (self.anchor_offset, self.focus_offset)


def is_range(candidate: Any) -> bool:
    """Check if candidate is a Range"""
    return isinstance(candidate, Range)
