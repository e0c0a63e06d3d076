"""Editor state - document text together with its selection"""

from pydantic import BaseModel, ConfigDict, Field

from selrange.models.range import Range
from selrange.models.range_list import RangeList


class EditorState(BaseModel):
    """Snapshot of a document and its multi-range selection.

    Offsets are not checked against the text here; call clamp_selection()
    after the text shrinks.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    selection: RangeList = Field(default_factory=RangeList)

    @property
    def focused_range(self) -> Range:
        return self.selection.focused_range

    def with_text(self, text: str) -> "EditorState":
        return EditorState(text=text, selection=self.selection)

    def with_selection(self, selection: RangeList) -> "EditorState":
        return EditorState(text=self.text, selection=selection)

    def selected_text(self) -> str:
        """Get the text covered by the focused range"""
        focused = self.focused_range
        return self.text[focused.first_offset:focused.last_offset]

    def clamp_selection(self) -> "EditorState":
        """Pull every offset into [0, len(text)] and renormalize"""
        length = len(self.text)

        def clamp(offset: int) -> int:
            return max(0, min(offset, length))

        ranges = []
        for range_ in self.selection.ranges:
            clamped = Range(
                anchor_offset=clamp(range_.anchor_offset),
                focus_offset=clamp(range_.focus_offset),
            )
            # keep identity for ranges that were already in bounds
            ranges.append(range_ if clamped == range_ else clamped)

        return self.with_selection(self.selection.set_ranges(ranges))
