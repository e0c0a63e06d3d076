"""Exceptions raised by selection models"""


# None of these derive from ValueError: pydantic would wrap them in a
# ValidationError when raised from a validator.
class SelectionError(Exception):
    """Base class for selection errors"""

    pass


class InvalidArgumentError(SelectionError):
    """Raised when an offset or a ranges collection is malformed"""

    pass


class IndexOutOfRangeError(SelectionError, IndexError):
    """Raised when an index falls outside [0, range_count)"""

    pass


class RangeNotFoundError(SelectionError, LookupError):
    """Raised when a range is not one of the current ranges"""

    pass


class InvariantViolationError(SelectionError):
    """Raised when normalization loses track of the focused range.

    This signals a bug in the library, not a caller mistake.
    """

    pass
