from __future__ import annotations


class ClipSliceError(Exception):
    """Base class for errors raised by clipslice."""


class InvalidRange(ClipSliceError, ValueError):
    """Raised when a bounded range clips to ``start > stop``.

    Clipped bounds are never reordered or collapsed to an empty view; callers
    should treat this as a programming error in the requested range.
    """

    def __init__(self, start: int, stop: int, length: int) -> None:
        super().__init__(
            f"range start {start} is greater than end {stop} after clipping "
            f"to a sequence of length {length}"
        )
        self.start = start
        self.stop = stop
        self.length = length


__all__ = [
    "ClipSliceError",
    "InvalidRange",
]
