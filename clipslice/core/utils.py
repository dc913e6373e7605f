from __future__ import annotations

import operator


def clamp(value: int, min_value: int, max_value: int) -> int:
    """Clamp value into the inclusive range [min_value, max_value]."""

    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def clip_bound(pos: int, length: int) -> int:
    """Translate a possibly negative, possibly out-of-range endpoint into ``[0, length]``.

    Non-negative positions count from the front and are capped at ``length``.
    A negative position ``-k`` counts from the back and resolves to
    ``length - k``, or ``0`` once ``k`` reaches ``length``. Every integer
    position is accepted; nothing is rejected as out of range.
    """

    pos = operator.index(pos)
    length = operator.index(length)
    if length < 0:
        raise ValueError("length must be non-negative")
    if pos < 0:
        return clamp(length + pos, 0, length)
    return clamp(pos, 0, length)


def check_index(index: int, length: int) -> int:
    """Validate an element index against ``[0, length)``.

    Element access on views only takes non-negative indices; negative
    positions are reached through ranges (``FromStart(-1)``) instead.
    """

    try:
        i = operator.index(index)
    except TypeError as exc:
        raise TypeError(f"view indices must be integers or slices, not {type(index).__name__}") from exc
    if not 0 <= i < length:
        raise IndexError(f"view index {i} out of range for length {length}")
    return i


__all__ = [
    "clamp",
    "clip_bound",
    "check_index",
]
