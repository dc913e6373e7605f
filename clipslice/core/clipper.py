from __future__ import annotations

from typing import Tuple

from .errors import InvalidRange
from .types import Bounded, FromStart, Full, RangeLike, ToEnd, as_range
from .utils import clip_bound

Bounds = Tuple[int, int]


def resolve_bounds(rng: RangeLike, length: int) -> Bounds:
    """Resolve a range against a sequence length into ``(start, stop)``.

    - Bounded: both endpoints clipped independently; ``start > stop`` raises
      ``InvalidRange`` rather than being swapped or emptied.
    - FromStart: ``(clip(start), length)``
    - ToEnd: ``(0, clip(end))``
    - Full: ``(0, length)`` with no clipping at all.
    """

    shape = as_range(rng)
    if isinstance(shape, Bounded):
        start = clip_bound(shape.start, length)
        stop = clip_bound(shape.end, length)
        if start > stop:
            raise InvalidRange(start, stop, length)
        return start, stop
    if isinstance(shape, FromStart):
        return clip_bound(shape.start, length), length
    if isinstance(shape, ToEnd):
        return 0, clip_bound(shape.end, length)
    if isinstance(shape, Full):
        return 0, length
    raise TypeError(f"unsupported range shape: {shape!r}")  # pragma: no cover - as_range is exhaustive


__all__ = [
    "Bounds",
    "resolve_bounds",
]
