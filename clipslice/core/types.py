from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Union


def _as_endpoint(value: Any, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError as exc:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from exc


@dataclass(frozen=True)
class Bounded:
    """Closed-open range ``[start, end)``; both endpoints may be negative."""

    start: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _as_endpoint(self.start, "start"))
        object.__setattr__(self, "end", _as_endpoint(self.end, "end"))


@dataclass(frozen=True)
class FromStart:
    """Range ``[start, len)``."""

    start: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _as_endpoint(self.start, "start"))


@dataclass(frozen=True)
class ToEnd:
    """Range ``[0, end)``."""

    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "end", _as_endpoint(self.end, "end"))


@dataclass(frozen=True)
class Full:
    """The whole sequence ``[0, len)``."""


RangeShape = Union[Bounded, FromStart, ToEnd, Full]
RangeLike = Union[RangeShape, slice]


def as_range(rng: RangeLike) -> RangeShape:
    """Normalize a range shape or a step-less ``slice`` into a range shape.

    ``slice(a, b)`` maps to ``Bounded``, ``slice(a, None)`` to ``FromStart``,
    ``slice(None, b)`` to ``ToEnd`` and ``slice(None, None)`` to ``Full``.
    Steps other than ``None`` or ``1`` are rejected.
    """

    if isinstance(rng, (Bounded, FromStart, ToEnd, Full)):
        return rng
    if isinstance(rng, slice):
        if rng.step is not None and operator.index(rng.step) != 1:
            raise ValueError("stepped ranges are not supported")
        if rng.start is None and rng.stop is None:
            return Full()
        if rng.stop is None:
            return FromStart(rng.start)
        if rng.start is None:
            return ToEnd(rng.stop)
        return Bounded(rng.start, rng.stop)
    raise TypeError(
        "range must be Bounded, FromStart, ToEnd, Full or a slice, "
        f"got {type(rng).__name__}"
    )


__all__ = [
    "Bounded",
    "FromStart",
    "ToEnd",
    "Full",
    "RangeShape",
    "RangeLike",
    "as_range",
]
