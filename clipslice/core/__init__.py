from __future__ import annotations

"""Core of clipslice: endpoint clipping, range shapes and aliasing views.

Nothing here imports an array framework; the framework backends reuse
``resolve_bounds`` and only supply the view construction.
"""

from .clipper import resolve_bounds
from .errors import ClipSliceError, InvalidRange
from .types import (
    Bounded,
    FromStart,
    Full,
    RangeLike,
    RangeShape,
    ToEnd,
    as_range,
)
from .utils import clip_bound
from .views import MutSliceView, SliceView

__all__ = [
    # Types
    "Bounded",
    "FromStart",
    "ToEnd",
    "Full",
    "RangeShape",
    "RangeLike",
    "as_range",
    # Errors
    "ClipSliceError",
    "InvalidRange",
    # Clipping
    "clip_bound",
    "resolve_bounds",
    # Views
    "SliceView",
    "MutSliceView",
]
