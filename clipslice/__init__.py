"""clipslice: Python-style negative-index range views over contiguous sequences.

Ranges with negative or out-of-range endpoints are clipped to the sequence
length and turned into views that alias the original storage instead of
copying it. Lists, tuples, strings, bytes, ``memoryview`` objects, NumPy
arrays and PyTorch tensors are supported; array frameworks are imported
lazily, only when such a source is passed in.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from importlib.metadata import PackageNotFoundError, version
from typing import Any

try:  # Prefer a real version from installed metadata; fall back during dev.
    __version__ = version("clipslice")
except PackageNotFoundError:  # pragma: no cover - only hit in editable installs without build
    __version__ = "0.0.0"

from ._lazy import MissingBackend, get_backend_or_raise
from .core import (
    Bounded,
    ClipSliceError,
    FromStart,
    Full,
    InvalidRange,
    MutSliceView,
    RangeLike,
    SliceView,
    ToEnd,
    clip_bound,
    resolve_bounds,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Range shapes
    "Bounded",
    "FromStart",
    "ToEnd",
    "Full",
    # Views
    "SliceView",
    "MutSliceView",
    # Errors
    "ClipSliceError",
    "InvalidRange",
    "MissingBackend",
    # Operations
    "clip_bound",
    "view_by",
    "view_mut_by",
    "vec_view_by",
    "vec_view_mut_by",
    "at",
    "Clip",
]


def view_by(source: Any, rng: RangeLike) -> Any:
    """Return a read-only view of ``source`` over the clipped range.

    ``source`` may be any sequence (including an existing view), a
    ``memoryview``, a NumPy array or a PyTorch tensor. ``rng`` is a range shape
    or a step-less ``slice``. Raises ``InvalidRange`` when a bounded range
    clips to ``start > end``.
    """

    backend = get_backend_or_raise(source)
    start, stop = resolve_bounds(rng, backend.length(source))
    return backend.view(source, start, stop)


def view_mut_by(source: Any, rng: RangeLike) -> Any:
    """Return a mutable view of ``source`` over the clipped range.

    Writes through the result land in ``source``'s storage. Raises
    ``TypeError`` when ``source`` is not writable.
    """

    backend = get_backend_or_raise(source)
    start, stop = resolve_bounds(rng, backend.length(source))
    return backend.view_mut(source, start, stop)


def _check_vector(vec: Any) -> None:
    if not isinstance(vec, MutableSequence):
        raise TypeError(f"expected a growable sequence such as list, got {type(vec).__name__}")


def vec_view_by(vec: MutableSequence[Any], rng: RangeLike) -> SliceView[Any]:
    """Take a full view over ``vec`` as it is now, then clip it to ``rng``."""

    _check_vector(vec)
    return view_by(SliceView(vec), rng)


def vec_view_mut_by(vec: MutableSequence[Any], rng: RangeLike) -> MutSliceView[Any]:
    """Mutable counterpart of ``vec_view_by``."""

    _check_vector(vec)
    return view_mut_by(MutSliceView(vec), rng)


def at(source: Any, index: int) -> Any:
    """Read one element with a possibly negative index.

    Equivalent to ``view_by(source, FromStart(index))[0]``: ``at(data, -1)`` is
    the last element. Raises ``IndexError`` when the clipped view is empty.
    """

    window = view_by(source, FromStart(index))
    if len(window) == 0:
        raise IndexError(f"index {index} is past the end of a sequence of length {len(source)}")
    return window[0]


class Clip:
    """Namespace mirroring the ``Clip.by`` family of entry points.

    ``Clip.by`` / ``Clip.mut_by`` take any view-convertible source;
    ``Clip.by_as_slice`` / ``Clip.by_as_mut_slice`` take a growable vector.
    """

    by = staticmethod(view_by)
    mut_by = staticmethod(view_mut_by)
    by_as_slice = staticmethod(vec_view_by)
    by_as_mut_slice = staticmethod(vec_view_mut_by)
