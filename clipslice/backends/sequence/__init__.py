from __future__ import annotations

"""Pure-Python backend for ``Sequence`` sources and ``memoryview``.

Returns ``SliceView`` / ``MutSliceView`` objects that alias the source.
"""

from typing import Any, Sequence

from ...core.views import MutSliceView, SliceView, is_writable


def _check_source(source: Sequence[Any]) -> None:
    # CPython cannot index or assign into multi-dimensional memoryview elements
    if isinstance(source, memoryview) and source.ndim != 1:
        raise TypeError(
            f"cannot take a range view of a {source.ndim}-d memoryview; cast it to 1-d first"
        )


def length(source: Sequence[Any]) -> int:
    _check_source(source)
    return len(source)


def view(source: Sequence[Any], start: int, stop: int) -> SliceView[Any]:
    _check_source(source)
    return SliceView(source, start, stop)


def view_mut(source: Sequence[Any], start: int, stop: int) -> MutSliceView[Any]:
    _check_source(source)
    if not is_writable(source):
        raise TypeError(
            f"cannot take a mutable view of read-only {type(source).__name__}"
        )
    return MutSliceView(source, start, stop)


__all__ = [
    "length",
    "view",
    "view_mut",
]
