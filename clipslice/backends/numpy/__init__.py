from __future__ import annotations

"""NumPy backend: views are basic slices along axis 0.

Basic slicing never copies, so the returned arrays share memory with the
source. Read-only views get ``writeable = False`` on the view itself; the
source array keeps its own flags.
"""

from typing import Any


def _check_array(source: Any) -> None:
    if source.ndim == 0:
        raise TypeError("cannot take a range view of a 0-d array")


def length(source: Any) -> int:
    _check_array(source)
    return int(source.shape[0])


def view(source: Any, start: int, stop: int) -> Any:
    _check_array(source)
    out = source[start:stop]
    out.flags.writeable = False
    return out


def view_mut(source: Any, start: int, stop: int) -> Any:
    _check_array(source)
    if not source.flags.writeable:
        raise TypeError("cannot take a mutable view of a read-only array")
    return source[start:stop]


__all__ = [
    "length",
    "view",
    "view_mut",
]
