from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, Generic, Iterator, TypeVar, overload

from .clipper import resolve_bounds
from .errors import InvalidRange
from .utils import check_index

T = TypeVar("T")


class SliceView(Sequence[T], Generic[T]):
    """A read-only window ``target[start:stop]`` that aliases its target.

    No elements are copied: reads go straight to the target, so later writes
    to the target (or through a ``MutSliceView`` over it) are visible here.
    Views of views are flattened onto the original target.

    Element access takes non-negative indices only. Slicing a view applies the
    same clipping rules as ``view_by``::

        >>> data = [0, 1, 2, 3, 4, 5]
        >>> list(SliceView(data)[-4:-1])
        [2, 3, 4]

    The bounds are fixed at construction. If the target shrinks afterwards,
    reads past its new end raise the target's own ``IndexError``.
    """

    __slots__ = ("_target", "_start", "_stop")

    def __init__(self, target: Sequence[T], start: int = 0, stop: int | None = None) -> None:
        if isinstance(target, SliceView):
            offset = target._start
            length = len(target)
            target = target._target
        else:
            offset = 0
            length = len(target)
        if stop is None:
            stop = length
        if start < 0 or stop > length:
            raise IndexError(f"view bounds [{start}, {stop}) exceed length {length}")
        if start > stop:
            raise InvalidRange(start, stop, length)
        self._target = target
        self._start = offset + start
        self._stop = offset + stop

    # ---------- Properties ----------
    @property
    def target(self) -> Sequence[T]:
        """The underlying storage this view aliases."""
        return self._target

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    # ---------- Sequence protocol ----------
    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> SliceView[T]: ...

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            start, stop = resolve_bounds(index, len(self))
            return type(self)(self, start, stop)
        i = check_index(index, len(self))
        return self._target[self._start + i]

    def __iter__(self) -> Iterator[T]:
        target = self._target
        for i in range(self._start, self._stop):
            yield target[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        if len(other) != len(self):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(<{type(self._target).__name__}>, "
            f"start={self._start}, stop={self._stop})"
        )

    # ---------- Helpers ----------
    def readonly(self) -> SliceView[T]:
        """Return a read-only view over the same span."""
        return SliceView(self._target, self._start, self._stop)

    def tolist(self) -> list[T]:
        """Copy the viewed elements into a new list."""
        return list(self)


class MutSliceView(SliceView[T], Generic[T]):
    """A mutable window over a mutable target.

    Writes go through to the target. Only element replacement is supported:
    slice assignment must keep the same length, so the target never grows or
    shrinks through a view.

        >>> data = [0, 1, 2, 3, 4, 5]
        >>> view = MutSliceView(data, 1, 4)
        >>> view[0] = 10
        >>> data
        [0, 10, 2, 3, 4, 5]
    """

    __slots__ = ()

    def __init__(self, target: Sequence[T], start: int = 0, stop: int | None = None) -> None:
        if isinstance(target, SliceView) and not isinstance(target, MutSliceView):
            raise TypeError("cannot take a mutable view of a read-only view")
        if not isinstance(target, SliceView) and not is_writable(target):
            raise TypeError(f"{type(target).__name__} does not support item assignment")
        super().__init__(target, start, stop)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> MutSliceView[T]: ...

    def __getitem__(self, index: Any) -> Any:
        return super().__getitem__(index)

    def __setitem__(self, index: int | slice, value: Any) -> None:
        target: Any = self._target
        if isinstance(index, slice):
            start, stop = resolve_bounds(index, len(self))
            values = list(value)
            if len(values) != stop - start:
                raise ValueError(
                    f"cannot assign {len(values)} values to a view slice of length {stop - start}"
                )
            for offset, item in enumerate(values):
                target[self._start + start + offset] = item
            return
        i = check_index(index, len(self))
        target[self._start + i] = value


def is_writable(target: Any) -> bool:
    """Return True if ``target`` supports in-place item assignment."""

    if isinstance(target, MutSliceView):
        return True
    if isinstance(target, SliceView):
        return False
    if isinstance(target, memoryview):
        return not target.readonly
    return isinstance(target, MutableSequence)


__all__ = [
    "SliceView",
    "MutSliceView",
    "is_writable",
]
