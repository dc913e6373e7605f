from __future__ import annotations

import pytest

from clipslice.core.types import Bounded, FromStart, Full, ToEnd, as_range


def test_slice_maps_to_matching_shape() -> None:
    assert as_range(slice(-4, -1)) == Bounded(-4, -1)
    assert as_range(slice(-2, None)) == FromStart(-2)
    assert as_range(slice(None, -2)) == ToEnd(-2)
    assert as_range(slice(None)) == Full()
    assert as_range(slice(1, 3, 1)) == Bounded(1, 3)


def test_shapes_pass_through() -> None:
    shape = Bounded(1, 2)
    assert as_range(shape) is shape
    assert as_range(Full()) == Full()


def test_stepped_slice_rejected() -> None:
    with pytest.raises(ValueError):
        as_range(slice(0, 4, 2))
    with pytest.raises(ValueError):
        as_range(slice(None, None, -1))


def test_unknown_range_rejected() -> None:
    with pytest.raises(TypeError):
        as_range((0, 2))  # type: ignore[arg-type]


def test_endpoints_must_be_integers() -> None:
    with pytest.raises(TypeError):
        Bounded(0, 1.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        FromStart("1")  # type: ignore[arg-type]


def test_shapes_are_frozen() -> None:
    shape = ToEnd(-1)
    with pytest.raises(AttributeError):
        shape.end = 3  # type: ignore[misc]
