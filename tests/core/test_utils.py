from __future__ import annotations

import pytest

from clipslice.core.utils import check_index, clamp, clip_bound


def test_clamp_inclusive_bounds() -> None:
    assert clamp(-1, 0, 5) == 0
    assert clamp(7, 0, 5) == 5
    assert clamp(3, 0, 5) == 3


@pytest.mark.parametrize("length", [0, 1, 4, 6])
def test_clip_bound_always_within_length(length: int) -> None:
    for pos in range(-3 * length - 5, 3 * length + 5):
        assert 0 <= clip_bound(pos, length) <= length


@pytest.mark.parametrize("length", [0, 1, 6])
def test_clip_bound_zero_and_past_end(length: int) -> None:
    assert clip_bound(0, length) == 0
    for pos in range(length, length + 10):
        assert clip_bound(pos, length) == length


@pytest.mark.parametrize("length", [0, 1, 6])
def test_clip_bound_negative_past_front_is_zero(length: int) -> None:
    assert clip_bound(-length, length) == 0
    for k in range(-length - 10, -length + 1):
        assert clip_bound(k, length) == 0


def test_clip_bound_counts_from_back() -> None:
    assert clip_bound(-1, 6) == 5
    assert clip_bound(-2, 6) == 4
    assert clip_bound(2, 6) == 2


def test_clip_bound_huge_magnitudes() -> None:
    assert clip_bound(-(2**80), 6) == 0
    assert clip_bound(2**80, 6) == 6


def test_clip_bound_rejects_negative_length() -> None:
    with pytest.raises(ValueError):
        clip_bound(0, -1)


def test_clip_bound_rejects_non_integer() -> None:
    with pytest.raises(TypeError):
        clip_bound(1.5, 4)  # type: ignore[arg-type]


def test_check_index() -> None:
    assert check_index(0, 3) == 0
    assert check_index(2, 3) == 2
    with pytest.raises(IndexError):
        check_index(3, 3)
    with pytest.raises(IndexError):
        check_index(-1, 3)
    with pytest.raises(TypeError):
        check_index("0", 3)  # type: ignore[arg-type]
