from __future__ import annotations

import logging
import sys
from types import ModuleType

import pytest

from clipslice._lazy import MissingBackend, get_backend_or_raise


def _install_fake_torch(monkeypatch):
    torch = ModuleType("torch")

    class Tensor:  # noqa: D401 - stub
        """Stub Tensor"""

    Tensor.__module__ = "torch"
    torch.Tensor = Tensor  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "torch", torch)
    return torch


def test_sequences_use_sequence_backend() -> None:
    for source in ([1], (1,), "a", b"a", range(2), bytearray(b"a"), memoryview(b"a")):
        assert get_backend_or_raise(source).__name__ == "clipslice.backends.sequence"


def test_memoryviews_resolve_as_sequences() -> None:
    grid = memoryview(bytearray(6)).cast("B", (2, 3))
    assert get_backend_or_raise(grid).__name__ == "clipslice.backends.sequence"


def test_numpy_module_name_selects_numpy_backend() -> None:
    class FakeArray:
        pass

    FakeArray.__module__ = "numpy"
    assert get_backend_or_raise(FakeArray()).__name__ == "clipslice.backends.numpy"


def test_torch_tensor_selects_torch_backend(monkeypatch) -> None:
    torch = _install_fake_torch(monkeypatch)
    assert get_backend_or_raise(torch.Tensor()).__name__ == "clipslice.backends.torch"


def test_non_tensor_torch_object_is_rejected(monkeypatch) -> None:
    _install_fake_torch(monkeypatch)

    class Device:
        pass

    Device.__module__ = "torch"
    with pytest.raises(MissingBackend):
        get_backend_or_raise(Device())


def test_unknown_source_raises(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="clipslice._lazy"):
        with pytest.raises(MissingBackend) as info:
            get_backend_or_raise(object())
    assert "Unsupported source type" in str(info.value)
    assert any("No backend" in rec.getMessage() for rec in caplog.records)


def test_missing_backend_is_type_error() -> None:
    assert issubclass(MissingBackend, TypeError)
