from __future__ import annotations

"""Lazy backend resolution utilities.

Backends are imported only on demand so that NumPy and PyTorch are never
imported unless a source from one of them is actually passed in.
"""

import logging
from collections.abc import Sequence
from importlib import import_module
from types import ModuleType

from .core.errors import ClipSliceError

logger = logging.getLogger(__name__)


class MissingBackend(ClipSliceError, TypeError):
    """Raised when no backend can build a view over the given source."""


def _is_sequence(source: object) -> bool:
    # memoryview is registered as a Sequence
    return isinstance(source, Sequence)


def _is_numpy_array(source: object) -> bool:
    mod = type(source).__module__
    return mod == "numpy" or mod.startswith("numpy.")


def _is_torch_tensor(source: object) -> bool:
    """Best-effort detection for PyTorch tensors.

    The module-name check runs first so that torch is only imported for
    objects that already come from it. When torch imports, an isinstance
    check against ``torch.Tensor`` confirms the match.
    """
    mod = type(source).__module__
    if not (mod == "torch" or mod.startswith("torch.")):
        return False
    try:
        torch_mod = import_module("torch")
    except Exception:
        return True
    tensor_cls = getattr(torch_mod, "Tensor", None)
    if tensor_cls is None:
        return True
    return isinstance(source, tensor_cls)


def get_backend_or_raise(source: object) -> ModuleType:
    """Return the backend module able to build views over ``source``.

    The returned module exposes:
    - length(source)
    - view(source, start, stop)
    - view_mut(source, start, stop)
    """

    if _is_sequence(source):
        return import_module("clipslice.backends.sequence")

    if _is_numpy_array(source):
        logger.debug("Resolved numpy backend for %s", type(source).__name__)
        try:
            return import_module("clipslice.backends.numpy")
        except Exception as exc:  # pragma: no cover - defensive
            raise MissingBackend(
                "NumPy backend not available. Install with: pip install 'clipslice[numpy]'."
            ) from exc

    if _is_torch_tensor(source):
        logger.debug("Resolved torch backend for %s", type(source).__name__)
        try:
            return import_module("clipslice.backends.torch")
        except Exception as exc:  # pragma: no cover - defensive
            raise MissingBackend(
                "PyTorch backend not available. Install with: pip install 'clipslice[torch]'."
            ) from exc

    logger.debug("No backend for source type %s", type(source).__qualname__)
    raise MissingBackend(
        f"Unsupported source type {type(source).__name__}. Expected a sequence, "
        "memoryview, NumPy array or PyTorch tensor."
    )


__all__ = [
    "MissingBackend",
    "get_backend_or_raise",
]
