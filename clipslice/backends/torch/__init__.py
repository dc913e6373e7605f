from __future__ import annotations

"""PyTorch backend: views are ``Tensor.narrow`` along dimension 0.

``narrow`` shares storage with its input. PyTorch has no read-only tensors,
so ``view`` and ``view_mut`` build the same aliasing tensor; ``view`` is
detached from autograd so reads do not extend the graph.
"""

from typing import Any


def _check_tensor(source: Any) -> None:
    if source.dim() == 0:
        raise TypeError("cannot take a range view of a 0-d tensor")


def length(source: Any) -> int:
    _check_tensor(source)
    return int(source.shape[0])


def view(source: Any, start: int, stop: int) -> Any:
    _check_tensor(source)
    return source.detach().narrow(0, start, stop - start)


def view_mut(source: Any, start: int, stop: int) -> Any:
    _check_tensor(source)
    return source.narrow(0, start, stop - start)


__all__ = [
    "length",
    "view",
    "view_mut",
]
