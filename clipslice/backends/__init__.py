from __future__ import annotations

"""Backend package providing storage-specific view construction.

Each backend module exposes the same surface: ``length(source)``,
``view(source, start, stop)`` and ``view_mut(source, start, stop)``. Bounds
are already clipped by the core; backends only build the aliasing view.
"""

__all__ = []
