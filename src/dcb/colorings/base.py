from __future__ import annotations
from typing import Iterator, Protocol, runtime_checkable
import numpy as np

from dcb.bits import num_states

@runtime_checkable
class Coloring(Protocol):
    """Anything that maps a vertex id of Q_ndim to a color id in [0, ndim)."""
    ndim: int

    def __getitem__(self, vertex: int) -> int:
        ...

    def __len__(self) -> int:
        ...

def palette_size(ndim: int) -> int:
    # one color per dimension, not rounded up to an even count
    return ndim

class ArrayColoring:
    """Lookup-table coloring backed by a numpy array of length 2^ndim."""

    def __init__(self, colors: np.ndarray, ndim: int):
        colors = np.asarray(colors, dtype=np.uint64)
        if colors.ndim != 1 or colors.shape[0] != num_states(ndim):
            raise ValueError(f"expected {num_states(ndim)} colors for ndim={ndim}, got shape {colors.shape}")
        self.colors = colors
        self.ndim = ndim

    def __getitem__(self, vertex: int) -> int:
        return int(self.colors[vertex])

    def __len__(self) -> int:
        return self.colors.shape[0]

    def __iter__(self) -> Iterator[int]:
        return (int(c) for c in self.colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayColoring):
            return NotImplemented
        return self.ndim == other.ndim and np.array_equal(self.colors, other.colors)

    def __repr__(self) -> str:
        return f"ArrayColoring(ndim={self.ndim}, colors={self.colors.tolist()})"

    def tolist(self) -> list[int]:
        return [int(c) for c in self.colors]

def color_histogram(coloring: Coloring, ndim: int) -> np.ndarray:
    """Number of vertices carrying each color, indexed by color id."""
    colors = np.fromiter((coloring[v] for v in range(num_states(ndim))), dtype=np.int64)
    return np.bincount(colors, minlength=palette_size(ndim))
