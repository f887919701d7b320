from __future__ import annotations
import numpy as np

from dcb.bits import num_states
from dcb.colorings.base import ArrayColoring
from dcb.registry import GENERATORS

@GENERATORS.register("mirror")
class MirrorColoring:
    """
    Closed-form coloring: a triangle wave over vertex ids.

    Colors climb 0, 1, ..., ndim-1, then descend ndim-1, ..., 0, with period
    2*ndim. Nothing is stored, so it works for dimensions where a 2^ndim table
    would not fit in memory.
    """

    def __init__(self, ndim: int):
        self.ndim = ndim

    @property
    def cycle_len(self) -> int:
        return 2 * self.ndim

    def __getitem__(self, vertex: int) -> int:
        assert 0 <= vertex < num_states(self.ndim), f"vertex {vertex} outside Q_{self.ndim}"
        offset = vertex % self.cycle_len
        if offset < self.ndim:
            return offset
        return self.cycle_len - offset - 1

    def __len__(self) -> int:
        return num_states(self.ndim)

    def __repr__(self) -> str:
        return f"MirrorColoring(ndim={self.ndim})"

    def materialize(self) -> ArrayColoring:
        colors = np.fromiter((self[v] for v in range(len(self))), dtype=np.uint64, count=len(self))
        return ArrayColoring(colors, self.ndim)
