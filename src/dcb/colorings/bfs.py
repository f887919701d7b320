from __future__ import annotations
import heapq
import logging
from typing import List, Tuple
import numpy as np

from dcb.bits import get_bit, hamming_weight, num_states, set_bit
from dcb.colorings.base import ArrayColoring, palette_size
from dcb.registry import GENERATORS

logger = logging.getLogger(__name__)

def topological_key(vertex: int) -> Tuple[int, int]:
    """Frontier order: lower Hamming weight first, then higher id first."""
    return (hamming_weight(vertex), -vertex)

# the color table and open/closed marks are 2^ndim entries each
MAX_BFS_NDIM = 24

@GENERATORS.register("bfs", max_ndim=MAX_BFS_NDIM)
def generate_bfs(ndim: int) -> ArrayColoring:
    """
    Cycle over the palette while walking Q_ndim upward from vertex 0.

    The frontier is a heap keyed by ``topological_key``; only edges that set a
    currently-clear bit are followed, so every vertex is pushed once (``opened``)
    and colored when it is first popped (``closed``).
    Cost: O(2^n * n * log 2^n).
    """
    n_states = num_states(ndim)
    # ndim == 0 is a lone vertex; keep the modulus non-zero
    n_colors = max(palette_size(ndim), 1)
    next_color = 0

    result = np.zeros(n_states, dtype=np.uint64)
    opened = np.zeros(n_states, dtype=bool)
    closed = np.zeros(n_states, dtype=bool)

    frontier: List[Tuple[Tuple[int, int], int]] = [(topological_key(0), 0)]
    opened[0] = True

    while frontier:
        _, current = heapq.heappop(frontier)
        assert current < n_states

        if not closed[current]:
            closed[current] = True
            result[current] = next_color
            next_color = (next_color + 1) % n_colors

        for i in range(ndim):
            if get_bit(current, i) == 0:
                child = set_bit(current, i, 1)
                if not opened[child]:
                    opened[child] = True
                    heapq.heappush(frontier, (topological_key(child), child))

    logger.debug("bfs coloring for ndim=%d: %d vertices, %d colors", ndim, n_states, n_colors)
    return ArrayColoring(result, ndim)
