from __future__ import annotations
import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO
from tqdm import tqdm

from dcb.bits import neighbors, num_states, popcount, set_bit
from dcb.colorings.base import Coloring, palette_size

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    ndim: int
    expected: int
    vertex: Optional[int] = None
    colors_seen: Optional[int] = None
    count: Optional[int] = None

    def __bool__(self) -> bool:
        return self.ok

    def describe(self) -> str:
        if self.ok:
            return f"all {num_states(self.ndim)} neighborhoods see {self.expected} colors"
        return (
            f"For state {self.vertex:0{self.ndim}b}, saw {self.count} "
            f"({self.colors_seen:0{self.ndim}b}) colors, expected {self.expected:d}"
        )

def neighborhood_colors(coloring: Coloring, vertex: int, ndim: int) -> int:
    """Bitmask of the colors on ``vertex`` and its ``ndim`` neighbors."""
    colors_seen = set_bit(0, coloring[vertex], 1)
    for neighbor in neighbors(vertex, ndim):
        colors_seen = set_bit(colors_seen, coloring[neighbor], 1)
    return colors_seen

def validate(
    coloring: Coloring,
    ndim: int,
    out: Optional[TextIO] = None,
    progress: bool = False,
) -> ValidationResult:
    """
    Check that every closed neighborhood of Q_ndim holds exactly ``ndim`` colors.

    Stops at the first vertex that does not and writes one diagnostic line for
    it to ``out`` (stdout by default). Never raises on a bad coloring.
    """
    out = sys.stdout if out is None else out
    n_states = num_states(ndim)
    n_colors = palette_size(ndim)

    for vertex in tqdm(range(n_states), desc=f"validate n={ndim}", disable=not progress, leave=False):
        colors_seen = neighborhood_colors(coloring, vertex, ndim)
        count = popcount(colors_seen)
        if count != n_colors:
            result = ValidationResult(
                ok=False, ndim=ndim, expected=n_colors,
                vertex=vertex, colors_seen=colors_seen, count=count,
            )
            logger.debug("ndim=%d fails at vertex %d after %d checks", ndim, vertex, vertex + 1)
            print(result.describe(), file=out)
            return result

    return ValidationResult(ok=True, ndim=ndim, expected=n_colors)
