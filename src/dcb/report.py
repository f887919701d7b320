from __future__ import annotations
import sys
from typing import Optional, TextIO

from dcb.bits import num_states
from dcb.colorings.base import Coloring, palette_size
from dcb.validate import ValidationResult

SQUARE = (
    "  (10) o ----- o (11)   (00) : {0:d} \n"
    "       |       |        (01) : {1:d} \n"
    "       |       |        (10) : {2:d} \n"
    "  (00) o-------o (01)   (11) : {3:d} \n"
)

CUBE = (
    "\n"
    "    (110) o-------o (111)   (000) : {0:d} \n"
    "         /|      /|         (001) : {1:d} \n"
    " (010)  / |     / |         (010) : {2:d} \n"
    "       o ----- o  o (101)   (011) : {3:d} \n"
    "       | /     | /          (100) : {4:d} \n"
    "       |/      |/           (101) : {5:d} \n"
    " (000) o-------o (001)      (110) : {6:d} \n"
    "                            (111) : {7:d} \n"
)

# ndim -> template taking the first 2^ndim colors positionally
DIAGRAMS = {2: SQUARE, 3: CUBE}

def render_coloring(coloring: Coloring, ndim: int) -> str:
    template = DIAGRAMS.get(ndim)
    if template is not None:
        return template.format(*(coloring[v] for v in range(num_states(ndim))))
    if ndim == 4:
        # no 4-cube layout; a note stands in for the drawing
        return "No diagram for dimension 4\n"
    return f"No visualization for dimension {ndim}\n"

def print_coloring(coloring: Coloring, ndim: int, out: Optional[TextIO] = None) -> None:
    out = sys.stdout if out is None else out
    out.write(render_coloring(coloring, ndim))

def print_header(ndim: int, out: Optional[TextIO] = None) -> None:
    out = sys.stdout if out is None else out
    out.write(f"\n\nn = {ndim}, {num_states(ndim)} states, {palette_size(ndim)} colors\n")

def print_verdict(result: ValidationResult, out: Optional[TextIO] = None) -> None:
    out = sys.stdout if out is None else out
    out.write(f"Validated: {'yes' if result else 'no'}\n")
