from dcb.colorings.base import ArrayColoring, Coloring, color_histogram, palette_size
from dcb.colorings.bfs import generate_bfs
from dcb.colorings.mirror import MirrorColoring

__all__ = [
    "ArrayColoring",
    "Coloring",
    "MirrorColoring",
    "color_histogram",
    "generate_bfs",
    "palette_size",
]
