from __future__ import annotations
import networkx as nx

from dcb.bits import num_states
from dcb.colorings.base import Coloring, palette_size

# above this the networkx view gets slow enough to be pointless as a cross-check
MAX_GRAPH_NDIM = 12

def hypercube_graph(ndim: int) -> nx.Graph:
    """
    Q_ndim with integer vertex ids, bit i of the id being coordinate i.
    networkx labels hypercube nodes with coordinate tuples (a bare int when
    ndim == 1); relabel them so the ids agree with the bit helpers.
    """
    assert ndim >= 1, "networkx has no vertex for Q_0"
    g = nx.hypercube_graph(ndim)
    mapping = {}
    for node in g.nodes():
        coords = node if isinstance(node, tuple) else (node,)
        mapping[node] = sum(int(bit) << i for i, bit in enumerate(coords))
    return nx.relabel_nodes(g, mapping)

def attach_colors(g: nx.Graph, coloring: Coloring) -> nx.Graph:
    """Store ``coloring[v]`` on every node as the ``color`` attribute."""
    nx.set_node_attributes(g, {v: coloring[v] for v in g.nodes()}, name="color")
    return g

def is_perfect_coloring(g: nx.Graph, ndim: int) -> bool:
    """Every closed neighborhood of ``g`` carries exactly ``palette_size(ndim)`` node colors."""
    want = palette_size(ndim)
    color = nx.get_node_attributes(g, "color")
    for v in g.nodes():
        seen = {color[v]}
        seen.update(color[u] for u in g.neighbors(v))
        if len(seen) != want:
            return False
    return True

def cross_check(coloring: Coloring, ndim: int) -> bool | None:
    """Verdict from the graph view, or None when ``ndim`` is out of its range."""
    if not 1 <= ndim <= MAX_GRAPH_NDIM:
        return None
    g = attach_colors(hypercube_graph(ndim), coloring)
    assert g.number_of_nodes() == num_states(ndim)
    return is_perfect_coloring(g, ndim)
