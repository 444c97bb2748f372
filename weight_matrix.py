"""
Dense matrix export of a graph's edge weights.
"""

from typing import Dict, List, Tuple

import numpy as np

from graph import Graph, V


def weight_matrix(graph: Graph[V]) -> Tuple[List[V], np.ndarray]:
    """
    Return (vertex order, matrix) with matrix[i, j] the lightest edge i -> j.

    Rows and columns follow vertex insertion order. Pairs without an edge hold
    inf; parallel edges collapse to their minimum weight.
    """
    order = list(graph.vertices())
    index: Dict[V, int] = {vertex: i for i, vertex in enumerate(order)}
    matrix = np.full((len(order), len(order)), np.inf)

    for vertex in order:
        i = index[vertex]
        for edge in graph.outgoing(vertex):
            j = index[edge.target]
            matrix[i, j] = min(matrix[i, j], edge.weight)

    return order, matrix
