#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot directed graph $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# pylint: disable=line-too-long
# $FrauBSD$
# pylint: enable=line-too-long
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""A small generic directed graph.

Vertices and edges are kept in insertion-ordered sets (dicts), so a graph
built twice from the same feed iterates, and therefore renders, the same
way both times. There is no removal; use ``filters.filter_out`` to derive
a smaller graph.
"""

############################################################ IMPORTS

from collections import defaultdict
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

from .entity import NamedEntity

############################################################ GLOBALS

V = TypeVar('V', bound=NamedEntity)

# Graph kinds
CLASSES = 'classes'
MODULES = 'modules'

############################################################ CLASSES

class Graph(Generic[V]):
    """Directed graph over hashable vertices without parallel edges.

    *kind* records what the vertices are (CLASSES or MODULES) so that an
    empty graph still renders with the right layout. The builders set it
    on graphs that do not have one yet.
    """

    def __init__(self, kind: Optional[str] = None):
        self.kind = kind
        self._vertices = {}                 # vertex -> None (ordered set)
        self._edges = {}                    # (from, to) -> None
        self._outgoing = defaultdict(dict)  # vertex -> {successor: None}
        self._incoming = defaultdict(dict)  # vertex -> {predecessor: None}

    def add_vertex(self, vertex: V):
        """Add a vertex. Adding a known vertex is a no-op."""
        self._vertices.setdefault(vertex, None)

    def add_edge(self, source: V, target: V):
        """Add both endpoints and the edge ``source -> target``.

        Adding an existing edge is a no-op.
        """
        self.add_vertex(source)
        self.add_vertex(target)
        if (source, target) in self._edges:
            return
        self._edges[(source, target)] = None
        self._outgoing[source][target] = None
        self._incoming[target][source] = None

    def has_vertex(self, vertex: V) -> bool:
        return vertex in self._vertices

    def has_edge(self, source: V, target: V) -> bool:
        return (source, target) in self._edges

    @property
    def vertices(self) -> Tuple[V, ...]:
        """Snapshot of the vertices, in insertion order."""
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Tuple[V, V], ...]:
        return tuple(self._edges)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def successors(self, vertex: V) -> List[V]:
        return list(self._outgoing.get(vertex, ()))

    def predecessors(self, vertex: V) -> List[V]:
        return list(self._incoming.get(vertex, ()))

    def in_degrees(self) -> Dict[V, int]:
        """Map every vertex to its number of incoming edges.

        Vertices nobody points at are present with a count of 0.
        """
        return {vertex: len(self._incoming.get(vertex, ()))
                for vertex in self._vertices}

    def __contains__(self, vertex) -> bool:
        return vertex in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return (f"<{type(self).__name__} {len(self._vertices)} vertices, "
                f"{len(self._edges)} edges>")


################################################################################
# END
################################################################################
