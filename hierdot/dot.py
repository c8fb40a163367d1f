#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot DOT language writers $
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

"""Write graphs in the Graphviz DOT language.

Plain output for a type hierarchy looks like this (``dot -Tpng`` draws
subtypes below the types they derive from):

    digraph {
        rankdir=BT;

        node[rank=source, shape=box, color=blue, penwidth=2];
        //Interface nodes.
        "app.Editable";

        node[color=black];
        //Class nodes.
        "app.Widget";

        "app.Widget" -> "app.Editable";
    }

Names are written between double quotes exactly as they are; names
containing a double quote produce invalid DOT.

The writers only call ``out.write()``, in order, so any text sink works:
a file, ``sys.stdout`` or an ``io.StringIO``. Errors raised by the sink
propagate and leave the output partially written.
"""

############################################################ IMPORTS

import io
from collections import defaultdict
from typing import Dict, List, Optional, TextIO

from .entity import NamedEntity, TypeInfo, is_interface
from .graph import CLASSES, Graph

############################################################ GLOBALS

# Characters with meaning inside record labels
RECORD_SPECIALS = '{}|<>"\\'

############################################################ FUNCTIONS

def label(entity: NamedEntity) -> str:
    """Quoted DOT identifier for an entity."""
    return f'"{entity.name}"'


def record_escape(text: str) -> str:
    return ''.join(f"\\{c}" if c in RECORD_SPECIALS else c for c in text)


def node_statement(entity: NamedEntity, uml: bool = False) -> str:
    """One node line, with a UML record label when members are known."""
    members = getattr(entity, 'members', None) if uml else None
    if not members:
        return f"\t{label(entity)};\n"
    short = getattr(entity, 'short_name', entity.name)
    body = ''.join(f"{record_escape(m)}\\l" for m in members)
    return (f"\t{label(entity)} [shape=record, "
            f"label=\"{{{record_escape(short)}|{body}}}\"];\n")


def _write_edges(graph: Graph, out: TextIO):
    for source, target in graph.edges:
        out.write(f"\t{label(source)} -> {label(target)};\n")


def write_dot(graph: Graph, out: TextIO, uml: bool = False,
              kind: Optional[str] = None):
    """Write *graph* as DOT to *out*.

    Type graphs list interfaces (blue, bold, rank=source) before classes.
    Module graphs have no interfaces and list every module as a box.

    Args:
        graph: Graph of TypeInfo or ModuleInfo vertices.
        out: Text sink with a ``write()`` method.
        uml: Draw types with known members as UML-style record nodes.
            Entities without members are drawn exactly as in names mode.
        kind: CLASSES or MODULES layout. Defaults to the graph's own kind;
            a graph without one is laid out by looking at its vertices.
    """
    vertices = graph.vertices
    kind = kind or graph.kind
    if kind is None:
        typed = any(isinstance(v, TypeInfo) for v in vertices)
    else:
        typed = kind == CLASSES

    out.write('digraph {\n')
    out.write('\trankdir=BT;\n\n')

    if typed:
        # Interfaces up front, so the node settings apply to them
        out.write('\tnode[rank=source, shape=box, color=blue, penwidth=2];\n')
        out.write('\t//Interface nodes.\n')
        for vertex in vertices:
            if is_interface(vertex):
                out.write(node_statement(vertex, uml))

        out.write('\n\tnode[color=black];\n')
        out.write('\t//Class nodes.\n')
        for vertex in vertices:
            if not is_interface(vertex):
                out.write(node_statement(vertex, uml))
    else:
        out.write('\tnode[shape=box, color=black];\n')
        out.write('\t//Module nodes.\n')
        for vertex in vertices:
            out.write(node_statement(vertex, uml))

    out.write('\n')
    _write_edges(graph, out)
    out.write('}\n')


def rank_buckets(graph: Graph) -> Dict[int, List]:
    """Group vertices by in-degree, smallest count first.

    Every vertex lands in exactly one bucket; vertices with no incoming
    edges are in bucket 0.
    """
    buckets = defaultdict(list)
    for vertex, count in graph.in_degrees().items():
        buckets[count].append(vertex)
    return {count: buckets[count] for count in sorted(buckets)}


def write_ranked_dot(graph: Graph, out: TextIO):
    """Write *graph* as DOT with vertices ranked by in-degree.

    A chain of unboxed, arrowless rank nodes (one per distinct in-degree,
    ascending) gives the layout engine an order of ranks; each vertex is
    pinned to the rank of its in-degree with ``{rank=same ...}``. The most
    depended-upon modules end up at the top.
    """
    buckets = rank_buckets(graph)

    out.write('digraph {\n')
    out.write('\trankdir=BT;\n')
    out.write('\tsplines=ortho;\n\n')

    if buckets:
        out.write('\tnode[shape=none];\n')
        out.write('\tedge[arrowhead=none];\n')
        out.write('\t' + ' -> '.join(str(count) for count in buckets) + ';\n\n')

        for count, members in buckets.items():
            out.write(f"\t{{rank=same {count};")
            for vertex in members:
                out.write(f" {label(vertex)};")
            out.write('}\n')
        out.write('\n')

    out.write('\tnode[shape=box, color=black];\n')
    out.write('\tedge[arrowhead=normal];\n')
    for vertex in graph.vertices:
        out.write(node_statement(vertex))

    out.write('\n')
    _write_edges(graph, out)
    out.write('}\n')


def to_dot(graph: Graph, ranked: bool = False, uml: bool = False,
           kind: Optional[str] = None) -> str:
    """Render *graph* to a DOT string."""
    buf = io.StringIO()
    if ranked:
        write_ranked_dot(graph, buf)
    else:
        write_dot(graph, buf, uml=uml, kind=kind)
    return buf.getvalue()


################################################################################
# END
################################################################################
