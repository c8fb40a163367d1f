#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot name filters $
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

"""Remove vertices from a graph by name."""

############################################################ IMPORTS

import logging

from .graph import Graph
from .utils import NamePattern, name_predicate

############################################################ GLOBALS

logger = logging.getLogger(__name__)

############################################################ FUNCTIONS

def filter_out(graph: Graph, pattern: NamePattern) -> Graph:
    """Copy *graph* without vertices whose names match *pattern*.

    The copy is built from edges: an edge survives when neither endpoint
    matches, and only endpoints of surviving edges become vertices. A
    vertex that had no edges in *graph* is therefore never copied. The
    input graph is not modified.

    Args:
        graph: The graph to copy.
        pattern: Regular expression (string or compiled, searched anywhere
            in the name) or a ``name -> bool`` predicate.

    Returns:
        A new graph of the same class and kind.
    """
    matches = name_predicate(pattern)
    filtered = type(graph)(kind=graph.kind)

    for source, target in graph.edges:
        if matches(source.name) or matches(target.name):
            continue
        filtered.add_edge(source, target)

    logger.debug("Filtered %r down to %r", graph, filtered)
    return filtered


################################################################################
# END
################################################################################
