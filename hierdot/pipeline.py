#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot pipeline (feed -> build -> filter -> write) $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# pylint: disable=line-too-long
# $FrauBSD$
# pylint: enable=line-too-long
# pylint: disable=too-many-arguments
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""Wire a feed, a builder, the name filter and a DOT writer together."""

############################################################ IMPORTS

import importlib
import logging
import sys
from typing import Iterable, Optional, TextIO

from .analyzer import SourceFeed
from .builders import ClassHierarchyBuilder, ModuleDependencyBuilder, Strategy
from .dot import write_dot, write_ranked_dot
from .errors import HierdotError, UnknownEntityError
from .filters import filter_out
from .graph import CLASSES, MODULES, Graph
from .introspect import Feed, RuntimeFeed
from .manifest import ManifestFeed
from .utils import NamePattern, plur

############################################################ GLOBALS

logger = logging.getLogger(__name__)

GRAPH_KINDS = (CLASSES, MODULES)

############################################################ FUNCTIONS

def make_feed(path: Optional[str] = None, manifest: Optional[str] = None,
              imports: Iterable[str] = ()) -> Feed:
    """Pick a feed: a manifest file, a source tree, or the running program.

    Args:
        path: Project directory to parse statically.
        manifest: JSON manifest file.
        imports: Module names to import before reflecting on the runtime.
    """
    if manifest and path:
        raise HierdotError("Use either a source path or a manifest, not both")
    if manifest:
        return ManifestFeed.load(manifest)
    if path:
        return SourceFeed(path)

    for name in imports:
        try:
            importlib.import_module(name)
        except ImportError as e:
            raise HierdotError(f"Cannot import {name}: {e}") from e
    return RuntimeFeed()


def build_graph(feed: Feed, kind: str = 'classes', start: Optional[str] = None,
                strategy: Strategy = Strategy.TRANSITIVE) -> Graph:
    """Build a class hierarchy or module dependency graph from *feed*.

    With *start*, only that entity is walked: a type (classes) or a module
    (modules). For classes, *start* may also name a module, in which case
    its declared types are walked.
    """
    if kind not in GRAPH_KINDS:
        raise HierdotError(f"Unknown graph kind: {kind}")

    graph = Graph(kind)

    if kind == MODULES:
        builder = ModuleDependencyBuilder(graph, feed)
        if start is None:
            builder.add_everything()
        else:
            builder.add_module_with_dependencies(feed.module(start), strategy)
        return graph

    builder = ClassHierarchyBuilder(graph, feed)
    if start is None:
        builder.add_everything()
        return graph

    try:
        builder.add_class_with_ancestors(feed.find_type(start))
    except UnknownEntityError:
        builder.add_module_types(feed.module(start))
    return graph


def run_introspection(
    feed: Feed,
    kind: str = 'classes',
    start: Optional[str] = None,
    strategy: Strategy = Strategy.TRANSITIVE,
    exclude: Optional[NamePattern] = None,
    ranked: bool = False,
    uml: bool = False,
    output_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> Graph:
    """Main entry point: build, filter and write a graph.

    Args:
        feed: Introspection feed.
        kind: 'classes' or 'modules'.
        start: Entity to start from (default: everything).
        strategy: Module walk strategy when *start* is given.
        exclude: Names to filter out (regex or predicate).
        ranked: Rank vertices by in-degree (modules only).
        uml: Draw types with members as UML records.
        output_file: Write output to file (or *stream*/stdout if None).
        stream: Sink used when there is no *output_file*.

    Returns:
        The graph that was written.
    """
    if ranked and kind != MODULES:
        raise HierdotError("Ranked output is only available for modules")

    graph = build_graph(feed, kind, start, strategy)

    v = len(graph)
    e = graph.edge_count
    print(f"Found {v} {plur(v, 'vertex', 'vertices')},"
          f" {e} {plur(e, 'edge')}", file=sys.stderr)

    if exclude is not None:
        graph = filter_out(graph, exclude)
        v = len(graph)
        print(f"Kept {v} {plur(v, 'vertex', 'vertices')} after filtering",
              file=sys.stderr)

    def write(out: TextIO):
        if ranked:
            write_ranked_dot(graph, out)
        else:
            write_dot(graph, out, uml=uml)

    if output_file:
        with open(output_file, 'w', encoding='utf-8') as f:
            write(f)
        print(f"Wrote {kind} graph to: {output_file}", file=sys.stderr)
    else:
        write(stream if stream is not None else sys.stdout)

    return graph


################################################################################
# END
################################################################################
