#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot graph builders $
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

"""Populate graphs from an introspection feed.

Type hierarchies produce ``subtype -> supertype`` edges; module
dependencies produce ``importer -> imported`` edges. Both walks use an
explicit stack rather than recursion so deep hierarchies and long import
chains never hit the interpreter's recursion limit.
"""

############################################################ IMPORTS

import logging
from enum import Enum
from typing import Optional

from .entity import ModuleInfo, TypeInfo
from .graph import CLASSES, MODULES, Graph
from .introspect import Feed
from .utils import unique

############################################################ GLOBALS

logger = logging.getLogger(__name__)

############################################################ CLASSES

class Strategy(str, Enum):
    """How far a module dependency walk follows imports."""
    TRANSITIVE = 'transitive'   # Everything reachable
    DIRECT = 'direct'           # One level of imports


class ClassHierarchyBuilder:
    """Adds types and all of their supertypes to a graph.

    A type expanded once by a builder is never expanded again, which keeps
    repeated calls cheap and stops malformed (cyclic) ancestry from
    looping forever.
    """

    def __init__(self, graph: Graph, feed: Optional[Feed] = None):
        if graph.kind is None:
            graph.kind = CLASSES
        self.graph = graph
        self.feed = feed
        self._expanded = set()

    def add_class_with_ancestors(self, info: TypeInfo):
        """Add *info*, its interfaces and its base chain."""
        self.graph.add_vertex(info)
        stack = [info]
        while stack:
            current = stack.pop()
            if current in self._expanded:
                continue
            self._expanded.add(current)

            # Interfaces first, then the base class
            for supertype in current.supertypes():
                self.graph.add_edge(current, supertype)
                if supertype not in self._expanded:
                    stack.append(supertype)

    def add_module_types(self, module: ModuleInfo):
        """Add every type declared in *module* with its ancestors."""
        for info in module.types:
            self.add_class_with_ancestors(info)

    def add_everything(self):
        """Add the types of every module the feed knows about."""
        if self.feed is None:
            raise ValueError("add_everything() needs a feed")
        for module in self.feed.modules():
            self.add_module_types(module)
        logger.debug("Class hierarchy: %r", self.graph)


class ModuleDependencyBuilder:
    """Adds modules and the modules they import to a graph."""

    def __init__(self, graph: Graph, feed: Optional[Feed] = None):
        if graph.kind is None:
            graph.kind = MODULES
        self.graph = graph
        self.feed = feed

    def add_module_with_dependencies(self, module: ModuleInfo,
                                     strategy: Strategy = Strategy.TRANSITIVE):
        """Add *module* and its imports.

        With the transitive strategy an import target is only expanded when
        the edge leading to it is new. Import cycles therefore terminate:
        once ``a -> b`` is recorded, ``b`` is not walked again from ``a``.
        """
        strategy = Strategy(strategy)
        graph = self.graph
        graph.add_vertex(module)

        if strategy is Strategy.DIRECT:
            for imported in unique(module.imports):
                graph.add_edge(module, imported)
            return

        stack = [module]
        while stack:
            current = stack.pop()
            for imported in unique(current.imports):
                if graph.has_edge(current, imported):
                    continue
                graph.add_edge(current, imported)
                stack.append(imported)

    def add_everything(self):
        """Add every module the feed knows about, transitively."""
        if self.feed is None:
            raise ValueError("add_everything() needs a feed")
        for module in self.feed.modules():
            self.add_module_with_dependencies(module, Strategy.TRANSITIVE)
        logger.debug("Module dependencies: %r", self.graph)


############################################################ FUNCTIONS

def add_class_with_ancestors(graph: Graph, info: TypeInfo) -> Graph:
    ClassHierarchyBuilder(graph).add_class_with_ancestors(info)
    return graph


def add_module_types(graph: Graph, module: ModuleInfo) -> Graph:
    ClassHierarchyBuilder(graph).add_module_types(module)
    return graph


def add_module_with_dependencies(graph: Graph, module: ModuleInfo,
                                 strategy: Strategy = Strategy.TRANSITIVE) -> Graph:
    ModuleDependencyBuilder(graph).add_module_with_dependencies(module, strategy)
    return graph


def class_hierarchy(feed: Feed) -> Graph:
    """Graph of every type in *feed* and all of its ancestors."""
    graph = Graph()
    ClassHierarchyBuilder(graph, feed).add_everything()
    return graph


def module_dependencies(feed: Feed) -> Graph:
    """Graph of every module in *feed* and everything it imports."""
    graph = Graph()
    ModuleDependencyBuilder(graph, feed).add_everything()
    return graph


################################################################################
# END
################################################################################
