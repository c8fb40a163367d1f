"""
Tests for the class hierarchy and module dependency builders.
"""

import pytest

from hierdot.builders import (
    ClassHierarchyBuilder,
    ModuleDependencyBuilder,
    Strategy,
    add_class_with_ancestors,
    add_module_types,
    add_module_with_dependencies,
    class_hierarchy,
    module_dependencies,
)
from hierdot.entity import ModuleInfo, TypeInfo
from hierdot.graph import Graph


def names(vertices):
    return {v.name for v in vertices}


def edge_names(graph):
    return {(a.name, b.name) for a, b in graph.edges}


def assert_edges_imply_vertices(graph):
    vertices = set(graph.vertices)
    for a, b in graph.edges:
        assert a in vertices
        assert b in vertices


class TestClassHierarchyBuilder:
    """Tests for type ancestry walks."""

    def test_ancestors_of_single_class(self, widget_feed):
        """Walking one class adds its whole ancestry."""
        graph = add_class_with_ancestors(
            Graph(), widget_feed.find_type("NotSoSpecialWidget"))

        assert names(graph.vertices) == {
            "NotSoSpecialWidget", "Widget", "Tweakable", "Editable", "object"}
        assert edge_names(graph) == {
            ("NotSoSpecialWidget", "Widget"),
            ("Widget", "Tweakable"),
            ("Widget", "object"),
            ("Tweakable", "Editable"),
        }
        assert_edges_imply_vertices(graph)

    def test_interface_flags(self, widget_feed):
        """Interfaces have no base and are not the root."""
        assert widget_feed.find_type("Editable").is_interface
        assert widget_feed.find_type("Tweakable").is_interface
        assert not widget_feed.find_type("Widget").is_interface
        assert not widget_feed.find_type("object").is_interface

    def test_module_types(self, widget_feed):
        """All declared types of a module are walked."""
        graph = add_module_types(Graph(), widget_feed.module("example"))
        assert ("SuperSpecialWidget", "Special") in edge_names(graph)
        assert ("SuperSpecialWidget", "SpecialWidget") in edge_names(graph)
        assert len(graph) == 8

    def test_add_everything(self, widget_feed):
        """Every module's types end up in the graph."""
        graph = class_hierarchy(widget_feed)
        assert len(graph) == 8
        assert graph.edge_count == 7
        assert_edges_imply_vertices(graph)

    def test_add_everything_needs_feed(self):
        """add_everything() without a feed is an error."""
        with pytest.raises(ValueError):
            ClassHierarchyBuilder(Graph()).add_everything()

    def test_repeated_walks_idempotent(self, widget_feed):
        """Walking the same type twice changes nothing."""
        graph = Graph()
        builder = ClassHierarchyBuilder(graph, widget_feed)
        builder.add_class_with_ancestors(widget_feed.find_type("Widget"))
        before = (list(graph.vertices), list(graph.edges))
        builder.add_class_with_ancestors(widget_feed.find_type("Widget"))
        assert (list(graph.vertices), list(graph.edges)) == before

    def test_cyclic_ancestry_terminates(self):
        """Malformed cyclic interfaces do not loop forever."""
        a = TypeInfo("A")
        b = TypeInfo("B", interfaces=[a])
        a.interfaces.append(b)
        graph = add_class_with_ancestors(Graph(), a)
        assert edge_names(graph) == {("A", "B"), ("B", "A")}

    def test_shared_ancestors_expanded_once(self):
        """A diamond keeps a single copy of the shared ancestor edges."""
        root = TypeInfo("object", is_root=True)
        top = TypeInfo("Top")
        left = TypeInfo("Left", interfaces=[top])
        right = TypeInfo("Right", interfaces=[top])
        bottom = TypeInfo("Bottom", base=root, interfaces=[left, right])
        graph = add_class_with_ancestors(Graph(), bottom)
        assert graph.edge_count == 5
        assert set(graph.predecessors(top)) == {left, right}


class TestModuleDependencyBuilder:
    """Tests for module import walks."""

    def test_cycle_terminates(self):
        """A imports B, B imports A: two vertices, two edges."""
        a, b = ModuleInfo("A"), ModuleInfo("B")
        a.imports.append(b)
        b.imports.append(a)
        graph = add_module_with_dependencies(Graph(), a, Strategy.TRANSITIVE)
        assert set(graph.vertices) == {a, b}
        assert set(graph.edges) == {(a, b), (b, a)}

    def test_transitive_follows_chain(self, widget_feed):
        """The transitive strategy reaches everything."""
        graph = add_module_with_dependencies(Graph(),
                                             widget_feed.module("example"))
        assert edge_names(graph) == {
            ("example", "hier"),
            ("example", "std.stdio"),
            ("hier", "std.stdio"),
            ("hier", "std.regex"),
            ("std.regex", "std.stdio"),
            ("std.stdio", "std.regex"),
        }
        assert_edges_imply_vertices(graph)

    def test_direct_stops_after_one_level(self, widget_feed):
        """The direct strategy does not recurse."""
        graph = add_module_with_dependencies(
            Graph(), widget_feed.module("example"), Strategy.DIRECT)
        assert edge_names(graph) == {("example", "hier"),
                                     ("example", "std.stdio")}

    def test_strategy_from_string(self, widget_feed):
        """Strategies may be given by value."""
        graph = add_module_with_dependencies(
            Graph(), widget_feed.module("hier"), "direct")
        assert graph.edge_count == 2

    def test_repeated_imports_deduplicated(self, widget_feed):
        """Repeated imports produce a single edge."""
        graph = add_module_with_dependencies(
            Graph(), widget_feed.module("std.regex"), Strategy.DIRECT)
        assert list(edge_names(graph)) == [("std.regex", "std.stdio")]

    def test_module_without_imports(self):
        """A leaf module is still a vertex."""
        leaf = ModuleInfo("leaf")
        graph = add_module_with_dependencies(Graph(), leaf)
        assert list(graph.vertices) == [leaf]
        assert graph.edge_count == 0

    def test_add_everything(self, widget_feed):
        """Every module of the feed is walked."""
        graph = module_dependencies(widget_feed)
        assert names(graph.vertices) == {"example", "hier", "std.regex",
                                         "std.stdio"}
        assert graph.edge_count == 6

    def test_add_everything_needs_feed(self):
        """add_everything() without a feed is an error."""
        with pytest.raises(ValueError):
            ModuleDependencyBuilder(Graph()).add_everything()

    def test_long_chain_no_recursion_error(self):
        """Import chains longer than the recursion limit are fine."""
        mods = [ModuleInfo(f"m{i}") for i in range(5000)]
        for a, b in zip(mods, mods[1:]):
            a.imports.append(b)
        graph = add_module_with_dependencies(Graph(), mods[0])
        assert len(graph) == 5000
        assert graph.edge_count == 4999
