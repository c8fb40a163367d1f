"""
Tests for the static source feed.
"""

from hierdot.analyzer import ModuleSource, SourceFeed
from hierdot.builders import (
    Strategy,
    add_class_with_ancestors,
    add_module_with_dependencies,
    class_hierarchy,
)
from hierdot.dot import to_dot
from hierdot.filters import filter_out
from hierdot.graph import Graph


def import_names(feed, module):
    return [m.name for m in feed.module(module).imports]


class TestModuleSource:
    """Tests for relative import resolution."""

    def test_parent_package_of_module(self, tmp_path):
        """One dot means the containing package."""
        source = ModuleSource(tmp_path, "a.b.c", is_package=False)
        assert source.parent_package(1) == "a.b"
        assert source.parent_package(2) == "a"
        assert source.parent_package(3) is None

    def test_parent_package_of_package(self, tmp_path):
        """A package's own __init__ resolves one dot to itself."""
        source = ModuleSource(tmp_path, "a.b", is_package=True)
        assert source.parent_package(1) == "a.b"
        assert source.parent_package(2) == "a"


class TestSourceFeed:
    """Tests for SourceFeed."""

    def test_modules(self, source_tree):
        """Each parsed file is a module; __init__ is the package."""
        feed = SourceFeed(source_tree)
        names = {m.name for m in feed.modules()}
        assert {"shapes", "shapes.base", "shapes.circle", "shapes.square",
                "shapes.util"} <= names
        assert "shapes.__init__" not in names

    def test_unparseable_file_skipped(self, source_tree):
        """Syntax errors are recorded and skipped."""
        feed = SourceFeed(source_tree)
        assert [p.name for p in feed.failed] == ["broken.py"]
        assert "shapes.broken" not in {m.name for m in feed.modules()}

    def test_relative_imports(self, source_tree):
        """Relative and submodule imports resolve to module names."""
        feed = SourceFeed(source_tree)
        assert import_names(feed, "shapes") == ["shapes.base", "shapes.util"]
        assert import_names(feed, "shapes.circle") == ["shapes.base",
                                                       "shapes.util"]
        assert import_names(feed, "shapes.util") == ["json", "shapes.circle"]

    def test_external_module(self, source_tree):
        """Imports outside the tree are leaf modules."""
        feed = SourceFeed(source_tree)
        assert feed.module("json").imports == []
        assert feed.module("json").source is None

    def test_import_cycle(self, source_tree):
        """circle and util import each other; the walk terminates."""
        feed = SourceFeed(source_tree)
        graph = add_module_with_dependencies(
            Graph(), feed.module("shapes.circle"), Strategy.TRANSITIVE)
        edges = {(a.name, b.name) for a, b in graph.edges}
        assert ("shapes.circle", "shapes.util") in edges
        assert ("shapes.util", "shapes.circle") in edges
        assert ("shapes.util", "json") in edges

    def test_interfaces(self, source_tree):
        """ABCs without concrete methods are interfaces."""
        feed = SourceFeed(source_tree)
        assert feed.find_type("shapes.base.Drawable").is_interface
        assert feed.find_type("abc.ABC").is_interface
        assert not feed.find_type("shapes.base.Shape").is_interface
        assert feed.find_type("builtins.object").is_root

    def test_bases(self, source_tree):
        """Bases resolve through imports and re-exports."""
        feed = SourceFeed(source_tree)
        shape = feed.find_type("shapes.base.Shape")
        assert feed.find_type("shapes.circle.Circle").base is shape
        assert feed.find_type("shapes.square.Square").base is shape
        assert shape.base is feed.find_type("builtins.object")
        assert shape.interfaces == [feed.find_type("shapes.base.Drawable")]

    def test_members(self, source_tree):
        """Public attributes and methods become members."""
        feed = SourceFeed(source_tree)
        assert feed.find_type("shapes.base.Shape").members == [
            "sides", "draw()", "area()"]

    def test_hierarchy_dot(self, source_tree):
        """End to end: ancestors of Circle without stdlib names."""
        feed = SourceFeed(source_tree)
        graph = add_class_with_ancestors(
            Graph(), feed.find_type("shapes.circle.Circle"))
        graph = filter_out(graph, r"^(builtins|abc)\.")
        lines = to_dot(graph).splitlines()
        assert '\t"shapes.base.Drawable";' in lines
        assert '\t"shapes.circle.Circle" -> "shapes.base.Shape";' in lines
        assert '\t"shapes.base.Shape" -> "shapes.base.Drawable";' in lines

    def test_everything(self, source_tree):
        """Every declared class is in the full hierarchy."""
        graph = class_hierarchy(SourceFeed(source_tree))
        names = {v.name for v in graph.vertices}
        assert {"shapes.circle.Circle", "shapes.square.Square",
                "shapes.base.Shape", "shapes.base.Drawable"} <= names

    def test_exclude_patterns(self, source_tree):
        """Excluded directories are not parsed."""
        feed = SourceFeed(source_tree, exclude_patterns=["shapes"])
        assert feed.modules() == []
