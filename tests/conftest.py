"""
Pytest configuration and shared fixtures for hierdot.
"""

import json
import sys
import textwrap
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from hierdot.manifest import ManifestFeed  # noqa: E402


WIDGET_MANIFEST = {
    "root": "object",
    "modules": [
        {
            "name": "example",
            "imports": ["hier", "std.stdio"],
            "types": [
                {"name": "Editable"},
                {"name": "Tweakable", "interfaces": ["Editable"]},
                {"name": "Special"},
                {"name": "Widget", "base": "object",
                 "interfaces": ["Tweakable"],
                 "members": ["draw()", "size"]},
                {"name": "SpecialWidget", "base": "Widget"},
                {"name": "SuperSpecialWidget", "base": "SpecialWidget",
                 "interfaces": ["Special"]},
                {"name": "NotSoSpecialWidget", "base": "Widget"},
            ],
        },
        {"name": "hier", "imports": ["std.stdio", "std.regex"]},
        {"name": "std.regex", "imports": ["std.stdio", "std.stdio"]},
        {"name": "std.stdio", "imports": ["std.regex"]},
    ],
}


SOURCE_TREE = {
    "shapes/__init__.py": """
        from .base import Shape
        from . import util
    """,
    "shapes/base.py": """
        import abc
        from abc import ABC, abstractmethod


        class Drawable(ABC):
            @abstractmethod
            def draw(self):
                ...


        class Shape(Drawable):
            sides = 0

            def draw(self):
                return ''

            def area(self):
                return 0
    """,
    "shapes/circle.py": """
        from .base import Shape
        from shapes import util


        class Circle(Shape):
            radius = 1

            def area(self):
                return 3.14 * self.radius ** 2
    """,
    "shapes/square.py": """
        from shapes import Shape


        class Square(Shape):
            def area(self):
                return 1
    """,
    "shapes/util.py": """
        import json
        from . import circle


        def dump(shape):
            return json.dumps(shape.area())
    """,
    "shapes/broken.py": """
        def oops(:
    """,
}


@pytest.fixture
def widget_manifest():
    """The classic widget hierarchy as a manifest dictionary."""
    return json.loads(json.dumps(WIDGET_MANIFEST))


@pytest.fixture
def widget_feed(widget_manifest):
    """ManifestFeed over the widget hierarchy."""
    return ManifestFeed(widget_manifest)


@pytest.fixture
def manifest_file(tmp_path, widget_manifest):
    """The widget manifest written to disk."""
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps(widget_manifest), encoding="utf-8")
    return path


@pytest.fixture
def source_tree(tmp_path):
    """A small project tree with a hierarchy and an import cycle."""
    root = tmp_path / "project"
    for rel, text in SOURCE_TREE.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return root
