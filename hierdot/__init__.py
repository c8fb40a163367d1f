############################################################ IDENT(1)
#
# $Title: Python init for hierdot package $
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

"""hierdot: class hierarchy and module dependency graphs for Python.

hierdot provides:
- A generic directed graph of types or modules
- Builders walking class ancestry and module imports
- Name filtering of graphs by regular expression
- Graphviz dot output, plain or ranked by in-degree

Types and modules come from a feed: the running interpreter
(RuntimeFeed), a parsed source tree (SourceFeed) or a JSON manifest
(ManifestFeed).

Example:
    import sys
    from hierdot import Graph, SourceFeed, ClassHierarchyBuilder
    from hierdot import filter_out, write_dot

    graph = Graph()
    ClassHierarchyBuilder(graph, SourceFeed('/path/to/project')).add_everything()
    graph = filter_out(graph, '^(builtins|abc|typing)[.]')
    write_dot(graph, sys.stdout)
"""

############################################################ IMPORTS

from .analyzer import SourceFeed
from .builders import (
    ClassHierarchyBuilder,
    ModuleDependencyBuilder,
    Strategy,
    add_class_with_ancestors,
    add_module_types,
    add_module_with_dependencies,
    class_hierarchy,
    module_dependencies,
)
from .dot import rank_buckets, to_dot, write_dot, write_ranked_dot
from .entity import ModuleInfo, TypeInfo, is_interface
from .errors import HierdotError, ManifestError, UnknownEntityError
from .filters import filter_out
from .graph import Graph
from .introspect import Feed, RuntimeFeed
from .manifest import ManifestFeed
from .pipeline import run_introspection as generate_graph
from .version import VERSION, VERSION_VERBOSE

############################################################ SETUP

__version__ = VERSION
__all__ = [
    'ClassHierarchyBuilder', 'Feed', 'Graph', 'HierdotError',
    'ManifestError', 'ManifestFeed', 'ModuleDependencyBuilder',
    'ModuleInfo', 'RuntimeFeed', 'SourceFeed', 'Strategy', 'TypeInfo',
    'UnknownEntityError', 'VERSION', 'VERSION_VERBOSE',
    'add_class_with_ancestors', 'add_module_types',
    'add_module_with_dependencies', 'class_hierarchy', 'filter_out',
    'generate_graph', 'is_interface', 'module_dependencies',
    'rank_buckets', 'to_dot', 'write_dot', 'write_ranked_dot',
]

################################################################################
# END
################################################################################
