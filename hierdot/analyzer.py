#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot static source feed $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# pylint: disable=line-too-long
# $FrauBSD$
# pylint: enable=line-too-long
# pylint: disable=too-many-instance-attributes,too-many-branches
# pylint: disable=too-many-return-statements
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""Static introspection feed built from Python source files.

Nothing is imported or executed: every ``*.py`` below the project root is
parsed with the ``ast`` module and

1. each file becomes a module (``pkg/__init__.py`` is module ``pkg``),
2. top-level ``import``/``from ... import`` statements become import edges
   (relative imports are resolved against the file's package),
3. top-level ``class`` statements become types whose bases are resolved by
   following the names bound in the module.

Names that cannot be traced to a parsed file (the standard library,
third-party packages) become external placeholder entities, so the graph
still shows where a hierarchy leaves the project.
"""

############################################################ IMPORTS

import ast
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from .entity import ModuleInfo, TypeInfo
from .introspect import Feed

############################################################ GLOBALS

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE = ['__pycache__', '.git', '.tox', '.venv', '.eggs', 'build']

ROOT_TYPE = 'builtins.object'

# External names known to mark interfaces
INTERFACE_MARKERS = {
    'abc.ABC',
    'typing.Protocol',
    'typing_extensions.Protocol',
}
PROTOCOL_MARKERS = {'typing.Protocol', 'typing_extensions.Protocol'}
ABSTRACT_DECORATORS = {'abstractmethod', 'abc.abstractmethod'}
ABC_METACLASS = 'abc.ABCMeta'

# Hops allowed when chasing re-exported names through __init__ modules
MAX_ALIAS_DEPTH = 16

############################################################ CLASSES

class ClassSource:
    """A parsed ``class`` statement awaiting resolution."""

    def __init__(self, node: ast.ClassDef, module: 'ModuleSource'):
        self.node = node
        self.module = module
        self.name = f"{module.package}.{node.name}"
        self.bases = []           # Resolved dotted names, in order
        self.metaclass = None     # Resolved dotted name or None
        self.has_concrete = False # Defines non-abstract public methods
        self.members = []


class ModuleSource:
    """Metadata about one parsed source file."""

    def __init__(self, path: Path, package: str, is_package: bool):
        self.path = path
        self.package = package      # e.g., 'foo.bar.baz'
        self.is_package = is_package
        self.imports = []           # Imported module names, in order
        self.bindings = {}          # local name -> dotted target
        self.classes = []           # ClassSource

    def parent_package(self, level: int) -> Optional[str]:
        """Package a relative import of *level* dots starts from."""
        parts = self.package.split('.')
        if not self.is_package:
            parts = parts[:-1]
        drop = level - 1
        if drop > len(parts):
            return None
        parts = parts[:len(parts) - drop]
        return '.'.join(parts) or None


class SourceFeed(Feed):
    """Feed built by parsing a project tree.

    Args:
        root_path: Directory holding the top-level package(s).
        exclude_patterns: Path fragments to skip.
    """

    def __init__(self, root_path: Union[str, Path],
                 exclude_patterns: Optional[List[str]] = None):
        super().__init__()
        self.root_path = Path(root_path)
        self.sources = {}     # package name -> ModuleSource
        self.failed = []      # Paths that could not be parsed
        self._classes = {}    # qualified name -> ClassSource
        self._interface_memo = {}

        if exclude_patterns is None:
            exclude_patterns = DEFAULT_EXCLUDE

        python_files = []
        for path in sorted(self.root_path.rglob('*.py')):
            if any(pat in path.relative_to(self.root_path).parts
                   for pat in exclude_patterns):
                continue
            python_files.append(path)

        for py_file in python_files:
            self._analyze_file(py_file)

        for source in self.sources.values():
            for cls in source.classes:
                self._resolve_class(cls)

        self._build_entities()

        logger.debug("Source feed %s: %d modules, %d types, %d unparsed",
                     self.root_path, len(self._modules), len(self._types),
                     len(self.failed))

    ######################################## parsing

    def _analyze_file(self, file_path: Path):
        """Parse a single Python file using AST."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                source = f.read()
            tree = ast.parse(source, filename=str(file_path))
        except (OSError, SyntaxError, UnicodeDecodeError, ValueError) as e:
            logger.warning("Failed to parse %s: %s", file_path, e)
            self.failed.append(file_path)
            return

        # Build package name from path
        rel_path = file_path.relative_to(self.root_path).with_suffix('')
        is_package = rel_path.name == '__init__'
        if is_package:
            rel_path = rel_path.parent
        package = str(rel_path).replace(os.sep, '.')
        if not package or package == '.':
            logger.warning("Skipping %s: not inside a package", file_path)
            return

        module = ModuleSource(file_path, package, is_package)

        # NB: tree.body only; imports inside functions are not module edges
        for node in tree.body:
            if isinstance(node, ast.ClassDef):
                cls = ClassSource(node, module)
                module.classes.append(cls)
                module.bindings[node.name] = cls.name
                self._classes[cls.name] = cls
            elif isinstance(node, (ast.Import, ast.ImportFrom)):
                self._extract_import(node, module)

        self.sources[package] = module

    def _extract_import(self, node: ast.AST, module: ModuleSource):
        """Record imported modules and the names an import binds."""
        if isinstance(node, ast.Import):
            for alias in node.names:
                module.imports.append(alias.name)
                if alias.asname:
                    module.bindings[alias.asname] = alias.name
                else:
                    head = alias.name.split('.')[0]
                    module.bindings[head] = head
            return

        if node.level:
            base = module.parent_package(node.level)
            if base is None:
                logger.debug("%s: relative import beyond top level",
                             module.package)
                return
            target = f"{base}.{node.module}" if node.module else base
        else:
            target = node.module

        for alias in node.names:
            if alias.name == '*':
                module.imports.append(target)
                continue
            dotted = f"{target}.{alias.name}"
            module.bindings[alias.asname or alias.name] = dotted
            # 'from pkg import submodule' imports the submodule
            module.imports.append(dotted if self._is_module_file(dotted)
                                  else target)

    def _is_module_file(self, dotted: str) -> bool:
        rel = Path(*dotted.split('.'))
        return (self.root_path / rel.with_suffix('.py')).is_file() or \
            (self.root_path / rel / '__init__.py').is_file()

    ######################################## resolution

    def _resolve_expr(self, node: ast.AST, module: ModuleSource) -> Optional[str]:
        """Dotted name an expression in *module* refers to, if any."""
        if isinstance(node, ast.Name):
            if node.id in module.bindings:
                return module.bindings[node.id]
            return f"builtins.{node.id}"
        if isinstance(node, ast.Attribute):
            head = self._resolve_expr(node.value, module)
            return f"{head}.{node.attr}" if head else None
        if isinstance(node, ast.Subscript):
            # Generic[T], Protocol[T]
            return self._resolve_expr(node.value, module)
        return None

    def _canonical(self, dotted: str) -> str:
        """Follow re-exports until *dotted* names a parsed class, if it does."""
        for _ in range(MAX_ALIAS_DEPTH):
            if dotted in self._classes:
                return dotted
            owner, _, attr = dotted.rpartition('.')
            source = self.sources.get(owner)
            if source is None or attr not in source.bindings:
                return dotted
            target = source.bindings[attr]
            if target == dotted:
                return dotted
            dotted = target
        return dotted

    def _resolve_class(self, cls: ClassSource):
        node = cls.node
        module = cls.module
        for base in node.bases:
            dotted = self._resolve_expr(base, module)
            if dotted is None:
                logger.debug("%s: cannot resolve base %s", cls.name,
                             ast.dump(base))
                continue
            dotted = self._canonical(dotted)
            if dotted != ROOT_TYPE:
                cls.bases.append(dotted)
        for keyword in node.keywords:
            if keyword.arg == 'metaclass':
                cls.metaclass = self._resolve_expr(keyword.value, module)

        for item in node.body:
            if isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)):
                if item.name.startswith('_'):
                    continue
                cls.members.append(f"{item.name}()")
                if not any(self._decorator_name(d) in ABSTRACT_DECORATORS
                           for d in item.decorator_list):
                    cls.has_concrete = True
            elif isinstance(item, ast.Assign):
                cls.members.extend(t.id for t in item.targets
                                   if isinstance(t, ast.Name)
                                   and not t.id.startswith('_'))
            elif isinstance(item, ast.AnnAssign):
                if isinstance(item.target, ast.Name) and \
                    not item.target.id.startswith('_'):
                    cls.members.append(item.target.id)

    @staticmethod
    def _decorator_name(node: ast.AST) -> str:
        if isinstance(node, ast.Name):
            return node.id
        if isinstance(node, ast.Attribute) and isinstance(node.value, ast.Name):
            return f"{node.value.id}.{node.attr}"
        return ''

    def _is_interface_name(self, dotted: str) -> bool:
        if dotted in INTERFACE_MARKERS:
            return True
        cls = self._classes.get(dotted)
        return cls is not None and self._is_interface(cls)

    def _is_interface(self, cls: ClassSource) -> bool:
        """Protocols, and ABCs whose bases are all interfaces."""
        memo = self._interface_memo
        if cls.name in memo:
            return memo[cls.name]
        memo[cls.name] = False  # Guard against malformed cyclic bases

        if any(base in PROTOCOL_MARKERS for base in cls.bases):
            result = True
        elif cls.has_concrete:
            result = False
        else:
            abstract = cls.metaclass == ABC_METACLASS or \
                any(self._is_interface_name(base) for base in cls.bases)
            result = abstract and all(self._is_interface_name(base)
                                      for base in cls.bases)
        memo[cls.name] = result
        return result

    ######################################## entities

    def _type(self, dotted: str) -> TypeInfo:
        info = self._types.get(dotted)
        if info is not None:
            return info

        cls = self._classes.get(dotted)
        if cls is None:
            # External placeholder
            info = TypeInfo(dotted, is_root=dotted == ROOT_TYPE)
            self._types[dotted] = info
            if not info.is_root and dotted not in INTERFACE_MARKERS:
                info.base = self._type(ROOT_TYPE)
            return info

        info = TypeInfo(dotted, members=cls.members)
        self._types[dotted] = info
        if self._is_interface(cls):
            supers = cls.bases
        else:
            concrete = [b for b in cls.bases if not self._is_interface_name(b)]
            base = concrete[0] if concrete else ROOT_TYPE
            info.base = self._type(base)
            supers = [b for b in cls.bases if b != base]
        info.interfaces = [self._type(b) for b in supers]
        return info

    def _module(self, name: str) -> ModuleInfo:
        info = self._modules.get(name)
        if info is None:
            source = self.sources.get(name)
            info = ModuleInfo(name, source=source.path if source else None)
            self._modules[name] = info
        return info

    def _build_entities(self):
        for package in self.sources:
            self._module(package)
        for package, source in self.sources.items():
            module = self._modules[package]
            for imported in source.imports:
                if imported != package:
                    module.imports.append(self._module(imported))
            module.types = [self._type(cls.name) for cls in source.classes]


################################################################################
# END
################################################################################
