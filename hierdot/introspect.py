#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot runtime introspection feed $
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

"""Introspection feeds.

A feed knows every module of a program, the types each module declares,
the modules each module imports, and the supertypes of every type. The
builders only ever talk to a feed through ``Feed.modules()`` and the
entity attributes, so any source of metadata can drive them.

``RuntimeFeed`` reads the live interpreter: it snapshots ``sys.modules``
and reflects over classes and module namespaces.
"""

############################################################ IMPORTS

import abc
import inspect
import logging
import sys
import types
from typing import Iterable, List, Optional

from .entity import ModuleInfo, TypeInfo
from .errors import UnknownEntityError

############################################################ GLOBALS

logger = logging.getLogger(__name__)

############################################################ CLASSES

class Feed:
    """Base class for introspection feeds.

    Subclasses fill ``self._modules`` (name -> ModuleInfo) and
    ``self._types`` (name -> TypeInfo).
    """

    def __init__(self):
        self._modules = {}  # name -> ModuleInfo
        self._types = {}    # name -> TypeInfo

    def modules(self) -> List[ModuleInfo]:
        """All modules known to the feed."""
        return list(self._modules.values())

    def types(self) -> List[TypeInfo]:
        """All types known to the feed, including referenced ancestors."""
        return list(self._types.values())

    def module(self, name: str) -> ModuleInfo:
        try:
            return self._modules[name]
        except KeyError:
            raise UnknownEntityError('module', name) from None

    def find_type(self, name: str) -> TypeInfo:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownEntityError('type', name) from None

    def __repr__(self) -> str:
        return (f"<{type(self).__name__} {len(self._modules)} modules, "
                f"{len(self._types)} types>")


class RuntimeFeed(Feed):
    """Feed built by reflecting over loaded modules.

    Args:
        modules: Module objects to start from. Everything they import is
            reached as well. Defaults to a snapshot of ``sys.modules``.
    """

    def __init__(self, modules: Optional[Iterable[types.ModuleType]] = None):
        super().__init__()
        self._type_cache = {}    # class -> TypeInfo
        self._module_cache = {}  # module object -> ModuleInfo

        if modules is None:
            modules = [mod for mod in list(sys.modules.values())
                       if isinstance(mod, types.ModuleType)]

        pending = [self._module_info(mod) for mod in modules]
        while pending:
            pending = self._fill(pending)

        logger.debug("Runtime feed: %d modules, %d types",
                     len(self._modules), len(self._types))

    def type_of(self, cls: type) -> TypeInfo:
        """Return the TypeInfo describing class *cls*."""
        info = self._type_cache.get(cls)
        if info is not None:
            return info

        info = TypeInfo(qualified_name(cls), is_root=cls is object,
                        members=class_members(cls))
        self._type_cache[cls] = info
        self._types.setdefault(info.name, info)

        bases = [base for base in cls.__bases__ if base is not object]
        if cls is object or is_interface_class(cls):
            supers = bases
        else:
            concrete = [base for base in bases
                        if not is_interface_class(base)]
            base = concrete[0] if concrete else object
            info.base = self.type_of(base)
            supers = [b for b in bases if b is not base]
        info.interfaces = [self.type_of(b) for b in supers]

        return info

    def module_of(self, mod: types.ModuleType) -> ModuleInfo:
        """Return the ModuleInfo describing module object *mod*."""
        info = self._module_cache.get(mod)
        if info is None:
            pending = [self._module_info(mod)]
            while pending:
                pending = self._fill(pending)
            info = self._module_cache[mod]
        return info

    def _module_info(self, mod: types.ModuleType) -> ModuleInfo:
        info = self._module_cache.get(mod)
        if info is None:
            info = ModuleInfo(getattr(mod, '__name__', None) or repr(mod),
                              source=mod)
            self._module_cache[mod] = info
            self._modules.setdefault(info.name, info)
        return info

    def _fill(self, infos: List[ModuleInfo]) -> List[ModuleInfo]:
        """Resolve imports and types of *infos*; return newly seen modules."""
        discovered = []
        for info in infos:
            mod = info.source
            try:
                imports = imported_modules(mod)
                classes = declared_classes(mod)
            except Exception as e:  # pylint: disable=broad-exception-caught
                # Lazy or proxy modules may refuse reflection
                logger.warning("Cannot introspect module %s: %s", info.name, e)
                continue
            for imported in imports:
                known = imported in self._module_cache
                target = self._module_info(imported)
                if not known:
                    discovered.append(target)
                info.imports.append(target)
            info.types = [self.type_of(cls) for cls in classes]
        return discovered


############################################################ FUNCTIONS

def qualified_name(obj) -> str:
    """Fully-qualified dotted name of a class."""
    module = getattr(obj, '__module__', None)
    name = getattr(obj, '__qualname__', None) or obj.__name__
    if not module:
        return name
    return f"{module}.{name}"


def is_interface_class(cls: type) -> bool:
    """Decide whether a Python class plays the role of an interface.

    Protocol classes are interfaces. An ABC is an interface when it defines
    no concrete public methods and all of its bases are ``object`` or
    interfaces themselves (``abc.ABC`` counts).
    """
    if cls is object:
        return False
    if getattr(cls, '_is_protocol', False):
        return True
    if not isinstance(cls, abc.ABCMeta):
        return False
    for name, value in vars(cls).items():
        if name.startswith('_') or not inspect.isfunction(value):
            continue
        if not getattr(value, '__isabstractmethod__', False):
            return False
    return all(base is object or is_interface_class(base)
               for base in cls.__bases__)


def class_members(cls: type) -> List[str]:
    """Public members defined directly on *cls*, methods suffixed ``()``."""
    members = []
    for name, value in vars(cls).items():
        if name.startswith('_'):
            continue
        if isinstance(value, (staticmethod, classmethod)) or \
            inspect.isfunction(value):
            members.append(f"{name}()")
        else:
            members.append(name)
    return members


def declared_classes(mod: types.ModuleType) -> List[type]:
    """Classes whose defining module is *mod*, in namespace order."""
    found = []
    seen = set()
    name = getattr(mod, '__name__', None)
    for value in list(getattr(mod, '__dict__', {}).values()):
        if not isinstance(value, type) or id(value) in seen:
            continue
        if getattr(value, '__module__', None) != name:
            continue
        seen.add(id(value))
        found.append(value)
    return found


def imported_modules(mod: types.ModuleType) -> List[types.ModuleType]:
    """Modules *mod* imports, as seen from its namespace.

    ``import x`` binds a module object; ``from x import y`` binds an object
    whose ``__module__`` names ``x``. Both are reported, in namespace
    order, repeats included.
    """
    found = []
    name = getattr(mod, '__name__', None)
    for value in list(getattr(mod, '__dict__', {}).values()):
        if isinstance(value, types.ModuleType):
            if value is not mod:
                found.append(value)
            continue
        if not (isinstance(value, type) or inspect.isroutine(value)):
            continue
        owner = getattr(value, '__module__', None)
        if not isinstance(owner, str) or owner == name:
            continue
        owner_mod = sys.modules.get(owner)
        if isinstance(owner_mod, types.ModuleType) and owner_mod is not mod:
            found.append(owner_mod)
    return found


################################################################################
# END
################################################################################
