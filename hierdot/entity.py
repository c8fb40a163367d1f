#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot entities (types and modules) $
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

"""Graph vertex kinds.

A vertex is anything with a fully-qualified ``name`` that hashes by
identity. Feeds create exactly one entity per underlying class or module,
so two entities compare equal only when they describe the same thing, even
if their display names happen to collide.
"""

############################################################ IMPORTS

from typing import List, Optional, Protocol

############################################################ CLASSES

class NamedEntity(Protocol):
    """Anything that can be a graph vertex."""

    name: str

    @property
    def is_interface(self) -> bool:
        ...


class TypeInfo:
    """Metadata about a class or interface."""

    def __init__(self, name: str, base: 'Optional[TypeInfo]' = None,
                 interfaces: 'Optional[List[TypeInfo]]' = None,
                 is_root: bool = False, members: Optional[List[str]] = None):
        self.name = name
        self.base = base                    # None for interfaces and root
        self.interfaces = interfaces or []  # Directly implemented only
        self.is_root = is_root
        self.members = members or []        # Labels for UML rendering

    @property
    def is_interface(self) -> bool:
        """True if the type has no base type and is not the root type."""
        return self.base is None and not self.is_root

    @property
    def short_name(self) -> str:
        return self.name.rsplit('.', 1)[-1]

    def supertypes(self) -> 'List[TypeInfo]':
        """Direct supertypes: interfaces first, then the base type."""
        supers = list(self.interfaces)
        if self.base is not None:
            supers.append(self.base)
        return supers

    def __repr__(self) -> str:
        kind = 'interface' if self.is_interface else 'class'
        return f"<TypeInfo {kind} {self.name}>"


class ModuleInfo:
    """Metadata about a module."""

    def __init__(self, name: str, source=None):
        self.name = name
        self.source = source  # Feed-specific origin (module object, path)
        self.imports = []     # ModuleInfo, in import order, may repeat
        self.types = []       # TypeInfo declared directly in this module

    @property
    def is_interface(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"<ModuleInfo {self.name}>"


############################################################ FUNCTIONS

def is_interface(entity) -> bool:
    """Return True if *entity* should be drawn as an interface node."""
    return bool(getattr(entity, 'is_interface', False))


################################################################################
# END
################################################################################
