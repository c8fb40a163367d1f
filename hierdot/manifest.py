#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot manifest feed $
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

"""Feed read from an explicit JSON manifest.

Useful when the program to visualize cannot be imported into this
interpreter, or when the metadata is produced by another tool. Format:

    {
      "root": "object",
      "modules": [
        {
          "name": "app.widgets",
          "imports": ["app.base", "json"],
          "types": [
            {"name": "app.widgets.Editable"},
            {"name": "app.widgets.Widget", "base": "object",
             "interfaces": ["app.widgets.Editable"],
             "members": ["draw()", "size"]}
          ]
        }
      ]
    }

A type without ``base`` is an interface, unless it is the root type.
Imports naming modules that are not listed become external modules with
no imports of their own. Type references must name a declared type or
the root.
"""

############################################################ IMPORTS

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from .entity import ModuleInfo, TypeInfo
from .errors import ManifestError
from .introspect import Feed

############################################################ GLOBALS

logger = logging.getLogger(__name__)

DEFAULT_ROOT = 'object'

############################################################ CLASSES

class ManifestFeed(Feed):
    """Feed populated from a manifest dictionary."""

    def __init__(self, data: Dict[str, Any]):
        super().__init__()
        if not isinstance(data, dict):
            raise ManifestError("Manifest must be a JSON object")

        root_name = data.get('root', DEFAULT_ROOT)
        if not isinstance(root_name, str):
            raise ManifestError(f"'root' must be a string: {root_name!r}")
        self.root = TypeInfo(root_name, is_root=True)
        self._types[root_name] = self.root

        module_specs = _list_field(data, 'modules', 'manifest')

        # Declare everything first so references may point forward.
        type_specs = []
        for spec in module_specs:
            name = _require_name(spec, 'module')
            if name in self._modules:
                raise ManifestError(f"Duplicate module: {name}")
            module = ModuleInfo(name, source=spec)
            self._modules[name] = module
            for type_spec in _list_field(spec, 'types', name):
                type_name = _require_name(type_spec, 'type')
                if type_name in self._types:
                    raise ManifestError(f"Duplicate type: {type_name}")
                members = _string_list(type_spec, 'members', type_name)
                info = TypeInfo(type_name, members=members)
                self._types[type_name] = info
                module.types.append(info)
                type_specs.append((info, type_spec))

        for info, type_spec in type_specs:
            base = type_spec.get('base')
            if base is not None:
                if not isinstance(base, str):
                    raise ManifestError(
                        f"Type {info.name}: 'base' must be a string: {base!r}")
                info.base = self._resolve_type(base, info.name)
            faces = _string_list(type_spec, 'interfaces', info.name)
            info.interfaces = [self._resolve_type(face, info.name)
                               for face in faces]

        for spec in module_specs:
            name = spec['name']
            for imported in _string_list(spec, 'imports', name):
                if imported not in self._modules:
                    logger.debug("External module: %s", imported)
                    self._modules[imported] = ModuleInfo(imported)
                self._modules[name].imports.append(self._modules[imported])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ManifestFeed':
        return cls(data)

    @classmethod
    def loads(cls, text: str) -> 'ManifestFeed':
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestError(f"Invalid manifest JSON: {e}") from e
        return cls(data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'ManifestFeed':
        """Read a manifest from a JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            return cls.loads(f.read())

    def _resolve_type(self, name: str, referrer: str) -> TypeInfo:
        try:
            return self._types[name]
        except KeyError:
            raise ManifestError(
                f"Type {referrer} references unknown type {name}") from None


############################################################ FUNCTIONS

def _require_name(spec, kind: str) -> str:
    if not isinstance(spec, dict) or not isinstance(spec.get('name'), str):
        raise ManifestError(f"Every {kind} needs a 'name' string: {spec!r}")
    return spec['name']


def _list_field(spec: Dict[str, Any], key: str, owner: str) -> list:
    """Optional list-valued entry *key* of *spec*; missing means empty."""
    value = spec.get(key, [])
    if not isinstance(value, list):
        raise ManifestError(f"{owner}: '{key}' must be a list: {value!r}")
    return value


def _string_list(spec: Dict[str, Any], key: str, owner: str) -> list:
    value = _list_field(spec, key, owner)
    for item in value:
        if not isinstance(item, str):
            raise ManifestError(
                f"{owner}: '{key}' entries must be strings: {item!r}")
    return list(value)


################################################################################
# END
################################################################################
