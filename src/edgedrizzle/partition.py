"""
Module partitioning.

Folds a flat list of namespace-qualified object types into a tree of
modules mirroring the namespace hierarchy:

    default::Movie, default::nested::Hello, ns::Book

    <root>
    ├── default      [Movie]
    │   └── nested   [Hello]
    └── ns           [Book]
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .models import Module, ObjectType, Table
from .naming import NAMESPACE_SEPARATOR, split_path
from .transform import object_type_to_tables

logger = logging.getLogger(__name__)

# An object type paired with the namespace segments still to be consumed
_Entry = Tuple[Sequence[str], ObjectType]


def partition_into_modules(
    object_types: Iterable[ObjectType], path: Optional[List[str]] = None
) -> Module:
    """
    Build the module tree for a flat list of object types.

    Args:
        object_types: Object types with fully qualified names
        path: Path of the module being built (root by default)

    Returns:
        Module whose tables are the local object types' tables and whose
        submodules hold everything nested deeper
    """
    entries = [(split_path(t.name), t) for t in object_types]
    return _build_module(entries, list(path or []))


def _build_module(entries: List[_Entry], path: List[str]) -> Module:
    children: Dict[str, List[_Entry]] = {}
    local: List[ObjectType] = []

    for segments, object_type in entries:
        if len(segments) > 1:
            children.setdefault(segments[0], []).append((segments[1:], object_type))
        else:
            local.append(replace(object_type, name=segments[0]))

    submodules = {key: _build_module(group, path + [key]) for key, group in children.items()}

    tables: List[Table] = []
    for object_type in sorted(local, key=lambda t: t.name):
        tables.extend(object_type_to_tables(object_type))

    if tables:
        logger.debug("Module %s: %d tables", NAMESPACE_SEPARATOR.join(path) or "<root>", len(tables))

    return Module(path=path, tables=tables, submodules=submodules)


def collect_tables(module: Module) -> List[Tuple[Tuple[str, ...], Table]]:
    """Flatten a module tree back into (module path, table) pairs"""
    return list(module.iter_tables())


__all__ = ["partition_into_modules", "collect_tables"]
