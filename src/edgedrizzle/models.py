"""
Core data models for schema generation.

Contains all dataclass definitions for:
- Source schema models (object types and their pointers)
- Relational models (tables and the module tree)
- Generated output units
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import Dict, Iterator, List, Optional, Tuple

# ============================================================================
# Source Schema Models
# ============================================================================


class Cardinality(Enum):
    """Cardinality of a pointer"""

    ONE = "One"
    MANY = "Many"


@dataclass(frozen=True)
class Pointer:
    """
    A named, typed attribute of an object type.

    Either a scalar property (target_name is a scalar type identifier such
    as "std::str") or a link (target_name is another object type's name).
    When used as a table column, the pointer's name is the column name.
    """

    name: str
    target_name: str
    is_link: bool = False
    cardinality: Cardinality = Cardinality.ONE
    required: bool = False
    default: Optional[str] = None  # Raw default expression


@dataclass(frozen=True)
class ObjectType:
    """An object type with its namespace-qualified name (e.g. "default::Movie")"""

    name: str
    pointers: Tuple[Pointer, ...] = ()

    def get_pointer(self, name: str) -> Optional[Pointer]:
        """Find a pointer by name"""
        for pointer in self.pointers:
            if pointer.name == name:
                return pointer
        return None


# ============================================================================
# Relational Models
# ============================================================================


@dataclass
class Table:
    """
    A relational table derived from an object type.

    Join tables are named "<Owner>.<pointer>".
    """

    name: str
    columns: List[Pointer] = field(default_factory=list)

    def link_columns(self) -> List[Pointer]:
        """Get columns that reference other tables"""
        return [c for c in self.columns if c.is_link]

    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]


@dataclass
class Module:
    """
    A namespace in the module tree.

    The root module has an empty path. A submodule's path is always its
    parent's path with the submodule key appended.
    """

    path: List[str] = field(default_factory=list)
    tables: List[Table] = field(default_factory=list)
    submodules: Dict[str, "Module"] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """Check if neither this module nor any submodule holds a table"""
        return not self.tables and all(m.is_empty() for m in self.submodules.values())

    def iter_modules(self) -> Iterator["Module"]:
        """Walk the tree in pre-order, submodules in key order"""
        yield self
        for key in sorted(self.submodules):
            yield from self.submodules[key].iter_modules()

    def iter_tables(self) -> Iterator[Tuple[Tuple[str, ...], Table]]:
        """Yield (module path, table) for every table in the tree"""
        for module in self.iter_modules():
            for table in module.tables:
                yield tuple(module.path), table

    def get_submodule(self, path: List[str]) -> Optional["Module"]:
        """Find a descendant module by its path relative to this module"""
        module = self
        for segment in path:
            module = module.submodules.get(segment)
            if module is None:
                return None
        return module


# ============================================================================
# Output Models
# ============================================================================


@dataclass
class GeneratedUnit:
    """One generated source file for one module"""

    path: Tuple[str, ...]  # Module path
    text: str
    output_path: PurePosixPath  # Relative to the output root


__all__ = [
    "Cardinality",
    "Pointer",
    "ObjectType",
    "Table",
    "Module",
    "GeneratedUnit",
]
