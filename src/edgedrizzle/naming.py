"""
Naming helpers.

Converts schema names into generated identifiers and handles
namespace-qualified names ("default::nested::Movie").
"""

import re
from typing import List, Optional, Sequence

NAMESPACE_SEPARATOR = "::"

# The schema's root namespace and the Postgres schema it lives in
DEFAULT_MODULE = "default"
DEFAULT_PG_SCHEMA = "public"

_WORD_SEPARATORS = re.compile(r"[._]")


# ============================================================================
# Namespace Paths
# ============================================================================


def split_path(name: str) -> List[str]:
    """Split a qualified name into its namespace segments"""
    return name.split(NAMESPACE_SEPARATOR)


def path_last(name: str) -> str:
    """Get the unqualified part of a qualified name ("default::Movie" -> "Movie")"""
    return name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]


def path_module(name: str) -> Optional[List[str]]:
    """
    Get the module path of a qualified name.

    Returns None for unqualified names, whose module is unknown.
    """
    segments = split_path(name)
    if len(segments) == 1:
        return None
    return segments[:-1]


def module_qualifier(path: Sequence[str]) -> Optional[str]:
    """
    Get the Postgres schema a module's tables are declared in.

    The default namespace maps onto the "public" schema, which needs no
    qualifier. Nested namespaces keep the full path:

        ["default"]           -> None
        ["default", "nested"] -> "public::nested"
        ["ns"]                -> "ns"
    """
    qualifier = NAMESPACE_SEPARATOR.join(
        DEFAULT_PG_SCHEMA if segment == DEFAULT_MODULE else segment for segment in path
    )
    if not qualifier or qualifier == DEFAULT_PG_SCHEMA:
        return None
    return qualifier


# ============================================================================
# Identifiers
# ============================================================================


def _lower_first(s: str) -> str:
    return s[:1].lower() + s[1:]


def _upper_first(s: str) -> str:
    return s[:1].upper() + s[1:]


def camel_case(name: str) -> str:
    """
    Convert a dotted or underscored name to camelCase.

    Examples:
        camel_case("Movie") -> "movie"
        camel_case("Book.chapters") -> "bookChapters"
        camel_case("release_year") -> "releaseYear"
    """
    chunks = [chunk for chunk in _WORD_SEPARATORS.split(name) if chunk]
    if not chunks:
        return ""
    first, *others = chunks
    return _lower_first(first) + "".join(_upper_first(chunk) for chunk in others)


def table_var_name(table_name: str) -> str:
    """Name of the exported table variable ("Movie" -> "movieTable")"""
    return camel_case(table_name) + "Table"


def relations_var_name(table_name: str) -> str:
    """Name of the exported relations variable ("Movie" -> "movieRelations")"""
    return camel_case(table_name) + "Relations"


__all__ = [
    "NAMESPACE_SEPARATOR",
    "DEFAULT_MODULE",
    "DEFAULT_PG_SCHEMA",
    "split_path",
    "path_last",
    "path_module",
    "module_qualifier",
    "camel_case",
    "table_var_name",
    "relations_var_name",
]
