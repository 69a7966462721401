"""
edgedrizzle - Drizzle ORM schema generation for EdgeDB schemas

Turns object types into relational tables (with join tables for
multi-valued pointers) and renders them as Drizzle pg-core TypeScript,
one file per schema module.
"""

from importlib.metadata import version

__version__ = version("edgedrizzle")

from .context import Context
from .ddl import generate_ddl
from .exceptions import (
    CrossModuleReferenceError,
    DuplicateIdentifierError,
    OutputPathConflictError,
    SchemaGenerationError,
    SchemaInputError,
    UnimplementedScalarTypeError,
    UnknownScalarTypeError,
)
from .generate import generate_schema, generate_unit, generate_units
from .introspection import load_object_types, object_types_from_records, query_object_types
from .models import Cardinality, GeneratedUnit, Module, ObjectType, Pointer, Table
from .naming import camel_case
from .partition import collect_tables, partition_into_modules
from .transform import object_type_to_tables
from .type_map import ScalarType, column_type
from .visualizations import visualize_schema
from .writer import write_files, write_units

__all__ = [
    # Version
    "__version__",
    # Models
    "Cardinality",
    "Pointer",
    "ObjectType",
    "Table",
    "Module",
    "GeneratedUnit",
    # Pipeline
    "partition_into_modules",
    "collect_tables",
    "object_type_to_tables",
    "generate_schema",
    "generate_unit",
    "generate_units",
    "write_files",
    "write_units",
    # Building blocks
    "Context",
    "ScalarType",
    "column_type",
    "camel_case",
    # Input
    "load_object_types",
    "object_types_from_records",
    "query_object_types",
    # Other outputs
    "generate_ddl",
    "visualize_schema",
    # Errors
    "SchemaGenerationError",
    "UnknownScalarTypeError",
    "UnimplementedScalarTypeError",
    "CrossModuleReferenceError",
    "DuplicateIdentifierError",
    "OutputPathConflictError",
    "SchemaInputError",
]
