"""
Scalar Type Vocabulary.

Maps scalar type identifiers of the source schema to Drizzle column
constructors (and to the Postgres types used by the DDL export).

Only the identifiers enumerated in ScalarType are supported. Some of them
are recognized but have no mapping yet; using one of those fails
differently from using an identifier that is not recognized at all.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from .context import Context
from .exceptions import UnimplementedScalarTypeError, UnknownScalarTypeError

DRIZZLE_ORM = "drizzle-orm"
PG_CORE = "drizzle-orm/pg-core"


class ScalarType(Enum):
    """Scalar type identifiers known to the generator"""

    STR = "std::str"
    INT64 = "std::int64"
    INT32 = "std::int32"
    INT16 = "std::int16"
    DECIMAL = "std::decimal"
    BIGINT = "std::bigint"
    BOOL = "std::bool"
    FLOAT64 = "std::float64"
    FLOAT32 = "std::float32"
    UUID = "std::uuid"
    DATETIME = "std::datetime"
    DURATION = "std::duration"
    BYTES = "std::bytes"
    JSON = "std::json"

    LOCAL_DATETIME = "std::cal::local_datetime"
    LOCAL_DATE = "std::cal::local_date"
    LOCAL_TIME = "std::cal::local_time"
    RELATIVE_DURATION = "std::cal::relative_duration"
    DATE_DURATION = "std::cal::date_duration"

    MEMORY = "cfg::memory"

    # Already-native Postgres types
    PG_JSON = "std::pg::json"
    PG_TIMESTAMPTZ = "std::pg::timestamptz"
    PG_TIMESTAMP = "std::pg::timestamp"
    PG_DATE = "std::pg::date"
    PG_INTERVAL = "std::pg::interval"


@dataclass(frozen=True)
class UnrecognizedScalar:
    """An identifier outside the vocabulary, kept for diagnostics"""

    identifier: str


# ============================================================================
# Registry
# ============================================================================

# Drizzle pg-core constructor for each implemented scalar type
DRIZZLE_CONSTRUCTORS: Dict[ScalarType, str] = {
    ScalarType.STR: "text",
    ScalarType.INT64: "bigint",
    ScalarType.INT32: "integer",
    ScalarType.INT16: "smallint",
    ScalarType.DECIMAL: "numeric",
    ScalarType.BOOL: "boolean",
    ScalarType.FLOAT64: "doublePrecision",
    ScalarType.FLOAT32: "real",
    ScalarType.UUID: "uuid",
    ScalarType.BYTES: "bytea",
    ScalarType.JSON: "jsonb",
    ScalarType.LOCAL_TIME: "time",
    ScalarType.PG_JSON: "json",
    ScalarType.PG_TIMESTAMPTZ: "timestamptz",
    ScalarType.PG_TIMESTAMP: "timestamp",
    ScalarType.PG_DATE: "date",
    ScalarType.PG_INTERVAL: "interval",
}

# Constructor arguments, where the default is not wanted
CONSTRUCTOR_ARGS: Dict[ScalarType, str] = {
    ScalarType.INT64: '{ mode: "number"}',
}

# Postgres column type for each implemented scalar type
PG_TYPES: Dict[ScalarType, str] = {
    ScalarType.STR: "text",
    ScalarType.INT64: "bigint",
    ScalarType.INT32: "integer",
    ScalarType.INT16: "smallint",
    ScalarType.DECIMAL: "numeric",
    ScalarType.BOOL: "boolean",
    ScalarType.FLOAT64: "double precision",
    ScalarType.FLOAT32: "real",
    ScalarType.UUID: "uuid",
    ScalarType.BYTES: "bytea",
    ScalarType.JSON: "jsonb",
    ScalarType.LOCAL_TIME: "time",
    ScalarType.PG_JSON: "json",
    ScalarType.PG_TIMESTAMPTZ: "timestamptz",
    ScalarType.PG_TIMESTAMP: "timestamp",
    ScalarType.PG_DATE: "date",
    ScalarType.PG_INTERVAL: "interval",
}

# Recognized, but without a mapping
UNIMPLEMENTED_TYPES = frozenset(set(ScalarType) - set(DRIZZLE_CONSTRUCTORS))


# ============================================================================
# Lookup
# ============================================================================


def parse_scalar_type(identifier: str) -> Union[ScalarType, UnrecognizedScalar]:
    """Parse an identifier into the vocabulary, without failing"""
    try:
        return ScalarType(identifier)
    except ValueError:
        return UnrecognizedScalar(identifier)


def resolve_scalar_type(identifier: str, owner: Optional[str] = None) -> ScalarType:
    """
    Resolve an identifier to an implemented scalar type.

    Args:
        identifier: Scalar type identifier (e.g. "std::str")
        owner: Column using the type, for error messages (e.g. "Movie.title")

    Raises:
        UnknownScalarTypeError: If the identifier is not in the vocabulary
        UnimplementedScalarTypeError: If the type is recognized but unmapped
    """
    scalar = parse_scalar_type(identifier)
    if isinstance(scalar, UnrecognizedScalar):
        raise UnknownScalarTypeError(scalar.identifier, owner)
    if scalar in UNIMPLEMENTED_TYPES:
        raise UnimplementedScalarTypeError(identifier, owner)
    return scalar


def column_type(ctx: Context, identifier: str, owner: Optional[str] = None) -> str:
    """
    Generate the column constructor call for a scalar type.

    Registers the constructor import on the context.

    Example:
        column_type(ctx, "std::int64") -> 'bigint({ mode: "number"})'
    """
    scalar = resolve_scalar_type(identifier, owner)
    constructor = ctx.import_symbol(PG_CORE, DRIZZLE_CONSTRUCTORS[scalar])
    return f"{constructor}({CONSTRUCTOR_ARGS.get(scalar, '')})"


def pg_type(identifier: str, owner: Optional[str] = None) -> str:
    """Get the Postgres column type for a scalar type"""
    return PG_TYPES[resolve_scalar_type(identifier, owner)]


__all__ = [
    "DRIZZLE_ORM",
    "PG_CORE",
    "ScalarType",
    "UnrecognizedScalar",
    "DRIZZLE_CONSTRUCTORS",
    "CONSTRUCTOR_ARGS",
    "PG_TYPES",
    "UNIMPLEMENTED_TYPES",
    "parse_scalar_type",
    "resolve_scalar_type",
    "column_type",
    "pg_type",
]
