"""
Schema input.

Object types are read either from a JSON dump of INTROSPECTION_QUERY's
result, or directly from a running EdgeDB/Gel instance.

Example:
    # schema.json holds the query result, e.g. from
    # `edgedb query --output-format json "<INTROSPECTION_QUERY>"`
    object_types = load_object_types("schema.json")

    # Or ask the database directly
    object_types = query_object_types(dsn="edgedb://localhost:5656")
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .exceptions import SchemaInputError
from .models import Cardinality, ObjectType, Pointer

logger = logging.getLogger(__name__)

# User-defined object types with their stored (non-computed) pointers
INTROSPECTION_QUERY = """
with ot := schema::ObjectType
select ot {
    name,
    ptrs := (
        select .pointers {
            name,
            target_name := .target.name,
            is_link := ot.pointers is schema::Link,
            cardinality,
            required,
            default,
        }
        filter not exists .expr
    )
}
filter not .builtin and not .from_alias
"""


def _require_str(record: Dict[str, Any], key: str, where: str) -> str:
    try:
        value = record[key]
    except KeyError as e:
        raise SchemaInputError(f"{where} is missing {e}") from e
    if not isinstance(value, str):
        raise SchemaInputError(f"{where} has a non-string {key!r}: {value!r}")
    return value


def pointer_from_record(record: Dict[str, Any], owner: str) -> Pointer:
    """Build a Pointer from one entry of an object type's "ptrs" list"""
    if not isinstance(record, dict):
        raise SchemaInputError(f"Pointer of {owner} is not an object: {record!r}")

    name = _require_str(record, "name", f"Pointer of {owner}")
    target_name = _require_str(record, "target_name", f"Pointer {owner}.{name}")
    try:
        cardinality = record["cardinality"]
    except KeyError as e:
        raise SchemaInputError(f"Pointer {owner}.{name} is missing {e}") from e

    try:
        cardinality = Cardinality(cardinality)
    except ValueError as e:
        raise SchemaInputError(
            f"Pointer {owner}.{name} has unknown cardinality: {cardinality!r}"
        ) from e

    default = record.get("default")
    if default is not None and not isinstance(default, str):
        raise SchemaInputError(f"Pointer {owner}.{name} has a non-string default: {default!r}")

    return Pointer(
        name=name,
        target_name=target_name,
        is_link=bool(record.get("is_link", False)),
        cardinality=cardinality,
        required=bool(record.get("required", False)),
        default=default,
    )


def object_types_from_records(records: Iterable[Dict[str, Any]]) -> List[ObjectType]:
    """
    Build object types from introspection records.

    Args:
        records: Dicts shaped like INTROSPECTION_QUERY's result
            ({"name": ..., "ptrs": [{"name": ..., "target_name": ..., ...}]})

    Raises:
        SchemaInputError: If a record is malformed or a pointer name repeats
    """
    object_types = []

    for record in records:
        if not isinstance(record, dict):
            raise SchemaInputError(f"Object type record is not an object: {record!r}")

        name = _require_str(record, "name", "Object type record")
        if not name:
            raise SchemaInputError("Object type record has an empty name")

        ptrs = record.get("ptrs") or []
        if not isinstance(ptrs, list):
            raise SchemaInputError(f"Pointers of {name} are not a list: {ptrs!r}")
        pointers = tuple(pointer_from_record(p, name) for p in ptrs)

        seen = set()
        for pointer in pointers:
            if pointer.name in seen:
                raise SchemaInputError(f"Duplicate pointer {pointer.name!r} on {name}")
            seen.add(pointer.name)

        object_types.append(ObjectType(name=name, pointers=pointers))

    logger.info("Loaded %d object types", len(object_types))
    return object_types


def load_object_types(path: Union[str, Path]) -> List[ObjectType]:
    """Read object types from a JSON file holding INTROSPECTION_QUERY's result"""
    with open(path, encoding="utf-8") as f:
        try:
            records = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaInputError(f"Invalid schema JSON in {path}: {e}") from e

    if not isinstance(records, list):
        raise SchemaInputError(f"Expected a list of object types in {path}")

    return object_types_from_records(records)


def query_object_types(**connect_kwargs) -> List[ObjectType]:
    """
    Query object types from a running database.

    Requires the edgedb client (pip install 'edgedrizzle[live]').
    Connection settings come from connect_kwargs or the client's usual
    environment variables and project configuration.

    Raises:
        SchemaInputError: If connecting or running the query fails
    """
    try:
        import edgedb
    except ImportError as e:
        raise ImportError(
            "The edgedb client is required for live introspection. "
            "Install it with: pip install 'edgedrizzle[live]'"
        ) from e

    try:
        client = edgedb.create_client(**connect_kwargs)
        try:
            logger.info("Querying schema")
            result = client.query_json(INTROSPECTION_QUERY)
        finally:
            client.close()
    except edgedb.EdgeDBError as e:
        raise SchemaInputError(f"Schema query failed: {e}") from e

    records = json.loads(result)
    if not isinstance(records, list):
        raise SchemaInputError("Expected a list of object types from the schema query")

    return object_types_from_records(records)


__all__ = [
    "INTROSPECTION_QUERY",
    "pointer_from_record",
    "object_types_from_records",
    "load_object_types",
    "query_object_types",
]
