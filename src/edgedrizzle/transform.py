"""
Object type to table conversion.

Each object type becomes one primary table holding its single-valued
pointers, plus one join table for every multi-valued pointer:

    Movie { id, title, multi actors: Person }
        -> Movie(id, title)
        -> Movie.actors(source -> Movie, target -> Person)
"""

from typing import Iterable, List

from .models import Cardinality, ObjectType, Pointer, Table

# System pointer present on every object type, never materialized
TYPE_POINTER = "__type__"

# Column order: well-known columns first, then everything else by name
POINTER_PRIORITIES = {
    "id": 0,
    TYPE_POINTER: 1,
    "source": 2,
    "target": 3,
}
DEFAULT_PRIORITY = 4


def pointer_priority(pointer: Pointer) -> int:
    return POINTER_PRIORITIES.get(pointer.name, DEFAULT_PRIORITY)


def sort_pointers(pointers: Iterable[Pointer]) -> List[Pointer]:
    """Sort pointers into column order, independent of their input order"""
    return sorted(pointers, key=lambda p: (pointer_priority(p), p.name))


def join_table(owner_name: str, pointer: Pointer) -> Table:
    """Build the association table for a multi-valued pointer"""
    return Table(
        name=f"{owner_name}.{pointer.name}",
        columns=[
            Pointer(
                name="source",
                target_name=owner_name,
                is_link=True,
                cardinality=Cardinality.ONE,
                required=True,
            ),
            Pointer(
                name="target",
                target_name=pointer.target_name,
                is_link=pointer.is_link,
                cardinality=Cardinality.ONE,
                required=True,
            ),
        ],
    )


def object_type_to_tables(object_type: ObjectType) -> List[Table]:
    """
    Convert an object type into its tables.

    The primary table always comes first, followed by the join tables in
    pointer order.

    Args:
        object_type: Object type, already stripped of its module path

    Returns:
        List of tables (never empty)
    """
    collections = [p for p in object_type.pointers if p.cardinality == Cardinality.MANY]
    singles = [
        p
        for p in object_type.pointers
        if p.cardinality == Cardinality.ONE and p.name != TYPE_POINTER
    ]

    primary = Table(name=object_type.name, columns=sort_pointers(singles))
    return [primary] + [join_table(object_type.name, p) for p in collections]


__all__ = [
    "TYPE_POINTER",
    "POINTER_PRIORITIES",
    "pointer_priority",
    "sort_pointers",
    "join_table",
    "object_type_to_tables",
]
