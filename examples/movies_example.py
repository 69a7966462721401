"""
Example generating a Drizzle schema for a small movie database
"""

from edgedrizzle import (
    Cardinality,
    ObjectType,
    Pointer,
    generate_ddl,
    generate_units,
    partition_into_modules,
)

UUID_DEFAULT = "std::uuid_generate_v1mc()"


def id_pointer():
    return Pointer(name="id", target_name="std::uuid", required=True, default=UUID_DEFAULT)


object_types = [
    ObjectType(
        name="default::Movie",
        pointers=(
            id_pointer(),
            Pointer(name="title", target_name="std::str", required=True),
            Pointer(name="release_year", target_name="std::int64"),
            Pointer(name="genre", target_name="default::Genre", is_link=True),
            Pointer(
                name="actors",
                target_name="default::Person",
                is_link=True,
                cardinality=Cardinality.MANY,
            ),
        ),
    ),
    ObjectType(
        name="default::Genre",
        pointers=(id_pointer(), Pointer(name="name", target_name="std::str", required=True)),
    ),
    ObjectType(
        name="default::Person",
        pointers=(
            id_pointer(),
            Pointer(name="first_name", target_name="std::str", required=True),
            Pointer(name="last_name", target_name="std::str"),
        ),
    ),
    ObjectType(
        name="default::nested::Hello",
        pointers=(id_pointer(), Pointer(name="hello", target_name="std::str")),
    ),
]


def main():
    print("=" * 80)
    print("Drizzle Schema Example")
    print("=" * 80)
    print()

    module = partition_into_modules(object_types)

    for unit in generate_units(module):
        print(f"// {unit.output_path}")
        print(unit.text)

    print("=" * 80)
    print("Postgres DDL")
    print("=" * 80)
    print()
    print(generate_ddl(module, pretty=True))


if __name__ == "__main__":
    main()
