"""
Command line interface.

Usage:
    edgedrizzle OUT_DIR --schema-json schema.json [--root-name schema]
    edgedrizzle OUT_DIR --live [--dsn edgedb://localhost:5656]

Options:
    --ddl FILE       Also write a Postgres DDL script
    --diagram FILE   Also write the schema diagram as DOT source
    -v, --verbose    Show debug logging
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .ddl import generate_ddl
from .exceptions import SchemaGenerationError
from .generate import DEFAULT_ROOT_NAME, generate_units
from .introspection import load_object_types, query_object_types
from .partition import partition_into_modules
from .visualizations import visualize_schema
from .writer import write_units

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edgedrizzle",
        description="Generate a Drizzle ORM schema from an EdgeDB schema",
    )
    parser.add_argument("out_dir", type=Path, help="Directory to write the schema into")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--schema-json",
        type=Path,
        help="JSON file holding the introspection query result",
    )
    source.add_argument(
        "--live",
        action="store_true",
        help="Query the schema from a running database",
    )

    parser.add_argument("--dsn", help="Database DSN for --live (default: client settings)")
    parser.add_argument(
        "--root-name",
        default=DEFAULT_ROOT_NAME,
        help=f"Name of the root module (default: {DEFAULT_ROOT_NAME})",
    )
    parser.add_argument("--ddl", type=Path, help="Also write a Postgres DDL script")
    parser.add_argument("--diagram", type=Path, help="Also write a Graphviz DOT diagram")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    return parser


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info("Generated %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.live:
            connect_kwargs = {"dsn": args.dsn} if args.dsn else {}
            object_types = query_object_types(**connect_kwargs)
        else:
            object_types = load_object_types(args.schema_json)

        module = partition_into_modules(object_types)

        # Render everything before writing anything
        units = generate_units(module, args.root_name)
        ddl = generate_ddl(module) if args.ddl else None
        diagram = visualize_schema(module).source if args.diagram else None

        write_units(units, args.out_dir)
        if ddl is not None:
            _write_text(args.ddl, ddl)
        if diagram is not None:
            _write_text(args.diagram, diagram)
    except (SchemaGenerationError, ImportError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
