"""
Drizzle schema generation.

Renders each module of the tree into one TypeScript unit: table
definitions followed by relation declarations, headed by the imports the
body needs.

Example output:

    import { relations } from 'drizzle-orm';
    import { pgTable, text, uuid } from 'drizzle-orm/pg-core';


    export const movieTable = pgTable("Movie", {
      id: uuid().notNull(),
      genre_id: uuid().references(() => genreTable.id),
      title: text().notNull(),
    });

    export const movieRelations = relations(movieTable, ({ one }) => ({
      genre: one(genreTable, {
        fields: [movieTable.genre_id],
        references: [genreTable.id],
      }),
    }));
"""

import json
import logging
from pathlib import PurePosixPath
from typing import Dict, Iterable, List, Optional, Sequence

from .context import Context
from .exceptions import (
    CrossModuleReferenceError,
    DuplicateIdentifierError,
    OutputPathConflictError,
)
from .models import GeneratedUnit, Module, ObjectType, Pointer, Table
from .naming import (
    NAMESPACE_SEPARATOR,
    module_qualifier,
    path_last,
    path_module,
    relations_var_name,
    table_var_name,
)
from .partition import partition_into_modules
from .type_map import DRIZZLE_ORM, PG_CORE, column_type

logger = logging.getLogger(__name__)

DEFAULT_ROOT_NAME = "schema"
FILE_EXTENSION = ".ts"
INDEX_FILE = "index" + FILE_EXTENSION


def _literal(value: str) -> str:
    """Render a double-quoted string literal"""
    return json.dumps(value)


def link_target_table(module: Module, table: Table, column: Pointer) -> str:
    """
    Get the name of the table a link column references.

    References are resolved within the module's own unit only. Unqualified
    targets (join table sources) always belong to the module.

    Raises:
        CrossModuleReferenceError: If the target lives in another module
    """
    target_path = path_module(column.target_name)
    if target_path is not None and target_path != module.path:
        raise CrossModuleReferenceError(table.name, column.name, column.target_name)
    return path_last(column.target_name)


def link_target_var(module: Module, table: Table, column: Pointer) -> str:
    """Get the table variable a link column references"""
    return table_var_name(link_target_table(module, table, column))


# ============================================================================
# Tables
# ============================================================================


def generate_column(ctx: Context, module: Module, table: Table, column: Pointer) -> str:
    """Render one column entry of a table definition"""
    if column.is_link:
        text = f"{column.name}_id: {ctx.import_symbol(PG_CORE, 'uuid')}()"
    else:
        owner = f"{table.name}.{column.name}"
        text = f"{column.name}: {column_type(ctx, column.target_name, owner)}"

    if column.required:
        text += ".notNull()"
    if column.default is not None:
        sql = ctx.import_symbol(DRIZZLE_ORM, "sql")
        text += f".default({sql}.raw({_literal(column.default)}))"
    if column.is_link:
        text += f".references(() => {link_target_var(module, table, column)}.id)"

    return text + ","


def generate_table(
    ctx: Context, module: Module, table: Table, qualifier: Optional[str] = None
) -> str:
    """Render the table definition"""
    parts = ["\nexport const ", table_var_name(table.name), " = "]

    if qualifier:
        parts += [ctx.import_symbol(PG_CORE, "pgSchema"), "(", _literal(qualifier), ").table("]
    else:
        parts += [ctx.import_symbol(PG_CORE, "pgTable"), "("]
    parts += [_literal(table.name), ", {"]

    with ctx.indented():
        for column in table.columns:
            parts.append(ctx.new_line())
            parts.append(generate_column(ctx, module, table, column))

    parts += [ctx.new_line(), "});\n"]
    return "".join(parts)


def generate_relations(ctx: Context, module: Module, table: Table) -> str:
    """
    Render the relations block of a table.

    All link columns are grouped into one declaration. Returns an empty
    string for tables without links.
    """
    links = table.link_columns()
    if not links:
        return ""

    table_var = table_var_name(table.name)
    parts = [
        "\nexport const ",
        relations_var_name(table.name),
        " = ",
        ctx.import_symbol(DRIZZLE_ORM, "relations"),
        f"({table_var}, ({{ one }}) => ({{",
    ]

    with ctx.indented():
        for link in links:
            target_var = link_target_var(module, table, link)
            parts += [ctx.new_line(), f"{link.name}: one({target_var}, {{"]
            with ctx.indented():
                parts += [ctx.new_line(), f"fields: [{table_var}.{link.name}_id],"]
                parts += [ctx.new_line(), f"references: [{target_var}.id],"]
            parts += [ctx.new_line(), "}),"]

    parts += [ctx.new_line(), "}));\n"]
    return "".join(parts)


# ============================================================================
# Units
# ============================================================================


def generate_unit(module: Module) -> str:
    """
    Render all tables of a module into one TypeScript unit.

    Args:
        module: Module with at least one table

    Returns:
        Import header, a blank line, then the body

    Raises:
        DuplicateIdentifierError: If two table names share a variable name
    """
    ctx = Context()
    qualifier = module_qualifier(module.path)

    seen: Dict[str, str] = {}
    for table in module.tables:
        var_name = table_var_name(table.name)
        if var_name in seen:
            raise DuplicateIdentifierError(var_name, seen[var_name], table.name)
        seen[var_name] = table.name

    body = []
    for table in module.tables:
        body.append(generate_table(ctx, module, table, qualifier))
        body.append(generate_relations(ctx, module, table))

    return ctx.render("".join(body))


def unit_output_path(
    path: Sequence[str], has_submodules: bool, root_name: str = DEFAULT_ROOT_NAME
) -> PurePosixPath:
    """
    Get where a module's unit is written, relative to the output root.

    A module with submodules becomes a directory with an index file; a
    childless module becomes a single file next to its siblings:

        []                 (with children) -> schema/index.ts
        ["default"]        (with children) -> schema/default/index.ts
        ["default", "a"]   (childless)     -> schema/default/a.ts
    """
    parts = [root_name, *path]
    if has_submodules:
        return PurePosixPath(*parts, INDEX_FILE)
    return PurePosixPath(*parts[:-1], parts[-1] + FILE_EXTENSION)


def _module_label(module: Module, root_name: str) -> str:
    return NAMESPACE_SEPARATOR.join(module.path) or root_name


def generate_units(module: Module, root_name: str = DEFAULT_ROOT_NAME) -> List[GeneratedUnit]:
    """
    Generate one unit for every module of the tree that holds tables.

    Modules without local tables produce no unit, but their submodules are
    still visited. Units are built in full before returning, so a failure
    in any module produces no output at all.

    Args:
        module: Root of the tree to generate
        root_name: Label of the root module in output paths

    Returns:
        List of GeneratedUnit in pre-order, submodules sorted by name

    Raises:
        OutputPathConflictError: If two modules map to the same file
    """
    units = []
    owners: Dict[PurePosixPath, Module] = {}
    for submodule in module.iter_modules():
        if not submodule.tables:
            continue

        relative_path = submodule.path[len(module.path) :]
        output_path = unit_output_path(relative_path, bool(submodule.submodules), root_name)
        if output_path in owners:
            raise OutputPathConflictError(
                str(output_path),
                _module_label(owners[output_path], root_name),
                _module_label(submodule, root_name),
            )
        owners[output_path] = submodule

        units.append(
            GeneratedUnit(
                path=tuple(submodule.path),
                text=generate_unit(submodule),
                output_path=output_path,
            )
        )
        logger.debug("Rendered %s (%d tables)", units[-1].output_path, len(submodule.tables))

    logger.info("Generated %d units", len(units))
    return units


def generate_schema(
    object_types: Iterable[ObjectType], root_name: str = DEFAULT_ROOT_NAME
) -> List[GeneratedUnit]:
    """Partition object types into modules and generate all units"""
    return generate_units(partition_into_modules(object_types), root_name)


__all__ = [
    "DEFAULT_ROOT_NAME",
    "link_target_table",
    "link_target_var",
    "generate_column",
    "generate_table",
    "generate_relations",
    "generate_unit",
    "unit_output_path",
    "generate_units",
    "generate_schema",
]
