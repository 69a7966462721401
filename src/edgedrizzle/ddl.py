"""
Postgres DDL export.

Renders the same tables as the Drizzle units as plain CREATE statements,
built as sqlglot expressions:

    CREATE SCHEMA IF NOT EXISTS "ns";
    CREATE TABLE "ns"."Movie" ("id" UUID NOT NULL, "title" TEXT NOT NULL, ...);

Defaults are not exported; they are expressions of the source schema, not SQL.
"""

import logging
from typing import List, Optional

from sqlglot import exp

from .generate import link_target_table
from .models import Module, Pointer, Table
from .naming import module_qualifier
from .type_map import pg_type

logger = logging.getLogger(__name__)

DIALECT = "postgres"
LINK_TYPE = "uuid"
PRIMARY_KEY = "id"


def _table_ref(name: str, qualifier: Optional[str]) -> exp.Table:
    return exp.Table(
        this=exp.to_identifier(name, quoted=True),
        db=exp.to_identifier(qualifier, quoted=True) if qualifier else None,
    )


def column_def(module: Module, table: Table, column: Pointer) -> exp.ColumnDef:
    """Build the column definition of one column"""
    constraints = []
    if column.required:
        constraints.append(exp.ColumnConstraint(kind=exp.NotNullColumnConstraint()))

    if column.is_link:
        name = f"{column.name}_id"
        kind = exp.DataType.build(LINK_TYPE, dialect=DIALECT)
        target = _table_ref(
            link_target_table(module, table, column), module_qualifier(module.path)
        )
        reference = exp.Reference(
            this=exp.Schema(this=target, expressions=[exp.to_identifier(PRIMARY_KEY, quoted=True)])
        )
        constraints.append(exp.ColumnConstraint(kind=reference))
    else:
        name = column.name
        kind = exp.DataType.build(
            pg_type(column.target_name, f"{table.name}.{column.name}"), dialect=DIALECT
        )

    return exp.ColumnDef(
        this=exp.to_identifier(name, quoted=True),
        kind=kind,
        constraints=constraints,
    )


def create_table(module: Module, table: Table) -> exp.Create:
    """Build the CREATE TABLE statement of one table"""
    columns = [column_def(module, table, c) for c in table.columns]
    schema = exp.Schema(this=_table_ref(table.name, module_qualifier(module.path)), expressions=columns)
    return exp.Create(this=schema, kind="TABLE")


def create_schema(qualifier: str) -> exp.Create:
    return exp.Create(
        this=exp.Table(this=exp.to_identifier(qualifier, quoted=True)),
        kind="SCHEMA",
        exists=True,
    )


def ddl_statements(module: Module) -> List[exp.Create]:
    """
    Build all statements for a module tree.

    Each qualified module first gets its CREATE SCHEMA, then its tables in
    module order.
    """
    statements: List[exp.Create] = []
    for submodule in module.iter_modules():
        if not submodule.tables:
            continue

        qualifier = module_qualifier(submodule.path)
        if qualifier:
            statements.append(create_schema(qualifier))
        statements.extend(create_table(submodule, t) for t in submodule.tables)

    return statements


def generate_ddl(module: Module, pretty: bool = False) -> str:
    """
    Render the DDL script for a module tree.

    Args:
        module: Root of the tree
        pretty: Format statements over multiple lines

    Returns:
        Statements separated by ";" and a blank line
    """
    statements = ddl_statements(module)
    logger.info("Rendered %d DDL statements", len(statements))
    return "".join(f"{s.sql(dialect=DIALECT, pretty=pretty)};\n\n" for s in statements)


__all__ = [
    "column_def",
    "create_table",
    "create_schema",
    "ddl_statements",
    "generate_ddl",
]
