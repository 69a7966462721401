"""
Graphviz diagrams of a generated schema.

Pure presentation: reads the module tree and formats it as DOT.
"""

from typing import List, Sequence

import graphviz

from .models import Module, Table
from .naming import NAMESPACE_SEPARATOR, path_last, path_module


def _sanitize_graphviz_id(node_id: str) -> str:
    """
    Sanitize a node ID for use in Graphviz.

    Graphviz interprets colons as node:port syntax, so they are replaced.
    """
    return node_id.replace(":", "__").replace(".", "_")


def _table_id(path: Sequence[str], table_name: str) -> str:
    return _sanitize_graphviz_id(NAMESPACE_SEPARATOR.join([*path, table_name]))


def _table_label(table: Table) -> str:
    lines: List[str] = [table.name, "-" * max(len(table.name), 8)]
    for column in table.columns:
        if column.is_link:
            lines.append(f"{column.name}_id -> {path_last(column.target_name)}")
        else:
            marker = "" if column.required else "?"
            lines.append(f"{column.name}{marker}: {path_last(column.target_name)}")
    return "\\l".join(lines) + "\\l"


def visualize_schema(module: Module) -> graphviz.Digraph:
    """
    Create a Graphviz diagram of all tables in a module tree.

    Each module with tables becomes a cluster, each table a node listing
    its columns, and each link column an edge to the table it references.

    Args:
        module: Root of the module tree

    Returns:
        graphviz.Digraph object ready to render
    """
    dot = graphviz.Digraph(comment="Schema")
    dot.attr(rankdir="LR")
    dot.attr("node", shape="box", style="rounded,filled", fontname="Arial", fontsize="11")
    dot.attr("edge", fontsize="9", color="#555555")

    for submodule in module.iter_modules():
        if not submodule.tables:
            continue

        cluster_name = "cluster_" + _sanitize_graphviz_id("_".join(submodule.path) or "root")
        with dot.subgraph(name=cluster_name) as cluster:
            cluster.attr(label=NAMESPACE_SEPARATOR.join(submodule.path) or "<root>")
            cluster.attr(style="dashed", color="#9E9E9E")
            for table in submodule.tables:
                # Join tables are drawn lighter than primary tables
                color = "#BBDEFB" if "." in table.name else "#2196F3"
                cluster.node(
                    _table_id(submodule.path, table.name),
                    label=_table_label(table),
                    fillcolor=color,
                )

    for submodule in module.iter_modules():
        for table in submodule.tables:
            for column in table.link_columns():
                target_path = path_module(column.target_name) or submodule.path
                dot.edge(
                    _table_id(submodule.path, table.name),
                    _table_id(target_path, path_last(column.target_name)),
                    label=column.name,
                )

    return dot


__all__ = ["visualize_schema"]
