"""
Tests for the schema diagram.
"""

import graphviz

from edgedrizzle.models import Cardinality, ObjectType, Pointer
from edgedrizzle.partition import partition_into_modules
from edgedrizzle.visualizations import visualize_schema


def create_schema():
    return partition_into_modules(
        [
            ObjectType(
                name="ns::Movie",
                pointers=(
                    Pointer(name="id", target_name="std::uuid", required=True),
                    Pointer(name="genre", target_name="other::Genre", is_link=True),
                    Pointer(name="tags", target_name="std::str", cardinality=Cardinality.MANY),
                ),
            ),
            ObjectType(name="other::Genre", pointers=()),
        ]
    )


class TestVisualizeSchema:
    """Tests for visualize_schema()"""

    def test_returns_digraph(self):
        """Test that a Graphviz digraph is returned"""
        assert isinstance(visualize_schema(create_schema()), graphviz.Digraph)

    def test_one_cluster_per_module(self):
        """Test that modules with tables become clusters"""
        source = visualize_schema(create_schema()).source

        assert "subgraph cluster_ns" in source
        assert "subgraph cluster_other" in source

    def test_table_nodes(self):
        """Test that primary and join tables become nodes"""
        source = visualize_schema(create_schema()).source

        assert "ns____Movie " in source or "ns____Movie\n" in source
        assert "ns____Movie_tags" in source
        assert "other____Genre" in source

    def test_link_edges(self):
        """Test that link columns become edges, across modules too"""
        source = visualize_schema(create_schema()).source

        assert "ns____Movie_tags -> ns____Movie" in source
        assert "ns____Movie -> other____Genre" in source

    def test_empty_schema(self):
        """Test that an empty tree still renders"""
        source = visualize_schema(partition_into_modules([])).source

        assert "->" not in source
