"""
Tests for the command line interface.
"""

import json

import pytest

from edgedrizzle.cli import build_parser, main


def write_schema(path, title_type="std::str"):
    records = [
        {
            "name": "default::Movie",
            "ptrs": [
                {"name": "id", "target_name": "std::uuid", "cardinality": "One", "required": True},
                {"name": "title", "target_name": title_type, "cardinality": "One"},
                {"name": "tags", "target_name": "std::str", "cardinality": "Many"},
            ],
        },
        {
            "name": "default::nested::Hello",
            "ptrs": [{"name": "hello", "target_name": "std::str", "cardinality": "One"}],
        },
    ]
    path.write_text(json.dumps(records))
    return path


class TestMain:
    """Tests for main()"""

    def test_generates_schema(self, tmp_path):
        """Test a full run from a JSON dump"""
        schema = write_schema(tmp_path / "schema.json")
        out_dir = tmp_path / "out"

        assert main([str(out_dir), "--schema-json", str(schema)]) == 0

        index = out_dir / "schema" / "default" / "index.ts"
        assert index.exists()
        assert 'pgTable("Movie"' in index.read_text(encoding="utf-8")
        assert (out_dir / "schema" / "default" / "nested.ts").exists()

    def test_root_name(self, tmp_path):
        """Test that --root-name labels the output root"""
        schema = write_schema(tmp_path / "schema.json")

        assert main([str(tmp_path / "out"), "--schema-json", str(schema), "--root-name", "db"]) == 0
        assert (tmp_path / "out" / "db" / "default" / "index.ts").exists()

    def test_extra_outputs(self, tmp_path):
        """Test writing the DDL script and the diagram"""
        schema = write_schema(tmp_path / "schema.json")
        ddl = tmp_path / "extra" / "schema.sql"
        diagram = tmp_path / "extra" / "schema.dot"

        code = main(
            [
                str(tmp_path / "out"),
                "--schema-json",
                str(schema),
                "--ddl",
                str(ddl),
                "--diagram",
                str(diagram),
            ]
        )

        assert code == 0
        assert 'CREATE TABLE "Movie"' in ddl.read_text(encoding="utf-8")
        assert "digraph" in diagram.read_text(encoding="utf-8")

    def test_generation_error(self, tmp_path, caplog):
        """Test that a fatal error exits non-zero without writing output"""
        schema = write_schema(tmp_path / "schema.json", title_type="std::nope")
        out_dir = tmp_path / "out"

        assert main([str(out_dir), "--schema-json", str(schema)]) == 1
        assert not out_dir.exists()
        assert "std::nope" in caplog.text

    def test_missing_schema_file(self, tmp_path):
        """Test that an unreadable input file exits non-zero"""
        assert main([str(tmp_path / "out"), "--schema-json", str(tmp_path / "missing.json")]) == 1

    def test_malformed_record(self, tmp_path, caplog):
        """Test that a malformed record is logged and exits non-zero"""
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps([{"name": 5, "ptrs": []}]))

        assert main([str(tmp_path / "out"), "--schema-json", str(schema)]) == 1
        assert "non-string 'name'" in caplog.text

    def test_write_failure(self, tmp_path, caplog):
        """Test that an unwritable output directory exits non-zero"""
        schema = write_schema(tmp_path / "schema.json")
        out_dir = tmp_path / "out"
        out_dir.write_text("not a directory")

        assert main([str(out_dir), "--schema-json", str(schema)]) == 1
        assert any(r.levelname == "ERROR" for r in caplog.records)


class TestParser:
    """Tests for argument parsing"""

    def test_source_required(self):
        """Test that a schema source must be given"""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["out"])

    def test_sources_exclusive(self):
        """Test that --schema-json and --live cannot be combined"""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["out", "--schema-json", "s.json", "--live"])

    def test_defaults(self):
        """Test default option values"""
        args = build_parser().parse_args(["out", "--live"])

        assert args.root_name == "schema"
        assert args.ddl is None
        assert args.diagram is None
        assert not args.verbose
