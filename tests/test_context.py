"""
Tests for the import-tracking emitter.
"""

import pytest

from edgedrizzle.context import Context


class TestImports:
    """Tests for import registration and rendering"""

    def test_import_symbol_returns_name(self):
        """Test that registering an import returns the symbol for inline use"""
        ctx = Context()

        assert ctx.import_symbol("drizzle-orm/pg-core", "pgTable") == "pgTable"
        assert ctx.imports == {"drizzle-orm/pg-core": {"pgTable"}}

    def test_symbols_are_merged_and_sorted(self):
        """Test that {b, a} then {a, c} renders a single line listing a, b, c"""
        ctx = Context()
        for name in ["b", "a"]:
            ctx.import_symbol("mod", name)
        for name in ["a", "c"]:
            ctx.import_symbol("mod", name)

        assert ctx.render_imports() == "import { a, b, c } from 'mod';\n"

    def test_modules_are_sorted(self):
        """Test that modules render in lexicographic order"""
        ctx = Context()
        ctx.import_symbol("drizzle-orm/pg-core", "uuid")
        ctx.import_symbol("drizzle-orm", "sql")
        ctx.import_symbol("drizzle-orm/pg-core", "bigint")
        ctx.import_symbol("drizzle-orm", "relations")

        assert ctx.render_imports() == (
            "import { relations, sql } from 'drizzle-orm';\n"
            "import { bigint, uuid } from 'drizzle-orm/pg-core';\n"
        )

    def test_registration_order_does_not_matter(self):
        """Test that the header only depends on the set of registrations"""
        pairs = [("x", "b"), ("w", "z"), ("x", "a"), ("w", "a"), ("x", "b")]

        first = Context()
        for module, name in pairs:
            first.import_symbol(module, name)
        second = Context()
        for module, name in reversed(pairs):
            second.import_symbol(module, name)

        assert first.render_imports() == second.render_imports()

    def test_render_puts_header_before_body(self):
        """Test that render() emits header, blank line, body"""
        ctx = Context()
        body = "\nexport const t = " + ctx.import_symbol("mod", "f") + "();\n"

        assert ctx.render(body) == "import { f } from 'mod';\n\n\nexport const t = f();\n"

    def test_render_without_imports(self):
        """Test rendering a body that needs no imports"""
        assert Context().render("body") == "\nbody"


class TestIndentation:
    """Tests for indentation tracking"""

    def test_new_line_follows_indent(self):
        """Test that new_line() indents two spaces per level"""
        ctx = Context()
        assert ctx.new_line() == "\n"

        ctx.indent()
        ctx.indent()
        assert ctx.new_line() == "\n    "

        ctx.dedent()
        assert ctx.new_line() == "\n  "

    def test_indented_block(self):
        """Test that indented() restores the level on exit"""
        ctx = Context()
        with ctx.indented():
            assert ctx.indent_level == 1
            with ctx.indented():
                assert ctx.indent_level == 2
        assert ctx.indent_level == 0

    def test_dedent_below_zero_raises(self):
        """Test that the indent level never goes negative"""
        with pytest.raises(RuntimeError, match="below zero"):
            Context().dedent()
