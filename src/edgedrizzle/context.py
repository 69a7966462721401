"""
Import-tracking emitter for generated TypeScript.

A Context is created for one generated file. While the body is being
composed, every symbol it uses is registered with import_symbol(); once the
body is complete, render() prepends a sorted, de-duplicated import header.

Example:
    ctx = Context()
    body = "export const t = " + ctx.import_symbol("drizzle-orm/pg-core", "pgTable") + "(...);"
    text = ctx.render(body)
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Set, Tuple

INDENT = "  "


class Context:
    """Tracks required imports and the current indentation of one generated file"""

    def __init__(self):
        self.indent_level = 0
        self.imports: Dict[str, Set[str]] = {}

    # ─── Indentation ───

    def indent(self) -> None:
        self.indent_level += 1

    def dedent(self) -> None:
        if self.indent_level == 0:
            raise RuntimeError("Cannot dedent below zero")
        self.indent_level -= 1

    @contextmanager
    def indented(self) -> Iterator["Context"]:
        """Indent for the duration of a with-block"""
        self.indent()
        try:
            yield self
        finally:
            self.dedent()

    def new_line(self) -> str:
        """Line break followed by the current indentation"""
        return "\n" + INDENT * self.indent_level

    # ─── Imports ───

    def import_symbol(self, module: str, name: str) -> str:
        """
        Register that `name` must be imported from `module`.

        Returns the name so it can be used directly in the body text.
        """
        self.imports.setdefault(module, set()).add(name)
        return name

    def sorted_imports(self) -> List[Tuple[str, List[str]]]:
        """Get (module, names) pairs, both levels sorted"""
        return [(module, sorted(self.imports[module])) for module in sorted(self.imports)]

    def render_imports(self) -> str:
        """Render one import statement per module"""
        lines = []
        for module, names in self.sorted_imports():
            lines.append(f"import {{ {', '.join(names)} }} from '{module}';\n")
        return "".join(lines)

    def render(self, body: str) -> str:
        """Render the import header, a blank line, then the body"""
        return self.render_imports() + "\n" + body


__all__ = ["Context", "INDENT"]
