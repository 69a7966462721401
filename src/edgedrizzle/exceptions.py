"""
Errors raised while generating a schema.

Every error is fatal to the generation run: nothing is written once one of
these is raised.
"""

from typing import Optional


class SchemaGenerationError(Exception):
    """Base class for all generation failures"""


class UnknownScalarTypeError(SchemaGenerationError):
    """A scalar type identifier is not part of the type vocabulary"""

    def __init__(self, identifier: str, owner: Optional[str] = None):
        self.identifier = identifier
        self.owner = owner
        location = f" (used by {owner})" if owner else ""
        super().__init__(f"Unknown scalar type: {identifier}{location}")


class UnimplementedScalarTypeError(SchemaGenerationError):
    """A scalar type identifier is recognized but has no column mapping yet"""

    def __init__(self, identifier: str, owner: Optional[str] = None):
        self.identifier = identifier
        self.owner = owner
        location = f" (used by {owner})" if owner else ""
        super().__init__(f"Scalar type not implemented: {identifier}{location}")


class CrossModuleReferenceError(SchemaGenerationError):
    """A link column targets a table generated into a different module"""

    def __init__(self, table: str, column: str, target: str):
        self.table = table
        self.column = column
        self.target = target
        super().__init__(
            f"Link {table}.{column} references {target}, which lives in another module. "
            "References across modules are not supported."
        )


class DuplicateIdentifierError(SchemaGenerationError):
    """Two tables of one module render to the same variable name"""

    def __init__(self, identifier: str, first: str, second: str):
        self.identifier = identifier
        self.first = first
        self.second = second
        super().__init__(f"Tables {first} and {second} both generate the identifier {identifier}")


class OutputPathConflictError(SchemaGenerationError):
    """Two modules would be written to the same file"""

    def __init__(self, output_path: str, first: str, second: str):
        self.output_path = output_path
        self.first = first
        self.second = second
        super().__init__(f"Modules {first} and {second} would both be written to {output_path}")


class SchemaInputError(SchemaGenerationError):
    """An introspection record could not be turned into an object type"""


__all__ = [
    "SchemaGenerationError",
    "UnknownScalarTypeError",
    "UnimplementedScalarTypeError",
    "CrossModuleReferenceError",
    "DuplicateIdentifierError",
    "OutputPathConflictError",
    "SchemaInputError",
]
