"""
Tests for the scalar type vocabulary.
"""

import pytest

from edgedrizzle.context import Context
from edgedrizzle.exceptions import (
    SchemaGenerationError,
    UnimplementedScalarTypeError,
    UnknownScalarTypeError,
)
from edgedrizzle.type_map import (
    DRIZZLE_CONSTRUCTORS,
    PG_CORE,
    PG_TYPES,
    UNIMPLEMENTED_TYPES,
    ScalarType,
    UnrecognizedScalar,
    column_type,
    parse_scalar_type,
    pg_type,
)


class TestColumnType:
    """Tests for column_type()"""

    @pytest.mark.parametrize(
        "identifier, expected",
        [
            ("std::str", "text()"),
            ("std::int32", "integer()"),
            ("std::int16", "smallint()"),
            ("std::decimal", "numeric()"),
            ("std::bool", "boolean()"),
            ("std::float64", "doublePrecision()"),
            ("std::float32", "real()"),
            ("std::uuid", "uuid()"),
            ("std::bytes", "bytea()"),
            ("std::json", "jsonb()"),
            ("std::cal::local_time", "time()"),
            ("std::pg::json", "json()"),
            ("std::pg::timestamptz", "timestamptz()"),
            ("std::pg::timestamp", "timestamp()"),
            ("std::pg::date", "date()"),
            ("std::pg::interval", "interval()"),
        ],
    )
    def test_constructor_text(self, identifier, expected):
        """Test the generated constructor call for each implemented type"""
        assert column_type(Context(), identifier) == expected

    def test_int64_uses_number_mode(self):
        """Test that 64-bit integers are read as JS numbers"""
        assert column_type(Context(), "std::int64") == 'bigint({ mode: "number"})'

    def test_registers_import(self):
        """Test that the constructor is registered as a pg-core import"""
        ctx = Context()
        column_type(ctx, "std::int64")
        column_type(ctx, "std::str")

        assert ctx.imports == {PG_CORE: {"bigint", "text"}}

    def test_unknown_type(self):
        """Test that identifiers outside the vocabulary are fatal and named"""
        with pytest.raises(UnknownScalarTypeError, match="default::Mood") as exc_info:
            column_type(Context(), "default::Mood", owner="Movie.mood")

        assert exc_info.value.identifier == "default::Mood"
        assert "Movie.mood" in str(exc_info.value)

    @pytest.mark.parametrize(
        "identifier",
        [
            "std::bigint",
            "std::datetime",
            "std::duration",
            "std::cal::local_datetime",
            "std::cal::local_date",
            "std::cal::relative_duration",
            "std::cal::date_duration",
            "cfg::memory",
        ],
    )
    def test_unimplemented_type(self, identifier):
        """Test that recognized but unmapped types fail distinctly"""
        with pytest.raises(UnimplementedScalarTypeError) as exc_info:
            column_type(Context(), identifier, owner="T.c")

        assert not isinstance(exc_info.value, UnknownScalarTypeError)
        assert isinstance(exc_info.value, SchemaGenerationError)
        assert identifier in str(exc_info.value)

    def test_failure_registers_nothing(self):
        """Test that a failed lookup leaves the context untouched"""
        ctx = Context()
        with pytest.raises(UnknownScalarTypeError):
            column_type(ctx, "std::nope")

        assert ctx.imports == {}


class TestVocabulary:
    """Tests for the vocabulary tables"""

    def test_parse_known_identifier(self):
        """Test that known identifiers parse into the enumeration"""
        assert parse_scalar_type("std::str") is ScalarType.STR

    def test_parse_unknown_identifier(self):
        """Test that unknown identifiers keep the original string"""
        assert parse_scalar_type("std::nope") == UnrecognizedScalar("std::nope")

    def test_every_type_is_mapped_or_unimplemented(self):
        """Test that the vocabulary is split without overlap"""
        assert set(DRIZZLE_CONSTRUCTORS) | UNIMPLEMENTED_TYPES == set(ScalarType)
        assert not set(DRIZZLE_CONSTRUCTORS) & UNIMPLEMENTED_TYPES

    def test_pg_types_cover_implemented_types(self):
        """Test that every implemented type has a Postgres type"""
        assert set(PG_TYPES) == set(DRIZZLE_CONSTRUCTORS)

    def test_pg_type(self):
        """Test Postgres type lookup and its errors"""
        assert pg_type("std::float64") == "double precision"
        with pytest.raises(UnimplementedScalarTypeError):
            pg_type("std::datetime")
