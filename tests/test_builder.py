# ============================================================================
# TABLE BUILDER TESTS
# ============================================================================
# STATUS: Tests - Declared fields to Table
# PURPOSE: Verify filtering, ordering and the primary-key invariant
# CREATED: 19 OCT 2026
# ============================================================================
"""
Table Builder Tests

Tests:
1. Unannotated and sentinel fields never become columns
2. Column order follows declaration order
3. Exactly one primary field is required
4. Annotation errors name the offending attribute

Run with:
    pytest tests/test_builder.py -v
"""

import pytest

from model_maker.core.errors import InvalidTableError, MalformedAnnotationError
from model_maker.core.models.declaration import DeclaredField
from model_maker.core.models.field import Field
from model_maker.core.models.table import Table
from model_maker.core.schema.builder import TableBuilder


# ============================================================================
# HELPERS
# ============================================================================

def _make_field(attribute, annotation=None):
    return DeclaredField(attribute=attribute, annotation=annotation)


ID = _make_field("id", 'db:"id" gen:"bigint,autoincrement,notnull,primary"')
NAME = _make_field("name", 'db:"name" gen:"varchar(512),notnull"')


@pytest.fixture
def builder():
    return TableBuilder()


# ============================================================================
# TESTS: Folding
# ============================================================================

class TestBuild:

    def test_columns_in_declaration_order(self, builder):
        table = builder.build("user", [ID, NAME, _make_field("login", 'db:"login" gen:"text"')])

        assert table.name == "user"
        assert table.column_names == ["id", "name", "login"]

    def test_attribute_recorded(self, builder):
        created = _make_field("created_at", 'db:"dt_created" gen:"datetime"')
        table = builder.build("user", [ID, created])

        assert table.fields[1].name == "dt_created"
        assert table.fields[1].attribute == "created_at"

    def test_sentinel_and_unannotated_are_skipped(self, builder):
        sources = [
            ID,
            _make_field("token", 'db:"-"'),
            _make_field("cache"),
            NAME,
        ]
        table = builder.build("user", sources)

        assert table.column_names == ["id", "name"]

    def test_column_count(self, builder):
        sources = [
            ID,
            NAME,
            _make_field("a", 'db:"-" gen:"int"'),
            _make_field("b"),
            _make_field("c", 'db:"c"'),
        ]
        annotated = [s for s in sources if s.is_annotated]
        sentinels = [s for s in annotated if s.annotation.startswith('db:"-"')]

        table = builder.build("t", sources)

        assert len(table.fields) == len(annotated) - len(sentinels)

    def test_field_without_gen_is_kept(self, builder, caplog):
        with caplog.at_level("WARNING"):
            table = builder.build("user", [ID, _make_field("nick", 'db:"nick"')])

        assert table.column_names == ["id", "nick"]
        assert table.fields[1].type == ""
        assert "no gen annotation" in caplog.text


# ============================================================================
# TESTS: Primary-key invariant
# ============================================================================

class TestPrimaryKey:

    def test_no_primary(self, builder):
        with pytest.raises(InvalidTableError, match="no field is flagged primary") as excinfo:
            builder.build("user", [NAME])

        assert excinfo.value.table_name == "user"

    def test_only_sentinel_primary(self, builder):
        hidden = _make_field("id", 'db:"-" gen:"bigint,primary"')

        with pytest.raises(InvalidTableError):
            builder.build("user", [hidden, NAME])

    def test_several_primaries(self, builder):
        other = _make_field("code", 'db:"code" gen:"int,primary"')

        with pytest.raises(InvalidTableError, match=r"several fields are flagged primary \(id, code\)"):
            builder.build("user", [ID, other])

    def test_table_primary_field(self):
        table = Table(name="t", fields=[Field(name="a"), Field(name="b", primary=True)])

        assert table.primary_field.name == "b"
        assert table.require_primary_field().name == "b"

    def test_table_primary_field_none_when_ambiguous(self):
        table = Table(name="t", fields=[Field(name="a", primary=True), Field(name="b", primary=True)])

        assert table.primary_field is None


# ============================================================================
# TESTS: Errors
# ============================================================================

class TestErrors:

    def test_malformed_field_names_attribute(self, builder):
        bad = _make_field("age", 'db:"age" gen:"int,nullable"')

        with pytest.raises(MalformedAnnotationError) as excinfo:
            builder.build("user", [ID, bad, NAME])

        assert excinfo.value.attribute == "age"
        assert "field age:" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, MalformedAnnotationError)

    def test_first_error_wins(self, builder):
        first = _make_field("a", 'db:"a" gen:"int,bogus"')
        second = _make_field("b", 'gen:"int"')

        with pytest.raises(MalformedAnnotationError) as excinfo:
            builder.build("user", [first, second])

        assert excinfo.value.attribute == "a"
