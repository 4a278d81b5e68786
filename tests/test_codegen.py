# ============================================================================
# DATA-ACCESS CODE GENERATOR TESTS
# ============================================================================
# STATUS: Tests - Queries and generated module text
# PURPOSE: Verify query strings, naming and the rendered Python module
# CREATED: 19 OCT 2026
# ============================================================================
"""
Data-Access Code Generator Tests

Tests:
1. Count/select/insert/update query text and column order
2. Constant and function names derive from the type name
3. Generated module is valid Python and binds attributes to columns
4. Insert writes lastrowid back only for auto-increment keys

Run with:
    pytest tests/test_codegen.py -v
"""

import ast

import pytest

from model_maker.__version__ import __version__
from model_maker.core.codegen.queries import QueryBuilder
from model_maker.core.codegen.source_generator import DataAccessGenerator, snake_case
from model_maker.core.errors import InvalidTableError
from model_maker.core.models.field import Field
from model_maker.core.models.table import Table


# ============================================================================
# FIXTURES
# ============================================================================

def _make_table(name="user", auto_increment=True):
    return Table(
        name=name,
        fields=[
            Field(name="id", attribute="id", type="bigint", primary=True,
                  auto_increment=auto_increment, not_null=True),
            Field(name="name", attribute="name", type="varchar(512)", not_null=True),
            Field(name="dt_created", attribute="created_at", type="datetime"),
        ],
    )


@pytest.fixture
def table():
    return _make_table()


@pytest.fixture
def queries():
    return QueryBuilder()


@pytest.fixture
def generator():
    return DataAccessGenerator()


def _function_names(tree):
    return [node.name for node in tree.body if isinstance(node, ast.FunctionDef)]


def _constants(tree):
    values = {}
    for node in tree.body:
        if isinstance(node, ast.Assign) and isinstance(node.targets[0], ast.Name):
            values[node.targets[0].id] = ast.literal_eval(node.value)
    return values


# ============================================================================
# TESTS: Queries
# ============================================================================

class TestQueries:

    def test_count(self, queries, table):
        assert queries.count(table) == "SELECT COUNT(*) FROM user"

    def test_select_ends_with_condition_marker(self, queries, table):
        assert queries.select(table) == (
            "SELECT id, name, dt_created FROM user /*condition*/"
        )

    def test_insert_pairs_columns_and_placeholders(self, queries, table):
        assert queries.insert(table) == (
            "INSERT INTO user (id, name, dt_created) VALUES (:id, :name, :dt_created)"
        )

    def test_update_keyed_by_primary(self, queries, table):
        assert queries.update(table) == (
            "UPDATE user SET name=:name, dt_created=:dt_created WHERE id=:id"
        )

    def test_update_primary_not_first(self, queries):
        table = Table(
            name="item",
            fields=[
                Field(name="label", type="text"),
                Field(name="code", type="int", primary=True),
            ],
        )

        assert queries.update(table) == "UPDATE item SET label=:label WHERE code=:code"

    def test_update_requires_other_columns(self, queries):
        table = Table(name="seq", fields=[Field(name="id", type="int", primary=True)])

        with pytest.raises(InvalidTableError, match="no columns besides the primary field"):
            queries.update(table)

    def test_custom_condition_marker(self, table):
        assert QueryBuilder("-- where").select(table).endswith("FROM user -- where")

    def test_build(self, queries, table):
        query_set = queries.build(table)

        assert query_set.count == queries.count(table)
        assert query_set.insert == queries.insert(table)


# ============================================================================
# TESTS: Naming
# ============================================================================

class TestNaming:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("User", "user"),
            ("UserProfile", "user_profile"),
            ("HTTPLog", "http_log"),
            ("Item2Tag", "item2_tag"),
            ("user", "user"),
        ],
    )
    def test_snake_case(self, name, expected):
        assert snake_case(name) == expected

    def test_prefixes(self):
        assert DataAccessGenerator.constant_prefix("UserProfile") == "USER_PROFILE"
        assert DataAccessGenerator.function_prefix("UserProfile") == "user_profile"


# ============================================================================
# TESTS: Generated module
# ============================================================================

class TestRenderSource:

    def test_count_constant(self, generator, table):
        source = generator.render_source(table, "User")

        assert _constants(ast.parse(source))["USER_COUNT"] == "SELECT COUNT(*) FROM user"

    def test_constants_match_queries(self, generator, queries, table):
        constants = _constants(ast.parse(generator.render_source(table, "User")))

        assert constants == {
            "USER_COUNT": queries.count(table),
            "USER_SELECT": queries.select(table),
            "USER_UPDATE": queries.update(table),
            "USER_INSERT": queries.insert(table),
        }

    def test_operations(self, generator, table):
        tree = ast.parse(generator.render_source(table, "User"))

        assert _function_names(tree) == [
            "_user_params",
            "_user_from_row",
            "user_select_limit",
            "user_count",
            "user_insert",
            "user_update",
        ]

    def test_header_and_imports(self, generator, table):
        source = generator.render_source(table, "User", import_from=".user", source_name="user.py")

        assert source.startswith(
            f"# Code generated by model_maker {__version__} from user.py. DO NOT EDIT.\n"
        )
        assert "import easydb\n" in source
        assert "from .user import User\n" in source

    def test_default_import_is_snake_case(self, generator, table):
        source = generator.render_source(table, "UserProfile")

        assert "from user_profile import UserProfile\n" in source
        assert "def user_profile_count() -> int:" in source

    def test_runtime_module(self, table):
        source = DataAccessGenerator(runtime_module="app.db").render_source(table, "User")

        assert "import app.db\n" in source
        assert "app.db.named_exec(USER_INSERT" in source
        assert "easydb" not in source

    def test_params_map_columns_to_attributes(self, generator, table):
        source = generator.render_source(table, "User")

        assert '"dt_created": model.created_at,' in source
        assert 'created_at=row["dt_created"],' in source

    def test_select_limit_uses_select_query(self, generator, table):
        source = generator.render_source(table, "User")

        assert 'easydb.condition(USER_SELECT, "LIMIT :limit")' in source
        assert "easydb.condition(USER_INSERT" not in source

    def test_insert_stores_lastrowid(self, generator, table):
        source = generator.render_source(table, "User")

        assert "model.id = result.lastrowid" in source

    def test_insert_without_auto_increment(self, generator):
        source = generator.render_source(_make_table(auto_increment=False), "User")

        assert "lastrowid" not in source
        assert "    easydb.named_exec(USER_INSERT, _user_params(model))\n" in source
        ast.parse(source)

    def test_no_primary_raises(self, generator):
        table = Table(name="t", fields=[Field(name="a", type="int")])

        with pytest.raises(InvalidTableError):
            generator.render(table, "T")

    def test_render_both_artifacts(self, generator, table):
        artifacts = generator.render(table, "User")

        assert artifacts.ddl_text.startswith("CREATE TABLE user (\n")
        assert artifacts.queries.count == "SELECT COUNT(*) FROM user"
        ast.parse(artifacts.source_text)

    def test_deterministic(self, generator, table):
        assert generator.render_source(table, "User") == generator.render_source(table, "User")
