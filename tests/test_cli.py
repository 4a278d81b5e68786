# ============================================================================
# CLI TESTS
# ============================================================================
# STATUS: Tests - Command-line entry point
# PURPOSE: Verify exit codes per error kind and dry-run output
# CREATED: 19 OCT 2026
# ============================================================================
"""
CLI Tests

Tests:
1. Successful runs exit 0 and write artifacts
2. Every error kind maps to its own exit code with a message on stderr,
   including unusable --suffix, --table and --file-mode values
3. --dry-run prints the artifacts on stdout and writes nothing

Run with:
    pytest tests/test_cli.py -v
"""

import logging
import os
import stat
import textwrap

import pytest

from model_maker.cli import build_parser, main
from model_maker.core.config.defaults import reset_defaults
from model_maker.core.contracts import ExitCode


# ============================================================================
# FIXTURES
# ============================================================================

USER_SOURCE = '''
from typing import Annotated


class User:
    id: Annotated[int, 'db:"id" gen:"bigint,autoincrement,notnull,primary"']
    name: Annotated[str, 'db:"name" gen:"varchar(512),notnull"']
'''


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    """main() reconfigures the root logger; put it back afterwards."""
    for name in (
        "MODEL_MAKER_SUFFIX",
        "MODEL_MAKER_RUNTIME",
        "MODEL_MAKER_FILE_MODE",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_defaults()

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    reset_defaults()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "user.py"
    path.write_text(textwrap.dedent(USER_SOURCE), encoding="utf-8")
    return path


def _args(source_file, *extra, table="user", struct="User"):
    return ["--file", str(source_file), "--struct", struct, "--table", table, *extra]


def _write(tmp_path, text):
    path = tmp_path / "model.py"
    path.write_text(text, encoding="utf-8")
    return path


# ============================================================================
# TESTS: Success
# ============================================================================

class TestSuccess:

    def test_generates_files(self, source_file, capsys):
        sql = source_file.parent / "user.sql"

        code = main(_args(source_file, "--sql", str(sql)))

        assert code == ExitCode.OK
        assert sql.read_text(encoding="utf-8").startswith("CREATE TABLE user (\n")
        assert (source_file.parent / "user_generated.py").exists()
        assert capsys.readouterr().out == ""

    def test_suffix_flag(self, source_file):
        assert main(_args(source_file, "--suffix", "_dao")) == 0
        assert (source_file.parent / "user_dao.py").exists()

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
    def test_file_mode_flag(self, source_file):
        assert main(_args(source_file, "--file-mode", "600")) == 0

        module = source_file.parent / "user_generated.py"
        assert stat.S_IMODE(module.stat().st_mode) == 0o600

    def test_dry_run(self, source_file, capsys):
        sql = source_file.parent / "user.sql"

        code = main(_args(source_file, "--sql", str(sql), "--dry-run"))

        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith(f"-- {sql}\nCREATE TABLE user (\n")
        assert f"# {source_file.parent / 'user_generated.py'}\n" in out
        assert "USER_COUNT = \"SELECT COUNT(*) FROM user\"" in out
        assert sorted(p.name for p in source_file.parent.iterdir()) == ["user.py"]

    def test_dry_run_without_sql(self, source_file, capsys):
        assert main(_args(source_file, "--dry-run")) == 0

        out = capsys.readouterr().out
        assert "CREATE TABLE" not in out
        assert out.startswith("# ")

    def test_verbose_logs_to_stderr(self, source_file, capsys):
        assert main(_args(source_file, "-v", "--dry-run")) == 0

        captured = capsys.readouterr()
        assert "CHECKPOINT: table_built" in captured.err
        assert "CHECKPOINT" not in captured.out

    def test_json_logs(self, source_file, capsys):
        assert main(_args(source_file, "-v", "--json-logs", "--dry-run")) == 0

        lines = [line for line in capsys.readouterr().err.splitlines() if line]
        assert lines
        assert all(line.startswith("{") for line in lines)

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])

        assert excinfo.value.code == 0
        assert capsys.readouterr().out.startswith("model_maker ")


# ============================================================================
# TESTS: Exit codes
# ============================================================================

class TestExitCodes:

    def test_missing_arguments(self, capsys):
        code = main([])

        assert code == ExitCode.MISSING_ARGUMENT
        assert "model_maker: error: missing required argument: --file" in capsys.readouterr().err

    def test_missing_table(self, source_file):
        assert main(_args(source_file, table="")) == ExitCode.MISSING_ARGUMENT

    def test_file_not_found(self, tmp_path, capsys):
        code = main(_args(tmp_path / "absent.py"))

        assert code == ExitCode.FILE_NOT_FOUND
        assert "does not exist" in capsys.readouterr().err

    def test_source_parse_error(self, tmp_path):
        path = _write(tmp_path, "class User(:\n")

        assert main(_args(path)) == ExitCode.SOURCE_PARSE_ERROR

    def test_type_not_found(self, source_file):
        assert main(_args(source_file, struct="Account")) == ExitCode.TYPE_NOT_FOUND

    def test_malformed_annotation(self, tmp_path, capsys):
        path = _write(
            tmp_path,
            "from typing import Annotated\n\n\nclass User:\n"
            "    id: Annotated[int, 'db:\"id\" gen:\"bigint,primary,bogus\"']\n",
        )

        code = main(_args(path))

        assert code == ExitCode.MALFORMED_ANNOTATION
        assert "field id: unrecognized option 'bogus'" in capsys.readouterr().err
        assert sorted(p.name for p in tmp_path.iterdir()) == ["model.py"]

    def test_invalid_table(self, tmp_path):
        path = _write(
            tmp_path,
            "from typing import Annotated\n\n\nclass User:\n"
            "    name: Annotated[str, 'db:\"name\" gen:\"text\"']\n",
        )

        assert main(_args(path)) == ExitCode.INVALID_TABLE

    def test_output_write_error(self, source_file):
        sql = source_file.parent / "missing" / "user.sql"

        assert main(_args(source_file, "--sql", str(sql))) == ExitCode.OUTPUT_WRITE_ERROR

    def test_suffix_with_separator(self, source_file, capsys):
        code = main(_args(source_file, "--suffix", "/../escaped"))

        assert code == ExitCode.INVALID_ARGUMENT
        assert "invalid argument --suffix" in capsys.readouterr().err
        assert sorted(p.name for p in source_file.parent.iterdir()) == ["user.py"]

    def test_table_not_sql_name(self, source_file, capsys):
        code = main(_args(source_file, "--dry-run", table='user"""'))

        captured = capsys.readouterr()
        assert code == ExitCode.INVALID_ARGUMENT
        assert "invalid argument --table" in captured.err
        assert captured.out == ""

    def test_bad_file_mode_flag(self, source_file):
        assert main(_args(source_file, "--file-mode", "rwx")) == ExitCode.INVALID_ARGUMENT

    def test_bad_file_mode_env(self, source_file, monkeypatch, capsys):
        monkeypatch.setenv("MODEL_MAKER_FILE_MODE", "9x")
        reset_defaults()

        code = main(_args(source_file))

        assert code == ExitCode.INVALID_ARGUMENT
        assert "invalid argument --file-mode: '9x'" in capsys.readouterr().err
        assert not (source_file.parent / "user_generated.py").exists()


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.suffix == "_generated"
        assert args.runtime == "easydb"
        assert args.sql == ""
        assert args.dry_run is False
        assert args.file_mode is None
