# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Annotation vocabulary, sentinels and exit codes
# PURPOSE: Shared constants that cross the parser, generators and CLI
# CREATED: 19 OCT 2026
# EXPORTS: OptionKind, ColumnFlag, ExitCode, SENTINEL_COLUMN, CONDITION_MARKER
# ============================================================================
"""
Base contracts for model_maker.

These are the fixed pieces of vocabulary every stage agrees on:
- the `gen` option kinds and flag keywords
- the sentinel column name that excludes a field
- the select-statement condition marker
- process exit codes
"""

from enum import Enum, IntEnum


# ============================================================================
# ANNOTATION VOCABULARY
# ============================================================================

SENTINEL_COLUMN = "-"

# Sub-annotation keys inside one raw annotation string
DB_KEY = "db"
GEN_KEY = "gen"

# Where a caller splices a condition (LIMIT, WHERE ...) into a select
CONDITION_MARKER = "/*condition*/"


class OptionKind(str, Enum):
    """Kinds of token found in a `gen` sub-annotation."""
    TYPE = "type"            # First token, SQL type literal
    FLAG = "flag"            # One of ColumnFlag
    DEFAULT = "default"      # default(<expr>)


class ColumnFlag(str, Enum):
    """
    Boolean column options recognised in `gen`.

    The value is the keyword as written in the annotation.
    """
    AUTOINCREMENT = "autoincrement"
    NOTNULL = "notnull"
    PRIMARY = "primary"
    UNIQUE = "unique"
    INDEX = "index"

    @property
    def attribute(self) -> str:
        """Name of the Field attribute this flag sets."""
        return {
            ColumnFlag.AUTOINCREMENT: "auto_increment",
            ColumnFlag.NOTNULL: "not_null",
            ColumnFlag.PRIMARY: "primary",
            ColumnFlag.UNIQUE: "unique",
            ColumnFlag.INDEX: "index",
        }[self]

    @classmethod
    def from_token(cls, token: str):
        """Return the flag for a keyword, or None if it is not one."""
        try:
            return cls(token)
        except ValueError:
            return None


# ============================================================================
# EXIT CODES
# ============================================================================

class ExitCode(IntEnum):
    """Process exit codes, one per error kind."""
    OK = 0
    FAILURE = 1
    MISSING_ARGUMENT = 2
    INVALID_ARGUMENT = 2     # Alias: usage errors share one code
    FILE_NOT_FOUND = 3
    SOURCE_PARSE_ERROR = 4
    TYPE_NOT_FOUND = 5
    MALFORMED_ANNOTATION = 6
    INVALID_TABLE = 7
    OUTPUT_WRITE_ERROR = 8


__all__ = [
    "SENTINEL_COLUMN",
    "DB_KEY",
    "GEN_KEY",
    "CONDITION_MARKER",
    "OptionKind",
    "ColumnFlag",
    "ExitCode",
]
