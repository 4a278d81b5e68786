# ============================================================================
# ANNOTATION PARSER
# ============================================================================
# STATUS: Core - Per-field annotation grammar
# PURPOSE: Turn one raw annotation string into a Field descriptor
# CREATED: 19 OCT 2026
# EXPORTS: AnnotationParser, parse_annotation
# DEPENDENCIES: pydantic (models)
# ============================================================================
"""
Annotation Parser.

A raw annotation is a sequence of key:"value" pairs separated by
whitespace and/or commas. Two keys are meaningful, any other key
(json, yaml, ...) is skipped:

    db:"<column>"                    required; "-" excludes the field
    gen:"<type>,<option>,..."        optional

The first gen token is the SQL type literal, taken verbatim. Further
tokens are flag keywords (autoincrement, notnull, primary, unique,
index) or a default(<expr>) clause. Tokens are split on commas outside
parentheses and single-quoted strings, so decimal(10,2) and
default('a,b') stay whole.

Anything else is a MalformedAnnotationError: unknown tokens, empty
tokens, unterminated quotes, unbalanced parentheses, repeated keys.

Usage:
    parser = AnnotationParser()
    field = parser.parse('db:"id" gen:"bigint,autoincrement,notnull,primary"')
"""

import re
from typing import Dict, List, Optional

from model_maker.core.contracts import (
    DB_KEY,
    GEN_KEY,
    SENTINEL_COLUMN,
    ColumnFlag,
    OptionKind,
)
from model_maker.core.errors import MalformedAnnotationError
from model_maker.core.logging import get_logger, ComponentType
from model_maker.core.models.field import Field, GenOption
from model_maker.core.names import is_sql_name

logger = get_logger(__name__, ComponentType.PARSER)


_KEY_PATTERN = re.compile(r'([A-Za-z_][A-Za-z0-9_]*):"')
_FOREIGN_PATTERN = re.compile(r"^id_([a-z0-9_]+)$")
_DEFAULT_PATTERN = re.compile(r"^default\((.+)\)$", re.DOTALL)


class AnnotationParser:
    """
    Parser for per-field annotation strings.

    Stateless; one instance can parse any number of annotations.
    """

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def parse(self, raw: str) -> Field:
        """
        Parse a raw annotation into a Field.

        Args:
            raw: Annotation string, e.g. 'db:"name" gen:"varchar(512),notnull"'

        Returns:
            Field. For the sentinel column the Field has name "-" and no
            other attribute set; the caller drops it.

        Raises:
            MalformedAnnotationError: if the grammar is violated
        """
        pairs = self.split_pairs(raw)

        name = pairs.get(DB_KEY)
        if name is None:
            raise MalformedAnnotationError(f'missing {DB_KEY}:"<column>"', raw)
        if name == SENTINEL_COLUMN:
            return Field(name=SENTINEL_COLUMN)
        if not is_sql_name(name):
            raise MalformedAnnotationError(f"invalid column name {name!r}", raw)

        values: Dict[str, object] = {"name": name}
        values.update(self.infer_foreign_key(name))

        gen = pairs.get(GEN_KEY)
        if gen is not None:
            self._apply_options(values, self.parse_gen(gen, raw), raw)

        return Field(**values)

    def split_pairs(self, raw: str) -> Dict[str, str]:
        """
        Split a raw annotation into its key -> value pairs.

        Raises:
            MalformedAnnotationError: on stray text, an unterminated
                quoted value or a repeated key
        """
        pairs: Dict[str, str] = {}
        pos = 0
        length = len(raw)

        while True:
            while pos < length and (raw[pos].isspace() or raw[pos] == ","):
                pos += 1
            if pos >= length:
                break

            match = _KEY_PATTERN.match(raw, pos)
            if not match:
                raise MalformedAnnotationError(
                    f'expected key:"value" at offset {pos}', raw
                )
            key = match.group(1)
            value_start = match.end()
            value_end = raw.find('"', value_start)
            if value_end == -1:
                raise MalformedAnnotationError(
                    f"unterminated quoted value for {key!r}", raw
                )
            if key in pairs:
                raise MalformedAnnotationError(f"duplicate key {key!r}", raw)

            pairs[key] = raw[value_start:value_end]
            pos = value_end + 1

        return pairs

    def parse_gen(self, gen: str, raw: Optional[str] = None) -> List[GenOption]:
        """
        Parse the value of a gen sub-annotation into tagged options.

        Args:
            gen: The text between the quotes of gen:"..."
            raw: Full annotation, used in error messages

        Returns:
            Options in source order; the first is always kind=TYPE.
        """
        source = raw if raw is not None else gen
        tokens = split_tokens(gen, source)

        type_literal = tokens[0]
        if not type_literal:
            raise MalformedAnnotationError("empty SQL type in gen", source)

        options = [GenOption(kind=OptionKind.TYPE, value=type_literal)]
        for token in tokens[1:]:
            options.append(self._classify(token, source))
        return options

    @staticmethod
    def infer_foreign_key(name: str) -> Dict[str, object]:
        """
        Foreign-key inference from the column name.

        id_<table> references <table>(id), regardless of explicit flags.
        """
        match = _FOREIGN_PATTERN.match(name)
        if not match:
            return {}
        return {"foreign": True, "foreign_table": match.group(1)}

    # =========================================================================
    # INTERNALS
    # =========================================================================

    @staticmethod
    def _classify(token: str, source: str) -> GenOption:
        if not token:
            raise MalformedAnnotationError("empty option in gen", source)

        flag = ColumnFlag.from_token(token)
        if flag is not None:
            return GenOption(kind=OptionKind.FLAG, value=flag.value)

        match = _DEFAULT_PATTERN.match(token)
        if match:
            expression = match.group(1).strip()
            if not expression:
                raise MalformedAnnotationError("empty default expression", source)
            return GenOption(kind=OptionKind.DEFAULT, value=expression)

        raise MalformedAnnotationError(f"unrecognized option {token!r}", source)

    @staticmethod
    def _apply_options(values: Dict[str, object], options: List[GenOption], source: str) -> None:
        for option in options:
            if option.kind == OptionKind.TYPE:
                values["type"] = option.value
            elif option.kind == OptionKind.FLAG:
                flag = ColumnFlag(option.value)
                if values.get(flag.attribute):
                    logger.debug(f"Repeated option {flag.value!r} in {source!r}")
                values[flag.attribute] = True
            elif option.kind == OptionKind.DEFAULT:
                if values.get("default") is not None:
                    raise MalformedAnnotationError("default given more than once", source)
                values["default"] = option.value


def split_tokens(text: str, source: Optional[str] = None) -> List[str]:
    """
    Split on commas at parenthesis depth zero, outside single quotes.

    Tokens are stripped of surrounding whitespace. Empty tokens are kept
    so the caller can reject them.

    Raises:
        MalformedAnnotationError: on unbalanced parentheses or an
            unterminated single-quoted string
    """
    source = source if source is not None else text
    tokens: List[str] = []
    current: List[str] = []
    depth = 0
    in_quote = False

    for char in text:
        if in_quote:
            current.append(char)
            if char == "'":
                in_quote = False
            continue

        if char == "'":
            in_quote = True
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise MalformedAnnotationError("unbalanced ')' in gen", source)
        elif char == "," and depth == 0:
            tokens.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    if in_quote:
        raise MalformedAnnotationError("unterminated quote in gen", source)
    if depth != 0:
        raise MalformedAnnotationError("unbalanced '(' in gen", source)

    tokens.append("".join(current).strip())
    return tokens


def parse_annotation(raw: str) -> Field:
    """Parse one annotation with a default parser."""
    return AnnotationParser().parse(raw)


__all__ = ["AnnotationParser", "parse_annotation", "split_tokens"]
