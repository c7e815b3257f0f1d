"""
Import statement extraction for JavaScript and TypeScript sources.

A small regex tokenizer skips comments, strings and template literals, then
static import declarations are picked out of the token stream:

    import x from 'a'            import {a, b} from "a"
    import * as ns from 'a'      import type {T} from 'a'
    import 'a'                   (side-effect import)

Dynamic `import('a')`, `import.meta` and `export ... from 'a'` are not
import declarations and are skipped.
"""

from __future__ import annotations

import bisect
import logging
import re
from dataclasses import dataclass

from fsdlint.helpers.dto.import_dto import ImportStatement

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<line_comment>//[^\n]*)
    | (?P<block_comment>/\*.*?\*/)
    | (?P<string>'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")
    | (?P<template>`(?:[^`\\]|\\.)*`)
    | (?P<name>[A-Za-z_$][\w$]*)
    | (?P<punct>[{}();:,.*=])
    """,
    re.VERBOSE | re.DOTALL,
)

# Tokens scanned after `import` before giving up on finding `from`
_MAX_CLAUSE_TOKENS = 512


@dataclass(frozen=True)
class _Token:
    kind: str
    value: str
    offset: int


def _tokenize(source: str) -> list[_Token]:
    tokens: list[_Token] = []
    for match in _TOKEN_PATTERN.finditer(source):
        kind = match.lastgroup or ""
        if kind in ("line_comment", "block_comment"):
            continue
        tokens.append(_Token(kind=kind, value=match.group(), offset=match.start()))
    return tokens


def _string_value(token: _Token) -> str:
    return token.value[1:-1]


def _find_specifier(tokens: list[_Token], start: int) -> _Token | None:
    """Find the module string of the import declaration starting at tokens[start]."""
    first = tokens[start + 1] if start + 1 < len(tokens) else None
    if first is None:
        return None
    if first.kind == "string":
        return first
    if first.kind == "punct" and first.value in ("(", "."):
        return None

    end = min(len(tokens), start + 1 + _MAX_CLAUSE_TOKENS)
    for index in range(start + 1, end):
        token = tokens[index]
        if token.kind == "name" and token.value == "from":
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if following is not None and following.kind == "string":
                return following
        elif token.kind == "name" and token.value == "import":
            return None
        elif token.kind == "punct" and token.value in (";", "=", ":"):
            return None
        elif token.kind in ("string", "template"):
            return None
    return None


def extract_import_statements(source: str, file_path: str | None) -> list[ImportStatement]:
    """
    Extract static import declarations from JS/TS source text.

    Args:
        source: File contents
        file_path: Path of the file, stored on every statement for reporting

    Returns:
        ImportStatements in source order, with 1-based line/column of the
        `import` keyword.
    """
    line_starts = [0] + [m.end() for m in re.finditer(r"\n", source)]
    tokens = _tokenize(source)
    statements: list[ImportStatement] = []

    for index, token in enumerate(tokens):
        if token.kind != "name" or token.value != "import":
            continue
        # obj.import(...) is a member access, not a declaration
        if index > 0 and tokens[index - 1].kind == "punct" and tokens[index - 1].value == ".":
            continue

        specifier = _find_specifier(tokens, index)
        if specifier is None:
            continue

        line_index = bisect.bisect_right(line_starts, token.offset) - 1
        statements.append(
            ImportStatement(
                file_path=file_path,
                specifier=_string_value(specifier),
                line=line_index + 1,
                column=token.offset - line_starts[line_index] + 1,
            )
        )

    logger.debug("[ImportExtraction] %s: %d import(s)", file_path, len(statements))
    return statements
