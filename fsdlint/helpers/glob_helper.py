"""
Glob matching for ignore and test-file patterns.

Patterns are matched on forward-slash paths with the globbing rules of JS
tooling configs:
- `*` and `?` stay inside one path segment
- `**` spans any number of segments; `**/` and a trailing `/**` may match zero directories
- `{a,b}` brace groups expand into alternatives ("**/*.{ts,tsx}")
- `[...]` character classes as in fnmatch (`[!...]` negates)
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

_BRACE_GROUP = re.compile(r"\{([^{}]*,[^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """
    Expand `{a,b}` groups into separate patterns.

    Example:
        >>> expand_braces("**/*.{ts,tsx}")
        ['**/*.ts', '**/*.tsx']
    """
    match = _BRACE_GROUP.search(pattern)
    if not match:
        return [pattern]

    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def _translate_class(pattern: str, start: int) -> tuple[str, int] | None:
    """Translate a `[...]` class starting at `start`; None if it is not closed."""
    i = start + 1
    if i < len(pattern) and pattern[i] in "!^":
        i += 1
    if i < len(pattern) and pattern[i] == "]":
        i += 1
    end = pattern.find("]", i)
    if end == -1:
        return None

    body = pattern[start + 1 : end].replace("\\", "\\\\")
    if body[:1] in ("!", "^"):
        body = "^" + body[1:]
    # Classes never match the separator
    return f"(?!/)[{body}]", end + 1


def translate(pattern: str) -> str:
    """
    Translate one brace-free glob into a regular expression.

    Example:
        >>> translate("**/ui/*.ts")
        '(?:.*/)?ui/[^/]*\\\\.ts'
    """
    parts: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        if pattern.startswith("**/", i):
            parts.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == n:
            parts.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        else:
            translated = _translate_class(pattern, i) if pattern[i] == "[" else None
            if translated is None:
                parts.append(re.escape(pattern[i]))
                i += 1
            else:
                parts.append(translated[0])
                i = translated[1]
    return "".join(parts)


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a glob (braces included) into one anchored regex."""
    alternatives = "|".join(f"(?:{translate(p)})" for p in expand_braces(pattern))
    return re.compile(rf"(?s:{alternatives})\Z")


def matches(path: str, pattern: str) -> bool:
    """Check whether a path matches a single glob pattern."""
    if not path or not pattern:
        return False

    normalized_path = path.replace("\\", "/")
    normalized_pattern = pattern.strip().replace("\\", "/")
    return compile_pattern(normalized_pattern).match(normalized_path) is not None


def matches_any(path: str | None, patterns: Iterable[str]) -> bool:
    """Check whether a path matches at least one pattern. None never matches."""
    if not path:
        return False
    return any(matches(path, pattern) for pattern in patterns)
