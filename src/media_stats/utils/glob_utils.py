"""Glob pattern translation with literal path separators."""

import re
from typing import List, Pattern, Tuple

from .exceptions import ConfigurationError

SEPARATOR = "/"
_ANY_CHAR = "[^/]"
_ANY_RUN = "[^/]*"


def translate_glob(pattern: str) -> str:
    """Translate a glob pattern into a regular expression.

    ``/`` is always literal: ``*``, ``?`` and character classes never match
    it. A ``**`` occupying a whole path component matches any number of
    directories, including none.

    Args:
        pattern: Glob pattern.

    Returns:
        Regular expression source matching whole paths.

    Raises:
        ConfigurationError: If the pattern is malformed.
    """
    return "(?s:" + _translate(pattern, 0, len(pattern), in_braces=False) + r")\Z"


def compile_glob(pattern: str) -> Pattern[str]:
    """Compile a glob pattern into a regular expression object.

    Args:
        pattern: Glob pattern.

    Returns:
        Compiled expression; use ``fullmatch`` or ``match`` against a path.

    Raises:
        ConfigurationError: If the pattern is malformed.
    """
    try:
        return re.compile(translate_glob(pattern))
    except re.error as e:
        raise ConfigurationError(f"Invalid glob pattern {pattern!r}: {e}") from e


def _translate(pattern: str, start: int, end: int, in_braces: bool) -> str:
    parts: List[str] = []
    i = start
    while i < end:
        char = pattern[i]
        if char == "*":
            j = i
            while j < end and pattern[j] == "*":
                j += 1
            if (
                j - i >= 2
                and _is_component_start(pattern, i, in_braces)
                and _is_component_end(pattern, j, end)
            ):
                if j < end:
                    # "**/" matches zero or more leading directories
                    parts.append(f"(?:{_ANY_RUN}/)*")
                    j += 1
                elif parts and parts[-1] == SEPARATOR:
                    # "/**" matches everything below the directory
                    parts[-1] = "(?:/.*)?"
                else:
                    parts.append(".*")
            else:
                parts.append(_ANY_RUN)
            i = j
        elif char == "?":
            parts.append(_ANY_CHAR)
            i += 1
        elif char == "[":
            expression, i = _translate_class(pattern, i, end)
            parts.append(expression)
        elif char == "{":
            if in_braces:
                raise ConfigurationError(f"Nested alternates are not allowed in {pattern!r}")
            close = _find_closing_brace(pattern, i, end)
            alternatives = [
                _translate(pattern, s, e, in_braces=True)
                for s, e in _split_alternatives(pattern, i + 1, close)
            ]
            parts.append("(?:" + "|".join(alternatives) + ")")
            i = close + 1
        elif char == "\\":
            if i + 1 >= end:
                raise ConfigurationError(f"Dangling escape at end of {pattern!r}")
            parts.append(re.escape(pattern[i + 1]))
            i += 2
        elif char == SEPARATOR:
            parts.append(SEPARATOR)
            i += 1
        else:
            parts.append(re.escape(char))
            i += 1
    return "".join(parts)


def _is_component_start(pattern: str, index: int, in_braces: bool) -> bool:
    if index == 0 or pattern[index - 1] == SEPARATOR:
        return True
    # Alternates start a component only inside a brace group
    return in_braces and pattern[index - 1] in ("{", ",")


def _is_component_end(pattern: str, index: int, end: int) -> bool:
    return index == end or pattern[index] == SEPARATOR


def _translate_class(pattern: str, start: int, end: int) -> Tuple[str, int]:
    """Translate ``[...]`` starting at ``start``; returns expression and next index."""
    i = start + 1
    negated = False
    if i < end and pattern[i] in "!^":
        negated = True
        i += 1
    members: List[str] = []
    first = True
    while i < end:
        char = pattern[i]
        if char == "]" and not first:
            break
        if char == "\\" and i + 1 < end:
            char = pattern[i + 1]
            i += 1
        if i + 2 < end and pattern[i + 1] == "-" and pattern[i + 2] != "]":
            low, high = char, pattern[i + 2]
            if low > high:
                raise ConfigurationError(f"Invalid range {low}-{high} in {pattern!r}")
            members.append(f"{re.escape(low)}-{re.escape(high)}")
            i += 3
        else:
            members.append(re.escape(char))
            i += 1
        first = False
    else:
        raise ConfigurationError(f"Unclosed character class in {pattern!r}")

    body = "".join(members)
    if negated:
        return f"[^/{body}]", i + 1
    return f"(?!/)[{body}]", i + 1


def _find_closing_brace(pattern: str, start: int, end: int) -> int:
    i = start + 1
    while i < end:
        char = pattern[i]
        if char == "\\":
            i += 2
            continue
        if char == "[":
            _, i = _translate_class(pattern, i, end)
            continue
        if char == "{":
            raise ConfigurationError(f"Nested alternates are not allowed in {pattern!r}")
        if char == "}":
            return i
        i += 1
    raise ConfigurationError(f"Unclosed alternate group in {pattern!r}")


def _split_alternatives(pattern: str, start: int, end: int) -> List[Tuple[int, int]]:
    spans = []
    segment_start = start
    i = start
    while i < end:
        char = pattern[i]
        if char == "\\":
            i += 2
            continue
        if char == "[":
            _, i = _translate_class(pattern, i, end)
            continue
        if char == ",":
            spans.append((segment_start, i))
            segment_start = i + 1
        i += 1
    spans.append((segment_start, end))
    return spans
