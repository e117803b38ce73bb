from __future__ import annotations

from .utils.exceptions import IniConfigurationError
from .utils.line_models import Blank, Comment, Invalid, LineKind, Option, Section

DEFAULT_COMMENT_PREFIX = ";"
SECTION_START = "["
SECTION_END = "]"
OPTION_SEPARATOR = "="


def validate_comment_prefix(prefix: str) -> str:
    """Return prefix if it can mark comment lines, raise IniConfigurationError otherwise.

    The prefix is compared against the first non-whitespace character of a line,
    so it must be a single character and must not collide with section or option syntax.
    """
    if not isinstance(prefix, str) or len(prefix) != 1:
        raise IniConfigurationError(f"Comment prefix must be a single character, got {prefix!r}")
    if prefix.isspace():
        raise IniConfigurationError("Comment prefix can't be whitespace")
    if prefix in (SECTION_START, OPTION_SEPARATOR):
        raise IniConfigurationError(f"Comment prefix {prefix!r} collides with INI syntax")
    return prefix


def classify(line: str, comment_prefix: str = DEFAULT_COMMENT_PREFIX) -> LineKind:
    """Classify one line whose terminator and trailing whitespace are already stripped.

    Sections win over comments, comments over options; the choice is made on the
    first non-whitespace character only. str indexing works on code points, so a
    multi-byte first character is compared whole and simply falls through to
    option parsing.
    """
    line = line.lstrip()
    if not line:
        return Blank()

    first = line[0]
    if first == SECTION_START:
        end = line.find(SECTION_END, 1)
        if end < 0:
            return Invalid(line, "unterminated section")
        # anything after the closing bracket is ignored
        name = line[1:end].strip()
        if not name:
            return Invalid(line, "empty section name")
        return Section(name)

    if first == comment_prefix:
        return Comment(line[1:].lstrip())

    sep = line.find(OPTION_SEPARATOR)
    if sep < 0:
        return Invalid(line, "expected section, option or comment")
    key = line[:sep].strip()
    if not key:
        return Invalid(line, "empty option name")
    return Option(key, line[sep + 1:].strip())
