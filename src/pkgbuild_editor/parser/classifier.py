"""
PKGBUILD Line Classifier.

Decides what a physical line starts: a variable assignment, a function block,
a blank/comment line, or something the editor does not understand. Knows
nothing about recognized names; that is the builder's business.
"""

import logging
import re
from enum import Enum, auto
from typing import NamedTuple

from pkgbuild_editor.parser.lexer import tokenize

logger = logging.getLogger(__name__)

ASSIGNMENT_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)=(.*)$")
FUNCTION_RE = re.compile(r"^\s*(?:function\s+)?([A-Za-z_][A-Za-z0-9_.:+-]*)\s*\(\s*\)\s*(\{.*)?$")


class LineKind(Enum):
    """Syntactic category of a classified unit."""

    VARIABLE = auto()
    FUNCTION = auto()
    BLANK_COMMENT = auto()
    UNKNOWN = auto()


class ParseError(ValueError):
    """A construct is still open when the input ends."""

    def __init__(self, message: str, line: int):
        super().__init__(f"line {line}: {message}")
        self.line = line
        self.partial = None  # document built so far, set by the builder


class Classified(NamedTuple):
    """
    One classified unit of input.

    ``values`` holds ``(text, line_index)`` pairs: the shell words of an
    assignment, or the physical lines of any other unit. ``comments`` holds
    the inline comments of an assignment.
    """

    kind: LineKind
    begin: int
    next_index: int
    name: str | None
    values: list[tuple[str, int]]
    comments: tuple[str, ...] = ()


def _normalize(line: str) -> str:
    return line.rstrip("\r\n")


def _verbatim(lines: list[str], begin: int, end: int) -> list[tuple[str, int]]:
    out = []
    for i in range(begin, end):
        line = _normalize(lines[i])
        # whitespace-only lines count as blank
        out.append(("" if not line.strip() else line, i))
    return out


def _classify_assignment(lines: list[str], index: int, name: str, value: str) -> Classified:
    array = value.startswith("(")
    text = value[1:] if array else value
    last = index
    while True:
        tokens = tokenize(text, array=array)
        if tokens.complete:
            break
        last += 1
        if last >= len(lines):
            what = "array" if array else "quoted string"
            raise ParseError(f"unterminated {what} in assignment to {name!r}", index + 1)
        text += "\n" + _normalize(lines[last]).rstrip()

    comments = list(tokens.comments)
    trailing = text[tokens.end:].strip() if array else ""
    if trailing.startswith("#"):
        comments.append(trailing)
        trailing = ""
    if trailing or tokens.operators or (not array and len(tokens.words) > 1):
        logger.warning(f"[PARSE] line {index + 1}: assignment to {name!r} kept verbatim")
        return Classified(LineKind.UNKNOWN, index, last + 1, None, _verbatim(lines, index, last + 1))

    values = [(word.text, index + text.count("\n", 0, word.offset)) for word in tokens.words]
    if not array and not values:
        values = [("", index)]
    return Classified(LineKind.VARIABLE, index, last + 1, name, values, tuple(comments))


def _brace_delta(line: str) -> tuple[int, bool]:
    """Net unquoted brace depth change of a line, and whether it opens one."""
    depth, opened = 0, False
    quote: str | None = None
    i, n = 0, len(line)
    while i < n:
        ch = line[i]
        if quote:
            if ch == "\\" and quote == '"':
                i += 1
            elif ch == quote:
                quote = None
        elif ch == "\\":
            i += 1
        elif ch in "'\"":
            quote = ch
        elif ch == "#" and (i == 0 or line[i - 1].isspace()):
            break
        elif ch == "{":
            depth += 1
            opened = True
        elif ch == "}":
            depth -= 1
        i += 1
    return depth, opened


def _classify_function(lines: list[str], index: int, name: str) -> Classified:
    depth, opened = 0, False
    for i in range(index, len(lines)):
        delta, opens = _brace_delta(_normalize(lines[i]))
        depth += delta
        opened = opened or opens
        if opened and depth <= 0:
            return Classified(LineKind.FUNCTION, index, i + 1, name, _verbatim(lines, index, i + 1))
    raise ParseError(f"function {name!r} is never closed", index + 1)


def classify(lines: list[str], index: int) -> Classified:
    """
    Classify the unit starting at ``lines[index]``.

    Args:
        lines: All physical lines of the input.
        index: 0-based index of the line to classify.

    Returns:
        The classified unit. ``next_index`` is where scanning resumes: the
        next line, or the line after a function's closing brace or an
        array's closing paren.

    Raises:
        ParseError: A function body, array or quoted string is still open at
            the end of input.
    """
    line = _normalize(lines[index])
    stripped = line.strip()

    if match := ASSIGNMENT_RE.match(line):
        return _classify_assignment(lines, index, match.group(1), match.group(2).rstrip())

    if match := FUNCTION_RE.match(line):
        return _classify_function(lines, index, match.group(1))

    if not stripped or stripped.startswith("#"):
        return Classified(LineKind.BLANK_COMMENT, index, index + 1, None, _verbatim(lines, index, index + 1))

    return Classified(LineKind.UNKNOWN, index, index + 1, None, _verbatim(lines, index, index + 1))
