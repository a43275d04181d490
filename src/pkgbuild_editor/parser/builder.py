"""
PKGBUILD Model Builder.

Walks classified units in order and turns each one into a typed container of
the document. Consecutive blank/comment lines are grouped; the group at the
top of the file becomes the header.
"""

import logging

from pkgbuild_editor.parser.classifier import Classified, LineKind, ParseError, classify
from pkgbuild_editor.parser.dialect import DEFAULT_DIALECT, Dialect
from pkgbuild_editor.parser.model import HEADER, UNKNOWN, Category, Container, Pkgbuild

logger = logging.getLogger(__name__)


def make_container(unit: Classified, dialect: Dialect = DEFAULT_DIALECT) -> Container:
    """Build the container for one classified unit."""
    match unit.kind:
        case LineKind.VARIABLE:
            c = Container.variable(unit.name, dialect=dialect)
        case LineKind.FUNCTION:
            c = Container.function(unit.name, dialect=dialect)
        case LineKind.UNKNOWN:
            c = Container(Category.UNKNOWN, UNKNOWN)
        case _:
            c = Container.comment()
            if unit.begin == 0:
                c.name = HEADER

    c.comments = list(unit.comments)
    c.begin = unit.begin
    c.end = unit.next_index - 1
    for text, line in unit.values:
        c.append(unit.kind, line, text)
    return c


def build(lines: list[str], dialect: Dialect = DEFAULT_DIALECT) -> Pkgbuild:
    """
    Build a document from the physical lines of a PKGBUILD.

    Args:
        lines: Lines of the file, with or without line terminators.
        dialect: Recognized-name tables.

    Returns:
        The parsed document.

    Raises:
        ParseError: A construct is still open at the end of input. The
            document built up to that point is available as ``error.partial``.
    """
    pkgbuild = Pkgbuild(dialect)
    previous: Container | None = None
    index = 0
    while index < len(lines):
        try:
            unit = classify(lines, index)
        except ParseError as e:
            e.partial = pkgbuild
            logger.error(f"[PARSE] {e}")
            raise

        if (
            unit.kind is LineKind.BLANK_COMMENT
            and previous is not None
            and previous.category is Category.BLANK_COMMENT
            and previous.end == unit.begin - 1
        ):
            # Extend the current comment group
            for text, line in unit.values:
                previous.append(unit.kind, line, text)
            previous.end = unit.next_index - 1
        else:
            previous = make_container(unit, dialect)
            pkgbuild.insert(previous)
            logger.debug(
                f"[PARSE] {previous.category.name} {previous.name!r} "
                f"lines {previous.begin + 1}-{previous.end + 1}"
            )
        index = unit.next_index

    logger.info(f"[PARSE] {len(lines)} lines, {len(pkgbuild.containers())} containers")
    return pkgbuild


def loads(text: str, dialect: Dialect = DEFAULT_DIALECT) -> Pkgbuild:
    """Parse PKGBUILD text. Lines end at LF only; a CR before it is dropped."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return build(lines, dialect)


def load(path, dialect: Dialect = DEFAULT_DIALECT) -> Pkgbuild:
    """Parse a PKGBUILD file."""
    with open(path, encoding="utf-8") as f:
        return loads(f.read(), dialect)
