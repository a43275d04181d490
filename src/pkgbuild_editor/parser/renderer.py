"""
PKGBUILD Renderer.

Turns a document back into text. Recognized variables are laid out in the
canonical key order with per-key formatting; everything the editor does not
understand is emitted verbatim, in its original relative order. Comment
groups travel with the entry that follows them in the source.
"""

import logging

from pkgbuild_editor.parser.dialect import Style
from pkgbuild_editor.parser.lexer import bare_word, quote_word
from pkgbuild_editor.parser.model import BLANK, HEADER, Category, Container, Pkgbuild

logger = logging.getLogger(__name__)


def _join(container: Container, quoted: bool) -> str:
    fmt = quote_word if quoted else bare_word
    return " ".join(fmt(v.text) for v in container.values)


def _scalar(container: Container, quoted: bool) -> str:
    raw = " ".join(v.text for v in container.values)
    return quote_word(raw) if quoted else bare_word(raw)


def _verbatim(container: Container) -> list[str]:
    out = []
    blank = False
    for v in container.values:
        if v.text or not blank:
            out.append(v.text)
        blank = v.text == ""
    return out


def _multiple_lines(container: Container) -> list[str]:
    if container.empty:
        return [f"{container.name}=()"]
    head = f"{container.name}=("
    indent = " " * len(head)
    words = [quote_word(v.text) for v in container.values]
    out = [head + words[0]] + [indent + w for w in words[1:]]
    out[-1] += ")"
    return out


def render_container(container: Container) -> list[str]:
    """
    Lines of a single container, according to its style.

    Scalar and verbatim styles render an empty container as nothing; list
    styles render it as ``name=()``. Inline comments follow the last line.
    """
    lines = _render_style(container)
    if lines and container.comments:
        lines[-1] = " ".join([lines[-1], *container.comments])
    return lines


def _render_style(container: Container) -> list[str]:
    name = container.name
    match container.style:
        case Style.SINGLE | Style.SINGLE_QUOTED:
            if container.empty:
                return []
            return [f"{name}={_scalar(container, container.style is Style.SINGLE_QUOTED)}"]
        case Style.OPTIONAL | Style.OPTIONAL_QUOTED:
            quoted = container.style is Style.OPTIONAL_QUOTED
            if len(container.values) == 1:
                return [f"{name}={_scalar(container, quoted)}"]
            return [f"{name}=({_join(container, quoted)})"]
        case Style.MULTIPLE | Style.MULTIPLE_QUOTED:
            return [f"{name}=({_join(container, container.style is Style.MULTIPLE_QUOTED)})"]
        case Style.MULTIPLE_LINES:
            return _multiple_lines(container)
        case Style.LINES:
            return _verbatim(container)


class _Emitter:
    """Collects output lines, emitting each container once."""

    def __init__(self, pkgbuild: Pkgbuild):
        self.order = pkgbuild.order()
        self.sorted = pkgbuild.sort()
        self.done: set[Container] = set()
        self.lines: list[str] = []

    def _leading_comments(self, container: Container) -> list[Container]:
        if container.synthetic:
            return []
        chain = []
        prev = self.order.get(container)
        while prev is not None and prev.name == BLANK and prev not in self.done:
            chain.append(prev)
            prev = self.order.get(prev)
        chain.reverse()
        return chain

    def emit(self, container: Container) -> None:
        if container in self.done:
            return
        for comment in self._leading_comments(container):
            self._write(comment)
        self._write(container)

    def _write(self, container: Container) -> None:
        self.done.add(container)
        self.lines.extend(render_container(container))

    def by_key(self, name: str, categories: tuple[Category, ...]) -> None:
        for c in self.sorted:
            if c.name == name and c.category in categories:
                self.emit(c)

    def by_category(self, category: Category) -> None:
        for c in self.sorted:
            if c.category is category:
                self.emit(c)


def render(pkgbuild: Pkgbuild) -> list[str]:
    """
    Render a document as a list of lines.

    Order: header comments, recognized variables in canonical key order,
    unrecognized variables, lifecycle functions, split-package functions,
    unrecognized functions, unrecognized lines, then any comment group left
    over. Entries sharing a name keep their original relative order.
    """
    # Re-key by current name, so renamed containers land under the right key
    flat = Pkgbuild(pkgbuild.dialect)
    flat.insert(*pkgbuild.containers())

    emitter = _Emitter(flat)
    emitter.by_key(HEADER, (Category.BLANK_COMMENT,))
    for name in flat.dialect.variables:
        emitter.by_key(name, (Category.VARIABLE,))
    emitter.by_category(Category.VARIABLE)
    emitter.by_category(Category.UNKNOWN_VARIABLE)
    for name in flat.dialect.functions:
        emitter.by_key(name, (Category.FUNCTION,))
    emitter.by_category(Category.FUNCTION)
    emitter.by_category(Category.SPLIT_FUNCTION)
    emitter.by_category(Category.UNKNOWN_FUNCTION)
    emitter.by_category(Category.UNKNOWN)
    emitter.by_category(Category.BLANK_COMMENT)

    logger.debug(f"[RENDER] {len(emitter.done)} containers, {len(emitter.lines)} lines")
    return emitter.lines


def dumps(pkgbuild: Pkgbuild) -> str:
    """Render a document as text, with a trailing newline."""
    lines = render(pkgbuild)
    return "\n".join(lines) + "\n" if lines else ""


def dump(pkgbuild: Pkgbuild, path) -> None:
    """Write a document to a file."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(pkgbuild))
