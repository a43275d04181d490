"""
PKGBUILD document model.

A parsed PKGBUILD is a mapping from entry name to the ordered list of
containers sharing that name. Duplicates are kept side by side, never merged,
so the original structure of the file can always be recovered.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from pkgbuild_editor.parser.classifier import LineKind
from pkgbuild_editor.parser.dialect import DEFAULT_DIALECT, Dialect, Style
from pkgbuild_editor.parser.lexer import unquote

SYNTHETIC_LINE = -1

# Sentinel names; none of them is a valid shell identifier.
BLANK = "#blank"
HEADER = "#header"
UNKNOWN = "#unknown"


class Category(Enum):
    """Kind of container."""

    VARIABLE = auto()  # recognized variable
    UNKNOWN_VARIABLE = auto()
    FUNCTION = auto()  # recognized function
    SPLIT_FUNCTION = auto()  # package_* function
    UNKNOWN_FUNCTION = auto()
    UNKNOWN = auto()  # line the editor does not understand
    BLANK_COMMENT = auto()

    @property
    def is_variable(self) -> bool:
        return self in (Category.VARIABLE, Category.UNKNOWN_VARIABLE)

    @property
    def is_function(self) -> bool:
        return self in (Category.FUNCTION, Category.SPLIT_FUNCTION, Category.UNKNOWN_FUNCTION)


@dataclass(eq=False)
class Value:
    """One datum of a container: an array element or a raw line."""

    kind: LineKind
    text: str
    line: int = SYNTHETIC_LINE

    def __str__(self) -> str:
        return self.text

    @property
    def synthetic(self) -> bool:
        return self.line == SYNTHETIC_LINE

    def decoded(self) -> str:
        """Text with shell quoting removed."""
        if self.kind is LineKind.VARIABLE:
            return unquote(self.text)
        return self.text


@dataclass(eq=False)
class Container:
    """
    A named unit of the document.

    Attributes:
        category: What the container holds.
        name: Variable or function name, or one of the sentinel names.
        begin: First source line (0-based), ``SYNTHETIC_LINE`` when added
            programmatically.
        end: Last source line, inclusive.
        values: Ordered values. May become empty after edits; the container
            stays addressable until removed.
        style: Rendering style.
        comments: Inline comments of an assignment, re-emitted at the end
            of its last rendered line.
    """

    category: Category
    name: str
    begin: int = SYNTHETIC_LINE
    end: int = SYNTHETIC_LINE
    values: list[Value] = field(default_factory=list)
    style: Style = Style.LINES
    comments: list[str] = field(default_factory=list)

    @classmethod
    def variable(cls, name: str, *words: str, dialect: Dialect = DEFAULT_DIALECT) -> "Container":
        """Create a variable container holding ``words`` (shell words, verbatim)."""
        if dialect.is_variable(name):
            c = cls(Category.VARIABLE, name, style=dialect.style_of(name))
        else:
            c = cls(Category.UNKNOWN_VARIABLE, name, style=Style.OPTIONAL_QUOTED)
        c.append(LineKind.VARIABLE, SYNTHETIC_LINE, *words)
        return c

    @classmethod
    def function(cls, name: str, *lines: str, dialect: Dialect = DEFAULT_DIALECT) -> "Container":
        """Create a function container from its physical lines."""
        if dialect.is_split_function(name):
            category = Category.SPLIT_FUNCTION
        elif dialect.is_function(name):
            category = Category.FUNCTION
        else:
            category = Category.UNKNOWN_FUNCTION
        c = cls(category, name)
        c.append(LineKind.FUNCTION, SYNTHETIC_LINE, *lines)
        return c

    @classmethod
    def comment(cls, *lines: str) -> "Container":
        """Create a blank/comment group."""
        c = cls(Category.BLANK_COMMENT, BLANK)
        c.append(LineKind.BLANK_COMMENT, SYNTHETIC_LINE, *lines)
        return c

    @property
    def synthetic(self) -> bool:
        return self.begin == SYNTHETIC_LINE

    @property
    def empty(self) -> bool:
        return not self.values

    def append(self, kind: LineKind, line: int, *texts: str) -> None:
        """Add values at the end of the container."""
        for text in texts:
            self.values.append(Value(kind, text, line))

    def set(self, index: int, text: str) -> bool:
        """
        Replace the text of a value. Empty text deletes the value instead.

        Returns:
            False when ``index`` is out of range.
        """
        if index < 0 or index >= len(self.values):
            return False
        if text == "":
            del self.values[index]
        else:
            self.values[index].text = text
        return True

    def decoded(self) -> list[str]:
        return [v.decoded() for v in self.values]

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "name": self.name,
            "category": self.category.name.lower(),
            "style": self.style.name.lower(),
            "begin": self.begin,
            "end": self.end,
            "values": [v.text for v in self.values],
            "comments": list(self.comments),
        }

    def __str__(self) -> str:
        body = "\n".join(f" - '{v}'" for v in self.values)
        return f"{self.name}\n{body}"


class Pkgbuild:
    """
    Parsed PKGBUILD: name -> containers with that name, in discovery order.

    Every container is stored under its own name. The ordering index
    (:meth:`sort`, :meth:`order`) is derived from the containers' line ranges
    and recomputed on each call.
    """

    def __init__(self, dialect: Dialect = DEFAULT_DIALECT):
        self.dialect = dialect
        self.entries: dict[str, list[Container]] = {}

    # ──────────────────────────────────────────────
    # Mapping protocol
    # ──────────────────────────────────────────────

    def __getitem__(self, name: str) -> list[Container]:
        return self.entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        parts = []
        for c in self.containers():
            parts.append(str(c))
        return "\n-------------------------\n".join(parts)

    # ──────────────────────────────────────────────
    # Mutation
    # ──────────────────────────────────────────────

    def insert(self, *containers: Container) -> None:
        """Append containers under their name. Never merges or overwrites."""
        for c in containers:
            self.entries.setdefault(c.name, []).append(c)

    def remove(self, name: str, index: int) -> bool:
        """
        Remove the container at ``index`` of ``name``'s list.

        Returns:
            False when the name is absent or the index out of range.
        """
        containers = self.entries.get(name)
        if containers is None or index < 0 or index >= len(containers):
            return False
        del containers[index]
        if not containers:
            del self.entries[name]
        return True

    def set_variable(self, name: str, *words: str) -> Container:
        """
        Replace the values of the first container of a variable, creating it
        when absent.
        """
        for c in self.entries.get(name, []):
            if c.category.is_variable:
                c.values = [Value(LineKind.VARIABLE, w) for w in words]
                return c
        c = Container.variable(name, *words, dialect=self.dialect)
        self.insert(c)
        return c

    # ──────────────────────────────────────────────
    # Ordering index
    # ──────────────────────────────────────────────

    def containers(self) -> list[Container]:
        """All containers, in no particular order across names."""
        return [c for containers in self.entries.values() for c in containers]

    def sort(self) -> list[Container]:
        """All containers sorted by starting line, synthetic ones last."""
        return sorted(self.containers(), key=lambda c: (c.synthetic, c.begin))

    def order(self) -> dict[Container, Container]:
        """Map each container to the one right before it in :meth:`sort`."""
        ordered = self.sort()
        return {c: prev for prev, c in zip(ordered, ordered[1:])}

    # ──────────────────────────────────────────────
    # Queries
    # ──────────────────────────────────────────────

    def get(self, name: str) -> list[str]:
        """Decoded values of every variable container named ``name``."""
        out = []
        for c in self.entries.get(name, []):
            if c.category.is_variable:
                out.extend(c.decoded())
        return out

    def first(self, name: str) -> str | None:
        values = self.get(name)
        return values[0] if values else None

    def version(self) -> str | None:
        """Full version, ``[epoch:]pkgver-pkgrel``, or None when incomplete."""
        pkgver, pkgrel = self.first("pkgver"), self.first("pkgrel")
        if not pkgver or not pkgrel:
            return None
        epoch = self.first("epoch")
        version = f"{pkgver}-{pkgrel}"
        return f"{epoch}:{version}" if epoch and epoch != "0" else version

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary, in source order."""
        return {"containers": [c.to_dict() for c in self.sort()]}
