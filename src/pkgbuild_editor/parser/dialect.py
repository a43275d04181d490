"""
Recognized-name tables for the PKGBUILD dialect.

Defines which variables and functions the editor understands, and how each
recognized variable is laid out when the document is rendered back to text.
The tables are frozen at import time and passed by reference to the
classifier, the builder and the renderer.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping


class Style(Enum):
    """Layout used to render a container."""

    SINGLE = auto()  # name=value
    SINGLE_QUOTED = auto()  # name="value"
    OPTIONAL = auto()  # name=value, or name=(v1 v2) with several values
    OPTIONAL_QUOTED = auto()  # name="value", or name=("v1" "v2")
    MULTIPLE = auto()  # name=(v1 v2)
    MULTIPLE_QUOTED = auto()  # name=("v1" "v2")
    MULTIPLE_LINES = auto()  # one quoted value per line
    LINES = auto()  # verbatim lines


# Order matters: it is the canonical key order of the rendered file.
VARIABLE_STYLES: dict[str, Style] = {
    "pkgbase": Style.SINGLE,
    "pkgname": Style.OPTIONAL,
    "pkgver": Style.SINGLE,
    "pkgrel": Style.SINGLE,
    "epoch": Style.SINGLE,
    "pkgdesc": Style.SINGLE_QUOTED,
    "arch": Style.MULTIPLE,
    "url": Style.SINGLE_QUOTED,
    "license": Style.MULTIPLE_QUOTED,
    "groups": Style.OPTIONAL_QUOTED,
    "depends": Style.MULTIPLE_QUOTED,
    "makedepends": Style.MULTIPLE_QUOTED,
    "checkdepends": Style.MULTIPLE_QUOTED,
    "optdepends": Style.MULTIPLE_LINES,
    "provides": Style.MULTIPLE_QUOTED,
    "conflicts": Style.MULTIPLE_QUOTED,
    "replaces": Style.MULTIPLE_QUOTED,
    "backup": Style.MULTIPLE_QUOTED,
    "options": Style.MULTIPLE_QUOTED,
    "install": Style.SINGLE_QUOTED,
    "changelog": Style.SINGLE_QUOTED,
    "source": Style.MULTIPLE_LINES,
    "noextract": Style.MULTIPLE_QUOTED,
    "validpgpkeys": Style.MULTIPLE_LINES,
    "md5sums": Style.MULTIPLE_LINES,
    "sha1sums": Style.MULTIPLE_LINES,
    "sha224sums": Style.MULTIPLE_LINES,
    "sha256sums": Style.MULTIPLE_LINES,
    "sha384sums": Style.MULTIPLE_LINES,
    "sha512sums": Style.MULTIPLE_LINES,
    "b2sums": Style.MULTIPLE_LINES,
}

# Build lifecycle, in the order makepkg runs it.
FUNCTIONS: tuple[str, ...] = ("prepare", "pkgver", "build", "check", "package")

SPLIT_PREFIX = "package_"


@dataclass(frozen=True)
class Dialect:
    """
    Immutable recognized-name tables.

    Attributes:
        variables: Known variable name -> rendering style. Iteration order is
            the canonical key order.
        functions: Known function names in canonical order.
        split_prefix: Prefix of per-sub-package ``package_*`` functions.
    """

    variables: Mapping[str, Style] = field(
        default_factory=lambda: MappingProxyType(dict(VARIABLE_STYLES))
    )
    functions: tuple[str, ...] = FUNCTIONS
    split_prefix: str = SPLIT_PREFIX

    def __post_init__(self):
        if not isinstance(self.variables, MappingProxyType):
            object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))
        object.__setattr__(self, "functions", tuple(self.functions))

    def is_variable(self, name: str) -> bool:
        return name in self.variables

    def is_function(self, name: str) -> bool:
        return name in self.functions

    def is_split_function(self, name: str) -> bool:
        return name.startswith(self.split_prefix)

    def style_of(self, name: str) -> Style:
        """Style of a recognized variable."""
        return self.variables[name]

    def extend(
        self,
        variables: Mapping[str, Style] | None = None,
        functions: tuple[str, ...] = (),
    ) -> "Dialect":
        """Return a new dialect with extra variables/functions appended."""
        merged = dict(self.variables)
        merged.update(variables or {})
        extra = tuple(f for f in functions if f not in self.functions)
        return Dialect(
            variables=MappingProxyType(merged),
            functions=self.functions + extra,
            split_prefix=self.split_prefix,
        )


DEFAULT_DIALECT = Dialect()
