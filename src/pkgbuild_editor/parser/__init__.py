"""PKGBUILD parser, document model and canonical renderer."""

from pkgbuild_editor.parser.builder import build, load, loads
from pkgbuild_editor.parser.classifier import LineKind, ParseError, classify
from pkgbuild_editor.parser.dialect import DEFAULT_DIALECT, Dialect, Style
from pkgbuild_editor.parser.model import BLANK, HEADER, SYNTHETIC_LINE, UNKNOWN, Category, Container, Pkgbuild, Value
from pkgbuild_editor.parser.renderer import dump, dumps, render, render_container

__all__ = [
    "BLANK",
    "DEFAULT_DIALECT",
    "HEADER",
    "SYNTHETIC_LINE",
    "UNKNOWN",
    "Category",
    "Container",
    "Dialect",
    "LineKind",
    "ParseError",
    "Pkgbuild",
    "Style",
    "Value",
    "build",
    "classify",
    "dump",
    "dumps",
    "load",
    "loads",
    "render",
    "render_container",
]
