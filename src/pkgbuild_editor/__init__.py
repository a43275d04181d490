"""
PKGBUILD Editor - structured editing of shell-flavored build recipes.

Reads PKGBUILD files into a queryable, editable document model and writes them
back: verbatim for content the editor does not understand, in a fixed
canonical layout for the variables it does.
"""

__version__ = "1.0.0"


def __getattr__(name: str):
    """Lazy import of the parser entry points."""
    if name in ("loads", "dumps", "Pkgbuild"):
        from pkgbuild_editor import parser

        return getattr(parser, name)
    if name == "PackageInfo":
        from pkgbuild_editor.models.package import PackageInfo

        return PackageInfo
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["Pkgbuild", "PackageInfo", "dumps", "loads", "__version__"]
