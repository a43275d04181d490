"""
Example: Bump pkgrel and reformat a PKGBUILD.

Usage:
    python examples/bump_pkgrel.py path/to/PKGBUILD
"""

import sys
from pathlib import Path

from pkgbuild_editor import Pkgbuild
from pkgbuild_editor.parser import dump, load


def bump(pkgbuild: Pkgbuild) -> str:
    # Reset to 1 when pkgrel is missing or not a plain integer
    current = pkgbuild.first("pkgrel") or ""
    pkgrel = str(int(current) + 1) if current.isdigit() else "1"
    pkgbuild.set_variable("pkgrel", pkgrel)
    return pkgrel


def main():
    path = Path(sys.argv[1] if len(sys.argv) > 1 else "PKGBUILD")
    pkgbuild = load(path)
    old = pkgbuild.version()
    bump(pkgbuild)
    dump(pkgbuild, path)

    print(f"\n✅ {path}: {old} -> {pkgbuild.version()}")


if __name__ == "__main__":
    main()
