"""
Package summary record.

A flat view of the metadata a PKGBUILD declares, independent of how the file
is laid out. This is the record downstream tooling merges with locally
installed versions and remote listing data.
"""

from dataclasses import asdict, dataclass, field

from pkgbuild_editor.parser.model import Pkgbuild


@dataclass
class PackageInfo:
    """
    Metadata read from a PKGBUILD.

    Values are decoded (quoting removed) but not expanded, so a ``$pkgver``
    inside a source URL stays as written.
    """

    name: str
    version: str | None = None
    description: str | None = None
    url: str | None = None
    arch: list[str] = field(default_factory=list)
    license: list[str] = field(default_factory=list)
    depends: list[str] = field(default_factory=list)
    makedepends: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)

    @classmethod
    def from_pkgbuild(cls, pkgbuild: Pkgbuild) -> "PackageInfo":
        """Summarize a parsed document. ``pkgbase`` wins over ``pkgname``."""
        name = pkgbuild.first("pkgbase") or pkgbuild.first("pkgname") or ""
        return cls(
            name=name,
            version=pkgbuild.version(),
            description=pkgbuild.first("pkgdesc"),
            url=pkgbuild.first("url"),
            arch=pkgbuild.get("arch"),
            license=pkgbuild.get("license"),
            depends=pkgbuild.get("depends"),
            makedepends=pkgbuild.get("makedepends"),
            sources=pkgbuild.get("source"),
        )

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "PackageInfo":
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            version=data.get("version"),
            description=data.get("description"),
            url=data.get("url"),
            arch=data.get("arch", []),
            license=data.get("license", []),
            depends=data.get("depends", []),
            makedepends=data.get("makedepends", []),
            sources=data.get("sources", []),
        )
