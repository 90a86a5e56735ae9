"""Data models for identifier resolution results."""

from dataclasses import dataclass, field

from assets_mapper.asset_file import AssetFile


@dataclass(frozen=True)
class ResolvedAsset:
    """An asset paired with the export identifier assigned to it."""

    asset: AssetFile
    candidate_base: str  # name after the naming strategy, before any prefix
    identifier: str


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving identifiers for one generation run."""

    entries: list[ResolvedAsset] = field(default_factory=list)
    duplicates: frozenset[str] = frozenset()

    def identifiers(self) -> dict[str, str]:
        """Map each relative path to its identifier."""
        return {e.asset.relative_path: e.identifier for e in self.entries}
