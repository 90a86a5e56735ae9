"""Logic for assigning unique export identifiers to asset files."""

import logging
from collections import Counter
from collections.abc import Iterable

from assets_mapper.asset_file import ROOT_DIRECTORY, AssetFile
from assets_mapper.errors import InvalidInputError
from assets_mapper.naming_strategies import NAMING_STRATEGIES, apply_naming_strategy
from assets_mapper.path_hash import path_hash
from assets_mapper.resolved_asset import Resolution, ResolvedAsset
from assets_mapper.sanitize_name import (
    escape_reserved_word,
    is_identifier,
    sanitize_name,
)

logger = logging.getLogger(__name__)

FOLDER_PREFIX = "folder"
PATH_PREFIX = "path"
HASH_PREFIX = "hash"

PREFIX_STRATEGIES = (FOLDER_PREFIX, PATH_PREFIX, HASH_PREFIX)


def asset_sort_key(asset: AssetFile) -> tuple[int, str]:
    """Order root-level files first, then by relative path."""
    return (asset.depth, asset.relative_path)


class IdentifierResolver:
    """Derives collision-free identifiers from asset base names.

    Resolution is two-pass: every candidate base name is counted first, then
    identifiers are assigned in ``asset_sort_key`` order. Only names that occur
    more than once get a prefix, and a root-level file always keeps the plain
    name.
    """

    def __init__(
        self,
        naming_strategy: str | None = None,
        prefix_strategy: str | None = None,
    ) -> None:
        """Initialize the resolver with naming and prefix strategies."""
        if naming_strategy is not None and naming_strategy not in NAMING_STRATEGIES:
            msg = (
                f"Unknown naming strategy: {naming_strategy!r} "
                f"(expected one of {', '.join(NAMING_STRATEGIES)})"
            )
            raise InvalidInputError(msg)
        prefix_strategy = prefix_strategy or FOLDER_PREFIX
        if prefix_strategy not in PREFIX_STRATEGIES:
            msg = (
                f"Unknown prefix strategy: {prefix_strategy!r} "
                f"(expected one of {', '.join(PREFIX_STRATEGIES)})"
            )
            raise InvalidInputError(msg)
        self.naming_strategy = naming_strategy
        self.prefix_strategy = prefix_strategy

    def transform(self, name: str) -> str:
        """Apply the configured naming strategy to ``name``."""
        return apply_naming_strategy(name, self.naming_strategy)

    def resolve(
        self, assets: Iterable[AssetFile], reserved: Iterable[str] = ()
    ) -> Resolution:
        """Assign an identifier to every asset.

        Names in ``reserved`` are already bound in the generated module and are
        never handed out; a clashing asset gets a numbered variant instead.
        """
        ordered = sorted(assets, key=asset_sort_key)
        candidates = [self.transform(a.base_name) for a in ordered]
        counts = Counter(candidates)

        taken: set[str] = set(reserved)
        entries: list[ResolvedAsset] = []
        for asset, candidate in zip(ordered, candidates, strict=True):
            if counts[candidate] > 1:
                desired = self._prefixed(asset, candidate)
            else:
                desired = candidate
            identifier = self._claim(desired, taken)
            entries.append(ResolvedAsset(asset, candidate, identifier))

        duplicates = frozenset(name for name, n in counts.items() if n > 1)
        if duplicates:
            logger.debug("Duplicate base names: %s", ", ".join(sorted(duplicates)))
        return Resolution(entries=entries, duplicates=duplicates)

    def _prefixed(self, asset: AssetFile, candidate: str) -> str:
        """Disambiguate a duplicated candidate name with directory info."""
        if asset.directory == ROOT_DIRECTORY:
            return candidate
        if self.prefix_strategy == HASH_PREFIX:
            return f"{candidate}_{path_hash(asset.relative_path)}"
        if self.prefix_strategy == PATH_PREFIX:
            dir_name = "_".join(asset.directory_parts)
            return self.transform(f"{dir_name}_{asset.base_name}")
        folder = self.transform(asset.directory_parts[-1])
        return f"{folder}_{candidate}"

    @staticmethod
    def _claim(desired: str, taken: set[str]) -> str:
        """Reserve ``desired`` (or a numbered variant) as an identifier."""
        # kebab-case names are the only ones that need coercing here.
        base = desired if is_identifier(desired) else sanitize_name(desired)
        base = escape_reserved_word(base)
        identifier = base
        counter = 1
        while identifier in taken:
            identifier = f"{base}_{counter}"
            counter += 1
        taken.add(identifier)
        return identifier


def resolve_identifiers(
    assets: Iterable[AssetFile],
    naming_strategy: str | None = None,
    prefix_strategy: str | None = None,
    reserved: Iterable[str] = (),
) -> Resolution:
    """Resolve identifiers for ``assets`` in one call."""
    resolver = IdentifierResolver(naming_strategy, prefix_strategy)
    return resolver.resolve(assets, reserved)
