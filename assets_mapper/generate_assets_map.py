"""Orchestration logic for generating an assets map module."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from assets_mapper.asset_file import ROOT_DIRECTORY
from assets_mapper.errors import (
    InvalidInputError,
    SourceNotDirectoryError,
    SourceNotFoundError,
)
from assets_mapper.generation_result import GenerationResult
from assets_mapper.generator_options import GeneratorOptions
from assets_mapper.identifier_resolver import IdentifierResolver
from assets_mapper.render_assets_map import MAP_NAME, render_assets_map
from assets_mapper.scan_directory import scan_directory
from assets_mapper.write_assets_map import write_assets_map

logger = logging.getLogger(__name__)


def coerce_options(
    options: GeneratorOptions | Mapping[str, Any] | None,
) -> GeneratorOptions:
    """Accept options as a dataclass or a mapping and check required fields."""
    if options is None:
        msg = "Options object is required"
        raise InvalidInputError(msg)
    if isinstance(options, Mapping):
        options = GeneratorOptions.from_mapping(options)
    if not isinstance(options, GeneratorOptions):
        kind = type(options).__name__
        msg = f"Options must be GeneratorOptions or a mapping, got {kind}"
        raise InvalidInputError(msg)
    if not isinstance(options.src, (str, Path)) or not str(options.src):
        msg = "src directory is required and must be a path"
        raise InvalidInputError(msg)
    if not isinstance(options.out, (str, Path)) or not str(options.out):
        msg = "out file path is required and must be a path"
        raise InvalidInputError(msg)
    return options


def resolve_source(src: str | Path) -> Path:
    """Resolve the source directory, checking that it exists."""
    path = Path(src).resolve()
    if not path.exists():
        msg = f"Source folder not found: {path}"
        raise SourceNotFoundError(msg)
    if not path.is_dir():
        msg = f"Source path is not a directory: {path}"
        raise SourceNotDirectoryError(msg)
    return path


def generate_assets_map(
    options: GeneratorOptions | Mapping[str, Any],
) -> GenerationResult:
    """Scan the source tree, resolve identifiers and write the module.

    Relative ``src``, ``out`` and ``public_dir`` values are resolved against
    the current working directory. With ``dry_run`` set, nothing is written and
    the rendered text is only returned in the result.
    """
    opts = coerce_options(options)
    src = resolve_source(opts.src)
    out = Path(opts.out).resolve()
    exts = opts.effective_exts()
    resolver = IdentifierResolver(opts.naming_strategy, opts.prefix_strategy)

    assets = scan_directory(src, exts, opts.effective_exclude(), opts.include)
    if not assets:
        logger.warning(
            "No image files found in %s (including subdirectories) "
            "with extensions: %s",
            src,
            ", ".join(exts),
        )

    # Import mode binds the map object itself in the same module scope.
    reserved = () if opts.public else (MAP_NAME,)
    resolution = resolver.resolve(assets, reserved)
    content = render_assets_map(
        resolution.entries,
        out,
        public=opts.public,
        public_dir=Path(opts.public_dir).resolve(),
    )

    if not opts.dry_run:
        write_assets_map(out, content)
        logger.info("Wrote %d asset(s) to %s", len(resolution.entries), out)

    return GenerationResult(
        output_file=out,
        processed_files=[e.asset.relative_path for e in resolution.entries],
        total_files=len(resolution.entries),
        directories=frozenset(
            e.asset.directory
            for e in resolution.entries
            if e.asset.directory != ROOT_DIRECTORY
        ),
        duplicates=resolution.duplicates,
        identifiers=resolution.identifiers(),
        content=content,
        written=not opts.dry_run,
    )
