"""Generate ES modules that map image assets to collision-free identifiers."""

from assets_mapper.asset_file import AssetFile
from assets_mapper.assets_watcher import AssetsWatcher, watch_assets_map
from assets_mapper.cleanup_assets_map import cleanup_assets_map
from assets_mapper.errors import (
    AssetsMapperError,
    InvalidInputError,
    ReadError,
    SourceNotDirectoryError,
    SourceNotFoundError,
    WatchError,
    WriteError,
)
from assets_mapper.generate_assets_map import generate_assets_map
from assets_mapper.generation_result import GenerationResult
from assets_mapper.generator_options import GeneratorOptions
from assets_mapper.identifier_resolver import IdentifierResolver, resolve_identifiers
from assets_mapper.load_config import load_config
from assets_mapper.merge_config import merge_config
from assets_mapper.naming_strategies import (
    apply_naming_strategy,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
)
from assets_mapper.render_assets_map import render_assets_map
from assets_mapper.sanitize_name import sanitize_name
from assets_mapper.scan_directory import scan_directory

__version__ = "0.1.0"

__all__ = [
    "AssetFile",
    "AssetsMapperError",
    "AssetsWatcher",
    "GenerationResult",
    "GeneratorOptions",
    "IdentifierResolver",
    "InvalidInputError",
    "ReadError",
    "SourceNotDirectoryError",
    "SourceNotFoundError",
    "WatchError",
    "WriteError",
    "apply_naming_strategy",
    "cleanup_assets_map",
    "generate_assets_map",
    "load_config",
    "merge_config",
    "render_assets_map",
    "resolve_identifiers",
    "sanitize_name",
    "scan_directory",
    "to_camel_case",
    "to_kebab_case",
    "to_snake_case",
    "watch_assets_map",
]
