"""Logic for locating and loading assets-mapper configuration files."""

import importlib.util
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from assets_mapper.generator_options import GeneratorOptions

logger = logging.getLogger(__name__)

CONFIG_FILES = [
    "assets-mapper.config.yml",
    "assets-mapper.config.yaml",
    "assets-mapper.config.json",
    ".assetsmapperrc.yml",
    ".assetsmapperrc.json",
    "assets-mapper.config.py",
]

# Keys as spelled by the JavaScript version of the tool.
KEY_ALIASES = {
    "namingStrategy": "naming_strategy",
    "prefixStrategy": "prefix_strategy",
    "publicDir": "public_dir",
    "dryRun": "dry_run",
}


def find_config_file(cwd: Path | None = None) -> Path | None:
    """Return the first conventional config file present in ``cwd``."""
    base = cwd or Path.cwd()
    for name in CONFIG_FILES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def _load_python_config(path: Path) -> Any:
    spec = importlib.util.spec_from_file_location("_assets_mapper_config", path)
    if spec is None or spec.loader is None:
        msg = f"Cannot import {path}"
        raise ImportError(msg)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    for attr in ("config", "CONFIG"):
        if hasattr(module, attr):
            return getattr(module, attr)
    msg = f"{path.name} defines neither 'config' nor 'CONFIG'"
    raise AttributeError(msg)


def read_config_file(path: Path) -> Any:
    """Parse one config file according to its extension."""
    if path.suffix == ".py":
        return _load_python_config(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def normalize_config(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Rename camelCase aliases and drop keys that are not generator options."""
    known = GeneratorOptions.field_names()
    config: dict[str, Any] = {}
    for key, value in raw.items():
        name = KEY_ALIASES.get(key, key)
        if name not in known:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        config[name] = value
    return config


def load_config(
    path: str | Path | None = None, cwd: Path | None = None
) -> dict[str, Any] | None:
    """Load a config file, searching ``cwd`` when no path is given.

    Returns ``None`` when no file is found or the file cannot be loaded.
    """
    config_path = Path(path) if path else find_config_file(cwd)
    if config_path is None:
        return None
    if not config_path.is_file():
        logger.warning("Config file not found: %s", config_path)
        return None

    try:
        raw = read_config_file(config_path)
    except Exception as exc:
        logger.warning("Could not load config from %s: %s", config_path.name, exc)
        return None

    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        logger.warning("Config in %s is not a mapping, ignoring it", config_path.name)
        return None
    logger.debug("Loaded config from %s", config_path)
    return normalize_config(raw)
