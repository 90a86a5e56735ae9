"""Logic for combining file-provided config with command-line overrides."""

from collections.abc import Mapping
from typing import Any

from assets_mapper.errors import InvalidInputError
from assets_mapper.generator_options import GeneratorOptions


def merge_config(
    config: Mapping[str, Any] | None, overrides: Mapping[str, Any]
) -> GeneratorOptions:
    """Merge config file values with overrides, field by field.

    - Overrides win whenever they are not ``None``.
    - ``src`` and ``out`` must be set by one of the two sources.
    """
    merged = dict(config or {})
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value

    if not merged.get("src") or not merged.get("out"):
        msg = "Both src and out are required"
        raise InvalidInputError(msg)
    return GeneratorOptions.from_mapping(merged)
