"""Options accepted by the assets map generator and their defaults."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path, PurePath
from typing import Any

from assets_mapper.errors import InvalidInputError

DEFAULT_EXTS = ["png", "jpg", "jpeg", "svg", "webp", "gif", "ico", "bmp", "tiff"]
DEFAULT_EXCLUDE = ["**/node_modules/**", "**/.git/**"]
DEFAULT_PUBLIC_DIR = "public"

PATH_FIELDS = ("src", "out", "public_dir")
LIST_FIELDS = ("exts", "exclude", "include")
BOOL_FIELDS = ("public", "dry_run")


def _check_value(key: str, value: Any) -> Any:
    """Check the type of one option value, normalizing list fields."""
    if key in LIST_FIELDS:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, (list, tuple)) and all(
            isinstance(item, str) for item in value
        ):
            return list(value)
        expected = "a list of strings"
    elif key in PATH_FIELDS:
        if isinstance(value, (str, PurePath)):
            return value
        expected = "a path"
    elif key in BOOL_FIELDS:
        if isinstance(value, bool):
            return value
        expected = "true or false"
    else:
        if isinstance(value, str):
            return value
        expected = "a string"
    msg = f"Option {key} must be {expected}, got {type(value).__name__}"
    raise InvalidInputError(msg)


@dataclass
class GeneratorOptions:
    """Settings for one assets map generation run."""

    src: str | Path
    out: str | Path
    public: bool = False
    exts: list[str] | None = None
    exclude: list[str] | None = None
    include: list[str] | None = None
    naming_strategy: str | None = None  # camelCase / snake_case / kebab-case
    prefix_strategy: str | None = None  # folder / path / hash
    public_dir: str | Path = DEFAULT_PUBLIC_DIR
    dry_run: bool = False

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the names of all option fields."""
        return {f.name for f in fields(cls)}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GeneratorOptions":
        """Build options from a plain mapping, rejecting unknown keys.

        ``None`` values fall back to the field default. A string is accepted
        for the list fields and split on commas, as on the command line.
        """
        unknown = set(data) - cls.field_names()
        if unknown:
            msg = f"Unknown option(s): {', '.join(sorted(unknown))}"
            raise InvalidInputError(msg)
        missing = [key for key in ("src", "out") if data.get(key) is None]
        if missing:
            msg = f"Missing required option(s): {', '.join(missing)}"
            raise InvalidInputError(msg)
        values = {
            key: _check_value(key, value)
            for key, value in data.items()
            if value is not None
        }
        return cls(**values)

    def effective_exts(self) -> list[str]:
        """Return the configured extensions or the default image set."""
        if self.exts is None:
            return list(DEFAULT_EXTS)
        return list(self.exts)

    def effective_exclude(self) -> list[str]:
        """Return the configured exclude globs or the defaults."""
        if self.exclude is None:
            return list(DEFAULT_EXCLUDE)
        return list(self.exclude)
