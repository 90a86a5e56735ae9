"""Logic for writing a starter configuration file."""

from pathlib import Path

from assets_mapper.errors import InvalidInputError
from assets_mapper.load_config import CONFIG_FILES

CONFIG_TEMPLATE = """\
# assets-mapper configuration

# Source directory containing your assets (required)
src: ./src/assets

# Output file for the generated assets map (required)
out: ./src/assetsMap.ts

# Generate public URLs instead of import statements
public: false

# Directory public URLs are computed against
public_dir: public

# File extensions to include
exts: [png, jpg, jpeg, svg, webp, gif]

# Glob patterns to exclude from processing
exclude:
  - "**/node_modules/**"
  - "**/.git/**"

# Glob patterns to include (only matching files are processed)
# include:
#   - "**/icons/**"

# Naming strategy for export names: camelCase, snake_case or kebab-case
# naming_strategy: camelCase

# Strategy for naming duplicate files: folder, path or hash
prefix_strategy: folder
"""


def write_config_template(directory: Path | None = None) -> Path:
    """Write the starter config into ``directory`` without overwriting."""
    target = (directory or Path.cwd()) / CONFIG_FILES[0]
    if target.exists():
        msg = f"Config file already exists: {target}"
        raise InvalidInputError(msg)
    target.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    return target
