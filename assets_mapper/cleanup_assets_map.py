"""Logic for removing a previously generated assets map."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def cleanup_assets_map(output_path: str | Path) -> bool:
    """Delete the generated file. Returns True if a file was removed."""
    path = Path(output_path)
    if not path.exists():
        return False
    try:
        path.unlink()
    except OSError as exc:
        logger.warning("Could not clean up assets map file %s: %s", path, exc)
        return False
    logger.info("Cleaned up assets map file: %s", path)
    return True
