"""Data model for a discovered asset file."""

from dataclasses import dataclass
from pathlib import Path

ROOT_DIRECTORY = "."


@dataclass(frozen=True)
class AssetFile:
    """Represents one candidate asset found under the scan root."""

    full_path: Path
    relative_path: str  # forward slashes, relative to the scan root
    filename: str
    base_name: str  # filename without its extension
    directory: str  # relative directory, "." for root-level files

    @property
    def directory_parts(self) -> list[str]:
        """Return the segments of ``directory`` (empty for the root)."""
        if self.directory == ROOT_DIRECTORY:
            return []
        return self.directory.split("/")

    @property
    def depth(self) -> int:
        """Return how many directories deep the file sits below the root."""
        return len(self.directory_parts)
