"""Data model for the summary of a generation run."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class GenerationResult:
    """Summary returned after generating an assets map."""

    output_file: Path
    processed_files: list[str]  # relative paths, in identifier assignment order
    total_files: int
    directories: frozenset[str]  # distinct non-root directories
    duplicates: frozenset[str]  # candidate base names shared by several files
    identifiers: dict[str, str] = field(default_factory=dict)  # path -> identifier
    content: str = ""
    written: bool = True
