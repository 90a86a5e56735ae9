"""Logic for writing a generated module to disk."""

from pathlib import Path

from assets_mapper.errors import WriteError


def write_assets_map(out_file: Path, content: str) -> Path:
    """Write ``content`` to ``out_file``, creating parent directories."""
    try:
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(content, encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        # Undecodable file names reach here as lone surrogates.
        msg = f"Failed to write output file {out_file}: {exc}"
        raise WriteError(msg) from exc
    return out_file
