"""Logic for rendering resolved assets into an ES module."""

import json
import os
from collections.abc import Sequence
from pathlib import Path

from assets_mapper.resolved_asset import ResolvedAsset

MAP_NAME = "assetsMap"


def _js_string(value: str) -> str:
    """Quote ``value`` as a double-quoted JS string literal."""
    return json.dumps(value, ensure_ascii=False)


def import_path_for(asset_path: Path, out_file: Path) -> str:
    """Compute the import specifier of an asset as seen from ``out_file``."""
    rel = os.path.relpath(asset_path, out_file.parent).replace("\\", "/")
    if rel.startswith(("./", "../")):
        return rel
    return f"./{rel}"


def public_url_for(entry: ResolvedAsset, public_dir: Path | None) -> str:
    """Compute the root-relative URL an asset is served from.

    Assets inside ``public_dir`` are addressed relative to it; anything else
    falls back to its path relative to the scan root.
    """
    full_path = entry.asset.full_path
    if public_dir is not None and full_path.is_relative_to(public_dir):
        return "/" + full_path.relative_to(public_dir).as_posix()
    return "/" + entry.asset.relative_path


def render_import_map(entries: Sequence[ResolvedAsset], out_file: Path) -> str:
    """Render import statements plus a default-exported map object."""
    lines: list[str] = []
    for e in entries:
        spec = _js_string(import_path_for(e.asset.full_path, out_file))
        lines.append(f"import {e.identifier} from {spec};")

    if entries:
        lines.append("")
        lines.append(f"const {MAP_NAME} = {{")
        lines.append(",\n".join(f"  {e.identifier}" for e in entries))
        lines.append("};")
    else:
        lines.append(f"const {MAP_NAME} = {{}};")
    lines.append("")
    lines.append(f"export default {MAP_NAME};")
    return "\n".join(lines) + "\n"


def render_public_map(
    entries: Sequence[ResolvedAsset], public_dir: Path | None
) -> str:
    """Render one exported URL constant per asset."""
    lines = [
        f"export const {e.identifier} = {_js_string(public_url_for(e, public_dir))};"
        for e in entries
    ]
    return "\n".join(lines) + "\n" if lines else ""


def render_assets_map(
    entries: Sequence[ResolvedAsset],
    out_file: Path,
    *,
    public: bool = False,
    public_dir: Path | None = None,
) -> str:
    """Render the generated module text for ``entries`` in their given order."""
    if public:
        return render_public_map(entries, public_dir)
    return render_import_map(entries, out_file)
