"""Shell-style glob matching against forward-slash relative paths.

``*`` and ``?`` never cross a ``/``; a ``**`` segment matches zero or more
whole segments, so ``**/icons/**`` matches ``icons``, ``icons/a.png`` and
``x/icons/y/b.png``.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from assets_mapper.errors import InvalidInputError

GLOBSTAR = "**"


def _translate_segment(segment: str) -> str:
    """Translate one path segment of a glob into a regex fragment."""
    out: list[str] = []
    i = 0
    n = len(segment)
    while i < n:
        c = segment[i]
        i += 1
        if c == "*":
            # Collapse runs of "*" inside a segment ("a**b" behaves like "a*b").
            while i < n and segment[i] == "*":
                i += 1
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "[":
            # A "]" right after "[" or "[!" is a literal member of the class.
            j = i
            if segment[j : j + 1] in ("!", "^"):
                j += 1
            if segment[j : j + 1] == "]":
                j += 1
            end = segment.find("]", j)
            if end == -1:
                out.append(re.escape(c))
                continue
            body = segment[i:end]
            i = end + 1
            negate = body[:1] in ("!", "^")
            if negate:
                body = body[1:]
            body = body.replace("\\", "\\\\").replace("[", "\\[").replace("]", "\\]")
            out.append(f"[^/{body}]" if negate else f"[{body}]")
        else:
            out.append(re.escape(c))
    return "".join(out)


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a glob pattern into an anchored regular expression."""
    pattern = pattern.replace("\\", "/")
    while pattern.startswith("./"):
        pattern = pattern[2:]
    segments = [s for s in pattern.split("/") if s] or [""]
    last = len(segments) - 1

    parts: list[str] = []
    for i, seg in enumerate(segments):
        if seg == GLOBSTAR:
            if i == last:
                parts.append(".*" if i == 0 else "(?:/.*)?")
            else:
                parts.append("(?:.*/)?")
            continue
        parts.append(_translate_segment(seg))
        if i < last and not (i + 1 == last and segments[i + 1] == GLOBSTAR):
            parts.append("/")
    try:
        return re.compile("".join(parts), re.DOTALL)
    except re.error as exc:
        msg = f"Invalid glob pattern {pattern!r}: {exc}"
        raise InvalidInputError(msg) from exc


def glob_match(pattern: str, relative_path: str) -> bool:
    """Check whether a forward-slash relative path matches ``pattern``."""
    return compile_glob(pattern).fullmatch(relative_path) is not None


def matches_any(patterns: Iterable[str], relative_path: str) -> bool:
    """Check whether any of ``patterns`` matches ``relative_path``."""
    return any(glob_match(p, relative_path) for p in patterns)
