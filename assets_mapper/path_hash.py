"""Utility for deriving a short token from an asset path."""

import base64
import re

NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")
PATH_HASH_LENGTH = 8


def path_hash(relative_path: str) -> str:
    """Return the first 8 alphanumeric characters of the base64 encoded path.

    Paths sharing a long common prefix can map to the same token; the
    resolver's numeric suffix guard keeps identifiers unique in that case.
    """
    encoded = base64.b64encode(relative_path.encode("utf-8")).decode("ascii")
    return NON_ALNUM_RE.sub("", encoded)[:PATH_HASH_LENGTH]
