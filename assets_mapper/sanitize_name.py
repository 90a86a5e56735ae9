"""Utility for turning arbitrary text into a bare identifier."""

import re

from assets_mapper.errors import InvalidInputError

INVALID_IDENTIFIER_CHARS_RE = re.compile(r"[^A-Za-z0-9_]")
IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Words that cannot be used as a binding name in an ES module.
RESERVED_WORDS = frozenset(
    {
        "arguments", "await", "break", "case", "catch", "class", "const",
        "continue", "debugger", "default", "delete", "do", "else", "enum",
        "eval", "export", "extends", "false", "finally", "for", "function",
        "if", "implements", "import", "in", "instanceof", "interface", "let",
        "new", "null", "package", "private", "protected", "public", "return",
        "static", "super", "switch", "this", "throw", "true", "try", "typeof",
        "var", "void", "while", "with", "yield",
    }
)  # fmt: skip


def require_name(name: object) -> str:
    """Return ``name`` if it is a non-empty string, else raise InvalidInputError."""
    if not isinstance(name, str) or not name:
        msg = f"Invalid name provided for transformation: {name!r}"
        raise InvalidInputError(msg)
    return name


def prefix_leading_digit(name: str) -> str:
    """Prepend an underscore when ``name`` starts with a digit."""
    if name[:1].isdigit():
        return f"_{name}"
    return name


def sanitize_name(name: str) -> str:
    """Replace every non-identifier character with ``_``.

    A leading digit is prefixed with ``_`` so the result is always a valid
    identifier: ``sanitize_name("123icon") == "_123icon"``.
    """
    clean = INVALID_IDENTIFIER_CHARS_RE.sub("_", require_name(name))
    return prefix_leading_digit(clean)


def is_identifier(name: str) -> bool:
    """Check whether ``name`` can be used as a bare JS/TS identifier."""
    return bool(IDENTIFIER_RE.match(name))


def escape_reserved_word(name: str) -> str:
    """Prefix a reserved word with ``_``: ``class`` becomes ``_class``."""
    if name in RESERVED_WORDS:
        return f"_{name}"
    return name
