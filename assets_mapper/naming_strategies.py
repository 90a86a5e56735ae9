"""Casing transforms used to derive export names from file names."""

import re

from assets_mapper.errors import InvalidInputError
from assets_mapper.sanitize_name import (
    prefix_leading_digit,
    require_name,
    sanitize_name,
)

CAMEL_CASE = "camelCase"
SNAKE_CASE = "snake_case"
KEBAB_CASE = "kebab-case"

NAMING_STRATEGIES = (CAMEL_CASE, SNAKE_CASE, KEBAB_CASE)

# Separators are anything that is not an ASCII letter or digit, "_" included.
SEPARATOR_RUN_RE = re.compile(r"[^A-Za-z0-9]+")
CAMEL_BOUNDARY_RE = re.compile(r"[^A-Za-z0-9]+(.)?")


def to_camel_case(name: str) -> str:
    """Convert ``name`` to camelCase: ``"hello-world"`` -> ``"helloWorld"``."""
    joined = CAMEL_BOUNDARY_RE.sub(
        lambda m: m.group(1).upper() if m.group(1) else "",
        require_name(name),
    )
    if not joined:
        return "_"
    return prefix_leading_digit(joined[0].lower() + joined[1:])


def to_snake_case(name: str) -> str:
    """Convert ``name`` to snake_case without splitting on case changes."""
    snake = SEPARATOR_RUN_RE.sub("_", require_name(name)).lower()
    return prefix_leading_digit(snake)


def to_kebab_case(name: str) -> str:
    """Convert ``name`` to kebab-case.

    Leading digits are kept: kebab names end up in string constants rather than
    bare identifiers.
    """
    return SEPARATOR_RUN_RE.sub("-", require_name(name)).lower()


def apply_naming_strategy(name: str, strategy: str | None = None) -> str:
    """Transform ``name`` with the given strategy (``None`` sanitizes only)."""
    if strategy is None:
        return sanitize_name(name)
    if strategy == CAMEL_CASE:
        return to_camel_case(name)
    if strategy == SNAKE_CASE:
        return to_snake_case(name)
    if strategy == KEBAB_CASE:
        return to_kebab_case(name)
    msg = (
        f"Unknown naming strategy: {strategy!r} "
        f"(expected one of {', '.join(NAMING_STRATEGIES)})"
    )
    raise InvalidInputError(msg)
