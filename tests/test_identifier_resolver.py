"""Tests for export identifier resolution."""

import itertools
import re
from pathlib import Path, PurePosixPath

import pytest

from assets_mapper.asset_file import AssetFile
from assets_mapper.errors import InvalidInputError
from assets_mapper.identifier_resolver import (
    IdentifierResolver,
    asset_sort_key,
    resolve_identifiers,
)
from assets_mapper.path_hash import path_hash
from assets_mapper.sanitize_name import RESERVED_WORDS

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def make_asset(relative_path: str) -> AssetFile:
    """Build an AssetFile for a path relative to a fake root."""
    rel = PurePosixPath(relative_path)
    return AssetFile(
        full_path=Path("/project/assets") / relative_path,
        relative_path=relative_path,
        filename=rel.name,
        base_name=rel.stem,
        directory=str(rel.parent),
    )


def identifiers(paths: list[str], **kwargs: str | None) -> dict[str, str]:
    """Resolve ``paths`` and map each relative path to its identifier."""
    return resolve_identifiers([make_asset(p) for p in paths], **kwargs).identifiers()


def test_unique_names_are_kept() -> None:
    """Verify that unique base names are used verbatim."""
    assert identifiers(["logo.png", "icons/arrow.svg"]) == {
        "logo.png": "logo",
        "icons/arrow.svg": "arrow",
    }


def test_root_file_keeps_plain_name() -> None:
    """Verify the folder strategy with a root-level duplicate."""
    resolution = resolve_identifiers(
        [make_asset("icons/logo.png"), make_asset("logo.png")]
    )
    assert resolution.identifiers() == {
        "logo.png": "logo",
        "icons/logo.png": "icons_logo",
    }
    assert resolution.duplicates == frozenset({"logo"})
    assert [e.asset.relative_path for e in resolution.entries] == [
        "logo.png",
        "icons/logo.png",
    ]


def test_entries_sorted_by_depth_then_path() -> None:
    """Verify the deterministic processing order."""
    assets = [make_asset(p) for p in ["b/x.png", "z.png", "a/b/c.png", "a.png"]]
    ordered = sorted(assets, key=asset_sort_key)
    assert [a.relative_path for a in ordered] == [
        "a.png",
        "z.png",
        "b/x.png",
        "a/b/c.png",
    ]


def test_folder_strategy_uses_immediate_parent() -> None:
    """Verify that only the last directory segment is used as prefix."""
    result = identifiers(["assets/icons/logo.png", "images/logo.png"])
    assert result == {
        "images/logo.png": "images_logo",
        "assets/icons/logo.png": "icons_logo",
    }


def test_path_strategy_uses_full_directory() -> None:
    """Verify that the path strategy joins every directory segment."""
    result = identifiers(
        ["a/b/logo.png", "c/logo.png", "logo.png"], prefix_strategy="path"
    )
    assert result == {
        "logo.png": "logo",
        "c/logo.png": "c_logo",
        "a/b/logo.png": "a_b_logo",
    }


def test_path_strategy_reapplies_naming() -> None:
    """Verify that the compound path name goes through the naming strategy."""
    result = identifiers(
        ["my-assets/my-icons/logo.png", "logo.png"],
        naming_strategy="camelCase",
        prefix_strategy="path",
    )
    assert result["my-assets/my-icons/logo.png"] == "myAssetsMyIconsLogo"


def test_hash_strategy_appends_path_token() -> None:
    """Verify that the hash strategy appends a token derived from the path."""
    result = identifiers(["icons/logo.png", "logo.png"], prefix_strategy="hash")
    assert result["logo.png"] == "logo"
    assert result["icons/logo.png"] == f"logo_{path_hash('icons/logo.png')}"
    assert path_hash("icons/logo.png") == "aWNvbnMv"


def test_hash_strategy_truncation_collision_gets_suffix() -> None:
    """Verify that identical truncated hashes are separated by the guard."""
    result = identifiers(
        ["icons/a/logo.png", "icons/b/logo.png"], prefix_strategy="hash"
    )
    assert result == {
        "icons/a/logo.png": "logo_aWNvbnMv",
        "icons/b/logo.png": "logo_aWNvbnMv_1",
    }


def test_same_folder_name_gets_numeric_suffix() -> None:
    """Verify the final guard when two prefixed names coincide."""
    result = identifiers(["x/icons/logo.png", "y/icons/logo.png"])
    assert result == {
        "x/icons/logo.png": "icons_logo",
        "y/icons/logo.png": "icons_logo_1",
    }


def test_unique_name_clashing_with_prefixed_name() -> None:
    """Verify the guard for a unique name equal to an earlier prefixed one."""
    result = identifiers(["logo.png", "icons/logo.png", "z/icons_logo.png"])
    assert result == {
        "logo.png": "logo",
        "icons/logo.png": "icons_logo",
        "z/icons_logo.png": "icons_logo_1",
    }


def test_duplicates_only_in_subdirectories() -> None:
    """Verify that every nested duplicate is prefixed when none is at the root."""
    resolution = resolve_identifiers(
        [make_asset("b/logo.png"), make_asset("a/logo.png")]
    )
    assert resolution.identifiers() == {
        "a/logo.png": "a_logo",
        "b/logo.png": "b_logo",
    }
    assert resolution.duplicates == frozenset({"logo"})


def test_camel_case_with_folder_prefix() -> None:
    """Verify that the folder name is transformed with the naming strategy."""
    result = identifiers(
        ["my-logo.png", "my-icons/my-logo.png"], naming_strategy="camelCase"
    )
    assert result == {
        "my-logo.png": "myLogo",
        "my-icons/my-logo.png": "myIcons_myLogo",
    }


def test_kebab_case_is_coerced_to_identifier() -> None:
    """Verify that kebab-case names end up as valid identifiers."""
    resolution = resolve_identifiers(
        [make_asset("my-logo.png"), make_asset("icons/my-logo.png")],
        naming_strategy="kebab-case",
    )
    assert resolution.identifiers() == {
        "my-logo.png": "my_logo",
        "icons/my-logo.png": "icons_my_logo",
    }
    assert resolution.duplicates == frozenset({"my-logo"})
    assert [e.candidate_base for e in resolution.entries] == ["my-logo", "my-logo"]


def test_reserved_words_are_escaped() -> None:
    """Verify that reserved words never become bare identifiers."""
    result = identifiers(["class.png", "icons/default.svg", "new.png", "_class.png"])
    assert result == {
        "_class.png": "_class",
        "class.png": "_class_1",
        "new.png": "_new",
        "icons/default.svg": "_default",
    }


def test_reserved_bindings_are_not_reused() -> None:
    """Verify that names bound elsewhere in the module get a numbered variant."""
    resolution = resolve_identifiers(
        [make_asset("assetsMap.png"), make_asset("logo.png")],
        reserved=("assetsMap",),
    )
    assert resolution.identifiers() == {
        "assetsMap.png": "assetsMap_1",
        "logo.png": "logo",
    }


def test_collisions_detected_after_naming() -> None:
    """Verify that names colliding only after transformation are duplicates."""
    resolution = resolve_identifiers(
        [make_asset("my-logo.png"), make_asset("icons/my_logo.png")],
        naming_strategy="snake_case",
    )
    assert resolution.duplicates == frozenset({"my_logo"})
    assert resolution.identifiers()["icons/my_logo.png"] == "icons_my_logo"


def test_input_order_does_not_matter() -> None:
    """Verify that resolution is independent of the scan order."""
    paths = ["icons/logo.png", "logo.png", "a/logo.png", "a/b/logo.png", "c.png"]
    forward = resolve_identifiers([make_asset(p) for p in paths])
    backward = resolve_identifiers([make_asset(p) for p in reversed(paths)])
    assert forward == backward


@pytest.mark.parametrize(
    ("naming", "prefix"),
    list(
        itertools.product(
            [None, "camelCase", "snake_case", "kebab-case"], ["folder", "path", "hash"]
        )
    ),
)
def test_identifiers_valid_and_unique(naming: str | None, prefix: str) -> None:
    """Verify identifier validity and uniqueness for every strategy pair."""
    paths = [
        "logo.png",
        "Logo.svg",
        "icons/logo.png",
        "x/icons/logo.png",
        "y/icons/logo.png",
        "icons_logo.png",
        "2x/logo.png",
        "my-icon.png",
        "my_icon.png",
        "deep/er/still/my-icon.png",
        "@@.png",
        "class.png",
        "icons/class.png",
    ]
    resolution = resolve_identifiers(
        [make_asset(p) for p in paths], naming_strategy=naming, prefix_strategy=prefix
    )
    ids = [e.identifier for e in resolution.entries]
    assert len(ids) == len(paths)
    assert len(set(ids)) == len(ids)
    assert all(IDENTIFIER_RE.match(i) for i in ids)
    assert not RESERVED_WORDS.intersection(ids)


def test_unknown_strategies_rejected() -> None:
    """Verify that invalid strategies fail fast."""
    with pytest.raises(InvalidInputError):
        IdentifierResolver(prefix_strategy="random")
    with pytest.raises(InvalidInputError):
        IdentifierResolver(naming_strategy="PascalCase")
