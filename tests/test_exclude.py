"""Tests for exclusion patterns."""
from __future__ import annotations

import pytest

from mdorphan.config import ConfigError
from mdorphan.exclude import PatternError, is_excluded, split_patterns, validate_patterns


def test_plain_prefix() -> None:
    assert is_excluded("Library/foo/bar.md", ["Library"])
    assert is_excluded("proj-ios/Pods/Firebase/README.md", ["proj-ios"])
    assert not is_excluded("LibraryExtra/file.md", ["Library"])
    assert not is_excluded("docs/guide.md", ["Library", "proj-ios"])


def test_plain_file() -> None:
    assert is_excluded("CHANGELOG.md", ["CHANGELOG.md"])


def test_glob_is_segment_scoped() -> None:
    assert is_excluded("docs/draft-intro.md", ["docs/draft-*.md"])
    assert not is_excluded("docs/guide.md", ["docs/draft-*.md"])
    assert not is_excluded("docs/sub/draft-intro.md", ["docs/draft-*.md"])
    assert not is_excluded("docs/a/b.md", ["docs/*.md"])


def test_glob_question_mark_and_class() -> None:
    assert is_excluded("docs/v1.md", ["docs/v?.md"])
    assert not is_excluded("docs/v12.md", ["docs/v?.md"])
    assert is_excluded("docs/v3.md", ["docs/v[0-9].md"])
    assert not is_excluded("docs/vx.md", ["docs/v[0-9].md"])


def test_trailing_slash_literal_prefix() -> None:
    assert is_excluded("assets/localizer/cat-profiles/00_Normal.md", ["assets/localizer/"])
    assert not is_excluded("assets/other/file.md", ["assets/localizer/"])


def test_trailing_slash_glob_excludes_below_matching_directory() -> None:
    patterns = ["assets/localizer/*/"]
    assert is_excluded("assets/localizer/cat-profiles/00_Normal.md", patterns)
    assert is_excluded("assets/localizer/prompts/deep/file.md", patterns)
    assert not is_excluded("assets/localizer/top.md", patterns)
    assert not is_excluded("assets/other/prompts/file.md", patterns)


def test_mixed_patterns() -> None:
    patterns = ["Library", "docs/draft-*.md"]
    assert is_excluded("Library/foo.md", patterns)
    assert is_excluded("docs/draft-intro.md", patterns)
    assert not is_excluded("docs/guide.md", patterns)


def test_validate_rejects_globstar() -> None:
    with pytest.raises(PatternError, match=r"\*\*"):
        validate_patterns(["docs/**/draft.md"])


def test_validate_rejects_unbalanced_bracket() -> None:
    with pytest.raises(PatternError, match="unbalanced"):
        validate_patterns(["docs/v[0-9.md"])


def test_validate_accepts_literal_bracket_forms() -> None:
    assert validate_patterns(["docs/[]]x.md", "docs/[!a]*.md", "Library"]) == [
        "docs/[]]x.md",
        "docs/[!a]*.md",
        "Library",
    ]


def test_pattern_error_is_config_error() -> None:
    with pytest.raises(ConfigError):
        validate_patterns([""])


def test_split_patterns() -> None:
    assert split_patterns(["a,b", " c ", ",,"]) == ["a", "b", "c"]
