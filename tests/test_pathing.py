"""Tests for path utilities and link resolution."""
from __future__ import annotations

import os
from pathlib import Path

from mdorphan.utils.pathing import base_name, dir_name, is_within, real_path, resolve_link


def test_resolves_simple_link() -> None:
    assert resolve_link("guide.md", "/repo/docs/index.md", "/repo") == "/repo/docs/guide.md"


def test_resolves_parent_traversal() -> None:
    assert resolve_link("../dev/guide.md", "/repo/docs/system/langpack.md", "/repo") == "/repo/docs/dev/guide.md"


def test_resolves_dot_segments() -> None:
    assert resolve_link("./local.md", "/repo/docs/index.md", "/repo") == "/repo/docs/local.md"
    assert resolve_link("./a/../b/./c.md", "/r/docs/index.md", "/r") == "/r/docs/b/c.md"


def test_resolves_root_relative_link() -> None:
    assert resolve_link("/docs/file.md", "/repo/other/index.md", "/repo") == "/repo/docs/file.md"


def test_rejects_root_escape() -> None:
    assert resolve_link("../../../x.md", "/r/a/b/index.md", "/r") is None
    assert resolve_link("../../../etc/passwd.md", "/repo/docs/index.md", "/repo") is None
    assert resolve_link("/../outside.md", "/repo/index.md", "/repo") is None


def test_rejects_sibling_with_common_prefix() -> None:
    assert resolve_link("../repo-other/x.md", "/repo/index.md", "/repo") is None


def test_excess_parent_segments_never_leave_artifacts() -> None:
    assert resolve_link("../../../../r/x.md", "/r/docs/index.md", "/r") == "/r/x.md"


def test_dir_name_and_base_name() -> None:
    assert dir_name("/repo/docs/file.md") == "/repo/docs"
    assert dir_name("/file.md") == ""
    assert dir_name("file.md") == "."
    assert base_name("/repo/docs/file.md") == "file.md"
    assert base_name("file.md") == "file.md"


def test_is_within() -> None:
    assert is_within("/r", "/r")
    assert is_within("/r", "/r/x.md")
    assert not is_within("/r", "/rx/x.md")
    assert is_within("/", "/anything.md")


def test_real_path_follows_symlinks(tmp_path: Path) -> None:
    target = tmp_path / "target.md"
    target.write_text("x", encoding="utf-8")
    link = tmp_path / "link.md"
    os.symlink(target, link)
    assert real_path(str(link)) == os.path.realpath(target)
    assert real_path(str(tmp_path / "missing.md")) is None
