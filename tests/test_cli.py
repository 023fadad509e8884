"""End-to-end tests for the md-orphan command line."""
from __future__ import annotations

from pathlib import Path

import pytest

from mdorphan.cli import EXIT_OK, EXIT_PROBLEMS, EXIT_USAGE, main


@pytest.fixture
def docs(tmp_path: Path, monkeypatch) -> Path:
    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / "index.md").write_text("# Home\n[guide](guide/intro.md)\n", encoding="utf-8")
    (root / "guide" / "intro.md").write_text("[back](../index.md#home)\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return root


def test_clean_tree_exits_zero(docs: Path, capsys) -> None:
    assert main([str(docs / "index.md")]) == EXIT_OK
    assert capsys.readouterr().out == ""


def test_verbose_prints_success(docs: Path, capsys) -> None:
    assert main([str(docs / "index.md"), "-v"]) == EXIT_OK
    assert "All 2 markdown files are reachable from index.md" in capsys.readouterr().out


def test_orphans_are_listed(docs: Path, capsys) -> None:
    (docs / "guide" / "stale.md").write_text("old", encoding="utf-8")
    assert main([str(docs / "index.md")]) == EXIT_PROBLEMS
    out = capsys.readouterr().out
    assert "1 orphan markdown files (not reachable from index.md)" in out
    assert "guide/stale.md" in out


def test_link_issues_are_grouped(docs: Path, capsys) -> None:
    (docs / "a").mkdir()
    (docs / "b").mkdir()
    (docs / "a" / "dup.md").write_text("", encoding="utf-8")
    (docs / "b" / "dup.md").write_text("", encoding="utf-8")
    (docs / "index.md").write_text(
        "# Home\n[g](guide/intro.md#nowhere) [m](missing.md) [d](dup.md)\n", encoding="utf-8"
    )
    assert main([str(docs / "index.md")]) == EXIT_PROBLEMS
    out = capsys.readouterr().out
    assert "1 broken links" in out
    assert "missing.md (in index.md)" in out
    assert "1 ambiguous links" in out
    assert "dup.md (in index.md, 2 candidates)" in out
    assert "1 broken anchors" in out
    assert "guide/intro.md#nowhere (in index.md)" in out
    assert "index.md#home" not in out
    assert "2 orphan markdown files" in out


def test_exclude_option_removes_orphans(docs: Path) -> None:
    (docs / "drafts").mkdir()
    (docs / "drafts" / "wip.md").write_text("", encoding="utf-8")
    (docs / "draft-notes.md").write_text("", encoding="utf-8")
    assert main([str(docs / "index.md")]) == EXIT_PROBLEMS
    assert main([str(docs / "index.md"), "--exclude", "drafts,draft-*.md"]) == EXIT_OK
    assert main([str(docs / "index.md"), "--exclude", "drafts", "--exclude", "draft-*.md"]) == EXIT_OK


def test_config_file_supplies_exclusions(docs: Path, tmp_path: Path) -> None:
    (docs / "Library").mkdir()
    (docs / "Library" / "vendored.md").write_text("", encoding="utf-8")
    config = tmp_path / "custom.yaml"
    config.write_text("exclude:\n  - Library\n", encoding="utf-8")
    assert main([str(docs / "index.md"), "--config", str(config)]) == EXIT_OK


def test_missing_entry_is_usage_error(docs: Path, capsys) -> None:
    assert main([str(docs / "nope.md")]) == EXIT_USAGE
    assert "no such file" in capsys.readouterr().err


@pytest.mark.parametrize("pattern", ["docs/**/x.md", "v[0-9.md"])
def test_invalid_pattern_is_rejected_before_crawl(docs: Path, capsys, pattern: str) -> None:
    assert main([str(docs / "index.md"), "--exclude", pattern]) == EXIT_USAGE
    assert "exclude pattern" in capsys.readouterr().err


def test_log_file_from_config(docs: Path, tmp_path: Path) -> None:
    config = tmp_path / "cfg.yaml"
    config.write_text("logging:\n  level: info\n  file: out/run.log\n", encoding="utf-8")
    assert main([str(docs / "index.md"), "--config", str(config)]) == EXIT_OK
    assert "crawled 2 of 2 files" in (tmp_path / "out" / "run.log").read_text(encoding="utf-8")
