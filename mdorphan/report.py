"""使用 rich 输出爬取结果：断链、歧义链接、失效锚点与孤立文档。"""
from __future__ import annotations

from typing import List, Sequence

from rich.console import Console
from rich.markup import escape

from .types import CrawlResult, LinkIssue


def _display_path(path: str, root: str) -> str:
    prefix = root.rstrip("/") + "/"
    return path[len(prefix):] if path.startswith(prefix) else path


def _print_group(console: Console, header: str, lines: Sequence[str]) -> None:
    console.print(header, soft_wrap=True)
    for line in lines:
        console.print(f"  {escape(line)}", highlight=False, soft_wrap=True)


def _issue_lines(issues: Sequence[LinkIssue], root: str, detail: str = "") -> List[str]:
    lines = []
    for issue in issues:
        source = _display_path(issue.source, root)
        if detail == "count":
            lines.append(f"{issue.link} (in {source}, {issue.kind.count} candidates)")
        elif detail == "fragment":
            lines.append(f"{issue.link}#{issue.kind.fragment} (in {source})")
        else:
            lines.append(f"{issue.link} (in {source})")
    return lines


def print_report(
    console: Console,
    result: CrawlResult,
    orphans: Sequence[str],
    total_files: int,
    root: str,
    entry_names: str,
    verbose: bool = False,
) -> bool:
    """输出结果；存在任何问题或孤立文档时返回 True。"""

    broken = result.broken
    ambiguous = result.ambiguous
    anchors = result.broken_anchors

    if broken:
        _print_group(console, f"[red]❌ {len(broken)} broken links:[/red]", _issue_lines(broken, root))
    if ambiguous:
        _print_group(
            console,
            f"[yellow]⚠️  {len(ambiguous)} ambiguous links:[/yellow]",
            _issue_lines(ambiguous, root, "count"),
        )
    if anchors:
        _print_group(
            console,
            f"[red]❌ {len(anchors)} broken anchors:[/red]",
            _issue_lines(anchors, root, "fragment"),
        )
    if orphans:
        _print_group(
            console,
            f"[red]❌ {len(orphans)} orphan markdown files "
            f"(not reachable from {escape(entry_names)}):[/red]",
            orphans,
        )

    has_problems = bool(result.issues or orphans)
    if not has_problems and verbose:
        console.print(
            f"[green]✅ All {total_files} markdown files are reachable from {escape(entry_names)}[/green]",
            soft_wrap=True,
        )
    return has_problems


__all__ = ["print_report"]
