"""
项目: md-orphan
用途: 找出从入口文档无法通过本地链接到达的 Markdown 文档，并报告断链、歧义链接与失效锚点。
依赖: rich（控制台输出与日志）、PyYAML（配置文件）。
示例用法:
    from mdorphan import bfs_crawl, discover_files, find_orphans
    files = discover_files("/repo")
    result = bfs_crawl(["/repo/README.md"], "/repo", files)
    print(find_orphans(files, result.reachable))
"""

from __future__ import annotations

__version__: str = "0.3.0"
"""当前版本号。"""

from .crawler import bfs_crawl, find_orphans  # noqa: E402
from .discovery import discover_files  # noqa: E402
from .exclude import is_excluded  # noqa: E402
from .headings import extract_anchors  # noqa: E402
from .links import extract_links, extract_links_from_text  # noqa: E402
from .utils.pathing import resolve_link  # noqa: E402

__all__ = [
    "__version__",
    "bfs_crawl",
    "discover_files",
    "extract_anchors",
    "extract_links",
    "extract_links_from_text",
    "find_orphans",
    "is_excluded",
    "resolve_link",
]
