"""mdorphan.crawler
用途: 从入口文档出发做广度优先遍历，计算可达文档集合并分类记录链接问题。
流程:
    1. 读取出队文件；读取失败仅记录警告并跳过；
    2. 以文件身份去重，同一身份只展开一次；
    3. 对每条链接依次做解析、规范化、basename 回退与锚点校验；
    4. 新发现的文档入队，直到队列耗尽。
示例: ``bfs_crawl(["/repo/README.md"], "/repo", discover_files("/repo"))``。
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, Iterable, List, Mapping, Optional, Set

from .discovery import iter_discovered
from .headings import extract_anchors
from .links import extract_links
from .reader import ReadBuffer
from .types import CrawlResult, FileIdentity, IssueKind, LinkIssue, RawLink
from .utils.pathing import base_name, real_path, resolve_link

logger = logging.getLogger(__name__)


def _join_root(root: str, rel_path: str) -> str:
    return "/" + rel_path if root == "/" else f"{root}/{rel_path}"


def build_basename_index(root: str, all_files: Mapping[FileIdentity, str]) -> Dict[str, List[str]]:
    """建立 文件名 -> 绝对路径列表 的索引，只包含排除过滤之后的文档。"""

    index: Dict[str, List[str]] = {}
    for item in iter_discovered(all_files):
        index.setdefault(base_name(item.rel_path), []).append(_join_root(root, item.rel_path))
    return index


class CrawlContext:
    """单次爬取独占的可变状态。"""

    def __init__(
        self,
        root: str,
        all_files: Mapping[FileIdentity, str],
        buffer: Optional[ReadBuffer] = None,
    ) -> None:
        self.root = root
        self.buffer = buffer if buffer is not None else ReadBuffer()
        self.basename_index = build_basename_index(root, all_files)
        self.queue: Deque[str] = deque()
        self.queued: Set[str] = set()
        self.result = CrawlResult()
        self.heading_cache: Dict[str, Set[str]] = {}

    def enqueue(self, path: str) -> None:
        if path in self.queued:
            return
        self.queued.add(path)
        self.queue.append(path)
        logger.debug("queued %s", path)

    def record(self, link: RawLink, source: str, kind: IssueKind) -> None:
        self.result.issues.append(LinkIssue(link=link.path, source=source, kind=kind))

    def anchors_for(self, target: str) -> Set[str]:
        """按需读取目标文档的锚点，每个路径在一次爬取中最多读取一次。"""

        cached = self.heading_cache.get(target)
        if cached is not None:
            return cached
        try:
            _, content = self.buffer.read(target)
            anchors = extract_anchors(content)
        except OSError as exc:
            logger.warning("cannot read %s: %s", target, exc)
            anchors = set()
        self.heading_cache[target] = anchors
        return anchors

    def _fallback(self, link: RawLink, source: str) -> Optional[str]:
        candidates = self.basename_index.get(base_name(link.path), [])
        if len(candidates) > 1:
            self.record(link, source, IssueKind.ambiguous(len(candidates)))
            return None
        canonical = real_path(candidates[0]) if candidates else None
        if canonical is None:
            self.record(link, source, IssueKind.broken())
            return None
        logger.debug("resolved %s in %s by file name -> %s", link.path, source, canonical)
        return canonical

    def process_link(self, link: RawLink, source: str) -> None:
        resolved = resolve_link(link.path, source, self.root)
        if resolved is None:
            logger.debug("ignore %s in %s: outside %s", link.path, source, self.root)
            return

        canonical = real_path(resolved)
        if canonical is None:
            if not link.is_document:
                self.record(link, source, IssueKind.broken())
                return
            canonical = self._fallback(link, source)
            if canonical is None:
                return

        if not link.is_document:
            return
        if link.fragment is not None and link.fragment not in self.anchors_for(canonical):
            self.record(link, source, IssueKind.broken_anchor(link.fragment))
        self.enqueue(canonical)

    def run(self, entry_paths: Iterable[str]) -> CrawlResult:
        for path in entry_paths:
            self.enqueue(path)

        reachable = self.result.reachable
        while self.queue:
            file_path = self.queue.popleft()
            try:
                identity, content = self.buffer.read(file_path)
            except OSError as exc:
                logger.warning("cannot read %s: %s", file_path, exc)
                continue

            if identity in reachable:  # 同一内容经别的路径已展开过
                continue
            reachable.add(identity)

            # 先完整提取链接，锚点读取会复用同一缓冲区
            links = extract_links(content)
            for link in links:
                self.process_link(link, file_path)

        return self.result


def bfs_crawl(
    entry_paths: Iterable[str],
    root: str,
    all_files: Mapping[FileIdentity, str],
    buffer: Optional[ReadBuffer] = None,
) -> CrawlResult:
    """从入口（已规范化的绝对路径）开始遍历，返回可达身份与链接问题。"""

    return CrawlContext(root, all_files, buffer).run(entry_paths)


def find_orphans(all_files: Mapping[FileIdentity, str], reachable: Set[FileIdentity]) -> List[str]:
    """返回未被任何入口触达的文档相对路径（已排序）。"""

    return [item.rel_path for item in iter_discovered(all_files) if item.identity not in reachable]


__all__ = ["CrawlContext", "bfs_crawl", "build_basename_index", "find_orphans"]
