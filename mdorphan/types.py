"""mdorphan.types
用途: 定义爬取过程使用的数据类型，包括文件身份、原始链接与链接问题。
依赖: Python 标准库 dataclasses、enum。
示例: ``from mdorphan.types import FileIdentity, LinkIssue``。
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from .constants import DEFAULT_DOC_EXTENSION


@dataclass(frozen=True, slots=True)
class FileIdentity:
    """文件内容的唯一身份（设备号 + inode），硬链接共享同一身份。"""

    device: int
    inode: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "FileIdentity":
        return cls(device=st.st_dev, inode=st.st_ino)


@dataclass(frozen=True, slots=True)
class DiscoveredFile:
    """目录枚举得到的单个文档。"""

    identity: FileIdentity
    rel_path: str


@dataclass(frozen=True, slots=True)
class RawLink:
    """源文本中写出的链接，``path`` 不含片段。"""

    path: str
    fragment: str | None = None

    @property
    def is_document(self) -> bool:
        return self.path.endswith(DEFAULT_DOC_EXTENSION)


class IssueTag(str, Enum):
    """链接问题的种类标签。"""

    BROKEN = "broken"
    AMBIGUOUS = "ambiguous"
    BROKEN_ANCHOR = "broken_anchor"


@dataclass(frozen=True, slots=True)
class IssueKind:
    """链接问题种类的标签联合。

    只应通过 ``broken()``、``ambiguous(n)``、``broken_anchor(fragment)`` 构造：
    ``count`` 仅在 AMBIGUOUS 时有值，``fragment`` 仅在 BROKEN_ANCHOR 时有值。
    """

    tag: IssueTag
    count: int | None = None
    fragment: str | None = None

    @classmethod
    def broken(cls) -> "IssueKind":
        return cls(IssueTag.BROKEN)

    @classmethod
    def ambiguous(cls, count: int) -> "IssueKind":
        return cls(IssueTag.AMBIGUOUS, count=count)

    @classmethod
    def broken_anchor(cls, fragment: str) -> "IssueKind":
        return cls(IssueTag.BROKEN_ANCHOR, fragment=fragment)


@dataclass(frozen=True, slots=True)
class LinkIssue:
    """爬取时发现的单个链接问题。"""

    link: str
    source: str
    kind: IssueKind


@dataclass(slots=True)
class CrawlResult:
    """一次爬取的输出：可达身份集合与按发现顺序排列的问题列表。"""

    reachable: set[FileIdentity] = field(default_factory=set)
    issues: list[LinkIssue] = field(default_factory=list)

    def _by_tag(self, tag: IssueTag) -> list[LinkIssue]:
        return [issue for issue in self.issues if issue.kind.tag is tag]

    @property
    def broken(self) -> list[LinkIssue]:
        return self._by_tag(IssueTag.BROKEN)

    @property
    def ambiguous(self) -> list[LinkIssue]:
        return self._by_tag(IssueTag.AMBIGUOUS)

    @property
    def broken_anchors(self) -> list[LinkIssue]:
        return self._by_tag(IssueTag.BROKEN_ANCHOR)
