"""mdorphan.links
用途: 逐字节扫描文档内容，按出现顺序提取本地文档链接。
支持两种语法:
    * 标准链接 ``[text](path.md#fragment)``，由 ``](`` 触发；
    * wiki 链接 ``[[name]]``、``[[name|alias]]``、``[[name#fragment|alias]]``，由 ``[[`` 触发。
链接不能跨行；未闭合的链接不产生结果，扫描从失败位置之后继续。
示例: ``extract_links_from_text("[a](a.md)[b](b.md)")``。
"""
from __future__ import annotations

import re
from typing import List, Union

from .constants import DEFAULT_DOC_EXTENSION, MIN_LOCAL_PATH_LEN, REMOTE_PREFIXES
from .types import RawLink

Buffer = Union[bytes, bytearray, memoryview]

LBRACKET = 0x5B  # [
RBRACKET = 0x5D  # ]
LPAREN = 0x28  # (
RPAREN = 0x29  # )
HASH = 0x23  # #
PIPE = 0x7C  # |
BACKSLASH = 0x5C  # \
SPACE = 0x20
LF = 0x0A
CR = 0x0D
TITLE_OPENERS = (0x22, 0x27, LPAREN)  # " ' (

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
_ESCAPE_RE = re.compile(r"\\(.)")


def _decode(buf: Buffer, start: int, end: int) -> str:
    return bytes(buf[start:end]).decode("utf-8", errors="replace")


def has_extension(path: str) -> bool:
    """最后一段中存在不在段首、也不在段尾的 ``.``。

    >>> has_extension("docs/guide.md"), has_extension("docs.d/guide"), has_extension(".md")
    (True, False, False)
    """

    segment = path[path.rfind("/") + 1:]
    dot = segment.rfind(".")
    return 0 < dot < len(segment) - 1


def _is_remote(path: str) -> bool:
    return path.startswith(REMOTE_PREFIXES) or bool(_SCHEME_RE.match(path))


def _scan_wiki_link(buf: Buffer, count: int, i: int, links: List[RawLink]) -> int:
    """解析 ``[[...]]``，返回继续扫描的位置。"""

    start = i + 2
    end = start
    while end < count - 1:
        b = buf[end]
        if b == LF or b == CR:
            break
        if b == RBRACKET and buf[end + 1] == RBRACKET:
            break
        end += 1
    if end >= count - 1 or buf[end] != RBRACKET or buf[end + 1] != RBRACKET:
        return end + 1
    if end == start:  # [[]]
        return end + 2

    hash_pos = -1
    pipe_pos = -1
    for j in range(start, end):
        b = buf[j]
        if b == PIPE:
            pipe_pos = j
            break
        if b == HASH and hash_pos < 0:
            hash_pos = j

    body_end = end
    if pipe_pos >= 0:
        # 表格中写作 ``[[name\|alias]]``，反斜杠属于别名分隔符
        body_end = pipe_pos - 1 if buf[pipe_pos - 1] == BACKSLASH else pipe_pos
    name_end = hash_pos if hash_pos >= 0 and hash_pos < body_end else body_end

    name = _decode(buf, start, name_end).strip()
    if not name:  # [[#section]] 或 [[|alias]]
        return end + 2
    if not has_extension(name):
        name += DEFAULT_DOC_EXTENSION
    fragment = None
    if hash_pos >= 0 and hash_pos + 1 < body_end:
        fragment = _decode(buf, hash_pos + 1, body_end).strip() or None
    links.append(RawLink(name, fragment))
    return end + 2


def _title_follows(buf: Buffer, pos: int, end: int) -> bool:
    """``pos`` 处的空白之后是否紧跟链接标题（``"``、``'`` 或 ``(``）。"""

    while pos < end and buf[pos] == SPACE:
        pos += 1
    return pos < end and buf[pos] in TITLE_OPENERS


def _scan_standard_link(buf: Buffer, count: int, i: int, links: List[RawLink]) -> int:
    """解析 ``](target "title")``，返回继续扫描的位置。"""

    start = i + 2
    end = start
    frag_pos = -1
    title_pos = -1
    escaped = False
    while end < count:
        b = buf[end]
        if b == LF or b == CR:
            break
        if b == BACKSLASH and end + 1 < count and buf[end + 1] not in (LF, CR):
            escaped = True
            end += 2
            continue
        if b == RPAREN:
            break
        if title_pos < 0:
            if b == SPACE and _title_follows(buf, end, count):
                title_pos = end
            elif b == HASH and frag_pos < 0:
                frag_pos = end
        end += 1
    if end >= count or buf[end] != RPAREN:
        return end + 1

    target_end = title_pos if title_pos >= 0 else end
    path_end = frag_pos if frag_pos >= 0 else target_end
    if path_end - start < MIN_LOCAL_PATH_LEN:
        return end + 1

    path = _decode(buf, start, path_end)
    if escaped:
        path = _ESCAPE_RE.sub(r"\1", path)
    if _is_remote(path) or not has_extension(path):
        return end + 1

    fragment = None
    if frag_pos >= 0 and frag_pos + 1 < target_end:
        fragment = _decode(buf, frag_pos + 1, target_end)
        if escaped:
            fragment = _ESCAPE_RE.sub(r"\1", fragment)
    links.append(RawLink(path, fragment))
    return end + 1


def extract_links(buf: Buffer) -> List[RawLink]:
    """扫描原始字节并按从左到右的顺序返回本地链接。"""

    count = len(buf)
    links: List[RawLink] = []
    i = 0
    while i < count - 1:
        b = buf[i]
        if b == LBRACKET and buf[i + 1] == LBRACKET:
            i = _scan_wiki_link(buf, count, i, links)
            continue
        if b == RBRACKET and buf[i + 1] == LPAREN:
            i = _scan_standard_link(buf, count, i, links)
            continue
        i += 1
    return links


def extract_links_from_text(text: str) -> List[RawLink]:
    """对字符串调用 :func:`extract_links` 的便捷入口。"""

    return extract_links(text.encode("utf-8"))


__all__ = ["extract_links", "extract_links_from_text", "has_extension"]
