"""mdorphan.headings
用途: 从 ATX 标题（行首的 ``#`` 序列后接空格）推导锚点集合，用于校验链接片段。
依赖: 仅使用 Python 标准库。
示例: ``extract_anchors(b"# Getting Started\n") == {"getting-started"}``。
"""
from __future__ import annotations

from typing import Set, Union

Buffer = Union[bytes, bytearray, memoryview]

HASH = 0x23  # #
SPACE = 0x20
LF = 0x0A
CR = 0x0D


def slugify(text: str) -> str:
    """将标题文本转换为锚点：小写，保留字母、数字、``-``、``_``，空格变 ``-``。

    >>> slugify("Hello, World! v2_beta")
    'hello-world-v2_beta'
    """

    out = []
    for ch in text.lower():
        if ch == " ":
            out.append("-")
        elif ch.isalnum() or ch in "-_":
            out.append(ch)
    return "".join(out)


def _strip_closing_sequence(text: str) -> str:
    """去掉 ``## Title ##`` 中可选的结尾 ``#`` 序列；``C#`` 这类紧贴文字的 ``#`` 保留。"""

    stripped = text.rstrip("#")
    if stripped == text:
        return text
    if not stripped or stripped[-1] in " \t":
        return stripped.rstrip()
    return text


def extract_anchors(buf: Buffer) -> Set[str]:
    """扫描原始字节，返回全部标题推导出的锚点集合。"""

    count = len(buf)
    anchors: Set[str] = set()
    line_start = 0
    while line_start < count:
        line_end = line_start
        while line_end < count and buf[line_end] != LF:
            line_end += 1

        j = line_start
        while j < line_end and buf[j] == HASH:
            j += 1
        if j > line_start and j < line_end and buf[j] == SPACE:
            text_end = line_end
            if text_end > j and buf[text_end - 1] == CR:
                text_end -= 1
            text = bytes(buf[j + 1:text_end]).decode("utf-8", errors="replace").rstrip()
            anchors.add(slugify(_strip_closing_sequence(text)))

        line_start = line_end + 1
    return anchors


__all__ = ["extract_anchors", "slugify"]
