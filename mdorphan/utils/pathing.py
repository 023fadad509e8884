"""路径规范化、越界检测与链接解析工具函数。

所有路径均以 ``/`` 作为分隔符处理；``root`` 需为已规范化的绝对路径。
"""

from __future__ import annotations  # 未来兼容性

import os  # realpath 依赖操作系统解析符号链接


def real_path(path: str) -> str | None:
    """返回解析符号链接后的绝对路径，路径不存在时返回 None。

    >>> real_path("/definitely/not/here.md") is None
    True
    """

    try:
        return os.path.realpath(path, strict=True)  # strict 模式下路径缺失会抛出 OSError
    except OSError:  # 不存在或无法访问
        return None


def dir_name(path: str) -> str:
    """返回最后一个 ``/`` 之前的部分；没有分隔符时返回 ``.``。

    >>> dir_name("/repo/docs/file.md")
    '/repo/docs'
    >>> dir_name("/file.md")
    ''
    """

    idx = path.rfind("/")  # 查找最后一个分隔符
    if idx < 0:  # 纯文件名
        return "."
    return path[:idx]


def base_name(path: str) -> str:
    """返回路径的最后一段。"""

    return path[path.rfind("/") + 1:]


def normalize_segments(path: str) -> str:
    """折叠 ``.`` 与 ``..`` 段并以 ``/`` 为根重新拼接。

    ``..`` 超出根时直接丢弃，不会留下 ``../`` 片段。

    >>> normalize_segments("/r/docs/./a/../b/c.md")
    '/r/docs/b/c.md'
    """

    segments: list[str] = []
    for seg in path.split("/"):
        if not seg or seg == ".":  # 空段与当前目录段
            continue
        if seg == "..":
            if segments:
                segments.pop()
            continue
        segments.append(seg)
    return "/" + "/".join(segments)


def is_within(root: str, path: str) -> bool:
    """判断 ``path`` 是否等于 ``root`` 或位于其下。"""

    if root == "/":
        return path.startswith("/")
    return path == root or path.startswith(root + "/")


def resolve_link(link: str, source_file: str, root: str) -> str | None:
    """将链接解析为 root 内的绝对路径；越出 root 时返回 None。

    以 ``/`` 开头的链接相对 root 解析，其余相对源文件所在目录解析。
    结果尚未做符号链接解析，调用方需再经 :func:`real_path` 规范化。

    >>> resolve_link("./a/../b/./c.md", "/r/docs/index.md", "/r")
    '/r/docs/b/c.md'
    >>> resolve_link("../../../x.md", "/r/docs/sub/index.md", "/r") is None
    True
    """

    if link.startswith("/"):  # 根相对链接
        combined = root + link
    else:  # 相对源文件目录
        combined = dir_name(source_file) + "/" + link

    resolved = normalize_segments(combined)  # 折叠 . 与 ..
    if not is_within(root, resolved):  # 越界视为无法解析
        return None
    return resolved


__all__ = [  # 导出函数列表供其他模块引用
    "base_name",
    "dir_name",
    "is_within",
    "normalize_segments",
    "real_path",
    "resolve_link",
]
