"""排除模式匹配：判断相对路径是否被用户提供的模式排除。

支持的模式形式（逐个尝试，任一命中即排除）：

* ``dir/``：以分隔符结尾且不含通配符，按字面目录前缀匹配；
* ``dir/*/``：以分隔符结尾且含通配符，只在对应深度逐段匹配，
  命中目录下的所有内容都被排除，但该层级的文件本身不受影响；
* ``docs/draft-*.md``：含通配符，整条路径逐段匹配，通配符不会跨越 ``/``；
* ``Library``：普通字面量，等于该路径或以 ``Library/`` 开头即命中。

递归通配 ``**`` 与括号不配对的模式属于配置错误，需在遍历前由
:func:`validate_patterns` 拒绝。
"""
from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Iterable, List, Sequence

from .config import ConfigError
from .constants import GLOB_CHARS


class PatternError(ConfigError):
    """排除模式本身不合法。"""


def has_glob(pattern: str) -> bool:
    return any(ch in pattern for ch in GLOB_CHARS)


def _find_bracket_end(pattern: str, start: int) -> int:
    """返回 ``[`` 对应的 ``]`` 下标，未闭合时返回 -1。"""

    j = start + 1
    if j < len(pattern) and pattern[j] == "!":
        j += 1
    if j < len(pattern) and pattern[j] == "]":  # 紧随其后的 ] 是字面量
        j += 1
    return pattern.find("]", j)


def validate_patterns(patterns: Iterable[str]) -> List[str]:
    """校验全部模式并返回列表；发现非法模式立即抛出 PatternError。"""

    checked: List[str] = []
    for pattern in patterns:
        if not pattern:
            raise PatternError("exclude pattern must not be empty")
        if "**" in pattern:
            raise PatternError(f"unsupported recursive wildcard '**' in exclude pattern: {pattern}")
        i = pattern.find("[")
        while i >= 0:
            end = _find_bracket_end(pattern, i)
            if end < 0:
                raise PatternError(f"unbalanced '[' in exclude pattern: {pattern}")
            i = pattern.find("[", end + 1)
        checked.append(pattern)
    return checked


def split_patterns(values: Iterable[str]) -> List[str]:
    """展开逗号分隔的模式值，去掉空白与空项。"""

    result: List[str] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if part:
                result.append(part)
    return result


def _segments_match(pattern_segs: Sequence[str], path_segs: Sequence[str]) -> bool:
    if len(pattern_segs) != len(path_segs):
        return False
    return all(fnmatchcase(seg, pat) for pat, seg in zip(pattern_segs, path_segs))


def _matches(rel_path: str, pattern: str) -> bool:
    if pattern.endswith("/"):
        if not has_glob(pattern):
            return rel_path.startswith(pattern)
        pattern_segs = pattern.rstrip("/").split("/")
        path_segs = rel_path.split("/")
        # 命中目录下至少还要有一层，否则只是同层级的文件
        if len(path_segs) <= len(pattern_segs):
            return False
        return _segments_match(pattern_segs, path_segs[: len(pattern_segs)])
    if has_glob(pattern):
        return _segments_match(pattern.split("/"), rel_path.split("/"))
    return rel_path == pattern or rel_path.startswith(pattern + "/")


def is_excluded(rel_path: str, patterns: Iterable[str]) -> bool:
    """判断相对 root 的路径是否被任一模式排除。"""

    return any(_matches(rel_path, pattern) for pattern in patterns)


__all__ = [
    "PatternError",
    "has_glob",
    "is_excluded",
    "split_patterns",
    "validate_patterns",
]
