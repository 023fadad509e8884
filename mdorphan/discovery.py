"""递归枚举 root 下的全部文档，返回 {文件身份: 相对路径}。"""
from __future__ import annotations

import logging
import os
import stat
from typing import Dict, List, Mapping, Sequence

from .constants import DEFAULT_DOC_EXTENSION
from .exclude import is_excluded
from .types import DiscoveredFile, FileIdentity

logger = logging.getLogger(__name__)


def _dir_excluded(rel_dir: str, exclude: Sequence[str]) -> bool:
    # 目录既按自身路径也按带尾部分隔符的形式检查，以便 ``dir/*/`` 类模式剪枝
    return is_excluded(rel_dir, exclude) or is_excluded(rel_dir + "/", exclude)


def discover_files(root: str, exclude: Sequence[str] = ()) -> Dict[FileIdentity, str]:
    """遍历 ``root``（不跟随目录符号链接），收集未被排除的文档。

    以 ``.`` 开头的目录整体跳过；多个路径指向同一身份时保留遍历顺序中的第一个。
    """

    all_files: Dict[FileIdentity, str] = {}
    prefix_len = len(root.rstrip("/")) + 1

    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        rel_dir = dirpath[prefix_len:] if len(dirpath) >= prefix_len else ""
        kept = []
        for name in sorted(dirnames):
            if name.startswith("."):
                continue
            rel = f"{rel_dir}/{name}" if rel_dir else name
            if exclude and _dir_excluded(rel, exclude):
                logger.debug("skip excluded directory %s", rel)
                continue
            kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            if not name.endswith(DEFAULT_DOC_EXTENSION) or len(name) <= len(DEFAULT_DOC_EXTENSION):
                continue
            rel = f"{rel_dir}/{name}" if rel_dir else name
            if exclude and is_excluded(rel, exclude):
                continue
            try:
                st = os.stat(os.path.join(dirpath, name))
            except OSError as exc:
                logger.debug("cannot stat %s: %s", rel, exc)
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            all_files.setdefault(FileIdentity.from_stat(st), rel)

    return all_files


def iter_discovered(all_files: Mapping[FileIdentity, str]) -> List[DiscoveredFile]:
    """将枚举结果展开为按相对路径排序的 DiscoveredFile 列表。"""

    files = [DiscoveredFile(identity, rel) for identity, rel in all_files.items()]
    return sorted(files, key=lambda item: item.rel_path)


__all__ = ["discover_files", "iter_discovered"]
