"""可复用的文件读缓冲区。

一次爬取只持有一个 :class:`ReadBuffer`；每次 :meth:`ReadBuffer.read` 返回的视图
只在下一次读取之前有效。
"""
from __future__ import annotations

import os
from typing import Tuple

from .constants import READ_BUFFER_CAPACITY
from .types import FileIdentity


class ReadBuffer:
    """按需扩容的读缓冲区，避免每个文件重复分配内存。"""

    def __init__(self, capacity: int = READ_BUFFER_CAPACITY) -> None:
        self._buf = bytearray(capacity)

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def read(self, path: str) -> Tuple[FileIdentity, memoryview]:
        """读取整个文件，返回 (文件身份, 内容视图)；读取失败时抛出 OSError。"""

        with open(path, "rb", buffering=0) as fh:
            st = os.fstat(fh.fileno())
            identity = FileIdentity.from_stat(st)
            size = st.st_size
            if size == 0:
                return identity, memoryview(b"")
            if size > len(self._buf):
                self._buf = bytearray(size)

            view = memoryview(self._buf)
            total = 0
            while total < size:
                n = fh.readinto(view[total:size])
                if not n:  # 文件在读取期间被截断
                    break
                total += n
            return identity, view[:total]


__all__ = ["ReadBuffer"]
