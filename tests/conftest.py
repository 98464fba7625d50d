"""
Shared pytest fixtures for goki tests.

Random sources are plain callables `(n) -> bytes`, matching secrets.token_bytes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest


class ScriptedSource:
    """按顺序返回预设字节的随机源，预设用完后循环"""

    def __init__(self, data: Iterable[int]):
        self._data = bytes(data)
        self._pos = 0
        self.requests: List[int] = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        out = bytearray()
        for _ in range(n):
            out.append(self._data[self._pos % len(self._data)])
            self._pos += 1
        return bytes(out)


class FailingSource:
    def __call__(self, n: int) -> bytes:
        raise OSError("entropy source unavailable")


@pytest.fixture
def scripted_source():
    """工厂 fixture: scripted_source([0, 1, 2]) -> ScriptedSource"""
    return ScriptedSource


@pytest.fixture
def failing_source() -> FailingSource:
    return FailingSource()


@pytest.fixture
def keys_path(tmp_path) -> Path:
    """尚不存在的目标文件路径（父目录也不存在）"""
    return tmp_path / "internal" / "keys" / "keys.go"

