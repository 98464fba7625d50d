"""
声明文件合并服务

把一条常量声明写入 `package keys` 的 Go 源文件：
- 文件不存在时新建，内容为包声明、空行和声明行；
- 文件已存在时先校验包名和常量名是否重复，再以追加模式写入。

包名和重复检查都是按行的文本扫描，不是 Go 语法解析：
分组的 `const ( ... )` 块、build tag 隔离的声明等不会被识别。

注意：没有任何文件锁。两个进程同时写同一个文件时，可能都通过重复检查后再各自追加，
导致同名常量重复出现。新建文件使用独占模式 ("x")，若检查后被其他进程抢先创建，
会转入追加流程，而不是覆盖对方写入的内容。
"""

import logging
import os
from enum import Enum

from goki.core.exceptions import (
    DirectoryCreateError,
    DuplicateName,
    FileReadError,
    FileWriteError,
    WrongPackageIdentity,
)
from goki.models.declaration import DeclarationEntry

logger = logging.getLogger(__name__)

PACKAGE_NAME = "keys"
PACKAGE_PREFIX = "package "
CONST_PREFIX = "const "


class MergeOutcome(str, Enum):
    """合并结果"""
    CREATED = "created"
    APPENDED = "appended"


def declares_package(source: str, package_name: str = PACKAGE_NAME) -> bool:
    """第一条 `package ` 开头的行是否恰好为 `package <package_name>`"""
    expected = PACKAGE_PREFIX + package_name
    for line in source.split("\n"):
        stripped = line.strip()
        if stripped.startswith(PACKAGE_PREFIX):
            return stripped == expected
    return False


def declares_constant(source: str, name: str) -> bool:
    """是否存在 `const <name> ...` 形式的行（按空白切分后的第二个 token）"""
    for line in source.split("\n"):
        stripped = line.strip()
        if not stripped.startswith(CONST_PREFIX):
            continue
        fields = stripped.split()
        if len(fields) >= 2 and fields[1] == name:
            return True
    return False


class DeclarationMerger:
    def __init__(self, package_name: str = PACKAGE_NAME):
        self.package_name = package_name

    def merge(self, path: str, name: str, value: str) -> MergeOutcome:
        """写入或追加 `const <name> = "<value>"`"""
        return self.merge_entry(path, DeclarationEntry(name=name, value=value))

    def merge_entry(self, path: str, entry: DeclarationEntry) -> MergeOutcome:
        """
        新建或追加声明文件

        Args:
            path: 目标 .go 文件路径
            entry: 待写入的常量声明

        Returns:
            MergeOutcome: CREATED 或 APPENDED

        Raises:
            DirectoryCreateError: 无法创建父目录
            FileReadError: 无法读取已存在的文件
            FileWriteError: 无法写入文件
            WrongPackageIdentity: 已存在文件的包名不符
            DuplicateName: 常量名已存在
        """
        self._ensure_parent_dir(path)
        line = entry.render()

        if not os.path.exists(path):
            try:
                self._create(path, line)
                logger.info(f"Created {path} with {entry.name}")
                return MergeOutcome.CREATED
            except FileExistsError:
                logger.warning(f"{path} appeared after existence check, appending instead")

        self._append(path, entry, line)
        logger.info(f"Appended {entry.name} to {path}")
        return MergeOutcome.APPENDED

    def _ensure_parent_dir(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent in ("", os.curdir):
            return
        try:
            os.makedirs(parent, mode=0o755, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(f"cannot create directory {parent}: {e}", path) from e

    def _create(self, path: str, line: str) -> None:
        content = f"{PACKAGE_PREFIX}{self.package_name}\n\n{line}"
        try:
            with open(path, "x", encoding="utf-8", newline="") as f:
                f.write(content)
        except FileExistsError:
            raise
        except OSError as e:
            raise FileWriteError(f"cannot write {path}: {e}", path) from e

    def _append(self, path: str, entry: DeclarationEntry, line: str) -> None:
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise FileReadError(f"cannot read {path}: {e}", path) from e

        source = raw.decode("utf-8", errors="replace")
        if not declares_package(source, self.package_name):
            raise WrongPackageIdentity(path, self.package_name)
        if declares_constant(source, entry.name):
            raise DuplicateName(path, entry.name)

        chunk = b""
        if raw and not raw.endswith(b"\n"):
            chunk += b"\n"
        if source.strip():
            chunk += b"\n"
        chunk += line.encode("utf-8")

        try:
            with open(path, "ab") as f:
                f.write(chunk)
        except OSError as e:
            raise FileWriteError(f"cannot append to {path}: {e}", path) from e
