"""
goki 错误类型

每个错误携带进程退出码：参数/用法错误为 2，生成或写入失败为 1。
所有错误都直接上抛到 CLI 入口，不做任何重试。
"""


class GokiError(Exception):
    """所有 goki 错误的基类"""
    exit_code = 1


class UsageError(GokiError):
    """参数数量错误或标识符不合法，未产生任何副作用"""
    exit_code = 2


# --- 密钥生成 ---

class GenerationError(GokiError):
    """随机字符串生成失败，发生在写入任何文件之前"""


class InvalidLength(GenerationError):
    def __init__(self, length):
        self.length = length
        super().__init__(f"length must be > 0, got {length!r}")


class RandomSourceError(GenerationError):
    """底层随机源读取失败"""


# --- 声明文件合并 ---

class MergeError(GokiError):
    """写入或追加声明文件失败"""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)


class DirectoryCreateError(MergeError):
    pass


class FileReadError(MergeError):
    pass


class FileWriteError(MergeError):
    pass


class WrongPackageIdentity(MergeError):
    """已存在的文件没有声明预期的包名，文件保持不变"""

    def __init__(self, path: str, expected: str):
        self.expected = expected
        super().__init__(
            f"existing file {path} does not appear to declare `package {expected}`",
            path,
        )


class DuplicateName(MergeError):
    """常量名已存在，文件保持不变"""

    def __init__(self, path: str, name: str):
        self.name = name
        super().__init__(f'key "{name}" already exists in {path}', path)
