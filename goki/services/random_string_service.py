"""
随机字符串生成服务

从 62 个字符的字母表 [a-zA-Z0-9] 中均匀抽样，生成固定长度的密钥。

直接计算 b % 62 会产生取模偏差（256 % 62 == 8，前 8 个字符的概率偏高约 1/31），
因此采用拒绝采样：丢弃所有 >= 248 的字节，剩余字节 0..247 恰好覆盖每个字符 4 次。
"""

import logging
import secrets
from typing import Protocol, runtime_checkable

from goki.core.exceptions import InvalidLength, RandomSourceError

logger = logging.getLogger(__name__)

ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_LENGTH = 16
BATCH_FACTOR = 2
REJECTION_LIMIT = 256 // len(ALPHABET) * len(ALPHABET)  # 248


@runtime_checkable
class RandomSource(Protocol):
    """
    随机字节源接口。

    调用时返回 n 个密码学安全的随机字节，默认实现为 secrets.token_bytes。
    """

    def __call__(self, n: int) -> bytes: ...


class RandomStringGenerator:
    """Bias-free alphanumeric string generator over an injected random source."""

    def __init__(self, random_source: RandomSource = secrets.token_bytes):
        self._random_source = random_source

    def _read(self, n: int) -> bytes:
        try:
            chunk = self._random_source(n)
        except Exception as e:
            raise RandomSourceError(f"random source failed: {e}") from e
        if len(chunk) != n:
            raise RandomSourceError(f"random source returned {len(chunk)} bytes, expected {n}")
        return chunk

    def generate(self, length: int = DEFAULT_LENGTH) -> str:
        """
        生成指定长度的随机字符串

        Args:
            length: 字符数，必须大于 0

        Returns:
            str: 每个字符独立均匀分布于 ALPHABET

        Raises:
            InvalidLength: length <= 0
            RandomSourceError: 随机源读取失败
        """
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise InvalidLength(length)

        out = []
        rejected = 0
        batch_size = length * BATCH_FACTOR

        while len(out) < length:
            for b in self._read(batch_size):
                if b >= REJECTION_LIMIT:
                    rejected += 1
                    continue
                out.append(ALPHABET[b % len(ALPHABET)])
                if len(out) == length:
                    break

        logger.debug(f"Generated {length} chars, rejected {rejected} bytes")
        return "".join(out)


def generate_secret(length: int = DEFAULT_LENGTH) -> str:
    """使用系统随机源生成密钥"""
    return RandomStringGenerator().generate(length)
