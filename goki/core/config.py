"""
goki 配置管理

使用 pydantic-settings 从环境变量和 .env 文件加载配置。
配置优先级: 环境变量 > .env 文件 > 默认值

只有运行时行为（日志级别）可配置。字母表、密钥长度和包名是固定常量，
不通过配置暴露。
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _package_version() -> str:
    try:
        return version("goki")
    except PackageNotFoundError:
        return "dev"


class Settings(BaseSettings):
    """应用配置模型"""

    PROJECT_NAME: str = "goki"
    VERSION: str = _package_version()

    # 日志配置
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="GOKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证日志级别名称，统一转为大写"""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_debug(self) -> bool:
        return self.LOG_LEVEL == "DEBUG"


# 创建全局配置实例
settings = Settings()
