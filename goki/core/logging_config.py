"""
集中日志配置模块

提供统一的日志格式和配置，由 CLI 入口在启动时调用一次。
输出到 stderr，stdout 只保留给成功提示信息。
"""

import logging
import logging.config


def setup_logging(level: str = "WARNING") -> None:
    """
    集中配置所有 logger。

    格式: [2026-02-16 15:30:01] [INFO] [goki.services.declaration_merger] message
    输出: stderr

    应在 main() 开始时调用一次，在任何 logger 使用之前。
    """
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "standard",
            },
        },
        "root": {
            "level": level,
            "handlers": ["stderr"],
        },
    }
    logging.config.dictConfig(config)
