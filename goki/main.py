"""
goki 命令行入口

使用方式:
    goki <KeyName> <./path_to_keys.go>

生成 16 位随机字母数字密钥，写入（或追加到）`package keys` 的 Go 源文件:
    const <KeyName> = "xxxxxxxxxxxxxxxx"

退出码: 0 成功，1 生成或写入失败，2 参数错误
"""

import argparse
import logging
import sys
from typing import List, Optional

from goki.core.config import settings
from goki.core.exceptions import GenerationError, GokiError, UsageError
from goki.core.logging_config import setup_logging
from goki.services.declaration_merger import DeclarationMerger
from goki.services.random_string_service import DEFAULT_LENGTH, RandomStringGenerator
from goki.utils.go_syntax import is_identifier, quote

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goki",
        description=(
            "Generate a random alphanumeric key and write it as a Go constant "
            "into a `package keys` source file, creating or appending to it."
        ),
    )
    parser.add_argument("key_name", metavar="KeyName", help="Go identifier for the new constant")
    parser.add_argument("out_path", metavar="./path_to_keys.go", help="Target Go source file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.VERSION}")
    return parser


def run(
    key_name: str,
    out_path: str,
    generator: Optional[RandomStringGenerator] = None,
    merger: Optional[DeclarationMerger] = None,
) -> None:
    """校验名称、生成密钥并写入文件，失败时抛出 GokiError"""
    if not is_identifier(key_name):
        raise UsageError(f"{quote(key_name)} is not a valid Go identifier")

    generator = generator or RandomStringGenerator()
    merger = merger or DeclarationMerger()

    key = generator.generate(DEFAULT_LENGTH)
    merger.merge(out_path, key_name, key)


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging(settings.LOG_LEVEL)
    args = build_parser().parse_args(argv)

    try:
        run(args.key_name, args.out_path)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except GenerationError as e:
        logger.debug("Key generation failed", exc_info=True)
        print(f"Error generating key: {e}", file=sys.stderr)
        return e.exit_code
    except GokiError as e:
        logger.debug("Writing key failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    print(f"Wrote {args.key_name} to {args.out_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
