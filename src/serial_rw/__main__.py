#!/usr/bin/env python3
"""
串口读写工具 - 模块CLI入口
==========================

支持通过 python -m serial_rw 或 serial-rw 调用
"""

import re
import sys
import argparse
import logging
from typing import List, Optional, Tuple

from . import __version__
from .cli.commands import COMMANDS, SerialCommandCLI, parse_baudrate
from .config.constants import DEFAULT_ON_TIMEOUT, OnTimeout
from .core.errors import InvalidArgumentError
from .utils.logger import get_logger, set_log_level

logger = get_logger(__name__)

PROGRAM_NAME = "serial-rw"

# 带参数值的选项，切分数据参数时跳过其值
VALUE_OPTIONS = ("--on-timeout",)
_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")


def _baudrate_arg(value: str) -> int:
    """argparse 类型转换：波特率"""
    try:
        return parse_baudrate(value)
    except InvalidArgumentError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _is_option(token: str) -> bool:
    return token.startswith("-") and len(token) > 1 and not _NEGATIVE_NUMBER.match(token)


def split_payload(argv: List[str]) -> Tuple[List[str], Optional[str]]:
    """
    取出 write 命令的数据参数

    数据是波特率之后紧跟的那个参数，按原样使用，即使以 "-" 开头，
    不参与选项解析。其余参数交给 argparse。

    Args:
        argv: 命令行参数（不含程序名）

    Returns:
        (交给 argparse 的参数, 数据参数或None)
    """
    positionals = []
    skip_value = False
    for index, token in enumerate(argv):
        if skip_value:
            skip_value = False
            continue
        if token == "--":
            break
        if _is_option(token):
            skip_value = token in VALUE_OPTIONS
            continue

        positionals.append(token)
        if len(positionals) == 3:
            if positionals[0] == "write" and index + 1 < len(argv):
                return argv[: index + 1] + argv[index + 2 :], argv[index + 1]
            break

    return argv, None


def create_parser():
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=f"{PROGRAM_NAME} v{__version__} - serial port read/write utility",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
使用示例：
  # 轮询串口并输出收到的数据
  serial-rw read /dev/ttyUSB0 9600

  # 发送8帧数据 (wHELLO, aHELLO x7)
  serial-rw write COM3 9600 HELLO

  # 数据紧跟在波特率之后，以 - 开头也按原样发送，选项放在其他位置
  serial-rw write COM3 9600 -abc --check-port

  # 使用系统枚举到的第一个串口
  serial-rw read auto 115200
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"{PROGRAM_NAME} v{__version__}"
    )
    parser.add_argument("command", choices=COMMANDS, help="read 或 write")
    parser.add_argument("port", help="串口号（如 COM1, /dev/ttyUSB0），auto 表示自动选择")
    parser.add_argument("baudrate", type=_baudrate_arg, help="波特率（十进制正整数）")
    parser.add_argument("data", nargs="?", help="要发送的数据（write 必需）")
    parser.add_argument(
        "--on-timeout",
        choices=[policy.value for policy in OnTimeout],
        default=DEFAULT_ON_TIMEOUT.value,
        help="读取超时策略：continue 继续轮询，fatal 结束读取（默认 continue）",
    )
    parser.add_argument(
        "--check-port", action="store_true", help="访问设备前确认串口存在于系统枚举结果中"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")

    return parser


def main(argv=None):
    """主函数"""
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]

    argv, payload = split_payload(list(argv))
    args = parser.parse_args(argv)

    if payload is not None:
        if args.data is not None:
            parser.error(f"unrecognized arguments: {args.data}")
        args.data = payload

    if args.command == "write" and args.data is None:
        parser.error("To write, provide additional argument as data to send")

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        success = SerialCommandCLI.execute_command(
            args.command,
            args.port,
            args.baudrate,
            data=args.data,
            on_timeout=OnTimeout(args.on_timeout),
            check_port=args.check_port,
        )
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(1)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
