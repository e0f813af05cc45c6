"""
命令行接口模块
==============

提供串口读写命令的参数校验与分派。
"""

from .commands import SerialCommandCLI, parse_baudrate, resolve_port, validate_args

__all__ = [
    "SerialCommandCLI",
    "parse_baudrate",
    "resolve_port",
    "validate_args",
]
