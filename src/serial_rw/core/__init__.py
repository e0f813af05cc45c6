"""
核心模块
========

包含串口会话、读取循环和写入序列等核心功能。
"""

from .errors import (
    SerialToolError,
    InvalidArgumentError,
    PortNotFoundError,
    SerialConnectionError,
    TransportError,
    ReadTimeoutError,
)
from .port_session import PortSession, list_ports
from .read_loop import ReadLoop, clean_text
from .write_sequence import WriteSequence, build_frames

__all__ = [
    "SerialToolError",
    "InvalidArgumentError",
    "PortNotFoundError",
    "SerialConnectionError",
    "TransportError",
    "ReadTimeoutError",
    "PortSession",
    "list_ports",
    "ReadLoop",
    "clean_text",
    "WriteSequence",
    "build_frames",
]
