"""
配置模块
=======

包含系统常量定义和配置管理功能。
"""

from .constants import *
from .settings import *

__all__ = [
    # 常量
    "OnTimeout",
    "RESPONSE_TIMEOUT",
    "AUTO_PORT",
    "READ_BUFFER_SIZE",
    "POLL_INTERVAL",
    "FRAME_COUNT",
    "FIRST_FRAME_MARKER",
    "NEXT_FRAME_MARKER",
    # 配置
    "SerialConfig",
    "ReadConfig",
]
