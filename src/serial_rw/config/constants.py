"""
系统常量定义
============

定义串口读写工具使用的各种常量。
"""

from enum import Enum
from typing import Final


class OnTimeout(Enum):
    """读取超时（未收到任何数据）时的处理策略"""

    CONTINUE_POLLING = "continue"  # 静默继续轮询
    TREAT_AS_FATAL = "fatal"  # 视为致命错误，结束读取


# 串口配置默认值
RESPONSE_TIMEOUT: Final[float] = 0.1  # 读写超时时间(秒)
MAX_BAUDRATE: Final[int] = 0xFFFFFFFF  # 波特率上限(32位无符号)
AUTO_PORT: Final[str] = "auto"  # 自动选择第一个枚举到的串口

# 读取循环配置
READ_BUFFER_SIZE: Final[int] = 15  # 读缓冲区大小(字节)
POLL_INTERVAL: Final[float] = 0.1  # 轮询间隔(秒)
DEFAULT_ON_TIMEOUT: Final[OnTimeout] = OnTimeout.CONTINUE_POLLING
NO_DATA_MESSAGE: Final[str] = "No data found!"

# 写入序列配置（与接收设备约定的协议常量，不可修改）
FRAME_COUNT: Final[int] = 8  # 每次写入命令发送的帧数
FIRST_FRAME_MARKER: Final[str] = "w"  # 第一帧标记
NEXT_FRAME_MARKER: Final[str] = "a"  # 后续帧标记
TEXT_ENCODING: Final[str] = "utf-8"
