"""
配置管理
========

提供串口和读取循环相关的配置类。
"""

from dataclasses import dataclass
import serial

from .constants import (
    RESPONSE_TIMEOUT,
    MAX_BAUDRATE,
    READ_BUFFER_SIZE,
    POLL_INTERVAL,
    DEFAULT_ON_TIMEOUT,
    OnTimeout,
)
from ..core.errors import InvalidArgumentError


@dataclass
class SerialConfig:
    """串口配置类"""

    port: str  # 串口号
    baudrate: int  # 波特率
    bytesize: int = serial.EIGHTBITS  # 数据位
    parity: str = serial.PARITY_NONE  # 校验位
    stopbits: float = serial.STOPBITS_ONE  # 停止位
    timeout: float = RESPONSE_TIMEOUT  # 超时时间

    def __post_init__(self):
        """参数验证"""
        if not self.port:
            raise InvalidArgumentError("串口号不能为空")
        if self.baudrate <= 0 or self.baudrate > MAX_BAUDRATE:
            raise InvalidArgumentError("Invalid baud rate specified")
        if self.timeout <= 0:
            raise InvalidArgumentError("timeout必须大于0")

    def to_serial_kwargs(self) -> dict:
        """转换为serial.Serial的参数字典"""
        return {
            "port": self.port,
            "baudrate": self.baudrate,
            "bytesize": self.bytesize,
            "parity": self.parity,
            "stopbits": self.stopbits,
            "timeout": self.timeout,
            "write_timeout": self.timeout,
        }


@dataclass
class ReadConfig:
    """读取循环配置类"""

    buffer_size: int = READ_BUFFER_SIZE  # 读缓冲区大小
    poll_interval: float = POLL_INTERVAL  # 轮询间隔(秒)
    on_timeout: OnTimeout = DEFAULT_ON_TIMEOUT  # 超时处理策略

    def __post_init__(self):
        """参数验证"""
        if self.buffer_size <= 0:
            raise InvalidArgumentError("buffer_size必须大于0")
        if self.poll_interval < 0:
            raise InvalidArgumentError("poll_interval不能为负数")
        if not isinstance(self.on_timeout, OnTimeout):
            self.on_timeout = OnTimeout(self.on_timeout)
