"""
串口会话模块
============

提供独占式串口连接的打开、读写和释放。会话对象要么完全打开，要么不存在。
"""

from typing import List, Optional

import serial
from serial.tools import list_ports as serial_list_ports

from ..config.constants import RESPONSE_TIMEOUT
from ..config.settings import SerialConfig
from ..utils.logger import get_logger
from .errors import SerialConnectionError, TransportError

logger = get_logger(__name__)


def list_ports() -> List[str]:
    """
    获取系统枚举到的串口设备名列表

    Returns:
        按系统枚举顺序排列的设备名
    """
    return [port_info.device for port_info in serial_list_ports.comports()]


class PortSession:
    """串口会话"""

    def __init__(self, config: SerialConfig):
        """
        打开串口并创建会话

        Args:
            config: 串口配置对象

        Raises:
            SerialConnectionError: 串口无法打开
        """
        self.config = config
        self._port: Optional[serial.Serial] = None

        try:
            self._port = serial.Serial(**config.to_serial_kwargs())
        except (serial.SerialException, ValueError, OSError) as e:
            logger.error(f"打开串口失败: {e}")
            raise SerialConnectionError(
                f"Cannot open port {config.port}: {e}"
            ) from e

        logger.info(f"成功打开串口 {config.port} @ {config.baudrate}")

    @classmethod
    def open(
        cls, device: str, baud_rate: int, timeout: float = RESPONSE_TIMEOUT
    ) -> "PortSession":
        """按设备名和波特率打开会话"""
        return cls(SerialConfig(port=device, baudrate=baud_rate, timeout=timeout))

    @property
    def device(self) -> str:
        return self.config.port

    @property
    def is_open(self) -> bool:
        """检查串口是否已打开"""
        return self._port is not None and self._port.is_open

    def read(self, buffer: bytearray) -> int:
        """
        读取数据填充缓冲区前缀

        Args:
            buffer: 可复用的读缓冲区

        Returns:
            读取到的字节数，超时未收到数据时为0

        Raises:
            TransportError: 串口未打开或底层读取失败
        """
        if not self.is_open:
            raise TransportError(f"Port {self.device} is not open")

        try:
            count = self._port.readinto(buffer)
        except (serial.SerialException, OSError) as e:
            logger.error(f"读取数据失败: {e}")
            raise TransportError(f"Read failed on {self.device}: {e}") from e

        return count or 0

    def write_all(self, data: bytes) -> None:
        """
        写入全部数据

        Raises:
            TransportError: 写入超时、部分写入或底层写入失败
        """
        if not self.is_open:
            raise TransportError(f"Port {self.device} is not open")

        try:
            written = self._port.write(data)
        except serial.SerialTimeoutException as e:
            logger.error(f"写入超时: {e}")
            raise TransportError(f"Write timed out on {self.device}") from e
        except (serial.SerialException, OSError) as e:
            logger.error(f"写入数据失败: {e}")
            raise TransportError(f"Write failed on {self.device}: {e}") from e

        if written != len(data):
            raise TransportError(
                f"Short write on {self.device}: {written}/{len(data)} bytes"
            )

    def close(self) -> None:
        """关闭串口连接，可重复调用"""
        port, self._port = self._port, None
        if port is None:
            return
        try:
            port.close()
            logger.info(f"已关闭串口 {self.device}")
        except (serial.SerialException, OSError) as e:
            logger.error(f"关闭串口失败: {e}")

    def __enter__(self):
        """支持with语句"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """支持with语句"""
        self.close()

    def __del__(self):
        """析构函数，确保串口被正确关闭"""
        if getattr(self, "_port", None) is not None:
            self.close()
