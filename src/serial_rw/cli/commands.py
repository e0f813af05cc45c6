"""
读写命令接口
============

解析串口号、校验参数，并把 read/write 命令分派给核心读写例程。
"""

import sys
from typing import Optional

from ..config.constants import AUTO_PORT, MAX_BAUDRATE, OnTimeout
from ..config.settings import SerialConfig, ReadConfig
from ..core.errors import InvalidArgumentError, PortNotFoundError, SerialToolError
from ..core.port_session import PortSession, list_ports
from ..core.read_loop import ReadLoop
from ..core.write_sequence import WriteSequence
from ..utils.logger import get_logger

logger = get_logger(__name__)

COMMANDS = ("read", "write")


def parse_baudrate(value: str) -> int:
    """
    解析十进制无符号波特率

    Raises:
        InvalidArgumentError: 非数字、超出32位范围或为0
    """
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidArgumentError("Invalid baud rate specified")
    baudrate = int(text)
    if baudrate == 0 or baudrate > MAX_BAUDRATE:
        raise InvalidArgumentError("Invalid baud rate specified")
    return baudrate


def auto_detect() -> str:
    """
    返回系统枚举到的第一个串口，并打印全部枚举结果

    Raises:
        PortNotFoundError: 没有找到任何串口
    """
    ports = list_ports()
    if not ports:
        raise PortNotFoundError("No ports found")

    for port in ports:
        print(port)
    return ports[0]


def resolve_port(port: str) -> str:
    """解析串口号，auto 表示自动选择"""
    return auto_detect() if port == AUTO_PORT else port


def validate_args(port: str, baudrate: int, check_port: bool = False) -> None:
    """
    在访问设备前校验参数

    Args:
        port: 已解析的串口号
        baudrate: 波特率
        check_port: 是否确认串口存在于系统枚举结果中

    Raises:
        InvalidArgumentError: 波特率为0
        PortNotFoundError: 串口不存在
    """
    if baudrate == 0:
        raise InvalidArgumentError("Invalid baud rate specified")
    if check_port and port not in list_ports():
        raise PortNotFoundError(f"Port {port} not found")


class SerialCommandCLI:
    """读写命令行接口"""

    @staticmethod
    def read_data(
        port: str,
        baudrate: int,
        on_timeout: OnTimeout = OnTimeout.CONTINUE_POLLING,
    ) -> None:
        """打开串口并运行读取循环，直到传输错误"""
        config = SerialConfig(port=port, baudrate=baudrate)
        with PortSession(config) as session:
            ReadLoop(session, ReadConfig(on_timeout=on_timeout)).run()

    @staticmethod
    def write_data(port: str, baudrate: int, data: str) -> float:
        """打开串口并发送写入序列，返回耗时(秒)"""
        config = SerialConfig(port=port, baudrate=baudrate)
        with PortSession(config) as session:
            return WriteSequence(session).run(data)

    @staticmethod
    def execute_command(
        command: str,
        port: str,
        baudrate: int,
        data: Optional[str] = None,
        on_timeout: OnTimeout = OnTimeout.CONTINUE_POLLING,
        check_port: bool = False,
    ) -> bool:
        """
        执行 read 或 write 命令

        所有错误在此处统一处理：记录日志，向标准错误输出一行信息。

        Returns:
            成功返回True，失败返回False
        """
        try:
            if command not in COMMANDS:
                raise InvalidArgumentError(
                    f"Invalid command! Available commands: {', '.join(COMMANDS)}"
                )
            if command == "write" and data is None:
                raise InvalidArgumentError(
                    "To write, provide additional argument as data to send"
                )

            port_name = resolve_port(port)
            validate_args(port_name, baudrate, check_port)

            if command == "read":
                SerialCommandCLI.read_data(port_name, baudrate, on_timeout)
            else:
                SerialCommandCLI.write_data(port_name, baudrate, data)
                print("Write successful")
            return True

        except SerialToolError as e:
            logger.error(f"{command} 命令失败: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return False
