"""
串口读写工具
============

打开串口连接，轮询读取设备数据，或向设备发送固定格式的多帧消息。

主要功能：
- 串口轮询读取
- 多帧写入与按长度延时
- 串口自动选择
"""

__version__ = "1.0.0"
__description__ = "串口轮询读取与多帧写入工具"

# 导出主要类
from .core.port_session import PortSession, list_ports
from .core.read_loop import ReadLoop
from .core.write_sequence import WriteSequence

__all__ = [
    "PortSession",
    "list_ports",
    "ReadLoop",
    "WriteSequence",
]
