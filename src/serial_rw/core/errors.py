"""
异常定义
========

串口读写工具的异常层次。所有异常都在命令层统一处理并输出为文本。
"""


class SerialToolError(Exception):
    """所有工具异常的基类"""


class InvalidArgumentError(SerialToolError, ValueError):
    """无效参数：命令错误、波特率非法或缺少写入数据"""


class PortNotFoundError(SerialToolError):
    """指定的串口不存在于系统枚举结果中"""


class SerialConnectionError(SerialToolError, ConnectionError):
    """串口无法打开（不存在、被占用、无权限或波特率无效）"""


class TransportError(SerialToolError, IOError):
    """连接建立后的读写失败"""


class ReadTimeoutError(TransportError):
    """读取超时且超时策略为致命错误"""
