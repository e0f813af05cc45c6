"""
读取循环模块
============

以固定间隔轮询串口会话，解码并输出非空数据，直到发生传输错误。
"""

import time
from typing import Optional

from ..config.constants import NO_DATA_MESSAGE, TEXT_ENCODING, OnTimeout
from ..config.settings import ReadConfig
from ..utils.logger import get_logger
from .errors import ReadTimeoutError, TransportError
from .port_session import PortSession

logger = get_logger(__name__)


def clean_text(data: bytes) -> str:
    """
    将读取到的字节解码为可输出文本

    非法字节以替换字符代替，去掉首尾空白以及所有的 CR/LF。
    """
    text = data.decode(TEXT_ENCODING, errors="replace")
    return text.strip().replace("\r", "").replace("\n", "")


class ReadLoop:
    """串口读取循环"""

    def __init__(self, session: PortSession, config: Optional[ReadConfig] = None):
        """
        初始化读取循环

        Args:
            session: 已打开的串口会话
            config: 读取配置，None 表示使用默认值
        """
        self.session = session
        self.config = config or ReadConfig()
        self.buffer = bytearray(self.config.buffer_size)

        # 统计信息
        self.polls = 0
        self.reports = 0

    def poll_once(self) -> Optional[str]:
        """
        执行一次轮询

        Returns:
            输出的文本，本次没有可输出的内容时返回None

        Raises:
            TransportError: 读取失败
            ReadTimeoutError: 没有数据且超时策略为致命错误
        """
        time.sleep(self.config.poll_interval)
        self.polls += 1

        count = self.session.read(self.buffer)
        if count == 0:
            if self.config.on_timeout is OnTimeout.TREAT_AS_FATAL:
                raise ReadTimeoutError(NO_DATA_MESSAGE)
            return None

        cleaned = clean_text(bytes(self.buffer[:count]))
        if not cleaned:
            logger.debug(f"忽略仅含空白的 {count} 字节")
            return None

        line = f"Read {count} bytes: {cleaned}"
        print(line)
        self.reports += 1
        return line

    def run(self) -> None:
        """
        无限轮询，只在传输错误时结束

        Raises:
            TransportError: 读取失败（包括致命超时），循环结束
        """
        logger.info(
            f"开始轮询 {self.session.device}，间隔 {self.config.poll_interval}s，"
            f"超时策略 {self.config.on_timeout.value}"
        )
        try:
            while True:
                self.poll_once()
        except TransportError as e:
            logger.warning(f"读取循环结束: {e} (轮询 {self.polls} 次, 输出 {self.reports} 条)")
            raise
