"""
写入序列模块
============

将同一份数据封装为固定数量的帧依次发送，每帧发送后按帧长度延时。
"""

import time
from typing import List

from ..config.constants import (
    FRAME_COUNT,
    FIRST_FRAME_MARKER,
    NEXT_FRAME_MARKER,
    TEXT_ENCODING,
)
from ..utils.logger import get_logger
from .port_session import PortSession

logger = get_logger(__name__)


def build_frame(index: int, payload: str) -> str:
    """
    构建单个帧：标记 + 完整数据

    Args:
        index: 帧序号，0 为第一帧
        payload: 用户数据
    """
    marker = FIRST_FRAME_MARKER if index == 0 else NEXT_FRAME_MARKER
    return f"{marker}{payload}"


def build_frames(payload: str) -> List[str]:
    """构建一次写入命令的全部帧"""
    return [build_frame(index, payload) for index in range(FRAME_COUNT)]


def frame_delay(frame: str) -> float:
    """
    帧发送后的延时(秒)，毫秒数等于帧的字符长度

    按字符数而不是 UTF-8 字节数计算：最初的设备工具用的是字节长度，
    对非 ASCII 数据两者不同（"wé" 这里是 2ms，按字节是 3ms）。
    """
    return len(frame) / 1000


class WriteSequence:
    """写入序列"""

    def __init__(self, session: PortSession):
        self.session = session
        self.frames_sent = 0

    def run(self, payload: str) -> float:
        """
        发送全部帧

        任意一帧写入失败立即中止，不重试、不重发已发送的帧。

        Args:
            payload: 用户数据

        Returns:
            总耗时(秒)

        Raises:
            TransportError: 写入失败
        """
        start = time.perf_counter()

        for frame in build_frames(payload):
            self.session.write_all(frame.encode(TEXT_ENCODING))
            self.frames_sent += 1
            print(f"Message '{frame}' written to serial port")
            time.sleep(frame_delay(frame))

        elapsed = time.perf_counter() - start
        print(f"Elapsed time: {elapsed * 1000:.3f}ms")
        logger.info(f"已发送 {self.frames_sent} 帧到 {self.session.device}")
        return elapsed
