#!/usr/bin/env python3
"""
读写命令测试
============

测试 serial_rw.cli.commands 模块：波特率解析、auto 串口、参数校验和命令分派。
串口会话全部用mock替代，同时验证出错时不会访问设备。
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

# 添加项目根目录到Python路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from serial_rw.cli.commands import (
    SerialCommandCLI,
    auto_detect,
    parse_baudrate,
    resolve_port,
    validate_args,
)
from serial_rw.config.constants import OnTimeout
from serial_rw.core.errors import (
    InvalidArgumentError,
    PortNotFoundError,
    SerialConnectionError,
    TransportError,
)


@pytest.fixture
def mock_session_class():
    """替换命令层使用的 PortSession，返回 (类mock, 会话mock)"""
    with patch("serial_rw.cli.commands.PortSession") as mock_class:
        session = MagicMock()
        session.device = "COM1"
        mock_class.return_value.__enter__.return_value = session
        yield mock_class, session


class TestParseBaudrate:
    """测试波特率解析"""

    @pytest.mark.parametrize("value,expected", [("9600", 9600), ("115200", 115200), (" 300 ", 300)])
    def test_valid(self, value, expected):
        assert parse_baudrate(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "-9600", "96.00", "0x2580", "0", "4294967296"])
    def test_invalid(self, value):
        with pytest.raises(InvalidArgumentError, match="Invalid baud rate specified"):
            parse_baudrate(value)


class TestResolvePort:
    """测试串口解析"""

    def test_explicit_port(self):
        with patch("serial_rw.cli.commands.list_ports") as mock_list:
            assert resolve_port("/dev/ttyUSB0") == "/dev/ttyUSB0"
            mock_list.assert_not_called()

    @patch("serial_rw.cli.commands.list_ports")
    def test_auto_uses_first_port(self, mock_list, capsys):
        mock_list.return_value = ["COM3", "COM4"]

        assert resolve_port("auto") == "COM3"
        assert capsys.readouterr().out == "COM3\nCOM4\n"

    @patch("serial_rw.cli.commands.list_ports")
    def test_auto_without_ports(self, mock_list):
        mock_list.return_value = []

        with pytest.raises(PortNotFoundError, match="No ports found"):
            auto_detect()


class TestValidateArgs:
    """测试访问设备前的参数校验"""

    def test_zero_baudrate(self):
        with pytest.raises(InvalidArgumentError):
            validate_args("COM1", 0)

    @patch("serial_rw.cli.commands.list_ports")
    def test_port_not_checked_by_default(self, mock_list):
        validate_args("COM1", 9600)
        mock_list.assert_not_called()

    @patch("serial_rw.cli.commands.list_ports")
    def test_check_port_missing(self, mock_list):
        mock_list.return_value = ["COM3"]

        with pytest.raises(PortNotFoundError, match="Port COM1 not found"):
            validate_args("COM1", 9600, check_port=True)

    @patch("serial_rw.cli.commands.list_ports")
    def test_check_port_present(self, mock_list):
        mock_list.return_value = ["COM3", "COM1"]

        validate_args("COM1", 9600, check_port=True)


@patch("time.sleep")
class TestExecuteCommand:
    """测试命令分派"""

    def test_invalid_command(self, mock_sleep, mock_session_class, capsys):
        """无效命令不会访问设备"""
        mock_class, _ = mock_session_class

        result = SerialCommandCLI.execute_command("foo", "COM1", 9600)

        assert result is False
        mock_class.assert_not_called()
        assert "Invalid command! Available commands: read, write" in capsys.readouterr().err

    def test_write_without_data(self, mock_sleep, mock_session_class, capsys):
        mock_class, _ = mock_session_class

        result = SerialCommandCLI.execute_command("write", "COM1", 9600)

        assert result is False
        mock_class.assert_not_called()
        assert "provide additional argument as data" in capsys.readouterr().err

    def test_zero_baudrate_no_device_access(self, mock_sleep, mock_session_class):
        mock_class, _ = mock_session_class

        assert SerialCommandCLI.execute_command("read", "COM1", 0) is False
        mock_class.assert_not_called()

    def test_write_success(self, mock_sleep, mock_session_class, capsys):
        mock_class, session = mock_session_class

        result = SerialCommandCLI.execute_command("write", "COM1", 9600, data="HELLO")

        assert result is True
        config = mock_class.call_args.args[0]
        assert config.port == "COM1"
        assert config.baudrate == 9600
        assert config.timeout == 0.1
        assert session.write_all.call_count == 8
        out = capsys.readouterr().out
        assert "Message 'wHELLO' written to serial port" in out
        assert out.endswith("Write successful\n")

    def test_write_failure(self, mock_sleep, mock_session_class, capsys):
        mock_class, session = mock_session_class
        session.write_all.side_effect = TransportError("Write timed out on COM1")

        result = SerialCommandCLI.execute_command("write", "COM1", 9600, data="HELLO")

        assert result is False
        captured = capsys.readouterr()
        assert "Write successful" not in captured.out
        assert captured.err == "Error: Write timed out on COM1\n"
        mock_class.return_value.__exit__.assert_called_once()

    def test_read_transport_error_reports_once(self, mock_sleep, mock_session_class, capsys):
        """读取立即出错时只输出一条失败信息"""
        _, session = mock_session_class
        session.read.side_effect = TransportError("Read failed on COM1")

        result = SerialCommandCLI.execute_command("read", "COM1", 9600)

        assert result is False
        assert session.read.call_count == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.count("Error:") == 1

    def test_read_fatal_timeout(self, mock_sleep, mock_session_class, capsys):
        _, session = mock_session_class
        session.read.return_value = 0

        result = SerialCommandCLI.execute_command(
            "read", "COM1", 9600, on_timeout=OnTimeout.TREAT_AS_FATAL
        )

        assert result is False
        assert capsys.readouterr().err == "Error: No data found!\n"

    def test_open_failure(self, mock_sleep, mock_session_class, capsys):
        mock_class, _ = mock_session_class
        mock_class.side_effect = SerialConnectionError("Cannot open port COM1: busy")

        result = SerialCommandCLI.execute_command("read", "COM1", 9600)

        assert result is False
        assert capsys.readouterr().err == "Error: Cannot open port COM1: busy\n"

    @patch("serial_rw.cli.commands.list_ports")
    def test_auto_port(self, mock_list, mock_sleep, mock_session_class):
        mock_class, _ = mock_session_class
        mock_list.return_value = ["/dev/ttyACM0"]

        SerialCommandCLI.execute_command("write", "auto", 9600, data="x")

        assert mock_class.call_args.args[0].port == "/dev/ttyACM0"

    @patch("serial_rw.cli.commands.list_ports")
    def test_auto_without_ports_no_device_access(
        self, mock_list, mock_sleep, mock_session_class, capsys
    ):
        mock_class, _ = mock_session_class
        mock_list.return_value = []

        assert SerialCommandCLI.execute_command("read", "auto", 9600) is False
        mock_class.assert_not_called()
        assert "No ports found" in capsys.readouterr().err

    @patch("serial_rw.cli.commands.list_ports")
    def test_check_port(self, mock_list, mock_sleep, mock_session_class, capsys):
        mock_class, _ = mock_session_class
        mock_list.return_value = ["COM3"]

        result = SerialCommandCLI.execute_command("read", "COM1", 9600, check_port=True)

        assert result is False
        mock_class.assert_not_called()
        assert "Port COM1 not found" in capsys.readouterr().err
