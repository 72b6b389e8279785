"""
日志工具 - 统一输出门面

封装 Rich Console，提供带时间戳的统一诊断输出接口。
诊断输出只是旁路信息，配置加载的结果仍以返回值为准。
"""

import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from rich.console import Console
from rich.markup import escape


class OutputLevel:
    """输出级别常量"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogStage:
    """日志阶段标记"""
    LOAD = "LOAD"
    PARSE = "PARSE"
    VALIDATE = "VALIDATE"
    COMMIT = "COMMIT"


_LEVEL_ORDER = {
    OutputLevel.DEBUG: 0,
    OutputLevel.INFO: 1,
    OutputLevel.SUCCESS: 1,
    OutputLevel.WARNING: 2,
    OutputLevel.ERROR: 3,
}

_LEVEL_STYLES = {
    OutputLevel.DEBUG: "dim",
    OutputLevel.INFO: "default",
    OutputLevel.SUCCESS: "green",
    OutputLevel.WARNING: "yellow",
    OutputLevel.ERROR: "red bold",
}


class OutputFacade:
    """输出门面

    普通信息写入 stdout，错误写入 stderr，可选同时追加到日志文件。
    """

    def __init__(self, stream: Optional[TextIO] = None, error_stream: Optional[TextIO] = None):
        self._lock = threading.RLock()
        self._file_handle: Optional[Any] = None
        self._log_level = OutputLevel.INFO
        self._date_format = "%Y-%m-%d %H:%M:%S"
        self._time_format = "%H:%M:%S"

        self._console = Console(
            file=stream,  # None 时随 sys.stdout 变化
            color_system="auto",
            markup=True,
            emoji=False,
            highlight=False,  # 关闭语法高亮，避免误着色路径
            log_path=False,
        )
        self._error_console = Console(
            file=error_stream,
            stderr=True,
            color_system="auto",
            markup=True,
            emoji=False,
            highlight=False,
        )

    @property
    def level(self) -> str:
        return self._log_level

    def _get_timestamp(self, include_date: bool = False) -> str:
        now = datetime.now()
        return now.strftime(self._date_format if include_date else self._time_format)

    def _should_output(self, level: str) -> bool:
        current_level = _LEVEL_ORDER.get(self._log_level, 1)
        return _LEVEL_ORDER.get(level, 1) >= current_level

    def _format_message(self, message: str, level: str, stage: Optional[str] = None,
                        include_date: bool = False) -> str:
        timestamp = self._get_timestamp(include_date)
        if stage:
            return f"[{timestamp}] [{level}] [{stage}] {message}"
        return f"[{timestamp}] [{level}] {message}"

    def _write_to_file(self, message: str, level: str, stage: Optional[str] = None) -> None:
        if not self._file_handle:
            return
        self._file_handle.write(self._format_message(message, level, stage, include_date=True) + "\n")
        self._file_handle.flush()

    def emit(self, level: str, message: str, stage: Optional[str] = None) -> None:
        """输出一条消息"""
        if not self._should_output(level):
            return

        with self._lock:
            console = self._error_console if level == OutputLevel.ERROR else self._console
            timestamp = self._get_timestamp()

            # 消息内容可能包含 "[...]"，需要转义以免被当作 markup
            text = escape(message)
            if stage:
                formatted = f"[dim]{timestamp}[/dim] [bold]{level}[/bold] [cyan]{stage}[/cyan] {text}"
            else:
                formatted = f"[dim]{timestamp}[/dim] [bold]{level}[/bold] {text}"

            console.print(formatted, style=_LEVEL_STYLES.get(level, "default"), soft_wrap=True)
            self._write_to_file(message, level, stage)

    def set_level(self, level: str) -> None:
        """设置输出级别"""
        level = level.upper()
        with self._lock:
            if level in _LEVEL_ORDER:
                self._log_level = level

    def set_log_file(self, file_path: Union[str, Path]) -> None:
        """设置日志文件"""
        with self._lock:
            self.close()
            log_path = Path(file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(log_path, "a", encoding="utf-8")

    def close(self) -> None:
        """关闭日志文件"""
        with self._lock:
            if self._file_handle:
                self._file_handle.close()
                self._file_handle = None


_output_facade: Optional[OutputFacade] = None


def get_output_facade() -> OutputFacade:
    """获取全局输出门面实例"""
    global _output_facade
    if _output_facade is None:
        _output_facade = OutputFacade()
    return _output_facade


def debug(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().emit(OutputLevel.DEBUG, message, stage)


def info(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().emit(OutputLevel.INFO, message, stage)


def success(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().emit(OutputLevel.SUCCESS, message, stage)


def warning(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().emit(OutputLevel.WARNING, message, stage)


def error(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().emit(OutputLevel.ERROR, message, stage)


def set_log_level(level: str) -> None:
    """设置全局日志级别"""
    get_output_facade().set_level(level)


def configure_logging(level: str = "INFO", log_file: Optional[Union[str, Path]] = None) -> None:
    """配置日志系统"""
    set_log_level(level)
    if log_file:
        get_output_facade().set_log_file(log_file)


def close_logger() -> None:
    """关闭日志系统"""
    global _output_facade
    if _output_facade:
        _output_facade.close()
        _output_facade = None


class StageLogger:
    """绑定阶段标记的日志器"""

    def __init__(self, stage: str):
        self.stage = stage

    def debug(self, message: str) -> None:
        debug(message, self.stage)

    def info(self, message: str) -> None:
        info(message, self.stage)

    def success(self, message: str) -> None:
        success(message, self.stage)

    def warning(self, message: str) -> None:
        warning(message, self.stage)

    def error(self, message: str) -> None:
        error(message, self.stage)


def get_stage_logger(stage: str) -> StageLogger:
    """获取阶段日志器"""
    return StageLogger(stage)


load_logger = get_stage_logger(LogStage.LOAD)
parse_logger = get_stage_logger(LogStage.PARSE)
validate_logger = get_stage_logger(LogStage.VALIDATE)
commit_logger = get_stage_logger(LogStage.COMMIT)


import atexit
atexit.register(close_logger)
