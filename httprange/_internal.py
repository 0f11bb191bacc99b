from __future__ import annotations

import logging
import re
import sys
import typing as t

_logger: logging.Logger | None = None

RANGE_UNIT = "bytes"
U64_MAX = 2**64 - 1

# str.isdigit()和int()会接受全角数字、下划线、符号和空白，这里只允许ASCII数字
_digits_re = re.compile(r"[0-9]+")


def _to_str(value: str | bytes) -> str:
    """header的值以bytes形式传入时按latin1解码，与WSGI的约定保持一致"""
    if isinstance(value, (bytes, bytearray)):
        return value.decode("latin1")
    return value


def _parse_u64(value: str) -> int | None:
    """将``1*DIGIT``解析为无符号64位整数。

    空字符串、非ASCII数字或超出范围的值返回``None``。

    >>> _parse_u64("499")
    499
    >>> _parse_u64("+1") is None
    True
    """
    if _digits_re.fullmatch(value) is None:
        return None
    number = int(value)
    if number > U64_MAX:
        return None
    return number


def _has_level_handler(logger: logging.Logger) -> bool:
    """检查logging chain中是否有处理给定logger level的handler"""
    level = logger.getEffectiveLevel()
    current: logging.Logger | None = logger
    while current:
        if any(handler.level <= level for handler in current.handlers):
            return True
        if not current.propagate:
            break
        current = current.parent
    return False


class _ColorStreamHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """在Win上，用Colorama包装stream以支持ANSI风格"""

    def __init__(self) -> None:
        try:
            import colorama
        except ImportError:
            stream = None
        else:
            stream = colorama.AnsiToWin32(sys.stderr)
        super().__init__(stream)


def _log(type: str, message: str, *args: t.Any, **kwargs: t.Any) -> None:
    """打印一条日志到'httprange' logger中

    logger第一次被调用时会被创建.默认使用的等级为:data:`logging.INFO`. 如果没有针对
    日志记录器有效级别的处理程序，会增加一个:class:`logging.StreamHandler`
    """
    global _logger

    if _logger is None:
        _logger = logging.getLogger("httprange")

        if _logger.level == logging.NOTSET:
            _logger.setLevel(logging.INFO)

        if not _has_level_handler(_logger):
            _logger.addHandler(_ColorStreamHandler())

    getattr(_logger, type)(message.rstrip(), *args, **kwargs)
