"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: log.py
@DateTime: 2026-02-10
@Docs: Package logging helpers.
包日志辅助。

Library modules only call ``get_logger(__name__)``; handlers are attached by
the host application through ``configure_logging``.
库模块仅调用 ``get_logger(__name__)``；处理器由宿主应用通过 ``configure_logging`` 挂载。
"""

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "fixedwidth_codec"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _level_from(level: int | str | None) -> int | None:
    """Resolve an int or level name; None when unrecognized."""
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        return logging.getLevelNamesMapping().get(name)
    return None


def _parse_level(level: int | str | None) -> int:
    resolved = _level_from(level)
    if resolved is not None:
        return resolved
    resolved = _level_from(os.getenv("FIXEDWIDTH_LOG_LEVEL"))
    if resolved is not None:
        return resolved
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once.
    仅配置一次包根日志器。

    Args:
        level: Level as int or name; falls back to FIXEDWIDTH_LOG_LEVEL, then INFO.
            日志级别（整数或名称）；缺省回退到 FIXEDWIDTH_LOG_LEVEL，再回退到 INFO。
        fmt: Log format string.
            日志格式字符串。
        stream: Output stream of the single StreamHandler.
            StreamHandler 的输出流。
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package root silent until configured.
    返回日志器；在配置前保持包根日志器静默。
    """
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
