"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-02-10
@Docs: Codec-wide configuration helpers.
编解码全局配置助手。

Codec-wide defaults that individual fields fall back to.
各字段未显式配置时回退使用的全局默认值。

Environment variables / 环境变量:
        - FIXEDWIDTH_DATE_FORMAT:
            Default date pattern (default: %Y-%m-%d).
            默认日期格式（默认 %Y-%m-%d）。
        - FIXEDWIDTH_NUMERIC_MODE:
            Numeric parsing mode: tolerant or strict (default: tolerant).
            数值解析模式：tolerant 或 strict（默认 tolerant）。

Examples:
        >>> from fixedwidth_codec.config import resolve_config
        >>> cfg = resolve_config(default_date_format="%Y%m%d")
        >>> cfg.default_date_format
        '%Y%m%d'
"""

import os
from dataclasses import dataclass
from enum import StrEnum

from fixedwidth_codec.exceptions import ConfigurationError

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


class NumericMode(StrEnum):
    """Numeric parsing mode.
    数值解析模式。

    TOLERANT reads the leading numeric run and yields zero when there is none.
    TOLERANT 读取开头的数字串，无数字时返回零。
    STRICT requires the whole stripped slice to be numeric.
    STRICT 要求去除空白后的整段文本均为数值。
    """

    TOLERANT = "tolerant"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Codec-wide defaults.
    编解码全局默认值。

    Attributes:
        default_date_format: Date pattern used when a field has none.
            字段未配置时使用的日期格式。
        numeric_mode: Numeric parsing mode used when a field has none.
            字段未配置时使用的数值解析模式。
    """

    default_date_format: str = DEFAULT_DATE_FORMAT
    numeric_mode: NumericMode = NumericMode.TOLERANT


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _parse_numeric_mode(value: str | NumericMode) -> NumericMode:
    try:
        return NumericMode(str(value).strip().lower())
    except ValueError as exc:
        raise ConfigurationError(
            message=f"Numeric mode only accepts tolerant (default) or strict, got {value!r}",
            details={"numeric_mode": str(value)},
        ) from exc


def resolve_config(
    *,
    default_date_format: str | None = None,
    numeric_mode: str | NumericMode | None = None,
    env_prefix: str = "FIXEDWIDTH",
) -> CodecConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

    Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_DATE_FORMAT`, `{env_prefix}_NUMERIC_MODE`
           环境变量
        3) defaults / 默认值

    Args:
        default_date_format: Default date pattern.
            默认日期格式。
        numeric_mode: Default numeric parsing mode.
            默认数值解析模式。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 FIXEDWIDTH）。

    Returns:
        A CodecConfig instance.
            返回 CodecConfig 配置实例。

    Raises:
        ConfigurationError: If the numeric mode is unknown.
            数值解析模式未知时抛出。
    """
    date_format = default_date_format or _env_get(f"{env_prefix}_DATE_FORMAT") or DEFAULT_DATE_FORMAT
    raw_mode = numeric_mode if numeric_mode is not None else _env_get(f"{env_prefix}_NUMERIC_MODE")
    mode = _parse_numeric_mode(raw_mode) if raw_mode is not None else NumericMode.TOLERANT
    return CodecConfig(default_date_format=date_format, numeric_mode=mode)
