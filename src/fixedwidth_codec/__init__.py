"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-08
@Docs: Package exports for fixedwidth_codec.
fixedwidth_codec 包导出定义。
"""

from fixedwidth_codec.batch import format_series, parse_series
from fixedwidth_codec.codecs import Codec, codec_for
from fixedwidth_codec.config import CodecConfig, NumericMode, resolve_config
from fixedwidth_codec.exceptions import (
    ConfigurationError,
    FieldLengthExceededError,
    FixedWidthError,
    FormatError,
    ParseError,
)
from fixedwidth_codec.field import FixedWidthField
from fixedwidth_codec.log import configure_logging, get_logger
from fixedwidth_codec.spec import NO_TRANSFORM, Alignment, FieldSpec, FieldType, Padding, Transform

__all__ = [
    "FixedWidthField",
    "FieldSpec",
    "FieldType",
    "Alignment",
    "Padding",
    "NumericMode",
    "Transform",
    "NO_TRANSFORM",
    "CodecConfig",
    "resolve_config",
    "Codec",
    "codec_for",
    "FixedWidthError",
    "ConfigurationError",
    "ParseError",
    "FormatError",
    "FieldLengthExceededError",
    "parse_series",
    "format_series",
    "configure_logging",
    "get_logger",
]
