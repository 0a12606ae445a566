"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-09
@Docs: Codecs for coercing/rendering field values.
字段值编解码器。
"""

from fixedwidth_codec.codecs.base import Codec
from fixedwidth_codec.codecs.builtins import (
    DateCodec,
    FloatCodec,
    ImpliedDecimalCodec,
    IntegerCodec,
    MoneyCodec,
    StringCodec,
    to_strftime,
)
from fixedwidth_codec.config import CodecConfig, NumericMode
from fixedwidth_codec.spec import FieldSpec, FieldType


def codec_for(spec: FieldSpec, config: CodecConfig | None = None) -> Codec:
    """Return the codec matching a field spec.
    返回与字段规格匹配的编解码器。

    Args:
        spec: Field spec.
            字段规格。
        config: Codec-wide defaults.
            全局默认配置。
    Returns:
        Codec: Codec for the spec's field type.
            对应字段类型的编解码器。
    """
    cfg = config or CodecConfig()
    mode: NumericMode = spec.numeric_mode or cfg.numeric_mode
    match spec.field_type:
        case FieldType.INTEGER:
            return IntegerCodec(mode)
        case FieldType.FLOAT:
            return FloatCodec(mode, spec.pattern)
        case FieldType.MONEY:
            return MoneyCodec(mode)
        case FieldType.MONEY_IMPLIED_DECIMAL:
            return ImpliedDecimalCodec(mode)
        case FieldType.DATE:
            return DateCodec(spec.pattern, cfg.default_date_format)
        case _:
            return StringCodec()


__all__ = [
    "Codec",
    "DateCodec",
    "FloatCodec",
    "ImpliedDecimalCodec",
    "IntegerCodec",
    "MoneyCodec",
    "StringCodec",
    "codec_for",
    "to_strftime",
]
