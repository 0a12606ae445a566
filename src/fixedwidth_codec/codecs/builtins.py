"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: builtins.py
@DateTime: 2026-02-09
@Docs: Built-in codecs for the supported field types.
支持的字段类型的内置编解码器。
"""

import re
from datetime import date, datetime
from decimal import ROUND_DOWN, Decimal
from typing import Any

from fixedwidth_codec.codecs.base import Codec
from fixedwidth_codec.config import DEFAULT_DATE_FORMAT, NumericMode
from fixedwidth_codec.numeric import Number, as_numeric, parse_float, parse_int

_DATE_TOKENS = re.compile(r"YYYY|YY|MM|DD|HH|mm|SS|ss")
_TOKEN_DIRECTIVES = {
    "YYYY": "%Y",
    "YY": "%y",
    "MM": "%m",
    "DD": "%d",
    "HH": "%H",
    "mm": "%M",
    "SS": "%S",
    "ss": "%S",
}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def to_strftime(pattern: str) -> str:
    """Translate a token pattern such as ``YYYYMMDD`` into strftime directives.
    将 ``YYYYMMDD`` 等标记格式转换为 strftime 指令。

    Patterns that already contain ``%`` are returned unchanged.
    已包含 ``%`` 的格式原样返回。
    """
    if "%" in pattern:
        return pattern
    return _DATE_TOKENS.sub(lambda m: _TOKEN_DIRECTIVES[m.group(0)], pattern)


class StringCodec(Codec[str]):
    """Codec for plain text.
    文本编解码器。
    """

    def parse(self, value: str) -> str:
        return value.strip()

    def format(self, value: Any) -> str:
        return _text(value)


class IntegerCodec(Codec[int]):
    """Codec for integers.
    整数编解码器。
    """

    def __init__(self, mode: NumericMode = NumericMode.TOLERANT) -> None:
        self._mode = mode

    def parse(self, value: str) -> int:
        return parse_int(value, self._mode)

    def format(self, value: Any) -> str:
        return _text(value)


class FloatCodec(Codec[float]):
    """Codec for floats with an optional explicit pattern.
    支持显式格式的浮点数编解码器。

    A pattern containing ``%`` is applied printf-style (``"%.3f"``); any other
    pattern is a ``format()`` spec (``".3f"``).
    含 ``%`` 的格式按 printf 风格应用（``"%.3f"``），否则作为 ``format()`` 规格（``".3f"``）。
    """

    def __init__(self, mode: NumericMode = NumericMode.TOLERANT, pattern: str | None = None) -> None:
        self._mode = mode
        self._pattern = pattern

    def parse(self, value: str) -> float:
        return parse_float(value, self._mode)

    def format(self, value: Any) -> str:
        number = as_numeric(value, self._mode)
        if not self._pattern:
            return str(number)
        if "%" in self._pattern:
            return self._pattern % number
        return format(number, self._pattern)


class MoneyCodec(Codec[float]):
    """Codec for money with two fractional digits.
    两位小数的金额编解码器。
    """

    def __init__(self, mode: NumericMode = NumericMode.TOLERANT) -> None:
        self._mode = mode

    def parse(self, value: str) -> float:
        return parse_float(value, self._mode)

    def format(self, value: Any) -> str:
        return format(as_numeric(value, self._mode), ".2f")


class ImpliedDecimalCodec(Codec[float]):
    """Codec for money stored as whole cents without a decimal point.
    以分为单位、不含小数点存储的金额编解码器。
    """

    scale = 100

    def __init__(self, mode: NumericMode = NumericMode.TOLERANT) -> None:
        self._mode = mode

    def parse(self, value: str) -> float:
        return parse_float(value, self._mode) / self.scale

    def format(self, value: Any) -> str:
        scaled = _to_decimal(as_numeric(value, self._mode)) * self.scale
        return str(int(scaled.to_integral_value(rounding=ROUND_DOWN)))


def _to_decimal(number: Number) -> Decimal:
    # repr is the shortest round-tripping literal: 0.29 -> Decimal("0.29")
    if isinstance(number, float):
        return Decimal(repr(number))
    return Decimal(number)


class DateCodec(Codec[date]):
    """Codec for dates.
    日期编解码器。
    """

    def __init__(self, pattern: str | None = None, default_format: str = DEFAULT_DATE_FORMAT) -> None:
        self._format = to_strftime(pattern) if pattern else default_format

    def parse(self, value: str) -> date:
        return datetime.strptime(value.strip(), self._format).date()

    def format(self, value: Any) -> str:
        if not hasattr(value, "strftime"):
            for attr in ("to_pydatetime", "to_datetime"):
                convert = getattr(value, attr, None)
                if callable(convert):
                    value = convert()
                    break
        if hasattr(value, "strftime"):
            return value.strftime(self._format)
        return _text(value)
