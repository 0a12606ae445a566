"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: numeric.py
@DateTime: 2026-02-10
@Docs: Tolerant and strict numeric text parsing.
宽松与严格的数值文本解析。

Tolerant mode reads the leading numeric run after optional whitespace and
sign, ignores whatever follows, and yields zero when no run is found.
宽松模式在可选空白与符号后读取开头的数字串，忽略其后的内容，找不到数字时返回零。
"""

import re
from decimal import Decimal

from fixedwidth_codec.config import NumericMode

_INT_RE = re.compile(r"\s*([+-]?\d+(?:_\d+)*)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+(?:_\d+)*(?:\.\d+(?:_\d+)*)?|\.\d+(?:_\d+)*)(?:[eE][+-]?\d+)?)")

Number = int | float | Decimal


def parse_int(text: str, mode: NumericMode = NumericMode.TOLERANT) -> int:
    """Parse an integer from text.
    从文本解析整数。

    Args:
        text: Input text.
            输入文本。
        mode: Parsing mode.
            解析模式。

    Returns:
        int: Parsed integer, 0 when tolerant and no digits are found.
            解析出的整数；宽松模式下无数字时返回 0。

    Raises:
        ValueError: In strict mode when the text is not an integer.
            严格模式下文本不是整数时抛出。
    """
    if mode is NumericMode.STRICT:
        stripped = text.strip()
        if not stripped:
            return 0
        if _INT_RE.fullmatch(stripped) is None:
            raise ValueError(f"invalid literal for integer: {text!r}")
        return int(stripped.replace("_", ""))
    m = _INT_RE.match(text)
    if m is None:
        return 0
    return int(m.group(1).replace("_", ""))


def parse_float(text: str, mode: NumericMode = NumericMode.TOLERANT) -> float:
    """Parse a float from text.
    从文本解析浮点数。

    Raises:
        ValueError: In strict mode when the text is not a decimal number.
            严格模式下文本不是十进制数时抛出。
    """
    if mode is NumericMode.STRICT:
        stripped = text.strip()
        if not stripped:
            return 0.0
        if _FLOAT_RE.fullmatch(stripped) is None:
            raise ValueError(f"invalid literal for float: {text!r}")
        return float(stripped.replace("_", ""))
    m = _FLOAT_RE.match(text)
    if m is None:
        return 0.0
    return float(m.group(1).replace("_", ""))


def is_number(value: object) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def as_numeric(value: object, mode: NumericMode = NumericMode.TOLERANT) -> Number:
    """Coerce a value to a number without reparsing values that already are.
    将值转换为数值；已是数值的值原样返回，避免精度损失。
    """
    if is_number(value):
        return value  # type: ignore[return-value]
    return parse_float("" if value is None else str(value), mode)
