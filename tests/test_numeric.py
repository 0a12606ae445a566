"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_numeric.py
@DateTime: 2026-02-10
@Docs: Tests for numeric.py module.
numeric.py 模块测试。
"""

from decimal import Decimal

import pytest

from fixedwidth_codec.config import NumericMode
from fixedwidth_codec.numeric import as_numeric, is_number, parse_float, parse_int


class TestTolerantInt:
    """Tolerant integer parsing.
    宽松整数解析。
    """

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("   42", 42),
            ("-0012", -12),
            ("+7   ", 7),
            ("12abc", 12),
            ("1_000", 1000),
            ("abc", 0),
            ("     ", 0),
            ("", 0),
            ("- 5", 0),
        ],
    )
    def test_values(self, text: str, expected: int) -> None:
        assert parse_int(text) == expected


class TestTolerantFloat:
    """Tolerant float parsing.
    宽松浮点解析。
    """

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("  123.45", 123.45),
            ("-2.50xyz", -2.5),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("1.", 1.0),
            ("00012345", 12345.0),
            ("abc", 0.0),
            ("   ", 0.0),
        ],
    )
    def test_values(self, text: str, expected: float) -> None:
        assert parse_float(text) == expected


class TestStrictMode:
    """Strict parsing rejects trailing garbage.
    严格模式拒绝尾随无效字符。
    """

    def test_int_accepts_padded_number(self) -> None:
        assert parse_int("  -42 ", NumericMode.STRICT) == -42

    def test_int_blank_is_zero(self) -> None:
        assert parse_int("    ", NumericMode.STRICT) == 0

    def test_int_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_int("12ab", NumericMode.STRICT)

    def test_float_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_float("1.5x", NumericMode.STRICT)

    def test_float_accepts_exponent(self) -> None:
        assert parse_float(" 2.5e2", NumericMode.STRICT) == 250.0


class TestAsNumeric:
    """Numeric coercion for rendering.
    渲染时的数值转换。
    """

    def test_numbers_pass_through(self) -> None:
        value = Decimal("10.005")
        assert as_numeric(value) is value
        assert as_numeric(7) == 7

    def test_bool_is_not_a_number(self) -> None:
        assert not is_number(True)
        assert as_numeric(True) == 0.0

    def test_text_and_none(self) -> None:
        assert as_numeric("12.5") == 12.5
        assert as_numeric(None) == 0.0
