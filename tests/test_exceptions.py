"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_exceptions.py
@DateTime: 2026-02-08
@Docs: Tests for exceptions.py module.
exceptions.py 模块测试。
"""

from fixedwidth_codec.exceptions import (
    ConfigurationError,
    FieldLengthExceededError,
    FixedWidthError,
    FormatError,
    ParseError,
)


class TestFixedWidthError:
    """Tests for FixedWidthError.
    FixedWidthError 测试。
    """

    def test_attributes(self) -> None:
        """All attributes assigned correctly / 所有属性正确赋值。"""
        exc = FixedWidthError(message="test error", details={"key": "val"}, error_code="custom_error")
        assert exc.message == "test error"
        assert exc.details == {"key": "val"}
        assert exc.error_code == "custom_error"

    def test_defaults(self) -> None:
        """Default error_code and details / 默认 error_code 与 details。"""
        exc = FixedWidthError(message="msg")
        assert exc.error_code == "fixed_width_error"
        assert exc.details is None

    def test_str_returns_message(self) -> None:
        """str(exc) returns message / str(exc) 返回 message 内容。"""
        assert str(FixedWidthError(message="hello world")) == "hello world"


class TestSubclasses:
    """Tests for exception subclasses.
    异常子类测试。
    """

    def test_hierarchy(self) -> None:
        assert issubclass(ConfigurationError, FixedWidthError)
        assert issubclass(ParseError, FixedWidthError)
        assert issubclass(FormatError, FixedWidthError)
        assert issubclass(FieldLengthExceededError, FormatError)

    def test_configuration_error_code(self) -> None:
        exc = ConfigurationError(message="bad", details=[{"field": "align"}])
        assert exc.error_code == "invalid_configuration"
        assert exc.details == [{"field": "align"}]

    def test_parse_error_context(self) -> None:
        """ParseError carries column, raw value, type and cause / ParseError 携带列名、原始值、类型与原因。"""
        exc = ParseError(column="born", value="1980xx01", field_type="date", cause=ValueError("boom"))
        assert exc.column == "born"
        assert exc.value == "1980xx01"
        assert exc.field_type == "date"
        assert exc.error_code == "parse_error"
        assert exc.details["error"] == "boom"
        assert str(exc) == "Error parsing column 'born'. The value '1980xx01' could not be converted to type date: boom"

    def test_format_error_context(self) -> None:
        exc = FormatError(column="rate", value="x", field_type="float", cause=TypeError("nope"))
        assert exc.error_code == "format_error"
        assert exc.details == {"column": "rate", "value": "x", "type": "float", "error": "nope"}
        assert "Could not format column 'rate'" in exc.message

    def test_length_exceeded_context(self) -> None:
        exc = FieldLengthExceededError(column="code", value="TOOLONG", width=3)
        assert exc.width == 3
        assert exc.column == "code"
        assert exc.value == "TOOLONG"
        assert exc.error_code == "field_length_exceeded"
        assert "exceeds the allowed length of 3 characters" in exc.message

    def test_length_exceeded_catchable_as_base(self) -> None:
        """Catchable as FixedWidthError / 可被 FixedWidthError 捕获。"""
        try:
            raise FieldLengthExceededError(column="c", value="abcd", width=2)
        except FixedWidthError as exc:
            assert exc.details == {"column": "c", "value": "abcd", "width": 2}
