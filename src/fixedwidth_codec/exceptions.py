"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-02-08
@Docs: Fixed-width codec error hierarchy.
定宽字段编解码异常体系。
"""

from typing import Any


def _display(value: Any) -> str:
    # values whose __str__ fails still need a message
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


class FixedWidthError(Exception):
    """
    Fixed-width codec errors.
    定宽编解码异常。

    Root of every error raised by this package.
    本包所有异常的基类。

    Attributes:
        message: Error message.
        message: 错误消息。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "fixed_width_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.error_code = error_code


class ConfigurationError(FixedWidthError):
    """
    Invalid field configuration.
    字段配置无效。
    """

    def __init__(self, *, message: str, details: Any | None = None) -> None:
        super().__init__(message=message, details=details, error_code="invalid_configuration")


class ParseError(FixedWidthError):
    """
    Parse error.
    解析错误。

    Attributes:
        column: Column name.
        column: 列名。
        value: Raw input slice.
        value: 原始输入片段。
        field_type: Declared field type.
        field_type: 声明的字段类型。
    """

    def __init__(self, *, column: str, value: str, field_type: str, cause: BaseException) -> None:
        super().__init__(
            message=(
                f"Error parsing column '{column}'. The value '{value}' could not be converted "
                f"to type {field_type}: {cause}"
            ),
            details={"column": column, "value": value, "type": field_type, "error": str(cause)},
            error_code="parse_error",
        )
        self.column = column
        self.value = value
        self.field_type = field_type


class FormatError(FixedWidthError):
    """
    Format error.
    格式化错误。
    """

    def __init__(
        self,
        *,
        column: str,
        value: Any,
        field_type: str,
        cause: BaseException | None = None,
        message: str | None = None,
        details: Any | None = None,
        error_code: str = "format_error",
    ) -> None:
        if message is None:
            message = (
                f"Could not format column '{column}' as a '{field_type}' "
                f"with value of '{_display(value)}': {cause}"
            )
        if details is None:
            details = {"column": column, "value": value, "type": field_type, "error": str(cause)}
        super().__init__(message=message, details=details, error_code=error_code)
        self.column = column
        self.value = value
        self.field_type = field_type


class FieldLengthExceededError(FormatError):
    """
    Formatted value is wider than the field.
    格式化结果超出字段宽度。
    """

    def __init__(self, *, column: str, value: str, width: int, field_type: str = "string") -> None:
        super().__init__(
            column=column,
            value=value,
            field_type=field_type,
            message=(
                f"The formatted value '{value}' in column '{column}' exceeds the allowed length of {width} characters."
            ),
            details={"column": column, "value": value, "width": width},
            error_code="field_length_exceeded",
        )
        self.width = width
