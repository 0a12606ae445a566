"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: batch.py
@DateTime: 2026-02-10
@Docs: Column helpers facade with optional backend.
列辅助门面（可选后端）。
"""

from typing import Any

from fixedwidth_codec.exceptions import FixedWidthError
from fixedwidth_codec.field import FixedWidthField


def _load_backend() -> Any:
    try:
        from fixedwidth_codec import batch_polars

        return batch_polars
    except Exception as exc:  # pragma: no cover / 覆盖忽略
        raise FixedWidthError(
            message="Missing optional dependencies for column helpers. Install extras: polars / 缺少列辅助可选依赖，请安装: polars",
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


def parse_series(field: FixedWidthField, series: Any) -> Any:
    """
    Parse a Series of raw slices with a field.
    使用字段解析原始片段组成的 Series。

    Args:
        field: Field to parse with.
        field: 用于解析的字段。
        series: Input Series.
        series: 输入 Series。

    Returns:
        Series: Parsed values.
        Series: 解析结果。
    """
    backend = _load_backend()
    return backend.parse_series(field, series)


def format_series(field: FixedWidthField, series: Any) -> Any:
    """
    Format a Series of values with a field.
    使用字段格式化值组成的 Series。

    Args:
        field: Field to format with.
        field: 用于格式化的字段。
        series: Input Series.
        series: 输入 Series。

    Returns:
        Series: Fixed-width slices.
        Series: 定宽片段。
    """
    backend = _load_backend()
    return backend.format_series(field, series)
