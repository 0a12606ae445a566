"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: batch_polars.py
@DateTime: 2026-02-10
@Docs: Polars-backed column helpers.
基于 Polars 的列辅助。
"""

import polars as pl

from fixedwidth_codec.field import FixedWidthField
from fixedwidth_codec.spec import FieldType

_PARSED_DTYPES: dict[FieldType, type[pl.DataType]] = {
    FieldType.STRING: pl.String,
    FieldType.INTEGER: pl.Int64,
    FieldType.FLOAT: pl.Float64,
    FieldType.MONEY: pl.Float64,
    FieldType.MONEY_IMPLIED_DECIMAL: pl.Float64,
    FieldType.DATE: pl.Date,
}


def parse_series(field: FixedWidthField, series: pl.Series) -> pl.Series:
    """
    Parse a Series of raw slices.
    解析原始片段组成的 Series。

    Args:
        field: Field to parse with.
        field: 用于解析的字段。
        series: Raw slices; nulls stay null.
        series: 原始片段；空值保持为空。

    Returns:
        pl.Series: Parsed values named after the field.
        pl.Series: 以字段名命名的解析结果。
    """
    spec = field.spec
    dtype = _PARSED_DTYPES[spec.field_type] if spec.transform.is_identity else None
    values = [None if raw is None else field.parse(raw) for raw in series.to_list()]
    return pl.Series(field.name, values, dtype=dtype)


def format_series(field: FixedWidthField, series: pl.Series) -> pl.Series:
    """
    Format a Series of values into fixed-width slices.
    将值组成的 Series 格式化为定宽片段。

    Args:
        field: Field to format with.
        field: 用于格式化的字段。
        series: Values; nulls take the field's default value.
        series: 值；空值使用字段默认值。

    Returns:
        pl.Series: String slices named after the field.
        pl.Series: 以字段名命名的字符串片段。
    """
    return pl.Series(field.name, [field.format(v) for v in series.to_list()], dtype=pl.String)
