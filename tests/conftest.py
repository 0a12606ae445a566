"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-02-10
@Docs: Shared test fixtures for the fixedwidth-codec test suite.
测试套件的公共 fixtures。
"""

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from fixedwidth_codec import FixedWidthField


@pytest.fixture(autouse=True)
def clean_env() -> Iterator[None]:
    """Hide FIXEDWIDTH_* variables from the host environment.
    屏蔽宿主环境中的 FIXEDWIDTH_* 变量。
    """
    env = {k: v for k, v in os.environ.items() if not k.startswith("FIXEDWIDTH_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def amount_field() -> FixedWidthField:
    """Implied-decimal money field, width 8, zero padded.
    隐含小数金额字段，宽度 8，零填充。
    """
    return FixedWidthField.build("amount", 8, type="money_implied_decimal", padding="zero")


@pytest.fixture
def birth_date_field() -> FixedWidthField:
    """Date field with a compact pattern.
    紧凑格式的日期字段。
    """
    return FixedWidthField.build("birth_date", 8, type="date", format="%Y%m%d")


@pytest.fixture
def quantity_field() -> FixedWidthField:
    """Integer field, width 5, zero padded, defaulting to 0.
    整数字段，宽度 5，零填充，默认值 0。
    """
    return FixedWidthField.build("quantity", 5, type="integer", padding="zero", default_value=0)
