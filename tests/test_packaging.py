"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_packaging.py
@DateTime: 2026-02-08
@Docs: Tests for packaging, __all__ exports, and pip-readiness.
打包、__all__ 导出与 pip 就绪性测试。
"""

import importlib
import tomllib
from pathlib import Path


class TestAllExports:
    """Tests for __all__ exports.
    __all__ 导出测试。
    """

    def test_every_name_importable(self) -> None:
        """Every name in __all__ can be imported / __all__ 中每个名字都能成功导入。"""
        import fixedwidth_codec

        for name in fixedwidth_codec.__all__:
            assert getattr(fixedwidth_codec, name, None) is not None, f"{name} is in __all__ but not importable"

    def test_import_does_not_error(self) -> None:
        assert importlib.import_module("fixedwidth_codec") is not None


class TestPyTyped:
    """Tests for py.typed marker.
    py.typed 标记文件测试。
    """

    def test_py_typed_exists(self) -> None:
        pkg_dir = Path(__file__).parent.parent / "src" / "fixedwidth_codec"
        assert (pkg_dir / "py.typed").exists()


class TestExtrasKeys:
    """Tests for pyproject.toml extras.
    pyproject.toml extras 测试。
    """

    def test_extras_keys_present(self) -> None:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        extras = data.get("project", {}).get("optional-dependencies", {})
        for key in ("polars", "full", "test"):
            assert key in extras, f"extras key '{key}' missing"
