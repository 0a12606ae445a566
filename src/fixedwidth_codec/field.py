"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: field.py
@DateTime: 2026-02-10
@Docs: Fixed-width field codec.
定宽字段编解码器。

A FixedWidthField turns one raw slice of a record into a typed value and a
typed value back into a slice of exactly the declared width. Splitting lines
into slices and joining slices into lines is left to the caller.
FixedWidthField 将记录中的一个原始片段转换为类型化的值，并将值转换回精确宽度的片段。行的切分与拼接由调用方负责。

Examples:
        >>> from fixedwidth_codec import FixedWidthField
        >>> amount = FixedWidthField.build("amount", 8, type="money_implied_decimal", padding="zero")
        >>> amount.parse("00012345")
        123.45
        >>> amount.format(123.45)
        '00012345'
"""

from collections.abc import Callable
from typing import Any

from fixedwidth_codec.codecs import Codec, codec_for
from fixedwidth_codec.config import CodecConfig
from fixedwidth_codec.exceptions import FormatError, ParseError
from fixedwidth_codec.layout import fit_width, justify
from fixedwidth_codec.log import get_logger
from fixedwidth_codec.spec import FieldSpec, Transform

logger = get_logger(__name__)


class FixedWidthField:
    """
    FixedWidthField
    定宽字段

    Holds an immutable FieldSpec and the codec for its type; safe to share
    across threads.
    持有不可变的 FieldSpec 及其类型对应的编解码器，可在线程间共享。
    """

    __slots__ = ("_codec", "_config", "_spec")

    def __init__(self, spec: FieldSpec, config: CodecConfig | None = None) -> None:
        self._spec = spec
        self._config = config or CodecConfig()
        self._codec: Codec = codec_for(spec, self._config)

    @classmethod
    def build(
        cls,
        name: str,
        width: int,
        *,
        transform: Callable[[Any], Any] | Transform | None = None,
        config: CodecConfig | None = None,
        **options: Any,
    ) -> "FixedWidthField":
        """
        Build a field from a name, width and option keywords.
        由名称、宽度与选项关键字构建字段。

        Args:
            name: Column name.
                列名。
            width: Field width.
                字段宽度。
            transform: Optional transform.
                可选转换。
            config: Codec-wide defaults.
                全局默认配置。
            **options: align, padding, type, truncate, precision, default_value, format, numeric_mode.
                可用选项。

        Returns:
            FixedWidthField: The field.
            FixedWidthField: 字段实例。

        Raises:
            ConfigurationError: If any option is invalid.
                任一选项无效时抛出。
        """
        return cls(FieldSpec.from_options(name, width, options, transform=transform), config)

    @property
    def spec(self) -> FieldSpec:
        return self._spec

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def width(self) -> int:
        return self._spec.width

    def parse(self, raw: str) -> Any:
        """
        Parse a raw slice into a typed value.
        将原始片段解析为类型化的值。

        Args:
            raw: Slice of exactly ``width`` characters.
                恰好 ``width`` 个字符的片段。

        Returns:
            Any: Coerced value, passed through the parse transform.
            Any: 转换后的值（经过解析钩子）。

        Raises:
            ParseError: If coercion or the transform fails.
                类型转换或转换钩子失败时抛出。
        """
        spec = self._spec
        try:
            return spec.transform.apply_parse(self._codec.parse(raw))
        except Exception as exc:
            raise ParseError(column=spec.name, value=raw, field_type=spec.field_type.value, cause=exc) from exc

    def format(self, value: Any) -> str:
        """
        Format a value into a slice of the field's width.
        将值格式化为字段宽度的片段。

        Args:
            value: Value to format; empty values take the default value.
                要格式化的值；空值使用默认值。

        Returns:
            str: Text of exactly ``width`` characters (``precision`` for float fields that set it).
            str: 恰好 ``width`` 个字符的文本（设置了 precision 的浮点字段为 ``precision``）。

        Raises:
            FieldLengthExceededError: If the text overflows and truncation is off.
                文本超长且未开启截断时抛出。
            FormatError: If rendering or the transform fails.
                渲染或转换钩子失败时抛出。
        """
        spec = self._spec
        try:
            value = self._apply_default(value)
            text = spec.transform.apply_format(self._codec.format(value))
        except Exception as exc:
            logger.debug("Could not format column %r as %s from %r: %s", spec.name, spec.field_type.value, value, exc)
            raise FormatError(column=spec.name, value=value, field_type=spec.field_type.value, cause=exc) from exc
        return justify(fit_width(text, spec), spec.justify_width, spec.alignment, spec.padding)

    def describe(self) -> dict[str, Any]:
        """Return the resolved configuration for diagnostics.
        返回解析后的配置，用于诊断。
        """
        spec = self._spec
        return {
            "name": spec.name,
            "width": spec.width,
            "type": spec.field_type.value,
            "align": spec.alignment.value,
            "padding": spec.padding.value,
            "precision": spec.precision,
            "default_value": spec.default_value,
            "truncate": spec.truncate,
            "format": spec.pattern,
            "numeric_mode": (spec.numeric_mode or self._config.numeric_mode).value,
            "transform": not spec.transform.is_identity,
        }

    def _apply_default(self, value: Any) -> Any:
        if value is None or str(value) == "":
            return self._spec.default_value
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._spec!r})"
