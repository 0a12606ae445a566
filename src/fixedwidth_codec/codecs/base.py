"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: base.py
@DateTime: 2026-02-09
@Docs: Codec protocol for coercing and rendering field values.
字段值转换与渲染的编解码器协议。
"""

from typing import Any, Protocol, TypeVar

T = TypeVar("T", covariant=True)


class Codec(Protocol[T]):
    """Codec protocol for one field type.
    单一字段类型的编解码器协议。

    Codecs only coerce and render; width, alignment and padding are applied
    by the field that owns them.
    编解码器只负责类型转换与渲染；宽度、对齐与填充由所属字段处理。
    """

    def parse(self, value: str) -> T:
        """Coerce a raw slice into a typed value.
        将原始片段转换为类型化的值。

        Args:
            value: The raw slice.
                原始片段。
        Returns:
            The coerced value.
                转换后的值。
        """
        ...

    def format(self, value: Any) -> str:
        """Render a value as unpadded text.
        将值渲染为未填充的文本。

        Args:
            value: The value to render.
                要渲染的值。
        Returns:
            The rendered text.
                渲染后的文本。
        """
        ...
