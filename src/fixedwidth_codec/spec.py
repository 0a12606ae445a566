"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: spec.py
@DateTime: 2026-02-10
@Docs: Immutable field specification and its option types.
不可变字段规格及其选项类型。
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, ValidationInfo, field_validator

from fixedwidth_codec.config import NumericMode
from fixedwidth_codec.exceptions import ConfigurationError


class FieldType(StrEnum):
    """Supported field types.
    支持的字段类型。
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    MONEY = "money"
    MONEY_IMPLIED_DECIMAL = "money_implied_decimal"
    DATE = "date"


class Alignment(StrEnum):
    """Field alignment.
    字段对齐方式。
    """

    LEFT = "left"
    RIGHT = "right"


class Padding(StrEnum):
    """Fill style used to complete a field to its width.
    补齐字段宽度所用的填充方式。
    """

    SPACE = "space"
    ZERO = "zero"

    @property
    def fill_char(self) -> str:
        return "0" if self is Padding.ZERO else " "


@dataclass(frozen=True, slots=True)
class Transform:
    """Optional post-coercion hooks.
    可选的转换钩子。

    ``on_parse`` receives the coerced value after parsing; ``on_format``
    receives the rendered text before width checks. A hook left as None is
    the identity.
    ``on_parse`` 接收解析后的值；``on_format`` 接收渲染后、宽度校验前的文本。未设置的钩子即恒等变换。
    """

    on_parse: Callable[[Any], Any] | None = None
    on_format: Callable[[str], Any] | None = None

    @classmethod
    def of(cls, fn: Callable[[Any], Any]) -> "Transform":
        """Use the same callable on both parse and format.
        解析与格式化共用同一个可调用对象。
        """
        return cls(on_parse=fn, on_format=fn)

    @property
    def is_identity(self) -> bool:
        return self.on_parse is None and self.on_format is None

    def apply_parse(self, value: Any) -> Any:
        if self.on_parse is None:
            return value
        return self.on_parse(value)

    def apply_format(self, text: str) -> str:
        if self.on_format is None:
            return text
        result = self.on_format(text)
        return result if isinstance(result, str) else str(result)


NO_TRANSFORM = Transform()

_ENUM_MESSAGES: dict[str, str] = {
    "alignment": "Option align only accepts right (default) or left",
    "padding": "Option padding only accepts space (default) or zero",
    "field_type": "Option type only accepts " + ", ".join(t.value for t in FieldType),
    "numeric_mode": "Option numeric_mode only accepts tolerant or strict",
}
_OPTION_DEFAULTS: dict[str, str | None] = {
    "alignment": Alignment.RIGHT.value,
    "padding": Padding.SPACE.value,
    "field_type": FieldType.STRING.value,
    "numeric_mode": None,
}


class FieldSpec(BaseModel):
    """
    Field specification.
    字段规格。

    Immutable configuration of a single fixed-width field. Validated once at
    construction; every invalid option surfaces as ConfigurationError.
    单个定宽字段的不可变配置，构造时一次性校验，任何无效选项均抛出 ConfigurationError。

    Attributes:
        name: Column name, used in diagnostics.
            列名，仅用于诊断信息。
        width: Exact character count of the field.
            字段的精确字符数。
        field_type: Field type (input key ``type``).
            字段类型（输入键 ``type``）。
        alignment: Left or right (input key ``align``).
            左对齐或右对齐（输入键 ``align``）。
        padding: Space or zero fill.
            空格或零填充。
        precision: Justification width for float fields.
            浮点字段的对齐宽度。
        default_value: Substitute for values that render empty.
            值渲染为空时的替代值。
        truncate: Truncate overflow instead of failing.
            超长时截断而非报错。
        pattern: Explicit float/date pattern (input key ``format``).
            浮点/日期的显式格式（输入键 ``format``）。
        transform: Parse/format hooks.
            解析/格式化钩子。
        numeric_mode: Numeric parsing mode; None defers to CodecConfig.
            数值解析模式；None 表示使用 CodecConfig。
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    name: str
    width: PositiveInt
    field_type: FieldType = Field(default=FieldType.STRING, alias="type")
    alignment: Alignment = Field(default=Alignment.RIGHT, alias="align")
    padding: Padding = Padding.SPACE
    precision: PositiveInt | None = None
    default_value: Any = None
    truncate: bool = False
    pattern: str | None = Field(default=None, alias="format")
    transform: Transform = NO_TRANSFORM
    numeric_mode: NumericMode | None = None

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _configuration_error(data, exc) from exc

    @field_validator("alignment", "padding", "field_type", "numeric_mode", mode="before")
    @classmethod
    def normalize_option(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return _OPTION_DEFAULTS[info.field_name]
        text = str(value).strip().lstrip(":").lower()
        allowed = {
            "alignment": Alignment,
            "padding": Padding,
            "field_type": FieldType,
            "numeric_mode": NumericMode,
        }[info.field_name]
        if text not in {m.value for m in allowed}:
            raise ValueError(_ENUM_MESSAGES[info.field_name])
        return text

    @field_validator("transform", mode="before")
    @classmethod
    def wrap_transform(cls, value: Any) -> Any:
        if value is None:
            return NO_TRANSFORM
        if isinstance(value, Transform):
            return value
        if callable(value):
            return Transform.of(value)
        raise ValueError("transform must be callable or a Transform")

    @classmethod
    def from_options(
        cls,
        name: str,
        width: int,
        options: Mapping[str, Any] | None = None,
        *,
        transform: Callable[[Any], Any] | Transform | None = None,
    ) -> "FieldSpec":
        """
        Build a spec from a schema-layer option bag.
        从 schema 层的选项字典构建规格。

        Args:
            name: Column name.
                列名。
            width: Field width.
                字段宽度。
            options: Recognized keys: align, padding, type, truncate, precision,
                default_value, format, numeric_mode. Keys may carry a leading colon.
                可识别的键：align、padding、type、truncate、precision、default_value、format、numeric_mode，键可带前导冒号。
            transform: Optional transform.
                可选转换。

        Returns:
            FieldSpec: Validated spec.
            FieldSpec: 校验后的规格。

        Raises:
            ConfigurationError: If any option is invalid or unknown.
                任一选项无效或未知时抛出。
        """
        data: dict[str, Any] = {str(k).lstrip(":"): v for k, v in (options or {}).items()}
        data["name"] = name
        data["width"] = width
        if transform is not None:
            data["transform"] = transform
        return cls(**data)

    @property
    def justify_width(self) -> int:
        """Justification target: precision for float fields that set it, else width.
        对齐目标宽度：浮点字段设置了 precision 时取 precision，否则取 width。
        """
        if self.field_type is FieldType.FLOAT and self.precision:
            return self.precision
        return self.width


def _configuration_error(data: Mapping[str, Any], exc: ValidationError) -> ConfigurationError:
    errors = [
        {
            "field": ".".join(str(p) for p in err["loc"]) or None,
            "message": str(err["ctx"]["error"]) if "error" in err.get("ctx", {}) else err["msg"],
        }
        for err in exc.errors()
    ]
    name = data.get("name", "<unnamed>")
    summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
    return ConfigurationError(message=f"Invalid configuration for column '{name}': {summary}", details=errors)
