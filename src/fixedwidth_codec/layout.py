"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: layout.py
@DateTime: 2026-02-10
@Docs: Length validation and padding/alignment of rendered text.
渲染文本的长度校验与填充对齐。
"""

from fixedwidth_codec.exceptions import FieldLengthExceededError
from fixedwidth_codec.log import get_logger
from fixedwidth_codec.spec import Alignment, FieldSpec, Padding

logger = get_logger(__name__)


def fit_width(text: str, spec: FieldSpec) -> str:
    """
    Enforce the width contract on rendered text.
    对渲染文本执行宽度约束。

    Over-long text is truncated to a width-sized window when the spec allows
    it: the first characters for left alignment, the last for right alignment.
    超长文本在允许截断时保留宽度大小的窗口：左对齐取开头，右对齐取末尾。

    Args:
        text: Rendered text.
            渲染后的文本。
        spec: Field spec.
            字段规格。

    Returns:
        str: Text no longer than the field width.
        str: 不超过字段宽度的文本。

    Raises:
        FieldLengthExceededError: If the text overflows and truncation is off.
            文本超长且未开启截断时抛出。
    """
    if len(text) <= spec.width:
        return text
    if not spec.truncate:
        raise FieldLengthExceededError(
            column=spec.name, value=text, width=spec.width, field_type=spec.field_type.value
        )
    if spec.alignment is Alignment.LEFT:
        fitted = text[: spec.width]
    else:
        fitted = text[-spec.width :]
    logger.debug("Truncated column %r from %d to %d characters", spec.name, len(text), spec.width)
    return fitted


def justify(text: str, width: int, alignment: Alignment, padding: Padding) -> str:
    """
    Stretch text to width, filling the side opposite the alignment.
    将文本扩展到指定宽度，在对齐方向的另一侧填充。

    Only the inserted run uses the fill character; whitespace already in the
    text is left as is.
    仅插入的部分使用填充字符；文本内原有空白保持不变。

    Examples:
        >>> justify("42", 5, Alignment.RIGHT, Padding.ZERO)
        '00042'
        >>> justify("42", 5, Alignment.LEFT, Padding.ZERO)
        '42000'
    """
    if alignment is Alignment.LEFT:
        return text.ljust(width, padding.fill_char)
    return text.rjust(width, padding.fill_char)
