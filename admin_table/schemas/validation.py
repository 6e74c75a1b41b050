"""Schema 校验与错误映射."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from admin_table.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_or_raise(model: type[ModelT], payload: object, *, message_key: str | None = None) -> ModelT:
    """执行 schema 校验并抛出项目的 ValidationError.

    Args:
        model: pydantic model.
        payload: 待校验的 payload(通常为 request.args).
        message_key: 默认 message_key.

    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(_extract_first_message(exc), message_key=message_key) from None


def _extract_first_message(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "参数校验失败"
    msg = errors[0].get("msg")
    if isinstance(msg, str) and msg.strip():
        return msg
    return "参数校验失败"
