"""Schema 校验与错误映射."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from monolog_viewer.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_or_raise(model: type[ModelT], payload: object, *, message_key: str | None = None) -> ModelT:
    """执行 schema 校验并抛出项目的 ValidationError.

    Args:
        model: pydantic model.
        payload: 待校验的 payload(通常为请求参数字典).
        message_key: 默认 message_key.

    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(_extract_first_error(exc), message_key=message_key) from None


def _extract_first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "参数校验失败"

    first = errors[0]
    ctx = first.get("ctx")
    if isinstance(ctx, dict) and isinstance(ctx.get("error"), BaseException):
        return str(ctx["error"])

    msg = first.get("msg")
    if isinstance(msg, str) and msg.strip():
        return msg
    return "参数校验失败"
