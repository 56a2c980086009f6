"""Common HTTP Schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.networks import AnyUrl

_URL_ADAPTER = TypeAdapter(AnyUrl)


class SuccessResponse(BaseModel):
    """삭제 성공 응답."""

    success: bool = True


def blank_to_none(value: Any) -> Any:
    """빈 문자열을 None으로 바꿉니다."""
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def validate_url(value: str | None) -> str | None:
    """URL 문법만 검사하고 입력 문자열은 그대로 보존합니다."""
    if value is None:
        return None
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"Invalid URL: {value}") from exc
    return value


def reject_explicit_null(model: BaseModel, required: tuple[str, ...]) -> None:
    """부분 수정 요청에서 필수 필드의 명시적 null을 거부합니다."""
    for name in required:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"'{name}' cannot be null")
