"""Partial update sentinel.

부분 수정 DTO는 속성마다 하나의 슬롯을 가집니다.

- UNSET: 요청에서 생략됨 (기존 값 유지)
- None:  명시적 null (선택 필드를 비움)
- 값:    새 값으로 교체
"""

from __future__ import annotations

from dataclasses import fields
from enum import Enum
from typing import Any


class Unset(Enum):
    """생략된 필드를 나타내는 sentinel."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset.UNSET


def supplied_fields(patch: Any) -> dict[str, Any]:
    """UNSET이 아닌 필드만 반환합니다."""
    return {
        f.name: getattr(patch, f.name)
        for f in fields(patch)
        if getattr(patch, f.name) is not UNSET
    }
