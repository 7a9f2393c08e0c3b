"""Payload field helpers."""

from __future__ import annotations

from typing import Any


def text_tuple(value: Any) -> tuple[str, ...]:
    """배열 필드를 문자열 튜플로 정규화.

    provider에 따라 배열 대신 쉼표 구분 문자열이 오는 경우가 있습니다.
    None/빈 값은 빈 튜플입니다.
    """
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value if item not in (None, ""))
    return (str(value),)
