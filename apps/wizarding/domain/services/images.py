"""Image Resolution.

엔티티 이미지 결정 규칙.
후보 URL을 순서대로 확인하고, 모두 비어 있으면 이름 기반 플레이스홀더를 사용합니다.
"""

from __future__ import annotations

from urllib.parse import quote

from wizarding.domain.constants import PLACEHOLDER_AVATAR_PARAMS, PLACEHOLDER_AVATAR_URL


def placeholder_avatar_url(name: str | None) -> str:
    """이름으로부터 결정적인 플레이스홀더 아바타 URL 생성.

    Args:
        name: 표시 이름 (None이면 빈 문자열로 처리)

    Returns:
        ui-avatars URL
    """
    encoded = quote(name or "", safe="")
    return f"{PLACEHOLDER_AVATAR_URL}?name={encoded}&{PLACEHOLDER_AVATAR_PARAMS}"


def resolve_image(*candidates: str | None, name: str | None) -> str:
    """첫 번째 유효한 이미지 URL 반환.

    Args:
        candidates: 우선순위 순서의 이미지 후보
        name: 플레이스홀더 생성용 표시 이름

    Returns:
        비어 있지 않은 이미지 URL
    """
    for candidate in candidates:
        if candidate:
            return candidate
    return placeholder_avatar_url(name)
