"""Domain Constants.

도메인 레이어의 상수 정의.
"""

# 카탈로그 리소스 타입 (고정 집합, 로드 순서 = 부트스트랩 순서)
RESOURCE_TYPES: tuple[str, ...] = (
    "characters",
    "spells",
    "potions",
    "books",
    "houses",
    "movies",
)

# 플레이스홀더 아바타 (이미지 없는 엔티티용)
PLACEHOLDER_AVATAR_URL = "https://ui-avatars.com/api/"
PLACEHOLDER_AVATAR_PARAMS = "size=400&background=740001&color=f5c518&font-size=0.35&bold=true"

# 영화 상영 시간 (분) - PotterDB에 없는 값, 1-based 개봉 순서
MOVIE_DURATION_MINUTES: dict[int, int] = {
    1: 152,
    2: 161,
    3: 142,
    4: 157,
    5: 138,
    6: 153,
    7: 146,
    8: 130,
}

# 영화 필터 키워드
MOVIE_TITLE_KEYWORD = "harry potter"

# 필드 기본값
UNKNOWN_NAME = "Unknown"
MISSING_TEXT = "—"
