"""Upstream Source Ports.

외부 데이터 provider 추상화 인터페이스.
각 provider는 원시 JSON 레코드(dict)를 반환하고, 필드 매핑은 로더가 담당합니다.
실패 시 UpstreamUnavailableError를 발생시켜야 합니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

RawRecord = dict[str, Any]


class HpApiPort(ABC):
    """hp-api 포트 (캐릭터/주문 구조 소스)."""

    @abstractmethod
    async def fetch_characters(self, timeout: float | None = None) -> list[RawRecord]:
        """전체 캐릭터 조회."""
        pass

    @abstractmethod
    async def fetch_spells(self, timeout: float | None = None) -> list[RawRecord]:
        """전체 주문 조회."""
        pass


class PotterDbPort(ABC):
    """PotterDB 포트 (JSON:API, 페이지네이션).

    레코드는 {"id": ..., "attributes": {...}} 형태입니다.
    """

    @abstractmethod
    async def fetch_pages(
        self,
        resource: str,
        page_size: int,
        max_pages: int,
        timeout: float | None = None,
        keep_partial: bool = False,
    ) -> list[list[RawRecord]]:
        """next 커서를 따라 페이지 단위로 전체 조회.

        Args:
            resource: 컬렉션 경로 (예: "characters")
            page_size: 페이지당 레코드 수
            max_pages: 최대 페이지 수 (비정상 upstream 대비 상한)
            timeout: 요청당 타임아웃 (초)
            keep_partial: True면 페이지 실패 시 예외 대신 그때까지의 페이지 반환

        Returns:
            페이지 순서대로의 레코드 목록 (index 0 = 1페이지)
        """
        pass

    @abstractmethod
    async def fetch_page(
        self,
        resource: str,
        page_size: int,
        timeout: float | None = None,
    ) -> list[RawRecord]:
        """첫 페이지만 조회."""
        pass


class PotterApiPort(ABC):
    """potterapi 포트 (물약/도서/기숙사)."""

    @abstractmethod
    async def fetch_potions(self, timeout: float | None = None) -> list[RawRecord]:
        """전체 물약 조회."""
        pass

    @abstractmethod
    async def fetch_books(self, timeout: float | None = None) -> list[RawRecord]:
        """전체 도서 조회."""
        pass

    @abstractmethod
    async def fetch_houses(self, timeout: float | None = None) -> list[RawRecord]:
        """전체 기숙사 조회."""
        pass
