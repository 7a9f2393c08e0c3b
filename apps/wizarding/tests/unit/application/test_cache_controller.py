"""CatalogCacheController Unit Tests.

컨트롤러는 리소스 타입당 단 하나의 upstream 로드만 실행해야 합니다.
실제 InMemoryCatalogStore와 Mock 로더를 사용합니다.
"""

from __future__ import annotations

import asyncio
from typing import AsyncGenerator, Callable
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from wizarding.application.exceptions import (
    UnknownResourceTypeError,
    UpstreamUnavailableError,
)
from wizarding.application.loaders import CatalogLoaderRegistry
from wizarding.application.services.cache_controller import CatalogCacheController
from wizarding.domain.entities import Spell
from wizarding.domain.enums import LoadState
from wizarding.infrastructure.cache import InMemoryCatalogStore


async def _wait_until(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    """조건이 참이 될 때까지 폴링."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(0.005)


class TestCatalogCacheController:
    """CatalogCacheController 테스트."""

    @pytest.fixture
    def gate(self) -> asyncio.Event:
        return asyncio.Event()

    @pytest.fixture
    def loader(self, make_loader: Callable[..., MagicMock]) -> MagicMock:
        return make_loader("spells")

    @pytest.fixture
    def store(self) -> InMemoryCatalogStore:
        return InMemoryCatalogStore(["spells"])

    @pytest_asyncio.fixture
    async def controller(
        self,
        store: InMemoryCatalogStore,
        loader: MagicMock,
    ) -> AsyncGenerator[CatalogCacheController, None]:
        controller = CatalogCacheController(
            store=store,
            registry=CatalogLoaderRegistry([loader]),
            retry_delay=0.01,
        )
        yield controller
        await controller.shutdown()

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_single_load(
        self,
        controller: CatalogCacheController,
        loader: MagicMock,
        gate: asyncio.Event,
        sample_spells: list[Spell],
    ) -> None:
        """동시 요청 N개 → 로더 호출 1회."""

        # Arrange
        async def slow_load() -> list[Spell]:
            await gate.wait()
            return sample_spells

        loader.load.side_effect = slow_load

        # Act
        waiters = [asyncio.create_task(controller.ensure_loaded("spells")) for _ in range(10)]
        await asyncio.sleep(0)
        gate.set()
        await asyncio.gather(*waiters)

        # Assert
        assert loader.load.await_count == 1
        assert controller.is_loaded("spells")

    @pytest.mark.asyncio
    async def test_loaded_resource_is_not_reloaded(
        self,
        controller: CatalogCacheController,
        store: InMemoryCatalogStore,
        loader: MagicMock,
        sample_spells: list[Spell],
    ) -> None:
        """LOADED는 종료 상태 - 이후 호출은 즉시 반환."""
        loader.load.return_value = sample_spells

        await controller.ensure_loaded("spells")
        await controller.ensure_loaded("spells")

        assert loader.load.await_count == 1
        assert len(store.snapshot("spells")) == 25

    @pytest.mark.asyncio
    async def test_failure_releases_all_waiters(
        self,
        store: InMemoryCatalogStore,
        loader: MagicMock,
        gate: asyncio.Event,
    ) -> None:
        """로드 실패 시 대기자 전원 해제, 예외 전파 없음."""

        # Arrange
        async def failing_load() -> list[Spell]:
            await gate.wait()
            raise UpstreamUnavailableError("potterdb", "HTTP 503 for spells")

        loader.load.side_effect = failing_load
        controller = CatalogCacheController(
            store=store,
            registry=CatalogLoaderRegistry([loader]),
            retry_delay=60.0,
        )

        # Act
        waiters = [asyncio.create_task(controller.ensure_loaded("spells")) for _ in range(5)]
        await asyncio.sleep(0)
        gate.set()
        await asyncio.gather(*waiters)

        # Assert
        try:
            assert loader.load.await_count == 1
            assert not controller.is_loaded("spells")
            assert store.state("spells") is LoadState.NOT_LOADED
            assert store.snapshot("spells") == ()
        finally:
            await controller.shutdown()

    @pytest.mark.asyncio
    async def test_failed_load_is_retried_after_delay(
        self,
        controller: CatalogCacheController,
        store: InMemoryCatalogStore,
        loader: MagicMock,
        sample_spells: list[Spell],
    ) -> None:
        """실패 후 retry_delay가 지나면 재시도하여 로드 완료."""
        loader.load.side_effect = [
            UpstreamUnavailableError("potterdb", "ConnectTimeout for spells"),
            sample_spells,
        ]

        await controller.ensure_loaded("spells")
        assert not controller.is_loaded("spells")

        await _wait_until(lambda: controller.is_loaded("spells"))

        assert loader.load.await_count == 2
        assert store.attempts("spells") == 2
        assert len(store.snapshot("spells")) == 25

    @pytest.mark.asyncio
    async def test_shutdown_cancels_pending_retry(
        self,
        store: InMemoryCatalogStore,
        loader: MagicMock,
    ) -> None:
        """shutdown 이후에는 예약된 재시도가 실행되지 않음."""
        loader.load.side_effect = UpstreamUnavailableError("potterdb", "down")
        controller = CatalogCacheController(
            store=store,
            registry=CatalogLoaderRegistry([loader]),
            retry_delay=0.05,
        )

        await controller.ensure_loaded("spells")
        await controller.shutdown()
        await asyncio.sleep(0.1)

        assert loader.load.await_count == 1

    @pytest.mark.asyncio
    async def test_ensure_loaded_within_returns_on_timeout(
        self,
        controller: CatalogCacheController,
        store: InMemoryCatalogStore,
        loader: MagicMock,
        gate: asyncio.Event,
        sample_spells: list[Spell],
    ) -> None:
        """대기 시간 초과 시 False 반환, 로드는 계속 진행."""

        async def slow_load() -> list[Spell]:
            await gate.wait()
            return sample_spells

        loader.load.side_effect = slow_load

        loaded = await controller.ensure_loaded_within("spells", timeout=0.05)

        assert loaded is False
        assert store.state("spells") is LoadState.LOADING

        gate.set()
        await _wait_until(lambda: controller.is_loaded("spells"))
        assert loader.load.await_count == 1

    @pytest.mark.asyncio
    async def test_ensure_loaded_within_returns_true_when_fast(
        self,
        controller: CatalogCacheController,
        loader: MagicMock,
        sample_spells: list[Spell],
    ) -> None:
        loader.load.return_value = sample_spells

        assert await controller.ensure_loaded_within("spells", timeout=1.0) is True

    @pytest.mark.asyncio
    async def test_unknown_resource_raises(self, controller: CatalogCacheController) -> None:
        with pytest.raises(UnknownResourceTypeError):
            await controller.ensure_loaded("wands")
