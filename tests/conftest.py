"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from social_feed.adapters.mock_social_media import MockSocialMediaSource
from social_feed.adapters.social_media_client import SocialMediaSource
from social_feed.config import Settings
from social_feed.containers import AppContainer
from social_feed.services.analytics import AnalyticsService
from social_feed.services.cache import InMemoryCachedFetcher
from social_feed.services.social_media import SocialMediaService


@dataclass
class FakeClock:
    """Manually advanced clock returning epoch milliseconds."""

    now: int = 0

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


@dataclass
class CountingSource(SocialMediaSource):
    """Source wrapper that counts calls and can be switched to fail."""

    inner: SocialMediaSource = field(default_factory=MockSocialMediaSource)
    calls: list[str] = field(default_factory=list)
    failing: bool = False
    closed: bool = False

    async def fetch_users(self) -> dict[str, object]:
        self.calls.append("users")
        self._maybe_fail()
        return await self.inner.fetch_users()

    async def fetch_user_posts(self, user_id: str) -> dict[str, object]:
        self.calls.append(f"posts:{user_id}")
        self._maybe_fail()
        return await self.inner.fetch_user_posts(user_id)

    async def fetch_post_comments(self, post_id: int) -> dict[str, object]:
        self.calls.append(f"comments:{post_id}")
        self._maybe_fail()
        return await self.inner.fetch_post_comments(post_id)

    async def close(self) -> None:
        self.closed = True

    def _maybe_fail(self) -> None:
        if self.failing:
            raise ConnectionError("upstream unavailable")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        social_api_base_url="https://social.test/api",
        use_mock_data=True,
        cache_ttl_seconds=300,
        cors_origins="*",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(now=1_700_000_000_000)


@pytest.fixture
def source() -> CountingSource:
    return CountingSource()


@pytest.fixture
def social_media_service(
    source: CountingSource, clock: FakeClock
) -> SocialMediaService:
    return SocialMediaService(
        source=source,
        cache=InMemoryCachedFetcher(clock=clock),
        ttl_seconds=300,
    )


@pytest.fixture
def container(
    settings: Settings,
    source: CountingSource,
    social_media_service: SocialMediaService,
) -> AppContainer:
    async def close_resources() -> None:
        await source.close()

    return AppContainer(
        settings=settings,
        source=source,
        social_media_service=social_media_service,
        analytics_service=AnalyticsService(social_media_service),
        close_resources=close_resources,
    )
