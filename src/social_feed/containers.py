"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from social_feed.adapters.mock_social_media import MockSocialMediaSource
from social_feed.adapters.social_media_client import (
    HttpxSocialMediaClient,
    SocialMediaSource,
)
from social_feed.config import Settings
from social_feed.services.analytics import AnalyticsService
from social_feed.services.cache import InMemoryCachedFetcher
from social_feed.services.social_media import SocialMediaService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    source: SocialMediaSource
    social_media_service: SocialMediaService
    analytics_service: AnalyticsService
    close_resources: Callable[[], Awaitable[None]]


def build_source(settings: Settings) -> SocialMediaSource:
    """Select the mock tables or the live API based on settings."""
    if settings.use_mock_data:
        return MockSocialMediaSource()
    return HttpxSocialMediaClient.create(
        base_url=settings.social_api_base_url,
        timeout_seconds=settings.http_timeout_seconds,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    source = build_source(resolved_settings)
    social_media_service = SocialMediaService(
        source=source,
        cache=InMemoryCachedFetcher(),
        ttl_seconds=resolved_settings.cache_ttl_seconds,
    )
    analytics_service = AnalyticsService(social_media_service)

    async def close_resources() -> None:
        await source.close()

    return AppContainer(
        settings=resolved_settings,
        source=source,
        social_media_service=social_media_service,
        analytics_service=analytics_service,
        close_resources=close_resources,
    )
