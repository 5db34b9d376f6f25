"""ASGI entrypoint for the social media API."""

from social_feed.api.app import create_app
from social_feed.containers import build_container

app = create_app(build_container())
