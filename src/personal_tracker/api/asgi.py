"""ASGI entrypoint for the dashboard API."""

from personal_tracker.api.app import create_app
from personal_tracker.containers import build_container

app = create_app(build_container())
