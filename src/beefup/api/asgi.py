"""ASGI entrypoint for the diet tracker API."""

from beefup.api.app import create_app
from beefup.containers import build_container

app = create_app(build_container())
