"""ASGI entrypoint for the Replate API."""

from replate.api.app import create_app
from replate.containers import build_container

app = create_app(build_container())
