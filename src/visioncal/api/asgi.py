"""ASGI entrypoint for the visioncal API."""

from visioncal.api.app import create_app
from visioncal.containers import build_container

app = create_app(build_container())
