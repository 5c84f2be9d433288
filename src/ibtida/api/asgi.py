"""ASGI entrypoint for the Ibtida API."""

from ibtida.api.app import create_app
from ibtida.containers import build_container

app = create_app(build_container())
