"""ASGI entrypoint for the bot webhook."""

from edamam_bot.api.app import create_app
from edamam_bot.containers import build_container

app = create_app(build_container())
