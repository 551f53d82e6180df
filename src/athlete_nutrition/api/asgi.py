"""ASGI entrypoint for the meal scoring API."""

from athlete_nutrition.api.app import create_app
from athlete_nutrition.containers import build_container

app = create_app(build_container())
