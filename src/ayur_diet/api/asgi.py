"""ASGI entrypoint for the diet planner API."""

from ayur_diet.api.app import create_app
from ayur_diet.containers import build_container

app = create_app(build_container())
