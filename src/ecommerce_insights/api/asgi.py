"""ASGI entrypoint for the ecommerce insights API."""

from ecommerce_insights.api.app import create_app
from ecommerce_insights.containers import build_container

app = create_app(build_container())
