"""ASGI entrypoint for the mentor payouts API."""

from mentor_payouts.api.app import create_app
from mentor_payouts.containers import build_container

app = create_app(build_container())
