"""Allow running the service with ``python -m users_api``."""

from users_api.main import run

run()
