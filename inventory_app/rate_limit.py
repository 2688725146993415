"""Request-rate protection."""

from __future__ import annotations

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


def init_rate_limiting(app: Flask) -> Limiter:
    """Attach a per-app limiter.

    Limits, storage and the on/off switch come from the RATELIMIT_* config
    keys. The health check is exempt so probes never get throttled.
    """

    limiter = Limiter(get_remote_address, app=app)

    health = app.view_functions.get("health.health_check")
    if health is not None:
        limiter.exempt(health)
    return limiter
