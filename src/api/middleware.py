"""Per-application rate limiter, keyed by client address."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Limiter applying ``settings.rate_limit`` to every route.

    Used together with ``SlowAPIMiddleware``; each app gets its own
    in-memory counters.
    """
    return Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
