"""Request rate limiting using SlowAPI.

Route decorators bind to the module-level ``limiter`` at import time, so each
application reconfigures that limiter from its own settings when it is built.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .config import Settings, get_settings


def _build_limiter(settings: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.default_rate_limit],
        enabled=settings.rate_limiting_enabled,
    )


limiter = _build_limiter(get_settings())


def configure_limiter(settings: Settings) -> Limiter:
    limiter.enabled = settings.rate_limiting_enabled
    # slowapi exposes no setter for default limits; take them from a limiter built for these settings.
    limiter._default_limits = _build_limiter(settings)._default_limits
    limiter.reset()
    return limiter


def rate_limit_handler(_: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(status_code=429, content={"error": f"Rate limit exceeded: {exc.detail}"})


def apply_rate_limiter(app: FastAPI, settings: Settings) -> None:
    """Attach the limiter, configured from ``settings``, to an app."""

    app.state.limiter = configure_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
