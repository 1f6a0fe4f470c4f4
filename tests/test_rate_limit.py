from fastapi.testclient import TestClient

from portal.rate_limit import configure_limiter
from services.gateway.app import create_app


def test_limiter_follows_app_settings(settings):
    assert create_app(settings).state.limiter.enabled is False

    limited = settings.model_copy(update={"rate_limiting_enabled": True, "default_rate_limit": "2/minute"})
    app = create_app(limited)
    try:
        assert app.state.limiter.enabled is True
        with TestClient(app) as client:
            assert client.get("/health").status_code == 200
            assert client.get("/health").status_code == 200
            blocked = client.get("/health")
        assert blocked.status_code == 429
        assert blocked.json()["error"].startswith("Rate limit exceeded")
    finally:
        configure_limiter(settings)
