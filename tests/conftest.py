import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

_SCRATCH = Path(tempfile.mkdtemp(prefix="portal-tests-"))
os.environ.setdefault("DATA_DIR", str(_SCRATCH / "data"))
os.environ.setdefault("UPLOAD_DIR", str(_SCRATCH / "uploads"))
os.environ.setdefault("LOG_DIR", str(_SCRATCH / "logs"))
os.environ.setdefault("RATE_LIMITING_ENABLED", "false")

from portal.config import Settings, reset_settings_cache  # noqa: E402

reset_settings_cache()

from portal.container import PortalContainer  # noqa: E402
from services.gateway.app import create_app  # noqa: E402


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        data_dir=tmp_path / "data",
        upload_dir=tmp_path / "uploads",
        log_dir=tmp_path / "logs",
        rate_limiting_enabled=False,
    )


@pytest.fixture()
def container(settings: Settings) -> Generator[PortalContainer, None, None]:
    portal = PortalContainer.from_settings(settings)
    portal.startup()
    yield portal
    portal.shutdown()


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture()
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
