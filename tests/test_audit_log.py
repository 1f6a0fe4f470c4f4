from fastapi.testclient import TestClient

from services.gateway.app import create_app


def test_audit_log_written_to_configured_directory(settings, tmp_path):
    first = settings.model_copy(update={"log_dir": tmp_path / "first-logs"})
    second = settings.model_copy(update={"log_dir": tmp_path / "second-logs"})

    with TestClient(create_app(first)) as client:
        client.get("/health")
    with TestClient(create_app(second)) as client:
        client.get("/faults")

    first_log = (tmp_path / "first-logs" / "portal.log").read_text()
    second_log = (tmp_path / "second-logs" / "portal.log").read_text()
    assert "GET /health | status=200" in first_log
    assert "GET /faults | status=200" in second_log
    assert "/faults" not in first_log
