"""Unit tests for driver logs, announcements and location photos."""
from datetime import datetime

from portal.attachments import Upload


def test_announcements_stamped_by_database(container):
    posted = [container.announcements.post(f"notice {n}", "body", "admin") for n in range(3)]

    assert all(isinstance(item.created_at, datetime) for item in posted)
    # Same-second timestamps fall back to insertion order.
    assert [item.id for item in container.announcements.newest_first()] == [item.id for item in reversed(posted)]


def test_driver_log_for_date(container):
    container.drivers.record("2024-05-01", "Avi")
    container.drivers.record("2024-05-02", "Noa")

    assert [entry.name for entry in container.drivers.for_date("2024-05-01")] == ["Avi"]


def test_location_image_optional(container):
    with_image = container.locations.add("technicians", "Server room", Upload("room.jpg", b"jpeg"))
    without_image = container.locations.add("technicians", "Dock")

    assert container.attachments.resolve(with_image.image_url).read_bytes() == b"jpeg"
    assert without_image.image_url is None
