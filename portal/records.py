"""Flat, append-only operational records: driver logs, announcements and location photos."""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select

from .attachments import AttachmentStore, Upload
from .database import Partition
from .models import Announcement, DriverLog, LocationPhoto


class DriverLogBook:
    def __init__(self, partition: Partition) -> None:
        self._partition = partition

    def record(self, date: Optional[str], name: Optional[str]) -> DriverLog:
        return self._partition.add(DriverLog(date=date, name=name))

    def for_date(self, date: str) -> List[DriverLog]:
        return self._partition.all(select(DriverLog).where(DriverLog.date == date).order_by(DriverLog.id))


class AnnouncementBoard:
    def __init__(self, partition: Partition) -> None:
        self._partition = partition

    def post(self, title: Optional[str], content: Optional[str], created_by: Optional[str]) -> Announcement:
        return self._partition.add(Announcement(title=title, content=content, created_by=created_by))

    def newest_first(self) -> List[Announcement]:
        return self._partition.all(
            select(Announcement).order_by(Announcement.created_at.desc(), Announcement.id.desc())
        )


class LocationGallery:
    def __init__(self, partition: Partition, attachments: AttachmentStore) -> None:
        self._partition = partition
        self._attachments = attachments

    def add(self, department: Optional[str], title: Optional[str], image: Optional[Upload] = None) -> LocationPhoto:
        image_url = self._attachments.store_optional(image)
        return self._partition.add(LocationPhoto(department=department, title=title, image_url=image_url))

    def for_department(self, department: str) -> List[LocationPhoto]:
        return self._partition.all(
            select(LocationPhoto).where(LocationPhoto.department == department).order_by(LocationPhoto.id)
        )
