"""Wiring of partitions and domain services, built once per application."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .accounts import AccountDirectory
from .attachments import AttachmentStore
from .config import Settings
from .courses import CourseCatalog
from .database import Partitions, build_partitions
from .faults import FaultModeration
from .records import AnnouncementBoard, DriverLogBook, LocationGallery

logger = logging.getLogger(__name__)


@dataclass
class PortalContainer:
    settings: Settings
    partitions: Partitions
    attachments: AttachmentStore
    accounts: AccountDirectory
    faults: FaultModeration
    courses: CourseCatalog
    drivers: DriverLogBook
    announcements: AnnouncementBoard
    locations: LocationGallery

    @classmethod
    def from_settings(cls, settings: Settings) -> "PortalContainer":
        partitions = build_partitions(settings)
        attachments = AttachmentStore(settings.upload_dir, settings.uploads_url_prefix)
        return cls(
            settings=settings,
            partitions=partitions,
            attachments=attachments,
            accounts=AccountDirectory(partitions["users"]),
            faults=FaultModeration(partitions["faults"]),
            courses=CourseCatalog(partitions["courses"], attachments, cache_ttl=settings.course_cache_ttl),
            drivers=DriverLogBook(partitions["drivers"]),
            announcements=AnnouncementBoard(partitions["messages"]),
            locations=LocationGallery(partitions["locations"], attachments),
        )

    def startup(self) -> None:
        if self.settings.run_db_migrations:
            self.partitions.create_all()
        if self.settings.seed_default_users:
            self.accounts.seed_defaults()
        logger.info("Portal storage ready in %s", self.settings.data_dir)

    def shutdown(self) -> None:
        self.partitions.dispose()
