"""Course catalog and its role-keyed visibility policy."""
from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, List, Optional

from cachetools import TTLCache
from sqlalchemy import select

from .attachments import AttachmentStore, Upload
from .database import Partition
from .errors import BadRequest
from .models import Course, RoleEnum

logger = logging.getLogger(__name__)

# Only these two roles are restricted; every other role, known or not, sees everything.
ROLE_DEPARTMENTS: Dict[str, str] = {
    RoleEnum.TECH_ADMIN.value: "technicians",
    RoleEnum.CALL_ADMIN.value: "callcenter",
}

_ALL = "*"


def visibility_scope(role: Optional[str]) -> Optional[str]:
    """Department a role is restricted to, or None when it sees all courses."""

    if role is None:
        return None
    return ROLE_DEPARTMENTS.get(role)


class CourseCatalog:
    def __init__(self, partition: Partition, attachments: AttachmentStore, cache_ttl: int = 30) -> None:
        self._partition = partition
        self._attachments = attachments
        self._cache: Optional[TTLCache] = TTLCache(maxsize=16, ttl=cache_ttl) if cache_ttl > 0 else None
        self._cache_lock = Lock()
        # Bumped on every write; a listing read under an older generation is not cached.
        self._generation = 0

    def list_courses(self, role: Optional[str]) -> List[Course]:
        department = visibility_scope(role)
        key = department or _ALL
        generation = None
        if self._cache is not None:
            with self._cache_lock:
                cached = self._cache.get(key)
                generation = self._generation
            if cached is not None:
                return list(cached)

        statement = select(Course)
        if department is not None:
            statement = statement.where(Course.department == department)
        courses = self._partition.all(statement.order_by(Course.id))

        if self._cache is not None:
            with self._cache_lock:
                if self._generation == generation:
                    self._cache[key] = courses
        return list(courses)

    def submit_by_file(self, title: Optional[str], department: Optional[str], upload: Optional[Upload]) -> Course:
        if upload is None:
            raise BadRequest("No file uploaded")
        file_url = self._attachments.store(upload.data, upload.filename)
        return self._create(Course(title=title, department=department, file_url=file_url))

    def submit_manually(
        self,
        title: Optional[str],
        department: Optional[str],
        content: Optional[str],
        upload: Optional[Upload] = None,
    ) -> Course:
        media_url = self._attachments.store_optional(upload)
        return self._create(Course(title=title, department=department, content=content, media_url=media_url))

    def _create(self, course: Course) -> Course:
        course = self._partition.add(course)
        self.invalidate()
        logger.info("Course %s created for department %s", course.id, course.department or "<all>")
        return course

    def invalidate(self) -> None:
        with self._cache_lock:
            self._generation += 1
            if self._cache is not None:
                self._cache.clear()
