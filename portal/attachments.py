"""Attachment store: writes uploaded media to disk under generated names."""
from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import NotFound, StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Upload:
    filename: str
    data: bytes


class AttachmentStore:
    def __init__(self, directory: Path, url_prefix: str = "/uploads") -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.url_prefix = "/" + url_prefix.strip("/")

    @staticmethod
    def generate_name(original_name: str) -> str:
        # Millisecond timestamp keeps names sortable; the random part keeps them unique.
        millis = time.time_ns() // 1_000_000
        return f"{millis}-{uuid.uuid4().hex[:12]}{Path(original_name or '').suffix.lower()}"

    def store(self, data: bytes, original_name: str) -> str:
        name = self.generate_name(original_name)
        target = self.directory / name
        try:
            with open(target, "xb") as handle:
                handle.write(data)
        except OSError as exc:
            raise StorageError(f"Could not store attachment: {exc}") from exc
        logger.info("Stored attachment %s (%d bytes)", name, len(data))
        return f"{self.url_prefix}/{name}"

    def store_optional(self, upload: Optional[Upload]) -> Optional[str]:
        if upload is None:
            return None
        return self.store(upload.data, upload.filename)

    def resolve(self, reference: str) -> Path:
        """Map a reference returned by ``store`` back to the file on disk."""

        prefix = f"{self.url_prefix}/"
        if not reference.startswith(prefix):
            raise NotFound(f"Attachment '{reference}' not found")
        name = reference[len(prefix):]
        path = self.directory / name
        if "/" in name or not path.is_file():
            raise NotFound(f"Attachment '{reference}' not found")
        return path
