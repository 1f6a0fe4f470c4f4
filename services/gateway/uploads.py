from typing import Optional

from fastapi import UploadFile

from portal.attachments import Upload


def read_upload(file: Optional[UploadFile]) -> Optional[Upload]:
    """Turn a multipart file field into an Upload; an empty field counts as no file."""

    if file is None or not file.filename:
        return None
    return Upload(filename=file.filename, data=file.file.read())
