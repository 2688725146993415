"""File storage for item images."""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from flask import current_app
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from inventory_app.errors import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "webp"})


def has_upload(upload: FileStorage | None) -> bool:
    """True when the form carried a file (browsers send an empty part otherwise)."""

    return upload is not None and bool(upload.filename)


class UploadStorage:
    """Stores uploaded files under a root folder and hands back a reference.

    The reference is the stored file name; it is what gets saved on the item
    and what `/uploads/<reference>` serves.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root).resolve()

    def validate(self, upload: FileStorage) -> str | None:
        """Return an error message for an unacceptable upload, else None."""

        filename = secure_filename(upload.filename or "")
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if ext not in ALLOWED_EXTENSIONS:
            allowed = ", ".join(sorted(ALLOWED_EXTENSIONS))
            return f"Image must be one of: {allowed}"
        return None

    def save(self, upload: FileStorage) -> str:
        error = self.validate(upload)
        if error:
            raise ValidationError({"image": [error]}, message=error)

        self.root.mkdir(parents=True, exist_ok=True)
        reference = f"{uuid.uuid4().hex}_{secure_filename(upload.filename or '')}"
        upload.save(self.root / reference)
        logger.info("Stored upload %s", reference)
        return reference

    def path_for(self, reference: str) -> Path:
        return self.root / secure_filename(reference)

    def delete(self, reference: str | None) -> None:
        if not reference:
            return
        self.path_for(reference).unlink(missing_ok=True)
        logger.info("Removed upload %s", reference)


def get_upload_storage() -> UploadStorage:
    return UploadStorage(current_app.config["UPLOAD_FOLDER"])
