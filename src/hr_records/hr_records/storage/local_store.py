from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from werkzeug.utils import secure_filename

from ..common.datetime_utils import now_local
from ..core.constants import UPLOAD_SUBDIRECTORIES
from ..core.exceptions import ValidationError
from .store import FileStore, UploadedFile

logger = logging.getLogger(__name__)


class LocalFileStorage(FileStore):
    """Keeps uploads under ``<public_root>/uploads/{photos,documents}``.

    Paths handed back to callers are public URLs relative to ``public_root``,
    e.g. ``/uploads/photos/3_1700000000000_me.png``.
    """

    def __init__(self, public_root: str | Path, *, clock: Callable[[], datetime] = now_local):
        self._public_root = Path(public_root)
        self._clock = clock

    @property
    def uploads_dir(self) -> Path:
        return self._public_root / "uploads"

    @property
    def public_root(self) -> Path:
        return self._public_root

    def ensure_dirs(self) -> None:
        for sub in UPLOAD_SUBDIRECTORIES:
            (self.uploads_dir / sub).mkdir(parents=True, exist_ok=True)

    def save(self, file: UploadedFile, subdirectory: str, employee_id: int) -> str:
        if subdirectory not in UPLOAD_SUBDIRECTORIES:
            raise ValidationError(f"Unknown upload folder: {subdirectory}")

        self.ensure_dirs()
        timestamp = int(self._clock().timestamp() * 1000)
        original = secure_filename(file.filename or "") or "upload"
        unique_name = f"{int(employee_id)}_{timestamp}_{original}"

        file.save(str(self.uploads_dir / subdirectory / unique_name))
        logger.info("Stored upload %s for employee %s", unique_name, employee_id)
        return f"/uploads/{subdirectory}/{unique_name}"

    def delete(self, path: str) -> None:
        relative = path.lstrip("/")
        target = (self._public_root / relative).resolve()
        if self._public_root.resolve() not in target.parents:
            logger.warning("Refusing to delete %s outside of %s", path, self._public_root)
            return
        try:
            target.unlink(missing_ok=True)
        except OSError:
            logger.exception("Error deleting file %s", path)
