from __future__ import annotations

from typing import BinaryIO, Protocol


class UploadedFile(Protocol):
    """What the storage needs from an upload (werkzeug's FileStorage fits)."""

    filename: str | None

    def save(self, dst: str | BinaryIO) -> None:
        raise NotImplementedError


class FileStore(Protocol):
    """Storage collaborator: save returns a public path, delete accepts one."""

    def ensure_dirs(self) -> None:
        raise NotImplementedError

    def save(self, file: UploadedFile, subdirectory: str, employee_id: int) -> str:
        raise NotImplementedError

    def delete(self, path: str) -> None:
        raise NotImplementedError
