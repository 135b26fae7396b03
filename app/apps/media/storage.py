"""
Local media storage
Writes accepted uploads under UPLOAD_DIR and removes them on request
"""
from pathlib import Path
from typing import Any, Dict, List
import logging
import secrets

from app.config import ALLOWED_UPLOAD_TYPES, MAX_UPLOAD_SIZE, UPLOAD_DIR, UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


class UploadRejected(Exception):
    """The file type or size is not accepted"""


class LocalMediaStorage:
    def __init__(
        self,
        upload_dir: Path,
        url_prefix: str = UPLOAD_URL_PREFIX,
        allowed_types: List[str] = ALLOWED_UPLOAD_TYPES,
        max_size: int = MAX_UPLOAD_SIZE,
    ):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.allowed_types = allowed_types
        self.max_size = max_size

    def _path_for(self, file_key: str) -> Path:
        """Resolve a key inside the upload dir, refusing anything that escapes it"""
        root = self.upload_dir.resolve()
        path = (root / file_key).resolve()
        if path.parent != root:
            raise ValueError(f"Invalid file key: {file_key}")
        return path

    def save(self, content: bytes, original_name: str, content_type: str) -> Dict[str, Any]:
        """
        Store an uploaded file under a random name.

        Args:
            content: The file content as bytes.
            original_name: The client-side filename, only its extension is kept.
            content_type: The MIME type reported by the client.

        Returns:
            The upload record persisted by media.upload.

        Raises:
            UploadRejected: unsupported MIME type or file over the size limit.
        """
        if content_type not in self.allowed_types:
            raise UploadRejected(
                f"Invalid file type. Allowed types: {', '.join(self.allowed_types)}"
            )
        if len(content) > self.max_size:
            raise UploadRejected(f"File too large. Maximum size: {self.max_size} bytes")

        suffix = Path(original_name or "").suffix.lower()
        filename = f"{secrets.token_urlsafe(9)}{suffix}"  # 12 characters + extension

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self._path_for(filename).write_bytes(content)
        logger.info(f"Stored upload {filename} ({len(content)} bytes)")

        return {
            "filename": filename,
            "original_name": original_name,
            "mime_type": content_type,
            "size": len(content),
            "url": f"{self.url_prefix}/{filename}",
            "file_key": filename,
        }

    def delete(self, file_key: str) -> bool:
        """
        Remove a stored file.

        Returns:
            True when the file was removed, False when it was already gone.
        """
        path = self._path_for(file_key)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning(f"Stored file already absent: {file_key}")
            return False
        logger.info(f"Removed stored file {file_key}")
        return True


# Initialize the media storage service
media_storage = LocalMediaStorage(UPLOAD_DIR)


def get_media_storage() -> LocalMediaStorage:
    """Dependency, overridden in tests"""
    return media_storage
