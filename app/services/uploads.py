"""File upload storage bucketed by type and date."""

import re
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from fastapi import UploadFile

from app.core.exceptions import UploadRejectedError
from app.core.logging import get_logger

logger = get_logger("app.services.uploads")

MB = 1024 * 1024
MAX_UPLOAD_SIZE = 25 * MB
MAX_FILES_PER_REQUEST = 10

IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})
PDF_TYPES = frozenset({"application/pdf"})
RESUME_TYPES = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)

UPLOAD_SUBDIRS = (
    "images/team",
    "images/news",
    "images/catalog",
    "images/projects",
    "images/services",
    "images/about",
    "images/partners",
    "pdf",
    "resumes",
)


@dataclass(frozen=True)
class FileRule:
    """Accepted MIME types and size limit for one kind of upload."""

    mime_types: frozenset[str]
    max_size: int
    label: str


FILE_RULES: dict[str, FileRule] = {
    "image": FileRule(IMAGE_TYPES, 5 * MB, "Image"),
    "pdf": FileRule(PDF_TYPES, 20 * MB, "PDF"),
    "resume": FileRule(RESUME_TYPES, 10 * MB, "Resume"),
}


@dataclass(frozen=True)
class StoredFile:
    """A file written under the upload root."""

    path: Path
    url: str
    filename: str
    original_name: str
    mimetype: str
    size: int

    def as_dict(self) -> dict[str, str | int]:
        return {
            "url": self.url,
            "filename": self.filename,
            "originalName": self.original_name,
            "mimetype": self.mimetype,
            "size": self.size,
        }


def bucket_for(mimetype: str) -> str:
    """Top-level upload folder for a MIME type."""
    if mimetype.startswith("image/"):
        return "images"
    if mimetype == "application/pdf":
        return "pdf"
    return "misc"


def kind_for(mimetype: str) -> str:
    """Validation rule applied to a generic upload."""
    return "image" if mimetype.startswith("image/") else "pdf"


def sanitize_filename(name: str) -> str:
    """Replace anything but ASCII letters, digits, dots and dashes."""
    cleaned = re.sub(r"[^a-zA-Z0-9.-]", "_", Path(name or "").name)
    return cleaned or "file"


def validate_file(mimetype: str, size: int, kind: str) -> None:
    """Check a file against the rule for its kind.

    Raises:
        UploadRejectedError: If the type is not accepted or the file is too big
    """
    rule = FILE_RULES[kind]
    if mimetype not in rule.mime_types:
        raise UploadRejectedError(f"{rule.label} file type '{mimetype}' is not allowed")
    if size > rule.max_size:
        raise UploadRejectedError(
            f"{rule.label} file is too large (max {rule.max_size // MB} MB)"
        )


def build_upload_path(
    root: str | Path, bucket: str, original_name: str, now: datetime | None = None
) -> Path:
    """``<root>/<bucket>/<YYYY>/<MM>/<timestamp>-<sanitized name>``."""
    now = now or datetime.now()
    timestamp = int(time.time() * 1000)
    return (
        Path(root)
        / bucket
        / f"{now.year:04d}"
        / f"{now.month:02d}"
        / f"{timestamp}-{sanitize_filename(original_name)}"
    )


def public_url(root: str | Path, path: Path, base_url: str) -> str:
    """Absolute URL of a stored file served under ``/uploads``."""
    relative = path.relative_to(Path(root)).as_posix()
    return f"{base_url.rstrip('/')}/uploads/{relative}"


def create_upload_dirs(root: str | Path) -> None:
    """Create the upload root and its standard sub-folders."""
    for subdir in UPLOAD_SUBDIRS:
        (Path(root) / subdir).mkdir(parents=True, exist_ok=True)
    logger.info("upload_dirs_ready", root=str(root))


async def save_upload(
    file: UploadFile,
    root: str | Path,
    base_url: str,
    kind: str | None = None,
    bucket: str | None = None,
) -> StoredFile:
    """Validate and write an uploaded file.

    Args:
        file: Incoming multipart file
        root: Upload root directory
        base_url: Public base URL of the site
        kind: Validation rule; derived from the MIME type when omitted
        bucket: Target folder; derived from the MIME type when omitted

    Returns:
        Details of the stored file

    Raises:
        UploadRejectedError: If the file is empty, too big or of a refused type
    """
    mimetype = file.content_type or "application/octet-stream"
    data = await file.read()
    if not data:
        raise UploadRejectedError("No file uploaded")
    if len(data) > MAX_UPLOAD_SIZE:
        raise UploadRejectedError(f"File is too large (max {MAX_UPLOAD_SIZE // MB} MB)")

    validate_file(mimetype, len(data), kind or kind_for(mimetype))

    original_name = file.filename or "file"
    path = build_upload_path(root, bucket or bucket_for(mimetype), original_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)

    logger.info(
        "file_uploaded",
        filename=path.name,
        mimetype=mimetype,
        size=len(data),
    )
    return StoredFile(
        path=path,
        url=public_url(root, path, base_url),
        filename=path.name,
        original_name=original_name,
        mimetype=mimetype,
        size=len(data),
    )
