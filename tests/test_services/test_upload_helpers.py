"""Tests for upload validation and storage helpers."""

import io
from datetime import datetime

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from app.core.exceptions import UploadRejectedError
from app.services.uploads import (
    MB,
    UPLOAD_SUBDIRS,
    bucket_for,
    build_upload_path,
    create_upload_dirs,
    public_url,
    sanitize_filename,
    save_upload,
    validate_file,
)


def make_upload(data: bytes, filename: str, content_type: str) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("report 2024.pdf", "report_2024.pdf"),
        ("../../etc/passwd", "passwd"),
        ("сертификат.pdf", "__________.pdf"),
        ("", "file"),
    ],
)
def test_sanitize_filename(name: str, expected: str) -> None:
    assert sanitize_filename(name) == expected


@pytest.mark.parametrize(
    ("mimetype", "bucket"),
    [("image/png", "images"), ("application/pdf", "pdf"), ("text/plain", "misc")],
)
def test_bucket_for(mimetype: str, bucket: str) -> None:
    assert bucket_for(mimetype) == bucket


def test_validate_file_limits() -> None:
    validate_file("image/jpeg", 5 * MB, "image")
    validate_file("application/pdf", 20 * MB, "pdf")
    validate_file("application/msword", MB, "resume")

    with pytest.raises(UploadRejectedError, match="too large"):
        validate_file("image/png", 5 * MB + 1, "image")
    with pytest.raises(UploadRejectedError, match="not allowed"):
        validate_file("image/gif", 10, "image")
    with pytest.raises(UploadRejectedError, match="Resume"):
        validate_file("image/png", 10, "resume")


def test_build_upload_path(tmp_path) -> None:
    path = build_upload_path(tmp_path, "pdf", "Price List.pdf", now=datetime(2024, 3, 9))

    assert path.parent == tmp_path / "pdf" / "2024" / "03"
    timestamp, name = path.name.split("-", 1)
    assert timestamp.isdigit()
    assert name == "Price_List.pdf"


def test_public_url(tmp_path) -> None:
    path = tmp_path / "images" / "2024" / "03" / "1-logo.png"
    url = public_url(tmp_path, path, "https://marine.example/")
    assert url == "https://marine.example/uploads/images/2024/03/1-logo.png"


def test_create_upload_dirs(tmp_path) -> None:
    root = tmp_path / "uploads"
    create_upload_dirs(root)
    create_upload_dirs(root)

    for subdir in UPLOAD_SUBDIRS:
        assert (root / subdir).is_dir()


async def test_save_upload_writes_file(tmp_path) -> None:
    upload = make_upload(b"%PDF-1.4 test", "brochure.pdf", "application/pdf")

    stored = await save_upload(upload, tmp_path, "http://localhost:8000")

    assert stored.path.read_bytes() == b"%PDF-1.4 test"
    assert stored.path.is_relative_to(tmp_path / "pdf")
    assert stored.url.startswith("http://localhost:8000/uploads/pdf/")
    assert stored.as_dict()["originalName"] == "brochure.pdf"
    assert stored.as_dict()["size"] == len(b"%PDF-1.4 test")


async def test_save_upload_rejects_empty_file(tmp_path) -> None:
    upload = make_upload(b"", "empty.png", "image/png")

    with pytest.raises(UploadRejectedError, match="No file uploaded"):
        await save_upload(upload, tmp_path, "http://localhost:8000")


async def test_save_upload_with_explicit_rule(tmp_path) -> None:
    upload = make_upload(b"docx bytes", "cv.docx", "text/plain")

    with pytest.raises(UploadRejectedError):
        await save_upload(upload, tmp_path, "http://localhost:8000", kind="resume")
    assert not any(tmp_path.iterdir())
