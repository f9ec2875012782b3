import pytest

from core.infrastructure.aws.s3_media_store import S3MediaStore
from core.infrastructure.local.local_media_store import LocalMediaStore
from core.infrastructure.media_store_factory import create_media_store


def test_defaults_to_s3(monkeypatch, aws_mock):
    monkeypatch.delenv("MEDIA_STORE_BACKEND", raising=False)

    assert isinstance(create_media_store(), S3MediaStore)


def test_local_backend(monkeypatch, tmp_path):
    monkeypatch.setenv("MEDIA_STORE_BACKEND", "Local")
    monkeypatch.setenv("UPLOADS_DIR", str(tmp_path))

    assert isinstance(create_media_store(), LocalMediaStore)


def test_unknown_backend(monkeypatch):
    monkeypatch.setenv("MEDIA_STORE_BACKEND", "ftp")

    with pytest.raises(RuntimeError, match="MEDIA_STORE_BACKEND"):
        create_media_store()
