# tests/test_upload.py
import re

import pytest
from botocore.exceptions import ClientError

from safepin.core.exceptions import UpstreamError
from safepin.services import media_service
from safepin.services.storage_client import StorageClient

UPLOAD_URL = "/api/v1/upload"
MB = 1024 * 1024


class TestUploadEndpoint:
    def test_student_uploads_photo(self, client, storage, student_headers):
        response = client.post(
            UPLOAD_URL,
            files={"file": ("hazard photo.jpg", b"\xff\xd8" + b"0" * (2 * MB), "image/jpeg")},
            headers=student_headers,
        )

        assert response.status_code == 201
        url = response.json()["url"]
        assert re.fullmatch(r"https://cdn\.test/safety-pins/[0-9]+-hazard_photo\.jpg", url)
        assert len(storage.uploads) == 1
        key, size, content_type = storage.uploads[0]
        assert size == 2 * MB + 2
        assert content_type == "image/jpeg"

    def test_teacher_may_upload(self, client, storage, teacher_headers):
        response = client.post(
            UPLOAD_URL,
            files={"file": ("drawing.png", b"\x89PNG....", "image/png")},
            headers=teacher_headers,
        )

        assert response.status_code == 201

    def test_oversized_file_is_rejected(self, client, storage, student_headers):
        response = client.post(
            UPLOAD_URL,
            files={"file": ("big.jpg", b"0" * (15 * MB), "image/jpeg")},
            headers=student_headers,
        )

        assert response.status_code == 400
        assert "10 MB" in response.json()["error"]
        assert storage.uploads == []

    def test_no_file(self, client, storage, student_headers):
        response = client.post(UPLOAD_URL, headers=student_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "No file was uploaded"}

    def test_empty_file(self, client, storage, student_headers):
        response = client.post(
            UPLOAD_URL,
            files={"file": ("empty.jpg", b"", "image/jpeg")},
            headers=student_headers,
        )

        assert response.status_code == 400

    def test_requires_token(self, client, storage):
        response = client.post(
            UPLOAD_URL, files={"file": ("a.jpg", b"data", "image/jpeg")}
        )

        assert response.status_code == 401
        assert storage.uploads == []


class TestStorageKeys:
    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("photo.jpg", "photo.jpg"),
            ("my photo (1).jpg", "my_photo__1_.jpg"),
            ("../../etc/passwd", ".._.._etc_passwd"),
            ("안전.png", "__.png"),
        ],
    )
    def test_sanitize(self, filename, expected):
        assert media_service.sanitize_filename(filename) == expected

    def test_key_layout(self):
        key = media_service.build_storage_key("a b.png", timestamp_ms=1700000000000)

        assert key == "safety-pins/1700000000000-a_b.png"


class FakeS3:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def put_object(self, **kwargs):
        if self.error is not None:
            raise self.error
        self.calls.append(kwargs)


class TestStorageClient:
    def test_put_object_and_aws_url(self):
        s3 = FakeS3()
        storage = StorageClient("pins-bucket", region="ap-northeast-2", s3_client=s3)

        url = storage.upload("safety-pins/1-a.jpg", b"data", "image/jpeg")

        assert url == "https://pins-bucket.s3.ap-northeast-2.amazonaws.com/safety-pins/1-a.jpg"
        call = s3.calls[0]
        assert call["Bucket"] == "pins-bucket"
        assert call["Key"] == "safety-pins/1-a.jpg"
        assert call["ContentType"] == "image/jpeg"
        assert call["CacheControl"] == "max-age=3600"

    def test_public_base_url_wins(self):
        storage = StorageClient(
            "pins-bucket",
            region="ap-northeast-2",
            endpoint_url="http://minio:9000",
            public_base_url="https://cdn.example.kr/",
            s3_client=FakeS3(),
        )

        assert storage.public_url("k.jpg") == "https://cdn.example.kr/k.jpg"

    def test_custom_endpoint_url(self):
        storage = StorageClient(
            "pins-bucket",
            region="ap-northeast-2",
            endpoint_url="http://minio:9000/",
            s3_client=FakeS3(),
        )

        assert storage.public_url("k.jpg") == "http://minio:9000/pins-bucket/k.jpg"

    def test_client_error_becomes_upstream_error(self):
        error = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")
        storage = StorageClient("pins-bucket", region="ap-northeast-2", s3_client=FakeS3(error))

        with pytest.raises(UpstreamError):
            storage.upload("k.jpg", b"data")

    def test_storage_failure_is_500(self, client, student_headers):
        from safepin.main import app
        from safepin.services.storage_client import get_storage_client

        error = ClientError({"Error": {"Code": "NoSuchBucket", "Message": "gone"}}, "PutObject")
        app.dependency_overrides[get_storage_client] = lambda: StorageClient(
            "pins-bucket", region="ap-northeast-2", s3_client=FakeS3(error)
        )

        response = client.post(
            UPLOAD_URL,
            files={"file": ("a.jpg", b"data", "image/jpeg")},
            headers=student_headers,
        )

        assert response.status_code == 500
        assert response.json()["error"].startswith("Upload failed")
