# safepin/services/storage_client.py
"""
S3 object storage for uploaded photos and drawings.

Works against AWS S3 or any S3-compatible endpoint (MinIO, Supabase
Storage's S3 gateway) through ``S3_ENDPOINT_URL``.
"""
import logging
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from safepin.core.config import settings
from safepin.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

CACHE_CONTROL = "max-age=3600"


class StorageClient:
    def __init__(
        self,
        bucket: str,
        *,
        region: str,
        endpoint_url: str | None = None,
        public_base_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        s3_client=None,
    ):
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self._s3 = s3_client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    def public_url(self, key: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url}/{key}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    def upload(self, key: str, body: bytes, content_type: str | None = None) -> str:
        """Store ``body`` under ``key`` and return its public URL."""
        extra = {"ContentType": content_type} if content_type else {}
        try:
            self._s3.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                CacheControl=CACHE_CONTROL,
                **extra,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Upload of %s to bucket %s failed: %s", key, self.bucket, e, exc_info=True)
            raise UpstreamError(f"Upload failed: {e}")
        return self.public_url(key)


@lru_cache
def _build_storage_client() -> StorageClient:
    return StorageClient(
        settings.S3_BUCKET_NAME,
        region=settings.AWS_REGION,
        endpoint_url=settings.S3_ENDPOINT_URL,
        public_base_url=settings.S3_PUBLIC_BASE_URL,
        access_key_id=settings.AWS_ACCESS_KEY_ID,
        secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
    )


def get_storage_client() -> StorageClient:
    if not settings.S3_BUCKET_NAME:
        raise UpstreamError("Object storage is not configured")
    return _build_storage_client()
