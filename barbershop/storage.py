# barbershop/storage.py

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from barbershop.config import Settings
from barbershop.core import random_image_name
from barbershop.errors import UploadFailure
from barbershop.log import get_logger

logger = get_logger(__name__)


class ImageStorage:
    """Profile images in an S3 bucket, addressed by random hex keys."""

    def __init__(self, client, bucket_name: str, region: str):
        self.client = client
        self.bucket_name = bucket_name
        self.region = region

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageStorage":
        client = boto3.client(
            "s3",
            region_name=settings.bucket_region,
            aws_access_key_id=settings.access_key or None,
            aws_secret_access_key=settings.secret_access_key or None,
        )
        return cls(client, settings.bucket_name, settings.bucket_region)

    def url_for(self, key: str) -> str:
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    @staticmethod
    def key_from_url(url: str) -> str:
        return url.rsplit("/", 1)[-1]

    def upload(self, body: bytes, content_type: str) -> str:
        """Store `body` under a fresh key and return its public URL."""
        key = random_image_name()
        try:
            self.client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("Upload of %s to bucket %s failed: %s", key, self.bucket_name, exc)
            raise UploadFailure("Unable to upload image.") from exc
        logger.info("Uploaded image %s (%d bytes)", key, len(body))
        return self.url_for(key)

    def delete(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket_name, Key=key)
        except (BotoCoreError, ClientError) as exc:
            logger.error("Delete of %s from bucket %s failed: %s", key, self.bucket_name, exc)
            raise UploadFailure("Unable to delete image.") from exc
