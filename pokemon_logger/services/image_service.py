"""Image storage on S3."""

import asyncio
import io
import logging
import uuid
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from PIL import Image, UnidentifiedImageError

from pokemon_logger.config import Settings, get_settings
from pokemon_logger.errors import UpstreamError, ValidationError
from pokemon_logger.services.aws import build_aws_client

logger = logging.getLogger(__name__)

MAX_DIMENSION = 800
JPEG_QUALITY = 85
UPLOAD_PREFIX = "pokemon-images"
GENERATED_PREFIX = "pokemon-generated"


def prepare_image(data: bytes) -> bytes:
    """Shrink an image to fit 800x800 and re-encode it as JPEG.

    Smaller images are not enlarged.

    Raises:
        ValidationError: the bytes are not a decodable image
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.thumbnail((MAX_DIMENSION, MAX_DIMENSION))
            output = io.BytesIO()
            image.convert("RGB").save(output, format="JPEG", quality=JPEG_QUALITY)
    except (UnidentifiedImageError, OSError) as e:
        raise ValidationError("Invalid image file") from e
    return output.getvalue()


class ImageService:
    """Uploads images to the configured bucket and signs retrieval URLs.

    boto3 is blocking, so every SDK call runs in a worker thread.
    """

    def __init__(self, settings: Settings | None = None, s3_client: Any | None = None):
        self.settings = settings or get_settings()
        self.bucket = self.settings.aws_s3_bucket
        self.s3 = s3_client or build_aws_client("s3", self.settings)

    async def upload_image(self, jpeg_data: bytes) -> str:
        """Store a photo already passed through ``prepare_image``; returns its object key."""
        key = f"{UPLOAD_PREFIX}/{uuid.uuid4()}.jpg"
        await self._put(key, jpeg_data, "image/jpeg")
        logger.info(f"Uploaded image {key} ({len(jpeg_data)} bytes)")
        return key

    async def upload_generated_image(self, data: bytes) -> str:
        """Store model-generated PNG artwork as-is; returns its object key."""
        key = f"{GENERATED_PREFIX}/{uuid.uuid4()}.png"
        await self._put(key, data, "image/png")
        logger.info(f"Uploaded generated image {key}")
        return key

    async def get_signed_url(self, key: str) -> str:
        """Presigned GET URL for an object, valid for a limited time."""
        try:
            return await asyncio.to_thread(
                self.s3.generate_presigned_url,
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=self.settings.signed_url_expires_seconds,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error generating signed URL for {key}: {e}")
            raise UpstreamError("Failed to generate signed URL") from e

    async def _put(self, key: str, body: bytes, content_type: str) -> None:
        try:
            await asyncio.to_thread(
                self.s3.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error uploading {key}: {e}")
            raise UpstreamError("Failed to upload image") from e
