"""
Client for the Cloudinary image host.
Uploads post images with an unsigned upload preset and returns their hosted URL.
"""

import logging
from dataclasses import dataclass

import httpx

from readify.core.config import Settings
from readify.core.errors import UpstreamUploadFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedImage:
    url: str
    public_id: str


class CloudinaryUploader:
    """Uploads raw image data (data URI, base64 or remote URL) to Cloudinary."""

    def __init__(
        self,
        cloud_name: str,
        upload_preset: str,
        base_url: str = "https://api.cloudinary.com",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the uploader.

        Args:
            cloud_name: Cloudinary cloud (account) name
            upload_preset: Name of the unsigned upload preset to apply
            base_url: Base URL of the Cloudinary API
            timeout: Request timeout in seconds
            client: Pre-built HTTP client, mainly for tests
        """
        self.cloud_name = cloud_name
        self.upload_preset = upload_preset
        self.base_url = base_url.rstrip('/')
        self.client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CloudinaryUploader":
        return cls(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            upload_preset=settings.CLOUDINARY_UPLOAD_PRESET,
            base_url=settings.CLOUDINARY_API_URL,
            timeout=settings.UPLOAD_TIMEOUT,
        )

    @property
    def upload_url(self) -> str:
        return f"{self.base_url}/v1_1/{self.cloud_name}/image/upload"

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def upload(self, image_data: str) -> UploadedImage:
        """
        Upload an image to the media host.

        Args:
            image_data: Data URI, base64 payload or URL of the image

        Returns:
            UploadedImage with the hosted URL and Cloudinary public id

        Raises:
            UpstreamUploadFailure: on transport errors, non-2xx replies or a malformed reply
        """
        try:
            response = await self.client.post(
                self.upload_url,
                data={"file": image_data, "upload_preset": self.upload_preset},
            )
        except httpx.HTTPError as e:
            logger.error(f"Image upload failed: {str(e)}")
            raise UpstreamUploadFailure(f"Image upload failed: {str(e)}") from e

        if response.is_error:
            message = _error_message(response)
            logger.error(f"Image upload rejected: {response.status_code} - {message}")
            raise UpstreamUploadFailure(message)

        try:
            data = response.json()
            uploaded = UploadedImage(url=data["url"], public_id=data["public_id"])
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Unexpected upload response: {response.text}")
            raise UpstreamUploadFailure("Image host returned an unexpected response.") from e

        logger.info(f"Uploaded image {uploaded.public_id}")
        return uploaded


def _error_message(response: httpx.Response) -> str:
    # Cloudinary reports failures as {"error": {"message": ...}}
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return f"Image host responded with status {response.status_code}."
