"""IMediaHost adapter using Cloudinary."""

import cloudinary
import cloudinary.uploader

from super_happy_dev import config
from super_happy_dev.ports.interfaces import IMediaHost


class CloudinaryUploader(IMediaHost):
    """Uploads episode audio to a fixed Cloudinary folder."""

    def __init__(
        self,
        cloud_name: str = config.CLOUDINARY_CLOUD_NAME,
        api_key: str = config.CLOUDINARY_API_KEY,
        api_secret: str = config.CLOUDINARY_API_SECRET,
        folder: str = config.CLOUDINARY_FOLDER,
    ):
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )
        self._folder = folder

    def upload_audio(self, file_path: str, public_id: str) -> str:
        # Cloudinary stores audio under the "video" resource type
        result = cloudinary.uploader.upload(
            file_path,
            resource_type="video",
            folder=self._folder,
            public_id=public_id,
            overwrite=True,
        )
        return result["secure_url"]
