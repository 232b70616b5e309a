"""
utils/media.py
-----------------
Photo uploads to Cloudinary.

An uploader is any callable taking a payload (file object, base64 data
URI, bytes or path) and returning a public URL. CloudinaryUploader is the
production one; tests pass their own.
"""

import logging
import re

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader

from utils.errors import UpstreamError

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def configure_cloudinary(app):
    cloudinary.config(
        cloud_name=app.config.get("CLOUDINARY_CLOUD_NAME"),
        api_key=app.config.get("CLOUDINARY_API_KEY"),
        api_secret=app.config.get("CLOUDINARY_API_SECRET"),
        secure=True,
    )


class CloudinaryUploader:

    def __init__(self, folder="employees"):
        self.folder = folder

    def __call__(self, payload):
        try:
            result = cloudinary.uploader.upload(payload, folder=self.folder)
        except cloudinary.exceptions.Error as err:
            raise UpstreamError(err, field="employee_photo") from err
        url = result.get("secure_url") or ""
        logger.info("Uploaded photo to %s", url)
        return url


def is_url(value):
    return isinstance(value, str) and bool(URL_PATTERN.match(value))


def resolve_photo(value, uploader):
    """
    Return the URL to store for a photo value: empty stays empty, URLs
    are kept as they are, anything else is uploaded first.
    """
    if not value:
        return ""
    if is_url(value):
        return value
    return uploader(value)
