"""
File storage abstraction layer supporting both local filesystem and AWS S3.

Uploaded files (resumes, logos, profile pictures) are stored through this
interface. Local storage keeps files under UPLOAD_DIR, which the app serves
statically at /uploads; S3 storage returns the object URL.
"""

import logging
import os
import uuid
from typing import BinaryIO
import boto3
from botocore.exceptions import ClientError
from jobboard.core.config import settings

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    'pdf': 'application/pdf',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'doc': 'application/msword',
    'txt': 'text/plain',
    'png': 'image/png',
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'gif': 'image/gif',
    'webp': 'image/webp',
}


class StorageError(Exception):
    """Raised when a backend fails to store a file"""


def safe_filename(filename: str) -> str:
    """Strip directory components and whitespace from a client-supplied name"""
    name = os.path.basename(filename or "").strip().replace(" ", "_")
    return name or "upload"


def get_content_type(filename: str) -> str:
    """Determine content type based on file extension"""
    extension = filename.lower().rsplit('.', 1)[-1]
    return CONTENT_TYPES.get(extension, 'application/octet-stream')


class StorageBackend:
    """Abstract base class for storage backends"""

    def upload_file(self, file: BinaryIO, filename: str) -> str:
        """Store file and return its storage key"""
        raise NotImplementedError

    def public_url(self, key: str, base_url: str) -> str:
        """Return the URL clients use to fetch a stored file"""
        raise NotImplementedError


class LocalStorage(StorageBackend):
    """Local filesystem storage backend"""

    def __init__(self, base_dir: str = "uploads"):
        self.base_dir = base_dir
        os.makedirs(self.base_dir, exist_ok=True)

    def upload_file(self, file: BinaryIO, filename: str) -> str:
        """Save file to the uploads directory under a collision-free name"""
        key = f"{uuid.uuid4().hex}_{safe_filename(filename)}"
        file_path = os.path.join(self.base_dir, key)

        with open(file_path, "wb") as buffer:
            buffer.write(file.read())

        return key

    def public_url(self, key: str, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/uploads/{key}"


class S3Storage(StorageBackend):
    """AWS S3 storage backend"""

    def __init__(self):
        self.bucket_name = settings.S3_BUCKET_NAME
        self.region = settings.AWS_REGION

        # If AWS_ACCESS_KEY_ID is not set, boto3 will use IAM roles (for EC2/ECS)
        if settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY:
            self.s3_client = boto3.client(
                's3',
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=self.region
            )
        else:
            self.s3_client = boto3.client('s3', region_name=self.region)

    def upload_file(self, file: BinaryIO, filename: str) -> str:
        """Upload file to S3 and return the object key"""
        key = f"uploads/{uuid.uuid4().hex}_{safe_filename(filename)}"

        try:
            self.s3_client.upload_fileobj(
                file,
                self.bucket_name,
                key,
                ExtraArgs={
                    'ContentType': get_content_type(filename),
                    'ServerSideEncryption': 'AES256'
                }
            )
        except ClientError as e:
            logger.error(f"Error uploading {key} to S3: {e}")
            raise StorageError(f"Failed to upload file to S3: {e}") from e

        return key

    def public_url(self, key: str, base_url: str) -> str:
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"


# Storage factory - returns appropriate backend based on settings
def get_storage() -> StorageBackend:
    """Get storage backend based on USE_S3 setting"""
    if settings.USE_S3:
        if not settings.S3_BUCKET_NAME:
            raise ValueError("S3_BUCKET_NAME must be set when USE_S3=True")
        return S3Storage()
    return LocalStorage(settings.UPLOAD_DIR)


# Singleton instance
storage = get_storage()
