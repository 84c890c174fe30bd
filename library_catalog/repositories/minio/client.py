"""
The subset of the MinIO client API the catalog repositories call.

``minio.Minio`` satisfies it structurally; the repository tests pass a fake
in-memory client instead.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Protocol, runtime_checkable

from minio import Minio
from minio.datatypes import Object

from library_catalog.config import Settings

logger = logging.getLogger(__name__)


@runtime_checkable
class MinioClient(Protocol):
    """Bucket and object operations used by the MinIO repositories."""

    def bucket_exists(self, bucket_name: str) -> bool:
        """Check if a bucket exists."""
        ...

    def make_bucket(self, bucket_name: str) -> None:
        """Create a bucket.

        Raises:
            S3Error: If bucket creation fails
        """
        ...

    def put_object(
        self,
        bucket_name: str,
        object_name: str,
        data: Any,
        length: int,
        content_type: str = "application/octet-stream",
        metadata: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Store an object in the bucket.

        Raises:
            S3Error: If object storage fails
        """
        ...

    def get_object(self, bucket_name: str, object_name: str) -> Any:
        """Retrieve an object from the bucket.

        Returns:
            HTTP response whose ``read()`` yields the object data

        Raises:
            S3Error: If object retrieval fails (e.g., NoSuchKey)
        """
        ...

    def stat_object(self, bucket_name: str, object_name: str) -> Object:
        """Get object metadata without retrieving the object data.

        Raises:
            S3Error: If object doesn't exist (NoSuchKey) or other errors
        """
        ...

    def list_objects(
        self, bucket_name: str, prefix: Optional[str] = None
    ) -> Iterator[Object]:
        """List the objects in a bucket, optionally under a prefix."""
        ...

    def remove_object(self, bucket_name: str, object_name: str) -> None:
        """Remove an object. Removing a missing object is not an error."""
        ...


def create_minio_client(settings: Settings) -> MinioClient:
    """Create a real MinIO client from application settings."""
    logger.debug(
        "Creating Minio client",
        extra={
            "minio_endpoint": settings.minio_endpoint,
            "secure": settings.minio_secure,
        },
    )
    return Minio(
        settings.minio_endpoint,
        access_key=settings.minio_access_key,
        secret_key=settings.minio_secret_key,
        secure=settings.minio_secure,
    )
