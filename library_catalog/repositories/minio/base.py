"""
Generic Minio-backed document repository.

Each entity is stored as one JSON object named after its id in a bucket
dedicated to the entity type. Filtered queries list the bucket and filter
the decoded documents, which suits the size of a small library's catalog.

A missing object (``NoSuchKey``) means the entity is absent; every other
``S3Error`` is a store failure and propagates unchanged.
"""

import io
import logging
import uuid
from datetime import datetime, timezone
from typing import ClassVar, Generic, List, Optional, Type

from minio.error import S3Error  # type: ignore[import-untyped]

from library_catalog.repositories.base import (
    DuplicateEntityError,
    Filters,
    T,
    matches_filters,
    sort_entities,
)
from .client import MinioClient


def is_no_such_key(error: S3Error) -> bool:
    return getattr(error, "code", None) == "NoSuchKey"


class MinioDocumentRepository(Generic[T]):
    """
    Minio implementation of the DocumentRepository protocol.

    Subclasses set ``model_class``, the id field, the id prefix and the
    bucket holding the entity's documents.
    """

    model_class: ClassVar[Type]
    id_field: ClassVar[str]
    id_prefix: ClassVar[str]
    bucket_name: ClassVar[str]

    def __init__(self, client: MinioClient) -> None:
        """Initialize repository with Minio client.

        Args:
            client: MinioClient protocol implementation (real or fake)
        """
        self.client = client
        self.logger = logging.getLogger(type(self).__name__)
        self.ensure_bucket_exists()

    def ensure_bucket_exists(self) -> None:
        try:
            if not self.client.bucket_exists(self.bucket_name):
                self.logger.info(
                    "Creating bucket", extra={"bucket_name": self.bucket_name}
                )
                self.client.make_bucket(self.bucket_name)
            else:
                self.logger.debug(
                    "Bucket already exists",
                    extra={"bucket_name": self.bucket_name},
                )
        except S3Error as e:
            self.logger.error(
                "Failed to create bucket",
                extra={"bucket_name": self.bucket_name, "error": str(e)},
            )
            raise

    def _read_document(self, object_name: str) -> Optional[T]:
        try:
            response = self.client.get_object(
                bucket_name=self.bucket_name, object_name=object_name
            )
        except S3Error as e:
            if is_no_such_key(e):
                self.logger.debug(
                    "Document not found",
                    extra={
                        "bucket_name": self.bucket_name,
                        "object_name": object_name,
                    },
                )
                return None
            self.logger.error(
                "Error retrieving document",
                extra={
                    "bucket_name": self.bucket_name,
                    "object_name": object_name,
                    "error": str(e),
                },
            )
            raise

        try:
            data = response.read()
        finally:
            response.close()
            response.release_conn()

        return self.model_class.model_validate_json(data)

    def _write_document(self, entity: T) -> None:
        object_name = getattr(entity, self.id_field)
        payload = entity.model_dump_json().encode("utf-8")
        try:
            self.client.put_object(
                bucket_name=self.bucket_name,
                object_name=object_name,
                data=io.BytesIO(payload),
                length=len(payload),
                content_type="application/json",
            )
        except S3Error as e:
            self.logger.error(
                "Error saving document",
                extra={
                    "bucket_name": self.bucket_name,
                    "object_name": object_name,
                    "error": str(e),
                },
            )
            raise

        self.logger.info(
            "Document saved successfully",
            extra={
                "bucket_name": self.bucket_name,
                "object_name": object_name,
                "payload_size_bytes": len(payload),
            },
        )

    def _exists(self, object_name: str) -> bool:
        try:
            self.client.stat_object(
                bucket_name=self.bucket_name, object_name=object_name
            )
        except S3Error as e:
            if is_no_such_key(e):
                return False
            raise
        return True

    async def get(self, entity_id: str) -> Optional[T]:
        """Retrieve an entity by ID."""
        return self._read_document(entity_id)

    async def find(
        self, filters: Optional[Filters] = None, sort_by: Optional[str] = None
    ) -> List[T]:
        """Retrieve every entity matching the filters."""
        found: List[T] = []
        for obj in self.client.list_objects(bucket_name=self.bucket_name):
            entity = self._read_document(obj.object_name)
            # Removed between listing and reading
            if entity is None:
                continue
            if matches_filters(entity, filters):
                found.append(entity)

        self.logger.debug(
            "Find completed",
            extra={
                "bucket_name": self.bucket_name,
                "filters": filters,
                "count": len(found),
            },
        )
        return sort_entities(found, sort_by)

    async def count(self, filters: Optional[Filters] = None) -> int:
        """Count the entities matching the filters."""
        if not filters:
            return sum(
                1 for _ in self.client.list_objects(bucket_name=self.bucket_name)
            )
        return len(await self.find(filters))

    async def insert(self, entity: T) -> str:
        """Store a new entity."""
        entity_id = getattr(entity, self.id_field)
        if self._exists(entity_id):
            raise DuplicateEntityError(
                f"{self.model_class.__name__} {entity_id} already exists"
            )
        self._write_document(entity)
        return entity_id

    async def update(self, entity_id: str, entity: T) -> Optional[T]:
        """Replace every mutable field of a stored entity."""
        existing = self._read_document(entity_id)
        if existing is None:
            return None

        updated = entity.model_copy(
            update={
                self.id_field: entity_id,
                "created_at": existing.created_at,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._write_document(updated)
        return updated

    async def delete(self, entity_id: str) -> bool:
        """Remove an entity."""
        if not self._exists(entity_id):
            return False

        self.client.remove_object(
            bucket_name=self.bucket_name, object_name=entity_id
        )
        self.logger.info(
            "Document removed",
            extra={"bucket_name": self.bucket_name, "object_name": entity_id},
        )
        return True

    async def generate_id(self) -> str:
        """Generate a unique entity identifier."""
        return f"{self.id_prefix}-{uuid.uuid4()}"
