"""
In-memory stand-in for the minio.Minio client.

Implements the MinioClient protocol closely enough for the repositories:
objects are byte strings in per-bucket dictionaries, and missing objects
raise ``S3Error`` with code ``NoSuchKey`` like the real service.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from minio.datatypes import Object
from minio.error import S3Error  # type: ignore[import-untyped]


class FakeResponse:
    """Minimal HTTP response returned by get_object."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self.closed = False
        self.released = False

    def read(self) -> bytes:
        return self._data

    def close(self) -> None:
        self.closed = True

    def release_conn(self) -> None:
        self.released = True


class FakeS3Error(S3Error):
    """S3Error carrying only an error code and message."""

    def __init__(self, error_code: str, message: str) -> None:
        Exception.__init__(self, f"{error_code}: {message}")
        self._fake_code = error_code

    @property
    def code(self) -> str:
        return self._fake_code


class NoSuchKeyError(FakeS3Error):
    """Raised for a missing object, like the real service."""

    def __init__(self, bucket_name: str, object_name: str) -> None:
        super().__init__(
            "NoSuchKey", f"/{bucket_name}/{object_name} does not exist"
        )


class FakeMinioClient:
    """Dictionary-backed fake of the MinIO client."""

    def __init__(self) -> None:
        self._buckets: Dict[str, Dict[str, bytes]] = {}
        self.put_calls: List[str] = []

    def bucket_exists(self, bucket_name: str) -> bool:
        return bucket_name in self._buckets

    def make_bucket(self, bucket_name: str) -> None:
        self._buckets.setdefault(bucket_name, {})

    def put_object(
        self,
        bucket_name: str,
        object_name: str,
        data: Any,
        length: int,
        content_type: str = "application/octet-stream",
        metadata: Optional[Dict[str, str]] = None,
    ) -> Any:
        payload = data.read(length) if hasattr(data, "read") else bytes(data)
        self._buckets[bucket_name][object_name] = payload
        self.put_calls.append(f"{bucket_name}/{object_name}")
        return None

    def get_object(self, bucket_name: str, object_name: str) -> FakeResponse:
        try:
            return FakeResponse(self._buckets[bucket_name][object_name])
        except KeyError:
            raise NoSuchKeyError(bucket_name, object_name)

    def stat_object(self, bucket_name: str, object_name: str) -> Object:
        if object_name not in self._buckets.get(bucket_name, {}):
            raise NoSuchKeyError(bucket_name, object_name)
        return Object(
            bucket_name,
            object_name,
            last_modified=datetime.now(timezone.utc),
            size=len(self._buckets[bucket_name][object_name]),
        )

    def list_objects(
        self, bucket_name: str, prefix: Optional[str] = None
    ) -> Iterator[Object]:
        # Real MinIO lists keys lexicographically
        for object_name in sorted(self._buckets.get(bucket_name, {})):
            if prefix and not object_name.startswith(prefix):
                continue
            yield Object(bucket_name, object_name)

    def remove_object(self, bucket_name: str, object_name: str) -> None:
        self._buckets.get(bucket_name, {}).pop(object_name, None)
