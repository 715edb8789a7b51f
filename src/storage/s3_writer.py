# src/storage/s3_writer.py — v3
"""S3 artifact writer (OUTPUT_WRITER=s3).

Objects are stored as ``<OUTPUT_S3_PREFIX><artifact name>`` in
OUTPUT_S3_BUCKET, with a Content-Type taken from the artifact extension so
the bucket can serve documents directly. Works with MinIO through
``endpoint_url``. Requires 'boto3' package: pip install boto3.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any

from contractgen.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
CONTENT_TYPES = {
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".json": "application/json",
}


class S3Writer(BaseOutputWriter):
    """Store rendered contracts as S3 objects."""

    def __init__(
        self,
        bucket: str,
        prefix: str = "contractgen/",
        region: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        try:
            import boto3
        except ImportError as e:
            raise ImportError(
                "boto3 package required for S3 writer: pip install boto3"
            ) from e

        client_options: dict[str, Any] = {}
        if region:
            client_options["region_name"] = region
        if endpoint_url:
            client_options["endpoint_url"] = endpoint_url

        self._s3 = boto3.client("s3", **client_options)
        self._bucket = bucket
        self._prefix = f"{prefix.rstrip('/')}/" if prefix else ""

    @property
    def bucket(self) -> str:
        return self._bucket

    def _full_key(self, path: str) -> str:
        return f"{self._prefix}{path}"

    async def write(self, path: str, content: bytes | str) -> None:
        body = content.encode("utf-8") if isinstance(content, str) else content
        key = self._full_key(path)
        content_type = CONTENT_TYPES.get(PurePosixPath(path).suffix, DEFAULT_CONTENT_TYPE)
        self._s3.put_object(
            Bucket=self._bucket, Key=key, Body=body, ContentType=content_type
        )
        logger.debug("Uploaded s3://%s/%s (%s, %d bytes)", self._bucket, key, content_type, len(body))

    async def exists(self, path: str) -> bool:
        # head_object raises ClientError (404) for a missing key
        try:
            self._s3.head_object(Bucket=self._bucket, Key=self._full_key(path))
        except self._s3.exceptions.ClientError:
            return False
        return True
