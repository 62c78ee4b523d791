"""Amazon S3 object store."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

from resume_parser.lib.errors import NotFoundError
from resume_parser.lib.storage.base import ObjectStore

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"NoSuchKey", "NoSuchBucket", "404", "NotFound"}


class S3ObjectStore(ObjectStore):
    """S3-backed store using boto3.

    Credentials fall back to boto3's default chain (environment, shared
    config, instance role) when not given explicitly.
    """

    def __init__(
        self,
        region_name: str = "us-east-1",
        *,
        endpoint_url: str | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        client: Any = None,
    ) -> None:
        if client is None:
            client = boto3.client(
                "s3",
                region_name=region_name,
                endpoint_url=endpoint_url,
                aws_access_key_id=aws_access_key_id,
                aws_secret_access_key=aws_secret_access_key,
            )
        self._client = client

    def get_bytes(self, bucket: str, key: str) -> bytes:
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in NOT_FOUND_CODES:
                raise NotFoundError(bucket, key) from exc
            raise

        body = response["Body"]
        try:
            data = body.read()
        finally:
            body.close()
        logger.debug(f"Fetched {len(data)} bytes from s3://{bucket}/{key}")
        return data

    def get_read_url(self, bucket: str, key: str, ttl_seconds: int) -> str:
        return self._client.generate_presigned_url(
            "get_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=ttl_seconds,
        )
