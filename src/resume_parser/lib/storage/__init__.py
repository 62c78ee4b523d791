"""Object storage for resume documents."""

from resume_parser.lib.storage.base import ObjectStore
from resume_parser.lib.storage.s3_store import S3ObjectStore

__all__ = ["ObjectStore", "S3ObjectStore"]
