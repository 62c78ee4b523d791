"""Resume parsing pipeline: fetch, extract, prompt, send."""

from __future__ import annotations

import logging
import time

from resume_parser.api.config import Settings
from resume_parser.api.llm.factory import get_llm_provider
from resume_parser.api.llm.provider import LLMProvider
from resume_parser.lib.errors import ConfigurationError
from resume_parser.lib.extraction import extract_text
from resume_parser.lib.models.models import DocumentReference, FileType
from resume_parser.lib.storage import ObjectStore, S3ObjectStore

logger = logging.getLogger(__name__)


def get_object_store(settings: Settings) -> ObjectStore:
    """Build the S3 store described by ``settings``."""
    return S3ObjectStore(
        settings.aws_region,
        endpoint_url=settings.aws_endpoint_url,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
    )


def require_bucket(settings: Settings) -> str:
    if not settings.s3_bucket:
        raise ConfigurationError("S3_BUCKET not set")
    return settings.s3_bucket


def get_resume_url(settings: Settings, store: ObjectStore, resume_key: str) -> str:
    """Presigned read URL for a stored resume, valid for the configured TTL.

    Raises:
        UnsupportedFormatError: If the key's suffix is not pdf or docx.
    """
    document = DocumentReference.from_key(resume_key)
    return store.get_read_url(require_bucket(settings), document.key, settings.presigned_url_ttl)


class ResumeParserService:
    """Runs one resume through storage, text extraction and the LLM.

    A service is built per request. The store and the provider are created
    from ``settings`` unless given; the provider is resolved up front so an
    unsupported model fails before any network call.
    """

    def __init__(
        self,
        settings: Settings,
        store: ObjectStore | None = None,
        provider: LLMProvider | None = None,
    ) -> None:
        self.settings = settings
        self.provider = provider or get_llm_provider(settings)
        self.store = store or get_object_store(settings)

    def parse(self, resume_key: str) -> str:
        """Parse a stored resume and return the model's JSON text verbatim.

        Raises:
            UnsupportedFormatError: If the key's suffix is not pdf or docx.
            NotFoundError: If the key does not exist in the bucket.
            FormatError: If the file cannot be parsed as its format.
            InvalidResponseError: If the model returned no usable text.
        """
        document = DocumentReference.from_key(resume_key)
        bucket = require_bucket(self.settings)

        start = time.monotonic()
        raw_bytes = self.store.get_bytes(bucket, document.key)
        logger.info(
            f"Fetched s3://{bucket}/{document.key} ({len(raw_bytes)} bytes) "
            f"in {int((time.monotonic() - start) * 1000)}ms"
        )
        return self.parse_bytes(document.file_type, raw_bytes)

    def parse_bytes(self, file_type: FileType | str, raw_bytes: bytes) -> str:
        """Run extraction and the LLM call on an in-memory document."""
        text = extract_text(file_type, raw_bytes)
        if not text:
            logger.warning("Document contained no extractable text")

        prompt = self.provider.construct_prompt(text)
        start = time.monotonic()
        output = self.provider.send(prompt)
        logger.info(f"LLM call finished in {int((time.monotonic() - start) * 1000)}ms")
        return output
