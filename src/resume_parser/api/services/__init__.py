"""API services."""

from resume_parser.api.services.resume_service import (
    ResumeParserService,
    get_object_store,
    get_resume_url,
)

__all__ = ["ResumeParserService", "get_object_store", "get_resume_url"]
