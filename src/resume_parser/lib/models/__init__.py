"""Resume data models."""

from resume_parser.lib.models.models import (
    Address,
    ContactInfo,
    DocumentReference,
    Education,
    FileType,
    ParsedResume,
    PersonName,
    PromptRequest,
    WorkExperience,
)

__all__ = [
    "Address",
    "ContactInfo",
    "DocumentReference",
    "Education",
    "FileType",
    "ParsedResume",
    "PersonName",
    "PromptRequest",
    "WorkExperience",
]
