"""Data models for resume parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from resume_parser.lib.errors import UnsupportedFormatError


# ============================================================================
# Documents
# ============================================================================


class FileType(str, Enum):
    """Supported resume document formats."""

    PDF = "pdf"
    DOCX = "docx"

    @classmethod
    def parse(cls, value: FileType | str) -> FileType:
        """Coerce a tag like ``"pdf"`` or ``".DOCX"`` into a FileType."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower().lstrip("."))
            except ValueError:
                pass
        raise UnsupportedFormatError(value)

    @classmethod
    def from_key(cls, key: str) -> FileType:
        """Infer the file type from a storage key or file name suffix."""
        suffix = PurePosixPath(key).suffix
        if not suffix:
            raise UnsupportedFormatError(key)
        try:
            return cls.parse(suffix)
        except UnsupportedFormatError:
            raise UnsupportedFormatError(suffix.lstrip(".")) from None


@dataclass(frozen=True)
class DocumentReference:
    """Storage key of a resume plus its inferred file type."""

    key: str
    file_type: FileType

    @classmethod
    def from_key(cls, key: str) -> DocumentReference:
        return cls(key=key, file_type=FileType.from_key(key))


@dataclass(frozen=True)
class PromptRequest:
    """Provider-neutral prompt: fixed instructions plus extracted resume text."""

    instructions: str
    input: str


# ============================================================================
# Parsed resume schema (mirrors the JSON layout requested in the prompt)
# ============================================================================


class _SchemaModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PersonName(_SchemaModel):
    """Name split into first and last parts."""

    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")


class Address(_SchemaModel):
    """Postal address."""

    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = Field("", alias="zipCode")
    country: str = ""


class ContactInfo(_SchemaModel):
    """Candidate contact details."""

    name: PersonName = Field(default_factory=PersonName)
    email: str = ""
    phone: str = ""
    address: Address = Field(default_factory=Address)
    linked_in: str = Field("", alias="linkedIn")
    website: str = ""


class WorkExperience(_SchemaModel):
    """A single position held."""

    company: str = ""
    title: str = ""
    location: str = ""
    start_date: str = Field("", alias="startDate")
    end_date: str = Field("", alias="endDate")
    description: str = ""
    reason_for_leaving: str = Field("", alias="reasonForLeaving")

    @property
    def is_current(self) -> bool:
        return self.end_date.strip().lower() == "present"


class Education(_SchemaModel):
    """A single education entry."""

    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    graduation_date: str = Field("", alias="graduationDate")


class ParsedResume(_SchemaModel):
    """Structured resume returned by the LLM."""

    contact_info: ContactInfo = Field(alias="contactInfo")
    work_experience: list[WorkExperience] = Field(alias="workExperience")
    education: list[Education]
    skills: list[str]
    certifications: list[str | dict[str, Any]]
    summary: str

    @classmethod
    def from_llm_text(cls, text: str) -> ParsedResume:
        """Validate model output, tolerating prose or code fences around the JSON.

        Raises:
            pydantic.ValidationError: If no object matching the schema is found.
        """
        match = re.search(r"\{.*\}", text, re.DOTALL)
        return cls.model_validate_json(match.group() if match else text)

    @property
    def full_name(self) -> str:
        name = self.contact_info.name
        return " ".join(part for part in (name.first_name, name.last_name) if part)
