import io
import json
import zipfile
from types import SimpleNamespace

import pytest

from resume_parser.api.config import Settings
from resume_parser.lib.errors import NotFoundError
from resume_parser.lib.storage.base import ObjectStore

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


# --- document builders -------------------------------------------------------


def run(text):
    return f'<w:r><w:t xml:space="preserve">{text}</w:t></w:r>'


def paragraph(*runs):
    return "<w:p>" + "".join(run(r) for r in runs) + "</w:p>"


def document_xml(*paragraphs_xml):
    return (
        f'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}"><w:body>{"".join(paragraphs_xml)}</w:body></w:document>'
    )


def part_xml(root_tag, *paragraphs_xml):
    return (
        f'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:{root_tag} xmlns:w="{W_NS}">{"".join(paragraphs_xml)}</w:{root_tag}>'
    )


def make_docx(parts):
    """Build an in-memory .docx archive from ``{member_name: xml}`` in order."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("[Content_Types].xml", "<Types/>")
        for name, xml in parts.items():
            archive.writestr(name, xml)
    return buffer.getvalue()


class FakePage:
    """Mimics a pypdf page by feeding text items to the visitor."""

    def __init__(self, items):
        self.items = items

    def extract_text(self, visitor_text=None):
        for item in self.items:
            if visitor_text is not None:
                visitor_text(item, None, None, None, 0)
        return " ".join(self.items)


def fake_pdf_reader(pages_items):
    """PdfReader replacement whose pages report the given text items."""

    class FakeReader:
        is_encrypted = False

        def __init__(self, stream):
            self.stream = stream
            self.pages = [FakePage(items) for items in pages_items]

    return FakeReader


# --- storage and LLM fakes ---------------------------------------------------


class InMemoryStore(ObjectStore):
    """Object store backed by a dict keyed by (bucket, key)."""

    def __init__(self, objects=None):
        self.objects = dict(objects or {})
        self.requests = []

    def get_bytes(self, bucket, key):
        self.requests.append((bucket, key))
        if (bucket, key) not in self.objects:
            raise NotFoundError(bucket, key)
        return self.objects[(bucket, key)]

    def get_read_url(self, bucket, key, ttl_seconds):
        return f"https://{bucket}.example.com/{key}?expires={ttl_seconds}"


class FakeOpenAIClient:
    """Records Responses API calls and returns a canned response."""

    def __init__(self, output_text="", error=None):
        self.calls = []
        self.response = SimpleNamespace(output_text=output_text, error=error)
        self.responses = SimpleNamespace(create=self._create)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        return self.response


SAMPLE_RESUME = {
    "contactInfo": {
        "name": {"firstName": "Jane", "lastName": "Doe"},
        "email": "jane@example.com",
        "phone": "",
        "address": {"street": "", "city": "Austin", "state": "TX", "zipCode": "", "country": ""},
        "linkedIn": "",
        "website": "",
    },
    "workExperience": [
        {
            "company": "Acme",
            "title": "Engineer",
            "location": "",
            "startDate": "2020",
            "endDate": "Present",
            "description": "",
            "reasonForLeaving": "",
        }
    ],
    "education": [],
    "skills": ["Python"],
    "certifications": [],
    "summary": "",
}


@pytest.fixture
def sample_resume_json():
    return json.dumps(SAMPLE_RESUME)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        s3_bucket="resumes-bucket",
        aws_region="us-east-1",
        llm_model="gpt-4o",
        openai_api_key="sk-test",
        anthropic_api_key="sk-ant-test",
        gemini_api_key="gemini-test",
    )
