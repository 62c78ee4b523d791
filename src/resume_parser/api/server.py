"""FastAPI server."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from resume_parser.api.config import Settings, get_settings
from resume_parser.api.logging_config import configure_logging
from resume_parser.api.services.resume_service import (
    ResumeParserService,
    get_object_store,
    get_resume_url,
)
from resume_parser.lib.errors import (
    ConfigurationError,
    FormatError,
    InvalidResponseError,
    NotFoundError,
    ResumeParserError,
    UnsupportedFormatError,
    UnsupportedProviderError,
)
from resume_parser.lib.storage import ObjectStore

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[ResumeParserError], int] = {
    UnsupportedFormatError: status.HTTP_400_BAD_REQUEST,
    FormatError: status.HTTP_400_BAD_REQUEST,
    UnsupportedProviderError: status.HTTP_400_BAD_REQUEST,
    ConfigurationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidResponseError: status.HTTP_502_BAD_GATEWAY,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI."""
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(title="Resume Parser API", version="0.1.0", lifespan=lifespan)


class ResumeRequest(BaseModel):
    """Body of resume requests."""

    model_config = ConfigDict(populate_by_name=True)

    resume_key: str = Field(alias="resumeKey", min_length=1)


class ResumeURLResponse(BaseModel):
    """Presigned URL for a stored resume."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    expires_in: int = Field(alias="expiresIn")


@app.exception_handler(ResumeParserError)
async def resume_parser_error_handler(request: Request, exc: ResumeParserError) -> JSONResponse:
    """Map pipeline errors onto HTTP status codes."""
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.warning(f"{request.method} {request.url.path} failed with {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def get_store(settings: Annotated[Settings, Depends(get_settings)]) -> ObjectStore:
    """Object store for the current request."""
    return get_object_store(settings)


def get_resume_service(
    settings: Annotated[Settings, Depends(get_settings)],
    store: Annotated[ObjectStore, Depends(get_store)],
) -> ResumeParserService:
    """Resume service for the current request."""
    return ResumeParserService(settings, store=store)


@app.post("/api/resume")
def parse_resume(
    body: ResumeRequest,
    service: Annotated[ResumeParserService, Depends(get_resume_service)],
) -> Response:
    """Parse a stored resume; the model's JSON is returned as-is."""
    logger.info(f"Parsing resume {body.resume_key}")
    output = service.parse(body.resume_key)
    return Response(content=output, media_type="application/json")


@app.post("/api/resume/url", response_model=ResumeURLResponse, response_model_by_alias=True)
def resume_url(
    body: ResumeRequest,
    settings: Annotated[Settings, Depends(get_settings)],
    store: Annotated[ObjectStore, Depends(get_store)],
) -> ResumeURLResponse:
    """Get a temporary read URL for a stored resume."""
    url = get_resume_url(settings, store, body.resume_key)
    return ResumeURLResponse(url=url, expires_in=settings.presigned_url_ttl)


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
