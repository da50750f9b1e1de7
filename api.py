"""
Verhoeff Checksum — FastAPI Server
===================================

RESTful API for validating numbers and generating Verhoeff check digits.

Endpoints:
    POST /validate          Check a number that ends in its check digit
    POST /generate          Compute and append the check digit for a payload
    GET  /health            Health check / readiness probe (table self-check)

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from verhoeff_checksum import __version__
from verhoeff_checksum.exceptions import ChecksumError
from verhoeff_checksum.models import ChecksumReport, GeneratedNumber
from verhoeff_checksum.service import DEFAULT_VISIBLE_DIGITS, ChecksumService

load_dotenv()

logger = logging.getLogger(__name__)

MAX_INPUT_LENGTH = 64


# ─── Application Lifespan ───────────────────────────────────────────

_service: ChecksumService | None = None
_tables_verified: bool = False


def _init_service() -> ChecksumService:
    """Build the shared service and run the table self-check once."""
    global _tables_verified  # noqa: PLW0603
    visible = int(os.environ.get("VERHOEFF_VISIBLE_DIGITS", DEFAULT_VISIBLE_DIGITS))
    service = ChecksumService(visible_digits=visible)
    _tables_verified = not service.verify_tables()
    if not _tables_verified:
        logger.error("Verhoeff tables failed the D5 self-check")
    return service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the service on startup."""
    global _service  # noqa: PLW0603
    _service = _init_service()
    yield
    _service = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Verhoeff Checksum API",
    description=(
        "Validation and generation of Verhoeff check digits. "
        "Detects all single-digit errors and all adjacent transpositions."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ValidateRequest(BaseModel):
    """Request body for the /validate endpoint."""

    number: str = Field(
        ...,
        min_length=1,
        max_length=MAX_INPUT_LENGTH,
        description="The full number including its trailing check digit. Spaces are ignored.",
        json_schema_extra={"example": "8235 1974 0628"},
    )


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""

    payload: str = Field(
        ...,
        min_length=1,
        max_length=MAX_INPUT_LENGTH,
        description="The number without a check digit. Spaces are ignored.",
        json_schema_extra={"example": "82351974062"},
    )


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    version: str
    tables_verified: bool


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_service() -> ChecksumService:
    if _service is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return _service


@app.exception_handler(ChecksumError)
async def checksum_error_handler(request: Request, exc: ChecksumError) -> JSONResponse:
    """Turn parse / input errors into a structured 422."""
    body = ErrorResponse(code=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=422, content=body.model_dump())


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/validate",
    summary="Validate a number's check digit",
    tags=["Checksum"],
    responses={
        422: {"model": ErrorResponse, "description": "Input is not a digit string"},
        503: {"description": "Service not yet initialised"},
    },
)
def validate_number(request: ValidateRequest) -> ChecksumReport:
    """Check that the last digit of **number** is its Verhoeff check digit.

    The response never echoes the number: it is masked and SHA-256 hashed.
    """
    return _get_service().check(request.number)


@app.post(
    "/generate",
    summary="Generate a check digit",
    tags=["Checksum"],
    responses={
        422: {"model": ErrorResponse, "description": "Input is not a digit string"},
        503: {"description": "Service not yet initialised"},
    },
)
def generate_check_digit(request: GenerateRequest) -> GeneratedNumber:
    """Compute the check digit for **payload** and return the completed number."""
    return _get_service().complete(request.payload)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and whether the tables passed the D5 self-check."""
    _get_service()
    return HealthResponse(
        status="healthy" if _tables_verified else "degraded",
        version=__version__,
        tables_verified=_tables_verified,
    )
