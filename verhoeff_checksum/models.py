"""
Pydantic models for checksum results.

Reports never contain the raw number: only a masked rendering and a SHA-256
hash, so they can be logged or stored next to identifiers such as Aadhaar
numbers without leaking them.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ─── Validation Report ──────────────────────────────────────────────


class ChecksumReport(BaseModel):
    """Outcome of checking a number that carries its own check digit."""

    masked_number: str  # e.g. "XXXXXXXX0628"
    digit_count: int = Field(ge=1)
    is_valid: bool
    number_hash: str  # SHA-256 of the normalized digit string


# ─── Generation Result ──────────────────────────────────────────────


class GeneratedNumber(BaseModel):
    """A payload completed with its Verhoeff check digit."""

    payload: str
    check_digit: int = Field(ge=0, le=9)
    number: str  # payload + check digit


# ─── Table Verification ─────────────────────────────────────────────


class TableMismatch(BaseModel):
    """One cell where a derived table disagrees with the published constant."""

    table: str  # "d", "p" or "inv"
    row: int
    column: Optional[int] = None  # None for the one-dimensional inv table
    expected: int  # the published constant
    actual: int  # the derived value
