"""
Checksum service — the glue between raw strings and the pure engine.

Flow:
  raw string ──► parse_digits ──► engine.validate / engine.generate ──► report

The service adds nothing to the math. It parses, calls the engine, and
packages the outcome into pydantic models with the number masked and hashed.
Errors from parsing (ParseError) or the engine (InvalidInput) propagate to
the caller unchanged.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Sequence

from . import engine
from .group import table_mismatches
from .models import ChecksumReport, GeneratedNumber, TableMismatch
from .parsing import format_digits, mask_digits, parse_digits

logger = logging.getLogger(__name__)

DEFAULT_VISIBLE_DIGITS = 4


class ChecksumService:
    """Validates and completes numbers given as raw strings.

    Usage:
        service = ChecksumService()
        report = service.check("8235 1974 0628")
        if not report.is_valid:
            print(f"{report.masked_number} has a bad check digit")
    """

    def __init__(self, visible_digits: int = DEFAULT_VISIBLE_DIGITS):
        if visible_digits < 0:
            raise ValueError(f"visible_digits must be >= 0, got {visible_digits}")
        self.visible_digits = visible_digits

    def check(self, raw: str) -> ChecksumReport:
        """Validate a number whose last digit is its check digit."""
        digits = parse_digits(raw)
        is_valid = engine.validate(digits)

        report = ChecksumReport(
            masked_number=mask_digits(digits, self.visible_digits),
            digit_count=len(digits),
            is_valid=is_valid,
            number_hash=_hash_digits(digits),
        )
        logger.info(
            "Checked %s (%d digits): %s",
            report.masked_number,
            report.digit_count,
            "valid" if is_valid else "invalid",
        )
        return report

    def complete(self, raw: str) -> GeneratedNumber:
        """Generate the check digit for a payload and append it."""
        digits = parse_digits(raw)
        check_digit = engine.generate(digits)

        logger.info(
            "Generated check digit for %s",
            mask_digits(digits, self.visible_digits),
        )
        payload = format_digits(digits)
        return GeneratedNumber(
            payload=payload,
            check_digit=check_digit,
            number=f"{payload}{check_digit}",
        )

    def verify_tables(self) -> list[TableMismatch]:
        """Re-derive the tables from D5 and report any disagreement."""
        mismatches = table_mismatches()
        for mismatch in mismatches:
            cell = f"[{mismatch.row}]"
            if mismatch.column is not None:
                cell += f"[{mismatch.column}]"
            logger.error(
                "Table %s%s is %d, derivation gives %d",
                mismatch.table,
                cell,
                mismatch.expected,
                mismatch.actual,
            )
        return mismatches


def _hash_digits(digits: Sequence[int]) -> str:
    """SHA-256 of the normalized number, for audit trails."""
    return hashlib.sha256(format_digits(digits).encode("ascii")).hexdigest()
