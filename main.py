#!/usr/bin/env python3
"""
Verhoeff Checksum — Entry Point
================================

Checks one number entered by the user, then shows check-digit generation on
a fixed 11-digit payload.

Usage:
    python main.py                      # prompts for a number
    python main.py 823519740628         # checks the given number
    VERHOEFF_LOG_LEVEL=INFO python main.py
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from verhoeff_checksum.exceptions import ChecksumError
from verhoeff_checksum.service import DEFAULT_VISIBLE_DIGITS, ChecksumService

load_dotenv()


# ─── Demo Payload ───────────────────────────────────────────────────

EXAMPLE_PAYLOAD = "82351974062"


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60


# ─── Printers ───────────────────────────────────────────────────────


def print_check(service: ChecksumService, raw: str) -> int:
    """Check a number and print the verdict.

    Returns:
        0 if valid, 1 if the checksum failed, 2 if the input was unusable.
    """
    try:
        report = service.check(raw)
    except ChecksumError as e:
        print(f"  {_RED}{_BOLD}[{e.code}]{_RESET} {e.message}")
        for k, v in e.details.items():
            print(f"    {_DIM}{k}: {v}{_RESET}")
        return 2

    print(f"  Number:  {report.masked_number} {_DIM}({report.digit_count} digits){_RESET}")
    if report.is_valid:
        print(f"  {_GREEN}{_BOLD}VALID{_RESET} (checksum correct)")
        return 0
    print(f"  {_RED}{_BOLD}INVALID{_RESET} (checksum failed)")
    return 1


def print_generated(service: ChecksumService, payload: str) -> None:
    """Generate and print the check digit for ``payload``."""
    generated = service.complete(payload)
    print(f"  Generated checksum for {generated.payload} = {_BOLD}{generated.check_digit}{_RESET}")
    print(f"  Valid number:  {_CYAN}{generated.number}{_RESET}")


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Run the interactive check and the generation demo."""
    args = sys.argv[1:] if argv is None else argv

    logging.basicConfig(
        level=os.environ.get("VERHOEFF_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    visible = int(os.environ.get("VERHOEFF_VISIBLE_DIGITS", DEFAULT_VISIBLE_DIGITS))
    service = ChecksumService(visible_digits=visible)

    raw = args[0] if args else input("Enter Aadhaar number (without spaces): ")

    print(f"\n{'=' * _WIDTH}")
    exit_code = print_check(service, raw)
    print(f"{'─' * _WIDTH}")
    print_generated(service, EXAMPLE_PAYLOAD)
    print(f"{'=' * _WIDTH}\n")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
