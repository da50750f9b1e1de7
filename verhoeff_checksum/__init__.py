"""
Verhoeff Checksum — check-digit validation and generation for decimal numbers.

Detects every single-digit substitution and every adjacent transposition.
Used by identifiers such as India's Aadhaar numbers.

Core:     engine.validate / engine.generate over tuples of ints (pure, thread-safe)
Edges:    parsing (raw strings), service (reports), main.py (CLI), api.py (HTTP)
"""

from .engine import append_check_digit, generate, validate
from .exceptions import ChecksumError, InvalidInput, ParseError

__version__ = "1.0.0"

__all__ = [
    "ChecksumError",
    "InvalidInput",
    "ParseError",
    "append_check_digit",
    "generate",
    "validate",
]
