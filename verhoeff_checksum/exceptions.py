"""
Exception hierarchy for checksum computation and input handling.

Every exception carries a machine-readable code plus a details dict, so the
CLI and the API can report failures without parsing message strings.
"""

from __future__ import annotations


class ChecksumError(Exception):
    """Base exception for all checksum failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInput(ChecksumError):
    """The digit sequence handed to the engine is empty or out of range."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT", message, details)


class ParseError(ChecksumError):
    """A raw string contains a character that is not an ASCII digit."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("PARSE_ERROR", message, details)
