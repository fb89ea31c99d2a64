from __future__ import annotations

from typing import Optional


class InvalidColourFormat(ValueError):
    """Base class for every failure raised while building or converting a colour."""

    default_message = "invalid arguments provided to colour format constructor"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class ArgOutOfBoundsError(InvalidColourFormat):
    default_message = "colour component out of bounds"


class FailedConversionError(InvalidColourFormat):
    default_message = "colour conversion failed"


class MalformedHexError(InvalidColourFormat):
    default_message = "hex colour must be exactly 6 hex digits"


class HexParseError(InvalidColourFormat):
    """A two character channel could not be read as a base-16 byte."""

    def __init__(self, text: str, cause: Exception):
        super().__init__(f"cannot parse {text!r} as a hex byte: {cause}")
        self.text = text
        self.cause = cause
