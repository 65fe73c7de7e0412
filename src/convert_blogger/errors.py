"""Errors raised by the Blogger to Ghost conversion.

All of them are fatal for a run; the CLI reports the message and exits 1.
"""

from __future__ import annotations

USAGE = "Usage: blogger2ghost <input.json> [-o output.json]"


class ConversionError(Exception):
    """Base class for conversion failures."""


class UsageError(ConversionError):
    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(USAGE)


class ReadInputError(ConversionError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Failed to read input file: {path}")


class ParseInputError(ConversionError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to parse Blogger JSON: {reason}")


class NoEntriesError(ConversionError):
    def __init__(self) -> None:
        super().__init__("No entries found in Blogger JSON.")


class WriteOutputError(ConversionError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to write output: {reason}")


class ConfigError(ConversionError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")
