"""Custom exceptions for the symbol font resolution system."""

from typing import Any


class SymbolsError(Exception):
    """Base exception for all sfsymbols errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(SymbolsError):
    """Exception raised for configuration errors."""


class FontLoadError(SymbolsError):
    """Exception raised when a font file cannot be opened."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to load font {path}: {error}", details=path)


class TableError(SymbolsError):
    """Exception raised while decoding the embedded glyph table."""


class MissingTableError(TableError):
    """Exception raised when the font carries no symbol table."""

    def __init__(self, tag: str):
        super().__init__(f"Font has no '{tag}' table", details=tag)


class BadEncodingError(TableError):
    """Exception raised when table bytes are not valid UTF-8."""

    def __init__(self, stage: str):
        super().__init__(f"Invalid UTF-8 in {stage}", details=stage)


class BadBase64Error(TableError):
    """Exception raised when the table text is not valid base64."""

    def __init__(self, error: str):
        super().__init__(f"Invalid base64 table payload: {error}")


class DecryptFailedError(TableError):
    """Exception raised when the table ciphertext cannot be decrypted."""

    def __init__(self):
        super().__init__("Failed to decrypt table payload")
