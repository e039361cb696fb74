"""Core types, configuration and errors."""

from .config import ResolverConfig
from .exceptions import (
    BadBase64Error,
    BadEncodingError,
    ConfigurationError,
    DecryptFailedError,
    FontLoadError,
    MissingTableError,
    SymbolsError,
    TableError,
)
from .models import Family, FontDescriptor, GlyphSize, Variant, Weight

__all__ = [
    "BadBase64Error",
    "BadEncodingError",
    "ConfigurationError",
    "DecryptFailedError",
    "Family",
    "FontDescriptor",
    "FontLoadError",
    "GlyphSize",
    "MissingTableError",
    "ResolverConfig",
    "SymbolsError",
    "TableError",
    "Variant",
    "Weight",
]
