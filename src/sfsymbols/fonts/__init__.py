"""Symbol Font Module
==================

Resolves SF Symbols fonts and extracts the glyph catalog embedded in their
encrypted ``symp`` table.
"""

from .companion import CompanionAppProvider
from .decrypt import decrypt
from .extractor import (
    SYMP_TAG,
    build_font,
    decode_table,
    extract_glyphs,
    extract_records,
    font_from_path,
    four_char_code,
)
from .models import Font, FontFile, Glyph
from .resolver import FontResolver, best_font_matching
from .system import SystemFontProvider
from .tokenizer import tokenize

__all__ = [
    "SYMP_TAG",
    "CompanionAppProvider",
    "Font",
    "FontFile",
    "FontResolver",
    "Glyph",
    "SystemFontProvider",
    "best_font_matching",
    "build_font",
    "decode_table",
    "decrypt",
    "extract_glyphs",
    "extract_records",
    "font_from_path",
    "four_char_code",
    "tokenize",
]
