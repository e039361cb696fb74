"""SF Symbols Font Toolkit
=======================

Locates an SF Symbols font (a user-supplied file, the installed SF
families, or the fallback font inside the SF Symbols app) and reads the
glyph catalog stored in its encrypted ``symp`` table.
"""

__version__ = "1.0.0"

from .core.config import ResolverConfig
from .core.exceptions import SymbolsError
from .core.models import Family, FontDescriptor, GlyphSize, Variant, Weight
from .fonts import Font, FontResolver, Glyph, best_font_matching

__all__ = [
    "Family",
    "Font",
    "FontDescriptor",
    "FontResolver",
    "Glyph",
    "GlyphSize",
    "ResolverConfig",
    "SymbolsError",
    "Variant",
    "Weight",
    "best_font_matching",
]
