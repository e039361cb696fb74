"""
Font data models and types.
"""

import fnmatch
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sfsymbols.core.models import GlyphSize, Weight

MIN_GLYPH_FIELDS = 2


@dataclass(frozen=True)
class FontFile:
    """A font file located on disk."""

    path: Path
    family: str
    weight_class: int = 400
    font_number: int = 0

    @property
    def filename(self) -> str:
        return self.path.name

    def __str__(self) -> str:
        return f"{self.family} {self.weight_class} ({self.filename})"


@dataclass(frozen=True)
class Glyph:
    """One symbol listed in a font's glyph table."""

    size: GlyphSize
    full_name: str
    fields: tuple[str, ...]
    font: Any = field(repr=False, compare=False)

    @classmethod
    def from_fields(cls, size: GlyphSize, fields: list[str], font: Any) -> "Glyph | None":
        """
        Build a glyph from a tokenized table row.

        Args:
            size: Requested glyph rendering size
            fields: Row fields; the first one names the symbol
            font: Font handle the glyph belongs to

        Returns:
            Glyph, or None if the row does not describe a symbol
        """
        if len(fields) < MIN_GLYPH_FIELDS:
            return None

        full_name = fields[0].strip().strip('"')
        if not full_name:
            return None

        return cls(size=size, full_name=full_name, fields=tuple(fields), font=font)

    def matches(self, pattern: str) -> bool:
        """Check the full name against a shell-style pattern."""
        return fnmatch.fnmatchcase(self.full_name, pattern)

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Font:
    """A resolved symbol font and the glyphs catalogued in it."""

    handle: Any = field(repr=False, compare=False)
    weight: Weight
    size: float
    glyphs: tuple[Glyph, ...]
    source: Path | None = None

    @property
    def stroke_width(self) -> float:
        return 1.0

    def close(self):
        """Release the underlying font file."""
        if self.handle is not None:
            self.handle.close()

    def glyphs_matching(self, pattern: str) -> list[Glyph]:
        """Get glyphs whose full name matches ``pattern`` (``*`` for all)."""
        if pattern == "*":
            return list(self.glyphs)
        return [glyph for glyph in self.glyphs if glyph.matches(pattern)]

    def __str__(self) -> str:
        origin = self.source.name if self.source else "<memory>"
        return f"{origin} {self.weight.label} {self.size:g}pt ({len(self.glyphs)} glyphs)"
