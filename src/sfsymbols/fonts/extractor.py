"""
Symbol Table Extraction
=======================

Reads the ``symp`` table embedded in SF Symbols fonts and turns it into
glyph records.

The table is stored double-encoded: the raw table bytes are UTF-8 text
holding base64 of an AES ciphertext. The decrypted plaintext is a
CRLF-separated listing whose first line is a column header and whose last
line is a summary; every line in between describes one symbol.
"""

import base64
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont, TTLibError

from sfsymbols.core.exceptions import (
    BadBase64Error,
    BadEncodingError,
    DecryptFailedError,
    MissingTableError,
    SymbolsError,
)
from sfsymbols.core.models import FontDescriptor, GlyphSize

from .decrypt import decrypt
from .models import Font, Glyph
from .tokenizer import tokenize
from .utils import load_font

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\r\n"

GlyphFactory = Callable[[GlyphSize, list[str], Any], Glyph | None]


def four_char_code(tag: str) -> int:
    """Pack four characters into a 32-bit code, first character most significant."""
    code = 0
    for character in tag:
        code = (code << 8) + ord(character)
    return code


def tag_from_code(code: int) -> str:
    """Turn a 32-bit table code back into its four-character tag."""
    return code.to_bytes(4, "big").decode("latin-1")


SYMP_TAG = four_char_code("symp")


def read_table(font: TTFont, code: int = SYMP_TAG) -> bytes:
    """
    Read a raw table from a font.

    Raises:
        MissingTableError: If the font has no such table
    """
    tag = tag_from_code(code)
    if tag not in font:
        raise MissingTableError(tag)
    return font.getTableData(tag)


def _decode_table(blob: bytes) -> str:
    """Decode a raw ``symp`` blob into plaintext, raising on the failing stage."""
    try:
        encoded = blob.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BadEncodingError("table data") from e

    try:
        ciphertext = base64.b64decode(encoded, validate=True)
    except ValueError as e:
        raise BadBase64Error(str(e)) from e

    plaintext = decrypt(ciphertext)
    if plaintext is None:
        raise DecryptFailedError()

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BadEncodingError("decrypted table") from e


def decode_table(blob: bytes) -> str | None:
    """
    Decode a raw ``symp`` table blob.

    Args:
        blob: Table bytes as stored in the font

    Returns:
        Plaintext table listing, or None if any decoding stage fails
    """
    try:
        return _decode_table(blob)
    except SymbolsError as e:
        logger.debug(f"Failed to decode symbol table: {e}")
        return None


def split_records(plaintext: str) -> list[str]:
    """
    Split the table listing into record lines.

    The header and summary lines are dropped. A CRLF at the very end of the
    listing terminates the summary line rather than starting an empty one.
    """
    if plaintext.endswith(LINE_SEPARATOR):
        plaintext = plaintext[: -len(LINE_SEPARATOR)]

    lines = plaintext.split(LINE_SEPARATOR)
    if len(lines) < 3:
        return []
    return lines[1:-1]


def _read_records(font: TTFont) -> list[list[str]]:
    plaintext = _decode_table(read_table(font))
    return [tokenize(line) for line in split_records(plaintext)]


def extract_records(font: TTFont) -> list[list[str]] | None:
    """
    Get the tokenized symbol rows of a font.

    Returns:
        One field list per symbol row, or None if the table is missing or unreadable
    """
    try:
        return _read_records(font)
    except (SymbolsError, TTLibError, KeyError, OSError) as e:
        logger.debug(f"No symbol records: {e}")
        return None


def extract_glyphs(
    font: TTFont,
    descriptor: FontDescriptor,
    glyph_factory: GlyphFactory = Glyph.from_fields,
) -> list[Glyph] | None:
    """
    Extract the glyph catalog embedded in a font.

    Rows the glyph factory rejects (by returning None or raising) are left
    out; they never fail the extraction.

    Args:
        font: Opened font
        descriptor: Requested font; its glyph size is passed to every glyph
        glyph_factory: Builds a glyph from ``(size, fields, font)``

    Returns:
        Glyphs in table order, or None if the table is missing or unreadable
    """
    records = extract_records(font)
    if records is None:
        return None

    glyphs = []
    for fields in records:
        try:
            glyph = glyph_factory(descriptor.glyph_size, fields, font)
        except Exception as e:
            logger.debug(f"Skipping symbol row {fields[:1]}: {e}")
            continue
        if glyph is not None:
            glyphs.append(glyph)

    logger.debug(f"Extracted {len(glyphs)} of {len(records)} symbol rows")
    return glyphs


def build_font(
    handle: TTFont,
    descriptor: FontDescriptor,
    source: Path | None = None,
    glyph_factory: GlyphFactory = Glyph.from_fields,
) -> Font | None:
    """Wrap an opened font as a Font if its glyph table can be read."""
    glyphs = extract_glyphs(handle, descriptor, glyph_factory)
    if glyphs is None:
        return None

    return Font(
        handle=handle,
        weight=descriptor.weight,
        size=descriptor.font_size,
        glyphs=tuple(glyphs),
        source=source,
    )


def font_from_path(
    font_path: str | Path,
    descriptor: FontDescriptor,
    glyph_factory: GlyphFactory = Glyph.from_fields,
) -> Font | None:
    """
    Load a font file and extract its glyph catalog.

    Returns:
        Font, or None if the file cannot be opened or has no readable table
    """
    path = Path(font_path)
    try:
        handle = load_font(path)
    except SymbolsError as e:
        logger.debug(str(e))
        return None

    font = build_font(handle, descriptor, source=path, glyph_factory=glyph_factory)
    if font is None:
        handle.close()
    return font
