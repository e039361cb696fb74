"""Helpers for building symbol fonts in tests."""

import base64
from pathlib import Path

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable

from sfsymbols.fonts.decrypt import _IV, _KEY

SAMPLE_TABLE = (
    "name,small,medium,large\r\n"
    "square.and.arrow.up,uni100001.small,uni100001.medium,uni100001.large\r\n"
    '"pencil.circle",uni100002.small,"uni100002,medium",uni100002.large\r\n'
    "---\r\n"
    "2 symbols\r\n"
)


def encrypt(plaintext: bytes) -> bytes:
    """Encrypt with the symbol table key and IV."""
    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = Cipher(algorithms.AES(_KEY), modes.CBC(_IV)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def make_table_blob(plaintext: str) -> bytes:
    """Encode a table listing the way it is stored in the font."""
    return base64.b64encode(encrypt(plaintext.encode("utf-8")))


def build_font_file(
    path: Path,
    table_blob: bytes | None = None,
    family: str = "SF Pro Display",
    style: str = "Regular",
    weight_class: int = 400,
) -> Path:
    """Write a minimal TrueType font, optionally carrying a ``symp`` table."""
    ascent, descent = 800, -200

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])

    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((450, 0))
    pen.lineTo((450, 700))
    pen.lineTo((50, 700))
    pen.closePath()
    box = pen.glyph()

    fb.setupGlyf({".notdef": box, "A": box})
    fb.setupHorizontalMetrics({".notdef": (500, 50), "A": (500, 50)})
    fb.setupCharacterMap({0x41: "A"})
    fb.setupHorizontalHeader(ascent=ascent, descent=descent)
    fb.setupOS2(
        sTypoAscender=ascent,
        sTypoDescender=descent,
        usWinAscent=ascent,
        usWinDescent=-descent,
        usWeightClass=weight_class,
    )
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style,
            "fullName": f"{family} {style}",
            "psName": f"{family.replace(' ', '')}-{style}",
        }
    )
    fb.setupPost()

    if table_blob is not None:
        table = newTable("symp")
        table.data = table_blob
        fb.font["symp"] = table

    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


