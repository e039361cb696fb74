"""
Font Utilities
==============

Helpers for opening font files and reading their naming information.
"""

import logging
import struct
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from sfsymbols.core.exceptions import FontLoadError

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = {".ttf", ".otf", ".ttc", ".otc"}


def load_font(font_path: str | Path, font_number: int = 0) -> TTFont:
    """
    Open a font file.

    Tables are read lazily, so only the tables that are asked for get parsed.

    Args:
        font_path: Path to font file
        font_number: Face index inside a font collection

    Returns:
        Opened TTFont

    Raises:
        FontLoadError: If the file is missing or not a font
    """
    path = Path(font_path)
    if not path.is_file():
        raise FontLoadError(str(path), "file not found")

    try:
        return TTFont(path, fontNumber=font_number, lazy=True)
    except (TTLibError, OSError, ValueError, struct.error) as e:
        raise FontLoadError(str(path), str(e)) from e


def get_font_family(font: TTFont) -> str | None:
    """Get the typographic family name, falling back to the legacy family."""
    if "name" not in font:
        return None

    name_table = font["name"]
    return _get_font_name(name_table, 16) or _get_font_name(name_table, 1)


def get_weight_class(font: TTFont) -> int:
    """Get OS/2 usWeightClass (400 when missing)."""
    try:
        return int(font["OS/2"].usWeightClass)
    except KeyError:
        return 400


def _get_font_name(name_table, name_id: int) -> str | None:
    """Extract font name from name table."""
    # Prefer English (language ID 1033 for US English)
    for record in name_table.names:
        if record.nameID == name_id and record.langID in (1033, 0):
            return str(record)

    for record in name_table.names:
        if record.nameID == name_id:
            return str(record)

    return None


def find_font_files(directories: list[Path]) -> list[Path]:
    """Find font files below the given directories."""
    font_files = []

    for font_dir in directories:
        try:
            font_files.extend(
                font_file
                for font_file in sorted(font_dir.rglob("*"))
                if font_file.is_file() and font_file.suffix.lower() in FONT_EXTENSIONS
            )
        except PermissionError:
            logger.debug(f"Permission denied accessing {font_dir}")
        except OSError as e:
            logger.warning(f"Error scanning {font_dir}: {e}")

    return font_files
