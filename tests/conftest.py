"""
Pytest configuration and fixtures for symbol font tests.
"""

import pytest
from helpers import SAMPLE_TABLE, build_font_file, make_table_blob

from sfsymbols.core.config import ResolverConfig
from sfsymbols.core.models import Family, FontDescriptor, GlyphSize, Variant, Weight
from sfsymbols.fonts.utils import load_font


@pytest.fixture
def descriptor():
    """Default font descriptor."""
    return FontDescriptor(
        family=Family.PRO,
        variant=Variant.DISPLAY,
        weight=Weight.BOLD,
        font_size=32.0,
        glyph_size=GlyphSize.LARGE,
    )


@pytest.fixture
def symbol_font_path(tmp_path):
    """Font file carrying the sample symbol table."""
    return build_font_file(tmp_path / "SymbolFont.ttf", make_table_blob(SAMPLE_TABLE))


@pytest.fixture
def plain_font_path(tmp_path):
    """Font file without a symbol table."""
    return build_font_file(tmp_path / "PlainFont.ttf")


@pytest.fixture
def isolated_config(tmp_path):
    """Config that never looks at the real machine."""
    return ResolverConfig(
        _env_file=None,
        application_dirs=[tmp_path / "Applications"],
        font_directories=[tmp_path / "Fonts"],
        use_fontconfig=False,
        use_spotlight=False,
    )


@pytest.fixture
def open_font():
    """Open font files for a test and close them afterwards."""
    handles = []

    def _open(path):
        handle = load_font(path)
        handles.append(handle)
        return handle

    yield _open

    for handle in handles:
        handle.close()
