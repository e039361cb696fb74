"""
Font Resolution
===============

Finds a usable symbol font by trying, in order:

1. a font file given by the caller,
2. the installed system family matching the descriptor,
3. the fallback font inside installed copies of the SF Symbols app.

The first source that yields a font with a readable glyph table wins. Each
source is tried at most once per call and nothing is cached between calls.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from sfsymbols.core.config import ResolverConfig
from sfsymbols.core.exceptions import SymbolsError
from sfsymbols.core.models import FontDescriptor

from .companion import CompanionAppProvider
from .extractor import GlyphFactory, build_font, font_from_path
from .models import Font, Glyph
from .system import SystemFontProvider
from .utils import load_font

logger = logging.getLogger(__name__)

FontSource = tuple[str, Callable[[], Font | None]]


class FontResolver:
    """
    Resolves symbol fonts through an ordered list of sources.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        system_provider: SystemFontProvider | None = None,
        companion_provider: CompanionAppProvider | None = None,
        glyph_factory: GlyphFactory = Glyph.from_fields,
    ):
        """
        Initialize font resolver.

        Args:
            config: Resolver configuration
            system_provider: Installed font lookup
            companion_provider: Companion application lookup
            glyph_factory: Builds glyphs from table rows
        """
        self.config = config or ResolverConfig()
        self.system_provider = system_provider or SystemFontProvider(self.config)
        self.companion_provider = companion_provider or CompanionAppProvider(self.config)
        self.glyph_factory = glyph_factory

    def sources(
        self, custom_location: Path | None, descriptor: FontDescriptor
    ) -> list[FontSource]:
        """Get the font sources to try, highest priority first."""
        sources = []
        if custom_location is not None:
            sources.append(("custom", lambda: self.from_location(custom_location, descriptor)))
        sources.append(("system", lambda: self.from_system(descriptor)))
        sources.append(("companion", lambda: self.from_companion(descriptor)))
        return sources

    def resolve(
        self, custom_location: str | Path | None, descriptor: FontDescriptor
    ) -> Font | None:
        """
        Resolve the best font for a descriptor.

        Args:
            custom_location: Optional font file supplied by the user
            descriptor: Requested family, variant, weight and sizes

        Returns:
            Font from the first source that works, None if no source does
        """
        location = Path(custom_location) if custom_location is not None else None

        for name, source in self.sources(location, descriptor):
            try:
                font = source()
            except Exception as e:
                logger.debug(f"Font source '{name}' failed: {e}")
                continue

            if font is not None:
                logger.info(f"Resolved {descriptor} from {name} source: {font}")
                return font
            logger.debug(f"Font source '{name}' had no usable font")

        logger.warning(f"No font available for {descriptor}")
        return None

    def from_location(self, font_path: Path, descriptor: FontDescriptor) -> Font | None:
        """Build a font from a file."""
        return font_from_path(font_path, descriptor, glyph_factory=self.glyph_factory)

    def from_system(self, descriptor: FontDescriptor) -> Font | None:
        """Build a font from the installed system family."""
        font_file = self.system_provider.find_font(
            descriptor.family_name, descriptor.weight, descriptor.font_size
        )
        if font_file is None:
            return None

        try:
            handle = load_font(font_file.path, font_number=font_file.font_number)
        except SymbolsError as e:
            logger.debug(str(e))
            return None

        font = build_font(
            handle, descriptor, source=font_file.path, glyph_factory=self.glyph_factory
        )
        if font is None:
            handle.close()
        return font

    def from_companion(self, descriptor: FontDescriptor) -> Font | None:
        """Build a font from the first companion app copy that works."""
        for font_path in self.companion_provider.list_fonts():
            font = self.from_location(font_path, descriptor)
            if font is not None:
                return font
        return None


def best_font_matching(
    custom_location: str | Path | None,
    descriptor: FontDescriptor,
    config: ResolverConfig | None = None,
) -> Font | None:
    """Resolve a font with the default sources."""
    return FontResolver(config).resolve(custom_location, descriptor)
