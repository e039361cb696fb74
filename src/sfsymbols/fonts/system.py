"""
System Font Provider
===================

Looks up installed font families on the local machine. fontconfig is used
when ``fc-match`` is available; otherwise the standard font directories of
the platform are scanned and each file's naming table is compared.
"""

import logging
import os
import platform
import shutil
import subprocess
from pathlib import Path

from sfsymbols.core.config import ResolverConfig
from sfsymbols.core.exceptions import SymbolsError
from sfsymbols.core.models import Weight

from .models import FontFile
from .utils import find_font_files, get_font_family, get_weight_class, load_font

logger = logging.getLogger(__name__)


class SystemFontProvider:
    """
    Provider for fonts installed on the local machine.
    """

    def __init__(self, config: ResolverConfig | None = None):
        """Initialize system font provider."""
        self.config = config or ResolverConfig()
        self.system = platform.system().lower()
        self.font_directories = self.config.font_directories or self._get_system_font_directories()

        logger.debug(f"SystemFontProvider initialized for {self.system}")
        logger.debug(f"Font directories: {self.font_directories}")

    def _get_system_font_directories(self) -> list[Path]:
        """Get system font directories based on operating system."""
        directories = []

        if self.system == "windows":
            directories.extend(
                [
                    Path(os.environ.get("WINDIR", "C:\\Windows")) / "Fonts",
                    Path(os.environ.get("LOCALAPPDATA", "")) / "Microsoft" / "Windows" / "Fonts",
                ]
            )

        elif self.system == "darwin":  # macOS
            directories.extend(
                [
                    Path("/System/Library/Fonts"),
                    Path("/Library/Fonts"),
                    Path.home() / "Library" / "Fonts",
                ]
            )

        else:  # Linux and other Unix-like systems
            directories.extend(
                [
                    Path("/usr/share/fonts"),
                    Path("/usr/local/share/fonts"),
                    Path.home() / ".fonts",
                    Path.home() / ".local" / "share" / "fonts",
                ]
            )

        return [d for d in directories if d.exists() and d.is_dir()]

    def find_font(self, family_name: str, weight: Weight, size: float) -> FontFile | None:
        """
        Find an installed font of the given family.

        Args:
            family_name: Font family name, e.g. ``SF Pro Display``
            weight: Requested weight
            size: Requested point size

        Returns:
            FontFile if the family is installed, None otherwise
        """
        fc_match_path = shutil.which("fc-match") if self.config.use_fontconfig else None
        if fc_match_path:
            return self._find_fontconfig_font(fc_match_path, family_name, weight, size)
        return self._scan_for_font(family_name, weight)

    def _find_fontconfig_font(
        self, fc_match_path: str, family_name: str, weight: Weight, size: float
    ) -> FontFile | None:
        """Find font using fontconfig."""
        pattern = f"{family_name}:weight={weight.fontconfig_weight}:size={size:g}"
        try:
            result = subprocess.run(
                [fc_match_path, pattern, "--format=%{family}\\n%{file}\\n%{index}"],
                capture_output=True,
                text=True,
                timeout=self.config.subprocess_timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"fc-match failed for {family_name}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"fc-match exited with {result.returncode} for {family_name}")
            return None

        return self._parse_fc_match(result.stdout, family_name, weight)

    @staticmethod
    def _parse_fc_match(output: str, family_name: str, weight: Weight) -> FontFile | None:
        """Parse ``fc-match`` output; fontconfig always answers, so check the family."""
        lines = output.splitlines()
        if len(lines) < 2:
            return None

        families = [family.strip().lower() for family in lines[0].split(",")]
        if family_name.lower() not in families:
            logger.debug(f"fc-match substituted '{lines[0]}' for '{family_name}'")
            return None

        font_path = Path(lines[1].strip())
        if not font_path.is_file():
            return None

        try:
            font_number = int(lines[2]) if len(lines) > 2 else 0
        except ValueError:
            font_number = 0

        return FontFile(
            path=font_path,
            family=family_name,
            weight_class=weight.weight_class,
            font_number=font_number,
        )

    def _scan_for_font(self, family_name: str, weight: Weight) -> FontFile | None:
        """Scan font directories for the family, closest weight first."""
        candidates = [
            font_file
            for font_file in self.list_fonts()
            if font_file.family.lower() == family_name.lower()
        ]
        if not candidates:
            return None

        return min(candidates, key=lambda f: abs(f.weight_class - weight.weight_class))

    def list_fonts(self) -> list[FontFile]:
        """List all system fonts."""
        fonts = []

        for font_path in find_font_files(self.font_directories):
            font_file = self._create_font_file(font_path)
            if font_file:
                fonts.append(font_file)

        return fonts

    def _create_font_file(self, font_path: Path) -> FontFile | None:
        """Read family and weight of a font file."""
        try:
            font = load_font(font_path)
        except SymbolsError as e:
            logger.debug(str(e))
            return None

        try:
            family = get_font_family(font)
            if not family:
                return None
            return FontFile(path=font_path, family=family, weight_class=get_weight_class(font))
        except Exception as e:
            logger.debug(f"Failed to read names from {font_path}: {e}")
            return None
        finally:
            font.close()
