"""Companion Application Font Provider
==================================

Finds the fallback symbol font shipped inside installed copies of the
SF Symbols application. Installed copies are located by bundle identifier,
through Spotlight where available and by scanning application directories.
"""

import logging
import plistlib
import shutil
import subprocess
from pathlib import Path

from sfsymbols.core.config import ResolverConfig

logger = logging.getLogger(__name__)


class CompanionAppProvider:
    """Provider for the fallback font bundled with the SF Symbols app."""

    def __init__(self, config: ResolverConfig | None = None):
        """Initialize companion application provider.

        Args:
            config: Resolver configuration naming the bundle and resource

        """
        self.config = config or ResolverConfig()
        self.bundle_id = self.config.companion_bundle_id
        self.resource_name = self.config.fallback_resource

    def find_applications(self) -> list[Path]:
        """Get every installed bundle with the companion bundle identifier."""
        bundles = []
        if self.config.use_spotlight:
            bundles.extend(self._spotlight_applications())
        bundles.extend(self._scan_applications())

        # Keep first occurrence of each bundle
        seen = set()
        unique = []
        for bundle in bundles:
            key = bundle.resolve()
            if key not in seen:
                seen.add(key)
                unique.append(bundle)
        return unique

    def _spotlight_applications(self) -> list[Path]:
        """Query Spotlight for bundles with the identifier."""
        mdfind_path = shutil.which("mdfind")
        if not mdfind_path:
            return []

        try:
            result = subprocess.run(
                [mdfind_path, f"kMDItemCFBundleIdentifier == '{self.bundle_id}'"],
                capture_output=True,
                text=True,
                timeout=self.config.subprocess_timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"mdfind failed for {self.bundle_id}: {e}")
            return []

        if result.returncode != 0:
            return []

        return [Path(line) for line in result.stdout.splitlines() if line.strip()]

    def _scan_applications(self) -> list[Path]:
        """Scan application directories for bundles with the identifier."""
        bundles = []

        for app_dir in self.config.application_dirs:
            if not app_dir.is_dir():
                continue
            try:
                for bundle in sorted(app_dir.glob("*.app")):
                    if self.read_bundle_id(bundle) == self.bundle_id:
                        bundles.append(bundle)
            except PermissionError:
                logger.debug(f"Permission denied accessing {app_dir}")

        return bundles

    @staticmethod
    def read_bundle_id(bundle: Path) -> str | None:
        """Read CFBundleIdentifier from a bundle's Info.plist."""
        info_plist = bundle / "Contents" / "Info.plist"
        try:
            with open(info_plist, "rb") as f:
                info = plistlib.load(f)
        except (OSError, plistlib.InvalidFileException, ValueError) as e:
            logger.debug(f"Unreadable Info.plist in {bundle}: {e}")
            return None

        bundle_id = info.get("CFBundleIdentifier") if isinstance(info, dict) else None
        return bundle_id if isinstance(bundle_id, str) else None

    def resource_path(self, bundle: Path) -> Path | None:
        """Locate the fallback font inside a bundle."""
        font_path = bundle / "Contents" / "Resources" / self.resource_name
        if font_path.is_file():
            return font_path
        logger.debug(f"No {self.resource_name} in {bundle}")
        return None

    def list_fonts(self) -> list[Path]:
        """List fallback font files of all installed copies, in discovery order."""
        fonts = []
        for bundle in self.find_applications():
            font_path = self.resource_path(bundle)
            if font_path:
                fonts.append(font_path)
        return fonts
