"""Tests for installed system font lookup."""

import subprocess
from unittest.mock import Mock, patch

import pytest
from helpers import build_font_file

from sfsymbols.core.config import ResolverConfig
from sfsymbols.core.models import Weight
from sfsymbols.fonts.system import SystemFontProvider


@pytest.fixture
def fonts_dir(tmp_path):
    fonts = tmp_path / "Fonts"
    build_font_file(fonts / "SF-Pro-Display-Regular.otf", weight_class=400)
    build_font_file(fonts / "SF-Pro-Display-Bold.otf", style="Bold", weight_class=700)
    build_font_file(fonts / "nested" / "Other.ttf", family="Other Sans")
    (fonts / "readme.txt").write_text("not a font")
    return fonts


@pytest.fixture
def scan_provider(fonts_dir):
    config = ResolverConfig(_env_file=None, font_directories=[fonts_dir], use_fontconfig=False)
    return SystemFontProvider(config)


@pytest.fixture
def fontconfig_provider(tmp_path):
    config = ResolverConfig(_env_file=None, font_directories=[tmp_path], use_fontconfig=True)
    return SystemFontProvider(config)


class TestDirectoryScan:
    """Test lookup by scanning font directories."""

    def test_list_fonts(self, scan_provider):
        families = sorted(f.family for f in scan_provider.list_fonts())
        assert families == ["Other Sans", "SF Pro Display", "SF Pro Display"]

    def test_closest_weight_wins(self, scan_provider):
        font_file = scan_provider.find_font("SF Pro Display", Weight.HEAVY, 20.0)

        assert font_file is not None
        assert font_file.filename == "SF-Pro-Display-Bold.otf"
        assert font_file.weight_class == 700

    def test_light_request_picks_regular(self, scan_provider):
        font_file = scan_provider.find_font("SF Pro Display", Weight.LIGHT, 20.0)
        assert font_file.filename == "SF-Pro-Display-Regular.otf"

    def test_family_match_is_case_insensitive(self, scan_provider):
        assert scan_provider.find_font("sf pro display", Weight.REGULAR, 20.0) is not None

    def test_unknown_family(self, scan_provider):
        assert scan_provider.find_font("SF Compact Rounded", Weight.REGULAR, 20.0) is None

    def test_unreadable_font_skipped(self, fonts_dir, scan_provider):
        (fonts_dir / "broken.ttf").write_bytes(b"\x00\x01")
        assert len(scan_provider.list_fonts()) == 3


class TestFontconfigLookup:
    """Test lookup through fc-match."""

    def test_fc_match_hit(self, fontconfig_provider, tmp_path):
        font_path = build_font_file(tmp_path / "SF-Pro.ttf")
        completed = Mock(returncode=0, stdout=f"SF Pro Display,SF Pro\n{font_path}\n0")

        with (
            patch("sfsymbols.fonts.system.shutil.which", return_value="/usr/bin/fc-match"),
            patch("sfsymbols.fonts.system.subprocess.run", return_value=completed) as run,
        ):
            font_file = fontconfig_provider.find_font("SF Pro Display", Weight.BOLD, 24.0)

        assert font_file is not None
        assert font_file.path == font_path
        assert font_file.font_number == 0
        args = run.call_args.args[0]
        assert args[0] == "/usr/bin/fc-match"
        assert args[1] == "SF Pro Display:weight=200:size=24"

    @pytest.mark.parametrize(
        "weight,fc_weight",
        [(Weight.ULTRALIGHT, 0), (Weight.THIN, 40), (Weight.LIGHT, 50), (Weight.BLACK, 210)],
    )
    def test_fc_match_weight_query(self, fontconfig_provider, weight, fc_weight):
        completed = Mock(returncode=1, stdout="")

        with (
            patch("sfsymbols.fonts.system.shutil.which", return_value="/usr/bin/fc-match"),
            patch("sfsymbols.fonts.system.subprocess.run", return_value=completed) as run,
        ):
            fontconfig_provider.find_font("SF Pro Display", weight, 12.0)

        assert run.call_args.args[0][1] == f"SF Pro Display:weight={fc_weight}:size=12"

    def test_fc_match_substitution_rejected(self, fontconfig_provider, tmp_path):
        font_path = build_font_file(tmp_path / "DejaVu.ttf", family="DejaVu Sans")
        completed = Mock(returncode=0, stdout=f"DejaVu Sans\n{font_path}\n0")

        with (
            patch("sfsymbols.fonts.system.shutil.which", return_value="/usr/bin/fc-match"),
            patch("sfsymbols.fonts.system.subprocess.run", return_value=completed),
        ):
            assert fontconfig_provider.find_font("SF Pro Display", Weight.BOLD, 24.0) is None

    def test_fc_match_failure(self, fontconfig_provider):
        completed = Mock(returncode=1, stdout="")

        with (
            patch("sfsymbols.fonts.system.shutil.which", return_value="/usr/bin/fc-match"),
            patch("sfsymbols.fonts.system.subprocess.run", return_value=completed),
        ):
            assert fontconfig_provider.find_font("SF Pro Display", Weight.BOLD, 24.0) is None

    def test_fc_match_timeout(self, fontconfig_provider):
        with (
            patch("sfsymbols.fonts.system.shutil.which", return_value="/usr/bin/fc-match"),
            patch(
                "sfsymbols.fonts.system.subprocess.run",
                side_effect=subprocess.TimeoutExpired("fc-match", 10),
            ),
        ):
            assert fontconfig_provider.find_font("SF Pro Display", Weight.BOLD, 24.0) is None

    def test_falls_back_to_scan_without_fc_match(self, fontconfig_provider, tmp_path):
        build_font_file(tmp_path / "SF-Pro.ttf")

        with (
            patch("sfsymbols.fonts.system.shutil.which", return_value=None),
            patch("sfsymbols.fonts.system.subprocess.run") as run,
        ):
            font_file = fontconfig_provider.find_font("SF Pro Display", Weight.REGULAR, 24.0)

        run.assert_not_called()
        assert font_file is not None
        assert font_file.filename == "SF-Pro.ttf"

    def test_parse_collection_index(self, tmp_path):
        font_path = tmp_path / "SFNS.ttc"
        font_path.write_bytes(b"")

        font_file = SystemFontProvider._parse_fc_match(
            f"SF Pro Display\n{font_path}\n3", "SF Pro Display", Weight.MEDIUM
        )

        assert font_file.font_number == 3
        assert font_file.weight_class == 500

    def test_parse_short_output(self):
        assert SystemFontProvider._parse_fc_match("", "SF Pro Display", Weight.MEDIUM) is None
