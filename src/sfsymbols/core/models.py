"""Value types describing which symbol font is wanted."""

from dataclasses import dataclass
from enum import Enum


class _LabelledEnum(Enum):
    """Enum whose value is its user-facing label."""

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str):
        for member in cls:
            if member.value.lower() == label.lower():
                return member
        raise ValueError(f"Unknown {cls.__name__.lower()}: '{label}'")

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]


class Family(_LabelledEnum):
    PRO = "Pro"
    COMPACT = "Compact"


class Variant(_LabelledEnum):
    DISPLAY = "Display"
    ROUNDED = "Rounded"
    TEXT = "Text"


class GlyphSize(_LabelledEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# label -> (AppKit-style scale, OpenType weight class, fontconfig weight)
_WEIGHT_SCALES = {
    "ultralight": (-0.8, 100, 0),
    "thin": (-0.6, 200, 40),
    "light": (-0.4, 300, 50),
    "regular": (0.0, 400, 80),
    "medium": (0.23, 500, 100),
    "semibold": (0.3, 600, 180),
    "bold": (0.4, 700, 200),
    "heavy": (0.56, 800, 205),
    "black": (0.62, 900, 210),
}


class Weight(_LabelledEnum):
    """Nine ordered weight levels, lightest first."""

    ULTRALIGHT = "ultralight"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"

    @property
    def scale(self) -> float:
        """Weight on the -1.0 .. 1.0 scale used by AppKit."""
        return _WEIGHT_SCALES[self.value][0]

    @property
    def weight_class(self) -> int:
        """OpenType ``usWeightClass`` (100-900)."""
        return _WEIGHT_SCALES[self.value][1]

    @property
    def fontconfig_weight(self) -> int:
        """Weight on the fontconfig ``FC_WEIGHT`` scale."""
        return _WEIGHT_SCALES[self.value][2]

    def __lt__(self, other: "Weight") -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return self.weight_class < other.weight_class


@dataclass(frozen=True)
class FontDescriptor:
    """Everything that decides whether a font is a match."""

    family: Family = Family.PRO
    variant: Variant = Variant.DISPLAY
    weight: Weight = Weight.REGULAR
    font_size: float = 44.0
    glyph_size: GlyphSize = GlyphSize.MEDIUM

    def __post_init__(self):
        if self.font_size <= 0:
            raise ValueError(f"Font size must be positive, got {self.font_size}")

    @property
    def family_name(self) -> str:
        """Installed family name, e.g. ``SF Pro Display``."""
        return f"SF {self.family.label} {self.variant.label}"

    def __str__(self) -> str:
        return f"{self.family_name} {self.weight.label} {self.font_size:g}pt"
