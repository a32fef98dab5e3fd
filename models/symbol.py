"""
Symbol and palette definitions for pattern puzzles.

Each palette holds 8 distinct symbols. The high-contrast palette pairs
colorblind-safe colors with the same glyph set as the standard palette.
"""

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Symbol:
    """A colored glyph the player can select. Identity is the name."""
    name: str
    color: str  # "#RRGGBB"
    glyph: str

    def __str__(self) -> str:
        return f"{self.name} {self.glyph}"


class PaletteMode(enum.Enum):
    """Accessibility variants of the symbol palette."""
    STANDARD = "standard"
    HIGH_CONTRAST = "high_contrast"

    @classmethod
    def from_colorblind(cls, color_blind_mode: bool) -> "PaletteMode":
        """Pick the palette for the persisted color-blind preference."""
        return cls.HIGH_CONTRAST if color_blind_mode else cls.STANDARD

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        """The fixed 8 symbols of this palette, in canonical order."""
        return PALETTES[self]


STANDARD_PALETTE: tuple[Symbol, ...] = (
    Symbol("Blue", "#4A8FDC", "●"),
    Symbol("Green", "#10B981", "■"),
    Symbol("Orange", "#F59E0B", "▲"),
    Symbol("White", "#FFFFFF", "◆"),
    Symbol("Red", "#EF4444", "★"),
    Symbol("Yellow", "#FBBF24", "✦"),
    Symbol("Purple", "#8B5CF6", "◉"),
    Symbol("Pink", "#EC4899", "♦"),
)

HIGH_CONTRAST_PALETTE: tuple[Symbol, ...] = (
    Symbol("Blue", "#0173B2", "●"),
    Symbol("Orange", "#DE8F05", "■"),
    Symbol("Teal", "#029E73", "▲"),
    Symbol("Magenta", "#CC78BC", "◆"),
    Symbol("Yellow", "#ECE133", "★"),
    Symbol("Sky", "#56B4E9", "✦"),
    Symbol("Lime", "#F0E442", "◉"),
    Symbol("Vermillion", "#D55E00", "♦"),
)

PALETTES: dict[PaletteMode, tuple[Symbol, ...]] = {
    PaletteMode.STANDARD: STANDARD_PALETTE,
    PaletteMode.HIGH_CONTRAST: HIGH_CONTRAST_PALETTE,
}
