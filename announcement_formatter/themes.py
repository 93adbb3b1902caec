# # Color palettes: per-widget colors, page chrome, and preview tints.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class WidgetColors:
    primary: str = "#001489"
    background: str = "#FFFFFF"
    text: str = "#333333"
    accent: str = "#FFCD00"

    def placeholders(self) -> Dict[str, str]:
        return {
            "color_primary": self.primary,
            "color_background": self.background,
            "color_text": self.text,
            "color_accent": self.accent,
        }


DEFAULT_COLORS = WidgetColors()


@dataclass(frozen=True)
class PageTheme:
    name: str
    primary: str
    primary_light: str
    gold: str
    red: str


# # Page boilerplate colors (header/footer bands)
CAP_THEME = PageTheme("CAP", primary="#001489", primary_light="#0056d2", gold="#FFCD00", red="#BA0C2F")

# # Preview node colors
HEADING_COLOR = "#BA0C2F"
EMPHASIS_COLOR = "#000000"
TEXT_COLOR = "#000000"
ERROR_COLOR = "#FF0000"
MUTED_COLOR = "#808080"
FALLBACK_BACKGROUND = "#FFFFFF"

# # rgba(...) backgrounds are not evaluated; known palette fragments map to flat tints.
# # Checked in order, every needle of an entry must appear in the value.
RGBA_TINTS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("186",), "#FFF3CD"),
    (("BA0C2F",), "#FFF3CD"),
    (("255", "249"), "#FFF9E6"),
)


def rgba_tint(value: str) -> str:
    for needles, flat in RGBA_TINTS:
        if all(n in value for n in needles):
            return flat
    return FALLBACK_BACKGROUND
