# # Inline style resolver: style="..." text -> StyleRecord.

from __future__ import annotations

import re
from typing import Optional

from ..themes import FALLBACK_BACKGROUND, rgba_tint
from .nodes import DEFAULT_MARGIN, StyleRecord, Thickness

# # Named colors accepted in border/background values
NAMED_COLORS = {
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#008000",
    "blue": "#0000FF",
    "yellow": "#FFFF00",
    "orange": "#FFA500",
    "purple": "#800080",
    "gray": "#808080",
    "grey": "#808080",
    "silver": "#C0C0C0",
    "maroon": "#800000",
    "navy": "#000080",
    "teal": "#008080",
    "olive": "#808000",
    "lime": "#00FF00",
    "aqua": "#00FFFF",
    "cyan": "#00FFFF",
    "fuchsia": "#FF00FF",
    "magenta": "#FF00FF",
    "gold": "#FFD700",
    "crimson": "#DC143C",
    "darkblue": "#00008B",
    "darkred": "#8B0000",
    "darkgreen": "#006400",
    "darkgray": "#A9A9A9",
    "lightgray": "#D3D3D3",
    "lightblue": "#ADD8E6",
    "whitesmoke": "#F5F5F5",
    "transparent": "#00000000",
}

_HEX = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

_BACKGROUND = re.compile(r"(?<![\w-])background(?:-color)?\s*:\s*([^;]+)", re.IGNORECASE)
_BORDER = re.compile(r"(?<![\w-])(border(?:-left)?)\s*:\s*([^;]+)", re.IGNORECASE)
_BORDER_TOKEN = re.compile(r"[#\w]+")
_PX = re.compile(r"(\d+)px", re.IGNORECASE)
_PADDING = re.compile(r"(?<![\w-])padding\s*:\s*(\d+)px", re.IGNORECASE)
_MARGIN = re.compile(r"(?<![\w-])margin\s*:\s*(\d+)px\s+(\d+)px", re.IGNORECASE)
_RADIUS = re.compile(r"(?<![\w-])border-radius\s*:\s*(\d+)px", re.IGNORECASE)

LEFT_ACCENT = Thickness(3, 0, 0, 0)


def parse_color(value: str) -> Optional[str]:
    v = (value or "").strip()
    if _HEX.match(v):
        return v.upper()
    return NAMED_COLORS.get(v.lower())


def _background(style_text: str) -> Optional[str]:
    matches = _BACKGROUND.findall(style_text)
    if not matches:
        return None
    value = matches[-1].strip()
    if "rgba" in value.lower():
        return rgba_tint(value)
    return parse_color(value) or FALLBACK_BACKGROUND


def _border(style_text: str):
    m = _BORDER.search(style_text)
    if not m:
        return None, None
    name, value = m.group(1), m.group(2)

    color = None
    for tok in _BORDER_TOKEN.findall(value):
        color = parse_color(tok)
        if color:
            break

    if "left" in name.lower():
        return color, LEFT_ACCENT
    px = _PX.search(value)
    return color, Thickness.uniform(int(px.group(1)) if px else 1)


def parse_style(style_text: Optional[str]) -> StyleRecord:
    text = style_text or ""

    border_color, border_thickness = _border(text)

    padding = None
    m = _PADDING.search(text)
    if m:
        padding = Thickness.uniform(int(m.group(1)))

    margin = DEFAULT_MARGIN
    m = _MARGIN.search(text)
    if m:
        top, right = int(m.group(1)), int(m.group(2))
        margin = Thickness(left=right, top=top, right=right, bottom=top)

    radius = None
    m = _RADIUS.search(text)
    if m:
        radius = float(m.group(1))

    return StyleRecord(
        background=_background(text),
        border_color=border_color,
        border_thickness=border_thickness,
        padding=padding,
        margin=margin,
        corner_radius=radius,
    )
