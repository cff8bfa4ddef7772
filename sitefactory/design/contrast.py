"""Color contrast utilities based on WCAG 2.1 relative luminance"""

import re
from typing import Optional, Tuple

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

DARK_TEXT = "#0f172a"
LIGHT_TEXT = "#f8fafc"

# WCAG AA for large/bold text
MIN_CONTRAST = 3.0
YIQ_DARK_TEXT_THRESHOLD = 160


def hex_to_rgb(value: str) -> Optional[Tuple[int, int, int]]:
    """Parse #rgb or #rrggbb; returns None for anything else"""
    if not isinstance(value, str) or not HEX_COLOR.match(value.strip()):
        return None
    clean = value.strip().lstrip("#")
    if len(clean) == 3:
        clean = "".join(ch * 2 for ch in clean)
    return int(clean[0:2], 16), int(clean[2:4], 16), int(clean[4:6], 16)


def is_hex_color(value) -> bool:
    return hex_to_rgb(value) is not None


def luminance(value: str) -> float:
    """Relative luminance between 0 (black) and 1 (white); unparseable colors count as 0.5"""
    rgb = hex_to_rgb(value)
    if rgb is None:
        return 0.5

    def to_linear(channel: int) -> float:
        s = channel / 255
        return s / 12.92 if s <= 0.03928 else ((s + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * to_linear(r) + 0.7152 * to_linear(g) + 0.0722 * to_linear(b)


def contrast_ratio(first: str, second: str) -> float:
    lighter, darker = sorted((luminance(first), luminance(second)), reverse=True)
    return (lighter + 0.05) / (darker + 0.05)


def yiq(value: str) -> float:
    rgb = hex_to_rgb(value)
    if rgb is None:
        return 128.0
    r, g, b = rgb
    return (r * 299 + g * 587 + b * 114) / 1000


def fallback_text_color(background: str) -> str:
    """Near-black on light backgrounds (YIQ >= 160), near-white otherwise.

    If the YIQ pick still misses the minimum ratio (mid-tones around the
    threshold), the opposite extreme is returned instead.
    """
    preferred, other = (DARK_TEXT, LIGHT_TEXT) if yiq(background) >= YIQ_DARK_TEXT_THRESHOLD else (LIGHT_TEXT, DARK_TEXT)
    if contrast_ratio(preferred, background) >= MIN_CONTRAST:
        return preferred
    return other


def on_color(base: str, candidate: str, min_ratio: float = MIN_CONTRAST) -> str:
    """Keep ``candidate`` as foreground for ``base`` if it is legible, else fall back"""
    if is_hex_color(candidate) and contrast_ratio(base, candidate) >= min_ratio:
        return candidate
    return fallback_text_color(base)
