"""Sanitization of LLM output and user-submitted text"""

import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple, Type

import bleach

from sitefactory.design.archetypes import allowed_body_fonts
from sitefactory.models.draft import (
    BorderRadius,
    ButtonStyle,
    ColorScheme,
    GeneratedWebsiteDraft,
    SectionSpacing,
    SectionType,
    ShadowStyle,
)
from sitefactory.models.errors import MalformedGenerationError

logger = logging.getLogger(__name__)

SAFE_FONT = "Inter"

# Matched as case-insensitive substrings of the body font
FORBIDDEN_BODY_FONTS: Tuple[str, ...] = (
    "fraunces", "space grotesque", "bricolage grotesque", "syne",
    "lora", "playfair", "merriweather", "georgia", "cormorant", "dm serif",
    "crimson", "garamond", "times", "palatino", "baskerville", "didot",
)

ALLOWED_BODY_FONTS: Tuple[str, ...] = allowed_body_fonts() + tuple(
    f for f in ("Nunito", "DM Sans", "Open Sans", "Raleway") if f not in allowed_body_fonts()
)
_BODY_FONT_CANONICAL = {f.lower(): f for f in ALLOWED_BODY_FONTS}

ENUM_DEFAULTS: Dict[str, Tuple[Type, Any]] = {
    "borderRadius": (BorderRadius, BorderRadius.MD),
    "shadowStyle": (ShadowStyle, ShadowStyle.SOFT),
    "sectionSpacing": (SectionSpacing, SectionSpacing.NORMAL),
    "buttonStyle": (ButtonStyle, ButtonStyle.FILLED),
}

_FENCE_START = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_END = re.compile(r"\s*```\s*$")

_HEX = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_COLOR_COMPONENT = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:%|deg|grad|rad|turn)?"
_COLOR_SEPARATOR = r"(?:\s*[,/]\s*|\s+)"
# 3 or 4 numeric components: rgb(0, 0, 0), rgba(0 0 0 / 50%), hsl(20deg 50% 40%)
_COLOR_FUNCTION = re.compile(
    rf"^(?:rgba?|hsla?)\(\s*{_COLOR_COMPONENT}(?:{_COLOR_SEPARATOR}{_COLOR_COMPONENT}){{2,3}}\s*\)$",
    re.IGNORECASE,
)
_NAMED_COLORS = {
    "transparent", "white", "black", "gray", "grey", "silver", "red", "maroon",
    "orange", "gold", "yellow", "olive", "green", "lime", "teal", "navy", "blue",
    "aqua", "cyan", "purple", "fuchsia", "magenta", "pink", "brown", "beige",
    "ivory", "crimson", "coral", "salmon", "tomato", "indigo", "violet",
    "whitesmoke", "snow", "linen", "khaki", "tan", "chocolate", "slategray",
}


def strip_code_fences(raw: str) -> str:
    text = raw.strip()
    text = _FENCE_START.sub("", text)
    return _FENCE_END.sub("", text).strip()


def parse_generation(raw: Optional[str]) -> Dict[str, Any]:
    """Fence-strip and parse; anything but a JSON object is malformed"""
    if not isinstance(raw, str):
        raise MalformedGenerationError("Generation output is not text")
    text = strip_code_fences(raw)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"[Sanitizer] JSON parse failed at pos {e.pos}: {e.msg}")
        raise MalformedGenerationError(f"Generation output is not valid JSON: {e.msg}", raw_excerpt=text[:200])
    if not isinstance(data, dict):
        raise MalformedGenerationError(
            f"Generation output is a JSON {type(data).__name__}, expected an object",
            raw_excerpt=text[:200],
        )
    return data


def is_css_color(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    v = value.strip()
    if not v or "[" in v:
        return False
    return bool(_HEX.match(v) or _COLOR_FUNCTION.match(v) or v.lower() in _NAMED_COLORS)


def is_forbidden_body_font(font: str) -> bool:
    lowered = font.strip().lower()
    return any(bad in lowered for bad in FORBIDDEN_BODY_FONTS)


class _TokenRepair:
    """Collects repairs so one summary line is logged per draft"""

    def __init__(self):
        self.count = 0

    def note(self, field: str, raw: Any, repaired: Any):
        self.count += 1
        logger.debug(f"[Sanitizer] Repaired {field}: {raw!r} -> {repaired!r}")

    def enum(self, tokens: Dict[str, Any], field: str) -> str:
        enum_cls, default = ENUM_DEFAULTS[field]
        raw = tokens.get(field)
        candidate = str(raw).strip().lower() if raw is not None else ""
        try:
            return enum_cls(candidate).value
        except ValueError:
            self.note(field, raw, default.value)
            return default.value

    def headline_font(self, raw: Any, default: str) -> str:
        if not isinstance(raw, str) or not raw.strip() or "[" in raw:
            self.note("headlineFont", raw, default)
            return default
        return raw.strip()

    def body_font(self, raw: Any) -> str:
        if not isinstance(raw, str) or not raw.strip() or "[" in raw:
            self.note("bodyFont", raw, SAFE_FONT)
            return SAFE_FONT
        if is_forbidden_body_font(raw):
            self.note("bodyFont", raw, SAFE_FONT)
            return SAFE_FONT
        canonical = _BODY_FONT_CANONICAL.get(raw.strip().lower())
        if canonical is None:
            self.note("bodyFont", raw, SAFE_FONT)
            return SAFE_FONT
        return canonical

    def color(self, tokens: Dict[str, Any], field: str, fallback: str) -> str:
        raw = tokens.get(field)
        if is_css_color(raw):
            return raw.strip()
        self.note(field, raw, fallback)
        return fallback

    def section_backgrounds(self, raw: Any, scheme: ColorScheme) -> List[str]:
        if isinstance(raw, list):
            valid = [c.strip() for c in raw if is_css_color(c)]
            if len(valid) >= 2:
                if len(valid) != len(raw):
                    self.note("sectionBackgrounds", raw, valid)
                return valid
        fallback = [scheme.background, scheme.surface, scheme.background]
        self.note("sectionBackgrounds", raw, fallback)
        return fallback


def _sanitize_sections(raw: Any) -> List[Dict[str, Any]]:
    if not isinstance(raw, list):
        return []
    valid_types = {t.value for t in SectionType}
    sections = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        section_type = str(item.get("type", "")).strip().lower()
        if section_type not in valid_types:
            logger.debug(f"[Sanitizer] Dropping section with type {item.get('type')!r}")
            continue
        sections.append({**item, "type": section_type})
    return sections


def sanitize_generation(raw: Optional[str], scheme: ColorScheme, fallback_name: str = "",
                        headline_default: Optional[str] = None) -> GeneratedWebsiteDraft:
    """Turn raw LLM text into a validated draft.

    Structural failure (not JSON, not an object) raises MalformedGenerationError.
    Every design-token problem is repaired in place with a fixed default, so
    the returned draft always satisfies the design-token contract. Running the
    draft's own document back through here yields an identical document.
    """
    data = parse_generation(raw)
    repair = _TokenRepair()

    tokens = data.get("designTokens")
    if not isinstance(tokens, dict):
        repair.note("designTokens", tokens, {})
        tokens = {}

    clean_tokens = {
        "headlineFont": repair.headline_font(tokens.get("headlineFont"), headline_default or SAFE_FONT),
        "bodyFont": repair.body_font(tokens.get("bodyFont")),
        "borderRadius": repair.enum(tokens, "borderRadius"),
        "shadowStyle": repair.enum(tokens, "shadowStyle"),
        "sectionSpacing": repair.enum(tokens, "sectionSpacing"),
        "buttonStyle": repair.enum(tokens, "buttonStyle"),
        "accentColor": repair.color(tokens, "accentColor", scheme.accent),
        "textColor": repair.color(tokens, "textColor", scheme.text),
        "backgroundColor": repair.color(tokens, "backgroundColor", scheme.background),
        "cardBackground": repair.color(tokens, "cardBackground", scheme.surface),
        "sectionBackgrounds": repair.section_backgrounds(tokens.get("sectionBackgrounds"), scheme),
    }

    name = data.get("businessName")
    document = {
        **data,
        "businessName": name.strip() if isinstance(name, str) and name.strip() else fallback_name,
        "tagline": data.get("tagline") if isinstance(data.get("tagline"), str) else "",
        "description": data.get("description") if isinstance(data.get("description"), str) else "",
        "sections": _sanitize_sections(data.get("sections")),
        "designTokens": clean_tokens,
    }

    if repair.count:
        logger.info(f"[Sanitizer] Repaired {repair.count} design token value(s)")
    return GeneratedWebsiteDraft.model_validate(document)


def sanitize_text(text: Optional[str]) -> str:
    """Strip all HTML from user-submitted text"""
    if not text:
        return ""
    return bleach.clean(text, tags=[], attributes={}, strip=True).strip()
