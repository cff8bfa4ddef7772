"""Generated website draft: the only artifact handed to the rendering layer.

Every design-token field here is a closed vocabulary. Instances are produced
by ``sitefactory.utils.sanitization.sanitize_generation`` which maps any raw
LLM output onto these types; nothing downstream re-validates.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from sitefactory.design.contrast import on_color


class BorderRadius(str, Enum):
    NONE = "none"
    SM = "sm"
    MD = "md"
    LG = "lg"
    FULL = "full"


class ShadowStyle(str, Enum):
    NONE = "none"
    FLAT = "flat"
    SOFT = "soft"
    DRAMATIC = "dramatic"
    GLOW = "glow"


class SectionSpacing(str, Enum):
    TIGHT = "tight"
    NORMAL = "normal"
    SPACIOUS = "spacious"
    ULTRA = "ultra"


class ButtonStyle(str, Enum):
    FILLED = "filled"
    OUTLINE = "outline"
    GHOST = "ghost"
    PILL = "pill"


class SectionType(str, Enum):
    HERO = "hero"
    ABOUT = "about"
    SERVICES = "services"
    TESTIMONIALS = "testimonials"
    GALLERY = "gallery"
    CONTACT = "contact"
    CTA = "cta"
    FAQ = "faq"
    MENU = "menu"
    PRICELIST = "pricelist"
    FEATURES = "features"
    TEAM = "team"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=False)


class ColorScheme(_CamelModel):
    """Curated palette plus derived on-colors.

    On-colors are recomputed from the base colors on every construction, so
    a scheme can never carry an on-color that misses 3:1 against its base.
    """
    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    text: str
    text_light: str
    gradient: Optional[str] = None

    on_primary: str = ""
    on_secondary: str = ""
    on_accent: str = ""
    on_surface: str = ""
    on_background: str = ""

    @model_validator(mode="after")
    def _derive_on_colors(self):
        self.on_primary = on_color(self.primary, "#ffffff")
        self.on_secondary = on_color(self.secondary, "#ffffff")
        self.on_accent = on_color(self.accent, "#ffffff")
        self.on_surface = on_color(self.surface, self.text)
        self.on_background = on_color(self.background, self.text)
        return self

    def with_brand(self, primary: Optional[str] = None, secondary: Optional[str] = None) -> "ColorScheme":
        """Copy with brand colors applied; primary also becomes the accent"""
        data = self.model_dump(exclude={"on_primary", "on_secondary", "on_accent", "on_surface", "on_background"})
        if primary:
            data["primary"] = primary
            data["accent"] = primary
            data["gradient"] = f"linear-gradient(135deg, {primary} 0%, {secondary or data['secondary']} 100%)"
        if secondary:
            data["secondary"] = secondary
        return ColorScheme(**data)


class Section(_CamelModel):
    """One page section. Content fields are free-form and kept as generated."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    type: SectionType


class DesignTokens(_CamelModel):
    headline_font: str
    body_font: str
    border_radius: BorderRadius = BorderRadius.MD
    shadow_style: ShadowStyle = ShadowStyle.SOFT
    section_spacing: SectionSpacing = SectionSpacing.NORMAL
    button_style: ButtonStyle = ButtonStyle.FILLED
    accent_color: str
    text_color: str
    background_color: str
    card_background: str
    section_backgrounds: List[str] = Field(min_length=2)


class GeneratedWebsiteDraft(_CamelModel):
    """Validated generation output. Unknown top-level keys (seoTitle, footer, ...) are preserved."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    business_name: str
    tagline: str = ""
    description: str = ""
    sections: List[Section] = Field(default_factory=list)
    design_tokens: DesignTokens

    def section(self, section_type: SectionType) -> Optional[Section]:
        for section in self.sections:
            if section.type == section_type:
                return section
        return None

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
