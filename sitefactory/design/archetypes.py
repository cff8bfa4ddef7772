"""Design archetype registry.

Each archetype is a complete visual personality: color triad, a font pair whose
body font is always sans-serif, layout patterns, micro-interactions and an
instruction block that the prompt builder embeds verbatim. Ids match the
values used in the industry layout pools.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

DEFAULT_ARCHETYPE_ID = "modern"


@dataclass(frozen=True)
class ColorTriad:
    primary: str
    background: str
    accent: str
    text: str


@dataclass(frozen=True)
class Typography:
    headline_font: str
    body_font: str


@dataclass(frozen=True)
class DesignArchetype:
    id: str
    name: str
    design_twin: str
    aesthetic: str
    colors: ColorTriad
    typography: Typography
    patterns: Tuple[str, ...]
    micro_interactions: Tuple[str, ...]
    directives: Tuple[str, ...]

    @property
    def instructions(self) -> str:
        lines = [
            f"Archetype: {self.name} ({self.id})",
            f"Design twin: {self.design_twin}",
            f"Aesthetic: {self.aesthetic}",
            f"Typography: headlines in {self.typography.headline_font}, body text in {self.typography.body_font}",
            f"Layout patterns: {', '.join(self.patterns)}",
            f"Micro-interactions: {', '.join(self.micro_interactions)}",
        ]
        lines.extend(f"- {directive}" for directive in self.directives)
        return "\n".join(lines)


ARCHETYPES: Dict[str, DesignArchetype] = {
    "elegant": DesignArchetype(
        id="elegant",
        name="The Luxury Minimalist",
        design_twin="an editorial fashion house lookbook",
        aesthetic="Generous whitespace, refined serif headlines, high-end imagery, neutral palettes",
        colors=ColorTriad(primary="#1A1A1A", background="#FDFBF7", accent="#D4AF37", text="#1A1A1A"),
        typography=Typography("Fraunces", "Outfit"),
        patterns=("editorial-grid", "full-bleed-images", "generous-whitespace"),
        micro_interactions=("elegant-hover", "smooth-transitions", "subtle-reveal"),
        directives=(
            "Let whitespace carry the luxury; never crowd a section with more than one idea.",
            "Short, poised sentences. Understatement beats superlatives.",
            "Use the accent color sparingly, only on calls to action and fine rules.",
        ),
    ),
    "fresh": DesignArchetype(
        id="fresh",
        name="The Warm Connector",
        design_twin="a neighbourhood studio with a loyal community",
        aesthetic="Warm inviting colors, friendly rounded shapes, authentic photography, many testimonials",
        colors=ColorTriad(primary="#E07B53", background="#FDF8F4", accent="#F4A261", text="#2D3436"),
        typography=Typography("Plus Jakarta Sans", "Instrument Sans"),
        patterns=("card-grid", "testimonial-slider", "feature-sections"),
        micro_interactions=("gentle-hover", "smooth-scroll", "fade-in"),
        directives=(
            "Write like a friendly host greeting a regular.",
            "Put real people first: testimonials and team deserve prominent space.",
            "Rounded cards and soft shadows; nothing should feel sharp or cold.",
        ),
    ),
    "luxury": DesignArchetype(
        id="luxury",
        name="The Immersive Storyteller",
        design_twin="a cinematic boutique hotel campaign",
        aesthetic="Cinematic, emotional, atmospheric palettes, soft flowing animation",
        colors=ColorTriad(primary="#0F141A", background="#0F141A", accent="#C9A84C", text="#E8E2DA"),
        typography=Typography("Fraunces", "Outfit"),
        patterns=("video-hero", "parallax-sections", "cinematic-scroll"),
        micro_interactions=("cursor-effects", "parallax", "fade-sequences"),
        directives=(
            "Every section is a scene; open with atmosphere, close with an invitation.",
            "Dark backgrounds with warm metallic accents.",
            "Headlines evoke a feeling, never list features.",
        ),
    ),
    "bold": DesignArchetype(
        id="bold",
        name="The Bold Experimentalist",
        design_twin="a streetwear drop page",
        aesthetic="Powerful, direct, strong contrast, oversized typography, asymmetric layouts",
        colors=ColorTriad(primary="#FF4500", background="#0A0A0A", accent="#FF4500", text="#FFFFFF"),
        typography=Typography("Space Grotesque", "Plus Jakarta Sans"),
        patterns=("asymmetric-split", "full-screen-sections", "broken-grid"),
        micro_interactions=("magnetic-buttons", "image-distortion", "marquee"),
        directives=(
            "Short declarative statements. Numbers and facts over adjectives.",
            "One oversized headline per section; let it break the grid.",
            "High contrast everywhere; no pastel surfaces.",
        ),
    ),
    "craft": DesignArchetype(
        id="craft",
        name="The Retro Revivalist",
        design_twin="a traditional workshop with a hand-painted sign",
        aesthetic="Authentic, handmade, textured backgrounds, illustrative elements",
        colors=ColorTriad(primary="#D4A574", background="#FFF8DC", accent="#CD5C5C", text="#3E2723"),
        typography=Typography("Bricolage Grotesque", "Instrument Sans"),
        patterns=("classic-layout", "vintage-cards", "decorative-borders"),
        micro_interactions=("subtle-hover", "paper-textures", "gentle-animations"),
        directives=(
            "Celebrate craftsmanship: tools, materials, years of experience.",
            "Honest, grounded language without marketing gloss.",
            "Decorative borders and warm paper tones frame the content.",
        ),
    ),
    "modern": DesignArchetype(
        id="modern",
        name="The Digital Purist",
        design_twin="a product-led software landing page",
        aesthetic="Minimal, technical, focused on clarity and function",
        colors=ColorTriad(primary="#6366F1", background="#FAFAFA", accent="#6366F1", text="#1F2937"),
        typography=Typography("Plus Jakarta Sans", "Inter"),
        patterns=("asymmetric-grid", "full-screen-sections", "bento-grid"),
        micro_interactions=("subtle-hover", "smooth-scroll", "staggered-reveal"),
        directives=(
            "Clarity first: each section answers one customer question.",
            "Bento grids for services, crisp icons, no ornament.",
            "Benefit-driven copy with concrete outcomes.",
        ),
    ),
    "trust": DesignArchetype(
        id="trust",
        name="The Corporate Professional",
        design_twin="an established private bank",
        aesthetic="Serious, trustworthy, clear structure, prominent trust signals",
        colors=ColorTriad(primary="#1E3A5F", background="#FFFFFF", accent="#38B2AC", text="#1A202C"),
        typography=Typography("Instrument Sans", "Inter"),
        patterns=("structured-grid", "stats-sections", "team-grid"),
        micro_interactions=("professional-hover", "smooth-scroll", "accordion"),
        directives=(
            "Lead with credentials, experience and measurable results.",
            "Calm, precise tone; empathy without emotion.",
            "Stats and FAQ sections carry as much weight as the hero.",
        ),
    ),
    "vibrant": DesignArchetype(
        id="vibrant",
        name="The Energetic Communicator",
        design_twin="a high-energy sports brand campaign",
        aesthetic="Dynamic, energetic, strong typography, parallax, high information density",
        colors=ColorTriad(primary="#FF4500", background="#0D0D0D", accent="#FFD700", text="#FFFFFF"),
        typography=Typography("Bricolage Grotesque", "Plus Jakarta Sans"),
        patterns=("bento-grid", "magazine-layout", "card-masonry"),
        micro_interactions=("hover-scale", "staggered-reveal", "parallax"),
        directives=(
            "Imperative voice. Motivate, challenge, celebrate results.",
            "Dense, magazine-style layouts with strong color blocks.",
            "Every call to action feels urgent.",
        ),
    ),
    "natural": DesignArchetype(
        id="natural",
        name="The Eco-Conscious",
        design_twin="an organic farm shop",
        aesthetic="Close to nature, sustainable, earthy colors, organic shapes, nature imagery",
        colors=ColorTriad(primary="#4A7C59", background="#F5F0E8", accent="#8B6914", text="#2C3E2D"),
        typography=Typography("Fraunces", "Instrument Sans"),
        patterns=("organic-grid", "full-bleed-images", "feature-sections"),
        micro_interactions=("gentle-hover", "smooth-scroll", "fade-in"),
        directives=(
            "Sensory, grounded copy; name regional origins.",
            "Organic shapes and earthy tones; avoid hard geometric blocks.",
            "Sustainability is shown through specifics, not slogans.",
        ),
    ),
    "dynamic": DesignArchetype(
        id="dynamic",
        name="The Playful Innovator",
        design_twin="a creative agency portfolio",
        aesthetic="Playful, innovative, colorful palette, animated illustration, surprising interactions",
        colors=ColorTriad(primary="#6366F1", background="#FAFAFA", accent="#EC4899", text="#1F2937"),
        typography=Typography("Syne", "Plus Jakarta Sans"),
        patterns=("card-carousel", "feature-grid", "hero-illustration"),
        micro_interactions=("bounce-hover", "playful-animations", "micro-interactions"),
        directives=(
            "Witty, confident copy with a wink.",
            "Carousels and illustrated heroes; color is a feature.",
            "Surprise the reader at least once per page.",
        ),
    ),
    "warm": DesignArchetype(
        id="warm",
        name="The Warm Connector (Gastro)",
        design_twin="a family trattoria with a full house every night",
        aesthetic="Sensory, appetising, cosy, warm earth tones, inviting atmosphere",
        colors=ColorTriad(primary="#C0392B", background="#FDF6EC", accent="#E67E22", text="#2C1810"),
        typography=Typography("Fraunces", "Instrument Sans"),
        patterns=("editorial-grid", "full-bleed-images", "card-grid"),
        micro_interactions=("elegant-hover", "smooth-transitions", "fade-in"),
        directives=(
            "Describe aromas, textures and the atmosphere of the room.",
            "Full-bleed food photography between text sections.",
            "Reservation call to action is always one click away.",
        ),
    ),
    "clean": DesignArchetype(
        id="clean",
        name="The Corporate Professional (Clean)",
        design_twin="a modern medical practice",
        aesthetic="Clear, professional, trustworthy, lots of whitespace, structured navigation",
        colors=ColorTriad(primary="#2563EB", background="#FFFFFF", accent="#0EA5E9", text="#1E293B"),
        typography=Typography("Instrument Sans", "Inter"),
        patterns=("structured-grid", "hero-split", "stats-sections"),
        micro_interactions=("professional-hover", "smooth-scroll", "accordion"),
        directives=(
            "Explain, reassure, then invite; jargon is always explained.",
            "Split hero with image and clear next step.",
            "White surfaces with a single cool accent.",
        ),
    ),
}


def get(archetype_id: str) -> DesignArchetype:
    """Look up an archetype; unknown ids return the default archetype"""
    return ARCHETYPES.get(archetype_id, ARCHETYPES[DEFAULT_ARCHETYPE_ID])


def allowed_body_fonts() -> Tuple[str, ...]:
    seen = []
    for archetype in ARCHETYPES.values():
        if archetype.typography.body_font not in seen:
            seen.append(archetype.typography.body_font)
    return tuple(seen)
