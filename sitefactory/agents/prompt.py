"""Generation prompt builder (pure: same inputs, same prompt)"""

import json
import re
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from sitefactory.core.config import settings
from sitefactory.design.archetypes import DesignArchetype
from sitefactory.design.hours import localize_opening_hours
from sitefactory.design.services import services_seed
from sitefactory.design.tone import ToneBlock
from sitefactory.models.business import BusinessFacts
from sitefactory.models.draft import BorderRadius, ButtonStyle, ColorScheme, SectionSpacing, ShadowStyle

SYSTEM_PROMPT = """
You are an award-winning web copywriter and design director for local businesses.
You study professional website templates as visual references and turn them into
unique, tailor-made website content in the style of the given design archetype.
Reply ONLY with valid JSON, no markdown code fences.
Write unique, specific copy and never generic filler.
The StoryBrand framework is mandatory: the customer is the hero, the business is the guide.
""".strip()

REGENERATE_SYSTEM_PROMPT = """
You are an award-winning web copywriter and design director for local businesses.
You are writing a NEW VERSION of an existing website with a completely different
storytelling angle and fresh copy.
Reply ONLY with valid JSON, no markdown code fences.
The StoryBrand framework is mandatory: the customer is the hero, the business is the guide.
Never use generic filler.
""".strip()

LUCIDE_ICONS = (
    "Scissors, Wrench, Heart, Star, Shield, Zap, Clock, MapPin, Phone, Mail, Users, Award, "
    "ThumbsUp, Briefcase, Home, Car, Utensils, Camera, Sparkles, Flame, Leaf, Sun, Moon, Coffee, "
    "Music, Book, Palette, Hammer, Truck, Package, CheckCircle, ArrowRight, ChevronRight, Globe, "
    "Wifi, Lock, Key, Smile, Baby, Dog, Flower, Trees, Dumbbell, Bike, Stethoscope, Pill, "
    "Microscope, Scale, Gavel, Calculator, PiggyBank, Building, Factory, Warehouse, Bed"
)

REFERENCE_IMAGES_NOTE = """
### Design references
The attached {count} screenshots are professional website templates. Study their design quality,
palettes, typography and layout patterns, then create a completely independent design for this
business. The result must not look like any of the screenshots. The archetype colors and the
writing style take absolute priority.
""".strip()

LANGUAGES = {"de": "German", "en": "English"}

_MASTERY = re.compile(r"\b(meister|master|expert|profi)\b")
_FAMILY = re.compile(r"\b(familie|family|familien)\b")
_BRACKETS = str.maketrans({"[": "(", "]": ")"})


@dataclass(frozen=True)
class GenerationPrompt:
    system: str
    prompt: str
    image_urls: List[str] = field(default_factory=list)


def _fact(value: Optional[str], missing: str = "not provided") -> str:
    # Bracketed input would read like an unfilled placeholder to the model
    if value is None or not str(value).strip():
        return missing
    return str(value).strip().translate(_BRACKETS)


def _enum_choices(enum_cls) -> str:
    return " | ".join(member.value for member in enum_cls)


def personality_hint(facts: BusinessFacts) -> str:
    parts = []
    if facts.rating is not None and facts.rating >= 4.5:
        parts.append(
            f"The business has excellent reviews ({facts.rating}/5 from {facts.review_count} reviews); "
            "feature this strength prominently."
        )
    elif facts.rating is not None and facts.rating >= 4.0:
        parts.append(f"The business has good reviews ({facts.rating}/5); mention customer satisfaction.")
    if facts.review_count > 100:
        parts.append(f"With {facts.review_count}+ reviews the business is established and well known locally.")
    name = facts.name.lower()
    if _MASTERY.search(name):
        parts.append("The name signals special expertise; emphasise master-level quality.")
    if _FAMILY.search(name):
        parts.append("Family business; emphasise a personal, familial atmosphere and tradition.")
    return " ".join(parts)


def hours_text(facts: BusinessFacts, language: str) -> str:
    if not facts.opening_hours:
        return "not provided"
    lines = localize_opening_hours(facts.opening_hours) if language == "de" else list(facts.opening_hours)
    return "; ".join(_fact(line) for line in lines)


def _output_example(facts: BusinessFacts, archetype: DesignArchetype, scheme: ColorScheme) -> str:
    name = _fact(facts.name)
    city = _fact(facts.city, missing="the city")
    example = {
        "businessName": name,
        "tagline": f"Memorable slogan in the style of {archetype.name} (max. 8 words, no clichés)",
        "description": "Short, gripping description (2 sentences, concrete and specific)",
        "archetypePersonality": f"{archetype.name}: {archetype.aesthetic[:80]}",
        "sections": [
            {
                "type": "hero",
                "headline": f"Powerful headline in the {archetype.name} style (max. 7 words, emotional trigger)",
                "subheadline": "Concrete subheadline with the USP (1-2 sentences: hero, problem, solution)",
                "content": "Short intro (max. 30 words, specific to this industry)",
                "ctaText": "Creative call-to-action label that fits the archetype",
                "ctaLink": "#kontakt",
            },
            {
                "type": "about",
                "headline": "Creative heading for the about section",
                "content": "Authentic text presenting the business as the guide (4-5 sentences)",
            },
            {
                "type": "services",
                "headline": "Creative heading for the services",
                "items": [
                    {"title": "Concrete service", "description": "Specific customer benefit (2 sentences)", "icon": "LucideIconName"},
                ],
            },
            {
                "type": "testimonials",
                "headline": "Creative heading for testimonials",
                "items": [
                    {"title": "Short summary of the result", "description": "Credible review with concrete details (3-4 sentences)",
                     "author": "Realistic first and last name", "rating": 5},
                ],
            },
            {
                "type": "faq",
                "headline": "Frequently asked questions",
                "items": [{"question": "Real industry-specific customer question?", "answer": "Helpful answer (2-3 sentences)"}],
            },
            {
                "type": "cta",
                "headline": f"Strong call-to-action heading in the {archetype.name} style",
                "content": "Short persuasive text (max. 20 words, visualise success)",
                "ctaText": "Action button label",
                "ctaLink": "#kontakt",
            },
            {
                "type": "contact",
                "headline": "Contact heading",
                "content": "Inviting contact text (1-2 sentences)",
                "ctaText": "Send message",
            },
        ],
        "designTokens": {
            "headlineFont": archetype.typography.headline_font,
            "bodyFont": archetype.typography.body_font,
            "borderRadius": f"one of {_enum_choices(BorderRadius)}",
            "shadowStyle": f"one of {_enum_choices(ShadowStyle)}",
            "sectionSpacing": f"one of {_enum_choices(SectionSpacing)}",
            "buttonStyle": f"one of {_enum_choices(ButtonStyle)}",
            "accentColor": scheme.accent,
            "textColor": archetype.colors.text,
            "backgroundColor": archetype.colors.background,
            "cardBackground": scheme.surface,
            "sectionBackgrounds": [archetype.colors.background, scheme.surface, archetype.colors.background],
        },
        "seoTitle": f"{name}: industry keyword in {city}",
        "seoDescription": "Concise SEO description with keyword and local reference (max. 155 characters)",
        "footer": {"text": f"© {date.today().year} {name}"},
    }
    return json.dumps(example, ensure_ascii=False, indent=2)


def build_prompt(facts: BusinessFacts, industry_key: str, tone: ToneBlock, archetype: DesignArchetype,
                 scheme: ColorScheme, template_style: str = "", image_urls: Sequence[str] = (),
                 is_regenerate: bool = False, language: Optional[str] = None) -> GenerationPrompt:
    """
    Compose the generation request.

    Sections, in order: business facts, archetype block, 60/30/10 color
    hierarchy, industry context (tone, personality, typical services, template
    references), StoryBrand frame, creative requirements and the JSON output
    example with the closed design-token vocabularies.
    """
    language = language or settings.copy_language
    language_name = LANGUAGES.get(language, language)
    name = _fact(facts.name)
    rating = f"{facts.rating}/5 stars" if facts.rating is not None else "not available"

    context = [tone.render()]
    hint = personality_hint(facts)
    if hint:
        context.append(hint)
    seed = services_seed(industry_key)
    if seed:
        context.append(seed)
    if template_style:
        context.append(template_style)

    regenerate_title = " (NEW VERSION, DIFFERENT ANGLE)" if is_regenerate else ""
    regenerate_rule = (
        "\n8. DIFFERENT ANGLE: choose a different storytelling approach than before. "
        "Write a different version with other copy, another focus and another structure."
        if is_regenerate else ""
    )

    prompt = f"""
### Business facts
Name: {name}
Industry / category: {_fact(facts.category)}
Address: {_fact(facts.address)}
Phone: {_fact(facts.phone)}
Rating: {rating}
Number of reviews: {facts.review_count}
Opening hours: {hours_text(facts, language)}

### Design archetype: {archetype.name.upper()}
{archetype.instructions}

### Color hierarchy (60/30/10 rule, strict)
- 60% background: {archetype.colors.background} (dominant background)
- 30% primary: {scheme.primary or archetype.colors.primary} (main elements, text, structure)
- 10% accent: {scheme.accent or archetype.colors.accent} (ONLY calls to action, links, highlights)
Never more than 3 main colors. Never colorful section backgrounds. Always the same accent for every call to action.

### Industry context and personality
{chr(10).join(context)}

### StoryBrand framework (mandatory)
The CUSTOMER is the hero of this story; {name} is the experienced guide.
- Hero: the ideal customer has a concrete problem (stress, uncertainty, time pressure)
- Guide: {name} has the expertise and empathy to help
- Plan: a simple three-step process, for example appointment, consultation, result
- Call to action: a clear, inviting next step
- Success: the customer's life improves in a concrete way
- Failure to avoid: what happens if the customer does not act
Hero headline formula: emotional trigger plus concrete outcome for the target audience.
Never open with a generic greeting such as "Welcome to {name}".

### Creative requirements{regenerate_title}
1. UNIQUENESS: write as if you knew this specific business.
2. NO FILLER: every forbidden phrase listed in the tone block is off limits.
3. ARCHETYPE CONSISTENCY: every text reflects the personality of "{archetype.name}".
4. SPECIFIC SERVICES: realistic, industry-specific services, never "Service 1, Service 2". Provide 6 services.
5. AUTHENTIC TESTIMONIALS: 3 credible customer voices with concrete details.
6. LOCAL REFERENCE: use the city or region from the address.
7. CALL-TO-ACTION LABELS: creative, action-driving buttons that fit the archetype.{regenerate_rule}
Write all website copy in {language_name}.

### Required output (exact JSON shape)
{_output_example(facts, archetype, scheme)}

Design token values must be taken from the listed choices exactly. The body font must be a sans-serif font.
Available Lucide icons for services: {LUCIDE_ICONS}
""".strip()

    image_urls = list(image_urls)[: settings.max_reference_images]
    if image_urls:
        prompt += "\n\n" + REFERENCE_IMAGES_NOTE.format(count=len(image_urls))

    return GenerationPrompt(
        system=REGENERATE_SYSTEM_PROMPT if is_regenerate else SYSTEM_PROMPT,
        prompt=prompt,
        image_urls=image_urls,
    )
