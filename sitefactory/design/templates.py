"""Template reference selector.

Picks the library templates whose categories best match a business so the
LLM gets visual grounding (style hints plus screenshots). Scoring: +2 per
template category matched by a keyword in the search text, +1 if the template
is tagged "Local Services". Ties keep library order. When fewer than ``count``
templates score, generic business/agency templates pad the list at 0.5.
"""

import json
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from sitefactory.core.config import settings

logger = logging.getLogger(__name__)

TEMPLATE_LIBRARY_PATH = Path(__file__).resolve().parent / "data" / "templates.json"

LOCAL_SERVICES = "Local Services"
DEFAULT_CATEGORIES = (LOCAL_SERVICES, "Business & Consulting")
PADDING_CATEGORIES = ("Business & Consulting", "Agencies & Corporate")
PADDING_SCORE = 0.5

INDUSTRY_TO_CATEGORY: Dict[str, Tuple[str, ...]] = {
    # Beauty
    "friseur": ("Beauty & Wellness", LOCAL_SERVICES),
    "hair": ("Beauty & Wellness", LOCAL_SERVICES),
    "salon": ("Beauty & Wellness", LOCAL_SERVICES),
    "kosmetik": ("Beauty & Wellness", LOCAL_SERVICES),
    "beauty": ("Beauty & Wellness", LOCAL_SERVICES),
    "spa": ("Beauty & Wellness", LOCAL_SERVICES),
    "wellness": ("Beauty & Wellness", LOCAL_SERVICES),
    "massage": ("Beauty & Wellness", LOCAL_SERVICES),
    "nagel": ("Beauty & Wellness", LOCAL_SERVICES),
    "tattoo": ("Beauty & Wellness", "Creative & Artistic"),
    # Trades
    "handwerk": (LOCAL_SERVICES,),
    "elektriker": (LOCAL_SERVICES,),
    "klempner": (LOCAL_SERVICES,),
    "sanitär": (LOCAL_SERVICES,),
    "heizung": (LOCAL_SERVICES,),
    "dachdecker": (LOCAL_SERVICES,),
    "maler": (LOCAL_SERVICES, "Creative & Artistic"),
    "zimmerer": (LOCAL_SERVICES,),
    "tischler": (LOCAL_SERVICES,),
    "schreiner": (LOCAL_SERVICES,),
    "schlosser": (LOCAL_SERVICES,),
    "bauunternehmen": (LOCAL_SERVICES,),
    "bau": (LOCAL_SERVICES, "Architecture & Design"),
    "renovierung": (LOCAL_SERVICES,),
    "reinigung": (LOCAL_SERVICES,),
    "hausmeister": (LOCAL_SERVICES,),
    "garten": (LOCAL_SERVICES,),
    "landschaftsbau": (LOCAL_SERVICES,),
    "umzug": (LOCAL_SERVICES,),
    "transport": (LOCAL_SERVICES,),
    "schädlingsbekämpfung": (LOCAL_SERVICES,),
    "pest": (LOCAL_SERVICES,),
    "sicherheit": (LOCAL_SERVICES,),
    "schlüsseldienst": (LOCAL_SERVICES,),
    # Food
    "restaurant": ("Restaurant & Food", LOCAL_SERVICES),
    "café": ("Restaurant & Food", LOCAL_SERVICES),
    "cafe": ("Restaurant & Food", LOCAL_SERVICES),
    "bäckerei": ("Restaurant & Food", LOCAL_SERVICES),
    "konditorei": ("Restaurant & Food", LOCAL_SERVICES),
    "metzger": ("Restaurant & Food", LOCAL_SERVICES),
    "catering": ("Restaurant & Food",),
    "lieferservice": ("Restaurant & Food", LOCAL_SERVICES),
    "pizza": ("Restaurant & Food",),
    "sushi": ("Restaurant & Food",),
    "imbiss": ("Restaurant & Food", LOCAL_SERVICES),
    "bar": ("Restaurant & Food", "Events & Entertainment"),
    "kneipe": ("Restaurant & Food", "Events & Entertainment"),
    # Automotive
    "autowerkstatt": ("Automotive", LOCAL_SERVICES),
    "kfz": ("Automotive", LOCAL_SERVICES),
    "autohaus": ("Automotive",),
    "reifenservice": ("Automotive", LOCAL_SERVICES),
    "fahrzeug": ("Automotive",),
    "auto": ("Automotive",),
    "motorrad": ("Automotive",),
    # Health
    "arzt": (LOCAL_SERVICES,),
    "zahnarzt": (LOCAL_SERVICES,),
    "physiotherapie": ("Beauty & Wellness", LOCAL_SERVICES),
    "optiker": (LOCAL_SERVICES,),
    "apotheke": (LOCAL_SERVICES,),
    "tierarzt": (LOCAL_SERVICES,),
    "klinik": (LOCAL_SERVICES,),
    "praxis": (LOCAL_SERVICES,),
    # Education
    "schule": ("Education & Nonprofit",),
    "nachhilfe": ("Education & Nonprofit",),
    "kita": ("Education & Nonprofit",),
    "sprachschule": ("Education & Nonprofit",),
    "fahrschule": ("Education & Nonprofit", "Automotive"),
    "musik": ("Events & Entertainment", "Education & Nonprofit"),
    # Business
    "steuerberater": ("Finance & Fintech", "Business & Consulting"),
    "rechtsanwalt": ("Business & Consulting",),
    "kanzlei": ("Business & Consulting",),
    "unternehmensberatung": ("Business & Consulting",),
    "marketing": ("Marketing & Social Media", "Business & Consulting"),
    "agentur": ("Agencies & Corporate",),
    "webdesign": ("Technology & SaaS", "Agencies & Corporate"),
    "it": ("Technology & SaaS",),
    "software": ("Technology & SaaS",),
    "versicherung": ("Finance & Fintech",),
    "finanz": ("Finance & Fintech",),
    "immobilien": ("Real Estate",),
    "makler": ("Real Estate",),
    # Fitness
    "fitness": ("Beauty & Wellness",),
    "gym": ("Beauty & Wellness",),
    "yoga": ("Beauty & Wellness",),
    "pilates": ("Beauty & Wellness",),
    "sport": ("Beauty & Wellness", "Events & Entertainment"),
    # Events
    "fotograf": ("Creative & Artistic", "Events & Entertainment"),
    "event": ("Events & Entertainment",),
    "hochzeit": ("Events & Entertainment", "Creative & Artistic"),
    "hotel": ("Events & Entertainment",),
    "veranstaltung": ("Events & Entertainment",),
    # Design
    "architekt": ("Architecture & Design",),
    "design": ("Creative & Artistic", "Architecture & Design"),
    # Energy
    "solar": ("Energy & Renewables",),
    "photovoltaik": ("Energy & Renewables",),
    "energie": ("Energy & Renewables",),
}


def _keyword_pattern(keyword: str) -> "re.Pattern[str]":
    # Short keywords must stand alone ("it" is not "mit", "bar" is not "barber")
    if len(keyword) <= 3:
        return re.compile(rf"\b{re.escape(keyword)}\b")
    return re.compile(re.escape(keyword))


_KEYWORD_PATTERNS = [(_keyword_pattern(k), cats) for k, cats in INDUSTRY_TO_CATEGORY.items()]


@dataclass(frozen=True)
class TemplateEntry:
    name: str
    slug: str
    categories: Tuple[str, ...]
    tags: Tuple[str, ...]
    style_hints: str
    image: Optional[str] = None

    @property
    def image_url(self) -> Optional[str]:
        if not self.image:
            return None
        return f"{settings.template_cdn_base.rstrip('/')}/{self.image}"


@lru_cache(maxsize=1)
def load_templates() -> Tuple[TemplateEntry, ...]:
    """Load the bundled template library; a missing or broken file yields an empty library"""
    try:
        raw = json.loads(TEMPLATE_LIBRARY_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"[TemplateSelector] Could not load {TEMPLATE_LIBRARY_PATH.name}: {e}")
        return ()
    return tuple(
        TemplateEntry(
            name=item["name"],
            slug=item["slug"],
            categories=tuple(item.get("categories", [])),
            tags=tuple(item.get("tags", [])),
            style_hints=item.get("style_hints", ""),
            image=item.get("image"),
        )
        for item in raw
    )


def matched_categories(search_text: str) -> List[str]:
    lower = search_text.lower()
    found: List[str] = []
    for pattern, categories in _KEYWORD_PATTERNS:
        if pattern.search(lower):
            for category in categories:
                if category not in found:
                    found.append(category)
    return found or list(DEFAULT_CATEGORIES)


def select_templates(category: Optional[str], seed: Optional[str], count: int = 3,
                     templates: Optional[Sequence[TemplateEntry]] = None) -> List[TemplateEntry]:
    """Top ``count`` unique templates for a business; never more, never duplicates"""
    if count <= 0:
        return []
    library = [t for t in (load_templates() if templates is None else templates) if t.image]
    if not library:
        return []

    wanted = set(matched_categories(f"{category or ''} {seed or ''}"))

    scored: List[Tuple[float, TemplateEntry]] = []
    for template in library:
        score = sum(2 for c in template.categories if c in wanted)
        if LOCAL_SERVICES in template.categories:
            score += 1
        if score > 0:
            scored.append((score, template))
    scored.sort(key=lambda pair: pair[0], reverse=True)

    if len(scored) < count:
        taken = {t.slug for _, t in scored}
        scored.extend(
            (PADDING_SCORE, t) for t in library
            if t.slug not in taken and any(c in PADDING_CATEGORIES for c in t.categories)
        )

    result: List[TemplateEntry] = []
    seen = set()
    for _, template in scored:
        if template.slug in seen:
            continue
        seen.add(template.slug)
        result.append(template)
        if len(result) == count:
            break
    return result


def style_description(templates: Sequence[TemplateEntry]) -> str:
    if not templates:
        return ""
    hints = "\n".join(f'"{t.name}" ({", ".join(t.categories)}): {t.style_hints}' for t in templates)
    return (
        "VISUAL REFERENCE TEMPLATES (inspiration for design quality, layout and palette):\n"
        f"{hints}\n"
        "Adapt the visual style to this specific business; do not copy any template."
    )


def image_urls(templates: Sequence[TemplateEntry]) -> List[str]:
    return [t.image_url for t in templates if t.image_url]
