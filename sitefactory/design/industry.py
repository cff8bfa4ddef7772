"""Industry classification and layout pools.

A business is classified by running its lower-cased ``"<category> <name>"``
text through RULES top to bottom; the first matching rule wins. Rule order is
significant: "Physiotherapie" lands in fitness because fitness is checked
before medical, and "Bio-Bäckerei" lands in restaurant because restaurant is
checked before nature. tests/test_industry.py pins these overlaps down.

Short tokens (it, app, car, spa, bio, eco, bau) carry word boundaries so they
do not fire inside unrelated words ("Kita" is not IT, "Oscar" is not a car).
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)

DEFAULT_INDUSTRY = "other"
DEFAULT_POOL: Tuple[str, ...] = ("clean", "modern", "trust", "fresh")


@dataclass(frozen=True)
class IndustryRule:
    key: str
    pattern: Pattern[str]
    pool: Tuple[str, ...]


@dataclass(frozen=True)
class Classification:
    """Result of classifying a business: its industry key and layout pool"""
    key: str
    pool: Tuple[str, ...]
    matched: bool


def _rule(key: str, pattern: str, pool: Tuple[str, ...]) -> IndustryRule:
    return IndustryRule(key=key, pattern=re.compile(pattern), pool=pool)


RULES: List[IndustryRule] = [
    _rule(
        "beauty",
        r"friseur|salon|beauty|hair|barber|coiffeur|\bnail|\bnagel|\bspa\b|massage|kosmetik|wellness"
        r"|ästhetik|\blash|\bbrow|make.?up|tanning|waxing|threading",
        ("elegant", "fresh", "luxury"),
    ),
    _rule(
        "restaurant",
        r"restaurant|café|cafe|bistro|bäckerei|konditorei|catering|\bessen\b|küche|food|pizza|sushi"
        r"|burger|gastro|bakery|patisserie|imbiss|\bbar\b|kneipe",
        ("warm", "fresh", "modern"),
    ),
    _rule(
        "trades",
        r"handwerk|\bbau|elektriker|dachdecker|sanitär|\bmaler|zimmer(?:er|mann)|schreiner|klempner|heizung"
        r"|contractor|roofing|plumber|carpenter|painter|construction|renovation|renovierung|installation"
        r"|tischler|fliesenleger|schlosser",
        ("bold", "craft", "modern"),
    ),
    _rule(
        "automotive",
        r"\bauto|\bkfz|\bcars?\b|garage|mechanic|werkstatt|karosserie|tuning|fahrzeug|vehicle|motorrad"
        r"|motorcycle|reifen|\btires?\b",
        ("luxury", "bold", "craft"),
    ),
    _rule(
        "fitness",
        r"fitness|\bsport|\bgym\b|yoga|training|crossfit|pilates|kampfsport|tanzen|personal.?trainer"
        r"|physiotherap|bewegung|martial|boxing|kickbox|dance",
        ("vibrant", "dynamic", "modern"),
    ),
    _rule(
        "medical",
        r"arzt|ärzt|medizin|doctor|dental|medical|health|clinic|pharmacy|apotheke|praxis|klinik|hospital"
        r"|chiropract|osteopath|heilpraktiker|therapie",
        ("trust", "clean", "modern"),
    ),
    _rule(
        "legal",
        r"anwalt|kanzlei|steuer|versicherung|beratung|\blaw\b|legal|consulting|accountant|\btax\b|finanz"
        r"|wirtschaft|notar|immobilien|makler|real.?estate",
        ("trust", "clean", "modern"),
    ),
    _rule(
        "nature",
        r"\bbio\b|organic|\böko|\beco\b|natur|garden|garten|florist|blumen|flower|pflanze|\bplants?\b"
        r"|kräuter|\bherbs?\b|nachhaltig|sustainable",
        ("natural", "fresh", "warm"),
    ),
    _rule(
        "facility",
        r"schädling|\bpest\b|reinigung|cleaning|facility|gebäude|hausmeister|security|bewachung"
        r"|entsorgung|\bwaste\b|umzug|moving",
        ("craft", "trust", "bold"),
    ),
    _rule(
        "tech",
        r"\btech|software|digital|agency|agentur|\bweb|\bapps?\b|\bit\b|computer|marketing|design"
        r"|\bmedia|kreativ|creative|startup",
        ("modern", "vibrant", "dynamic"),
    ),
    _rule(
        "education",
        r"schule|school|bildung|education|coaching|\bcoach|nachhilfe|tutor|\bkurs|course|akademie"
        r"|academy|seminar|workshop",
        ("trust", "clean", "fresh"),
    ),
    _rule(
        "hospitality",
        r"hotel|pension|hostel|airbnb|touris|\bevent|veranstaltung|hochzeit|wedding|party|reise|travel"
        r"|\btours?\b",
        ("luxury", "elegant", "warm"),
    ),
]

_POOLS = {rule.key: rule.pool for rule in RULES}

INDUSTRY_KEYS: Tuple[str, ...] = tuple(rule.key for rule in RULES) + (DEFAULT_INDUSTRY,)


def layout_pool(industry_key: str) -> Tuple[str, ...]:
    """Ordered archetype ids eligible for an industry key"""
    return _POOLS.get(industry_key, DEFAULT_POOL)


def classify(category: Optional[str], business_name: Optional[str] = None,
             override: Optional[str] = None) -> Classification:
    """Map free-text category and business name to an industry key and pool.

    An explicit override short-circuits rule evaluation entirely. Unknown
    override keys keep their name and receive the default pool.
    """
    if override:
        key = override.strip().lower()
        return Classification(key=key, pool=layout_pool(key), matched=key in _POOLS)

    text = f"{category or ''} {business_name or ''}".lower()
    for rule in RULES:
        if rule.pattern.search(text):
            return Classification(key=rule.key, pool=rule.pool, matched=True)

    logger.debug(f"[Classifier] No rule matched '{text.strip()}', using '{DEFAULT_INDUSTRY}'")
    return Classification(key=DEFAULT_INDUSTRY, pool=DEFAULT_POOL, matched=False)
