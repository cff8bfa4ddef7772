"""Tone-of-voice rules per industry.

Independent of the visual archetype: a trades business gets the same tone
block whether the round-robin handed it "bold", "craft" or "modern". Copy is
generated in German by default, so examples and forbidden phrases are German.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sitefactory.design.industry import DEFAULT_INDUSTRY, classify

# Filler that is forbidden for every industry
GENERIC_FORBIDDEN: Tuple[str, ...] = (
    "Wir sind Ihr Partner für",
    "Qualität steht bei uns an erster Stelle",
    "Ihr Vertrauen ist unser Kapital",
    "Wir freuen uns auf Ihren Besuch",
    "Herzlich willkommen bei",
)


@dataclass(frozen=True)
class ToneBlock:
    label: str
    writing_style: str
    language: str
    emphasis: str
    headline_examples: Tuple[str, ...] = ()
    services_hint: str = ""
    forbidden_phrases: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def all_forbidden(self) -> Tuple[str, ...]:
        return self.forbidden_phrases + tuple(p for p in GENERIC_FORBIDDEN if p not in self.forbidden_phrases)

    def render(self) -> str:
        lines = [
            f"TONE: {self.label}",
            f"Writing style: {self.writing_style}",
            f"Language register: {self.language}",
            f"Emphasise: {self.emphasis}",
        ]
        if self.headline_examples:
            lines.append("Hero headline examples: " + " / ".join(f'"{h}"' for h in self.headline_examples))
        if self.services_hint:
            lines.append(f"Services: {self.services_hint}")
        lines.append("FORBIDDEN phrases (never use, not even paraphrased): " + "; ".join(f'"{p}"' for p in self.all_forbidden))
        return "\n".join(lines)


TONES: Dict[str, ToneBlock] = {
    "beauty": ToneBlock(
        label="BEAUTY",
        writing_style="Poetic, sensual, inviting. Short, elegant sentences that speak to emotions.",
        language="Warm, personal, luxurious without arrogance.",
        emphasis="craft and expertise, personal consultation, feel-good atmosphere, transformation, beauty",
        headline_examples=("Wo Schönheit beginnt",),
        services_hint="Concrete treatments with sensory detail (scent, feeling, result).",
        forbidden_phrases=("Ihr Wohlbefinden liegt uns am Herzen", "Wir freuen uns auf Ihren Besuch"),
    ),
    "restaurant": ToneBlock(
        label="GASTRONOMY",
        writing_style="Sensory, appetising, cosy. Describe aromas, textures and atmosphere.",
        language="Hearty, inviting, passionate about food.",
        emphasis="fresh ingredients, recipe tradition, atmosphere, concrete dishes, reservations",
        headline_examples=("Wo jeder Bissen zählt", "Echte Küche. Echter Geschmack."),
        services_hint="Concrete dishes or menus with tempting descriptions.",
        forbidden_phrases=("Wir bieten eine große Auswahl", "für jeden Geschmack etwas dabei"),
    ),
    "trades": ToneBlock(
        label="TRADES",
        writing_style="Direct, forceful, confident. Short, pointed statements. Numbers and facts.",
        language="Competent and trustworthy. No frills.",
        emphasis="reliability, quality work, years of experience, fast response, fixed prices, guarantees",
        headline_examples=("Gemacht für die Härte des Alltags", "Wir reparieren. Punkt."),
        services_hint="Concrete services with time frames and guarantees.",
        forbidden_phrases=("Wir sind Ihr Partner für", "Qualität steht bei uns an erster Stelle"),
    ),
    "automotive": ToneBlock(
        label="AUTOMOTIVE",
        writing_style="Technically precise, passionate, premium. Numbers and specifications.",
        language="Connoisseurship, quality awareness, passion for vehicles.",
        emphasis="precision, experience, original parts, guarantees, fast turnaround",
        headline_examples=("Ihr Fahrzeug. Unsere Leidenschaft.", "Perfektion bis ins letzte Detail."),
        services_hint="Concrete services with technical detail and time frames.",
        forbidden_phrases=("Bei uns ist Ihr Auto in guten Händen",),
    ),
    "fitness": ToneBlock(
        label="FITNESS",
        writing_style="Motivating, energetic, challenging. Imperative sentences. Stress transformation.",
        language="Strong, inspiring, community-driven. Results up front.",
        emphasis="transformation, concrete results (kg, time, performance), community, trainer expertise, programmes",
        headline_examples=("Dein stärkeres Ich beginnt hier", "Keine Ausreden. Nur Ergebnisse."),
        services_hint="Concrete programmes with a promised outcome.",
        forbidden_phrases=("Für jeden das Richtige", "Spaß am Sport"),
    ),
    "medical": ToneBlock(
        label="MEDICAL",
        writing_style="Professional, reassuring, clear. Precise statements that build trust.",
        language="Competent, empathetic, factual. Explain technical terms.",
        emphasis="competence, modern equipment, patient focus, short waiting times, qualifications",
        headline_examples=("Ihre Gesundheit in erfahrenen Händen", "Medizin, die zuhört."),
        services_hint="Concrete treatments with explanations and benefits.",
        forbidden_phrases=("Ihr Vertrauen ist unser Kapital", "Wir nehmen uns Zeit für Sie"),
    ),
    "legal": ToneBlock(
        label="ADVISORY",
        writing_style="Factual, precise, competent. Trust through expertise.",
        language="Professional, direct, trustworthy. No emotion, but empathy.",
        emphasis="expertise, discretion, success rate, personal support, specialisation, years of experience",
        headline_examples=("Ihr Recht. Unsere Expertise.", "Wenn es darauf ankommt."),
        services_hint="Concrete practice areas with specialisations.",
        forbidden_phrases=("Kompetenz ist unsere Stärke",),
    ),
    "nature": ToneBlock(
        label="NATURE",
        writing_style="Warm, authentic, sustainable. Sensory descriptions, rooted in the region.",
        language="Honest, passionate, environmentally aware. Stress regional origin.",
        emphasis="sustainability, regional products, handmade, fresh, nature, health",
        headline_examples=("Direkt aus der Natur zu dir", "Echt. Frisch. Regional."),
        services_hint="Concrete products or services with their origin.",
        forbidden_phrases=("Im Einklang mit der Natur",),
    ),
    "facility": ToneBlock(
        label="FACILITY SERVICES",
        writing_style="Matter-of-fact, dependable, solution-oriented. Short sentences.",
        language="Reliable and discreet. Speak to property managers and households alike.",
        emphasis="reliability, response times, certified staff, fixed intervals, transparent pricing",
        headline_examples=("Sauber. Pünktlich. Zuverlässig.",),
        services_hint="Concrete services with intervals and scope.",
        forbidden_phrases=("Wir machen das für Sie",),
    ),
    "tech": ToneBlock(
        label="DIGITAL",
        writing_style="Precise, innovative, future-oriented. Stress results and ROI.",
        language="Competent, modern, solution-oriented. Explain technical terms.",
        emphasis="results, expertise, capacity for innovation, portfolio, process, time saved",
        headline_examples=("Digitale Lösungen, die wachsen.", "Technologie, die begeistert."),
        services_hint="Concrete services with measurable results.",
        forbidden_phrases=("Wir bringen Sie ins digitale Zeitalter",),
    ),
    "education": ToneBlock(
        label="EDUCATION",
        writing_style="Encouraging, structured, clear. Show the path from first lesson to goal.",
        language="Patient, motivating, competent.",
        emphasis="learning success, qualified teachers, small groups, flexible schedules, certificates",
        headline_examples=("Lernen, das bleibt.",),
        services_hint="Concrete courses with level, duration and outcome.",
        forbidden_phrases=("Lernen mit Spaß",),
    ),
    "hospitality": ToneBlock(
        label="HOSPITALITY",
        writing_style="Inviting, atmospheric, experiential. Evoke emotions and memories.",
        language="Hospitable, warm, exclusive. Describe experiences.",
        emphasis="atmosphere, special moments, service quality, location, amenities",
        headline_examples=("Wo Momente zu Erinnerungen werden", "Ihr perfekter Aufenthalt."),
        services_hint="Concrete offers with experiential descriptions.",
        forbidden_phrases=("Fühlen Sie sich wie zu Hause",),
    ),
    DEFAULT_INDUSTRY: ToneBlock(
        label="SERVICES",
        writing_style="Clear, professional, persuasive. Stress the benefit to the customer.",
        language="Direct, competent, trustworthy. Regional presence.",
        emphasis="professionalism, customer satisfaction, experience, regional presence, concrete services",
    ),
}


def tone_block(industry_key: str) -> ToneBlock:
    return TONES.get(industry_key, TONES[DEFAULT_INDUSTRY])


def tone_for(category: Optional[str], business_name: Optional[str] = None,
             override: Optional[str] = None) -> ToneBlock:
    """Tone block for the same inputs the classifier takes"""
    return tone_block(classify(category, business_name, override).key)


def find_forbidden_phrases(text: str, tone: ToneBlock) -> List[str]:
    """Case-insensitive scan of generated copy for forbidden phrases"""
    lower = (text or "").lower()
    return [phrase for phrase in tone.all_forbidden if phrase.lower() in lower]
