"""Typical services per industry, used to seed the prompt with realistic examples"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ServiceTemplate:
    title: str
    description: str
    icon: str


@dataclass(frozen=True)
class IndustryProfile:
    label: str
    services: Tuple[ServiceTemplate, ...]
    features: Tuple[str, ...]
    cta_text: str
    hero_hint: str
    about_focus: str


S = ServiceTemplate

PROFILES: Dict[str, IndustryProfile] = {
    "restaurant": IndustryProfile(
        label="Restaurant / Café",
        services=(
            S("Mittagsmenü", "Täglich wechselndes 3-Gang-Menü mit frischen, saisonalen Zutaten.", "Utensils"),
            S("Frühstück & Brunch", "Hausgemachtes Frühstück, von klassisch bis kreativ.", "Coffee"),
            S("Catering & Events", "Hochzeiten, Firmenfeiern, Geburtstage: unsere Küche kommt zu Ihnen.", "Users"),
            S("Reservierungen", "Tisch reservieren online oder telefonisch, auch für Gruppen.", "Calendar"),
            S("Takeaway", "Frisch zubereitet und sicher verpackt zum Mitnehmen.", "Package"),
        ),
        features=("Frische Zutaten täglich", "Vegetarische & vegane Optionen", "Terrasse", "Hausgemachte Backwaren"),
        cta_text="Tisch reservieren",
        hero_hint="Sensorisch und appetitanregend: Aromen, Atmosphäre und Genuss betonen",
        about_focus="Leidenschaft für Essen, Küchenphilosophie, regionale Zutaten, Geschichte des Hauses",
    ),
    "beauty": IndustryProfile(
        label="Friseur / Kosmetik",
        services=(
            S("Haarschnitt & Styling", "Vom klassischen Schnitt bis zum modernen Look, individuell beraten.", "Scissors"),
            S("Coloration & Highlights", "Balayage, Ombré, Vollcoloration mit professionellen Produkten.", "Palette"),
            S("Gesichtsbehandlungen", "Tiefenreinigung, Anti-Aging und Hydration für Ihren Hauttyp.", "Sparkles"),
            S("Maniküre & Pediküre", "Klassisch, Gel oder Shellac: gepflegte Nägel für jeden Anlass.", "Star"),
            S("Hochzeitsstyling", "Braut- und Festtagsfrisuren für Ihren besonderen Tag.", "Heart"),
        ),
        features=("Online-Terminbuchung", "Professionelle Produkte", "Beratung inklusive", "Gutscheine erhältlich"),
        cta_text="Termin buchen",
        hero_hint="Transformation, Selbstbewusstsein und professionelle Beratung betonen",
        about_focus="Leidenschaft für das Handwerk, Weiterbildung, Wohlfühlatmosphäre im Salon",
    ),
    "trades": IndustryProfile(
        label="Handwerk",
        services=(
            S("Reparatur & Instandhaltung", "Schnelle, zuverlässige Reparaturen direkt bei Ihnen vor Ort.", "Wrench"),
            S("Neuinstallation", "Fachgerechte Installation nach aktuellen Normen, mit Garantie.", "CheckCircle"),
            S("Notdienst", "Rund um die Uhr erreichbar, faire Preise auch am Wochenende.", "Zap"),
            S("Wartung & Inspektion", "Regelmäßige Wartung verhindert teure Ausfälle.", "Shield"),
            S("Beratung & Planung", "Kostenlose Erstberatung vor Ort mit klarem Angebot.", "Users"),
        ),
        features=("Meisterbetrieb", "Festpreise", "24h Notdienst", "Garantie auf alle Arbeiten"),
        cta_text="Jetzt anfragen",
        hero_hint="Zuverlässigkeit, Meisterqualität, schnelle Reaktionszeit und Festpreise betonen",
        about_focus="Meistertitel, Erfahrungsjahre, Spezialisierung und lokale Präsenz",
    ),
    "fitness": IndustryProfile(
        label="Fitness-Studio",
        services=(
            S("Gerätetraining", "Moderne Geräte für Kraft und Ausdauer, mit Einweisung und Trainingsplan.", "Dumbbell"),
            S("Gruppentraining", "Yoga, HIIT, Spinning: Kurse für jedes Fitnesslevel.", "Users"),
            S("Personal Training", "1:1-Betreuung durch zertifizierte Trainer.", "Award"),
            S("Ernährungsberatung", "Individueller Ernährungsplan passend zu deinem Ziel.", "Leaf"),
        ),
        features=("Kostenlose Probeeinheit", "Flexible Mitgliedschaften", "Lange Öffnungszeiten"),
        cta_text="Probetraining buchen",
        hero_hint="Transformation, Energie, Community und konkrete Ergebnisse betonen",
        about_focus="Trainingsphilosophie, Trainer-Team, Community und Erfolgsgeschichten",
    ),
    "medical": IndustryProfile(
        label="Arzt / Zahnarzt",
        services=(
            S("Vorsorge & Check-up", "Regelmäßige Vorsorge mit schnellen Terminen und kurzen Wartezeiten.", "Stethoscope"),
            S("Diagnostik", "Moderne Diagnoseverfahren für präzise Befunde.", "Microscope"),
            S("Behandlung & Therapie", "Individuelle Behandlungspläne, verständlich erklärt.", "Heart"),
            S("Akutsprechstunde", "Bei akuten Beschwerden auch kurzfristig ein Termin.", "Zap"),
        ),
        features=("Kurze Wartezeiten", "Online-Terminbuchung", "Alle Kassen", "Barrierefreier Zugang"),
        cta_text="Termin vereinbaren",
        hero_hint="Vertrauen, Kompetenz und patientenorientierte Betreuung betonen",
        about_focus="Qualifikationen, Spezialisierungen, Praxisausstattung",
    ),
    "legal": IndustryProfile(
        label="Kanzlei / Beratung",
        services=(
            S("Erstberatung", "Klare Einschätzung Ihrer Lage im ersten Gespräch, transparent im Preis.", "Scale"),
            S("Vertragsrecht", "Prüfung, Gestaltung und Verhandlung von Verträgen.", "Briefcase"),
            S("Streitbeilegung", "Außergerichtliche Einigung oder Vertretung vor Gericht.", "Gavel"),
            S("Steuer- & Finanzfragen", "Fundierte Beratung zu Steuern, Vorsorge und Vermögen.", "Calculator"),
        ),
        features=("Kostenlose Ersteinschätzung", "Feste Honorare", "Diskretion", "Schnelle Reaktionszeit"),
        cta_text="Beratungsgespräch anfragen",
        hero_hint="Expertise, Diskretion und persönliche Betreuung betonen",
        about_focus="Spezialisierungen, Ausbildung, Erfolge und Beratungsansatz",
    ),
    "tech": IndustryProfile(
        label="IT / Software",
        services=(
            S("Webentwicklung", "Performante Websites und Webanwendungen, von der Konzeption bis zum Launch.", "Globe"),
            S("IT-Support & Wartung", "Schnelle Hilfe remote oder vor Ort, mit SLA.", "Wrench"),
            S("Cloud & Infrastruktur", "Migration, Betrieb und Optimierung Ihrer Infrastruktur.", "Wifi"),
            S("Cybersecurity", "Sicherheitsaudits, Penetrationstests und Schulungen.", "Lock"),
        ),
        features=("Agile Entwicklung", "Festpreisprojekte", "Kostenlose Erstberatung"),
        cta_text="Projekt besprechen",
        hero_hint="Innovation, messbare Ergebnisse und Expertise betonen",
        about_focus="Technologie-Stack, Referenzprojekte, Arbeitsweise",
    ),
    "automotive": IndustryProfile(
        label="Autowerkstatt",
        services=(
            S("Inspektion & Wartung", "Herstellergerechte Inspektion für alle Marken mit transparenter Abrechnung.", "Wrench"),
            S("Reparatur & Diagnose", "Moderne Diagnosetechnik und Reparatur mit Originalteilen.", "Car"),
            S("HU & AU Vorbereitung", "Optimale Vorbereitung auf die Hauptuntersuchung inklusive Vorab-Check.", "CheckCircle"),
            S("Reifenservice", "Reifenwechsel, Einlagerung und Auswuchten zu fairen Preisen.", "Truck"),
        ),
        features=("Alle Marken", "Originalteile", "Hol- & Bringservice", "Festpreisgarantie"),
        cta_text="Termin vereinbaren",
        hero_hint="Präzision, Leidenschaft für Fahrzeuge und Transparenz betonen",
        about_focus="Erfahrung, Markenspezialisierung, Ausrüstung und Service",
    ),
    "hospitality": IndustryProfile(
        label="Hotel / Pension",
        services=(
            S("Übernachtung & Zimmer", "Komfortable Zimmer für Geschäfts- und Privatreisende.", "Bed"),
            S("Frühstück", "Reichhaltiges Frühstück mit regionalen Produkten.", "Coffee"),
            S("Tagungsräume", "Moderne Räume für Meetings und Seminare, mit Technik und Catering.", "Briefcase"),
            S("Ausflugstipps & Concierge", "Persönliche Empfehlungen für die Region.", "MapPin"),
        ),
        features=("Kostenfreies WLAN", "Gratis Parkplatz", "Frühstück inklusive"),
        cta_text="Jetzt buchen",
        hero_hint="Gastfreundschaft, Atmosphäre und Lage betonen",
        about_focus="Geschichte des Hauses, Lage, Ausstattung und persönlicher Service",
    ),
}


def profile_for(industry_key: str) -> Optional[IndustryProfile]:
    return PROFILES.get(industry_key)


def services_seed(industry_key: str) -> str:
    """Prompt block listing typical services for an industry; empty for unknown keys"""
    profile = profile_for(industry_key)
    if profile is None:
        return ""
    services = "\n".join(f"- {s.title}: {s.description} (icon: {s.icon})" for s in profile.services)
    return (
        f'TYPICAL SERVICES FOR "{profile.label.upper()}" (use as inspiration, rewrite for this business):\n'
        f"{services}\n"
        f"Typical features / USPs: {', '.join(profile.features)}\n"
        f'Recommended CTA: "{profile.cta_text}"\n'
        f"Hero hint: {profile.hero_hint}\n"
        f"About section focus: {profile.about_focus}"
    )
