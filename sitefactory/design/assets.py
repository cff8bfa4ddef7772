"""Curated image and color palette pools per industry key.

Selection is a pure function of (industry key, seed); the seed is the
business name for first generation and a name+timestamp string on
regeneration. Unknown keys use the "other" pools.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from sitefactory.core.hasher import spread_hash, stable_hash
from sitefactory.design.industry import DEFAULT_INDUSTRY
from sitefactory.models.draft import ColorScheme

_UNSPLASH = "https://images.unsplash.com/photo-{}?w={}&q={}&auto=format&fit=crop"


def _hero(photo_id: str) -> str:
    return _UNSPLASH.format(photo_id, 1400, 85)


def _gallery(photo_id: str) -> str:
    return _UNSPLASH.format(photo_id, 800, 80)


@dataclass(frozen=True)
class ImageSet:
    hero: List[str]
    gallery: List[str] = field(default_factory=list)

    def gallery_or_hero(self) -> List[str]:
        return list(self.gallery) if self.gallery else list(self.hero[:2])


IMAGES: Dict[str, ImageSet] = {
    "beauty": ImageSet(
        hero=[_hero("1560066984-138dadb4c035"), _hero("1521590832167-7bcbfaa6381f"), _hero("1562322140-8baeececf3df")],
        gallery=[_gallery("1522337360788-8b13dee7a37e"), _gallery("1559599101-f09722fb4948")],
    ),
    "restaurant": ImageSet(
        hero=[_hero("1504674900247-0877df9cc836"), _hero("1414235077428-338989a2e8c0"), _hero("1517248135467-4c7edcad34c4")],
        gallery=[_gallery("1565299624946-b28f40a0ae38"), _gallery("1567620905732-2d1ec7ab7445")],
    ),
    "trades": ImageSet(
        hero=[_hero("1504307651254-35680f356dfd"), _hero("1581578731548-c64695cc6952"), _hero("1558618666-fcd25c85cd64")],
        gallery=[_gallery("1541888946425-d81bb19240f5"), _gallery("1503387762-592deb58ef4e")],
    ),
    "automotive": ImageSet(
        hero=[_hero("1486262715619-67b85e0b08d3"), _hero("1492144534655-ae79c964c9d7"), _hero("1503376780353-7e6692767b70")],
    ),
    "fitness": ImageSet(
        hero=[_hero("1534438327276-14e5300c3a48"), _hero("1571902943202-507ec2618e8f"), _hero("1517836357463-d25dfeac3438")],
        gallery=[_gallery("1540497077202-7c8a3999166f"), _gallery("1518611012118-696072aa579a")],
    ),
    "medical": ImageSet(
        hero=[_hero("1576091160399-112ba8d25d1d"), _hero("1559757148-5c350d0d3c56"), _hero("1631217868264-e5b90bb7e133")],
    ),
    "legal": ImageSet(
        hero=[
            _hero("1589829545856-d10d557cf95f"), _hero("1450101499163-c8848c66ca85"), _hero("1521791136064-7986c2920216"),
            _hero("1560518883-ce09059eeffa"), _hero("1582407947304-fd86f028f716"), _hero("1600585154340-be6161a56a0c"),
        ],
    ),
    "nature": ImageSet(
        hero=[_hero("1416879595882-3373a0480b5b"), _hero("1585320806297-9794b3e4eeae")],
    ),
    "facility": ImageSet(
        hero=[_hero("1581578731548-c64695cc6952"), _hero("1563453392212-326f5e854473")],
    ),
    "tech": ImageSet(
        hero=[_hero("1518770660439-4636190af475"), _hero("1461749280684-dccba630e2f6"), _hero("1498050108023-c5249f4df085")],
    ),
    DEFAULT_INDUSTRY: ImageSet(
        hero=[_hero("1497366216548-37526070297c"), _hero("1497366754035-f200968a6e72"), _hero("1486406146926-c627a92ad1ab")],
    ),
}


def _scheme(primary, secondary, accent, background, surface, text, text_light, gradient_end=None) -> ColorScheme:
    return ColorScheme(
        primary=primary, secondary=secondary, accent=accent, background=background,
        surface=surface, text=text, text_light=text_light,
        gradient=f"linear-gradient(135deg, {primary} 0%, {gradient_end or secondary} 100%)",
    )


_DEFAULT_PALETTES = [
    _scheme("#3b82f6", "#1d4ed8", "#f59e0b", "#ffffff", "#f8fafc", "#0f172a", "#64748b"),
    _scheme("#7c3aed", "#5b21b6", "#f59e0b", "#faf8ff", "#f3f0ff", "#1e1b4b", "#6d6a8a"),
    _scheme("#059669", "#047857", "#f59e0b", "#f8fffc", "#ecfdf5", "#0a2a1e", "#5a7a6a"),
    _scheme("#dc2626", "#991b1b", "#f59e0b", "#ffffff", "#fef2f2", "#1a0a0a", "#8a6a6a"),
    _scheme("#0891b2", "#0e7490", "#f59e0b", "#f8ffff", "#ecfeff", "#0a2a2e", "#5a8a8e"),
    _scheme("#d97706", "#b45309", "#1e3a5f", "#fffbf5", "#fef3c7", "#2a1a00", "#8a7040"),
    _scheme("#be185d", "#9d174d", "#f59e0b", "#fff8fb", "#fce7f3", "#2a0a1a", "#8a5a7a"),
]

_REAL_ESTATE_PALETTES = [
    _scheme("#2c3e50", "#1a252f", "#c9a96e", "#ffffff", "#f5f6fa", "#1a1a2e", "#7f8c8d", "#c9a96e"),
    _scheme("#8e44ad", "#6c3483", "#f39c12", "#fdf8ff", "#f5eafb", "#1a0a2e", "#7d5a8a", "#f39c12"),
    _scheme("#b5451b", "#8b3214", "#2c3e50", "#fdf8f5", "#f5e8e0", "#2c1a10", "#8b6a5a", "#2c3e50"),
    _scheme("#1b5e20", "#0a3a0a", "#c9a96e", "#f8faf8", "#e8f5e9", "#0a2a0a", "#5a7a5a", "#c9a96e"),
]

PALETTES: Dict[str, List[ColorScheme]] = {
    "beauty": [
        _scheme("#c9a96e", "#8b6914", "#1a1a2e", "#faf9f7", "#f2ede6", "#2c2416", "#8b7355"),
        _scheme("#c2185b", "#880e4f", "#fce4ec", "#fff8fb", "#fce4ec", "#2c0a1a", "#8b4a6a"),
        _scheme("#5a7a5a", "#3d5a3d", "#c9a96e", "#f8faf5", "#e8f0e8", "#1a2a1a", "#6a8a6a", "#c9a96e"),
        _scheme("#1a1a2e", "#16213e", "#e94560", "#ffffff", "#f8f5f2", "#1a1a2e", "#6b6b7b", "#e94560"),
        _scheme("#b5451b", "#8b3214", "#f5c842", "#fdf8f5", "#f5e8e0", "#2c1a10", "#8b6a5a", "#f5c842"),
        _scheme("#7c5cbf", "#5a3d9a", "#f5c842", "#faf8ff", "#f0eafa", "#1e1040", "#7a6a9a"),
    ],
    "restaurant": [
        _scheme("#c0392b", "#922b21", "#f39c12", "#fffef8", "#fdf6e3", "#2c1810", "#7d6b5e", "#f39c12"),
        _scheme("#2d6a4f", "#1b4332", "#d4a017", "#f8faf8", "#e8f5e9", "#1b2e1b", "#5a7a5a", "#d4a017"),
        _scheme("#c9a96e", "#8b6914", "#e94560", "#1a1410", "#2a2018", "#f5ede0", "#c9a96e"),
        _scheme("#1565c0", "#0d47a1", "#ffa726", "#f8fbff", "#e3f2fd", "#0a1a3a", "#5a7aaa", "#ffa726"),
        _scheme("#e65100", "#bf360c", "#ffd54f", "#fffbf5", "#fff3e0", "#2c1a00", "#8b6a40", "#ffd54f"),
        _scheme("#b87333", "#8b5a1a", "#37474f", "#faf8f5", "#f0ebe0", "#2a1e10", "#8a7060", "#37474f"),
    ],
    "trades": [
        _scheme("#e67e22", "#ca6f1e", "#2c3e50", "#ffffff", "#fdf8f3", "#2c2416", "#7d6b5e", "#2c3e50"),
        _scheme("#1565c0", "#0d47a1", "#ffa726", "#f8fbff", "#e3f2fd", "#0a1a3a", "#5a7aaa", "#ffa726"),
        _scheme("#2e7d32", "#1b5e20", "#ff8f00", "#f8faf8", "#e8f5e9", "#0a2a0a", "#5a7a5a", "#ff8f00"),
        _scheme("#37474f", "#263238", "#e67e22", "#f5f6fa", "#eceff1", "#1a2a2e", "#7a8a8e", "#e67e22"),
        _scheme("#c62828", "#8b0000", "#f5f5f5", "#ffffff", "#fafafa", "#1a0a0a", "#8a6a6a"),
        _scheme("#f9a825", "#e65100", "#212121", "#fffdf5", "#fff8e1", "#1a1200", "#8a7a40"),
    ],
    "fitness": [
        _scheme("#e74c3c", "#c0392b", "#f39c12", "#ffffff", "#fdf8f8", "#1a0a0a", "#7d5a5a"),
        _scheme("#00bcd4", "#00838f", "#ff5722", "#f0fffe", "#e0f7fa", "#002a2e", "#5a8a8e", "#ff5722"),
        _scheme("#ff6f00", "#e65100", "#ffffff", "#0a0a0a", "#1a1a1a", "#ffffff", "#aaaaaa"),
        _scheme("#7cb342", "#558b2f", "#212121", "#f8fff5", "#f1f8e9", "#1a2a0a", "#6a8a5a"),
        _scheme("#7b1fa2", "#4a148c", "#f5c842", "#faf5ff", "#f3e5f5", "#1a0a2e", "#7a5a8a"),
        _scheme("#1a237e", "#0d1757", "#ffd600", "#f8f9ff", "#e8eaf6", "#0a0e2e", "#5a6aaa", "#ffd600"),
    ],
    "medical": [
        _scheme("#1565c0", "#0d47a1", "#27ae60", "#f8fbff", "#e3f2fd", "#0a1a3a", "#5a7aaa", "#27ae60"),
        _scheme("#00695c", "#004d40", "#1565c0", "#f8fffd", "#e0f2f1", "#002a24", "#5a8a80", "#1565c0"),
        _scheme("#6a1b9a", "#4a148c", "#26c6da", "#faf5ff", "#f3e5f5", "#1a0a2e", "#7a5a8a", "#26c6da"),
        _scheme("#1a237e", "#0d1757", "#00bcd4", "#ffffff", "#f5f7ff", "#0a0e2e", "#5a6aaa", "#00bcd4"),
        _scheme("#388e3c", "#1b5e20", "#ffa726", "#f8faf8", "#e8f5e9", "#0a2a0a", "#5a7a5a", "#ffa726"),
    ],
    "legal": [
        _scheme("#1a3a5c", "#0f2744", "#c9a96e", "#f8faff", "#eef2f8", "#0f1e2e", "#5d7a8a", "#c9a96e"),
        _scheme("#00838f", "#005662", "#37474f", "#f8ffff", "#e0f7fa", "#002a2e", "#5a8a8e", "#37474f"),
        _scheme("#6a1b2a", "#4a0a1a", "#c9a96e", "#fdf8fa", "#f5e8ec", "#2a0a10", "#8a5a6a", "#c9a96e"),
    ] + _REAL_ESTATE_PALETTES,
    "automotive": [
        _scheme("#2c3e50", "#1a252f", "#e74c3c", "#f5f6fa", "#ecf0f1", "#1a1a2e", "#7f8c8d", "#e74c3c"),
        _scheme("#c62828", "#8b0000", "#212121", "#ffffff", "#fafafa", "#1a0a0a", "#8a6a6a", "#212121"),
        _scheme("#1565c0", "#0d47a1", "#ffa726", "#f8fbff", "#e3f2fd", "#0a1a3a", "#5a7aaa", "#ffa726"),
    ],
    DEFAULT_INDUSTRY: _DEFAULT_PALETTES,
}


@dataclass(frozen=True)
class AssetSelection:
    hero_image_url: str
    gallery_images: List[str]
    color_scheme: ColorScheme


def image_set(industry_key: str) -> ImageSet:
    return IMAGES.get(industry_key, IMAGES[DEFAULT_INDUSTRY])


def palettes(industry_key: str) -> List[ColorScheme]:
    return PALETTES.get(industry_key, PALETTES[DEFAULT_INDUSTRY])


def hero_image(industry_key: str, seed: str) -> str:
    heroes = image_set(industry_key).hero
    return heroes[stable_hash(seed or "") % len(heroes)]


def gallery_images(industry_key: str) -> List[str]:
    return image_set(industry_key).gallery_or_hero()


def color_scheme(industry_key: str, seed: str) -> ColorScheme:
    candidates = palettes(industry_key)
    return candidates[spread_hash(seed or "") % len(candidates)].model_copy(deep=True)


def select_assets(industry_key: str, seed: str) -> AssetSelection:
    return AssetSelection(
        hero_image_url=hero_image(industry_key, seed),
        gallery_images=gallery_images(industry_key),
        color_scheme=color_scheme(industry_key, seed),
    )
