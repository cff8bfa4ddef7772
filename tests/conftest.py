"""Shared fixtures"""

import json
import os
import tempfile

os.environ.setdefault("WEBSITE_STORE_PATH", tempfile.mkdtemp(prefix="sitefactory-tests-"))
os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("OPENAI_API_KEY", "")

import pytest  # noqa: E402
from unittest.mock import AsyncMock, Mock  # noqa: E402

from sitefactory.core.layout_counter import InMemoryLayoutCounterStore, LayoutAssigner  # noqa: E402
from sitefactory.core.website_store import WebsiteStore  # noqa: E402
from sitefactory.design.assets import color_scheme  # noqa: E402
from sitefactory.models.website import WebsiteRecord  # noqa: E402
from sitefactory.utils.sanitization import sanitize_generation  # noqa: E402


def generation_payload(**token_overrides) -> dict:
    """A well-formed LLM response; design tokens can be overridden per test"""
    tokens = {
        "headlineFont": "Fraunces",
        "bodyFont": "Instrument Sans",
        "borderRadius": "lg",
        "shadowStyle": "soft",
        "sectionSpacing": "spacious",
        "buttonStyle": "pill",
        "accentColor": "#f39c12",
        "textColor": "#2c1810",
        "backgroundColor": "#fffef8",
        "cardBackground": "#fdf6e3",
        "sectionBackgrounds": ["#fffef8", "#fdf6e3", "#fffef8"],
    }
    tokens.update(token_overrides)
    return {
        "businessName": "Café Lindenhof",
        "tagline": "Kaffee, der nach Sonntag schmeckt",
        "description": "Hausgemachte Kuchen und Röstkaffee aus der Nachbarschaft.",
        "sections": [
            {"type": "hero", "headline": "Guten Morgen, Lindenhof", "ctaText": "Tisch reservieren", "ctaLink": "#kontakt"},
            {"type": "about", "headline": "Seit 1998 am Platz", "content": "Familiengeführt."},
            {"type": "services", "headline": "Unsere Karte", "items": [
                {"title": "Frühstück", "description": "Bis 14 Uhr.", "icon": "Coffee"},
            ]},
            {"type": "gallery", "headline": "Einblicke"},
            {"type": "contact", "headline": "Besuchen Sie uns", "ctaText": "Nachricht senden"},
        ],
        "seoTitle": "Café Lindenhof: Frühstück in München",
        "designTokens": tokens,
    }


def generation_json(**token_overrides) -> str:
    return json.dumps(generation_payload(**token_overrides), ensure_ascii=False)


@pytest.fixture
def scheme():
    return color_scheme("restaurant", "Café Lindenhof")


@pytest.fixture
def store(tmp_path):
    return WebsiteStore(str(tmp_path / "websites"))


@pytest.fixture
def assigner():
    return LayoutAssigner(InMemoryLayoutCounterStore())


@pytest.fixture
def fake_client():
    client = Mock()
    client.generate_json = AsyncMock(return_value=generation_json())
    return client


@pytest.fixture
def make_record(scheme):
    def _make(business_id: str = "biz-1", **fields) -> WebsiteRecord:
        data = dict(
            business_id=business_id,
            slug="cafe-lindenhof-ab12",
            industry_key="restaurant",
            layout_style="warm",
            generation_seed="Café Lindenhof",
            hero_image="https://images.example/hero.jpg",
            gallery_images=[],
            color_scheme=scheme,
            content=sanitize_generation(generation_json(), scheme, "Café Lindenhof"),
        )
        data.update(fields)
        return WebsiteRecord(**data)
    return _make
