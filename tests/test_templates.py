"""
Tests for template reference selection
"""
from sitefactory.design.templates import (
    DEFAULT_CATEGORIES,
    TemplateEntry,
    image_urls,
    load_templates,
    matched_categories,
    select_templates,
    style_description,
)


def _entry(slug, *categories):
    return TemplateEntry(
        name=slug.upper(), slug=slug, categories=tuple(categories), tags=(),
        style_hints=f"{slug} hints", image=f"{slug}.webp",
    )


LIBRARY = [
    _entry("a", "Real Estate"),
    _entry("b", "Business & Consulting"),
    _entry("c", "Agencies & Corporate"),
]


class TestMatchedCategories:
    def test_keyword_categories(self):
        assert matched_categories("Friseur Salon Anna") == ["Beauty & Wellness", "Local Services"]

    def test_short_keywords_need_word_boundaries(self):
        assert "Technology & SaaS" not in matched_categories("Bäckerei mit Herz")

    def test_no_match_uses_defaults(self):
        assert matched_categories("Qwertz") == list(DEFAULT_CATEGORIES)


class TestSelectTemplates:
    """Scoring, padding and dedup"""

    def test_hair_salon_prefers_salon_template(self):
        result = select_templates("Friseur", "Salon Anna")
        assert result[0].slug == "lumiere-salon"
        assert len(result) == 3
        assert len({t.slug for t in result}) == 3

    def test_padding_with_generic_templates(self):
        result = select_templates("Immobilien", "Keller", templates=LIBRARY)
        assert [t.slug for t in result] == ["a", "b", "c"]

    def test_unknown_category_uses_default_categories(self):
        result = select_templates("Xyz", "Qwer", templates=LIBRARY)
        assert [t.slug for t in result] == ["b", "c"]

    def test_templates_without_image_are_skipped(self):
        result = select_templates("Architekt", "Design Studio", count=50)
        assert "atelier-draft" not in {t.slug for t in result}

    def test_zero_count(self):
        assert select_templates("Friseur", "Salon Anna", count=0) == []

    def test_never_more_than_count(self):
        assert len(select_templates("Restaurant", "Trattoria", count=2)) == 2

    def test_empty_library(self):
        assert select_templates("Friseur", "Salon Anna", templates=[]) == []


class TestLibrary:
    def test_bundled_library_loads(self):
        slugs = [t.slug for t in load_templates()]
        assert "lumiere-salon" in slugs
        assert len(slugs) == len(set(slugs))

    def test_image_urls_use_cdn_base(self):
        urls = image_urls([LIBRARY[0]])
        assert len(urls) == 1
        assert urls[0].endswith("/a.webp")

    def test_style_description(self):
        text = style_description(LIBRARY[:1])
        assert '"A" (Real Estate): a hints' in text
        assert style_description([]) == ""
