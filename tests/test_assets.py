"""
Tests for image and palette selection
"""
from sitefactory.design.assets import (
    IMAGES,
    color_scheme,
    gallery_images,
    hero_image,
    image_set,
    palettes,
    select_assets,
)


class TestHeroImage:
    """Hero choice is a pure function of (industry, seed)"""

    def test_repeatable(self):
        seen = {hero_image("trades", "Schmidt Dachdecker GmbH") for _ in range(100)}
        assert len(seen) == 1

    def test_different_seeds_can_differ(self):
        # 97 % 3 == 1, 98 % 3 == 2
        assert hero_image("restaurant", "a") != hero_image("restaurant", "b")

    def test_empty_seed_is_valid(self):
        assert hero_image("restaurant", "") == IMAGES["restaurant"].hero[0]

    def test_unknown_industry_uses_default_pool(self):
        assert hero_image("zoo", "x") in IMAGES["other"].hero


class TestGallery:
    def test_curated_gallery(self):
        assert gallery_images("restaurant") == IMAGES["restaurant"].gallery

    def test_missing_gallery_falls_back_to_heroes(self):
        assert gallery_images("automotive") == IMAGES["automotive"].hero[:2]

    def test_returned_list_is_a_copy(self):
        images = gallery_images("beauty")
        images.append("https://example.com/x.jpg")
        assert len(image_set("beauty").gallery) == 2


class TestColorScheme:
    def test_repeatable(self):
        assert color_scheme("restaurant", "Café Lindenhof") == color_scheme("restaurant", "Café Lindenhof")

    def test_from_industry_pool(self):
        scheme = color_scheme("legal", "Kanzlei Roth")
        assert scheme.primary in {p.primary for p in palettes("legal")}

    def test_returns_independent_copy(self):
        scheme = color_scheme("fitness", "Pulse")
        scheme.primary = "#000000"
        assert "#000000" not in {p.primary for p in palettes("fitness")}

    def test_unknown_industry_uses_default_palettes(self):
        assert palettes("zoo") == palettes("other")


class TestSelectAssets:
    def test_bundles_all_three(self):
        selection = select_assets("restaurant", "Café Lindenhof")
        assert selection.hero_image_url == hero_image("restaurant", "Café Lindenhof")
        assert selection.gallery_images == gallery_images("restaurant")
        assert selection.color_scheme == color_scheme("restaurant", "Café Lindenhof")
