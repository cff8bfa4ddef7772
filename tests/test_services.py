"""
Tests for typical-services prompt seeds
"""
from sitefactory.design.services import PROFILES, profile_for, services_seed


class TestServicesSeed:
    def test_restaurant_seed(self):
        seed = services_seed("restaurant")
        assert seed.startswith('TYPICAL SERVICES FOR "RESTAURANT / CAFÉ"')
        assert "- Mittagsmenü:" in seed
        assert "(icon: Utensils)" in seed
        assert 'Recommended CTA: "Tisch reservieren"' in seed

    def test_unknown_industry_is_empty(self):
        assert services_seed("other") == ""
        assert profile_for("zoo") is None

    def test_every_profile_has_services(self):
        for key, profile in PROFILES.items():
            assert profile.services, key
            assert profile.cta_text, key
