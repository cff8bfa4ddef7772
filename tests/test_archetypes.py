"""
Tests for the archetype registry
"""
from sitefactory.design import archetypes
from sitefactory.design.industry import DEFAULT_POOL, RULES
from sitefactory.utils.sanitization import is_forbidden_body_font


class TestRegistry:
    def test_every_pool_entry_is_registered(self):
        ids = set(archetypes.ARCHETYPES)
        for rule in RULES:
            assert set(rule.pool) <= ids, rule.key
        assert set(DEFAULT_POOL) <= ids

    def test_unknown_id_returns_default(self):
        assert archetypes.get("brutalist").id == archetypes.DEFAULT_ARCHETYPE_ID == "modern"

    def test_body_fonts_are_sans_serif(self):
        for archetype in archetypes.ARCHETYPES.values():
            assert not is_forbidden_body_font(archetype.typography.body_font), archetype.id

    def test_instructions_name_the_fonts(self):
        warm = archetypes.get("warm")
        assert "Fraunces" in warm.instructions
        assert "Instrument Sans" in warm.instructions
        assert warm.name in warm.instructions

    def test_allowed_body_fonts_unique(self):
        fonts = archetypes.allowed_body_fonts()
        assert len(fonts) == len(set(fonts))
        assert "Inter" in fonts
