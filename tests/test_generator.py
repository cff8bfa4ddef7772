"""
Tests for the generation pipeline

The LLM client is an AsyncMock; store and layout counter are real
(temp directory and in-memory).
"""
import json
from unittest.mock import AsyncMock, Mock

import pytest

from conftest import generation_json, generation_payload
from sitefactory.agents.generator import WebsiteGenerator, complete_onboarding, slugify
from sitefactory.core.layout_counter import LayoutAssigner
from sitefactory.core.state_machine import OnboardingStatus, WebsiteStatus, transition
from sitefactory.design.assets import IMAGES, color_scheme, gallery_images, hero_image
from sitefactory.models.business import BusinessFacts
from sitefactory.models.errors import (
    DuplicateGenerationConflict,
    GenerationTransportError,
    InvalidTransition,
    MalformedGenerationError,
    PersistenceUnavailable,
)
from sitefactory.models.website import OnboardingPatch, OnboardingService
from sitefactory.utils.sanitization import sanitize_generation


@pytest.fixture
def facts():
    return BusinessFacts(
        name="Café Lindenhof",
        category="Café",
        address="Lindenstraße 4, 80331 München",
        rating=4.7,
        reviewCount=120,
    )


@pytest.fixture
def generator(fake_client, assigner, store):
    return WebsiteGenerator(client=fake_client, assigner=assigner, store=store)


class TestGenerate:
    """First generation"""

    @pytest.mark.asyncio
    async def test_cafe_scenario(self, generator, fake_client, store, facts):
        record = await generator.generate("biz-1", facts)

        assert record.status == WebsiteStatus.PREVIEW
        assert record.onboarding_status == OnboardingStatus.PENDING
        assert record.industry_key == "restaurant"
        assert record.layout_style == "warm"
        assert record.generation_seed == "Café Lindenhof"
        assert record.hero_image == hero_image("restaurant", "Café Lindenhof")
        assert record.color_scheme == color_scheme("restaurant", "Café Lindenhof")
        assert record.slug.startswith("cafe-lindenhof-")

        document = record.content.to_document()
        assert document["businessName"] == "Café Lindenhof"
        assert document["googleRating"] == 4.7
        assert document["googleReviewCount"] == 120
        gallery = next(s for s in document["sections"] if s["type"] == "gallery")
        assert gallery["images"] == gallery_images("restaurant")

        assert store.get_by_business("biz-1").id == record.id
        fake_client.generate_json.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_zero_rating_is_injected(self, generator, facts):
        unrated = facts.model_copy(update={"rating": 0.0, "review_count": 0})
        record = await generator.generate("biz-1", unrated)
        document = record.content.to_document()
        assert document["googleRating"] == 0.0
        assert "googleReviewCount" not in document

    @pytest.mark.asyncio
    async def test_prompt_uses_selected_archetype(self, generator, fake_client, facts):
        await generator.generate("biz-1", facts)
        system, prompt, images = fake_client.generate_json.call_args.args
        assert "THE WARM CONNECTOR (GASTRO)" in prompt
        assert "Name: Café Lindenhof" in prompt
        assert len(images) <= 5

    @pytest.mark.asyncio
    async def test_sanitizes_output(self, generator, fake_client, facts):
        fake_client.generate_json.return_value = "```json\n" + generation_json(
            bodyFont="Playfair Display", borderRadius="gigantic"
        ) + "\n```"
        record = await generator.generate("biz-1", facts)
        assert record.content.design_tokens.body_font == "Inter"
        assert record.content.design_tokens.border_radius.value == "md"

    @pytest.mark.asyncio
    async def test_malformed_output_persists_nothing(self, generator, fake_client, store, facts):
        fake_client.generate_json.return_value = "Sorry, I cannot help with that."
        with pytest.raises(MalformedGenerationError):
            await generator.generate("biz-1", facts)
        assert store.get_by_business("biz-1") is None

    @pytest.mark.asyncio
    async def test_duplicate_rejected_before_llm_call(self, generator, fake_client, facts):
        await generator.generate("biz-1", facts)
        with pytest.raises(DuplicateGenerationConflict):
            await generator.generate("biz-1", facts)
        assert fake_client.generate_json.await_count == 1

    @pytest.mark.asyncio
    async def test_layout_rotates_between_businesses(self, generator, facts):
        first = await generator.generate("biz-1", facts)
        second = await generator.generate("biz-2", facts)
        assert first.layout_style == "warm"
        assert second.layout_style == "fresh"

    @pytest.mark.asyncio
    async def test_counter_outage_still_generates(self, fake_client, store, facts):
        counter = Mock()
        counter.get_and_increment = AsyncMock(side_effect=PersistenceUnavailable("redis down"))
        generator = WebsiteGenerator(client=fake_client, assigner=LayoutAssigner(counter), store=store)

        record = await generator.generate("biz-1", facts)
        assert record.layout_style in ("warm", "fresh", "modern")

    @pytest.mark.asyncio
    async def test_forbidden_phrase_only_logged(self, generator, fake_client, facts, caplog):
        payload = generation_payload()
        payload["description"] = "Herzlich willkommen bei uns."
        fake_client.generate_json.return_value = json.dumps(payload)
        record = await generator.generate("biz-1", facts)
        assert record.content.description == "Herzlich willkommen bei uns."
        assert "forbidden phrases" in caplog.text


class TestRegenerate:
    """Content replaced, lifecycle kept"""

    @pytest.mark.asyncio
    async def test_transport_failure_keeps_previous_content(self, generator, fake_client, store, facts):
        record = await generator.generate("biz-1", facts)
        fake_client.generate_json.side_effect = GenerationTransportError("timeout")

        with pytest.raises(GenerationTransportError):
            await generator.regenerate(record, facts)

        stored = store.get(record.id)
        assert stored.content.to_document() == record.content.to_document()
        assert stored.preview_token == record.preview_token

    @pytest.mark.asyncio
    async def test_sold_record_keeps_status_and_token(self, generator, store, facts):
        record = await generator.generate("biz-1", facts)
        sold = store.save(transition(record, WebsiteStatus.SOLD))

        updated = await generator.regenerate(sold, facts)

        assert updated.status == WebsiteStatus.SOLD
        assert updated.preview_token == sold.preview_token
        assert updated.slug == sold.slug
        assert updated.layout_style == "fresh"

    @pytest.mark.asyncio
    async def test_sold_while_generating_keeps_token(self, generator, store, facts):
        record = await generator.generate("biz-1", facts)
        store.save(transition(record, WebsiteStatus.SOLD))

        # caller still holds the preview copy it read before the sale
        updated = await generator.regenerate(record, facts)

        assert updated.status == WebsiteStatus.SOLD
        assert updated.preview_token == record.preview_token
        assert store.get(record.id).preview_token == record.preview_token

    @pytest.mark.asyncio
    async def test_preview_record_gets_new_token(self, generator, facts):
        record = await generator.generate("biz-1", facts)
        updated = await generator.regenerate(record, facts)
        assert updated.preview_token != record.preview_token
        assert updated.status == WebsiteStatus.PREVIEW

    @pytest.mark.asyncio
    async def test_seed_drives_hero_selection(self, generator, facts):
        record = await generator.generate("biz-1", facts)
        first = await generator.regenerate(record, facts, seed="a")
        second = await generator.regenerate(record, facts, seed="b")
        assert first.hero_image == IMAGES["restaurant"].hero[1]
        assert second.hero_image == IMAGES["restaurant"].hero[2]
        assert first.generation_seed == "a"

    @pytest.mark.asyncio
    async def test_default_seed_includes_timestamp(self, generator, facts):
        record = await generator.generate("biz-1", facts)
        updated = await generator.regenerate(record, facts)
        assert updated.generation_seed.startswith("Café Lindenhof")
        assert updated.generation_seed != "Café Lindenhof"

    @pytest.mark.asyncio
    async def test_regeneration_prompt(self, generator, fake_client, facts):
        record = await generator.generate("biz-1", facts)
        await generator.regenerate(record, facts)
        _, prompt, _ = fake_client.generate_json.call_args.args
        assert "DIFFERENT ANGLE" in prompt


class TestCompleteOnboarding:
    """Customer data merged, website activated"""

    def test_merges_and_activates(self, make_record):
        record = make_record(status=WebsiteStatus.SOLD)
        patch = OnboardingPatch(
            business_name="<b>Café Lindenhof</b> am Markt",
            about_text="Seit 1998 <i>familiengeführt</i>.",
            services=[OnboardingService(title="Brunch", description="Sonntags"), OnboardingService(title="  ")],
            brand_color="#1A2B3C",
            hero_photo_url="https://photos.example/hero.jpg",
        )

        result = complete_onboarding(record, patch)

        assert result.status == WebsiteStatus.ACTIVE
        assert result.onboarding_status == OnboardingStatus.COMPLETED
        assert result.hero_image == "https://photos.example/hero.jpg"
        assert result.color_scheme.primary == "#1a2b3c"
        assert result.color_scheme.accent == "#1a2b3c"

        document = result.content.to_document()
        assert document["businessName"] == "Café Lindenhof am Markt"
        assert document["designTokens"]["accentColor"] == "#1a2b3c"
        sections = {s["type"]: s for s in document["sections"]}
        assert sections["about"]["content"] == "Seit 1998 familiengeführt."
        assert sections["services"]["items"] == [{"title": "Brunch", "description": "Sonntags"}]
        assert sections["hero"]["backgroundImage"] == "https://photos.example/hero.jpg"

    def test_invalid_brand_color_ignored(self, make_record):
        record = make_record(status=WebsiteStatus.SOLD)
        result = complete_onboarding(record, OnboardingPatch(brand_color="red"))
        assert result.color_scheme.primary == record.color_scheme.primary

    def test_missing_section_is_appended(self, make_record, scheme):
        payload = generation_payload()
        payload["sections"] = [s for s in payload["sections"] if s["type"] != "about"]
        content = sanitize_generation(json.dumps(payload), scheme)
        record = make_record(status=WebsiteStatus.SOLD, content=content)

        result = complete_onboarding(record, OnboardingPatch(about_text="Neu hier"))

        about = result.content.to_document()["sections"][-1]
        assert about == {"type": "about", "content": "Neu hier"}

    def test_requires_sold_status(self, make_record):
        with pytest.raises(InvalidTransition):
            complete_onboarding(make_record(), OnboardingPatch(tagline="Hallo"))


class TestSlugify:
    @pytest.mark.parametrize("name,expected", [
        ("Café Lindenhof", "cafe-lindenhof"),
        ("Bäckerei Müller & Söhne", "baeckerei-mueller-soehne"),
        ("Straßenbau GmbH", "strassenbau-gmbh"),
        ("!!!", "website"),
    ])
    def test_slugify(self, name, expected):
        assert slugify(name) == expected
