"""Website generation pipeline: classify, select, prompt, invoke, sanitize, persist"""

import logging
import re
import secrets
import time
import unicodedata
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from sitefactory.agents.client import OpenAIClient, openai_client
from sitefactory.agents.prompt import build_prompt
from sitefactory.core.config import settings
from sitefactory.core.layout_counter import LayoutAssigner, create_counter_store
from sitefactory.core.state_machine import OnboardingStatus, WebsiteStatus, transition
from sitefactory.core.telemetry import RequestContext
from sitefactory.core.website_store import WebsiteStore, website_store
from sitefactory.design import archetypes
from sitefactory.design.assets import select_assets
from sitefactory.design.industry import classify
from sitefactory.design.templates import image_urls, select_templates, style_description
from sitefactory.design.tone import find_forbidden_phrases, tone_block
from sitefactory.models.business import BusinessFacts
from sitefactory.models.draft import ColorScheme, GeneratedWebsiteDraft, SectionType
from sitefactory.models.errors import DuplicateGenerationConflict
from sitefactory.models.website import OnboardingPatch, WebsiteRecord
from sitefactory.utils.sanitization import sanitize_generation, sanitize_text

logger = logging.getLogger(__name__)

_UMLAUTS = str.maketrans({"ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss"})
_BRAND_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def slugify(name: str) -> str:
    text = name.lower().translate(_UMLAUTS)
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^a-z0-9]+", "-", text).strip("-")
    return text[:60] or "website"


@dataclass
class GenerationResult:
    industry_key: str
    layout_style: str
    seed: str
    hero_image: str
    gallery_images: List[str]
    color_scheme: ColorScheme
    draft: GeneratedWebsiteDraft


def inject_business_data(draft: GeneratedWebsiteDraft, facts: BusinessFacts,
                         gallery: List[str]) -> GeneratedWebsiteDraft:
    """Add curated gallery images and the real Google rating to a sanitized draft"""
    document = draft.to_document()
    if gallery:
        for section in document["sections"]:
            if section["type"] == SectionType.GALLERY.value:
                section["images"] = list(gallery)
    if facts.rating is not None:
        document["googleRating"] = facts.rating
    if facts.review_count:
        document["googleReviewCount"] = facts.review_count
    return GeneratedWebsiteDraft.model_validate(document)


class WebsiteGenerator:
    """
    Runs the generation steps strictly in order.

    Nothing is written to the store until the LLM output has been sanitized,
    so a transport or malformed-output failure leaves existing records exactly
    as they were.
    """

    def __init__(self, client: Optional[OpenAIClient] = None, assigner: Optional[LayoutAssigner] = None,
                 store: Optional[WebsiteStore] = None):
        self.client = client or openai_client
        self.assigner = assigner or LayoutAssigner(create_counter_store())
        self.store = store or website_store

    async def _run(self, facts: BusinessFacts, seed: str, context: RequestContext,
                   is_regenerate: bool) -> GenerationResult:
        with context.phase_timer("classify"):
            classification = classify(facts.category, facts.name, facts.industry_override)

        with context.phase_timer("layout"):
            layout_style = await self.assigner.next_layout(classification.key, classification.pool, seed)
            archetype = archetypes.get(layout_style)
            tone = tone_block(classification.key)

        with context.phase_timer("assets"):
            assets = select_assets(classification.key, seed)
            templates = select_templates(facts.category, facts.name, settings.template_reference_count)

        with context.phase_timer("prompt"):
            request = build_prompt(
                facts,
                classification.key,
                tone,
                archetype,
                assets.color_scheme,
                template_style=style_description(templates),
                image_urls=image_urls(templates),
                is_regenerate=is_regenerate,
            )

        logger.info(
            f"{context.log_prefix()} industry={classification.key} layout={layout_style} "
            f"templates={[t.slug for t in templates]}"
        )

        with context.phase_timer("invoke"):
            raw = await self.client.generate_json(request.system, request.prompt, request.image_urls)

        with context.phase_timer("sanitize"):
            draft = sanitize_generation(
                raw,
                assets.color_scheme,
                fallback_name=facts.name,
                headline_default=archetype.typography.headline_font,
            )
            draft = inject_business_data(draft, facts, assets.gallery_images)

        leaked = find_forbidden_phrases(draft.model_dump_json(by_alias=True), tone)
        if leaked:
            logger.warning(f"{context.log_prefix()} Generated copy contains forbidden phrases: {leaked}")

        return GenerationResult(
            industry_key=classification.key,
            layout_style=layout_style,
            seed=seed,
            hero_image=assets.hero_image_url,
            gallery_images=assets.gallery_images,
            color_scheme=assets.color_scheme,
            draft=draft,
        )

    async def generate(self, business_id: str, facts: BusinessFacts,
                       context: Optional[RequestContext] = None) -> WebsiteRecord:
        """First generation for a business; the record starts in ``preview``"""
        context = context or RequestContext(business_id=business_id)
        existing = self.store.get_by_business(business_id)
        if existing is not None:
            raise DuplicateGenerationConflict(business_id, website_id=existing.id)

        result = await self._run(facts, facts.name, context, is_regenerate=False)

        with context.phase_timer("persist"):
            record = self.store.create(WebsiteRecord(
                business_id=business_id,
                slug=f"{slugify(facts.name)}-{secrets.token_hex(2)}",
                industry_key=result.industry_key,
                layout_style=result.layout_style,
                generation_seed=result.seed,
                hero_image=result.hero_image,
                gallery_images=result.gallery_images,
                color_scheme=result.color_scheme,
                content=result.draft,
            ))
        return record

    async def regenerate(self, record: WebsiteRecord, facts: BusinessFacts, seed: Optional[str] = None,
                         context: Optional[RequestContext] = None) -> WebsiteRecord:
        """
        Replace a record's content with a fresh generation.

        The seed defaults to name + timestamp so hero image, palette and the
        hash fallback vary from the previous run; the round-robin counter
        advances regardless. Lifecycle fields are never touched.
        """
        context = context or RequestContext(business_id=record.business_id)
        seed = seed or f"{facts.name}{int(time.time() * 1000)}"

        result = await self._run(facts, seed, context, is_regenerate=True)

        fields = dict(
            content=result.draft,
            color_scheme=result.color_scheme,
            hero_image=result.hero_image,
            gallery_images=result.gallery_images,
            layout_style=result.layout_style,
            industry_key=result.industry_key,
            generation_seed=result.seed,
        )

        with context.phase_timer("persist"):
            return self.store.replace_content(record.id, refresh_preview_token=True, **fields)


def _brand_color(value: Optional[str]) -> Optional[str]:
    if value and _BRAND_COLOR.match(value.strip()):
        return value.strip().lower()
    return None


def _patch_section(document: dict, section_type: SectionType, values: dict):
    for section in document["sections"]:
        if section["type"] == section_type.value:
            section.update(values)
            return
    document["sections"].append({"type": section_type.value, **values})


def complete_onboarding(record: WebsiteRecord, patch: OnboardingPatch) -> WebsiteRecord:
    """
    Merge customer data into generated content and activate the website.

    Text is stripped of HTML, brand colors are applied only when they are
    ``#RRGGBB`` and sections are patched by type. The record moves from
    ``sold`` to ``active``; any other starting state raises InvalidTransition.
    """
    document = record.content.to_document()

    if patch.business_name:
        document["businessName"] = sanitize_text(patch.business_name)
    if patch.tagline:
        document["tagline"] = sanitize_text(patch.tagline)
    if patch.description:
        document["description"] = sanitize_text(patch.description)

    hero = {}
    if patch.hero_photo_url:
        hero["backgroundImage"] = patch.hero_photo_url
    if hero:
        _patch_section(document, SectionType.HERO, hero)

    about = {}
    if patch.about_text:
        about["content"] = sanitize_text(patch.about_text)
    if patch.about_photo_url:
        about["image"] = patch.about_photo_url
    if about:
        _patch_section(document, SectionType.ABOUT, about)

    if patch.services:
        items = [
            {"title": sanitize_text(s.title), "description": sanitize_text(s.description)}
            for s in patch.services if s.title.strip()
        ]
        if items:
            _patch_section(document, SectionType.SERVICES, {"items": items})

    primary = _brand_color(patch.brand_color)
    secondary = _brand_color(patch.brand_secondary_color)
    scheme = record.color_scheme.with_brand(primary, secondary)
    if primary:
        document["designTokens"]["accentColor"] = primary

    activated = transition(record, WebsiteStatus.ACTIVE)
    logger.info(f"[Onboarding] Website {record.id} completed onboarding")
    return activated.model_copy(update={
        "content": GeneratedWebsiteDraft.model_validate(document),
        "color_scheme": scheme,
        "onboarding_status": OnboardingStatus.COMPLETED,
        "hero_image": patch.hero_photo_url or record.hero_image,
        "updated_at": datetime.now(timezone.utc),
    })
