"""Website generation and lifecycle endpoints"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from sitefactory.agents.generator import WebsiteGenerator, complete_onboarding
from sitefactory.core.state_machine import WebsiteStatus, transition
from sitefactory.core.telemetry import RequestContext
from sitefactory.core.website_store import WebsiteStore, website_store
from sitefactory.models.business import BusinessFacts
from sitefactory.models.website import OnboardingPatch, WebsiteRecord

logger = logging.getLogger(__name__)

router = APIRouter()

_generator: Optional[WebsiteGenerator] = None


def get_store() -> WebsiteStore:
    return website_store


def get_generator() -> WebsiteGenerator:
    global _generator
    if _generator is None:
        _generator = WebsiteGenerator()
    return _generator


class GenerateRequest(BaseModel):
    business_id: str
    business: BusinessFacts


class RegenerateRequest(BaseModel):
    business: BusinessFacts
    seed: Optional[str] = None


class StatusRequest(BaseModel):
    status: WebsiteStatus


@router.post("/websites", status_code=201, response_model=WebsiteRecord)
async def generate_website(request: GenerateRequest, generator: WebsiteGenerator = Depends(get_generator)):
    """Generate the first preview website for a business; 409 if one already exists"""
    context = RequestContext(business_id=request.business_id)
    logger.info(f"{context.log_prefix()} Generating website for '{request.business.name}'")
    return await generator.generate(request.business_id, request.business, context=context)


@router.post("/websites/{website_id}/regenerate", response_model=WebsiteRecord)
async def regenerate_website(website_id: str, request: RegenerateRequest,
                             generator: WebsiteGenerator = Depends(get_generator),
                             store: WebsiteStore = Depends(get_store)):
    record = store.require(website_id)
    context = RequestContext(business_id=record.business_id)
    return await generator.regenerate(record, request.business, seed=request.seed, context=context)


@router.get("/websites/{website_id}", response_model=WebsiteRecord)
async def get_website(website_id: str, store: WebsiteStore = Depends(get_store)):
    return store.require(website_id)


@router.post("/websites/{website_id}/status", response_model=WebsiteRecord)
async def change_status(website_id: str, request: StatusRequest, store: WebsiteStore = Depends(get_store)):
    """Lifecycle transition (payment, cancellation, reactivation)"""
    record = store.require(website_id)
    return store.save(transition(record, request.status))


@router.post("/websites/{website_id}/onboarding", response_model=WebsiteRecord)
async def submit_onboarding(website_id: str, patch: OnboardingPatch, store: WebsiteStore = Depends(get_store)):
    record = store.require(website_id)
    return store.save(complete_onboarding(record, patch))
