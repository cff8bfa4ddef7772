"""Web presence analysis for lead qualification.

Estimates how old and how good a business's current website is from two
sources fetched in parallel: the first Wayback Machine snapshot and the
page's own HTML (viewport, forms, CMS fingerprints, copyright year).
"""

import asyncio
import logging
import re
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel, Field

from sitefactory.core.config import settings

logger = logging.getLogger(__name__)

WAYBACK_CDX_URL = "https://web.archive.org/cdx/search/cdx"
USER_AGENT = "Mozilla/5.0 (compatible; SiteFactoryBot/1.0)"

# Substring fingerprints, checked in order
CMS_FINGERPRINTS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("wp-content", "wp-includes"), "WordPress"),
    (("joomla",), "Joomla"),
    (("typo3",), "TYPO3"),
    (("drupal",), "Drupal"),
    (("wix.com", "wixsite"), "Wix"),
    (("squarespace",), "Squarespace"),
    (("jimdo",), "Jimdo"),
)

_WORDPRESS_VERSION = re.compile(r"wordpress[^\"]*?([0-9]+\.[0-9]+)", re.IGNORECASE)
_COPYRIGHT_PATTERNS = (
    re.compile(r"©\s*(?:copyright\s*)?(\d{4})", re.IGNORECASE),
    re.compile(r"copyright\s*©?\s*(\d{4})", re.IGNORECASE),
    re.compile(r"alle rechte vorbehalten.*?(\d{4})", re.IGNORECASE),
    re.compile(r"all rights reserved.*?(\d{4})", re.IGNORECASE),
)
_COPYRIGHT_RANGE = re.compile(r"©\s*(\d{4})\s*[-–]\s*(\d{4})")
_CONTACT_WORDS = ("contact", "kontakt", "email", "message", "nachricht")


class LeadType(str, Enum):
    NO_WEBSITE = "no_website"
    OUTDATED_WEBSITE = "outdated_website"
    POOR_WEBSITE = "poor_website"
    UNKNOWN = "unknown"


class AgeSource(str, Enum):
    WAYBACK = "wayback"
    COPYRIGHT = "copyright"
    NONE = "none"


class PresenceDetails(BaseModel):
    first_seen_year: Optional[int] = None
    copyright_year: Optional[int] = None
    has_https: bool = False
    has_mobile_viewport: bool = False
    has_modern_cms: bool = False
    cms_version: Optional[str] = None
    is_responsive: bool = False
    has_contact_form: bool = False
    page_load_indicators: List[str] = Field(default_factory=list)
    age_source: AgeSource = AgeSource.NONE


class PresenceReport(BaseModel):
    has_website: bool
    lead_type: LeadType
    website_age: Optional[int] = None
    website_score: int = 0
    details: PresenceDetails = Field(default_factory=PresenceDetails)


def _plausible_year(year: int, current_year: int) -> bool:
    return 2000 <= year <= current_year


def extract_copyright_year(html: str, current_year: int) -> Optional[int]:
    """Copyright year from the page text; for ranges like "© 2018–2024" the last year wins"""
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    found = None
    for pattern in _COPYRIGHT_PATTERNS:
        match = pattern.search(text)
        if match and _plausible_year(int(match.group(1)), current_year):
            found = int(match.group(1))
            break
    range_match = _COPYRIGHT_RANGE.search(text)
    if range_match and _plausible_year(int(range_match.group(2)), current_year):
        found = int(range_match.group(2))
    return found


def inspect_html(html: str, final_url: str, current_year: int) -> PresenceDetails:
    soup = BeautifulSoup(html, "html.parser")
    lower = html.lower()
    details = PresenceDetails(has_https=final_url.startswith("https://"))

    details.has_mobile_viewport = soup.find("meta", attrs={"name": "viewport"}) is not None
    details.is_responsive = details.has_mobile_viewport or any(
        marker in lower for marker in ("@media", "bootstrap", "tailwind", "responsive")
    )
    details.has_contact_form = soup.find("form") is not None and any(word in lower for word in _CONTACT_WORDS)

    for markers, cms in CMS_FINGERPRINTS:
        if any(marker in lower for marker in markers):
            details.has_modern_cms = True
            if cms == "WordPress":
                match = _WORDPRESS_VERSION.search(html)
                details.cms_version = f"WordPress {match.group(1)}" if match else "WordPress"
            else:
                details.cms_version = cms
            details.page_load_indicators.append(cms)
            break

    details.copyright_year = extract_copyright_year(html, current_year)

    if any(marker in lower for marker in ("react", "vue", "angular", "next.js")):
        details.page_load_indicators.append("Modern JS Framework")
    if "bootstrap 5" in lower or "tailwind" in lower:
        details.page_load_indicators.append("Modern CSS")
    return details


def quality_score(details: PresenceDetails, current_year: int) -> int:
    score = 0
    if details.has_https:
        score += 20
    if details.has_mobile_viewport:
        score += 25
    if details.is_responsive:
        score += 15
    if details.has_contact_form:
        score += 10
    if details.has_modern_cms:
        score += 10

    reference_year = details.copyright_year or details.first_seen_year
    if reference_year:
        age = current_year - reference_year
        if age <= 1:
            score += 20
        elif age <= 2:
            score += 15
        elif age <= 3:
            score += 10
        elif age <= 5:
            score += 5
    return min(100, max(0, score))


def classify_lead(website_age: Optional[int], score: int) -> LeadType:
    if website_age is not None and website_age >= settings.presence_outdated_years:
        return LeadType.OUTDATED_WEBSITE
    if score < settings.presence_poor_score:
        return LeadType.POOR_WEBSITE
    return LeadType.UNKNOWN


async def fetch_first_seen_year(client: httpx.AsyncClient, url: str, current_year: int) -> Optional[int]:
    domain = re.sub(r"^https?://", "", url).split("/")[0]
    params = {
        "url": domain,
        "output": "json",
        "limit": "1",
        "fl": "timestamp",
        "filter": "statuscode:200",
        "from": "19960101",
        "to": f"{current_year}0101",
    }
    try:
        response = await client.get(WAYBACK_CDX_URL, params=params)
        if response.status_code != 200:
            return None
        rows = response.json()
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.info(f"[Presence] Wayback lookup failed for {domain}: {e}")
        return None
    if not isinstance(rows, list) or len(rows) < 2 or not rows[1]:
        return None
    timestamp = str(rows[1][0])
    return int(timestamp[:4]) if len(timestamp) >= 4 and timestamp[:4].isdigit() else None


async def fetch_html_details(client: httpx.AsyncClient, url: str, current_year: int) -> PresenceDetails:
    normalized = url if url.startswith("http") else f"https://{url}"
    try:
        response = await client.get(
            normalized,
            headers={"User-Agent": USER_AGENT, "Accept": "text/html"},
            follow_redirects=True,
        )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.info(f"[Presence] Could not fetch {normalized}: {e}")
        return PresenceDetails(has_https=url.startswith("https://"))
    if response.status_code >= 400:
        return PresenceDetails(has_https=url.startswith("https://"))
    return inspect_html(response.text, str(response.url), current_year)


async def analyze_website(url: Optional[str], client: Optional[httpx.AsyncClient] = None,
                          current_year: Optional[int] = None) -> PresenceReport:
    """Score a business website. Network failures degrade to defaults, they never raise."""
    if not url or not url.strip():
        return PresenceReport(has_website=False, lead_type=LeadType.NO_WEBSITE)

    url = url.strip()
    year = current_year or date.today().year
    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=settings.presence_timeout_seconds)
    try:
        first_seen, details = await asyncio.gather(
            fetch_first_seen_year(client, url, year),
            fetch_html_details(client, url, year),
        )
    finally:
        if owns_client:
            await client.aclose()

    details.first_seen_year = first_seen
    website_age = None
    if first_seen:
        website_age = year - first_seen
        details.age_source = AgeSource.WAYBACK
    elif details.copyright_year:
        website_age = year - details.copyright_year
        details.age_source = AgeSource.COPYRIGHT

    score = quality_score(details, year)
    lead_type = classify_lead(website_age, score)
    logger.info(f"[Presence] {url}: score={score} age={website_age} lead={lead_type.value}")
    return PresenceReport(
        has_website=True,
        lead_type=lead_type,
        website_age=website_age,
        website_score=score,
        details=details,
    )
