"""Website lifecycle state machine

preview → sold → active ⇄ inactive

The generation pipeline only creates records in ``preview`` and never moves a
record between states; transitions come from payment, onboarding and
subscription events.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Dict, FrozenSet

from sitefactory.models.errors import InvalidTransition

if TYPE_CHECKING:
    from sitefactory.models.website import WebsiteRecord

logger = logging.getLogger(__name__)


class WebsiteStatus(str, Enum):
    PREVIEW = "preview"
    SOLD = "sold"
    ACTIVE = "active"
    INACTIVE = "inactive"


class OnboardingStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


ALLOWED_TRANSITIONS: Dict[WebsiteStatus, FrozenSet[WebsiteStatus]] = {
    WebsiteStatus.PREVIEW: frozenset({WebsiteStatus.SOLD}),
    WebsiteStatus.SOLD: frozenset({WebsiteStatus.ACTIVE}),
    WebsiteStatus.ACTIVE: frozenset({WebsiteStatus.INACTIVE}),
    WebsiteStatus.INACTIVE: frozenset({WebsiteStatus.ACTIVE}),
}


def can_transition(current: WebsiteStatus, target: WebsiteStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def transition(record: "WebsiteRecord", target: WebsiteStatus) -> "WebsiteRecord":
    """Return a copy of ``record`` in ``target`` status, or raise InvalidTransition"""
    current = WebsiteStatus(record.status)
    target = WebsiteStatus(target)
    if not can_transition(current, target):
        raise InvalidTransition(current.value, target.value, website_id=record.id)
    logger.info(f"[Lifecycle] Website {record.id}: {current.value} -> {target.value}")
    return record.model_copy(update={"status": target, "updated_at": datetime.now(timezone.utc)})
