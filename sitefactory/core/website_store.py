"""File-backed website store: one JSON document per website id"""

import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from sitefactory.core.config import settings
from sitefactory.models.errors import ApplicationError, DuplicateGenerationConflict, ErrorCode
from sitefactory.core.state_machine import WebsiteStatus
from sitefactory.models.website import WebsiteRecord, new_preview_token

logger = logging.getLogger(__name__)

# Fields a regeneration may replace; lifecycle fields are never among them
REPLACEABLE_FIELDS = frozenset({
    "content", "color_scheme", "hero_image", "gallery_images",
    "layout_style", "industry_key", "generation_seed", "preview_token",
})


class WebsiteStore:
    """
    Stores website records under ``<base>/<id>.json``.

    Every write goes to a temp file in the same directory and is moved into
    place with ``os.replace``, so a reader sees either the old or the new
    document, never a partial one.
    """

    def __init__(self, base_path: Optional[str] = None):
        self.base_path = Path(base_path or settings.website_store_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _path(self, website_id: str) -> Path:
        return self.base_path / f"{website_id}.json"

    def _write(self, record: WebsiteRecord):
        data = record.model_dump_json(by_alias=True, indent=2)
        fd, tmp_path = tempfile.mkstemp(dir=self.base_path, prefix=f".{record.id}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp_path, self._path(record.id))
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def get(self, website_id: str) -> Optional[WebsiteRecord]:
        path = self._path(website_id)
        if not path.exists():
            return None
        return WebsiteRecord.model_validate_json(path.read_text(encoding="utf-8"))

    def require(self, website_id: str) -> WebsiteRecord:
        record = self.get(website_id)
        if record is None:
            raise ApplicationError(
                code=ErrorCode.NOT_FOUND,
                message=f"Website {website_id} not found",
                website_id=website_id
            )
        return record

    def get_by_business(self, business_id: str) -> Optional[WebsiteRecord]:
        for path in sorted(self.base_path.glob("*.json")):
            record = WebsiteRecord.model_validate_json(path.read_text(encoding="utf-8"))
            if record.business_id == business_id:
                return record
        return None

    def create(self, record: WebsiteRecord) -> WebsiteRecord:
        existing = self.get_by_business(record.business_id)
        if existing is not None:
            raise DuplicateGenerationConflict(record.business_id, website_id=existing.id)
        self._write(record)
        logger.info(f"[WebsiteStore] Created website {record.id} for business {record.business_id}")
        return record

    def replace_content(self, website_id: str, refresh_preview_token: bool = False, **fields: Any) -> WebsiteRecord:
        """
        Swap generated content in one write; status, onboarding state and slug are kept.

        With ``refresh_preview_token`` a new token is issued only if the stored
        record is still in preview at write time.
        """
        unknown = set(fields) - REPLACEABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot replace fields: {sorted(unknown)}")
        current = self.require(website_id)
        update: Dict[str, Any] = {**fields, "updated_at": datetime.now(timezone.utc)}
        if refresh_preview_token and current.status == WebsiteStatus.PREVIEW:
            update["preview_token"] = new_preview_token()
        record = current.model_copy(update=update)
        self._write(record)
        logger.info(f"[WebsiteStore] Replaced content of website {website_id} (status {record.status.value})")
        return record

    def save(self, record: WebsiteRecord) -> WebsiteRecord:
        self._write(record)
        return record


# Global store instance
website_store = WebsiteStore()
