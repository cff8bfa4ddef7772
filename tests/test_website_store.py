"""
Tests for the file-backed website store
"""
import pytest

from sitefactory.core.state_machine import OnboardingStatus, WebsiteStatus
from sitefactory.models.errors import ApplicationError, DuplicateGenerationConflict, ErrorCode


class TestWebsiteStore:
    """Atomic writes, one website per business"""

    def test_create_and_get(self, store, make_record):
        record = store.create(make_record())
        loaded = store.get(record.id)
        assert loaded.business_id == "biz-1"
        assert loaded.content.to_document() == record.content.to_document()
        assert loaded.color_scheme == record.color_scheme
        assert loaded.status == WebsiteStatus.PREVIEW

    def test_document_uses_camel_case(self, store, make_record):
        record = store.create(make_record())
        text = (store.base_path / f"{record.id}.json").read_text(encoding="utf-8")
        assert '"businessName"' in text
        assert '"designTokens"' in text

    def test_get_by_business(self, store, make_record):
        record = store.create(make_record("biz-7"))
        assert store.get_by_business("biz-7").id == record.id
        assert store.get_by_business("biz-8") is None

    def test_duplicate_business(self, store, make_record):
        first = store.create(make_record())
        with pytest.raises(DuplicateGenerationConflict) as exc_info:
            store.create(make_record())
        assert exc_info.value.website_id == first.id
        assert exc_info.value.http_status == 409

    def test_replace_keeps_lifecycle(self, store, make_record):
        record = store.save(make_record(
            status=WebsiteStatus.SOLD, onboarding_status=OnboardingStatus.IN_PROGRESS,
        ))

        updated = store.replace_content(record.id, hero_image="https://images.example/new.jpg", layout_style="fresh")

        assert updated.hero_image == "https://images.example/new.jpg"
        assert updated.layout_style == "fresh"
        assert updated.status == WebsiteStatus.SOLD
        assert updated.onboarding_status == OnboardingStatus.IN_PROGRESS
        assert updated.slug == record.slug
        assert updated.preview_token == record.preview_token
        assert store.get(record.id).hero_image == "https://images.example/new.jpg"

    def test_preview_token_refreshed_only_in_preview(self, store, make_record):
        preview = store.create(make_record())
        sold = store.save(make_record(business_id="biz-2", status=WebsiteStatus.SOLD))

        refreshed = store.replace_content(preview.id, refresh_preview_token=True, layout_style="fresh")
        kept = store.replace_content(sold.id, refresh_preview_token=True, layout_style="fresh")

        assert refreshed.preview_token != preview.preview_token
        assert store.get(preview.id).preview_token == refreshed.preview_token
        assert kept.preview_token == sold.preview_token

    def test_replace_rejects_lifecycle_fields(self, store, make_record):
        record = store.create(make_record())
        with pytest.raises(ValueError):
            store.replace_content(record.id, status=WebsiteStatus.ACTIVE)
        assert store.get(record.id).status == WebsiteStatus.PREVIEW

    def test_require_missing(self, store):
        with pytest.raises(ApplicationError) as exc_info:
            store.require("missing")
        assert exc_info.value.code == ErrorCode.NOT_FOUND
        assert exc_info.value.http_status == 404

    def test_no_temp_files_left(self, store, make_record):
        record = store.create(make_record())
        store.replace_content(record.id, layout_style="fresh")
        assert list(store.base_path.glob("*.tmp")) == []
        assert list(store.base_path.glob(".*")) == []
