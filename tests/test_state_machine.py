"""
Tests for the website lifecycle
"""
import pytest

from sitefactory.core.state_machine import WebsiteStatus, can_transition, transition
from sitefactory.models.errors import InvalidTransition

S = WebsiteStatus


class TestTransitions:
    @pytest.mark.parametrize("current,target", [
        (S.PREVIEW, S.SOLD),
        (S.SOLD, S.ACTIVE),
        (S.ACTIVE, S.INACTIVE),
        (S.INACTIVE, S.ACTIVE),
    ])
    def test_allowed(self, make_record, current, target):
        record = make_record(status=current)
        moved = transition(record, target)
        assert moved.status == target
        assert moved.updated_at >= record.updated_at
        assert record.status == current

    @pytest.mark.parametrize("current,target", [
        (S.PREVIEW, S.ACTIVE),
        (S.PREVIEW, S.INACTIVE),
        (S.SOLD, S.PREVIEW),
        (S.ACTIVE, S.SOLD),
        (S.INACTIVE, S.PREVIEW),
        (S.ACTIVE, S.ACTIVE),
    ])
    def test_rejected(self, make_record, current, target):
        record = make_record(status=current)
        with pytest.raises(InvalidTransition) as exc_info:
            transition(record, target)
        assert exc_info.value.http_status == 409
        assert exc_info.value.website_id == record.id

    def test_string_target(self, make_record):
        assert transition(make_record(), "sold").status == S.SOLD

    def test_can_transition(self):
        assert can_transition(S.PREVIEW, S.SOLD)
        assert not can_transition(S.SOLD, S.INACTIVE)
