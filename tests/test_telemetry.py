"""
Tests for request context and phase timing
"""
import pytest

from sitefactory.core.telemetry import RequestContext


class TestPhaseTimer:
    def test_records_phase_and_timing(self):
        context = RequestContext(business_id="biz-1")
        with context.phase_timer("classify"):
            assert context.phase == "classify"
        assert "classify" in context.timings
        assert context.events == ["classify:ok"]

    def test_failure_is_recorded_and_propagated(self):
        context = RequestContext(business_id="biz-1")
        with pytest.raises(RuntimeError):
            with context.phase_timer("invoke"):
                raise RuntimeError("boom")
        assert context.events == ["invoke:failed"]

    def test_log_prefix(self):
        context = RequestContext(business_id="biz-1", correlation_id="abc")
        assert context.log_prefix() == "[abc] [biz-1] [start]"
