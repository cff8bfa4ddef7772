"""Request-scoped logging context and phase timing for the generation pipeline"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    business_id: str
    correlation_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    phase: str = "start"
    timings: Dict[str, float] = field(default_factory=dict)
    events: List[str] = field(default_factory=list)

    def log_prefix(self) -> str:
        return f"[{self.correlation_id}] [{self.business_id}] [{self.phase}]"

    def phase_timer(self, phase: str) -> "PhaseTimer":
        return PhaseTimer(self, phase)


class PhaseTimer:
    """Context manager that marks the current phase and logs its duration"""

    def __init__(self, context: RequestContext, phase: str, log: Optional[logging.Logger] = None):
        self.context = context
        self.phase = phase
        self.log = log or logger
        self._started = 0.0

    def __enter__(self) -> "PhaseTimer":
        self.context.phase = self.phase
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        elapsed_ms = (time.perf_counter() - self._started) * 1000
        self.context.timings[self.phase] = elapsed_ms
        outcome = "failed" if exc_type else "ok"
        self.context.events.append(f"{self.phase}:{outcome}")
        self.log.info(f"{self.context.log_prefix()} {outcome} in {elapsed_ms:.1f}ms")
        return False
