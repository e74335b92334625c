# declutter/services/extractor/instrumentation.py
"""
Ready-made phase hooks for ``extract(..., hook=...)``.

A hook is any callable ``hook(phase: ExtractionPhase, elapsed: float)``;
it is called once after filtering, once after selection and once after
reconstruction.
"""

from typing import Callable

from loguru import logger
from prometheus_client import Histogram

from declutter.models import ExtractionPhase

PhaseHook = Callable[[ExtractionPhase, float], None]

EXTRACTION_PHASE_DURATION = Histogram(
    'declutter_phase_duration_seconds',
    'Time spent in each extraction phase',
    ['phase'],
)


def log_phase(phase: ExtractionPhase, elapsed: float) -> None:
    logger.debug(f"{phase.value}: {elapsed * 1000:.2f}ms")


def observe_phase(phase: ExtractionPhase, elapsed: float) -> None:
    EXTRACTION_PHASE_DURATION.labels(phase=phase.value).observe(elapsed)


def chain_hooks(*hooks: PhaseHook) -> PhaseHook:
    """Combine several hooks into one, called in the given order."""
    def _chained(phase: ExtractionPhase, elapsed: float) -> None:
        for hook in hooks:
            hook(phase, elapsed)
    return _chained
