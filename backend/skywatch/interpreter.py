"""Batch orchestrator.

Runs every event in a request through its assembler inside a per-event
failure boundary. Each event yields an :class:`EventOutcome` holding either a
decision or the error; only successful decisions reach the response, so one
malformed event never aborts the batch.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from skywatch.asteroid_interpreter import interpret_asteroid
from skywatch.clock import Clock, utc_now
from skywatch.conjunction_interpreter import conjunction_event_id, interpret_conjunction
from skywatch.debris_interpreter import interpret_debris
from skywatch.models import (
    DecisionObject,
    EventType,
    InterpretationRequest,
    InterpretationResponse,
    SystemContext,
)

logger = logging.getLogger(__name__)


@dataclass
class EventOutcome:
    """Result of interpreting one event: a decision, or the error that dropped it."""

    event_type: EventType
    event_id: str
    decision: DecisionObject | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.decision is not None


def _run_one(
    event_type: EventType,
    event_id: str,
    assemble: Callable[[], DecisionObject],
) -> EventOutcome:
    try:
        return EventOutcome(event_type, event_id, decision=assemble())
    except Exception as exc:
        logger.exception("Failed to interpret %s %s", event_type.value, event_id)
        return EventOutcome(event_type, event_id, error=exc)


def _events(request: InterpretationRequest) -> Iterator[tuple[EventType, str, Callable[..., DecisionObject], Any]]:
    for asteroid in request.asteroids:
        yield EventType.ASTEROID, asteroid.object_id, interpret_asteroid, asteroid
    for conjunction in request.conjunctions:
        yield EventType.CONJUNCTION, conjunction_event_id(conjunction), interpret_conjunction, conjunction
    for debris in request.debris:
        yield EventType.DEBRIS, debris.id, interpret_debris, debris


def interpret_events(request: InterpretationRequest, clock: Clock = utc_now) -> list[EventOutcome]:
    """Outcomes in request order: asteroids, then conjunctions, then debris."""
    context: SystemContext = request.context
    return [
        _run_one(kind, event_id, lambda fn=fn, item=item: fn(item, context, clock))
        for kind, event_id, fn, item in _events(request)
    ]


def interpret(request: InterpretationRequest, clock: Clock = utc_now) -> InterpretationResponse:
    """Interpret a mixed batch. Never raises for a single bad event."""
    start = time.perf_counter()

    if request.context.dry_run:
        logger.info("Dry run: interpreting %d events, results are not for dispatch", request.event_count)

    outcomes = interpret_events(request, clock)
    decisions = [o.decision for o in outcomes if o.decision is not None]
    failed = len(outcomes) - len(decisions)

    suppressed_count = sum(1 for d in decisions if d.suppressed)
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.info(
        "Interpreted %d events: %d suppressed, %d shown, %d failed (%.1f ms)",
        len(outcomes),
        suppressed_count,
        len(decisions) - suppressed_count,
        failed,
        elapsed_ms,
    )

    return InterpretationResponse(
        decisions=decisions,
        suppressed_count=suppressed_count,
        relevant_count=len(decisions) - suppressed_count,
        interpreted_at=clock(),
        processing_time_ms=elapsed_ms,
    )
