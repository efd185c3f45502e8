from __future__ import annotations

import math

from skywatch.models import EventType


class InterpretationError(ValueError):
    """Raised by an assembler when one event's input cannot be interpreted."""

    def __init__(self, event_type: EventType, event_id: str, message: str):
        super().__init__(f"{event_type.value} {event_id}: {message}")
        self.event_type = event_type
        self.event_id = event_id


def require_non_negative(
    event_type: EventType,
    event_id: str,
    field: str,
    value: float | None,
) -> None:
    """Optional fields pass when absent; present values must be finite and >= 0."""
    if value is None:
        return
    if not math.isfinite(value) or value < 0:
        raise InterpretationError(event_type, event_id, f"{field} must be a finite non-negative number, got {value}")


def require_probability(
    event_type: EventType,
    event_id: str,
    field: str,
    value: float | None,
) -> None:
    if value is None:
        return
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise InterpretationError(event_type, event_id, f"{field} must lie in [0, 1], got {value}")
