"""Public alert wording for asteroid close approaches.

Turns verified asteroid figures into a calm, factual 2-4 sentence message for
the general public. Messages emphasise monitoring and observation, never
mention internal scores, and are checked against a banned-word list before
they leave this module.
"""

from __future__ import annotations

import logging
import re

from skywatch import thresholds as t
from skywatch.models import AlertLevel, AsteroidInput, PublicAlert, PublicAlertData

logger = logging.getLogger(__name__)

LUNAR_DISTANCE_AU: float = t.LUNAR_DISTANCE_KM / t.AU_KM

BANNED_WORDS: tuple[str, ...] = (
    "impact",
    "collision",
    "disaster",
    "dangerous",
    "catastrophic",
    "threat",
    "hit",
    "strike",
    "destroy",
    "extinction",
    "apocalypse",
    "doom",
    "terror",
    "panic",
)


class BannedWordError(ValueError):
    """A public alert message contains alarming language."""

    def __init__(self, word: str):
        super().__init__(f"Alert validation failed: contains banned word {word!r}")
        self.word = word


def determine_alert_level(data: PublicAlertData) -> AlertLevel:
    """LEVEL 3 for large, fast or Sentry-listed objects, LEVEL 2 for elevated
    size, speed or proximity, LEVEL 1 for everything else."""
    lunar = data.distance_au / LUNAR_DISTANCE_AU

    if (
        data.diameter_meters >= 500
        or data.is_sentry_monitored
        or data.velocity_km_s >= 30
        or (data.is_potentially_hazardous and data.diameter_meters >= 200)
    ):
        return AlertLevel.SCIENTIFIC_INTEREST

    if (
        data.diameter_meters >= 100
        or lunar <= 5
        or (data.pei_value is not None and data.pei_value >= 50)
        or data.velocity_km_s >= 20
    ):
        return AlertLevel.MONITORING_WATCH

    return AlertLevel.INFORMATIONAL


def validate_no_banned_words(message: str, allowed: str = "") -> None:
    """Raise :class:`BannedWordError` if ``message`` uses a banned word.

    ``allowed`` is stripped from the message first, so an object whose
    catalogue name happens to contain a banned word can still be named.
    """
    text = message.replace(allowed, " ") if allowed else message
    lowered = text.lower()
    for word in BANNED_WORDS:
        if re.search(rf"\b{word}", lowered):
            logger.error("Public alert rejected, banned word %r detected", word)
            raise BannedWordError(word)


def _distance_description(distance_au: float) -> str:
    if distance_au < 0.01:
        return ", which is relatively close in astronomical terms"
    if distance_au < 0.05:
        return ", a distance well within our monitoring range"
    if distance_au < 0.2:
        return ", a comfortable distance for observation"
    return ", far beyond any area of concern"


def _size_description(diameter_meters: float) -> str:
    if diameter_meters < 10:
        return "This is a small object that would burn up entirely in the atmosphere if it ever approached."
    if diameter_meters < 50:
        return "This object is comparable in size to a large building."
    if diameter_meters < 150:
        return "This object is stadium-sized, of interest to researchers worldwide."
    if diameter_meters < 500:
        return "This is a significant object under continuous scientific observation."
    return (
        "This is a large asteroid that space agencies monitor closely as part of "
        "routine planetary defense activities."
    )


def _reassurance(data: PublicAlertData) -> str:
    if data.is_sentry_monitored:
        return (
            "This object is catalogued in NASA's Sentry system, which continuously tracks "
            "known near-Earth objects for scientific study."
        )
    if data.is_potentially_hazardous:
        return (
            'While classified as "potentially hazardous" due to its size and orbital path, '
            "this is a precautionary label used by astronomers; there is no confirmed close "
            "approach of concern."
        )
    return (
        "No action is required. Scientists continue to observe and refine orbital data "
        "as part of ongoing space awareness efforts."
    )


def generate_public_alert(data: PublicAlertData) -> str:
    """English template message. Raises :class:`BannedWordError` on a wording regression."""
    lunar = data.distance_au / LUNAR_DISTANCE_AU
    distance = _distance_description(data.distance_au)

    parts = [f"Asteroid {data.asteroid_name} is being tracked by global monitoring networks."]
    if round(lunar, 1) <= 10:
        parts.append(f"It will pass at approximately {lunar:.1f} times the Earth-Moon distance{distance}.")
    else:
        parts.append(f"It will pass about {lunar:.0f} times farther away than the Moon{distance}.")
    parts.append(_size_description(data.diameter_meters))
    parts.append(_reassurance(data))

    message = " ".join(parts)
    validate_no_banned_words(message, allowed=data.asteroid_name)
    return message


def alert_data_from_asteroid(asteroid: AsteroidInput) -> PublicAlertData:
    mean_diameter_km = (asteroid.diameter_min_km + asteroid.diameter_max_km) / 2
    return PublicAlertData(
        asteroid_name=asteroid.name,
        distance_au=asteroid.miss_distance_km / t.AU_KM,
        diameter_meters=mean_diameter_km * 1000,
        velocity_km_s=asteroid.velocity_km_s,
        is_sentry_monitored=asteroid.sentry_flag,
        is_potentially_hazardous=asteroid.potentially_hazardous_flag,
    )


def build_public_alert(data: PublicAlertData) -> PublicAlert:
    return PublicAlert(
        alert_level=determine_alert_level(data),
        language="English",
        message=generate_public_alert(data),
    )
