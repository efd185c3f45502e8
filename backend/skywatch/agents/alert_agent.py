"""Public Alert Writer: asks Claude for a calm asteroid alert in the reader's language.

The alert level is always decided by the deterministic rules; Claude only
words the message. Any failure (no configuration, API error, unparsable
output, alarming wording) falls back to the English template.
"""

from __future__ import annotations

import json
import logging
import re

from skywatch.agents.base_agent import BaseAgent
from skywatch.config import Settings
from skywatch.models import AlertLevel, PublicAlert, PublicAlertData
from skywatch.public_alert import (
    BannedWordError,
    build_public_alert,
    determine_alert_level,
    validate_no_banned_words,
)

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "English",
    "Hindi",
    "Bengali",
    "Tamil",
    "Telugu",
    "Marathi",
    "Gujarati",
    "Kannada",
    "Malayalam",
    "Punjabi",
    "Urdu",
    "Spanish",
    "French",
    "German",
    "Chinese",
    "Japanese",
    "Korean",
    "Arabic",
    "Portuguese",
    "Russian",
)

SYSTEM_PROMPT = """You are a Global Asteroid Safety & Monitoring Assistant for a public-facing website.

Your role is to turn verified asteroid monitoring data into clear, calm, non-alarming alerts for a global audience. Alerts support scientific awareness and public understanding, not fear.

ABSOLUTE RULES:
- Never use alarming, emotional, or sensational language.
- Never exaggerate risk or imply danger unless the data explicitly states it.
- Never use these words or words with similar meaning: impact, collision, disaster, dangerous, catastrophic, threat, emergency, hit, strike, destroy, extinction, apocalypse, doom, terror, panic.
- Do not speculate, predict, or assume outcomes.
- Do not mention internal calculations, formulas, or scores.
- Do not contradict the provided data.
- Always emphasise monitoring, observation, and scientific tracking.

ALERT LEVELS:
- LEVEL 1 (Informational): routine close approaches. Tone: informative, calm, neutral.
- LEVEL 2 (Monitoring watch): elevated size, speed or proximity. Tone: attentive, scientific, reassuring.
- LEVEL 3 (Scientific interest): large, fast, or well-tracked objects. Tone: educational, analytical, confident.

STYLE: simple language for non-experts, 2-4 sentences, suitable for direct display in a website or mobile app.

Return ONLY a JSON object of the form {"alert_level": "...", "language": "...", "message": "..."}."""


class AlertParseError(ValueError):
    pass


def build_user_prompt(data: PublicAlertData, language: str, alert_level: AlertLevel) -> str:
    return f"""=== VERIFIED ASTEROID DATA ===
Asteroid Name: {data.asteroid_name}
Close Approach Distance: {data.distance_au:.6f} AU
Estimated Diameter: {data.diameter_meters:.1f} meters
Relative Velocity: {data.velocity_km_s:.2f} km/s
Assigned Alert Level: {alert_level.value}

=== LANGUAGE ===
Write the alert message in: {language}

Generate a public-facing alert message matching the {alert_level.value} tone, then return the JSON object."""


def parse_alert_response(raw: str) -> str:
    """Extract the ``message`` string from Claude's reply."""
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[1] if "\n" in cleaned else ""
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3]
        cleaned = cleaned.strip()

    match = re.search(r"\{.*\}", cleaned, re.DOTALL)
    if not match:
        raise AlertParseError("no JSON object in model output")
    data = json.loads(match.group(0))

    message = data.get("message") if isinstance(data, dict) else None
    if not isinstance(message, str) or not message.strip():
        raise AlertParseError("model output has no message")
    return message.strip()


def is_supported_language(language: str) -> bool:
    return language in SUPPORTED_LANGUAGES


class PublicAlertAgent(BaseAgent):
    name = "public_alert"

    def __init__(self, settings: Settings | None = None):
        super().__init__(settings=settings)

    def fallback(self, data: PublicAlertData) -> PublicAlert:
        return build_public_alert(data)

    async def run(self, data: PublicAlertData, language: str = "English") -> PublicAlert:
        alert_level = determine_alert_level(data)

        if not is_supported_language(language):
            logger.warning("Unsupported alert language %r, using English template", language)
            return self.fallback(data)
        if not self.settings.alert_llm_enabled or not self.settings.bedrock_configured:
            logger.info("Alert LLM not configured, using English template for %s", data.asteroid_name)
            return self.fallback(data)

        try:
            raw = await self._complete(SYSTEM_PROMPT, build_user_prompt(data, language, alert_level))
        except Exception as exc:
            logger.warning("Alert generation failed for %s: %s", data.asteroid_name, exc)
            return self.fallback(data)

        try:
            message = parse_alert_response(raw)
            validate_no_banned_words(message, allowed=data.asteroid_name)
        except BannedWordError:
            return self.fallback(data)
        except (json.JSONDecodeError, AlertParseError) as exc:
            logger.warning("Failed to parse alert output: %s", exc)
            logger.debug("Raw output: %s", raw)
            return self.fallback(data)

        return PublicAlert(alert_level=alert_level, language=language, message=message)
