"""Base agent wrapping the Anthropic Bedrock client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anthropic import AnthropicBedrock

from skywatch.config import Settings, get_settings

logger = logging.getLogger(__name__)

MAX_TOKENS = 500


def _get_client(settings: Settings) -> AnthropicBedrock:
    return AnthropicBedrock(
        aws_region=settings.aws_region,
        aws_access_key=settings.aws_access_key_id,
        aws_secret_key=settings.aws_secret_access_key,
    )


class BaseAgent:
    """Base class for Claude-backed writers.

    The Bedrock SDK is synchronous, so API calls are offloaded to a thread.
    The client is built on first use, so an agent can be constructed (and
    fall back) without any AWS configuration.
    """

    name: str = "base"

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._client: AnthropicBedrock | None = None

    @property
    def client(self) -> AnthropicBedrock:
        if self._client is None:
            self._client = _get_client(self.settings)
        return self._client

    async def _call_claude(self, system: str, messages: list[dict]) -> Any:
        """Call Claude via Bedrock (sync SDK), run in thread to avoid blocking event loop."""
        return await asyncio.to_thread(
            self.client.messages.create,
            model=self.settings.alert_model_id,
            max_tokens=MAX_TOKENS,
            temperature=0.3,
            system=system,
            messages=messages,
        )

    async def _complete(self, system: str, prompt: str) -> str:
        """Single-turn call returning the concatenated text blocks."""
        response = await self._call_claude(system, [{"role": "user", "content": prompt}])
        return "".join(block.text for block in response.content if block.type == "text")

    async def run(self, **kwargs: Any) -> Any:
        """Override in subclasses."""
        raise NotImplementedError
