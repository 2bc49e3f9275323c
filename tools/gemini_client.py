# =============================================================================
# tools/gemini_client.py  —  Gemini Grounded-Search Adapter
# =============================================================================
#
# WHAT THIS FILE DOES:
#   The one place that talks to the Gemini API.  For each search it:
#     1. builds the prompt           (core/prompt_builder.py)
#     2. calls generate_content with the Google Search tool enabled
#     3. normalizes the SDK response (core/models.py → GroundedResponse)
#     4. formats it to markdown      (core/response_formatter.py)
#
# GROUNDING:
#   Passing `tools=[Tool(google_search=GoogleSearch())]` lets Gemini run live
#   Google searches while answering.  The response then carries
#   grounding_metadata: the web pages it cited, plus the rendered search
#   entry point naming the queries it actually issued.
#
# ERRORS:
#   Anything the SDK raises (network, auth, quota, bad request) is logged and
#   re-raised as UpstreamCallError.  Formatting itself never fails.
# =============================================================================

import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from core.config import DEFAULT_MODEL, Settings
from core.errors import ConfigurationError, UpstreamCallError
from core.models import GroundedResponse, SearchRequest
from core.prompt_builder import SEARCH_SYSTEM_INSTRUCTION, build_prompt
from core.response_formatter import format_grounded_response

logger = logging.getLogger(__name__)


class GeminiGroundingClient:
    """Runs grounded searches against Gemini and returns formatted markdown."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, client: Optional[Any] = None):
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY environment variable is required")

        # `client` lets tests hand in a fake with the same .aio.models shape.
        self._client = client if client is not None else genai.Client(api_key=api_key)
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiGroundingClient":
        return cls(api_key=settings.gemini_api_key, model=settings.model)

    def _generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=SEARCH_SYSTEM_INSTRUCTION,
            tools=[types.Tool(google_search=types.GoogleSearch())],
        )

    async def search(self, request: SearchRequest) -> str:
        """Run one grounded search and return the formatted answer.

        Raises:
            UpstreamCallError: the Gemini call failed for any reason.
        """
        prompt = build_prompt(request)
        logger.debug("Grounded search prompt (%d chars) for model %s", len(prompt), self.model)

        try:
            raw = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._generation_config(),
            )
        except Exception as exc:
            logger.exception("Gemini grounding error")
            message = str(exc) or "Unknown error"
            raise UpstreamCallError(f"Failed to get grounded response: {message}") from exc

        return format_grounded_response(GroundedResponse.from_raw(raw))
