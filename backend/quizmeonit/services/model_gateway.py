import logging

import google.generativeai as genai

from quizmeonit.config import settings
from quizmeonit.errors import UpstreamAuthError, UpstreamBlockedError

logger = logging.getLogger(__name__)


def _category_name(rating) -> str:
    category = getattr(rating, "category", rating)
    return getattr(category, "name", str(category))


class ModelGateway:
    """Single-call wrapper around the Gemini text generation API.

    Credentials and the model name are read from settings on every call so
    a changed environment is picked up without restarting. Failures from
    the SDK propagate unchanged; the request handlers decide how to report
    them.
    """

    def __init__(self):
        self._configured_key: str | None = None

    def _configure(self, api_key: str) -> None:
        # genai.configure replaces the SDK-wide client, so only redo it on a key change
        if api_key != self._configured_key:
            genai.configure(api_key=api_key)
            self._configured_key = api_key

    async def generate(self, prompt: str, temperature: float | None = None) -> str:
        if not settings.google_api_key:
            logger.error("GOOGLE_API_KEY is not set; refusing to call Gemini.")
            raise UpstreamAuthError()

        self._configure(settings.google_api_key)
        model_name = settings.gemini_model
        model = genai.GenerativeModel(model_name)

        generation_config = None
        if temperature is not None:
            generation_config = genai.types.GenerationConfig(temperature=temperature)

        logger.debug(
            f"Calling {model_name} (prompt {len(prompt)} chars, temperature={temperature})"
        )
        response = await model.generate_content_async(
            prompt,
            generation_config=generation_config,
        )

        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            categories = [_category_name(r) for r in getattr(feedback, "safety_ratings", None) or []]
            logger.warning(f"Gemini blocked the prompt: {block_reason} {categories}")
            raise UpstreamBlockedError(
                categories=categories,
                block_reason=getattr(block_reason, "name", str(block_reason)),
            )

        text = response.text
        logger.debug(f"Gemini raw response: {text!r}")
        return text


model_gateway = ModelGateway()


def get_model_gateway() -> ModelGateway:
    """FastAPI dependency returning the process-wide gateway."""
    return model_gateway
