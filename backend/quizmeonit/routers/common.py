"""Helpers shared by the API routers."""

import logging

from quizmeonit.errors import ResponseParseError, ResponseShapeError, classify_upstream_error
from quizmeonit.services.model_gateway import ModelGateway
from quizmeonit.services.response_extractor import Extraction, Malformed, Ok, ShapeMismatch

logger = logging.getLogger(__name__)


async def call_model(gateway: ModelGateway, prompt: str, temperature: float | None = None) -> str:
    """Make the one model call of a request, converting failures to errors."""
    try:
        return await gateway.generate(prompt, temperature=temperature)
    except Exception as e:
        logger.error(f"Model call failed: {e!r}")
        raise classify_upstream_error(e) from e


def unwrap(result: Extraction, shape_message: str | None = None):
    """Return the value of an ``Ok`` extraction or raise the matching error."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Malformed):
        logger.error(f"Failed to parse JSON response from LLM: {result.raw_text!r}")
        raise ResponseParseError(
            rawResponse=result.raw_text,
            cleanedText=result.cleaned_text,
            parseError=result.error,
        )
    if isinstance(result, ShapeMismatch):
        logger.error(f"Invalid JSON structure received from LLM ({result.reason}): {result.parsed!r}")
        raise ResponseShapeError(
            shape_message,
            rawResponse=result.raw_text,
            data=result.parsed,
            reason=result.reason,
        )
    raise TypeError(f"Unknown extraction result: {result!r}")
