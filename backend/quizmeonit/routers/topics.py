"""Random topic suggestion endpoint."""

import logging

from fastapi import APIRouter, Depends

from quizmeonit.config import settings
from quizmeonit.errors import ClientInputError
from quizmeonit.models import RandomTopic, RandomTopicRequest
from quizmeonit.routers.common import call_model, unwrap
from quizmeonit.services.model_gateway import ModelGateway, get_model_gateway
from quizmeonit.services.prompt_builder import build_topic_prompt
from quizmeonit.services.response_extractor import extract_topic

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["topics"])


@router.post("/get-random-topic", response_model=RandomTopic)
async def get_random_topic(
    req: RandomTopicRequest,
    gateway: ModelGateway = Depends(get_model_gateway),
):
    """Suggest a short quiz topic for a difficulty level."""
    if not req.difficulty:
        raise ClientInputError("Missing required parameters")

    prompt = build_topic_prompt(req.difficulty)
    text = await call_model(gateway, prompt, temperature=settings.topic_temperature)
    logger.debug(f"LLM raw topic response: {text!r}")

    return unwrap(
        extract_topic(text),
        "Invalid response from LLM. Expected a JSON object with a string 'topic' key.",
    )
