"""Follow-up chat about a quiz explanation."""

import logging

from fastapi import APIRouter, Depends
from pydantic import TypeAdapter, ValidationError

from quizmeonit.errors import ClientInputError
from quizmeonit.models import ChatExplanationRequest, ChatMessage, ChatQuestion, ChatReply
from quizmeonit.routers.common import call_model
from quizmeonit.services.model_gateway import ModelGateway, get_model_gateway
from quizmeonit.services.prompt_builder import build_chat_prompt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

_history_adapter = TypeAdapter(list[ChatMessage])


def _parse_question(raw) -> ChatQuestion:
    if not isinstance(raw, dict):
        raise ClientInputError("Missing or invalid 'question' object in request body.")
    try:
        return ChatQuestion.model_validate(raw)
    except ValidationError:
        raise ClientInputError("Missing or invalid 'question' object in request body.")


def _parse_history(raw) -> list[ChatMessage]:
    if not isinstance(raw, list):
        raise ClientInputError("Missing or invalid 'chatHistory' array in request body.")
    try:
        return _history_adapter.validate_python(raw)
    except ValidationError:
        raise ClientInputError("Missing or invalid 'chatHistory' array in request body.")


@router.post("/chat-explanation", response_model=ChatReply)
async def chat_explanation(
    req: ChatExplanationRequest,
    gateway: ModelGateway = Depends(get_model_gateway),
):
    """Answer a follow-up question about one quiz item's explanation."""
    question = _parse_question(req.question)
    if not isinstance(req.user_message, str) or not req.user_message.strip():
        raise ClientInputError("Missing or invalid 'userMessage' in request body.")
    history = _parse_history(req.chat_history)

    prompt = build_chat_prompt(question, history, req.user_message)
    text = await call_model(gateway, prompt)

    return ChatReply(ai_message=text)
