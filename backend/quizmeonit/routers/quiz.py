"""Quiz generation endpoint."""

import logging

from fastapi import APIRouter, Depends

from quizmeonit.config import settings
from quizmeonit.errors import ClientInputError
from quizmeonit.models import GenerateQuizRequest, QuestionType
from quizmeonit.routers.common import call_model, unwrap
from quizmeonit.services.model_gateway import ModelGateway, get_model_gateway
from quizmeonit.services.prompt_builder import build_quiz_prompt
from quizmeonit.services.response_extractor import extract_quiz

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["quiz"])


@router.post("/generate-quiz")
async def generate_quiz(
    req: GenerateQuizRequest,
    gateway: ModelGateway = Depends(get_model_gateway),
) -> list[dict]:
    """Generate three multiple-choice questions on a topic."""
    if not req.topic or not req.difficulty or not req.question_type:
        raise ClientInputError("Missing required parameters")

    if req.question_type != QuestionType.MULTIPLE_CHOICE.value:
        raise ClientInputError(
            "Invalid question type. Only 'Multiple Choice' is supported for now."
        )

    prompt = build_quiz_prompt(req.topic, req.difficulty, req.question_type)
    text = await call_model(gateway, prompt)

    questions = unwrap(extract_quiz(text, strict=settings.strict_quiz_validation))
    logger.info(f"Generated {len(questions)} questions for topic {req.topic!r} ({req.difficulty})")
    return [q.to_wire() for q in questions]
