"""Turn raw model text into typed values.

The model is asked for JSON but is free to wrap it in Markdown fences or
to ignore the instructions entirely, so every extraction ends in one of
three routine outcomes:

* ``Ok`` - parsed and shaped as expected, ``value`` holds the typed result
* ``ShapeMismatch`` - valid JSON with the wrong structure
* ``Malformed`` - not JSON at all

Nothing here raises for bad model output; callers inspect the result type.
"""

import json
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import ValidationError

from quizmeonit.models import QuizQuestion, RandomTopic

T = TypeVar("T")

_LEADING_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE_RE = re.compile(r"\s*```\s*$")

QUIZ_FIELDS = ("questionText", "options", "correctAnswer", "explanation")
OPTIONS_PER_QUESTION = 4


@dataclass(frozen=True)
class Ok(Generic[T]):
    raw_text: str
    value: T


@dataclass(frozen=True)
class ShapeMismatch:
    raw_text: str
    parsed: Any
    reason: str


@dataclass(frozen=True)
class Malformed:
    raw_text: str
    cleaned_text: str
    error: str


Extraction = Union[Ok[T], ShapeMismatch, Malformed]


class ShapeError(ValueError):
    """Raised by shape checks; converted to ``ShapeMismatch``."""


def strip_code_fences(text: str) -> str:
    """Remove a leading ```json (or bare ```) fence and a trailing ``` fence."""
    cleaned = _LEADING_FENCE_RE.sub("", text, count=1)
    return _TRAILING_FENCE_RE.sub("", cleaned, count=1)


def _reject_constant(token: str):
    raise ValueError(f"Invalid JSON token: {token}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {token}")
    return value


def extract_json(raw_text: str, shape_check: Callable[[Any], T]) -> Extraction:
    """Parse ``raw_text`` and run ``shape_check`` over the parsed value.

    ``shape_check`` returns the typed value or raises ``ShapeError``.
    """
    cleaned = strip_code_fences(raw_text)
    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except (ValueError, RecursionError) as e:
        return Malformed(raw_text=raw_text, cleaned_text=cleaned, error=str(e))

    try:
        value = shape_check(parsed)
    except ShapeError as e:
        return ShapeMismatch(raw_text=raw_text, parsed=parsed, reason=str(e))
    return Ok(raw_text=raw_text, value=value)


def check_topic(parsed: Any) -> RandomTopic:
    if not isinstance(parsed, dict) or not isinstance(parsed.get("topic"), str):
        raise ShapeError("Expected a JSON object with a string 'topic' key.")
    return RandomTopic(topic=parsed["topic"])


def check_quiz(parsed: Any, strict: bool = False) -> list[QuizQuestion]:
    if not isinstance(parsed, list):
        raise ShapeError("Expected a JSON array of questions.")

    questions = []
    for index, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise ShapeError(f"Question {index} is not an object.")
        missing = [field for field in QUIZ_FIELDS if not item.get(field)]
        if missing:
            raise ShapeError(f"Question {index} is missing: {', '.join(missing)}.")
        try:
            question = QuizQuestion.model_validate(item)
        except ValidationError as e:
            raise ShapeError(f"Question {index} has invalid fields: {e}") from e
        if strict:
            _check_answerable(index, question)
        questions.append(question)
    return questions


def _check_answerable(index: int, question: QuizQuestion) -> None:
    if len(set(question.options)) != OPTIONS_PER_QUESTION or len(question.options) != OPTIONS_PER_QUESTION:
        raise ShapeError(f"Question {index} must have {OPTIONS_PER_QUESTION} distinct options.")
    if question.correct_answer not in question.options:
        raise ShapeError(f"Question {index} has a correctAnswer that is not one of its options.")


def extract_topic(raw_text: str) -> Extraction:
    return extract_json(raw_text, check_topic)


def extract_quiz(raw_text: str, strict: bool = False) -> Extraction:
    return extract_json(raw_text, lambda parsed: check_quiz(parsed, strict=strict))
