"""Quiz-related Pydantic models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class QuestionType(str, Enum):
    """Question types the generator accepts."""

    MULTIPLE_CHOICE = "Multiple Choice"


class QuizQuestion(BaseModel):
    """A single generated question. Wire names are camelCase."""

    question_text: str = Field(alias="questionText")
    options: list[str]
    correct_answer: str = Field(alias="correctAnswer")
    explanation: str

    class Config:
        populate_by_name = True
        frozen = True
        extra = "allow"  # keys the model adds are passed through untouched
        json_schema_extra = {
            "example": {
                "questionText": "What is the capital of France?",
                "options": ["Berlin", "Madrid", "Paris", "Rome"],
                "correctAnswer": "Paris",
                "explanation": "Paris is the capital and most populous city of France.",
            }
        }

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class RandomTopic(BaseModel):
    """Topic suggestion returned by the model."""

    topic: str


class GenerateQuizRequest(BaseModel):
    """Request body for quiz generation.

    Fields are optional so that missing values reach the handler and are
    reported with a 400 rather than a schema error.
    """

    topic: str | None = None
    difficulty: str | None = None
    question_type: str | None = Field(default=None, alias="questionType")

    class Config:
        populate_by_name = True


class RandomTopicRequest(BaseModel):
    """Request body for a random topic suggestion."""

    difficulty: str | None = None
