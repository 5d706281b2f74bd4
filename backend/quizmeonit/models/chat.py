"""Chat-related Pydantic models."""

from typing import Any, Literal

from pydantic import BaseModel, Field

ChatSender = Literal["user", "ai"]


class ChatMessage(BaseModel):
    """One entry of an explanation transcript."""

    sender: ChatSender
    text: str

    class Config:
        frozen = True


class ChatQuestion(BaseModel):
    """The quiz item a chat is about.

    Only the text and explanation are required; the remaining fields are
    used for context when present.
    """

    question_text: str = Field(alias="questionText", min_length=1)
    explanation: str = Field(min_length=1)
    correct_answer: str = Field(default="", alias="correctAnswer")
    options: list[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class ChatExplanationRequest(BaseModel):
    """Request body for a follow-up chat turn.

    Loosely typed on purpose: each field is checked by the handler so that
    every problem maps to its own 400 message.
    """

    question: Any = None
    user_message: Any = Field(default=None, alias="userMessage")
    chat_history: Any = Field(default=None, alias="chatHistory")

    class Config:
        populate_by_name = True


class ChatReply(BaseModel):
    """Response body for a chat turn."""

    ai_message: str = Field(alias="aiMessage")

    class Config:
        populate_by_name = True
