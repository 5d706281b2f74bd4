"""Pydantic models for the QuizMeOnIt application."""

from .chat import ChatExplanationRequest, ChatMessage, ChatQuestion, ChatReply, ChatSender
from .quiz import (
    GenerateQuizRequest,
    QuestionType,
    QuizQuestion,
    RandomTopic,
    RandomTopicRequest,
)

__all__ = [
    "ChatExplanationRequest",
    "ChatMessage",
    "ChatQuestion",
    "ChatReply",
    "ChatSender",
    "GenerateQuizRequest",
    "QuestionType",
    "QuizQuestion",
    "RandomTopic",
    "RandomTopicRequest",
]
