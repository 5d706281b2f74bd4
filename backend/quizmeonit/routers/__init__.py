"""API routers for the QuizMeOnIt application."""

from .chat import router as chat_router
from .quiz import router as quiz_router
from .topics import router as topics_router

__all__ = [
    "chat_router",
    "quiz_router",
    "topics_router",
]
