"""HTTP client used by the quiz page to reach the API."""

import logging
from typing import Any

import httpx

from quizmeonit.models import ChatMessage, QuestionType, QuizQuestion

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request to the API failed; ``message`` is shown to the user verbatim."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class QuizApiClient:
    """Thin wrapper around the three POST endpoints.

    Takes any ``httpx.Client`` so the same code talks to a live server or,
    in tests, to a ``TestClient``.
    """

    def __init__(self, http: httpx.Client):
        self.http = http

    @classmethod
    def for_url(cls, base_url: str, timeout: float = 60.0) -> "QuizApiClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def _post(self, path: str, payload: dict[str, Any]) -> Any:
        try:
            response = self.http.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Request to {path} failed: {e!r}")
            raise ApiError(str(e) or "An unexpected error occurred.") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = None
            if isinstance(data, dict):
                message = data.get("error")
            if not message:
                message = f"Error: {response.status_code} {response.reason_phrase}"
            raise ApiError(message, status_code=response.status_code)
        return data

    def generate_quiz(self, topic: str, difficulty: str) -> list[QuizQuestion]:
        data = self._post(
            "/api/generate-quiz",
            {
                "topic": topic,
                "difficulty": difficulty,
                "questionType": QuestionType.MULTIPLE_CHOICE.value,
            },
        )
        return [QuizQuestion.model_validate(item) for item in data]

    def get_random_topic(self, difficulty: str) -> str:
        data = self._post("/api/get-random-topic", {"difficulty": difficulty})
        return data["topic"]

    def chat_explanation(
        self,
        question: QuizQuestion,
        user_message: str,
        chat_history: list[ChatMessage],
    ) -> str:
        data = self._post(
            "/api/chat-explanation",
            {
                "question": question.to_wire(),
                "userMessage": user_message,
                "chatHistory": [m.model_dump() for m in chat_history],
            },
        )
        return data["aiMessage"]
