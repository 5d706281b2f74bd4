import json

import pytest
from fastapi.testclient import TestClient

from quizmeonit.config import settings
from quizmeonit.main import app
from quizmeonit.services.model_gateway import get_model_gateway

VALID_QUIZ = [
    {
        "questionText": "In which year did World War II end?",
        "options": ["1943", "1944", "1945", "1946"],
        "correctAnswer": "1945",
        "explanation": "Germany surrendered in May 1945 and Japan in September 1945.",
    },
    {
        "questionText": "Which operation was the Allied invasion of Normandy?",
        "options": ["Barbarossa", "Overlord", "Market Garden", "Torch"],
        "correctAnswer": "Overlord",
        "explanation": "Operation Overlord began with the D-Day landings on 6 June 1944.",
    },
    {
        "questionText": "Who was Prime Minister of the UK for most of the war?",
        "options": ["Neville Chamberlain", "Clement Attlee", "Winston Churchill", "Anthony Eden"],
        "correctAnswer": "Winston Churchill",
        "explanation": "Churchill led the UK from May 1940 until July 1945.",
    },
]


class StubGateway:
    """Stands in for the Gemini gateway and records every call."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, prompt: str, temperature: float | None = None) -> str:
        self.calls.append({"prompt": prompt, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def gateway():
    stub = StubGateway()
    app.dependency_overrides[get_model_gateway] = lambda: stub
    yield stub
    app.dependency_overrides.pop(get_model_gateway, None)


@pytest.fixture
def client(gateway):
    return TestClient(app)


@pytest.fixture
def valid_quiz():
    return json.loads(json.dumps(VALID_QUIZ))


@pytest.fixture(autouse=True)
def reset_settings():
    saved = settings.model_dump()
    yield
    for name, value in saved.items():
        setattr(settings, name, value)
