"""User actions on the quiz page: each drives a state object through one request."""

import logging

from quizmeonit.ui.client import ApiError, QuizApiClient
from quizmeonit.ui.state import ExplanationChat, QuizSession

logger = logging.getLogger(__name__)


def generate_quiz(session: QuizSession, client: QuizApiClient) -> bool:
    """Request a quiz for the session's topic and difficulty."""
    if not session.begin_generation():
        return False
    try:
        questions = client.generate_quiz(session.topic, session.difficulty)
    except ApiError as e:
        session.show_error(e.message)
        return False
    session.show_quiz(questions)
    return True


def fetch_random_topic(session: QuizSession, client: QuizApiClient) -> str | None:
    """Fill the topic field with a model-suggested topic."""
    if not session.begin_topic_fetch():
        return None
    topic = None
    try:
        topic = client.get_random_topic(session.difficulty)
    except ApiError as e:
        logger.error(f"Error fetching random topic: {e.message}")
    session.finish_topic_fetch(topic)
    return topic


def send_chat_message(chat: ExplanationChat, client: QuizApiClient, text: str) -> bool:
    """Send one chat turn; the user's message shows before the reply arrives."""
    history = chat.begin_send(text)
    if history is None:
        return False
    try:
        reply = client.chat_explanation(chat.question, history[-1].text, history)
    except ApiError as e:
        chat.receive_error(e.message)
        return False
    chat.receive_reply(reply)
    return True
