"""Prompt construction for the Gemini model.

All builders are pure: the same inputs always give the same text.
Randomness is a generation setting on the gateway, never part of a prompt.
"""

from collections.abc import Iterable

from quizmeonit.models import ChatMessage, ChatQuestion, QuestionType

QUESTIONS_PER_QUIZ = 3
MAX_TOPIC_WORDS = 5


def build_topic_prompt(difficulty: str) -> str:
    """Ask for a single random topic as ``{"topic": "..."}``."""
    return f"""
Return a random quiz topic (max topic words: {MAX_TOPIC_WORDS}) with the following difficulty level: {difficulty}.

The entire output must be a valid JSON object. Do not include any text outside of the JSON object.
Ensure the JSON is well-formed and can be directly parsed.

Example format for easy level:
{{ "topic": "basic multiplication" }}
{{ "topic": "identifying shapes" }}
{{ "topic": "animal sounds" }}

Example format for college level:
{{ "topic": "postmodernism" }}
{{ "topic": "quantum mechanics" }}
{{ "topic": "ethical dilemmas" }}
"""


def build_quiz_prompt(
    topic: str,
    difficulty: str,
    question_type: str = QuestionType.MULTIPLE_CHOICE.value,
) -> str:
    """Ask for a JSON array of multiple-choice questions on ``topic``."""
    if question_type != QuestionType.MULTIPLE_CHOICE.value:
        raise ValueError(f"Unsupported question type: {question_type!r}")

    return f"""
Generate {QUESTIONS_PER_QUIZ} multiple-choice questions about the topic: "{topic}".
The difficulty level should be: "{difficulty}".
Each question must have:
- "questionText": A string for the question itself.
- "options": An array of 4 distinct string options.
- "correctAnswer": A string that exactly matches one of the provided options.
- "explanation": A string explaining why the answer is correct.

The entire output must be a valid JSON array of question objects. Do not include any text outside of the JSON array.
Ensure the JSON is well-formed and can be directly parsed.

Example format:
[
  {{
    "questionText": "What is the capital of France?",
    "options": ["Berlin", "Madrid", "Paris", "Rome"],
    "correctAnswer": "Paris",
    "explanation": "Paris is the capital and most populous city of France."
  }},
  {{
    "questionText": "What is 2 + 2?",
    "options": ["3", "4", "5", "6"],
    "correctAnswer": "4",
    "explanation": "The sum of 2 and 2 is 4."
  }}
]
"""


def _format_transcript(chat_history: Iterable[ChatMessage]) -> str:
    lines = []
    for message in chat_history:
        speaker = "User" if message.sender == "user" else "AI"
        lines.append(f"{speaker}: {message.text}\n")
    return "".join(lines)


def build_chat_prompt(
    question: ChatQuestion,
    chat_history: Iterable[ChatMessage],
    user_message: str,
) -> str:
    """Continue a tutoring conversation about one quiz item.

    ``chat_history`` is expected to already end with the user's latest
    message; it is repeated separately so the model knows what to answer.
    The reply is free text, not JSON.
    """
    return f"""You are a helpful AI assistant and tutor. The user is asking a follow-up question about an explanation to a quiz question.
The original quiz question was: "{question.question_text}"
The provided explanation was: "{question.explanation}"
The correct answer was: "{question.correct_answer}"

Here is the conversation history so far:
{_format_transcript(chat_history)}
The user's latest message is: "{user_message}"

Based on all this context, please provide a concise and helpful response to the user's latest message.
If the user is challenging the explanation, review it carefully against the question and correct answer.
If they are asking for clarification or more details, provide it.
If the query seems unrelated to the question or explanation, gently guide them back or state that you can only discuss the quiz item.
Your response should be directly addressing the user's latest message.
"""
