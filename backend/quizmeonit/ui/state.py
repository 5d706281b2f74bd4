"""Client-held quiz and chat state.

Everything here lives for one page session and is never sent back to the
server except as request bodies.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from quizmeonit.models import ChatMessage, QuizQuestion

CHAT_GREETING = "Hello! How can I help you understand this explanation better?"
DIFFICULTIES = ["Elementary", "High School", "College", "Expert"]


# --- Per-question answer state ---


@dataclass(frozen=True)
class Unanswered:
    pass


@dataclass(frozen=True)
class Selected:
    answer: str


@dataclass(frozen=True)
class Checked:
    answer: str


AnswerState = Union[Unanswered, Selected, Checked]


@dataclass
class QuestionView:
    """A quiz question together with the user's progress on it."""

    question: QuizQuestion
    state: AnswerState = field(default_factory=Unanswered)

    @property
    def selected_answer(self) -> str | None:
        if isinstance(self.state, (Selected, Checked)):
            return self.state.answer
        return None

    @property
    def is_checked(self) -> bool:
        return isinstance(self.state, Checked)

    @property
    def is_correct(self) -> bool | None:
        if not self.is_checked:
            return None
        return self.selected_answer == self.question.correct_answer

    def select(self, option: str) -> bool:
        """Select an option. Ignored once the answer has been checked."""
        if self.is_checked:
            return False
        self.state = Selected(option)
        return True

    def check(self) -> bool:
        """Freeze the current selection. Needs a selection first."""
        if not isinstance(self.state, Selected):
            return False
        self.state = Checked(self.state.answer)
        return True


# --- Quiz page ---


class QuizStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DISPLAYED = "displayed"
    ERRORED = "errored"


@dataclass
class QuizSession:
    """Top-level state of the quiz page."""

    topic: str = ""
    difficulty: str = DIFFICULTIES[0]
    status: QuizStatus = QuizStatus.IDLE
    questions: list[QuestionView] = field(default_factory=list)
    error: str | None = None
    topic_loading: bool = False

    @property
    def is_loading(self) -> bool:
        return self.status is QuizStatus.LOADING

    def begin_generation(self) -> bool:
        """Start a new quiz request, clearing any previous quiz or error.

        Returns False while a request is already in flight.
        """
        if self.is_loading:
            return False
        self.status = QuizStatus.LOADING
        self.questions = []
        self.error = None
        return True

    def show_quiz(self, questions: list[QuizQuestion]) -> None:
        self.questions = [QuestionView(q) for q in questions]
        self.status = QuizStatus.DISPLAYED

    def show_error(self, message: str) -> None:
        self.questions = []
        self.error = message
        self.status = QuizStatus.ERRORED

    def select(self, index: int, option: str) -> bool:
        return self.questions[index].select(option)

    def check(self, index: int) -> bool:
        return self.questions[index].check()

    # The topic fetch is independent of quiz generation.

    def begin_topic_fetch(self) -> bool:
        if self.topic_loading:
            return False
        self.topic_loading = True
        return True

    def finish_topic_fetch(self, topic: str | None) -> None:
        if topic:
            self.topic = topic
        self.topic_loading = False


# --- Explanation chat ---


@dataclass
class ExplanationChat:
    """Transcript for the question currently shown beside the chat."""

    question: QuizQuestion
    messages: list[ChatMessage] = field(default_factory=list)
    is_sending: bool = False
    error: str | None = None

    def __post_init__(self):
        if not self.messages:
            self.reset()

    def reset(self) -> None:
        self.messages = [ChatMessage(sender="ai", text=CHAT_GREETING)]
        self.is_sending = False
        self.error = None

    def bind(self, question: QuizQuestion) -> None:
        """Attach to ``question``; a different question starts a new transcript."""
        if question is not self.question:
            self.question = question
            self.reset()

    def begin_send(self, text: str) -> list[ChatMessage] | None:
        """Append the user's message and return the history to send.

        Returns None for blank input or while a send is in flight.
        """
        text = text.strip()
        if not text or self.is_sending:
            return None
        self.messages.append(ChatMessage(sender="user", text=text))
        self.is_sending = True
        self.error = None
        return list(self.messages)

    def receive_reply(self, text: str) -> None:
        self.messages.append(ChatMessage(sender="ai", text=text))
        self.is_sending = False

    def receive_error(self, message: str) -> None:
        self.error = message
        self.messages.append(
            ChatMessage(sender="ai", text=f"Sorry, I encountered an error: {message}")
        )
        self.is_sending = False
