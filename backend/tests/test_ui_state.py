from quizmeonit.models import ChatMessage, QuizQuestion
from quizmeonit.ui.state import (
    CHAT_GREETING,
    Checked,
    ExplanationChat,
    QuestionView,
    QuizSession,
    QuizStatus,
    Selected,
    Unanswered,
)


def make_question(text="What is 2 + 2?"):
    return QuizQuestion(
        question_text=text,
        options=["3", "4", "5", "6"],
        correct_answer="4",
        explanation="The sum of 2 and 2 is 4.",
    )


def test_question_moves_through_answer_states():
    view = QuestionView(make_question())
    assert view.state == Unanswered()
    assert view.selected_answer is None
    assert not view.is_checked

    assert view.select("5")
    assert view.select("4")
    assert view.state == Selected("4")

    assert view.check()
    assert view.state == Checked("4")
    assert view.is_correct


def test_selection_is_frozen_after_check():
    view = QuestionView(make_question())
    view.select("5")
    view.check()

    assert not view.select("4")
    assert view.selected_answer == "5"
    assert view.is_correct is False


def test_check_needs_a_selection():
    view = QuestionView(make_question())

    assert not view.check()
    assert view.state == Unanswered()
    assert view.is_correct is None


def test_new_generation_clears_previous_quiz_and_error():
    session = QuizSession(topic="maths")
    session.show_error("boom")

    assert session.begin_generation()
    assert session.status is QuizStatus.LOADING
    assert session.error is None
    assert session.questions == []

    session.show_quiz([make_question()])
    assert session.status is QuizStatus.DISPLAYED
    assert session.questions[0].state == Unanswered()


def test_overlapping_generation_is_refused():
    session = QuizSession(topic="maths")
    assert session.begin_generation()
    assert not session.begin_generation()


def test_topic_fetch_is_independent_of_generation():
    session = QuizSession(topic="maths")
    session.begin_generation()

    assert session.begin_topic_fetch()
    assert not session.begin_topic_fetch()
    session.finish_topic_fetch("volcanoes")

    assert session.topic == "volcanoes"
    assert not session.topic_loading
    assert session.is_loading


def test_failed_topic_fetch_keeps_topic():
    session = QuizSession(topic="maths")
    session.begin_topic_fetch()
    session.finish_topic_fetch(None)

    assert session.topic == "maths"
    assert not session.topic_loading


def test_chat_is_seeded_with_greeting():
    chat = ExplanationChat(make_question())

    assert chat.messages == [ChatMessage(sender="ai", text=CHAT_GREETING)]


def test_chat_send_is_optimistic():
    chat = ExplanationChat(make_question())

    history = chat.begin_send("  why 4?  ")

    assert history[-1] == ChatMessage(sender="user", text="why 4?")
    assert chat.messages == history
    assert chat.is_sending
    assert chat.begin_send("again") is None

    chat.receive_reply("Because 2 + 2 = 4.")
    assert chat.messages[-1] == ChatMessage(sender="ai", text="Because 2 + 2 = 4.")
    assert not chat.is_sending


def test_chat_ignores_blank_input():
    chat = ExplanationChat(make_question())

    assert chat.begin_send("   ") is None
    assert len(chat.messages) == 1


def test_chat_error_adds_synthetic_message():
    chat = ExplanationChat(make_question())
    chat.begin_send("why?")

    chat.receive_error("Server configuration error: Invalid API key.")

    assert chat.error == "Server configuration error: Invalid API key."
    assert chat.messages[-1].sender == "ai"
    assert chat.messages[-1].text.startswith("Sorry, I encountered an error:")
    assert not chat.is_sending


def test_chat_resets_when_question_changes():
    first = make_question()
    chat = ExplanationChat(first)
    chat.begin_send("why?")
    chat.receive_reply("because")

    chat.bind(first)
    assert len(chat.messages) == 3

    chat.bind(make_question("What is 3 + 3?"))
    assert chat.messages == [ChatMessage(sender="ai", text=CHAT_GREETING)]
