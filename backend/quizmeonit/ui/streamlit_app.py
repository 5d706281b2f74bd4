"""Streamlit quiz page.

Run with ``streamlit run backend/quizmeonit/ui/streamlit_app.py`` while the
API is being served (``quizmeonit``). State is kept in ``st.session_state``
and therefore lasts for one browser session only.
"""

import streamlit as st

from quizmeonit.config import settings
from quizmeonit.ui import actions
from quizmeonit.ui.client import QuizApiClient
from quizmeonit.ui.state import DIFFICULTIES, ExplanationChat, QuestionView, QuizSession, QuizStatus

st.set_page_config(page_title="QuizMeOnIt.AI", page_icon="✨", layout="centered")


def init_session_state():
    if "quiz" not in st.session_state:
        st.session_state.quiz = QuizSession()
    if "chats" not in st.session_state:
        st.session_state.chats = {}
    if "client" not in st.session_state:
        st.session_state.client = QuizApiClient.for_url(settings.api_base_url)


def chat_for(index: int, view: QuestionView) -> ExplanationChat:
    chats: dict[int, ExplanationChat] = st.session_state.chats
    chat = chats.get(index)
    if chat is None:
        chat = chats[index] = ExplanationChat(view.question)
    else:
        chat.bind(view.question)
    return chat


def on_random_topic():
    quiz: QuizSession = st.session_state.quiz
    topic = actions.fetch_random_topic(quiz, st.session_state.client)
    if topic:
        st.session_state.topic_input = topic


def render_form(quiz: QuizSession):
    with st.form("quiz_form"):
        quiz.topic = st.text_input(
            "Topic",
            key="topic_input",
            placeholder="e.g., Quantum Physics, Renaissance Art",
        )
        quiz.difficulty = st.selectbox(
            "Difficulty", DIFFICULTIES, index=DIFFICULTIES.index(quiz.difficulty)
        )
        submitted = st.form_submit_button(
            "Generating..." if quiz.is_loading else "Generate Quiz",
            disabled=quiz.is_loading,
            use_container_width=True,
        )

    st.button(
        "✨ Feeling uninspired? Get a random topic!",
        on_click=on_random_topic,
        disabled=quiz.topic_loading,
    )

    if submitted:
        if not quiz.topic.strip():
            st.warning("Please enter a topic.")
            return
        # answers from the previous quiz must not carry over
        st.session_state.chats = {}
        for key in [k for k in st.session_state if str(k).startswith("q_")]:
            del st.session_state[key]
        with st.spinner("Generating your quiz, please wait..."):
            actions.generate_quiz(quiz, st.session_state.client)


def render_chat(index: int, view: QuestionView):
    chat = chat_for(index, view)
    st.markdown("**Need Clarification?**")
    for message in chat.messages:
        with st.chat_message("user" if message.sender == "user" else "assistant"):
            st.write(message.text)

    if chat.error:
        st.error(f"Chat Error: {chat.error}")

    with st.form(f"chat_form_{index}", clear_on_submit=True):
        text = st.text_input("Ask a follow-up question...", disabled=chat.is_sending)
        if st.form_submit_button("Send", disabled=chat.is_sending):
            actions.send_chat_message(chat, st.session_state.client, text)
            st.rerun()


def render_question(index: int, view: QuestionView):
    q = view.question
    st.subheader(f"Q{index + 1}: {q.question_text}")

    labels = [f"{chr(65 + i)}. {option}" for i, option in enumerate(q.options)]
    current = q.options.index(view.selected_answer) if view.selected_answer in q.options else None
    choice = st.radio(
        "Choose an answer",
        labels,
        index=current,
        key=f"q_{index}_choice",
        disabled=view.is_checked,
        label_visibility="collapsed",
    )
    if choice is not None:
        view.select(q.options[labels.index(choice)])

    if not view.is_checked:
        if view.selected_answer is not None and st.button("Check Answer", key=f"q_{index}_check"):
            view.check()
            st.rerun()
        return

    if view.is_correct:
        st.success(f"Correct! {q.correct_answer}")
    else:
        st.error(f"Your answer: {view.selected_answer}")

    with st.expander("View Answer & Explanation"):
        st.markdown(f"**Correct Answer:** {q.correct_answer}")
        st.markdown(f"**Explanation:** {q.explanation}")
        render_chat(index, view)


def main():
    init_session_state()
    quiz: QuizSession = st.session_state.quiz

    st.title("QuizMeOnIt.AI")
    st.caption("Generate challenging quizzes on any topic with AI.")

    render_form(quiz)

    if quiz.error:
        st.error(f"Oops! Something went wrong. {quiz.error}")

    if quiz.questions:
        st.header("Your Quiz is Ready!")
        for index, view in enumerate(quiz.questions):
            render_question(index, view)
            st.divider()
    elif quiz.status is QuizStatus.DISPLAYED:
        st.info(
            "The AI couldn't generate questions for this topic. "
            "Please try a different or more specific topic."
        )


main()
