"""Client side of QuizMeOnIt: page state, API client and the Streamlit page."""
