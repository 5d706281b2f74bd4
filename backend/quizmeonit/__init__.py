"""QuizMeOnIt - AI quiz generation backend."""

__version__ = "0.1.0"
