"""Keyword-based question classification."""

from .models import QuestionType

TECHNICAL_KEYWORDS = ("how", "implement", "code", "function", "class", "method")
STATISTICS_KEYWORDS = ("many", "count", "size", "number", "statistics")


def classify(question: str) -> QuestionType:
    """Return the question type; technical keywords take precedence over statistics ones."""
    q = question.lower()
    if any(k in q for k in TECHNICAL_KEYWORDS):
        return QuestionType.TECHNICAL
    if any(k in q for k in STATISTICS_KEYWORDS):
        return QuestionType.STATISTICS
    return QuestionType.GENERAL
