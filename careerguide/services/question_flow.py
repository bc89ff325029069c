# careerguide/services/question_flow.py - Scripted question selection for the career assessment

import re
from typing import Iterable, Optional, Sequence, Set

from careerguide.models.assessment import HistoryMessage, QAPair

TOTAL_QUESTIONS = 6
FIRST_QUESTION = "What career or role are you most interested in right now?"
INSPIRATION_QUESTION = "What inspired you to choose this career?"
GENERIC_FOLLOW_UP = "What skills do you believe are your strongest?"

# (domain, keywords, follow-up question); the first domain whose keyword
# appears in the previous answer wins
DOMAIN_FOLLOW_UPS = (
    ("sports", ("cricket", "sports"),
     "What level are you currently playing at (school, district, state)?"),
    ("technology", ("developer", "software"),
     "Which area interests you more: frontend, backend, or AI?"),
    ("business", ("business", "entrepreneur"),
     "Do you prefer startups or corporate environments?"),
)

ALTERNATE_QUESTIONS = (
    "What is your current skill level in this career path?",
    "How much time can you commit weekly to improve in this field?",
    "What milestone do you want to achieve in the next 12 months?",
    "What kind of guidance or resources do you need most right now?",
)

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_question(text: Optional[str]) -> str:
    """Case-fold, strip punctuation, collapse whitespace"""
    value = _NON_WORD_RE.sub("", str(text or "").lower())
    return _WHITESPACE_RE.sub(" ", value).strip()


def classify_answer_domain(answer: Optional[str]) -> Optional[str]:
    """Return 'sports', 'technology', 'business' or None for an answer text"""
    value = str(answer or "").lower()
    for domain, keywords, _ in DOMAIN_FOLLOW_UPS:
        if any(keyword in value for keyword in keywords):
            return domain
    return None


def generate_next_question(previous_answer: str, step: int) -> str:
    """Candidate question to ask after the answer given at `step` (before dedup)"""
    if step == 1:
        return INSPIRATION_QUESTION

    domain = classify_answer_domain(previous_answer)
    for name, _, question in DOMAIN_FOLLOW_UPS:
        if name == domain:
            return question
    return GENERIC_FOLLOW_UP


def asked_questions(history: Iterable[HistoryMessage], answers: Iterable[QAPair]) -> Set[str]:
    asked = {normalize_question(m.content) for m in history if m.role == "assistant"}
    asked.update(normalize_question(qa.question) for qa in answers)
    return asked


def step_fallback_question(step: int) -> str:
    return f"What is your next most important goal for this career path (Step {step})?"


def next_question_without_duplicates(
    previous_answer: str,
    step: int,
    history: Sequence[HistoryMessage],
    answers: Sequence[QAPair],
) -> str:
    """Next question that does not normalize-equal anything already asked.

    Falls back through ALTERNATE_QUESTIONS and finally a question carrying the
    step number, which cannot repeat because steps only move forward.
    """
    asked = asked_questions(history, answers)

    primary = generate_next_question(previous_answer, step)
    if normalize_question(primary) not in asked:
        return primary

    for candidate in ALTERNATE_QUESTIONS:
        if normalize_question(candidate) not in asked:
            return candidate

    return step_fallback_question(step)
