"""
Quiz state transitions.

Plain functions over an explicit QuizState: the caller owns the state and
persists it (see StorefrontService). Completing a quiz runs the
recommendation engine once and stores the bundle on the state.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from pura.errors import NotFoundError
from pura.quiz_data import DEFAULT_NAME, INTRO_TEMPLATES, get_questions
from pura.schemas import (
    Answer,
    Language,
    PrimaryConcerns,
    QuizQuestion,
    QuizState,
    QuizVariant,
    QuizView,
)
from pura.services import analytics
from pura.services.recommendation import recommend

logger = logging.getLogger(__name__)

# Question ids whose answers headline the results intro
_HEADLINE_QUESTIONS: dict[QuizVariant, tuple[int, int]] = {
    QuizVariant.SKINCARE: (2, 5),
    QuizVariant.HAIRCARE: (1, 2),
    QuizVariant.COMBINED: (2, 6),
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_quiz(variant: QuizVariant, language: Language = Language.EN) -> QuizState:
    return QuizState(variant=variant, language=language)


# ── Derived values ──────────────────────────────────────────────────────────


def questions_for(state: QuizState) -> tuple[QuizQuestion, ...]:
    return get_questions(state.variant, state.language)


def total_questions(state: QuizState) -> int:
    return len(questions_for(state))


def current_question(state: QuizState) -> QuizQuestion:
    return questions_for(state)[state.current_question]


def is_current_answered(state: QuizState) -> bool:
    return current_question(state).id in state.answers


def can_proceed(state: QuizState) -> bool:
    """Optional questions may be skipped; others need an answer first."""
    return current_question(state).optional or is_current_answered(state)


def get_progress(state: QuizState) -> float:
    return (state.current_question + 1) / total_questions(state) * 100


def primary_concerns(state: QuizState) -> PrimaryConcerns:
    first, second = _HEADLINE_QUESTIONS[state.variant]
    a, b = state.answers.get(first), state.answers.get(second)
    return PrimaryConcerns(first=a.mapping if a else "", second=b.mapping if b else "")


def format_intro(state: QuizState) -> str:
    """Personalized results intro in the quiz language."""
    concerns = primary_concerns(state)
    template = INTRO_TEMPLATES[state.variant][state.language]
    return template.format(
        name=state.customer_name or DEFAULT_NAME[state.language],
        first=concerns.first.lower(),
        second=concerns.second.lower(),
    )


def quiz_view(state: QuizState) -> QuizView:
    return QuizView(
        state=state,
        total_questions=total_questions(state),
        progress=get_progress(state),
        current=current_question(state),
        can_proceed=can_proceed(state),
        intro=format_intro(state) if state.completed else None,
    )


# ── Transitions ─────────────────────────────────────────────────────────────


def start_quiz(state: QuizState, now: Optional[datetime] = None) -> QuizState:
    state.started_at = now or _now()
    analytics.quiz_started(state.variant.value)
    return state


def answer_question(state: QuizState, question_id: int, answer_id: str) -> QuizState:
    """Record (or overwrite) the answer to one question."""
    question = next((q for q in questions_for(state) if q.id == question_id), None)
    if question is None:
        raise NotFoundError(f"Unknown question {question_id} for {state.variant.value} quiz")
    option = question.option(answer_id)
    if option is None:
        raise NotFoundError(f"Unknown answer {answer_id!r} for question {question_id}")

    state.answers[question_id] = Answer(id=option.id, text=option.text, mapping=option.mapping)
    analytics.quiz_question_answered(state.variant.value, question_id, option.mapping)
    return state


def next_question(state: QuizState, now: Optional[datetime] = None) -> QuizState:
    """Advance one question; on the last question, complete the quiz.

    Completing again after a revisit rebuilds the recommendations from the
    current answers.
    """
    if not can_proceed(state):
        raise ValueError(f"Question {current_question(state).id} needs an answer first")
    if state.current_question < total_questions(state) - 1:
        state.current_question += 1
        return state
    return complete_quiz(state, now=now)


def previous_question(state: QuizState) -> QuizState:
    if state.current_question > 0:
        state.current_question -= 1
    return state


def complete_quiz(state: QuizState, now: Optional[datetime] = None) -> QuizState:
    state.recommendations = recommend(state.variant, state.answers)
    state.completed = True

    elapsed = 0
    if state.started_at is not None:
        started = state.started_at
        if started.tzinfo is None:
            started = started.replace(tzinfo=timezone.utc)
        elapsed = round(((now or _now()) - started).total_seconds())
    analytics.quiz_completed(state.variant.value, total_questions(state), elapsed)

    unfilled = state.recommendations.unfilled_slots
    if unfilled:
        logger.debug(f"Quiz completed with unfilled slots: {[u.key for u in unfilled]}")
    return state


def reset_quiz(state: QuizState) -> QuizState:
    """Back to question one with no answers, name or results; keeps the language."""
    if state.started_at is not None and not state.completed and state.answers:
        analytics.quiz_abandoned(state.variant.value, state.current_question + 1, total_questions(state))
    return new_quiz(state.variant, state.language)


def switch_language(state: QuizState, language: Language) -> QuizState:
    state = reset_quiz(state)
    state.language = language
    return state


def set_customer_name(state: QuizState, name: str) -> QuizState:
    state.customer_name = name.strip()
    return state
