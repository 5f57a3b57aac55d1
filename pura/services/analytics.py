"""
Storefront analytics events, emitted as log records on the "pura.analytics" logger.
"""

import logging
from typing import Any

logger = logging.getLogger("pura.analytics")


def track_event(event_name: str, **params: Any) -> dict:
    event = {"event": event_name, **params}
    logger.info(f"Analytics event: {event_name} {params}", extra={"analytics": event})
    return event


def quiz_started(variant: str) -> dict:
    return track_event("quiz_started", category="engagement", label=f"{variant}_quiz")


def quiz_question_answered(variant: str, question_id: int, answer: str) -> dict:
    return track_event(
        "quiz_question_answered",
        category="engagement",
        label=f"{variant}_quiz",
        question_id=question_id,
        answer=answer,
    )


def quiz_completed(variant: str, total_questions: int, completion_seconds: int) -> dict:
    return track_event(
        "quiz_completed",
        category="engagement",
        label=f"{variant}_quiz",
        value=total_questions,
        completion_time_seconds=completion_seconds,
    )


def quiz_abandoned(variant: str, question_number: int, total_questions: int) -> dict:
    return track_event(
        "quiz_abandoned",
        category="engagement",
        label=f"{variant}_quiz",
        question_reached=question_number,
        total_questions=total_questions,
        completion_percentage=round(question_number / total_questions * 100) if total_questions else 0,
    )


def routine_added_to_cart(product_count: int, total_value: float) -> dict:
    return track_event(
        "add_to_cart",
        category="ecommerce",
        label="complete_quiz_routine",
        value=total_value,
        product_count=product_count,
        source="quiz_recommendation",
    )


def product_added_to_cart(product_name: str, price: float, source: str = "shop") -> dict:
    return track_event(
        "add_to_cart",
        category="ecommerce",
        label=source,
        value=price,
        product_name=product_name,
        source=source,
    )
