"""
StorefrontService: loads a shopper session, applies a quiz or cart
operation, and persists the result.

Quiz state (one QuizState per variant) and the cart are stored as JSON on
the session row. Completing a quiz also writes a `quiz_results` audit row.
"""

import functools
import logging
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from pura.errors import NotFoundError
from pura.models.db import ShopperSession
from pura.repository import SessionRepository
from pura.schemas import (
    CartState,
    CartSummary,
    Language,
    QuizState,
    QuizVariant,
    QuizView,
    RoutineQuote,
)
from pura.services import analytics
from pura.services import cart as carts
from pura.services import quiz
from pura.services.catalog import ProductCatalog
from pura.services.recommendation import all_recommendations

logger = logging.getLogger(__name__)

repo = SessionRepository()


# ── Helpers ─────────────────────────────────────────────────────────────────


def _load_quizzes(session: ShopperSession) -> dict[QuizVariant, QuizState]:
    raw = session.quiz_json or {}
    return {QuizVariant(k): QuizState.model_validate(v) for k, v in raw.items()}


def _dump_quizzes(quizzes: dict[QuizVariant, QuizState]) -> dict:
    return {k.value: v.model_dump(mode="json") for k, v in quizzes.items()}


def _load_cart(session: ShopperSession) -> CartState:
    return CartState.model_validate(session.cart_json or {})


def _completed(state: QuizState) -> QuizState:
    if not state.completed or state.recommendations is None:
        raise ValueError(f"The {state.variant.value} quiz has not been completed yet")
    return state


# ── Main service ────────────────────────────────────────────────────────────


class StorefrontService:
    """Quiz and cart operations scoped to one shopper session."""

    def __init__(self, catalog: Optional[ProductCatalog] = None):
        self.catalog = catalog or ProductCatalog()

    # ── Quiz ────────────────────────────────────────────────────────────────

    async def _quiz_op(
        self,
        db: AsyncSession,
        session_key: str,
        variant: QuizVariant,
        op: Optional[Callable[[QuizState], QuizState]] = None,
    ) -> QuizView:
        session = await repo.get_or_create(db, session_key)
        quizzes = _load_quizzes(session)
        state = quizzes.get(variant) or quiz.new_quiz(variant)
        previous_bundle = state.recommendations

        if op is not None:
            state = op(state)
            quizzes[variant] = state
            session.quiz_json = _dump_quizzes(quizzes)
            await repo.save(db, session)

            # complete_quiz always assigns a fresh bundle, including on a revisit
            if state.completed and state.recommendations is not previous_bundle:
                await repo.log_quiz_result(
                    db,
                    session.id,
                    variant=variant.value,
                    language=state.language.value,
                    answers={str(k): v.model_dump(mode="json") for k, v in state.answers.items()},
                    recommendations=state.recommendations.model_dump(mode="json"),
                )
                logger.info(f"Quiz completed | Session: {session_key} | Variant: {variant.value}")

        return quiz.quiz_view(state)

    async def get_quiz(self, db: AsyncSession, session_key: str, variant: QuizVariant) -> QuizView:
        return await self._quiz_op(db, session_key, variant)

    async def start_quiz(self, db: AsyncSession, session_key: str, variant: QuizVariant) -> QuizView:
        return await self._quiz_op(db, session_key, variant, quiz.start_quiz)

    async def answer_question(
        self, db: AsyncSession, session_key: str, variant: QuizVariant, question_id: int, answer_id: str
    ) -> QuizView:
        op = functools.partial(quiz.answer_question, question_id=question_id, answer_id=answer_id)
        return await self._quiz_op(db, session_key, variant, op)

    async def next_question(self, db: AsyncSession, session_key: str, variant: QuizVariant) -> QuizView:
        return await self._quiz_op(db, session_key, variant, quiz.next_question)

    async def previous_question(self, db: AsyncSession, session_key: str, variant: QuizVariant) -> QuizView:
        return await self._quiz_op(db, session_key, variant, quiz.previous_question)

    async def complete_quiz(self, db: AsyncSession, session_key: str, variant: QuizVariant) -> QuizView:
        return await self._quiz_op(db, session_key, variant, quiz.complete_quiz)

    async def reset_quiz(self, db: AsyncSession, session_key: str, variant: QuizVariant) -> QuizView:
        return await self._quiz_op(db, session_key, variant, quiz.reset_quiz)

    async def switch_language(
        self, db: AsyncSession, session_key: str, variant: QuizVariant, language: Language
    ) -> QuizView:
        op = functools.partial(quiz.switch_language, language=language)
        return await self._quiz_op(db, session_key, variant, op)

    async def set_customer_name(
        self, db: AsyncSession, session_key: str, variant: QuizVariant, name: str
    ) -> QuizView:
        op = functools.partial(quiz.set_customer_name, name=name)
        return await self._quiz_op(db, session_key, variant, op)

    async def quote_routine(self, db: AsyncSession, session_key: str, variant: QuizVariant) -> RoutineQuote:
        session = await repo.get_or_create(db, session_key)
        state = _completed(_load_quizzes(session).get(variant) or quiz.new_quiz(variant))
        products = self.catalog.routine_products_for(all_recommendations(state.recommendations))
        return carts.quote_routine(products)

    # ── Cart ────────────────────────────────────────────────────────────────

    async def _cart_op(
        self,
        db: AsyncSession,
        session_key: str,
        op: Optional[Callable[[CartState], CartState]] = None,
    ) -> CartSummary:
        session = await repo.get_or_create(db, session_key)
        cart = _load_cart(session)
        if op is not None:
            cart = op(cart)
            session.cart_json = cart.model_dump(mode="json")
            await repo.save(db, session)
        return carts.summarize(cart)

    async def get_cart(self, db: AsyncSession, session_key: str) -> CartSummary:
        return await self._cart_op(db, session_key)

    async def add_product(
        self, db: AsyncSession, session_key: str, product_id: str, quantity: int = 1
    ) -> CartSummary:
        product = self.catalog.get_product(product_id)
        analytics.product_added_to_cart(product.name, product.price)
        op = functools.partial(carts.add_to_cart, product=product, quantity=quantity)
        return await self._cart_op(db, session_key, op)

    async def add_recommended_product(
        self, db: AsyncSession, session_key: str, variant: QuizVariant, product_name: str
    ) -> CartSummary:
        """Add one product from a completed quiz's results (not discounted)."""
        session = await repo.get_or_create(db, session_key)
        state = _completed(_load_quizzes(session).get(variant) or quiz.new_quiz(variant))
        rec = next(
            (r for r in all_recommendations(state.recommendations) if r.product == product_name),
            None,
        )
        if rec is None:
            raise NotFoundError(f"{product_name!r} is not in your {variant.value} recommendations")

        product = self.catalog.product_for(rec)
        analytics.product_added_to_cart(product.name, product.price, source="quiz_individual")
        return await self._cart_op(db, session_key, functools.partial(carts.add_to_cart, product=product))

    async def add_routine_to_cart(self, db: AsyncSession, session_key: str, variant: QuizVariant) -> CartSummary:
        """Add every resolvable product of a completed quiz as a discounted bundle."""
        quote = await self.quote_routine(db, session_key, variant)
        analytics.routine_added_to_cart(quote.product_count, quote.original_total)
        op = functools.partial(carts.add_bundle_to_cart, products=quote.products)
        return await self._cart_op(db, session_key, op)

    async def update_quantity(
        self, db: AsyncSession, session_key: str, product_id: str, quantity: int
    ) -> CartSummary:
        op = functools.partial(carts.update_quantity, product_id=product_id, quantity=quantity)
        return await self._cart_op(db, session_key, op)

    async def remove_product(self, db: AsyncSession, session_key: str, product_id: str) -> CartSummary:
        op = functools.partial(carts.remove_from_cart, product_id=product_id)
        return await self._cart_op(db, session_key, op)

    async def clear_cart(self, db: AsyncSession, session_key: str) -> CartSummary:
        return await self._cart_op(db, session_key, carts.clear_cart)

    async def set_packaging_name(self, db: AsyncSession, session_key: str, name: str) -> CartSummary:
        op = functools.partial(carts.set_custom_packaging_name, name=name)
        return await self._cart_op(db, session_key, op)
