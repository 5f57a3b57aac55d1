"""
Shopper session repository: all DB access in one place.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pura.models.db import QuizResult, ShopperSession

logger = logging.getLogger(__name__)


class SessionRepository:
    """Single repository for all DB operations."""

    async def get(self, db: AsyncSession, session_key: str) -> Optional[ShopperSession]:
        result = await db.execute(
            select(ShopperSession).where(ShopperSession.session_key == session_key)
        )
        return result.scalar_one_or_none()

    async def get_or_create(self, db: AsyncSession, session_key: str) -> ShopperSession:
        session = await self.get(db, session_key)
        if session:
            return session

        session = ShopperSession(session_key=session_key, quiz_json={}, cart_json={})
        db.add(session)
        try:
            await db.commit()
        except IntegrityError:
            # Another request created the same key between our select and insert
            await db.rollback()
            logger.info(f"Shopper session created concurrently, reloading: {session_key}")
            session = await self.get(db, session_key)
            if session is None:
                raise
            return session

        await db.refresh(session)
        logger.info(f"Created new shopper session: {session_key}")
        return session

    async def save(self, db: AsyncSession, session: ShopperSession) -> None:
        db.add(session)
        await db.commit()

    async def log_quiz_result(
        self,
        db: AsyncSession,
        session_id: int,
        variant: str,
        language: str,
        answers: dict,
        recommendations: dict,
    ) -> None:
        row = QuizResult(
            session_id=session_id,
            variant=variant,
            language=language,
            answers_json=answers,
            recommendations_json=recommendations,
        )
        db.add(row)
        await db.commit()

    async def get_results_for_session(self, db: AsyncSession, session_id: int) -> list[QuizResult]:
        result = await db.execute(
            select(QuizResult)
            .where(QuizResult.session_id == session_id)
            .order_by(QuizResult.created_at, QuizResult.id)
        )
        return list(result.scalars().all())
