"""
SQLAlchemy models: two tables only.

`shopper_sessions`: quiz state per variant + cart (JSON blobs)
`quiz_results`    : audit trail of completed quizzes (analytics only)
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from pura.database import Base


class ShopperSession(Base):
    __tablename__ = "shopper_sessions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    session_key = Column(String(64), unique=True, nullable=False, index=True)
    quiz_json = Column(JSON, default=dict)  # {variant: QuizState}
    cart_json = Column(JSON, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    results = relationship("QuizResult", back_populates="session", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<ShopperSession(id={self.id}, key={self.session_key})>"


class QuizResult(Base):
    __tablename__ = "quiz_results"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    session_id = Column(Integer, ForeignKey("shopper_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    variant = Column(String(20), nullable=False)
    language = Column(String(5), nullable=False)
    answers_json = Column(JSON, nullable=False)
    recommendations_json = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    session = relationship("ShopperSession", back_populates="results")

    def __repr__(self):
        return f"<QuizResult(id={self.id}, variant={self.variant})>"
