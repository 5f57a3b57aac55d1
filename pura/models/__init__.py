from pura.models.db import QuizResult, ShopperSession

__all__ = [
    "ShopperSession",
    "QuizResult",
]
