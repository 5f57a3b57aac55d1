import logging
from contextlib import contextmanager
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from pura.config import get_settings
from pura.database import get_db
from pura.errors import NotFoundError
from pura.quiz_data import get_questions
from pura.schemas import (
    AddToCartRequest,
    AnswerRequest,
    CartSummary,
    Language,
    LanguageRequest,
    NameRequest,
    Product,
    QuantityRequest,
    QuizQuestion,
    QuizVariant,
    QuizView,
    RecommendationRequest,
    RecommendedProductRequest,
    RoutineQuote,
)
from pura.services.recommendation import recommend
from pura.services.storefront import StorefrontService

logger = logging.getLogger(__name__)

router = APIRouter()
service = StorefrontService()


@contextmanager
def _errors(action: str):
    """NotFoundError -> 404, ValueError -> 400, anything else -> 500."""
    try:
        yield
    except HTTPException:
        raise
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Error in {action}")
        raise HTTPException(status_code=500, detail=str(e))


def _variant(value: str) -> QuizVariant:
    try:
        return QuizVariant(value)
    except ValueError:
        raise NotFoundError(f"Unknown quiz: {value}")


# ── Quiz content & engine ───────────────────────────────────────────────────


@router.get("/quiz/{variant}/questions", response_model=list[QuizQuestion], tags=["quiz"])
async def list_questions(variant: str, language: Optional[Language] = None):
    with _errors("list_questions"):
        return list(get_questions(_variant(variant), language or Language(get_settings().default_language)))


@router.post("/quiz/{variant}/recommendations", tags=["quiz"])
async def recommendations(variant: str, req: RecommendationRequest):
    """Stateless engine call: answers in, recommendation bundle out."""
    with _errors("recommendations"):
        return recommend(_variant(variant), req.answers)


# ── Products ────────────────────────────────────────────────────────────────


@router.get("/products", response_model=list[Product], tags=["products"])
async def list_products(category: Optional[str] = None, q: Optional[str] = None):
    if q:
        return service.catalog.search(q)
    return service.catalog.products_by_category(category)


@router.get("/products/categories", response_model=list[str], tags=["products"])
async def list_categories():
    return service.catalog.categories()


@router.get("/products/featured", response_model=list[Product], tags=["products"])
async def featured_products():
    return service.catalog.featured()


@router.get("/products/{product_id}", response_model=Product, tags=["products"])
async def get_product(product_id: str):
    with _errors("get_product"):
        return service.catalog.get_product(product_id)


# ── Session quiz ────────────────────────────────────────────────────────────


@router.get("/sessions/{session_key}/quiz/{variant}", response_model=QuizView, tags=["sessions"])
async def get_quiz(session_key: str, variant: str, db: AsyncSession = Depends(get_db)):
    with _errors("get_quiz"):
        return await service.get_quiz(db, session_key, _variant(variant))


@router.post("/sessions/{session_key}/quiz/{variant}/start", response_model=QuizView, tags=["sessions"])
async def start_quiz(session_key: str, variant: str, db: AsyncSession = Depends(get_db)):
    with _errors("start_quiz"):
        return await service.start_quiz(db, session_key, _variant(variant))


@router.post("/sessions/{session_key}/quiz/{variant}/answer", response_model=QuizView, tags=["sessions"])
async def answer_question(session_key: str, variant: str, req: AnswerRequest, db: AsyncSession = Depends(get_db)):
    with _errors("answer_question"):
        return await service.answer_question(db, session_key, _variant(variant), req.question_id, req.answer_id)


@router.post("/sessions/{session_key}/quiz/{variant}/next", response_model=QuizView, tags=["sessions"])
async def next_question(session_key: str, variant: str, db: AsyncSession = Depends(get_db)):
    with _errors("next_question"):
        return await service.next_question(db, session_key, _variant(variant))


@router.post("/sessions/{session_key}/quiz/{variant}/previous", response_model=QuizView, tags=["sessions"])
async def previous_question(session_key: str, variant: str, db: AsyncSession = Depends(get_db)):
    with _errors("previous_question"):
        return await service.previous_question(db, session_key, _variant(variant))


@router.post("/sessions/{session_key}/quiz/{variant}/complete", response_model=QuizView, tags=["sessions"])
async def complete_quiz(session_key: str, variant: str, db: AsyncSession = Depends(get_db)):
    with _errors("complete_quiz"):
        return await service.complete_quiz(db, session_key, _variant(variant))


@router.post("/sessions/{session_key}/quiz/{variant}/reset", response_model=QuizView, tags=["sessions"])
async def reset_quiz(session_key: str, variant: str, db: AsyncSession = Depends(get_db)):
    with _errors("reset_quiz"):
        return await service.reset_quiz(db, session_key, _variant(variant))


@router.put("/sessions/{session_key}/quiz/{variant}/language", response_model=QuizView, tags=["sessions"])
async def switch_language(session_key: str, variant: str, req: LanguageRequest, db: AsyncSession = Depends(get_db)):
    with _errors("switch_language"):
        return await service.switch_language(db, session_key, _variant(variant), req.language)


@router.put("/sessions/{session_key}/quiz/{variant}/name", response_model=QuizView, tags=["sessions"])
async def set_customer_name(session_key: str, variant: str, req: NameRequest, db: AsyncSession = Depends(get_db)):
    with _errors("set_customer_name"):
        return await service.set_customer_name(db, session_key, _variant(variant), req.name)


@router.get("/sessions/{session_key}/quiz/{variant}/routine", response_model=RoutineQuote, tags=["sessions"])
async def quote_routine(session_key: str, variant: str, db: AsyncSession = Depends(get_db)):
    with _errors("quote_routine"):
        return await service.quote_routine(db, session_key, _variant(variant))


@router.post("/sessions/{session_key}/quiz/{variant}/routine", response_model=CartSummary, tags=["sessions"])
async def add_routine_to_cart(session_key: str, variant: str, db: AsyncSession = Depends(get_db)):
    with _errors("add_routine_to_cart"):
        return await service.add_routine_to_cart(db, session_key, _variant(variant))


# ── Session cart ────────────────────────────────────────────────────────────


@router.get("/sessions/{session_key}/cart", response_model=CartSummary, tags=["cart"])
async def get_cart(session_key: str, db: AsyncSession = Depends(get_db)):
    with _errors("get_cart"):
        return await service.get_cart(db, session_key)


@router.post("/sessions/{session_key}/cart/items", response_model=CartSummary, tags=["cart"])
async def add_to_cart(session_key: str, req: AddToCartRequest, db: AsyncSession = Depends(get_db)):
    with _errors("add_to_cart"):
        return await service.add_product(db, session_key, req.product_id, req.quantity)


@router.post("/sessions/{session_key}/cart/recommended", response_model=CartSummary, tags=["cart"])
async def add_recommended_product(
    session_key: str, req: RecommendedProductRequest, db: AsyncSession = Depends(get_db)
):
    with _errors("add_recommended_product"):
        return await service.add_recommended_product(db, session_key, req.variant, req.product_name)


@router.put("/sessions/{session_key}/cart/items/{product_id}", response_model=CartSummary, tags=["cart"])
async def update_quantity(session_key: str, product_id: str, req: QuantityRequest, db: AsyncSession = Depends(get_db)):
    with _errors("update_quantity"):
        return await service.update_quantity(db, session_key, product_id, req.quantity)


@router.delete("/sessions/{session_key}/cart/items/{product_id}", response_model=CartSummary, tags=["cart"])
async def remove_from_cart(session_key: str, product_id: str, db: AsyncSession = Depends(get_db)):
    with _errors("remove_from_cart"):
        return await service.remove_product(db, session_key, product_id)


@router.delete("/sessions/{session_key}/cart", response_model=CartSummary, tags=["cart"])
async def clear_cart(session_key: str, db: AsyncSession = Depends(get_db)):
    with _errors("clear_cart"):
        return await service.clear_cart(db, session_key)


@router.put("/sessions/{session_key}/cart/packaging-name", response_model=CartSummary, tags=["cart"])
async def set_packaging_name(session_key: str, req: NameRequest, db: AsyncSession = Depends(get_db)):
    with _errors("set_packaging_name"):
        return await service.set_packaging_name(db, session_key, req.name)
