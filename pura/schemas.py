"""
Pydantic schemas: the single source of truth for all data contracts.

Answer tags are typed enums whose values are the exact tag strings the quiz
questions carry, so the recommendation tables are keyed by enum members and a
typo is an import-time error rather than a silently missing product.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ────────────────────────────────────────────────────────────────────


class QuizVariant(str, enum.Enum):
    SKINCARE = "skincare"
    HAIRCARE = "haircare"
    COMBINED = "combined"


class Language(str, enum.Enum):
    EN = "en"
    DE = "de"


class SkinType(str, enum.Enum):
    OILY = "Oily"
    DRY = "Dry"
    COMBINATION = "Combination"
    NORMAL = "Normal"
    SENSITIVE = "Sensitive"


class SkinConcern(str, enum.Enum):
    BRIGHTENING = "Brightening"
    ANTI_WRINKLE = "Anti-Wrinkle"
    BARRIER_REPAIR = "Barrier Repair/Hydration"
    DETOX = "Detox/Exfoliating"
    EYE_CONCERNS = "Eye Concerns"
    NONE = "None"  # "skip" answer of the optional secondary concern


class SunscreenPreference(str, enum.Enum):
    MINERAL_SPF30 = "Mineral SPF 30"
    HYBRID_SPF50 = "Hybrid SPF 50+"


class BodyConcern(str, enum.Enum):
    GENTLE = "Gentle/Sensitive"
    EXFOLIATING = "Exfoliating"
    UREA_REPAIR = "Urea Repair"
    HYDRATION = "Hydration"


class ScalpConcern(str, enum.Enum):
    ANTI_HAIR_FALL = "Anti-Hair Fall"
    MOISTURE = "Moisture"
    CLARIFYING = "Clarifying/Balancing"


class HairConcern(str, enum.Enum):
    REPAIR = "Repair"
    MOISTURE_FRIZZ = "Moisture/Frizz"
    SHINE = "Shine"
    STRENGTH = "Strength"


class Wildcard(str, enum.Enum):
    """Second key component matching any tag."""

    ANY = "*"


class RoutineTime(str, enum.Enum):
    AM = "AM"
    PM = "PM"


class RoutineSlot(str, enum.Enum):
    CLEANSER = "cleanser"
    SERUM = "serum"
    MOISTURIZER = "moisturizer"
    EYE_CARE = "eye_care"
    SUNSCREEN = "sunscreen"
    WEEKLY_MASK = "weekly_mask"
    SCRUB = "scrub"
    SHAMPOO = "shampoo"
    CONDITIONER = "conditioner"
    HAIR_MASK = "hair_mask"
    SCALP_TREATMENT = "scalp_treatment"
    LEAVE_IN = "leave_in"
    BODY_WASH = "body_wash"
    BODY_MOISTURIZER = "body_moisturizer"
    LIP_CARE = "lip_care"


# ── Quiz content ─────────────────────────────────────────────────────────────


class AnswerOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    mapping: str


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    section: str
    question: str
    answers: tuple[AnswerOption, ...]
    optional: bool = False

    def option(self, answer_id: str) -> Optional[AnswerOption]:
        for opt in self.answers:
            if opt.id == answer_id:
                return opt
        return None


class Answer(BaseModel):
    """A recorded answer. Only ``mapping`` feeds the recommendation engine; an
    empty one falls back to the question default.
    """

    model_config = ConfigDict(frozen=True)

    mapping: str = ""
    id: Optional[str] = None
    text: Optional[str] = None


# ── Recommendations ──────────────────────────────────────────────────────────


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: str
    slot: str = Field(description="Routine position, e.g. 'Serum (AM)'")
    reason: str = Field(description="Why this product was picked")


class UnfilledSlot(BaseModel):
    """A slot the engine tried to fill but found no table entry for."""

    model_config = ConfigDict(frozen=True)

    slot: RoutineSlot
    key: str = Field(description="The '+'-joined lookup key that missed")


class SkincareRoutine(BaseModel):
    am: list[Recommendation] = Field(default_factory=list)
    pm: list[Recommendation] = Field(default_factory=list)
    weekly: list[Recommendation] = Field(default_factory=list)


class SkincareRecommendations(BaseModel):
    variant: Literal["skincare"] = "skincare"
    skincare: SkincareRoutine
    bodycare: list[Recommendation] = Field(default_factory=list)
    lipcare: list[Recommendation] = Field(default_factory=list)
    unfilled_slots: list[UnfilledSlot] = Field(default_factory=list)


class HaircareRecommendations(BaseModel):
    variant: Literal["haircare"] = "haircare"
    haircare: list[Recommendation] = Field(default_factory=list)
    unfilled_slots: list[UnfilledSlot] = Field(default_factory=list)


class CombinedRecommendations(BaseModel):
    """Output of the legacy seven-question quiz."""

    variant: Literal["combined"] = "combined"
    skincare: SkincareRoutine
    haircare: list[Recommendation] = Field(default_factory=list)
    bodycare: list[Recommendation] = Field(default_factory=list)
    lipcare: list[Recommendation] = Field(default_factory=list)
    unfilled_slots: list[UnfilledSlot] = Field(default_factory=list)


RecommendationBundle = Annotated[
    Union[SkincareRecommendations, HaircareRecommendations, CombinedRecommendations],
    Field(discriminator="variant"),
]


# ── Catalog & cart ───────────────────────────────────────────────────────────


class Product(BaseModel):
    id: str
    name: str
    price: float = Field(ge=0)
    category: str = ""
    image: str = "/Pura.png"
    description: str = ""
    ingredients: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    original_price: Optional[float] = None
    is_bestseller: bool = False
    is_new: bool = False


class CartItem(Product):
    quantity: int = Field(default=1, ge=1)
    is_bundle: bool = False


class CartState(BaseModel):
    """Cart contents, serialized as JSON on the shopper session."""

    items: list[CartItem] = Field(default_factory=list)
    custom_packaging_name: str = ""


class CartSummary(BaseModel):
    items: list[CartItem]
    custom_packaging_name: str
    total_items: int
    subtotal: float
    bundle_discount: float
    total: float


class RoutineQuote(BaseModel):
    """Price preview for adding a whole recommended routine as a bundle."""

    products: list[Product]
    product_count: int
    original_total: float
    discount: float
    final_total: float


# ── Quiz state ───────────────────────────────────────────────────────────────


class QuizState(BaseModel):
    """Where a shopper is in one quiz variant, serialized on the session."""

    variant: QuizVariant
    language: Language = Language.EN
    current_question: int = 0
    answers: dict[int, Answer] = Field(default_factory=dict)
    completed: bool = False
    customer_name: str = ""
    started_at: Optional[datetime] = None
    recommendations: Optional[RecommendationBundle] = None


class PrimaryConcerns(BaseModel):
    """Headline concerns shown in the results intro."""

    first: str = ""
    second: str = ""


class QuizView(BaseModel):
    """Quiz state plus the derived values a client renders."""

    state: QuizState
    total_questions: int
    progress: float
    current: QuizQuestion
    can_proceed: bool
    intro: Optional[str] = None


# ── API requests ─────────────────────────────────────────────────────────────


class RecommendationRequest(BaseModel):
    answers: dict[int, Answer] = Field(default_factory=dict)


class AnswerRequest(BaseModel):
    question_id: int
    answer_id: str


class LanguageRequest(BaseModel):
    language: Language


class NameRequest(BaseModel):
    name: str = Field(default="", max_length=100)


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class QuantityRequest(BaseModel):
    quantity: int


class RecommendedProductRequest(BaseModel):
    variant: QuizVariant
    product_name: str
