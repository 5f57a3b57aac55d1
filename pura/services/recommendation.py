"""
Recommendation engine: quiz answers in, routine bundle out.

Pure functions over the tables in ``product_mapping``. Every lookup is
best-effort: a tag combination with no table entry leaves its slot empty and
is reported in ``unfilled_slots`` instead of raising.
"""

import enum
import functools
import logging
from typing import Any, Mapping, NamedTuple, Optional, Type, Union

from pura.schemas import (
    Answer,
    BodyConcern,
    CombinedRecommendations,
    HairConcern,
    HaircareRecommendations,
    QuizVariant,
    Recommendation,
    RoutineSlot,
    RoutineTime,
    ScalpConcern,
    SkincareRecommendations,
    SkincareRoutine,
    SkinConcern,
    SkinType,
    SunscreenPreference,
    UnfilledSlot,
    Wildcard,
)
from pura.services.product_mapping import (
    BODY_MOISTURIZERS,
    BODY_WASHES,
    CLEANSERS,
    CONDITIONERS,
    EYE_CARE,
    GENERAL_SCRUB,
    HAIR_MASKS,
    LEAVE_INS,
    LIP_CARE,
    MOISTURIZERS,
    SCALP_TREATMENTS,
    SERUMS,
    SHAMPOOS,
    SUNSCREENS,
    WEEKLY_MASKS,
    compose_key,
)

logger = logging.getLogger(__name__)

Answers = Mapping[int, Union[Answer, Mapping[str, Any]]]

# question id -> (tag type, fallback when unanswered)
SKINCARE_QUESTIONS: dict[int, tuple[Type[enum.Enum], enum.Enum]] = {
    1: (SkinType, SkinType.NORMAL),
    2: (SkinConcern, SkinConcern.BRIGHTENING),
    3: (SkinConcern, SkinConcern.NONE),
    4: (SunscreenPreference, SunscreenPreference.HYBRID_SPF50),
    5: (BodyConcern, BodyConcern.HYDRATION),
}

HAIRCARE_QUESTIONS: dict[int, tuple[Type[enum.Enum], enum.Enum]] = {
    1: (ScalpConcern, ScalpConcern.MOISTURE),
    2: (HairConcern, HairConcern.MOISTURE_FRIZZ),
}

COMBINED_QUESTIONS: dict[int, tuple[Type[enum.Enum], enum.Enum]] = {
    1: SKINCARE_QUESTIONS[1],
    2: SKINCARE_QUESTIONS[2],
    3: SKINCARE_QUESTIONS[3],
    4: SKINCARE_QUESTIONS[4],
    5: HAIRCARE_QUESTIONS[1],
    6: HAIRCARE_QUESTIONS[2],
    7: SKINCARE_QUESTIONS[5],
}

_AM_SERUMS = {SkinConcern.BRIGHTENING}
_MASK_CONCERNS = {SkinConcern.DETOX, SkinConcern.BRIGHTENING, SkinConcern.BARRIER_REPAIR}
_LEAVE_IN_CONCERNS = {HairConcern.SHINE, HairConcern.MOISTURE_FRIZZ}


class Tag(NamedTuple):
    """A resolved answer tag. ``member`` is None when the raw tag is unknown."""

    member: Optional[enum.Enum]
    raw: str


def _mapping_of(answer) -> str:
    if answer is None:
        return ""
    if isinstance(answer, Mapping):
        return answer.get("mapping") or ""
    return getattr(answer, "mapping", "") or ""


def read_tag(answers: Answers, question_id: int, questions: dict) -> Tag:
    """Read one answer as a typed tag, falling back to the question default."""
    enum_cls, default = questions[question_id]
    raw = _mapping_of(answers.get(question_id))
    if not raw:
        return Tag(default, default.value)
    try:
        return Tag(enum_cls(raw), raw)
    except ValueError:
        logger.debug(f"Unrecognized tag {raw!r} for question {question_id}")
        return Tag(None, raw)


class _SlotFiller:
    """Collects misses while slots are resolved against the tables."""

    def __init__(self) -> None:
        self.unfilled: list[UnfilledSlot] = []

    def get(self, table: Mapping, key, slot: RoutineSlot, raw_key: str) -> Optional[Recommendation]:
        rec = table.get(key)
        if rec is None:
            logger.debug(f"No product for {slot.value} key {raw_key!r}")
            self.unfilled.append(UnfilledSlot(slot=slot, key=raw_key))
        return rec


def _skincare_routine(
    skin: Tag, primary: Tag, secondary: Tag, sunscreen: Tag, filler: _SlotFiller
) -> SkincareRoutine:
    routine = SkincareRoutine()

    # Cleanser: exact pair, then the skin type's wildcard
    cleanser = CLEANSERS.get((skin.member, primary.member)) or filler.get(
        CLEANSERS,
        (skin.member, Wildcard.ANY),
        RoutineSlot.CLEANSER,
        compose_key(skin.raw, primary.raw),
    )
    if cleanser:
        routine.am.append(cleanser)
        routine.pm.append(cleanser)

    # Serums: primary, then secondary unless skipped
    for concern in (primary, secondary):
        if concern.member is SkinConcern.NONE:
            continue
        serum = filler.get(SERUMS, concern.member, RoutineSlot.SERUM, concern.raw)
        if serum:
            bucket = routine.am if concern.member in _AM_SERUMS else routine.pm
            bucket.append(serum)

    moisturizer = filler.get(
        MOISTURIZERS,
        (skin.member, primary.member),
        RoutineSlot.MOISTURIZER,
        compose_key(skin.raw, primary.raw),
    )
    if moisturizer:
        routine.am.append(moisturizer)
        routine.pm.append(moisturizer)

    if SkinConcern.EYE_CONCERNS in (primary.member, secondary.member):
        routine.am.append(EYE_CARE[RoutineTime.AM])
        routine.pm.append(EYE_CARE[RoutineTime.PM])

    spf = filler.get(SUNSCREENS, sunscreen.member, RoutineSlot.SUNSCREEN, sunscreen.raw)
    if spf:
        routine.am.append(spf)

    if primary.member in _MASK_CONCERNS:
        routine.weekly.append(WEEKLY_MASKS[primary.member])
    routine.weekly.append(GENERAL_SCRUB)

    return routine


def _bodycare(body: Tag, filler: _SlotFiller) -> list[Recommendation]:
    # Each body concern maps to a wash or a lotion, not both
    recs: list[Recommendation] = []
    wash = BODY_WASHES.get(body.member)
    lotion = BODY_MOISTURIZERS.get(body.member)
    if wash:
        recs.append(wash)
    if lotion:
        recs.append(lotion)
    if not recs:
        filler.get(BODY_WASHES, body.member, RoutineSlot.BODY_WASH, compose_key(body.raw, "BodyWash"))
        filler.get(
            BODY_MOISTURIZERS,
            body.member,
            RoutineSlot.BODY_MOISTURIZER,
            compose_key(body.raw, "BodyMoisturizer"),
        )
    return recs


def _haircare(scalp: Tag, hair: Tag, filler: _SlotFiller) -> list[Recommendation]:
    recs: list[Recommendation] = []
    lookups = (
        (SHAMPOOS, scalp, RoutineSlot.SHAMPOO, "Shampoo"),
        (CONDITIONERS, hair, RoutineSlot.CONDITIONER, "Conditioner"),
        (HAIR_MASKS, hair, RoutineSlot.HAIR_MASK, "HairMask"),
    )
    for table, tag, slot, suffix in lookups:
        rec = filler.get(table, tag.member, slot, compose_key(tag.raw, suffix))
        if rec:
            recs.append(rec)

    if scalp.member is ScalpConcern.ANTI_HAIR_FALL:
        recs.append(SCALP_TREATMENTS[ScalpConcern.ANTI_HAIR_FALL])
    if hair.member in _LEAVE_IN_CONCERNS:
        recs.append(LEAVE_INS[hair.member])
    return recs


def generate_skincare_recommendations(answers: Answers) -> SkincareRecommendations:
    """Skincare & body quiz (questions 1-5)."""
    tag = functools.partial(read_tag, answers, questions=SKINCARE_QUESTIONS)
    filler = _SlotFiller()
    routine = _skincare_routine(tag(1), tag(2), tag(3), tag(4), filler)
    bodycare = _bodycare(tag(5), filler)
    return SkincareRecommendations(
        skincare=routine,
        bodycare=bodycare,
        lipcare=list(LIP_CARE),
        unfilled_slots=filler.unfilled,
    )


def generate_haircare_recommendations(answers: Answers) -> HaircareRecommendations:
    """Haircare quiz (questions 1-2)."""
    filler = _SlotFiller()
    haircare = _haircare(
        read_tag(answers, 1, HAIRCARE_QUESTIONS),
        read_tag(answers, 2, HAIRCARE_QUESTIONS),
        filler,
    )
    return HaircareRecommendations(haircare=haircare, unfilled_slots=filler.unfilled)


def generate_recommendations(answers: Answers) -> CombinedRecommendations:
    """Legacy single quiz (questions 1-7): skincare, haircare and body in one."""
    tag = functools.partial(read_tag, answers, questions=COMBINED_QUESTIONS)
    filler = _SlotFiller()
    routine = _skincare_routine(tag(1), tag(2), tag(3), tag(4), filler)
    haircare = _haircare(tag(5), tag(6), filler)
    bodycare = _bodycare(tag(7), filler)
    return CombinedRecommendations(
        skincare=routine,
        haircare=haircare,
        bodycare=bodycare,
        lipcare=list(LIP_CARE),
        unfilled_slots=filler.unfilled,
    )


_GENERATORS = {
    QuizVariant.SKINCARE: generate_skincare_recommendations,
    QuizVariant.HAIRCARE: generate_haircare_recommendations,
    QuizVariant.COMBINED: generate_recommendations,
}


def recommend(variant: QuizVariant, answers: Answers):
    """Run the generator for a quiz variant."""
    return _GENERATORS[variant](answers)


def answers_from_tags(tags: Mapping[int, str]) -> dict[int, Answer]:
    """Build an answers mapping from bare tags, e.g. {1: "Dry"}."""
    return {qid: Answer(mapping=tag) for qid, tag in tags.items()}


def all_recommendations(bundle) -> list[Recommendation]:
    """Every recommendation in a bundle, in display order."""
    recs: list[Recommendation] = []
    skincare = getattr(bundle, "skincare", None)
    if skincare is not None:
        recs.extend(skincare.am + skincare.pm + skincare.weekly)
    recs.extend(getattr(bundle, "haircare", []))
    recs.extend(getattr(bundle, "bodycare", []))
    recs.extend(getattr(bundle, "lipcare", []))
    return recs
