"""
Static product mapping: which product fills which routine slot for which tags.

One table per slot, keyed by answer-tag enums. ``flat_mapping()`` renders the
same data under the storefront's historical '+'-joined string keys
(e.g. "Dry+*", "Moisture+Shampoo") for clients and diagnostics.
"""

from typing import Union

from pura.schemas import (
    BodyConcern,
    HairConcern,
    Recommendation as R,
    RoutineTime,
    ScalpConcern,
    SkinConcern,
    SkinType,
    SunscreenPreference,
    Wildcard,
)

KEY_SEPARATOR = "+"


def compose_key(*parts) -> str:
    """Join tag values into a lookup key, e.g. ("Dry", "*") -> "Dry+*"."""
    return KEY_SEPARATOR.join(getattr(p, "value", p) for p in parts)


# ── Skincare ─────────────────────────────────────────────────────────────────

_FACE_CLEANSER = "Face Cleanser (AM/PM)"
_MOISTURIZER = "Moisturizer (AM/PM)"

CLEANSERS: dict[tuple[SkinType, Union[SkinConcern, Wildcard]], R] = {
    (SkinType.OILY, SkinConcern.DETOX): R(
        product="Body Cleanser - Exfoliating Wash",
        slot=_FACE_CLEANSER,
        reason="to control oil and unclog pores",
    ),
    (SkinType.COMBINATION, SkinConcern.DETOX): R(
        product="Body Cleanser - Exfoliating Wash",
        slot=_FACE_CLEANSER,
        reason="to balance your combination skin and prevent breakouts",
    ),
    (SkinType.DRY, Wildcard.ANY): R(
        product="Body Cleanser - Gentle Sensitive Wash",
        slot=_FACE_CLEANSER,
        reason="to gently cleanse without stripping moisture",
    ),
    (SkinType.SENSITIVE, Wildcard.ANY): R(
        product="Body Cleanser - Gentle Sensitive Wash",
        slot=_FACE_CLEANSER,
        reason="to soothe and protect your sensitive skin",
    ),
    (SkinType.NORMAL, Wildcard.ANY): R(
        product="Body Cleanser - Gentle Sensitive Wash",
        slot=_FACE_CLEANSER,
        reason="to maintain your skin's natural balance",
    ),
}

SERUMS: dict[SkinConcern, R] = {
    SkinConcern.BRIGHTENING: R(
        product="Face Serum - Brightening Vitamin C",
        slot="Serum (AM)",
        reason="to brighten and even out your skin tone",
    ),
    SkinConcern.ANTI_WRINKLE: R(
        product="Face Serum - Repair & Anti-Wrinkle",
        slot="Serum (PM)",
        reason="to target fine lines and boost firmness",
    ),
}

MOISTURIZERS: dict[tuple[SkinType, SkinConcern], R] = {
    (SkinType.DRY, SkinConcern.BARRIER_REPAIR): R(
        product="Face Cream - Barrier Repair",
        slot=_MOISTURIZER,
        reason="to restore and strengthen your skin barrier",
    ),
    (SkinType.SENSITIVE, SkinConcern.BARRIER_REPAIR): R(
        product="Face Cream - Barrier Repair",
        slot=_MOISTURIZER,
        reason="to calm and repair your sensitive skin",
    ),
    (SkinType.OILY, SkinConcern.ANTI_WRINKLE): R(
        product="Face Cream - Anti-Wrinkle Peptide",
        slot=_MOISTURIZER,
        reason="to fight aging without adding excess oil",
    ),
    (SkinType.COMBINATION, SkinConcern.ANTI_WRINKLE): R(
        product="Face Cream - Anti-Wrinkle Peptide",
        slot=_MOISTURIZER,
        reason="to target aging concerns while balancing your skin",
    ),
    (SkinType.NORMAL, SkinConcern.ANTI_WRINKLE): R(
        product="Face Cream - Anti-Wrinkle Peptide",
        slot=_MOISTURIZER,
        reason="to prevent and reduce signs of aging",
    ),
}

EYE_CARE: dict[RoutineTime, R] = {
    RoutineTime.AM: R(
        product="Eye Cream - De-Puffing Gel",
        slot="Eye Cream (AM)",
        reason="to reduce puffiness and refresh tired eyes",
    ),
    RoutineTime.PM: R(
        product="Eye Cream - Brightening & Firming",
        slot="Eye Cream (PM)",
        reason="to brighten dark circles and firm the eye area",
    ),
}

SUNSCREENS: dict[SunscreenPreference, R] = {
    SunscreenPreference.MINERAL_SPF30: R(
        product="Sunscreen - Mineral SPF 30",
        slot="Sunscreen (AM)",
        reason="to provide gentle, physical sun protection",
    ),
    SunscreenPreference.HYBRID_SPF50: R(
        product="Sunscreen - Hybrid SPF 50+",
        slot="Sunscreen (AM)",
        reason="to give you lightweight, high-level protection",
    ),
}

WEEKLY_MASKS: dict[SkinConcern, R] = {
    SkinConcern.DETOX: R(
        product="Face Mask - Detox Clay Mask",
        slot="Weekly Treatment",
        reason="to deeply cleanse and purify your pores",
    ),
    SkinConcern.BRIGHTENING: R(
        product="Face Mask - Hydration Glow Mask",
        slot="Weekly Treatment",
        reason="to boost radiance and hydration",
    ),
    SkinConcern.BARRIER_REPAIR: R(
        product="Face Mask - Hydration Glow Mask",
        slot="Weekly Treatment",
        reason="to intensely hydrate and restore your skin",
    ),
}

GENERAL_SCRUB = R(
    product="Face Scrub - Enzyme Exfoliant",
    slot="Weekly Treatment",
    reason="to gently remove dead skin and improve texture",
)

# ── Haircare ─────────────────────────────────────────────────────────────────

SHAMPOOS: dict[ScalpConcern, R] = {
    ScalpConcern.ANTI_HAIR_FALL: R(
        product="Shampoo - Anti-Hair Fall (Caffeine)",
        slot="Shampoo",
        reason="to strengthen hair and reduce hair fall",
    ),
    ScalpConcern.CLARIFYING: R(
        product="Shampoo - Anti-Hair Fall (Caffeine)",
        slot="Shampoo",
        reason="to balance oily scalp and promote healthy growth",
    ),
    ScalpConcern.MOISTURE: R(
        product="Shampoo - Moisture Herbal",
        slot="Shampoo",
        reason="to gently cleanse and nourish dry hair",
    ),
}

CONDITIONERS: dict[HairConcern, R] = {
    HairConcern.REPAIR: R(
        product="Conditioner - Protein Strength",
        slot="Conditioner",
        reason="to rebuild and strengthen damaged hair",
    ),
    HairConcern.STRENGTH: R(
        product="Conditioner - Protein Strength",
        slot="Conditioner",
        reason="to fortify weak hair and add volume",
    ),
    HairConcern.MOISTURE_FRIZZ: R(
        product="Conditioner - Moisture & Frizz Control",
        slot="Conditioner",
        reason="to hydrate and smooth frizzy hair",
    ),
}

HAIR_MASKS: dict[HairConcern, R] = {
    HairConcern.REPAIR: R(
        product="Hair Mask - Bond Repair",
        slot="Hair Mask",
        reason="to deeply repair and restore damaged bonds",
    ),
    HairConcern.MOISTURE_FRIZZ: R(
        product="Hair Mask - Hydration Boost",
        slot="Hair Mask",
        reason="to intensely moisturize and control frizz",
    ),
}

SCALP_TREATMENTS: dict[ScalpConcern, R] = {
    ScalpConcern.ANTI_HAIR_FALL: R(
        product="Hair Serum - Scalp Growth Serum",
        slot="Scalp Treatment",
        reason="to stimulate growth and prevent hair loss",
    ),
}

LEAVE_INS: dict[HairConcern, R] = {
    HairConcern.SHINE: R(
        product="Hair Serum - Leave-In Shine Serum",
        slot="Leave-In Treatment",
        reason="to add brilliant shine and smoothness",
    ),
    HairConcern.MOISTURE_FRIZZ: R(
        product="Hair Serum - Leave-In Shine Serum",
        slot="Leave-In Treatment",
        reason="to control frizz and add lustrous shine",
    ),
}

# ── Body & lip ───────────────────────────────────────────────────────────────

BODY_WASHES: dict[BodyConcern, R] = {
    BodyConcern.GENTLE: R(
        product="Body Cleanser - Gentle Sensitive Wash",
        slot="Body Cleanser",
        reason="to gently cleanse sensitive body skin",
    ),
    BodyConcern.EXFOLIATING: R(
        product="Body Cleanser - Exfoliating Wash",
        slot="Body Cleanser",
        reason="to smooth and refine rough, bumpy skin",
    ),
}

BODY_MOISTURIZERS: dict[BodyConcern, R] = {
    BodyConcern.UREA_REPAIR: R(
        product="Body Moisturizer - Urea Repair Lotion",
        slot="Body Moisturizer",
        reason="to intensely repair very dry, rough patches",
    ),
    BodyConcern.HYDRATION: R(
        product="Body Moisturizer - Hydration Glow Lotion",
        slot="Body Moisturizer",
        reason="to nourish and give your skin a healthy glow",
    ),
}

LIP_CARE: tuple[R, R] = (
    R(
        product="Lip Balm - Repair Balm",
        slot="Lip Care",
        reason="to heal and protect your lips",
    ),
    R(
        product="Lip Balm - Plumping Tint Balm",
        slot="Lip Care",
        reason="to add subtle color and fullness",
    ),
)


def flat_mapping() -> dict[str, R]:
    """All table entries under their '+'-joined string keys."""
    flat: dict[str, R] = {}
    for (skin, concern), rec in CLEANSERS.items():
        flat[compose_key(skin, concern)] = rec
    for concern, rec in SERUMS.items():
        flat[compose_key(concern)] = rec
    for (skin, concern), rec in MOISTURIZERS.items():
        flat[compose_key(skin, concern)] = rec
    for time, rec in EYE_CARE.items():
        flat[compose_key(SkinConcern.EYE_CONCERNS, time)] = rec
    for pref, rec in SUNSCREENS.items():
        flat[compose_key(pref)] = rec
    for concern, rec in WEEKLY_MASKS.items():
        flat[compose_key(concern, "Mask")] = rec
    flat[compose_key("General", "Scrub")] = GENERAL_SCRUB
    for scalp, rec in SHAMPOOS.items():
        flat[compose_key(scalp, "Shampoo")] = rec
    for hair, rec in CONDITIONERS.items():
        flat[compose_key(hair, "Conditioner")] = rec
    for hair, rec in HAIR_MASKS.items():
        flat[compose_key(hair, "HairMask")] = rec
    for scalp, rec in SCALP_TREATMENTS.items():
        flat[compose_key(scalp, "ScalpSerum")] = rec
    for hair, rec in LEAVE_INS.items():
        flat[compose_key(hair, "LeaveIn")] = rec
    for body, rec in BODY_WASHES.items():
        flat[compose_key(body, "BodyWash")] = rec
    for body, rec in BODY_MOISTURIZERS.items():
        flat[compose_key(body, "BodyMoisturizer")] = rec
    flat[compose_key("Default", "LipRepair")] = LIP_CARE[0]
    flat[compose_key("Default", "LipPlump")] = LIP_CARE[1]
    return flat
