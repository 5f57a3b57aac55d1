"""
Unit tests for the recommendation engine: pure functions, no I/O.

Tests cover:
  Skincare quiz: slot filling, fallbacks, eye care, weekly treatments
  Haircare and combined quizzes
  Unknown tags and unfilled-slot reporting
  Table consistency against the '+'-joined key view
"""

import itertools
import logging

import pytest

from pura.schemas import (
    Answer,
    BodyConcern,
    HairConcern,
    QuizVariant,
    RoutineSlot,
    ScalpConcern,
    SkinConcern,
    SkinType,
    SunscreenPreference,
    UnfilledSlot,
)
from pura.services.product_mapping import compose_key, flat_mapping
from pura.services.recommendation import (
    SKINCARE_QUESTIONS,
    all_recommendations,
    answers_from_tags,
    generate_haircare_recommendations,
    generate_recommendations,
    generate_skincare_recommendations,
    read_tag,
    recommend,
)


def _products(recs) -> list[str]:
    return [r.product for r in recs]


DRY_BARRIER = {1: "Dry", 2: "Barrier Repair/Hydration", 3: "None", 4: "Mineral SPF 30", 5: "Hydration"}


# ── Skincare quiz ───────────────────────────────────────────────────────────


class TestSkincareRecommendations:
    def test_dry_barrier_routine(self):
        result = generate_skincare_recommendations(answers_from_tags(DRY_BARRIER))
        routine = result.skincare

        assert _products(routine.am) == [
            "Body Cleanser - Gentle Sensitive Wash",
            "Face Cream - Barrier Repair",
            "Sunscreen - Mineral SPF 30",
        ]
        assert _products(routine.pm) == [
            "Body Cleanser - Gentle Sensitive Wash",
            "Face Cream - Barrier Repair",
        ]
        assert _products(routine.weekly) == [
            "Face Mask - Hydration Glow Mask",
            "Face Scrub - Enzyme Exfoliant",
        ]
        assert _products(result.bodycare) == ["Body Moisturizer - Hydration Glow Lotion"]
        assert len(result.lipcare) == 2

    def test_is_deterministic(self):
        answers = answers_from_tags(DRY_BARRIER)
        assert generate_skincare_recommendations(answers) == generate_skincare_recommendations(answers)

    def test_accepts_plain_dict_answers(self):
        answers = {qid: {"id": "x", "text": "x", "mapping": tag} for qid, tag in DRY_BARRIER.items()}
        assert generate_skincare_recommendations(answers) == generate_skincare_recommendations(
            answers_from_tags(DRY_BARRIER)
        )

    def test_lipcare_always_two_entries(self):
        for answers in ({}, DRY_BARRIER, {1: "Oily", 2: "Detox/Exfoliating"}):
            result = generate_skincare_recommendations(answers_from_tags(answers))
            assert _products(result.lipcare) == ["Lip Balm - Repair Balm", "Lip Balm - Plumping Tint Balm"]

    def test_scrub_always_in_weekly(self):
        for concern in SkinConcern:
            result = generate_skincare_recommendations(answers_from_tags({2: concern.value}))
            assert _products(result.skincare.weekly)[-1] == "Face Scrub - Enzyme Exfoliant"

    def test_missing_skin_type_behaves_as_normal(self):
        result = generate_skincare_recommendations(answers_from_tags({2: "Anti-Wrinkle"}))
        cleanser = result.skincare.am[0]
        assert cleanser.product == "Body Cleanser - Gentle Sensitive Wash"
        assert cleanser.reason == "to maintain your skin's natural balance"
        assert "Face Cream - Anti-Wrinkle Peptide" in _products(result.skincare.am)

    def test_empty_answers_use_defaults(self):
        result = generate_skincare_recommendations({})
        assert _products(result.skincare.am) == [
            "Body Cleanser - Gentle Sensitive Wash",
            "Face Serum - Brightening Vitamin C",
            "Sunscreen - Hybrid SPF 50+",
        ]
        assert _products(result.bodycare) == ["Body Moisturizer - Hydration Glow Lotion"]
        # Normal + Brightening has no moisturizer
        assert result.unfilled_slots == [UnfilledSlot(slot=RoutineSlot.MOISTURIZER, key="Normal+Brightening")]

    def test_empty_mapping_counts_as_unanswered(self):
        result = generate_skincare_recommendations({1: Answer(mapping="")})
        assert result.skincare.am[0].reason == "to maintain your skin's natural balance"

    def test_serum_placement_by_concern(self):
        result = generate_skincare_recommendations(
            answers_from_tags({1: "Normal", 2: "Anti-Wrinkle", 3: "Brightening"})
        )
        assert "Face Serum - Brightening Vitamin C" in _products(result.skincare.am)
        assert "Face Serum - Repair & Anti-Wrinkle" in _products(result.skincare.pm)
        assert "Face Serum - Repair & Anti-Wrinkle" not in _products(result.skincare.am)

    def test_duplicate_secondary_concern_adds_serum_twice(self):
        result = generate_skincare_recommendations(answers_from_tags({2: "Brightening", 3: "Brightening"}))
        assert _products(result.skincare.am).count("Face Serum - Brightening Vitamin C") == 2

    @pytest.mark.parametrize("answers", [{2: "Eye Concerns"}, {2: "Brightening", 3: "Eye Concerns"}])
    def test_eye_concerns_add_am_and_pm_eye_cream(self, answers):
        result = generate_skincare_recommendations(answers_from_tags(answers))
        assert "Eye Cream - De-Puffing Gel" in _products(result.skincare.am)
        assert "Eye Cream - Brightening & Firming" in _products(result.skincare.pm)

    def test_no_eye_cream_without_eye_concerns(self):
        result = generate_skincare_recommendations(answers_from_tags(DRY_BARRIER))
        assert not any(r.product.startswith("Eye Cream") for r in all_recommendations(result))

    def test_oily_detox_routine(self):
        result = generate_skincare_recommendations(
            answers_from_tags({1: "Oily", 2: "Detox/Exfoliating", 5: "Exfoliating"})
        )
        assert result.skincare.am[0].product == "Body Cleanser - Exfoliating Wash"
        assert _products(result.skincare.weekly) == [
            "Face Mask - Detox Clay Mask",
            "Face Scrub - Enzyme Exfoliant",
        ]
        assert _products(result.bodycare) == ["Body Cleanser - Exfoliating Wash"]

    def test_weekly_mask_only_for_mask_concerns(self):
        result = generate_skincare_recommendations(answers_from_tags({2: "Anti-Wrinkle"}))
        assert _products(result.skincare.weekly) == ["Face Scrub - Enzyme Exfoliant"]


# ── Unknown tags ────────────────────────────────────────────────────────────


class TestUnknownTags:
    def test_unknown_skin_type_leaves_cleanser_out(self):
        result = generate_skincare_recommendations(answers_from_tags({1: "Greasy", 2: "Brightening"}))
        assert not any(r.slot == "Face Cleanser (AM/PM)" for r in result.skincare.am)
        assert UnfilledSlot(slot=RoutineSlot.CLEANSER, key="Greasy+Brightening") in result.unfilled_slots

    def test_unknown_sunscreen_is_reported(self):
        result = generate_skincare_recommendations(answers_from_tags({4: "SPF 100"}))
        assert not any(r.slot == "Sunscreen (AM)" for r in result.skincare.am)
        assert UnfilledSlot(slot=RoutineSlot.SUNSCREEN, key="SPF 100") in result.unfilled_slots

    def test_unknown_body_concern_reports_both_body_slots(self):
        result = generate_skincare_recommendations(answers_from_tags({5: "Tattoo Care"}))
        assert result.bodycare == []
        assert {u.slot for u in result.unfilled_slots} >= {
            RoutineSlot.BODY_WASH,
            RoutineSlot.BODY_MOISTURIZER,
        }

    def test_unfilled_slots_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pura.services.recommendation"):
            generate_skincare_recommendations(answers_from_tags({1: "Greasy"}))
        assert any("Greasy" in r.getMessage() for r in caplog.records)

    def test_read_tag(self):
        answers = answers_from_tags({1: "Dry", 2: "Glow"})
        assert read_tag(answers, 1, SKINCARE_QUESTIONS).member is SkinType.DRY
        assert read_tag(answers, 2, SKINCARE_QUESTIONS).member is None
        assert read_tag(answers, 2, SKINCARE_QUESTIONS).raw == "Glow"
        assert read_tag(answers, 4, SKINCARE_QUESTIONS).member is SunscreenPreference.HYBRID_SPF50


# ── Haircare quiz ───────────────────────────────────────────────────────────


class TestHaircareRecommendations:
    def test_defaults(self):
        result = generate_haircare_recommendations({})
        assert _products(result.haircare) == [
            "Shampoo - Moisture Herbal",
            "Conditioner - Moisture & Frizz Control",
            "Hair Mask - Hydration Boost",
            "Hair Serum - Leave-In Shine Serum",
        ]
        assert result.unfilled_slots == []

    def test_hair_fall_and_shine(self):
        result = generate_haircare_recommendations(answers_from_tags({1: "Anti-Hair Fall", 2: "Shine"}))
        assert _products(result.haircare) == [
            "Shampoo - Anti-Hair Fall (Caffeine)",
            "Hair Serum - Scalp Growth Serum",
            "Hair Serum - Leave-In Shine Serum",
        ]
        assert {u.key for u in result.unfilled_slots} == {"Shine+Conditioner", "Shine+HairMask"}

    def test_repair_has_no_leave_in(self):
        result = generate_haircare_recommendations(answers_from_tags({1: "Moisture", 2: "Repair"}))
        assert "Hair Serum - Leave-In Shine Serum" not in _products(result.haircare)
        assert "Hair Mask - Bond Repair" in _products(result.haircare)


# ── Combined (legacy) quiz ──────────────────────────────────────────────────


class TestCombinedRecommendations:
    def test_all_sections(self):
        answers = answers_from_tags({
            1: "Oily",
            2: "Detox/Exfoliating",
            3: "Eye Concerns",
            4: "Mineral SPF 30",
            5: "Clarifying/Balancing",
            6: "Repair",
            7: "Exfoliating",
        })
        result = generate_recommendations(answers)

        assert result.variant == "combined"
        assert result.skincare.am[0].product == "Body Cleanser - Exfoliating Wash"
        assert "Eye Cream - De-Puffing Gel" in _products(result.skincare.am)
        assert _products(result.haircare) == [
            "Shampoo - Anti-Hair Fall (Caffeine)",
            "Conditioner - Protein Strength",
            "Hair Mask - Bond Repair",
        ]
        assert _products(result.bodycare) == ["Body Cleanser - Exfoliating Wash"]
        assert len(result.lipcare) == 2
        assert {u.slot for u in result.unfilled_slots} == {RoutineSlot.SERUM, RoutineSlot.MOISTURIZER}

    def test_recommend_dispatches_by_variant(self):
        assert recommend(QuizVariant.SKINCARE, {}).variant == "skincare"
        assert recommend(QuizVariant.HAIRCARE, {}).variant == "haircare"
        assert recommend(QuizVariant.COMBINED, {}).variant == "combined"

    def test_all_recommendations_order(self):
        result = generate_skincare_recommendations(answers_from_tags(DRY_BARRIER))
        recs = all_recommendations(result)
        assert recs[0].product == "Body Cleanser - Gentle Sensitive Wash"
        assert _products(recs[-2:]) == ["Lip Balm - Repair Balm", "Lip Balm - Plumping Tint Balm"]
        assert len(recs) == 3 + 2 + 2 + 1 + 2


# ── Tables ──────────────────────────────────────────────────────────────────


class TestProductMapping:
    def test_flat_keys(self):
        flat = flat_mapping()
        assert flat["Dry+*"].product == "Body Cleanser - Gentle Sensitive Wash"
        assert flat["Oily+Detox/Exfoliating"].product == "Body Cleanser - Exfoliating Wash"
        assert flat["Dry+Barrier Repair/Hydration"].product == "Face Cream - Barrier Repair"
        assert flat["Eye Concerns+AM"].product == "Eye Cream - De-Puffing Gel"
        assert flat["Detox/Exfoliating+Mask"].product == "Face Mask - Detox Clay Mask"
        assert flat["General+Scrub"].product == "Face Scrub - Enzyme Exfoliant"
        assert flat["Moisture+Shampoo"].product == "Shampoo - Moisture Herbal"
        assert flat["Anti-Hair Fall+ScalpSerum"].product == "Hair Serum - Scalp Growth Serum"
        assert flat["Default+LipRepair"].product == "Lip Balm - Repair Balm"

    def test_compose_key(self):
        assert compose_key(SkinType.DRY, "*") == "Dry+*"
        assert compose_key(HairConcern.SHINE, "LeaveIn") == "Shine+LeaveIn"

    def test_every_skincare_combination_fills_or_reports(self):
        """Each slot either holds a known table product or shows up as unfilled."""
        known = {r.product for r in flat_mapping().values()}
        combos = itertools.product(SkinType, SkinConcern, SkinConcern, SunscreenPreference, BodyConcern)
        for skin, primary, secondary, spf, body in combos:
            if primary is SkinConcern.NONE:
                continue
            result = generate_skincare_recommendations(
                answers_from_tags({1: skin.value, 2: primary.value, 3: secondary.value, 4: spf.value, 5: body.value})
            )
            assert {r.product for r in all_recommendations(result)} <= known
            assert any(r.slot == "Sunscreen (AM)" for r in result.skincare.am)
            for miss in result.unfilled_slots:
                assert miss.slot in {RoutineSlot.CLEANSER, RoutineSlot.SERUM, RoutineSlot.MOISTURIZER}

    def test_every_haircare_combination_has_shampoo(self):
        for scalp, hair in itertools.product(ScalpConcern, HairConcern):
            result = generate_haircare_recommendations(
                answers_from_tags({1: scalp.value, 2: hair.value})
            )
            assert result.haircare[0].slot == "Shampoo"
