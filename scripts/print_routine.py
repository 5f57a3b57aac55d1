#!/usr/bin/env python3
"""Quick smoke test: runs the recommendation engine on a sample set of answers."""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

logging.basicConfig(level=logging.DEBUG)

from pura.schemas import QuizVariant
from pura.services.catalog import ProductCatalog
from pura.services.cart import quote_routine
from pura.services.recommendation import all_recommendations, answers_from_tags, recommend

SAMPLE_ANSWERS = {
    QuizVariant.SKINCARE: {1: "Dry", 2: "Barrier Repair/Hydration", 3: "Eye Concerns", 4: "Mineral SPF 30", 5: "Hydration"},
    QuizVariant.HAIRCARE: {1: "Anti-Hair Fall", 2: "Shine"},
    QuizVariant.COMBINED: {1: "Oily", 2: "Detox/Exfoliating", 4: "Hybrid SPF 50+", 5: "Moisture", 6: "Repair", 7: "Exfoliating"},
}


def main(variant: QuizVariant) -> None:
    bundle = recommend(variant, answers_from_tags(SAMPLE_ANSWERS[variant]))
    print("=" * 60)
    print(f"{variant.value} routine")
    print("=" * 60)
    print(bundle.model_dump_json(indent=2))

    products = ProductCatalog().routine_products_for(all_recommendations(bundle))
    quote = quote_routine(products)
    print(f"\n{quote.product_count} products: {quote.original_total} -> {quote.final_total}")
    if bundle.unfilled_slots:
        print(f"Unfilled: {[u.key for u in bundle.unfilled_slots]}")


if __name__ == "__main__":
    main(QuizVariant(sys.argv[1]) if len(sys.argv) > 1 else QuizVariant.SKINCARE)
