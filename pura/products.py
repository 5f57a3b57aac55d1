"""
Mock product records.

STORE_PRODUCTS backs the shop pages. ROUTINE_PRODUCTS is keyed by the product
name a Recommendation carries, so quiz results can be priced and carted.

Ids 1-6 are the core shop range. Ids 7, 8, 13 and 17 come from the extended
range (a second cleanser and serum, a hair oil and a gift set) so the shop's
Hair and Gift Sets filters, category pages with more than one product, and the
featured list all have something to show. They keep their extended-range ids.
"""

from pura.schemas import Product

STORE_CATEGORIES = ["All Products", "Face", "Hair", "Eyes", "Body", "Gift Sets"]

STORE_PRODUCTS: list[Product] = [
    Product(
        id="1",
        name="Gentle Cleansing Oil",
        price=48,
        original_price=55,
        image="/images/product-cleansing-oil.jpg",
        category="Cleansers",
        description="A luxurious blend of organic plant oils that gently removes makeup and impurities while nourishing your skin.",
        ingredients=["Jojoba Oil", "Rosehip Oil", "Chamomile Extract", "Vitamin E"],
        benefits=["Deep cleansing", "Hydrating", "Anti-inflammatory"],
        is_bestseller=True,
    ),
    Product(
        id="2",
        name="Botanical Face Serum",
        price=72,
        image="/images/product-face-serum.jpg",
        category="Serums",
        description="Concentrated botanical extracts deliver powerful antioxidants and vitamins for radiant, youthful skin.",
        ingredients=["Hyaluronic Acid", "Vitamin C", "Green Tea Extract", "Aloe Vera"],
        benefits=["Anti-aging", "Brightening", "Firming"],
        is_new=True,
    ),
    Product(
        id="3",
        name="Nourishing Night Cream",
        price=65,
        image="/images/product-night-cream.jpg",
        category="Moisturizers",
        description="Rich, restorative cream works overnight to repair and rejuvenate your skin with organic botanicals.",
        ingredients=["Shea Butter", "Peptides", "Lavender Oil", "Ceramides"],
        benefits=["Deep hydration", "Overnight repair", "Calming"],
        is_bestseller=True,
    ),
    Product(
        id="4",
        name="Illuminating Eye Cream",
        price=56,
        image="/images/product-eye-cream.jpg",
        category="Eye Care",
        description="Delicate formula reduces puffiness and dark circles while firming the eye area with natural actives.",
        ingredients=["Caffeine", "Retinol", "Cucumber Extract", "Collagen"],
        benefits=["Reduces puffiness", "Firms skin", "Brightens"],
        is_new=True,
    ),
    Product(
        id="5",
        name="Purifying Clay Mask",
        price=42,
        image="/images/product-clay-mask.jpg",
        category="Masks",
        description="Weekly treatment with mineral-rich clay draws out impurities while botanical extracts soothe and balance.",
        ingredients=["Bentonite Clay", "Tea Tree Oil", "Calendula", "Zinc Oxide"],
        benefits=["Detoxifying", "Pore minimizing", "Balancing"],
    ),
    Product(
        id="6",
        name="Hydrating Toner Mist",
        price=38,
        image="/images/product-toner-mist.jpg",
        category="Toners",
        description="Refreshing mist infused with organic florals and minerals to prep and hydrate your skin.",
        ingredients=["Rose Water", "Hyaluronic Acid", "Glycerin", "Botanical Extracts"],
        benefits=["Hydrating", "pH balancing", "Refreshing"],
        is_bestseller=True,
    ),
    Product(
        id="7",
        name="Vitamin C Brightening Cleanser",
        price=52,
        original_price=58,
        category="Cleansers",
        description="Energizing gel cleanser with vitamin C and citrus extracts to brighten and refresh your complexion.",
        ingredients=["Vitamin C", "Orange Extract", "Glycolic Acid", "Aloe Vera"],
        benefits=["Brightening", "Gentle exfoliation", "Antioxidant protection"],
        is_new=True,
    ),
    Product(
        id="8",
        name="Retinol Renewal Serum",
        price=89,
        category="Serums",
        description="Advanced anti-aging serum with encapsulated retinol for smoother, firmer skin with minimal irritation.",
        ingredients=["Encapsulated Retinol", "Niacinamide", "Squalane", "Peptides"],
        benefits=["Anti-aging", "Texture improvement", "Collagen boost"],
        is_bestseller=True,
    ),
    Product(
        id="13",
        name="Nourishing Hair Oil Treatment",
        price=45,
        category="Hair",
        description="Luxurious blend of organic oils to deeply nourish and restore shine to dry, damaged hair.",
        ingredients=["Argan Oil", "Coconut Oil", "Jojoba Oil", "Rosemary Extract"],
        benefits=["Deep conditioning", "Shine enhancement", "Scalp nourishment"],
    ),
    Product(
        id="17",
        name="Essential Skincare Gift Set",
        price=125,
        original_price=150,
        category="Gift Sets",
        description="Our bestselling cleanser, serum and night cream together in one gift box.",
        is_bestseller=True,
    ),
]


def _routine(id: str, name: str, price: float, category: str) -> Product:
    return Product(id=id, name=name, price=price, category=category)


ROUTINE_PRODUCTS: dict[str, Product] = {
    # Skincare & body
    "Body Cleanser - Exfoliating Wash": _routine("exfoliating-wash", "Exfoliating Body Wash", 24.99, "Body"),
    "Body Cleanser - Gentle Sensitive Wash": _routine("gentle-wash", "Gentle Sensitive Wash", 22.99, "Body"),
    "Face Serum - Brightening Vitamin C": _routine("vitamin-c-serum", "Brightening Vitamin C Serum", 34.99, "Face"),
    "Face Serum - Repair & Anti-Wrinkle": _routine("anti-wrinkle-serum", "Repair & Anti-Wrinkle Serum", 39.99, "Face"),
    "Face Cream - Barrier Repair": _routine("barrier-repair-cream", "Barrier Repair Face Cream", 29.99, "Face"),
    "Face Cream - Anti-Wrinkle Peptide": _routine("peptide-cream", "Anti-Wrinkle Peptide Cream", 32.99, "Face"),
    "Sunscreen - Mineral SPF 30": _routine("mineral-spf30", "Mineral Sunscreen SPF 30", 26.99, "Face"),
    "Sunscreen - Hybrid SPF 50+": _routine("hybrid-spf50", "Hybrid Sunscreen SPF 50+", 28.99, "Face"),
    "Body Moisturizer - Urea Repair Lotion": _routine("urea-repair-lotion", "Urea Repair Body Lotion", 27.99, "Body"),
    "Body Moisturizer - Hydration Glow Lotion": _routine("hydration-glow-lotion", "Hydration Glow Body Lotion", 25.99, "Body"),
    "Lip Balm - Repair Balm": _routine("lip-repair-balm", "Repair Lip Balm", 12.99, "Body"),
    "Lip Balm - Plumping Tint Balm": _routine("lip-plump-balm", "Plumping Tint Lip Balm", 14.99, "Body"),
    # Haircare
    "Shampoo - Anti-Hair Fall (Caffeine)": _routine("anti-hair-fall-shampoo", "Anti-Hair Fall Caffeine Shampoo", 28.99, "Hair"),
    "Shampoo - Moisture Herbal": _routine("moisture-herbal-shampoo", "Moisture Herbal Shampoo", 26.99, "Hair"),
    "Conditioner - Protein Strength": _routine("protein-strength-conditioner", "Protein Strength Conditioner", 24.99, "Hair"),
    "Conditioner - Moisture & Frizz Control": _routine("moisture-frizz-conditioner", "Moisture & Frizz Control Conditioner", 24.99, "Hair"),
    "Hair Mask - Bond Repair": _routine("bond-repair-mask", "Bond Repair Hair Mask", 32.99, "Hair"),
    "Hair Mask - Hydration Boost": _routine("hydration-boost-mask", "Hydration Boost Hair Mask", 30.99, "Hair"),
    "Hair Serum - Scalp Growth Serum": _routine("scalp-growth-serum", "Scalp Growth Serum", 38.99, "Hair"),
    "Hair Serum - Leave-In Shine Serum": _routine("leave-in-shine-serum", "Leave-In Shine Serum", 29.99, "Hair"),
}
