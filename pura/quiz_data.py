"""
Quiz question sets per variant and language.

Question ids are 1-based ordinals within a variant; the recommendation engine
reads answers by these ids.
"""

from pura.schemas import AnswerOption, Language, QuizQuestion, QuizVariant


def _q(id: int, section: str, question: str, answers: list[tuple[str, str, str]], optional: bool = False) -> QuizQuestion:
    return QuizQuestion(
        id=id,
        section=section,
        question=question,
        answers=tuple(AnswerOption(id=a, text=t, mapping=m) for a, t, m in answers),
        optional=optional,
    )


_CONCERNS_EN = [
    ("a", "Dullness and uneven skin tone", "Brightening"),
    ("b", "Fine lines, wrinkles, and loss of firmness", "Anti-Wrinkle"),
    ("c", "Dehydration and a weak skin barrier", "Barrier Repair/Hydration"),
    ("d", "Clogged pores and occasional breakouts", "Detox/Exfoliating"),
    ("e", "Puffiness and dark circles around the eyes", "Eye Concerns"),
]

_CONCERNS_DE = [
    ("a", "Mattheit und ungleichmäßiger Hautton", "Brightening"),
    ("b", "Feine Linien, Falten und Verlust der Festigkeit", "Anti-Wrinkle"),
    ("c", "Dehydrierung und schwache Hautbarriere", "Barrier Repair/Hydration"),
    ("d", "Verstopfte Poren und gelegentliche Ausbrüche", "Detox/Exfoliating"),
    ("e", "Schwellungen und Augenringe", "Eye Concerns"),
]

_SKIN_EN = [
    _q(1, "skincare", "How does your skin typically feel by the end of the day?", [
        ("a", "Shiny and greasy", "Oily"),
        ("b", "Tight, flaky, or rough", "Dry"),
        ("c", "Oily in the T-zone but dry elsewhere", "Combination"),
        ("d", "Comfortable and balanced", "Normal"),
        ("e", "Easily irritated, red, or itchy", "Sensitive"),
    ]),
    _q(2, "skincare", "What is your primary skin concern?", _CONCERNS_EN),
    _q(3, "skincare", "What is your secondary skin concern? (Optional)",
       _CONCERNS_EN + [("f", "Skip this question", "None")], optional=True),
    _q(4, "skincare", "How do you like your sunscreen to feel?", [
        ("a", "A physical barrier, great for sensitive skin", "Mineral SPF 30"),
        ("b", "Lightweight with high protection", "Hybrid SPF 50+"),
    ]),
]

_SKIN_DE = [
    _q(1, "skincare", "Wie fühlt sich Ihre Haut normalerweise am Ende des Tages an?", [
        ("a", "Glänzend und fettig", "Oily"),
        ("b", "Straff, schuppig oder rau", "Dry"),
        ("c", "Fettig in der T-Zone, aber anderswo trocken", "Combination"),
        ("d", "Angenehm und ausgeglichen", "Normal"),
        ("e", "Leicht gereizt, rot oder juckend", "Sensitive"),
    ]),
    _q(2, "skincare", "Was ist Ihr Haupthautproblem?", _CONCERNS_DE),
    _q(3, "skincare", "Was ist Ihr zweites Hautproblem? (Optional)",
       _CONCERNS_DE + [("f", "Diese Frage überspringen", "None")], optional=True),
    _q(4, "skincare", "Wie soll sich Ihr Sonnenschutz anfühlen?", [
        ("a", "Eine physische Barriere, ideal für empfindliche Haut", "Mineral SPF 30"),
        ("b", "Leicht mit hohem Schutz", "Hybrid SPF 50+"),
    ]),
]


def _body(id: int, language: Language) -> QuizQuestion:
    if language == Language.DE:
        return _q(id, "bodycare", "Wie ist Ihre Körperhaut?", [
            ("a", "Neigt zu Empfindlichkeit und Trockenheit", "Gentle/Sensitive"),
            ("b", "Etwas holprig, matt oder neigt zu Körperakne", "Exfoliating"),
            ("c", "Sehr trocken, mit rauen Stellen", "Urea Repair"),
            ("d", "Normal, könnte aber einen Feuchtigkeitsschub gebrauchen", "Hydration"),
        ])
    return _q(id, "bodycare", "What's your body skin like?", [
        ("a", "Prone to sensitivity and dryness", "Gentle/Sensitive"),
        ("b", "A bit bumpy, dull, or prone to body acne", "Exfoliating"),
        ("c", "Very dry, with rough patches", "Urea Repair"),
        ("d", "Normal, but could use a hydration boost", "Hydration"),
    ])


def _scalp(id: int, language: Language) -> QuizQuestion:
    if language == Language.DE:
        return _q(id, "haircare", "Was ist Ihr Hauptkopfhautproblem?", [
            ("a", "Haarausfall oder dünner werdendes Haar", "Anti-Hair Fall"),
            ("b", "Trockenheit und etwas Schuppenbildung", "Moisture"),
            ("c", "Fettig und wird schnell fettig", "Clarifying/Balancing"),
            ("d", "Keine größeren Probleme, fühlt sich ausgeglichen an", "Moisture"),
        ])
    return _q(id, "haircare", "What is your main scalp concern?", [
        ("a", "Hair fall or thinning", "Anti-Hair Fall"),
        ("b", "Dryness and some flaking", "Moisture"),
        ("c", "Oily and gets greasy quickly", "Clarifying/Balancing"),
        ("d", "No major issues, it feels balanced", "Moisture"),
    ])


def _hair(id: int, language: Language) -> QuizQuestion:
    if language == Language.DE:
        return _q(id, "haircare", "Was ist Ihr Haupthaarproblem?", [
            ("a", "Schäden, Spliss und Bruch", "Repair"),
            ("b", "Trockenheit, Frizz und Feuchtigkeitsmangel", "Moisture/Frizz"),
            ("c", "Mangel an Glanz und Leuchtkraft", "Shine"),
            ("d", "Fühlt sich schwach an und fehlt Volumen", "Strength"),
        ])
    return _q(id, "haircare", "What is your primary hair concern?", [
        ("a", "Damage, split ends, and breakage", "Repair"),
        ("b", "Dryness, frizz, and lack of moisture", "Moisture/Frizz"),
        ("c", "Lack of shine and luster", "Shine"),
        ("d", "It feels weak and lacks volume", "Strength"),
    ])


def _skin(language: Language) -> list[QuizQuestion]:
    return _SKIN_DE if language == Language.DE else _SKIN_EN


QUIZ_QUESTIONS: dict[QuizVariant, dict[Language, tuple[QuizQuestion, ...]]] = {
    QuizVariant.SKINCARE: {
        lang: tuple(_skin(lang) + [_body(5, lang)]) for lang in Language
    },
    QuizVariant.HAIRCARE: {
        lang: (_scalp(1, lang), _hair(2, lang)) for lang in Language
    },
    # Legacy single quiz: skin questions 1-4, then scalp, hair, body as 5-7
    QuizVariant.COMBINED: {
        lang: tuple(_skin(lang) + [_scalp(5, lang), _hair(6, lang), _body(7, lang)])
        for lang in Language
    },
}


def get_questions(variant: QuizVariant, language: Language = Language.EN) -> tuple[QuizQuestion, ...]:
    return QUIZ_QUESTIONS[variant][language]


# Results page intro line: (name, first concern, second concern)
INTRO_TEMPLATES: dict[QuizVariant, dict[Language, str]] = {
    QuizVariant.SKINCARE: {
        Language.EN: "Hi {name}! Based on your answers, we've curated the perfect skincare routine to help you achieve your goals of {first} and {second} body care.",
        Language.DE: "Hallo {name}! Basierend auf Ihren Antworten haben wir die perfekte Hautpflegeroutine zusammengestellt, um Ihre Ziele von {first} und {second} Körperpflege zu erreichen.",
    },
    QuizVariant.HAIRCARE: {
        Language.EN: "Hi {name}! Based on your answers, we've curated the perfect haircare routine to help you achieve your goals of {first} scalp care and {second} hair treatment.",
        Language.DE: "Hallo {name}! Basierend auf Ihren Antworten haben wir die perfekte Haarpflegeroutine zusammengestellt, um Ihre Ziele von {first} Kopfhautpflege und {second} Haarbehandlung zu erreichen.",
    },
    QuizVariant.COMBINED: {
        Language.EN: "Hi {name}! Based on your answers, we've curated the perfect routine to help you achieve your goals of {first} skin and {second} hair care.",
        Language.DE: "Hallo {name}! Basierend auf Ihren Antworten haben wir die perfekte Routine zusammengestellt, um Ihre Ziele von {first} Haut- und {second} Haarpflege zu erreichen.",
    },
}

DEFAULT_NAME: dict[Language, str] = {Language.EN: "there", Language.DE: ""}
