from gemini_client.models import HarmBlockThreshold, HarmCategory, HarmProbability, SafetyRating
from gemini_client.safety import (
    ADJUSTABLE_CATEGORIES,
    HarmProbabilities,
    custom_safety_settings,
    default_safety_settings,
    probability_from_str,
    safety_settings_from,
)


def test_safety_settings_from_covers_adjustable_categories():
    settings = safety_settings_from(HarmBlockThreshold.BLOCK_ONLY_HIGH)
    assert [s.category for s in settings] == list(ADJUSTABLE_CATEGORIES)
    assert {s.threshold for s in settings} == {HarmBlockThreshold.BLOCK_ONLY_HIGH}


def test_default_blocks_low_and_above():
    assert all(s.threshold is HarmBlockThreshold.BLOCK_LOW_AND_ABOVE for s in default_safety_settings())


def test_custom_settings_skip_unset_categories():
    settings = custom_safety_settings(
        harassment=HarmBlockThreshold.BLOCK_NONE,
        civic_integrity=HarmBlockThreshold.OFF,
    )
    assert [(s.category, s.threshold) for s in settings] == [
        (HarmCategory.HARASSMENT, HarmBlockThreshold.BLOCK_NONE),
        (HarmCategory.CIVIC_INTEGRITY, HarmBlockThreshold.OFF),
    ]
    assert settings[1].to_wire() == {"category": "HARM_CATEGORY_CIVIC_INTEGRITY", "threshold": "OFF"}


def test_probability_from_str():
    assert probability_from_str("LOW") is HarmProbability.LOW
    assert probability_from_str("MEDIUM") is HarmProbability.MEDIUM
    assert probability_from_str("HIGH") is HarmProbability.HIGH
    assert probability_from_str("whatever") is HarmProbability.NEGLIGIBLE
    assert probability_from_str("HARM_PROBABILITY_UNSPECIFIED") is HarmProbability.NEGLIGIBLE


def test_harm_probabilities_from_ratings():
    ratings = [
        SafetyRating(category=HarmCategory.HARASSMENT, probability=HarmProbability.LOW),
        SafetyRating(category=HarmCategory.DANGEROUS_CONTENT, probability=HarmProbability.HIGH, blocked=True),
    ]
    summary = HarmProbabilities.from_ratings(ratings)

    assert summary.harassment is HarmProbability.LOW
    assert summary.dangerous_content is HarmProbability.HIGH
    assert summary.hate_speech is None
    assert list(summary) == [
        ("HARM_CATEGORY_HARASSMENT", HarmProbability.LOW),
        ("HARM_CATEGORY_HATE_SPEECH", None),
        ("HARM_CATEGORY_SEXUALLY_EXPLICIT", None),
        ("HARM_CATEGORY_DANGEROUS_CONTENT", HarmProbability.HIGH),
        ("HARM_CATEGORY_CIVIC_INTEGRITY", None),
    ]
    assert "HIGH" in repr(summary)


def test_harm_probabilities_from_ratings_normalizes_unspecified_and_unknown():
    ratings = [
        SafetyRating(category=HarmCategory.HARASSMENT, probability=HarmProbability.UNSPECIFIED),
        SafetyRating.model_validate({"category": "HARM_CATEGORY_HATE_SPEECH", "probability": "VERY_HIGH"}),
        SafetyRating.model_validate({"category": "HARM_CATEGORY_SOMETHING_NEW", "probability": "HIGH"}),
    ]
    summary = HarmProbabilities.from_ratings(ratings)

    assert summary.harassment is HarmProbability.NEGLIGIBLE
    assert summary.hate_speech is HarmProbability.NEGLIGIBLE
    assert [category for category, _ in summary] == [c.value for c in ADJUSTABLE_CATEGORIES]
