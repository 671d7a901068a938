"""Safety setting presets and per-category probability summaries."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models.safety import (
    HarmBlockThreshold,
    HarmCategory,
    HarmProbability,
    SafetyRating,
    SafetySetting,
)

# Categories the API lets callers tune on Gemini models.
ADJUSTABLE_CATEGORIES: Tuple[HarmCategory, ...] = (
    HarmCategory.HARASSMENT,
    HarmCategory.HATE_SPEECH,
    HarmCategory.SEXUALLY_EXPLICIT,
    HarmCategory.DANGEROUS_CONTENT,
    HarmCategory.CIVIC_INTEGRITY,
)


def safety_settings_from(threshold: HarmBlockThreshold) -> List[SafetySetting]:
    """Apply one threshold to every adjustable category."""
    return [SafetySetting(category=category, threshold=threshold) for category in ADJUSTABLE_CATEGORIES]


def default_safety_settings() -> List[SafetySetting]:
    return safety_settings_from(HarmBlockThreshold.BLOCK_LOW_AND_ABOVE)


def custom_safety_settings(
    harassment: Optional[HarmBlockThreshold] = None,
    hate_speech: Optional[HarmBlockThreshold] = None,
    sexually_explicit: Optional[HarmBlockThreshold] = None,
    dangerous_content: Optional[HarmBlockThreshold] = None,
    civic_integrity: Optional[HarmBlockThreshold] = None,
) -> List[SafetySetting]:
    """Build settings for the categories given; the rest keep the API default."""
    chosen = zip(
        ADJUSTABLE_CATEGORIES,
        (harassment, hate_speech, sexually_explicit, dangerous_content, civic_integrity),
    )
    return [
        SafetySetting(category=category, threshold=threshold)
        for category, threshold in chosen
        if threshold is not None
    ]


def probability_from_str(value: str) -> HarmProbability:
    """Decode a probability constant; anything unrecognised counts as negligible."""
    try:
        probability = HarmProbability(value)
    except ValueError:
        return HarmProbability.NEGLIGIBLE
    if probability is HarmProbability.UNSPECIFIED:
        return HarmProbability.NEGLIGIBLE
    return probability


class HarmProbabilities:
    """Probability per adjustable category; ``None`` means not rated."""

    def __init__(self, probabilities: Optional[Dict[HarmCategory, Optional[HarmProbability]]] = None) -> None:
        self._probabilities: Dict[HarmCategory, Optional[HarmProbability]] = {
            category: None for category in ADJUSTABLE_CATEGORIES
        }
        if probabilities:
            self._probabilities.update(probabilities)

    @classmethod
    def from_ratings(cls, ratings: Iterable[SafetyRating]) -> "HarmProbabilities":
        return cls(
            {
                rating.category: probability_from_str(getattr(rating.probability, "value", rating.probability))
                for rating in ratings
            }
        )

    def get(self, category: HarmCategory) -> Optional[HarmProbability]:
        return self._probabilities.get(category)

    @property
    def harassment(self) -> Optional[HarmProbability]:
        return self.get(HarmCategory.HARASSMENT)

    @property
    def hate_speech(self) -> Optional[HarmProbability]:
        return self.get(HarmCategory.HATE_SPEECH)

    @property
    def sexually_explicit(self) -> Optional[HarmProbability]:
        return self.get(HarmCategory.SEXUALLY_EXPLICIT)

    @property
    def dangerous_content(self) -> Optional[HarmProbability]:
        return self.get(HarmCategory.DANGEROUS_CONTENT)

    @property
    def civic_integrity(self) -> Optional[HarmProbability]:
        return self.get(HarmCategory.CIVIC_INTEGRITY)

    def __iter__(self) -> Iterator[Tuple[str, Optional[HarmProbability]]]:
        for category in ADJUSTABLE_CATEGORIES:
            yield category.value, self._probabilities[category]

    def __repr__(self) -> str:
        pairs = ", ".join(f"{name}={prob.value if prob else None}" for name, prob in self)
        return f"HarmProbabilities({pairs})"
