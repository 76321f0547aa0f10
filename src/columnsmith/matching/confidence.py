"""Confidence labels for match scores."""

from .models import ConfidenceLabel, ConfidenceTier

# Lower bounds, checked from the top; each bound is inclusive.
_TIERS: tuple[tuple[float, ConfidenceTier, str], ...] = (
    (0.9, ConfidenceTier.EXCELLENT, "Excellent"),
    (0.7, ConfidenceTier.GOOD, "Good"),
    (0.5, ConfidenceTier.FAIR, "Fair"),
)


def confidence_label(score: float) -> ConfidenceLabel:
    """Bucket a similarity score into a human-readable confidence label."""
    for lower_bound, tier, label in _TIERS:
        if score >= lower_bound:
            return ConfidenceLabel(label=label, tier=tier)
    return ConfidenceLabel(label="Low", tier=ConfidenceTier.LOW)
