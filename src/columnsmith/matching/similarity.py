"""Tiered string similarity used to score headers against fields and aliases."""

from .normalizer import normalize, tokenize


def similarity_score(a: str, b: str) -> float:
    """
    Calculate similarity between two strings in the range [0, 1].

    Tiers are checked in order and the first that applies wins:
    1. Exact match of the normalized forms scores 1.0
    2. Containment (one normalized form inside the other) scores
       shorter length / longer length
    3. Word overlap scores shared words / size of the larger word set,
       ignoring single-character words
    """
    norm_a = normalize(a)
    norm_b = normalize(b)

    if norm_a == norm_b:
        return 1.0

    if norm_a in norm_b or norm_b in norm_a:
        shorter = min(len(norm_a), len(norm_b))
        longer = max(len(norm_a), len(norm_b))
        return shorter / longer

    words_a = tokenize(norm_a)
    words_b = tokenize(norm_b)
    if not words_a or not words_b:
        return 0.0

    return len(words_a & words_b) / max(len(words_a), len(words_b))
