"""Column matching engine: aliases, scoring and conflict-free auto-mapping."""

from .models import (
    BestMatch,
    ColumnSuggestion,
    ConfidenceLabel,
    ConfidenceTier,
    MappingResult,
    MatchCandidate,
)
from .normalizer import normalize, format_field_name
from .similarity import similarity_score
from .confidence import confidence_label
from .registry import AliasRegistry, RegistryLoadError, default_registry, load_registry
from .matcher import (
    ColumnMatcher,
    get_matcher,
    reset_matcher,
    find_best_match,
    auto_detect_mapping,
    suggestions_for_field,
)

__all__ = [
    "BestMatch",
    "ColumnSuggestion",
    "ConfidenceLabel",
    "ConfidenceTier",
    "MappingResult",
    "MatchCandidate",
    "normalize",
    "format_field_name",
    "similarity_score",
    "confidence_label",
    "AliasRegistry",
    "RegistryLoadError",
    "default_registry",
    "load_registry",
    "ColumnMatcher",
    "get_matcher",
    "reset_matcher",
    "find_best_match",
    "auto_detect_mapping",
    "suggestions_for_field",
]
