"""Smart column matching: map spreadsheet headers onto canonical import fields."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from ..config import settings
from .models import BestMatch, ColumnSuggestion, MappingResult, MatchCandidate
from .normalizer import normalize
from .registry import AliasRegistry, load_registry
from .similarity import similarity_score

logger = logging.getLogger(__name__)


class ColumnMatcher:
    """
    Matches raw spreadsheet headers to canonical fields using an alias registry.

    The matcher holds no per-call state, so one instance can serve many
    import sessions at once. Auto-mapping scores every header against every
    field and alias, which costs O(fields x headers x aliases); the header
    and field caps bound that for pathological sheets.
    """

    def __init__(
        self,
        registry: Optional[AliasRegistry] = None,
        acceptance_threshold: Optional[float] = None,
        suggestion_threshold: Optional[float] = None,
        max_suggestions: Optional[int] = None,
        max_headers: Optional[int] = None,
        max_fields: Optional[int] = None,
    ):
        """
        Initialize the matcher.

        Args:
            registry: Alias registry to match against (built-in registry if not provided)
            acceptance_threshold: Minimum score for an automatic mapping
            suggestion_threshold: Scores must exceed this to be suggested
            max_suggestions: Number of suggestions returned per field
            max_headers: Headers beyond this count are not scored
            max_fields: Fields beyond this count are not scored
        """
        self.registry = registry if registry is not None else load_registry()
        self.acceptance_threshold = _pick(acceptance_threshold, settings.acceptance_threshold)
        self.suggestion_threshold = _pick(suggestion_threshold, settings.suggestion_threshold)
        self.max_suggestions = _pick(max_suggestions, settings.max_suggestions)
        self.max_headers = _pick(max_headers, settings.max_headers)
        self.max_fields = _pick(max_fields, settings.max_fields)

    def field_score(self, header: Any, field: str) -> float:
        """
        Score one header against one field, ignoring the acceptance threshold.

        The score is the best of the header against the field name itself and
        against each registered alias. An alias whose normalized form equals
        the normalized header scores 1.0 immediately.
        """
        header_text = _as_text(header)
        normalized_header = normalize(header_text)

        score = similarity_score(header_text, field)
        for alias in self.registry.aliases_for(field):
            if normalize(alias) == normalized_header:
                return 1.0
            score = max(score, similarity_score(header_text, alias))

        return score

    def find_best_match(self, header: Any, fields: Iterable[str]) -> BestMatch:
        """
        Find the best matching field for a single header.

        Only a field scoring at or above the acceptance threshold is reported.
        When several fields share the best score the first one listed wins.

        Returns:
            BestMatch with the winning field and score, or field=None and score 0.0
        """
        best_field: Optional[str] = None
        best_score = 0.0

        for field in fields:
            score = self.field_score(header, field)
            if score > best_score and score >= self.acceptance_threshold:
                best_field = field
                best_score = score

        return BestMatch(field=best_field, score=best_score)

    def auto_detect_mapping(
        self, headers: Sequence[Any], fields: Iterable[str]
    ) -> MappingResult:
        """
        Detect a one-to-one mapping from fields to column indices.

        This will:
        1. Score every (field, column) pair on its own, keeping pairs that
           clear the acceptance threshold
        2. Sort the kept pairs by score, highest first; ties keep the
           field-major, column-minor enumeration order
        3. Accept each pair whose field and column are both still free

        Assignment is greedy: the total score can be lower than that of an
        optimal bipartite assignment.

        Returns:
            A fresh MappingResult; never raises for any list of headers/fields
        """
        header_texts = [_as_text(header) for header in headers]
        field_list = list(dict.fromkeys(fields))

        scored_headers = min(len(header_texts), self.max_headers)
        scored_fields = field_list[: self.max_fields]
        if scored_headers < len(header_texts):
            logger.warning(
                f"Only the first {scored_headers} of {len(header_texts)} headers will be matched"
            )
        if len(scored_fields) < len(field_list):
            logger.warning(
                f"Only the first {len(scored_fields)} of {len(field_list)} fields will be matched"
            )

        candidates: list[MatchCandidate] = []
        for field in scored_fields:
            for column_index in range(scored_headers):
                match = self.find_best_match(header_texts[column_index], [field])
                if match.matched and match.score >= self.acceptance_threshold:
                    candidates.append(MatchCandidate(field, column_index, match.score))

        # list.sort is stable, so equal scores stay in enumeration order
        candidates.sort(key=lambda candidate: candidate.score, reverse=True)

        mapping: dict[str, int] = {}
        confidence: dict[str, float] = {}
        used_columns: set[int] = set()

        for candidate in candidates:
            if candidate.field in mapping or candidate.column_index in used_columns:
                continue
            mapping[candidate.field] = candidate.column_index
            confidence[candidate.field] = candidate.score
            used_columns.add(candidate.column_index)
            logger.debug(
                f"Mapped '{candidate.field}' to column {candidate.column_index} "
                f"('{header_texts[candidate.column_index]}') with score {candidate.score:.2f}"
            )

        unmapped_headers = [
            header
            for index, header in enumerate(header_texts)
            if index not in used_columns and header.strip() != ""
        ]
        unmapped_fields = [field for field in field_list if field not in mapping]

        logger.info(
            f"Auto-mapped {len(mapping)}/{len(field_list)} fields from "
            f"{len(header_texts)} headers ({len(candidates)} candidate pairs)"
        )

        return MappingResult(
            mapping=mapping,
            confidence=confidence,
            unmapped_headers=unmapped_headers,
            unmapped_fields=unmapped_fields,
        )

    def suggestions_for_field(
        self,
        field: str,
        headers: Sequence[Any],
        exclude_indices: Iterable[int] = (),
    ) -> list[ColumnSuggestion]:
        """
        Suggest columns for a field the user has to map by hand.

        Blank headers and excluded indices are skipped. Suggestions use the
        looser suggestion threshold and are never applied automatically.

        Returns:
            Up to max_suggestions suggestions, best first
        """
        excluded = set(exclude_indices)
        suggestions: list[ColumnSuggestion] = []

        for index, header in enumerate(headers):
            if index in excluded:
                continue
            header_text = _as_text(header)
            if not header_text.strip():
                continue

            score = self.field_score(header_text, field)
            if score > self.suggestion_threshold:
                suggestions.append(ColumnSuggestion(index=index, header=header_text, score=score))

        suggestions.sort(key=lambda suggestion: suggestion.score, reverse=True)
        return suggestions[: self.max_suggestions]


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _pick(value, default):
    return default if value is None else value


# Global matcher instance
_matcher: Optional[ColumnMatcher] = None


def get_matcher() -> ColumnMatcher:
    """Get the global matcher built from settings."""
    global _matcher
    if _matcher is None:
        _matcher = ColumnMatcher(registry=load_registry(settings.alias_registry_path))
    return _matcher


def reset_matcher() -> None:
    """Drop the global matcher so the next call rebuilds it from settings."""
    global _matcher
    _matcher = None


def find_best_match(header: Any, fields: Iterable[str]) -> BestMatch:
    return get_matcher().find_best_match(header, fields)


def auto_detect_mapping(headers: Sequence[Any], fields: Iterable[str]) -> MappingResult:
    return get_matcher().auto_detect_mapping(headers, fields)


def suggestions_for_field(
    field: str, headers: Sequence[Any], exclude_indices: Iterable[int] = ()
) -> list[ColumnSuggestion]:
    return get_matcher().suggestions_for_field(field, headers, exclude_indices)
