"""Data models for column matching results."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConfidenceTier(str, Enum):
    """Confidence bucket for a match score."""

    EXCELLENT = "excellent"  # >= 0.9
    GOOD = "good"  # >= 0.7
    FAIR = "fair"  # >= 0.5
    LOW = "low"


class ConfidenceLabel(BaseModel):
    """Human-readable confidence label for a score."""

    model_config = ConfigDict(frozen=True)

    label: str
    tier: ConfidenceTier


@dataclass(frozen=True)
class MatchCandidate:
    """A scored (field, column) pair considered during auto-mapping."""

    field: str
    column_index: int
    score: float


class BestMatch(BaseModel):
    """Best field for a single header, or no field when nothing cleared the threshold."""

    model_config = ConfigDict(frozen=True)

    field: Optional[str] = None
    score: float = 0.0

    @property
    def matched(self) -> bool:
        return self.field is not None


class ColumnSuggestion(BaseModel):
    """An advisory column suggestion for an unmapped field."""

    model_config = ConfigDict(frozen=True)

    index: int
    header: str
    score: float


class MappingResult(BaseModel):
    """
    Outcome of auto-detecting a column mapping for one import attempt.

    `mapping` sends each matched field to its 0-based column index and is
    injective. `confidence` has exactly the same keys as `mapping` and holds
    the score that produced each assignment.
    """

    model_config = ConfigDict(frozen=True)

    mapping: dict[str, int] = Field(default_factory=dict)
    confidence: dict[str, float] = Field(default_factory=dict)
    unmapped_headers: list[str] = Field(default_factory=list)
    unmapped_fields: list[str] = Field(default_factory=list)

    def column_for(self, field: str) -> Optional[int]:
        """Column index mapped to a field, or None."""
        return self.mapping.get(field)

    def header_for(self, field: str, headers: list[str]) -> Optional[str]:
        """Header text of the column mapped to a field, or None."""
        index = self.mapping.get(field)
        if index is None or index >= len(headers):
            return None
        return headers[index]

    def label_for(self, field: str) -> Optional[ConfidenceLabel]:
        """Confidence label for a mapped field, or None when the field is unmapped."""
        from .confidence import confidence_label

        score = self.confidence.get(field)
        if score is None:
            return None
        return confidence_label(score)

    @property
    def is_complete(self) -> bool:
        """True when every requested field was mapped."""
        return not self.unmapped_fields
