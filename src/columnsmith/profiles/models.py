"""Data models for import profiles."""

from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from ..matching.models import MappingResult

if TYPE_CHECKING:
    from ..matching import ColumnMatcher


class ImportProfile(BaseModel):
    """The canonical fields an import module expects, and which of them are required."""

    model_config = ConfigDict(frozen=True)

    module: str
    label: str
    description: str = ""
    system_fields: list[str] = Field(default_factory=list)
    required_fields: list[str] = Field(default_factory=list)

    def missing_required(self, result: MappingResult) -> list[str]:
        """Required fields the mapping left unmapped, in profile order."""
        return [field for field in self.required_fields if field not in result.mapping]

    def detect(
        self, headers: list[str], matcher: Optional["ColumnMatcher"] = None
    ) -> MappingResult:
        """Auto-detect a mapping from headers onto this profile's fields."""
        from ..matching import get_matcher

        matcher = matcher or get_matcher()
        return matcher.auto_detect_mapping(headers, self.system_fields)
