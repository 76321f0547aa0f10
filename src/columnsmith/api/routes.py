"""API routes for ColumnSmith."""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..matching import (
    BestMatch,
    ColumnSuggestion,
    ConfidenceLabel,
    MappingResult,
    confidence_label,
    format_field_name,
    get_matcher,
)
from ..profiles import ImportProfile, all_profiles, get_profile

router = APIRouter()


class DetectRequest(BaseModel):
    """Request to auto-detect a column mapping."""

    headers: list[Optional[str]]
    fields: Optional[list[str]] = None  # Explicit field list; overrides the profile's fields
    module: Optional[str] = None  # Import profile name, e.g. "students"


class DetectResponse(MappingResult):
    """Detected mapping plus the extras the import UI renders."""

    labels: dict[str, ConfidenceLabel] = Field(default_factory=dict)
    display_names: dict[str, str] = Field(default_factory=dict)
    missing_required: list[str] = Field(default_factory=list)


class BestMatchRequest(BaseModel):
    """Request to find the best field for one header."""

    header: Optional[str] = None
    fields: list[str]


class SuggestionsRequest(BaseModel):
    """Request for manual-mapping suggestions for one field."""

    field: str
    headers: list[Optional[str]]
    exclude_indices: list[int] = Field(default_factory=list)


class SuggestionsResponse(BaseModel):
    """Suggestions for one field, best first."""

    field: str
    suggestions: list[ColumnSuggestion]


def _resolve_profile(module: Optional[str]) -> Optional[ImportProfile]:
    if module is None:
        return None
    profile = get_profile(module)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Unknown import module '{module}'")
    return profile


@router.get("/health")
async def health_check():
    """Health check endpoint with diagnostics."""
    from ..config import settings

    matcher = get_matcher()
    return {
        "status": "ok",
        "service": "columnsmith",
        "config": {
            "acceptance_threshold": matcher.acceptance_threshold,
            "suggestion_threshold": matcher.suggestion_threshold,
            "registered_fields": len(matcher.registry),
            "custom_registry": settings.alias_registry_path is not None,
        },
    }


@router.get("/profiles", response_model=list[ImportProfile])
async def list_profiles():
    """List the built-in import profiles."""
    return all_profiles()


@router.get("/profiles/{module}", response_model=ImportProfile)
async def read_profile(module: str):
    """Get one import profile."""
    return _resolve_profile(module)


@router.post("/mapping/detect", response_model=DetectResponse)
async def detect_mapping(request: DetectRequest):
    """Auto-detect a conflict-free mapping from headers to fields."""
    profile = _resolve_profile(request.module)

    if request.fields is not None:
        fields = request.fields
    elif profile is not None:
        fields = profile.system_fields
    else:
        raise HTTPException(status_code=400, detail="Either 'fields' or 'module' is required")

    result = get_matcher().auto_detect_mapping(request.headers, fields)

    return DetectResponse(
        **result.model_dump(),
        labels={field: confidence_label(score) for field, score in result.confidence.items()},
        display_names={field: format_field_name(field) for field in dict.fromkeys(fields)},
        missing_required=profile.missing_required(result) if profile else [],
    )


@router.post("/mapping/best-match", response_model=BestMatch)
async def best_match(request: BestMatchRequest):
    """Find the best field for a single header."""
    return get_matcher().find_best_match(request.header, request.fields)


@router.post("/mapping/suggestions", response_model=SuggestionsResponse)
async def field_suggestions(request: SuggestionsRequest):
    """Suggest columns for a field that needs manual mapping."""
    suggestions = get_matcher().suggestions_for_field(
        request.field, request.headers, request.exclude_indices
    )
    return SuggestionsResponse(field=request.field, suggestions=suggestions)


@router.get("/mapping/confidence", response_model=ConfidenceLabel)
async def read_confidence(score: float):
    """Get the confidence label for a score."""
    return confidence_label(score)


@router.get("/registry/{field}")
async def read_aliases(field: str):
    """Get the aliases registered for a field."""
    registry = get_matcher().registry
    if field not in registry:
        raise HTTPException(status_code=404, detail=f"No aliases registered for '{field}'")
    return {
        "field": field,
        "display_name": format_field_name(field),
        "aliases": list(registry.aliases_for(field)),
    }
