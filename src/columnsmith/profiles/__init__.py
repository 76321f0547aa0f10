"""Import profiles: the canonical field sets for each importable module."""

from .models import ImportProfile
from .builtin import IMPORT_PROFILES, get_profile, all_profiles

__all__ = [
    "ImportProfile",
    "IMPORT_PROFILES",
    "get_profile",
    "all_profiles",
]
