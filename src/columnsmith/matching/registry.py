"""Immutable alias registry mapping canonical fields to known column titles."""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Union

from .aliases import DEFAULT_FIELD_ALIASES

logger = logging.getLogger(__name__)


class RegistryLoadError(Exception):
    """Raised when an alias registry file cannot be loaded."""

    pass


class AliasRegistry:
    """
    Read-only mapping from canonical field name to its ordered aliases.

    A registry is built once and never changes. Verticals that need extra
    aliases derive a new registry with `merged()` instead of editing a
    shared one, so a registry can be shared freely between import sessions.
    """

    def __init__(self, aliases: Mapping[str, Iterable[str]]):
        frozen: dict[str, tuple[str, ...]] = {}
        for field, field_aliases in aliases.items():
            frozen[str(field)] = _dedupe(field_aliases)
        self._aliases = MappingProxyType(frozen)

    @classmethod
    def from_dict(cls, aliases: Mapping[str, Iterable[str]]) -> "AliasRegistry":
        return cls(aliases)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "AliasRegistry":
        """
        Load a registry from a JSON object of the form {"field": ["alias", ...]}.

        Raises:
            RegistryLoadError: If the file is missing, unparseable or has the wrong shape
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise RegistryLoadError(f"Cannot read alias registry '{path}': {e}") from e
        except json.JSONDecodeError as e:
            raise RegistryLoadError(f"Invalid JSON in alias registry '{path}': {e}") from e

        if not isinstance(data, dict):
            raise RegistryLoadError(f"Alias registry '{path}' must be a JSON object")

        for field, field_aliases in data.items():
            if not isinstance(field_aliases, list) or not all(
                isinstance(alias, str) for alias in field_aliases
            ):
                raise RegistryLoadError(
                    f"Aliases for field '{field}' in '{path}' must be a list of strings"
                )

        logger.info(f"Loaded {len(data)} fields from alias registry {path}")
        return cls(data)

    def merged(self, extra: Mapping[str, Iterable[str]]) -> "AliasRegistry":
        """
        Return a new registry with `extra` aliases appended.

        Existing aliases keep their position; new aliases for an existing
        field go after them, and unknown fields are added at the end.
        """
        combined: dict[str, list[str]] = {field: list(a) for field, a in self._aliases.items()}
        for field, field_aliases in extra.items():
            combined.setdefault(str(field), []).extend(field_aliases)
        return AliasRegistry(combined)

    def aliases_for(self, field: str) -> tuple[str, ...]:
        """Aliases registered for a field; empty for unknown fields."""
        return self._aliases.get(field, ())

    def fields(self) -> list[str]:
        return list(self._aliases)

    def as_dict(self) -> dict[str, list[str]]:
        return {field: list(field_aliases) for field, field_aliases in self._aliases.items()}

    def __contains__(self, field: object) -> bool:
        return field in self._aliases

    def __iter__(self) -> Iterator[str]:
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def __repr__(self) -> str:
        return f"AliasRegistry(fields={len(self._aliases)})"


def _dedupe(values: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated aliases while keeping first-seen order."""
    return tuple(dict.fromkeys(str(value) for value in values))


@lru_cache(maxsize=1)
def default_registry() -> AliasRegistry:
    """The built-in registry covering school and business import fields."""
    return AliasRegistry(DEFAULT_FIELD_ALIASES)


def load_registry(path: Union[str, Path, None] = None) -> AliasRegistry:
    """
    Build the registry used at startup.

    With a path, the file's aliases are merged over the built-in ones.
    """
    registry = default_registry()
    if path is None:
        return registry
    overrides = AliasRegistry.from_json_file(path)
    logger.warning(f"Merging {len(overrides)} custom alias fields from {path}")
    return registry.merged(overrides.as_dict())
