"""
Backend profile definition.

A backend profile is the data-only description of one DBMS: the type map
entries it overrides and the capability limits it enforces. Profiles carry
no behavior; the `Specifics` engine applies the same algorithms to every
profile.
"""
import dataclasses
import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dbspecifics.exceptions import ProfileError
from dbspecifics.typemap import freeze_type_map

logger = logging.getLogger(__name__)

# Registry of dialect name -> profile
# Defined here to avoid circular imports (bundled profiles import from base)
_PROFILE_REGISTRY: dict[str, 'BackendProfile'] = {}


class Specific(str, enum.Enum):
    """Capability limit identifiers.
    """
    TABLE_MAXLENGTH = 'table_maxlength'
    FIELD_MAXLENGTH = 'field_maxlength'
    LIST_MAXEXPRESSIONS = 'list_maxexpressions'

    @classmethod
    def coerce(cls, key: Any) -> 'Specific | None':
        """Resolve a member from itself, its name or its value.

        Returns None for anything that is not a capability identifier.
        """
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            return None
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        try:
            return cls(key.lower())
        except ValueError:
            return None


def is_valid_limit(value: Any) -> bool:
    """Capability limits are positive ints (bool excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def _freeze_specifics(name: str, specifics: Mapping[Any, int] | None) -> Mapping[Specific, int]:
    """Validate capability limits and copy them into a read-only mapping.
    """
    frozen = {}
    for key, value in (specifics or {}).items():
        specific = Specific.coerce(key)
        if specific is None:
            raise ProfileError(f'Profile {name}: unknown specific {key!r}')
        if not is_valid_limit(value):
            raise ProfileError(f'Profile {name}: {specific.name} must be a positive int, got {value!r}')
        frozen[specific] = value
    return MappingProxyType(frozen)


def _check_type_map(name: str, label: str, entries: Mapping[str, str] | None) -> None:
    for key, value in (entries or {}).items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ProfileError(f'Profile {name}: {label} entries must map str to str, got {key!r}: {value!r}')


@dataclass(frozen=True)
class BackendProfile:
    """Type map overrides and capability limits of one DBMS.

    Inputs are copied into read-only mappings on construction, so later
    changes to the dicts passed in never reach the profile.
    """
    name: str
    native_to_meta_overrides: Mapping[str, str] = field(default_factory=dict)
    meta_to_native_overrides: Mapping[str, str] = field(default_factory=dict)
    specifics: Mapping[Specific, int] = field(default_factory=dict)

    def __post_init__(self):
        _check_type_map(self.name, 'native_to_meta', self.native_to_meta_overrides)
        _check_type_map(self.name, 'meta_to_native', self.meta_to_native_overrides)
        object.__setattr__(self, 'native_to_meta_overrides',
                           freeze_type_map(self.native_to_meta_overrides))
        object.__setattr__(self, 'meta_to_native_overrides',
                           freeze_type_map(self.meta_to_native_overrides))
        object.__setattr__(self, 'specifics', _freeze_specifics(self.name, self.specifics))

    def merged(self,
               native_to_meta: Mapping[str, str] | None = None,
               meta_to_native: Mapping[str, str] | None = None,
               specifics: Mapping[Any, int] | None = None) -> 'BackendProfile':
        """Return a copy of this profile with further entries layered on top.

        Args:
            native_to_meta: Extra native -> meta overrides
            meta_to_native: Extra meta -> native overrides
            specifics: Extra capability limits

        Returns
            New BackendProfile; this profile is left untouched
        """
        return dataclasses.replace(
            self,
            native_to_meta_overrides={**self.native_to_meta_overrides, **(native_to_meta or {})},
            meta_to_native_overrides={**self.meta_to_native_overrides, **(meta_to_native or {})},
            specifics={**self.specifics, **_freeze_specifics(self.name, specifics)},
        )


def register_profile(profile: BackendProfile, *aliases: str) -> BackendProfile:
    """Register a profile under its name and any aliases.

    Usage:
        POSTGRES = register_profile(BackendProfile('postgresql', ...), 'postgres')
    """
    for dialect in (profile.name, *aliases):
        _PROFILE_REGISTRY[dialect.lower()] = profile
        logger.debug(f'Registered profile {profile.name} as {dialect}')
    return profile
