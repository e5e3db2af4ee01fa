"""
Backend profile registry and specifics factory.
"""
import threading
from functools import lru_cache
from typing import TYPE_CHECKING

from dbspecifics.config import SpecificsConfig
from dbspecifics.profiles.base import _PROFILE_REGISTRY
from dbspecifics.profiles.base import BackendProfile as BackendProfile
from dbspecifics.profiles.base import Specific as Specific
from dbspecifics.profiles.base import register_profile as register_profile
from dbspecifics.profiles.mysql import MYSQL_PROFILE as MYSQL_PROFILE
from dbspecifics.profiles.oracle import ORACLE_PROFILE as ORACLE_PROFILE
from dbspecifics.profiles.postgres import POSTGRES_PROFILE as POSTGRES_PROFILE
from dbspecifics.profiles.sqlite import SQLITE_PROFILE as SQLITE_PROFILE
from dbspecifics.profiles.sqlserver import SQLSERVER_PROFILE as SQLSERVER_PROFILE
from dbspecifics.utils import get_dialect_name

if TYPE_CHECKING:
    from dbspecifics.specifics import Specifics

_lock = threading.RLock()


def _validate_dialect(dialect: str) -> None:
    """Raise ValueError if dialect is not registered."""
    if dialect.lower() not in _PROFILE_REGISTRY:
        available = get_available_dialects()
        raise ValueError(f'Unsupported dialect: {dialect}. Available: {available}')


@lru_cache(maxsize=16)
def _get_specifics(dialect: str) -> 'Specifics':
    """Get cached specifics instance for a dialect."""
    from dbspecifics.specifics import Specifics

    profile = SpecificsConfig.get_instance().apply(get_profile(dialect))
    return Specifics(profile)


def get_profile(dialect: str) -> BackendProfile:
    """Get the registered profile for a dialect name or alias."""
    _validate_dialect(dialect)
    return _PROFILE_REGISTRY[dialect.lower()]


def get_specifics(dialect: str) -> 'Specifics':
    """Get specifics instance for a dialect name.

    This is the public interface for getting specifics when you have a dialect
    name string but not a connection object. Configured overrides are applied.
    """
    with _lock:
        return _get_specifics(get_profile(dialect).name)


def get_db_specifics(cn) -> 'Specifics':
    """Get specifics for the connection."""
    return get_specifics(get_dialect_name(cn))


def get_available_dialects() -> list[str]:
    """Return list of registered dialect names and aliases."""
    return list(_PROFILE_REGISTRY.keys())


def is_supported_dialect(dialect: str) -> bool:
    """Check if a dialect is supported."""
    return dialect.lower() in _PROFILE_REGISTRY


def clear_specifics_cache() -> None:
    """Forget cached specifics, e.g. after configuration changed."""
    with _lock:
        _get_specifics.cache_clear()
