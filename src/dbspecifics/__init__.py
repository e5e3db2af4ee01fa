"""
DBMS specifics: type mapping, capability limits and field-row normalization
for database backends, expressed against MySQL conventions.

Usage:
    import dbspecifics

    specifics = dbspecifics.get_specifics('oracle')
    for chunk in specifics.split_max_expressions(ids):
        ...
"""
__version__ = '0.1.0'

from dbspecifics.config import SpecificsConfig
from dbspecifics.exceptions import ConfigurationError, ProfileError
from dbspecifics.exceptions import SpecificsError, UnknownSpecificError
from dbspecifics.options import SpecificsOptions, create_specifics
from dbspecifics.profiles import BackendProfile, Specific, clear_specifics_cache
from dbspecifics.profiles import get_available_dialects, get_db_specifics
from dbspecifics.profiles import get_profile, get_specifics
from dbspecifics.profiles import is_supported_dialect, register_profile
from dbspecifics.specifics import Specifics
from dbspecifics.typemap import BASE_META_TO_NATIVE, BASE_NATIVE_TO_META
from dbspecifics.typemap import META_TYPES

__all__ = [
    'BASE_META_TO_NATIVE',
    'BASE_NATIVE_TO_META',
    'META_TYPES',
    'BackendProfile',
    'ConfigurationError',
    'ProfileError',
    'Specific',
    'Specifics',
    'SpecificsConfig',
    'SpecificsError',
    'SpecificsOptions',
    'UnknownSpecificError',
    'clear_specifics_cache',
    'create_specifics',
    'get_available_dialects',
    'get_db_specifics',
    'get_profile',
    'get_specifics',
    'is_supported_dialect',
    'register_profile',
]
