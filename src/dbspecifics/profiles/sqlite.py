"""
SQLite profile.

SQLite builds before 3.32 allow at most 999 host parameters per statement.
Declared types are reduced to their storage affinity.
"""
from dbspecifics.profiles.base import BackendProfile, Specific
from dbspecifics.profiles.base import register_profile

SQLITE_PROFILE = register_profile(
    BackendProfile(
        'sqlite',
        native_to_meta_overrides={
            'INTEGER': 'I',
            'REAL': 'F',
            'NUMERIC': 'N',
            'BOOLEAN': 'L',
        },
        meta_to_native_overrides={
            'B': 'BLOB',
            'X': 'TEXT',
            'XL': 'TEXT',
            'X2': 'TEXT',
        },
        specifics={
            Specific.LIST_MAXEXPRESSIONS: 999,
        },
    ),
    'sqlite3',
)
