"""
Native and meta type tables.

Meta types are the portable ADOdb-style codes used to describe a column
independently of any backend:

    C, C2     character
    X, XL, X2 long text
    B         binary
    D         date
    T         timestamp
    L         logical
    I .. I8   integers
    F         float
    N         numeric

The base tables encode the MySQL reference conventions. Backend profiles
adjust a handful of entries through overrides merged on top of these tables.
"""
import logging
from collections.abc import Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)

META_TYPES = frozenset({
    'C', 'C2', 'X', 'XL', 'X2', 'B', 'D', 'T', 'L',
    'I', 'I1', 'I2', 'I4', 'I8', 'F', 'N',
})

# Fallback for native types missing from the native -> meta table
DEFAULT_META_TYPE = 'N'

BASE_NATIVE_TO_META: Mapping[str, str] = MappingProxyType({
    'STRING': 'C',
    'CHAR': 'C',
    'VARCHAR': 'C',
    'TINYBLOB': 'C',
    'TINYTEXT': 'C',
    'ENUM': 'C',
    'SET': 'C',
    'TEXT': 'XL',
    'LONGTEXT': 'XL',
    'MEDIUMTEXT': 'XL',
    'IMAGE': 'B',
    'LONGBLOB': 'B',
    'BLOB': 'B',
    'MEDIUMBLOB': 'B',
    'YEAR': 'D',
    'DATE': 'D',
    'TIME': 'T',
    'DATETIME': 'T',
    'TIMESTAMP': 'T',
    'FLOAT': 'F',
    'DOUBLE': 'F',
    'INT': 'I8',
    'INTEGER': 'I8',
    'TINYINT': 'I8',
    'SMALLINT': 'I8',
    'MEDIUMINT': 'I8',
    'BIGINT': 'I8',
})

BASE_META_TO_NATIVE: Mapping[str, str] = MappingProxyType({
    'C': 'VARCHAR',
    'C2': 'VARCHAR',
    'X': 'LONGTEXT',
    'XL': 'LONGTEXT',
    'X2': 'LONGTEXT',
    'B': 'LONGBLOB',
    'D': 'DATE',
    'T': 'DATETIME',
    'L': 'TINYINT',
    'I': 'BIGINT',
    'I1': 'BIGINT',
    'I2': 'BIGINT',
    'I4': 'BIGINT',
    'I8': 'BIGINT',
    'F': 'DOUBLE',
    'N': 'NUMERIC',
})


def canonical_type(type_name: str) -> str:
    """Canonical (upper-case) form of a type identifier."""
    return type_name.upper()


def freeze_type_map(entries: Mapping[str, str] | None) -> Mapping[str, str]:
    """Copy a type map into a read-only mapping with canonical keys.

    Args:
        entries: Mapping of type identifier to type identifier, or None

    Returns
        MappingProxyType over a private copy of the entries
    """
    if not entries:
        return MappingProxyType({})
    return MappingProxyType({canonical_type(k): v for k, v in entries.items()})


def merge_type_maps(base: Mapping[str, str],
                    overrides: Mapping[str, str] | None) -> Mapping[str, str]:
    """Merge overrides on top of a base type map.

    Keys present in the overrides replace the base entry, all other base
    entries are kept. Neither argument is modified; the result is a new
    read-only mapping.

    Args:
        base: Base type map
        overrides: Override entries, possibly empty or None

    Returns
        Read-only merged mapping
    """
    merged = dict(base)
    if overrides:
        merged.update({canonical_type(k): v for k, v in overrides.items()})
    return MappingProxyType(merged)
