"""
Specifics engine for the active DBMS.

Translates between a backend's native type vocabulary and the portable meta
types, reports the backend's capability limits, and reshapes introspection
results to the MySQL `DESCRIBE` layout that higher layers consume.

Backends differ only in data: a `BackendProfile` supplies type map overrides
and capability limits, and the engine applies the same algorithms to all of
them. The engine is immutable once built and may be shared between threads.
"""
import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from dbspecifics.exceptions import UnknownSpecificError
from dbspecifics.profiles.base import BackendProfile, Specific
from dbspecifics.profiles.mysql import MYSQL_PROFILE
from dbspecifics.typemap import BASE_META_TO_NATIVE, BASE_NATIVE_TO_META
from dbspecifics.typemap import DEFAULT_META_TYPE, canonical_type
from dbspecifics.typemap import merge_type_maps
from more_itertools import chunked

logger = logging.getLogger(__name__)

# Display width MySQL reports for INT columns regardless of storage length
INT_DISPLAY_WIDTH = '(11)'


class Specifics:
    """Type mapping and capability limits of one backend.

    Usage:
        specifics = Specifics(profile)
        if specifics.specific_exists(Specific.FIELD_MAXLENGTH):
            limit = specifics.get_specific(Specific.FIELD_MAXLENGTH)
    """

    def __init__(self, profile: BackendProfile | None = None) -> None:
        """Merge the profile overrides into the base type maps.

        Args:
            profile: Backend profile, by default the MySQL reference profile
                (no overrides, no limits)
        """
        self._profile = profile or MYSQL_PROFILE
        self._native_to_meta = merge_type_maps(BASE_NATIVE_TO_META,
                                               self._profile.native_to_meta_overrides)
        self._meta_to_native = merge_type_maps(BASE_META_TO_NATIVE,
                                               self._profile.meta_to_native_overrides)
        self._specifics = MappingProxyType(dict(self._profile.specifics))
        logger.debug(f'Built specifics for {self._profile.name}: '
                     f'{len(self._profile.native_to_meta_overrides)} native overrides, '
                     f'{len(self._profile.meta_to_native_overrides)} meta overrides, '
                     f'limits {dict(self._specifics)}')

    def __repr__(self) -> str:
        return f'Specifics(profile={self._profile.name!r})'

    @property
    def profile(self) -> BackendProfile:
        return self._profile

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier of the profile (e.g., 'postgresql')."""
        return self._profile.name

    @property
    def native_to_meta(self) -> Mapping[str, str]:
        """Read-only merged native -> meta type map."""
        return self._native_to_meta

    @property
    def meta_to_native(self) -> Mapping[str, str]:
        """Read-only merged meta -> native type map."""
        return self._meta_to_native

    @property
    def specifics(self) -> Mapping[Specific, int]:
        """Read-only view of every configured capability limit."""
        return self._specifics

    def specific_exists(self, specific: Specific | str) -> bool:
        """Check if a capability limit is defined for this backend.

        Args:
            specific: Specific member, or its name or value

        Returns
            bool: True if a limit is configured, False otherwise
        """
        key = Specific.coerce(specific)
        return key is not None and key in self._specifics

    def get_specific(self, specific: Specific | str) -> int:
        """Get a capability limit.

        Callers must check `specific_exists` first; use `find_specific` where
        the limit is optional.

        Args:
            specific: Specific member, or its name or value

        Returns
            int: Configured limit

        Raises
            UnknownSpecificError: If no limit is configured for `specific`
        """
        key = Specific.coerce(specific)
        if key is None or key not in self._specifics:
            raise UnknownSpecificError(f'{specific!r} is not defined for {self._profile.name}')
        return self._specifics[key]

    def find_specific(self, specific: Specific | str, default: int | None = None) -> int | None:
        """Get a capability limit, or `default` if the backend has none.
        """
        key = Specific.coerce(specific)
        if key is None:
            return default
        return self._specifics.get(key, default)

    def split_max_expressions(self, expressions: Any, preserve_keys: bool = False) -> list:
        """Split an expression list into chunks the backend accepts.

        Without a LIST_MAXEXPRESSIONS limit the input is returned unchanged as
        the single chunk. Otherwise consecutive chunks of at most that many
        items are built in input order. At least one chunk is always returned.

        Args:
            expressions: Sequence or mapping of opaque expressions
            preserve_keys: If True, each chunk is a dict keyed by the original
                index (sequence) or key (mapping); if False, each chunk is a
                list numbered from zero

        Returns
            list: Chunks of expressions
        """
        if not self.specific_exists(Specific.LIST_MAXEXPRESSIONS):
            return [expressions]

        limit = self.get_specific(Specific.LIST_MAXEXPRESSIONS)
        if isinstance(expressions, Mapping):
            pairs = list(expressions.items())
        else:
            pairs = list(enumerate(expressions))

        if preserve_keys:
            chunks = [dict(chunk) for chunk in chunked(pairs, limit)]
        else:
            chunks = [[item for _, item in chunk] for chunk in chunked(pairs, limit)]

        if not chunks:
            return [{}] if preserve_keys else [[]]

        if len(chunks) > 1:
            logger.debug(f'Split {len(pairs)} expressions into {len(chunks)} chunks of {limit}')
        return chunks

    def transform_field_row_to_mysql(self, field_row: Mapping[str, Any], meta_type: str) -> dict[str, Any]:
        """Translate a backend field row as close as possible to MySQL's layout.

        The result holds every key of `field_row` plus the `DESCRIBE` columns
        Field, Type, Null, Key, Default and Extra. Key and index information is
        not available here, so Key and Extra are always empty.

        Args:
            field_row: Introspection row with name, max_length, not_null and
                default_value
            meta_type: Meta type already resolved for the column

        Returns
            dict: New row; `field_row` is not modified
        """
        mysql_type = self.get_native_field_type(meta_type)
        mysql_type += self.get_native_field_length(mysql_type, field_row['max_length'])

        row = dict(field_row)
        row['Field'] = field_row['name']
        row['Type'] = mysql_type.lower()
        row['Null'] = self.get_native_not_null(field_row['not_null'])
        row['Key'] = ''
        row['Default'] = field_row['default_value']
        row['Extra'] = ''
        return row

    def transform_field_rows_to_mysql(self, rows: Iterable[tuple[Mapping[str, Any], str]]) -> dict[str, dict[str, Any]]:
        """Translate (field_row, meta_type) pairs into rows keyed by field name.

        Input order is kept.
        """
        result = {}
        for field_row, meta_type in rows:
            row = self.transform_field_row_to_mysql(field_row, meta_type)
            result[row['Field']] = row
        return result

    def get_native_field_type(self, meta_type: str) -> str:
        """Return the MySQL native type for a meta type.

        Unknown meta types are returned upper-cased, as if they were native.

        Args:
            meta_type: Meta type (ADOdb syntax), any case

        Returns
            str: Native type as reported in mysqldump files, upper-case
        """
        meta_type = canonical_type(meta_type)
        return self._meta_to_native.get(meta_type) or meta_type

    def get_meta_field_type(self, native_type: str) -> str:
        """Return the meta type for a native type.

        Unknown native types are assumed to be numeric ('N').

        Args:
            native_type: Native type as reported in mysqldump files, any case

        Returns
            str: Meta type (ADOdb syntax)
        """
        native_type = canonical_type(native_type)
        return self._native_to_meta.get(native_type) or DEFAULT_META_TYPE

    def get_native_field_length(self, mysql_type: str, max_length: int) -> str:
        """Return the parenthesized length suffix for a native type.

        INT always reports MySQL's legacy display width of 11.

        Args:
            mysql_type: Native type, upper-case
            max_length: Column length, -1 when not applicable

        Returns
            str: '' for -1, '(11)' for INT, '(<max_length>)' otherwise
        """
        if max_length == -1:
            return ''
        if mysql_type == 'INT':
            return INT_DISPLAY_WIDTH
        return f'({max_length})'

    def get_native_not_null(self, not_null: Any) -> str:
        """Return the MySQL `Null` column value for a NOT NULL flag."""
        return 'NO' if not_null else 'YES'
