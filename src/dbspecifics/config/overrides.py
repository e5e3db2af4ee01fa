"""
Configuration for per-dialect specifics overrides.

File format:

    {
        "postgresql": {
            "native_to_meta": {"TEXT": "X2"},
            "meta_to_native": {"I": "INT"},
            "specifics": {"LIST_MAXEXPRESSIONS": 500}
        }
    }
"""
import json
import logging
import pathlib
from typing import TYPE_CHECKING

from dbspecifics.exceptions import ConfigurationError

if TYPE_CHECKING:
    from dbspecifics.profiles.base import BackendProfile

logger = logging.getLogger(__name__)

SECTIONS = ('native_to_meta', 'meta_to_native', 'specifics')

DEFAULT_LOCATIONS = (
    '~/.config/dbspecifics/specifics.json',
    '/etc/dbspecifics/specifics.json',
    'specifics.json',  # Current directory
)


class SpecificsConfig:
    """Configured overrides layered on top of the bundled profiles"""

    _instance = None

    @classmethod
    def get_instance(cls):
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access reloads configuration"""
        cls._instance = None

    def __init__(self, config_file=None):
        self._overrides = {}

        if config_file:
            self.load_config(config_file)
            return

        for location in DEFAULT_LOCATIONS:
            path = pathlib.Path(location).expanduser()
            if path.exists():
                try:
                    self.load_config(path)
                except ConfigurationError as e:
                    logger.warning(f'Failed to load specifics config: {e}')
                break

    def load_config(self, config_file):
        """Load configuration from file, merging with what is already loaded

        The whole file is validated first; nothing is merged if any entry is
        malformed.
        """
        try:
            with pathlib.Path(config_file).open() as f:
                config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f'Cannot read {config_file}: {e}') from e

        if not isinstance(config, dict):
            raise ConfigurationError(f'{config_file}: expected an object keyed by dialect')

        loaded = {}
        for dialect, sections in config.items():
            if not isinstance(sections, dict):
                raise ConfigurationError(f'{config_file}: entry for {dialect} must be an object')
            target = loaded.setdefault(_canonical_dialect(dialect), {})
            for section, entries in sections.items():
                if section not in SECTIONS:
                    raise ConfigurationError(f'{config_file}: unknown section {section!r} for {dialect}')
                if not isinstance(entries, dict):
                    raise ConfigurationError(f'{config_file}: {dialect}.{section} must be an object')
                target.setdefault(section, {}).update(_validated(dialect, section, entries))

        for dialect, sections in loaded.items():
            for section, entries in sections.items():
                self._section(dialect, section).update(entries)

        logger.info(f'Loaded specifics configuration from {config_file}')

    def _section(self, dialect, section):
        dialect_overrides = self._overrides.setdefault(_canonical_dialect(dialect), {})
        return dialect_overrides.setdefault(section, {})

    def add_type_mapping(self, dialect, native_type, meta_type):
        """Add a native -> meta override"""
        entries = _validated(dialect, 'native_to_meta', {native_type: meta_type})
        self._section(dialect, 'native_to_meta').update(entries)

    def add_native_mapping(self, dialect, meta_type, native_type):
        """Add a meta -> native override"""
        entries = _validated(dialect, 'meta_to_native', {meta_type: native_type})
        self._section(dialect, 'meta_to_native').update(entries)

    def set_specific(self, dialect, specific, value):
        """Add a capability limit override"""
        entries = _validated(dialect, 'specifics', {specific: value})
        self._section(dialect, 'specifics').update(entries)

    def get_overrides(self, dialect):
        """Get configured sections for a dialect (empty dict if none)"""
        return self._overrides.get(_canonical_dialect(dialect), {})

    def apply(self, profile: 'BackendProfile') -> 'BackendProfile':
        """Return the profile with configured overrides merged on top"""
        overrides = self.get_overrides(profile.name)
        if not overrides:
            return profile
        logger.debug(f'Applying configured overrides to {profile.name}')
        return profile.merged(
            native_to_meta=overrides.get('native_to_meta'),
            meta_to_native=overrides.get('meta_to_native'),
            specifics=overrides.get('specifics'),
        )


def _canonical_dialect(dialect):
    """Profile name for a registered dialect or alias, else the lower-cased name"""
    from dbspecifics.profiles import get_profile, is_supported_dialect

    if is_supported_dialect(dialect):
        return get_profile(dialect).name
    return dialect.lower()


def _validated(dialect, section, entries):
    """Check one section's entries, returning them with canonical keys.

    Raises
        ConfigurationError: On a non-string type map entry, an unknown
            capability identifier or a limit that is not a positive int
    """
    from dbspecifics.profiles.base import Specific, is_valid_limit

    result = {}
    for key, value in entries.items():
        if section == 'specifics':
            specific = Specific.coerce(key)
            if specific is None:
                raise ConfigurationError(f'{dialect}: unknown specific {key!r}')
            if not is_valid_limit(value):
                raise ConfigurationError(f'{dialect}: {specific.name} must be a positive int, got {value!r}')
            result[specific.name] = value
        else:
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigurationError(f'{dialect}.{section}: entries must map str to str, got {key!r}: {value!r}')
            result[key.upper()] = value
    return result
