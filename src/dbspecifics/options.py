import logging
from dataclasses import dataclass, fields
from typing import Any

from dbspecifics.config import SpecificsConfig
from dbspecifics.profiles import get_available_dialects, get_profile
from dbspecifics.profiles import is_supported_dialect
from dbspecifics.specifics import Specifics

from libb import ConfigOptions, load_options

logger = logging.getLogger(__name__)

__all__ = ['SpecificsOptions', 'create_specifics']


@dataclass
class SpecificsOptions(ConfigOptions):
    """Options

    supported driver names: `mysql`, `postgresql`, `oracle`, `mssql`, `sqlite`
    and their aliases

    - config_file: JSON overrides applied on top of the bundled profile
      (default: the first existing default location, see SpecificsConfig)
    """
    drivername: str = 'mysql'
    config_file: str = None

    def __post_init__(self):
        if not is_supported_dialect(self.drivername):
            available = get_available_dialects()
            raise ValueError(f'drivername must be one of: {available}')
        self.drivername = self.drivername.lower()

    def create_specifics(self) -> Specifics:
        """Build a Specifics instance for these options.

        Unlike `get_specifics`, the result is not cached.
        """
        if self.config_file:
            config = SpecificsConfig(self.config_file)
        else:
            config = SpecificsConfig.get_instance()
        profile = config.apply(get_profile(self.drivername))
        logger.debug(f'Creating specifics for {self.drivername} from {profile.name} profile')
        return Specifics(profile)


@load_options(cls=SpecificsOptions)
def create_specifics(options: SpecificsOptions | dict[str, Any] | str,
                     config: Any | None = None, **kw: Any) -> Specifics:
    """Build specifics from options

    Args:
        options: Can be:
                - SpecificsOptions object
                - String path to configuration
                - Dictionary of options
                - Options specified as keyword arguments
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        Specifics for the configured dialect, not cached
    """
    if isinstance(options, SpecificsOptions):
        for field in fields(options):
            kw.pop(field.name, None)
    else:
        options_func = load_options(cls=SpecificsOptions)(lambda o, c: o)
        options = options_func(options, config, **kw)

    return options.create_specifics()
