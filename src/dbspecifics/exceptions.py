"""
Specifics-layer exception classes.
"""


class SpecificsError(Exception):
    """Base class for all dbspecifics errors.
    """


class UnknownSpecificError(SpecificsError, KeyError):
    """Capability limit requested that the backend does not define.

    Raised by the unchecked accessor; guard with `specific_exists` first.
    """


class ProfileError(SpecificsError):
    """Malformed backend profile data.
    """


class ConfigurationError(SpecificsError):
    """Override configuration file that cannot be read or parsed.
    """
