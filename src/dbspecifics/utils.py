"""Dialect detection with no internal dependencies.

Works with SQLAlchemy engines and connections, wrappers exposing a
`dbapi_connection`, and raw DBAPI connections.
"""
import logging
from typing import Any

logger = logging.getLogger(__name__)

# Driver module prefix -> dialect name
_DRIVER_DIALECTS = (
    ('psycopg', 'postgresql'),
    ('pg8000', 'postgresql'),
    ('sqlite3', 'sqlite'),
    ('pyodbc', 'mssql'),
    ('pymssql', 'mssql'),
    ('oracledb', 'oracle'),
    ('cx_oracle', 'oracle'),
    ('pymysql', 'mysql'),
    ('mysqldb', 'mysql'),
    ('mysql.connector', 'mysql'),
)


def _declared_dialect(obj: Any) -> str | None:
    """Dialect the object names itself, directly or through its engine."""
    if hasattr(obj, 'dialect'):
        dialect = obj.dialect
    elif hasattr(obj, 'engine') and hasattr(obj.engine, 'dialect'):
        dialect = obj.engine.dialect
    else:
        return None
    if not isinstance(dialect, str):
        dialect = dialect.name
    return str(dialect).lower()


def _driver_dialect(obj: Any) -> str | None:
    """Dialect implied by the module the object's class is defined in."""
    module_name = type(obj).__module__.lower()
    for prefix, dialect in _DRIVER_DIALECTS:
        if module_name.startswith(prefix):
            logger.debug(f'Detected {dialect} from driver module {module_name}')
            return dialect
    return None


def get_dialect_name(obj: Any) -> str:
    """Get the dialect name for a connection, engine or DBAPI object.

    Resolution order:
        1. A `dialect` attribute, either a string (wrappers) or an object with
           a `name` (SQLAlchemy engines and dialects)
        2. `engine.dialect.name` (SQLAlchemy connections)
        3. The wrapped `dbapi_connection`, resolved recursively
        4. The driver module of a raw DBAPI connection, e.g. `psycopg2`,
           `sqlite3`, `pyodbc`, `oracledb`, `pymysql`, `MySQLdb`

    Names from steps 1 and 2 are only lower-cased, so aliases such as
    `postgres` or `sqlserver` come back as given; the profile registry maps
    them to their profile. Step 4 always yields a profile name.

    Args:
        obj: Connection object, engine, or wrapper

    Returns
        str: Lower-case dialect name or alias

    Raises
        AttributeError: If dialect cannot be determined
    """
    dialect = _declared_dialect(obj)
    if dialect is not None:
        return dialect

    if hasattr(obj, 'dbapi_connection'):
        return get_dialect_name(obj.dbapi_connection)

    dialect = _driver_dialect(obj)
    if dialect is not None:
        return dialect

    raise AttributeError(f'Cannot determine dialect for {type(obj)}')
