"""
MySQL reference profile.

The base type maps already describe MySQL, so the reference profile has no
overrides and enforces no capability limits.
"""
from dbspecifics.profiles.base import BackendProfile, register_profile

MYSQL_PROFILE = register_profile(BackendProfile('mysql'), 'mysqli', 'mariadb',
                                 'pymysql', 'mysqldb')
