"""
Oracle profile.

Oracle limits identifiers to 30 characters and IN lists to 1000 expressions.
"""
from dbspecifics.profiles.base import BackendProfile, Specific
from dbspecifics.profiles.base import register_profile

ORACLE_PROFILE = register_profile(
    BackendProfile(
        'oracle',
        native_to_meta_overrides={
            'NUMBER': 'I',
            'BINARY_FLOAT': 'F',
            'BINARY_DOUBLE': 'F',
            'NCHAR': 'C',
            'VARCHAR2': 'C',
            'NVARCHAR2': 'C',
            'CLOB': 'XL',
            'NCLOB': 'XL',
            'LONG': 'XL',
            'RAW': 'B',
            'LONG RAW': 'B',
            'TIMESTAMP': 'T',
        },
        specifics={
            Specific.TABLE_MAXLENGTH: 30,
            Specific.FIELD_MAXLENGTH: 30,
            Specific.LIST_MAXEXPRESSIONS: 1000,
        },
    ),
    'oci8',
    'oci8po',
    'oracledb',
    'cx_oracle',
)
