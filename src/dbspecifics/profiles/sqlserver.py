"""
SQL Server profile.

Identifiers may be up to 128 characters; a statement accepts at most 2100
parameters, which bounds the length of a parameterized IN list.
"""
from dbspecifics.profiles.base import BackendProfile, Specific
from dbspecifics.profiles.base import register_profile

SQLSERVER_PROFILE = register_profile(
    BackendProfile(
        'mssql',
        native_to_meta_overrides={
            'NCHAR': 'C',
            'NVARCHAR': 'C',
            'UNIQUEIDENTIFIER': 'C',
            'NTEXT': 'XL',
            'VARBINARY': 'B',
            'BINARY': 'B',
            'BIT': 'L',
            'SMALLDATETIME': 'T',
            'DATETIME2': 'T',
            'DATETIMEOFFSET': 'T',
            'REAL': 'F',
            'MONEY': 'N',
            'SMALLMONEY': 'N',
            'DECIMAL': 'N',
        },
        specifics={
            Specific.TABLE_MAXLENGTH: 128,
            Specific.FIELD_MAXLENGTH: 128,
            Specific.LIST_MAXEXPRESSIONS: 2100,
        },
    ),
    'sqlserver',
    'mssqlnative',
    'pyodbc',
    'pymssql',
)
