"""
PostgreSQL profile.

Identifiers are truncated at NAMEDATALEN - 1 (63) bytes. PostgreSQL reports
sized integer and boolean types that MySQL does not have; integers map back
to INT so that introspected columns render with MySQL's display width.
"""
from dbspecifics.profiles.base import BackendProfile, Specific
from dbspecifics.profiles.base import register_profile

POSTGRES_PROFILE = register_profile(
    BackendProfile(
        'postgresql',
        native_to_meta_overrides={
            'BPCHAR': 'C',
            'CHARACTER': 'C',
            'CHARACTER VARYING': 'C',
            'NAME': 'C',
            'UUID': 'C',
            'TEXT': 'XL',
            'JSON': 'XL',
            'JSONB': 'XL',
            'BYTEA': 'B',
            'BOOL': 'L',
            'BOOLEAN': 'L',
            'INT2': 'I2',
            'SMALLINT': 'I2',
            'INT4': 'I4',
            'INT': 'I4',
            'INTEGER': 'I4',
            'SERIAL': 'I4',
            'INT8': 'I8',
            'BIGINT': 'I8',
            'BIGSERIAL': 'I8',
            'FLOAT4': 'F',
            'FLOAT8': 'F',
            'REAL': 'F',
            'DOUBLE PRECISION': 'F',
            'NUMERIC': 'N',
            'DECIMAL': 'N',
            'TIMESTAMPTZ': 'T',
            'TIMESTAMP WITHOUT TIME ZONE': 'T',
            'TIMESTAMP WITH TIME ZONE': 'T',
        },
        meta_to_native_overrides={
            'I': 'INT',
            'I1': 'SMALLINT',
            'I2': 'SMALLINT',
            'I4': 'INT',
        },
        specifics={
            Specific.TABLE_MAXLENGTH: 63,
            Specific.FIELD_MAXLENGTH: 63,
        },
    ),
    'postgres',
    'psycopg',
    'psycopg2',
)
