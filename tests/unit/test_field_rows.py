"""
Tests for translating backend field rows to the MySQL DESCRIBE layout.
"""
import pytest
from dbspecifics import BackendProfile, Specifics, get_specifics


@pytest.mark.parametrize(('native_type', 'max_length', 'expected'), [
    ('INT', 5, '(11)'),
    ('INT', 11, '(11)'),
    ('INT', 0, '(11)'),
    ('VARCHAR', 255, '(255)'),
    ('BIGINT', 20, '(20)'),
    ('VARCHAR', -1, ''),
    ('INT', -1, ''),
])
def test_get_native_field_length(reference_specifics, native_type, max_length, expected):
    """Length suffix honors the unbounded sentinel and the INT display width"""
    assert reference_specifics.get_native_field_length(native_type, max_length) == expected


def test_get_native_not_null(reference_specifics):
    """A NOT NULL flag means the column is not nullable"""
    assert reference_specifics.get_native_not_null(True) == 'NO'
    assert reference_specifics.get_native_not_null(1) == 'NO'
    assert reference_specifics.get_native_not_null('t') == 'NO'
    assert reference_specifics.get_native_not_null(False) == 'YES'
    assert reference_specifics.get_native_not_null(0) == 'YES'
    assert reference_specifics.get_native_not_null(None) == 'YES'


def test_transform_field_row(reference_specifics, title_row):
    """A varchar column becomes a MySQL DESCRIBE row"""
    row = reference_specifics.transform_field_row_to_mysql(title_row, 'C')

    assert row['Field'] == 'title'
    assert row['Type'] == 'varchar(255)'
    assert row['Null'] == 'NO'
    assert row['Key'] == ''
    assert row['Default'] is None
    assert row['Extra'] == ''


def test_transform_keeps_input_fields(reference_specifics, title_row):
    """Original keys survive and the input row is left untouched"""
    original = dict(title_row, attnum=3)
    field_row = dict(original)

    row = reference_specifics.transform_field_row_to_mysql(field_row, 'C')

    for key, value in original.items():
        assert row[key] == value
    assert field_row == original
    assert set(row) == set(original) | {'Field', 'Type', 'Null', 'Key', 'Default', 'Extra'}


def test_transform_overwrites_canonical_keys(reference_specifics, title_row):
    """Canonical keys already present in the input are replaced"""
    field_row = dict(title_row, Key='PRI', Extra='auto_increment', Type='character varying')
    row = reference_specifics.transform_field_row_to_mysql(field_row, 'C')
    assert row['Key'] == ''
    assert row['Extra'] == ''
    assert row['Type'] == 'varchar(255)'


def test_transform_unbounded_column(reference_specifics):
    """Columns without a length get no suffix and nullable default values pass through"""
    field_row = {'name': 'bodytext', 'max_length': -1, 'not_null': False, 'default_value': 'n/a'}
    row = reference_specifics.transform_field_row_to_mysql(field_row, 'xl')
    assert row['Type'] == 'longtext'
    assert row['Null'] == 'YES'
    assert row['Default'] == 'n/a'


def test_transform_unknown_meta_type(reference_specifics):
    """Unknown meta types are used as the native type name"""
    field_row = {'name': 'shape', 'max_length': 8, 'not_null': False, 'default_value': None}
    row = reference_specifics.transform_field_row_to_mysql(field_row, 'Geometry')
    assert row['Type'] == 'geometry(8)'


def test_transform_int_display_width():
    """Integers mapped to INT always report a display width of 11"""
    specifics = Specifics(BackendProfile('custom', meta_to_native_overrides={'I4': 'INT'}))
    field_row = {'name': 'uid', 'max_length': 4, 'not_null': True, 'default_value': 0}
    row = specifics.transform_field_row_to_mysql(field_row, 'I4')
    assert row['Type'] == 'int(11)'
    assert row['Default'] == 0


def test_transform_missing_key_raises(reference_specifics):
    """Rows lacking required attributes are a caller error"""
    with pytest.raises(KeyError):
        reference_specifics.transform_field_row_to_mysql({'name': 'title'}, 'C')


def test_transform_field_rows(field_rows):
    """Rows are keyed by field name in input order"""
    specifics = get_specifics('postgresql')
    rows = specifics.transform_field_rows_to_mysql(field_rows)

    assert list(rows) == ['uid', 'title', 'bodytext', 'hidden']
    assert rows['uid']['Type'] == 'int(11)'
    assert rows['title']['Type'] == 'varchar(255)'
    assert rows['bodytext']['Type'] == 'longtext'
    assert rows['bodytext']['Null'] == 'YES'
    assert rows['hidden']['Type'] == 'tinyint(1)'
    assert rows['hidden']['Default'] == '0'


def test_transform_field_rows_empty(reference_specifics):
    """No rows yields an empty result"""
    assert reference_specifics.transform_field_rows_to_mysql([]) == {}


if __name__ == '__main__':
    __import__('pytest').main([__file__])
