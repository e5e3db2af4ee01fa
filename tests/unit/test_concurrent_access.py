"""
Tests for sharing one specifics instance between threads.
"""
import concurrent.futures

from dbspecifics import BASE_NATIVE_TO_META, Specific, get_specifics


def _exercise(specifics, n):
    """Run every read operation and return what was observed"""
    row = {'name': f'col{n}', 'max_length': n, 'not_null': n % 2, 'default_value': None}
    return (
        specifics.get_meta_field_type('VARCHAR2'),
        specifics.get_native_field_type('c'),
        specifics.get_specific(Specific.LIST_MAXEXPRESSIONS),
        len(specifics.split_max_expressions(range(n))),
        specifics.transform_field_row_to_mysql(row, 'C')['Type'],
    )


def test_concurrent_readers_see_same_state():
    """Concurrent callers observe identical, unchanging results"""
    specifics = get_specifics('oracle')
    before = dict(specifics.native_to_meta)

    with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda n: _exercise(specifics, n), range(1, 3001)))

    for n, result in enumerate(results, start=1):
        assert result == ('C', 'VARCHAR', 1000, -(-n // 1000), f'varchar({n})')
    assert dict(specifics.native_to_meta) == before
    assert 'VARCHAR2' not in BASE_NATIVE_TO_META


def test_factory_shared_across_threads():
    """Threads asking for the same dialect receive the same instance"""
    with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
        instances = list(executor.map(lambda _: get_specifics('mssql'), range(20)))
    assert all(instance is instances[0] for instance in instances)
