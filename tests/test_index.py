"""Tests for keyed record indexes and the most-recent lookup slot"""

import pytest

from planedb.exceptions import PlaneDbError, DataFileError
from planedb.index import TypeIndex, RegistrationIndex
from tests.conftest import acftref_line


@pytest.fixture
def type_index(types_file):
    index = TypeIndex(types_file)
    index.load()
    return index


@pytest.fixture
def registration_index(master_file):
    index = RegistrationIndex(master_file)
    index.load()
    return index


def test_every_loaded_record_is_findable(type_index):
    for record in type_index:
        assert type_index.lookup(record.id) is record


def test_absent_key_returns_none(type_index):
    assert type_index.lookup(1234567) is None
    assert 1234567 not in type_index


def test_registration_lookup_by_numeric_icao(registration_index):
    plane = registration_index.lookup(0xA1B2C3)

    assert plane is not None
    assert plane.n_number == '12345'
    assert plane.registrant == 'JOHN DOE'


def test_repeated_lookup_is_served_from_slot(type_index):
    first = type_index.lookup(1200119)
    second = type_index.lookup(1200119)

    assert second is first
    assert type_index.stats['misses'] == 1
    assert type_index.stats['hits'] == 1


def test_alternating_keys_do_not_return_stale_record(type_index):
    a = type_index.lookup(1200119)
    b = type_index.lookup(1380018)
    a_again = type_index.lookup(1200119)

    assert a.model == '172'
    assert b.model == '737-800'
    assert a_again is a
    assert type_index.stats['last_key'] == 1200119


def test_miss_leaves_slot_unchanged(type_index):
    type_index.lookup(1200119)
    assert type_index.lookup(5555555) is None

    assert type_index.stats['last_key'] == 1200119
    hits_before = type_index.stats['hits']
    assert type_index.lookup(1200119).manufacturer == 'CESSNA'
    assert type_index.stats['hits'] == hits_before + 1


def test_zero_key_is_not_a_slot_hit_before_any_lookup(type_index):
    assert type_index.lookup(0) is None
    assert type_index.stats['hits'] == 0


def test_duplicate_ids_keep_first_in_file_order(write_file):
    path = write_file('ACFTREF.txt', [
        acftref_line(1200119, 'CESSNA', '172', 4, 4),
        acftref_line(1200119, 'CESSNA', '172S', 4, 4),
    ])
    index = TypeIndex(path)

    assert index.load() == 1
    assert index.lookup(1200119).model == '172'
    assert index.stats['duplicates'] == 1
    assert [r.model for r in index] == ['172', '172S']


def test_iteration_follows_file_order(type_index):
    assert [r.manufacturer for r in type_index] == ['CESSNA', 'PIPER', 'BOEING']
    assert len(type_index) == 3


def test_load_twice_is_rejected(type_index):
    with pytest.raises(PlaneDbError):
        type_index.load()


def test_load_missing_file_raises(tmp_path):
    index = TypeIndex(tmp_path / 'ACFTREF.txt')

    with pytest.raises(DataFileError):
        index.load()
    assert len(index) == 0


def test_clear_releases_records_and_slot(type_index):
    type_index.lookup(1200119)
    type_index.clear()

    assert len(type_index) == 0
    assert list(type_index) == []
    assert type_index.lookup(1200119) is None
    assert type_index.stats['last_key'] is None


def test_stats_report_skipped_lines(write_file):
    path = write_file('ACFTREF.txt', [
        acftref_line(1200119, 'CESSNA', '172', 4, 4),
        'truncated\r\n',
    ])
    index = TypeIndex(path)
    index.load()

    assert index.stats['entries'] == 1
    assert index.stats['skipped_lines'] == 1
