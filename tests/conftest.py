"""Pytest configuration and shared fixtures for tests"""

import builtins
import errno
import io

import pytest

from planedb.database import PlaneDb
from planedb.ingestion import loaders


def fixed_width(width, columns, terminator='\r\n'):
    """Build a fixed-width line with each value written at its offset."""
    buf = [' '] * width
    for offset, value in columns.items():
        buf[offset:offset + len(value)] = list(value)
    return ''.join(buf[:width]) + terminator


def acftref_line(model_id, manufacturer, model, category, seats):
    """One ACFTREF.txt record"""
    return fixed_width(80, {
        0: str(model_id),
        8: manufacturer,
        39: model,
        60: str(category),
        72: str(seats),
    })


def master_line(n_number, model_id, registrant, icao):
    """One MASTER.txt record"""
    return fixed_width(620, {
        0: n_number,
        37: str(model_id),
        58: registrant,
        601: icao,
    })


@pytest.fixture
def write_file(tmp_path):
    """Write lines to a file under tmp_path and return its path"""
    def _write(name, lines):
        path = tmp_path / name
        path.write_text(''.join(lines), encoding='latin-1', newline='')
        return path
    return _write


@pytest.fixture
def type_lines():
    """A small ACFTREF sample"""
    return [
        acftref_line(1200119, 'CESSNA', '172', 4, 4),
        acftref_line(3890011, 'PIPER', 'PA-28-181', 4, 4),
        acftref_line(1380018, 'BOEING', '737-800', 5, 189),
    ]


@pytest.fixture
def master_lines():
    """A small MASTER sample"""
    return [
        master_line('12345', 1200119, 'JOHN DOE', 'A1B2C3'),
        master_line('737BA', 1380018, 'SOUTHWEST AIRLINES CO', 'A9F001'),
        master_line('9Z', 9999999, 'ORPHAN HOLDINGS LLC', 'AC0FFE'),
    ]


@pytest.fixture
def types_file(write_file, type_lines):
    return write_file('ACFTREF.txt', type_lines)


@pytest.fixture
def master_file(write_file, master_lines):
    return write_file('MASTER.txt', master_lines)


@pytest.fixture
def plane_db(types_file, master_file):
    """A loaded PlaneDb, closed after the test"""
    db = PlaneDb(types_file, master_file)
    yield db
    db.close()


class UnreadableFile(io.StringIO):
    """Opens fine, then fails with EIO once its content runs out"""

    def readline(self, size=-1):
        line = super().readline(size)
        if not line:
            raise OSError(errno.EIO, 'Input/output error')
        return line


@pytest.fixture
def fail_reads(monkeypatch):
    """Make reads of files with the given name fail after their content"""
    def _fail(name):
        def fake_open(path, *args, **kwargs):
            if str(path).endswith(name):
                with builtins.open(path, *args, **kwargs) as f:
                    return UnreadableFile(f.read())
            return builtins.open(path, *args, **kwargs)
        monkeypatch.setattr(loaders, 'open', fake_open, raising=False)
    return _fail
