import pytest

from tally.transports import BufferedReadTransport, CalcTransport


def test_calc_transport():
    trans = CalcTransport()
    trans.open()
    assert trans.is_open() is True
    assert trans.count == 0

    s1, s2 = "test", "string"
    assert trans.write(s1.encode()) == len(s1)
    assert trans.count == len(s1)
    assert trans.write(s2.encode()) == len(s2)
    assert trans.count == len(s1) + len(s2)

    trans.reset_count()
    assert trans.write_string(s1) == len(s1)
    assert trans.count == len(s1)

    trans.write_byte(ord("a"))
    assert trans.count == len(s1) + 1

    assert trans.read(len(s1)) == b""
    assert trans.read_byte() == 0
    assert trans.remaining_bytes() == 2**64 - 1

    trans.reset_count()
    assert trans.count == 0
    trans.flush()
    trans.close()
    assert trans.count == 0


def test_buffered_read_transport():
    trans = BufferedReadTransport(b"testString")
    assert trans.remaining_bytes() == 10

    assert trans.read(4) == b"test"
    assert trans.remaining_bytes() == 6

    second = trans.read(7)
    assert len(second) == 6
    assert second == b"String"
    assert trans.remaining_bytes() == 0


def test_buffered_read_transport_eof():
    trans = BufferedReadTransport(b"ab")
    assert trans.read(2) == b"ab"
    with pytest.raises(EOFError):
        trans.read(1)


def test_buffered_read_transport_empty_functions():
    data = bytes(1)
    trans = BufferedReadTransport(data)
    trans.open()
    trans.close()
    trans.flush()
    assert trans.write(data) == 1
    assert trans.is_open() is True


def test_buffered_read_transport_write_replaces_buffer():
    trans = BufferedReadTransport(b"old data")
    trans.write(b"new")
    assert trans.remaining_bytes() == 3
    assert trans.read(10) == b"new"