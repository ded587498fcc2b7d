import pytest

from togos.printing import BufferPrint, Print


def test_stream_operator_chains_values():
    bp = BufferPrint(64)
    result = bp << "x=" << 5 << "c"
    assert result is bp
    assert bp.getvalue() == b"x=5c"


def test_float_prints_two_decimals():
    bp = BufferPrint(32)
    bp << 1.5
    assert bp.getvalue() == b"1.50"


def test_bytes_are_written_raw():
    bp = BufferPrint(32)
    bp << b"ab\x00c"
    assert bp.getvalue() == b"ab\x00c"


def test_printable_object_uses_print_to():
    class Thing:
        def print_to(self, p):
            return p.print("thing")

    bp = BufferPrint(32)
    bp << Thing()
    assert bp.getvalue() == b"thing"


def test_single_byte_writes_leave_room_for_terminator():
    bp = BufferPrint(4)
    accepted = [bp.write(b) for b in b"abcde"]
    assert accepted == [1, 1, 1, 0, 0]
    assert bp.getvalue() == b"abc"
    assert bp.size() == 3


def test_write_bytes_can_fill_whole_buffer():
    bp = BufferPrint(4)
    assert bp.write_bytes(b"abcdef") == 4
    assert bp.getvalue() == b"abcd"
    assert bp.available_for_write() == 0


def test_c_str_overwrites_last_byte_when_full():
    bp = BufferPrint(4)
    bp.write_bytes(b"abcd")
    assert bp.c_str() == b"abc"


def test_c_str_of_partial_buffer():
    bp = BufferPrint(10)
    bp << "hi"
    assert bp.c_str() == b"hi"
    assert bp.getvalue() == b"hi"


def test_c_str_with_zero_size_buffer_is_none():
    assert BufferPrint(0).c_str() is None


def test_clear_resets_contents():
    bp = BufferPrint(8)
    bp << "hello"
    bp.clear()
    assert bp.size() == 0
    assert bp.getvalue() == b""
    assert bp.available_for_write() == 8


def test_available_for_write_tracks_writes():
    bp = BufferPrint(10)
    bp.write_bytes(b"abc")
    assert bp.available_for_write() + bp.size() == 10
    assert len(bp) == bp.size()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BufferPrint(-1)


def test_base_write_bytes_stops_at_first_refusal():
    class Limited(Print):
        def __init__(self):
            self.got = []

        def write(self, byte):
            if len(self.got) >= 2:
                return 0
            self.got.append(byte)
            return 1

    sink = Limited()
    written = Print.write_bytes(sink, b"xyz")
    assert written == 2
    assert bytes(sink.got) == b"xy"
    assert Print.available_for_write(sink) == 0