import struct
import pytest

import netsim
from netsim.errors import InvalidArgument, MalformedFrame
from netsim.protocol.udp import UDPSegment


def test_layout():

    segment = UDPSegment(netsim.Port('5000'), netsim.Port('80'), 3, b'ABCD')

    assert segment.length == 96
    assert segment.header() == b'\x13\x88\x00\x50\x00\x03\x00\x60'
    assert segment.to_bytes() == segment.header() + b'ABCD'


def test_empty_payload():

    segment = UDPSegment(netsim.Port('1'), netsim.Port('2'), 0, b'')

    assert segment.length == 64
    assert len(segment.to_bytes()) == 8
    assert UDPSegment.from_bytes(segment.to_bytes()) == segment


def test_from_bytes():

    raw = struct.pack('!HHHH', 1234, 4321, 7, 8 * 11) + b'xyz'
    segment = UDPSegment.from_bytes(raw)

    assert segment.source == netsim.Port('1234')
    assert segment.destination == netsim.Port('4321')
    assert segment.sequence == 7
    assert segment.payload == b'xyz'
    assert segment.to_bytes() == raw


def test_malformed():

    # Shorter than the header.
    with pytest.raises(MalformedFrame):
        UDPSegment.from_bytes(b'\x00\x01\x00\x02\x00\x00\x00')

    # Length in bits not a multiple of 8.
    raw = struct.pack('!HHHH', 1, 2, 0, 8 * 9 + 1) + b'x'
    with pytest.raises(MalformedFrame):
        UDPSegment.from_bytes(raw)

    # Length smaller than the header itself.
    raw = struct.pack('!HHHH', 1, 2, 0, 56)
    with pytest.raises(MalformedFrame):
        UDPSegment.from_bytes(raw)

    # Declared length does not match the buffer.
    raw = struct.pack('!HHHH', 1, 2, 0, 8 * 10) + b'x'
    with pytest.raises(MalformedFrame):
        UDPSegment.from_bytes(raw)

    raw = struct.pack('!HHHH', 1, 2, 0, 8 * 9) + b'xy'
    with pytest.raises(MalformedFrame):
        UDPSegment.from_bytes(raw)

    with pytest.raises(MalformedFrame):
        UDPSegment.from_bytes(None)


def test_limits():

    source = netsim.Port('1')
    destination = netsim.Port('2')

    UDPSegment(source, destination, 0xFFFF, b'x')
    UDPSegment(source, destination, 0, b'x' * netsim.protocol.udp.MAX_PAYLOAD)

    with pytest.raises(InvalidArgument):
        UDPSegment(source, destination, 0x10000, b'x')

    with pytest.raises(InvalidArgument):
        UDPSegment(source, destination, -1, b'x')

    with pytest.raises(InvalidArgument):
        UDPSegment(source, destination, 0, b'x' * (netsim.protocol.udp.MAX_PAYLOAD + 1))

    with pytest.raises(InvalidArgument):
        UDPSegment(None, destination, 0, b'x')

    with pytest.raises(InvalidArgument):
        UDPSegment(source, destination, 0, None)


def test_split():

    first = UDPSegment(netsim.Port('1'), netsim.Port('2'), 1, b'EFGH')
    second = UDPSegment(netsim.Port('1'), netsim.Port('2'), 0, b'ABCD')

    segments = netsim.protocol.udp.split(first.to_bytes() + second.to_bytes())
    assert segments == [first, second]


def test_non_buffer_types():

    source = netsim.Port('1')
    destination = netsim.Port('2')

    for bad in (5, 'text', [1, 2]):
        with pytest.raises(InvalidArgument):
            UDPSegment(source, destination, 0, bad)

        with pytest.raises(InvalidArgument):
            UDPSegment.from_bytes(bad)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
