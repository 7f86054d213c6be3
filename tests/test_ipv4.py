import pytest

import netsim
from netsim.errors import InvalidArgument


def test_parse():

    address = netsim.IPv4('192.168.1.10', 24)

    assert address.to_bytes() == bytes((192, 168, 1, 10))
    assert str(address) == '192.168.1.10'
    assert address.prefix == 24
    assert address.mask == '255.255.255.0'
    assert str(address.network) == '192.168.1.0'


def test_dotted_mask():

    address = netsim.IPv4('10.1.2.3', '255.255.0.0')
    assert address.prefix == 16

    assert netsim.IPv4('10.1.2.3', '0.0.0.0').prefix == 0
    assert netsim.IPv4('10.1.2.3', '255.255.255.255').prefix == 32

    with pytest.raises(InvalidArgument):
        netsim.IPv4('10.1.2.3', '255.0.255.0')

    with pytest.raises(InvalidArgument):
        netsim.IPv4('10.1.2.3', 33)


def test_malformed():

    for bad in ('1.2.3', '1.2.3.4.5', '1.2..4', '256.1.1.1', '1.2.3.-4', 'a.b.c.d', '', None):
        with pytest.raises(InvalidArgument):
            netsim.IPv4(bad)


def test_from_bytes():

    address = netsim.IPv4.from_bytes(b'\x7f\x00\x00\x01', 8)
    assert str(address) == '127.0.0.1'
    assert address.prefix == 8

    with pytest.raises(InvalidArgument):
        netsim.IPv4.from_bytes(b'\x7f\x00\x00')


def test_classification():

    assert netsim.IPv4('127.0.0.1').is_loopback()
    assert netsim.IPv4('224.0.0.251').is_multicast()
    assert netsim.IPv4('255.255.255.255').is_broadcast()
    assert netsim.IPv4('0.0.0.0').is_unspecified()
    assert netsim.IPv4('169.254.3.4').is_link_local()

    for private in ('10.0.0.1', '172.16.5.4', '172.31.255.255', '192.168.0.1'):
        assert netsim.IPv4(private).is_private()

    for public in ('8.8.8.8', '172.32.0.1', '192.169.0.1'):
        assert not netsim.IPv4(public).is_private()

    assert netsim.IPv4('192.168.1.77').in_subnet('192.168.1.0', 24)
    assert not netsim.IPv4('192.168.2.77').in_subnet('192.168.1.0', 24)


def test_equality():

    assert netsim.IPv4('10.0.0.1', 8) == netsim.IPv4('10.0.0.1', 24)
    assert netsim.IPv4('10.0.0.1') < netsim.IPv4('10.0.0.2')
    assert netsim.IPv4('10.0.0.1') != netsim.Port('1')


def test_from_bytes_types():

    for bad in ('abcd', 4, [127, 0, 0, 1]):
        with pytest.raises(InvalidArgument):
            netsim.IPv4.from_bytes(bad)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
