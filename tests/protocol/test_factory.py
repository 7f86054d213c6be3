import pytest

import netsim
from netsim.errors import InvalidArgument


description = {
    'layers': [
        {'protocol': 'udp', 'mss': 8, 'source': '5000', 'destination': '80'},
        {'protocol': 'UDP', 'mss': 4, 'source': 6000, 'destination': 90},
    ],
}


def test_create():

    udp = netsim.protocol.factory.create(description['layers'][0])

    assert isinstance(udp, netsim.UDPProtocol)
    assert udp.mss == 8
    assert udp.source == netsim.Port('5000')
    assert udp.next is None

    assert 'udp' in netsim.protocol.factory.names()


def test_create_invalid():

    bad_blocks = (
        None,
        ['udp'],
        {},
        {'protocol': 17},
        {'protocol': 'sctp'},
        {'protocol': 'udp', 'mss': 8, 'source': '5000'},
        {'protocol': 'udp', 'mss': 0, 'source': '5000', 'destination': '80'},
    )

    for block in bad_blocks:
        with pytest.raises(InvalidArgument):
            netsim.protocol.factory.create(block)


def test_register():

    class Echo(netsim.protocol.Terminal):
        name = 'echo'

    netsim.protocol.factory.register('Echo', lambda block: Echo())

    try:
        node = netsim.protocol.factory.create({'protocol': 'echo'})
        assert isinstance(node, Echo)
    finally:
        del netsim.protocol.factory._protocols['echo']


def test_from_config():

    chain = netsim.protocol.chain.from_config(description)

    assert [layer.mss for layer in chain.layers] == [8, 4]
    assert chain.decapsulate(chain.encapsulate(b'configured')) == b'configured'

    for bad in ({}, {'layers': 'udp'}, {'layers': []}, ['layers']):
        with pytest.raises(InvalidArgument):
            netsim.protocol.chain.from_config(bad)


def test_load(stack_home):

    netsim.config.save('pair', description)
    chain = netsim.protocol.chain.load('pair')

    assert len(chain) == 2
    chain.validate()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
