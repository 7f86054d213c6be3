import os
import pytest

import netsim


@pytest.fixture
def stack_home(tmp_path, monkeypatch):

    monkeypatch.delenv('NETSIM_HOME', raising=False)
    netsim.config.directory.found = None

    home = netsim.config.directory(str(tmp_path))

    yield home

    netsim.config.directory.found = None
    os.environ.pop('NETSIM_HOME', None)


@pytest.fixture
def udp_stack():
    """ A UDP node linked between two terminals. The terminals are returned
        alongside the node: the node only holds weak references to them.
    """

    top = netsim.protocol.Terminal()
    bottom = netsim.protocol.Terminal()

    udp = netsim.protocol.UDPProtocol(4, netsim.Port('5000'), netsim.Port('80'))
    udp.set_previous(top)
    udp.set_next(bottom)

    return top, udp, bottom


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
