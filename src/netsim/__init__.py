""" Python simulation of a layered network protocol stack. Protocol
    handlers are chained so that a payload is encapsulated on the way down
    the stack and decapsulated on the way up, without any real sockets.
"""

# Utility components.

from . import errors
from . import json
from . import weakref

# Submodules used by multiple other components.

from . import addresses
from . import pdu
from . import config
home = config.directory

# Primary public-facing interfaces.

from . import protocol

from .addresses import Port, IPv4
from .pdu import PDU, RawPDU, HTTPRequest, HTTPMethod
from .protocol import Chain, ChainBuilder, UDPProtocol, UDPSegment, Terminal

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
