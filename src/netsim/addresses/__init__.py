""" Fixed-width address value types used by the protocol layers.
"""

from .address import Address
from .port import Port
from .ipv4 import IPv4

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
