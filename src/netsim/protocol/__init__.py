"""
netsim Protocol Layer
=====================

Layered protocol handlers chained together: each layer frames data on the
way down and strips its framing on the way up.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

PDU producer (netsim.pdu)
    │  to_bytes()
    ▼
Chain (chain.py)
    Owns the nodes, top layer first
    Built and validated in one step by ChainBuilder

    │  encapsulate() ▼            ▲ decapsulate()
    ▼
Protocol nodes (base.py, udp.py)
    Terminal  - closes each end of the chain
    UDP       - MSS segmentation / sequence-ordered reassembly
    ...       - further variants register with factory.py

---------------------------------------------------------------------

Design Principles
-----------------

1. Opaque Boundaries
   A layer never inspects the bytes it hands to, or receives from,
   a neighboring layer.

2. Non-owning Links
   next/previous are weak references; the Chain owns the nodes.

3. No Partial Results
   Every error aborts the whole call.

---------------------------------------------------------------------
"""

from . import base
from . import udp
from . import factory
from . import chain

from .base import Protocol, Terminal
from .udp import UDPSegment, UDPProtocol
from .chain import Chain, ChainBuilder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
