"""Protocol-chain interface.

This is the contract every layer of the simulated stack follows. A layer
frames data on the way down (:meth:`Protocol.encapsulate`) and strips that
framing on the way up (:meth:`Protocol.decapsulate`), handing the result to
the adjacent layer in each case.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .. import weakref
from ..errors import InvalidArgument, MissingLink


class Protocol(ABC):
    """ A single node in a protocol chain.

        The ``next`` relation points down the stack, toward the wire; the
        ``previous`` relation points up, toward the application. Both are
        weak references: a node never keeps its neighbors alive. Whoever
        assembles the stack, usually a :class:`netsim.protocol.chain.Chain`,
        owns the nodes.
    """

    name = 'protocol'

    def __init__(self):
        self._next = None
        self._previous = None


    @property
    def next(self) -> Optional[Protocol]:
        return weakref.resolve(self._next)


    @property
    def previous(self) -> Optional[Protocol]:
        return weakref.resolve(self._previous)


    def set_next(self, node: Protocol) -> None:
        """ Link *node* as the layer below this one. No cycle or uniqueness
            check is performed.
        """

        self._next = weakref.link(self._check_node(node, 'next'))


    def set_previous(self, node: Protocol) -> None:
        """ Link *node* as the layer above this one.
        """

        self._previous = weakref.link(self._check_node(node, 'previous'))


    def unlink(self) -> None:
        """ Forget both neighbors.
        """

        self._next = None
        self._previous = None


    def _check_node(self, node, relation):

        if node is None:
            raise InvalidArgument(f"{self.name}: {relation} protocol cannot be None")

        if not isinstance(node, Protocol):
            raise InvalidArgument(f"{self.name}: {relation} protocol must be a Protocol, not {type(node).__name__}")

        return node


    def _check_payload(self, data, direction) -> bytes:

        if data is None:
            raise InvalidArgument(f"{self.name}: payload on {direction} cannot be None")

        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgument(f"{self.name}: payload on {direction} must be bytes, not {type(data).__name__}")

        if len(data) == 0:
            raise InvalidArgument(f"{self.name}: payload on {direction} cannot be empty")

        return bytes(data)


    def _require_next(self) -> Protocol:

        node = self.next
        if node is None:
            raise MissingLink(f"{self.name}: next protocol is not defined")

        return node


    def _require_previous(self) -> Protocol:

        node = self.previous
        if node is None:
            raise MissingLink(f"{self.name}: previous protocol is not defined")

        return node


    @abstractmethod
    def encapsulate(self, upper: bytes) -> bytes:
        """Frame *upper* and forward it to the next layer."""

    @abstractmethod
    def decapsulate(self, lower: bytes) -> bytes:
        """Strip this layer's framing from *lower* and forward it up."""

    @abstractmethod
    def copy(self) -> Protocol:
        """Return an unlinked node with the same configuration."""


class Terminal(Protocol):
    """ The end of a chain. A terminal adds no framing and has nowhere to
        forward to: both directions return their input unchanged, so it
        closes the top of a stack as well as the bottom.
    """

    name = 'terminal'

    def encapsulate(self, upper: bytes) -> bytes:
        return self._check_payload(upper, 'encapsulation')

    def decapsulate(self, lower: bytes) -> bytes:
        return self._check_payload(lower, 'decapsulation')

    def copy(self) -> Terminal:
        return Terminal()

    def __repr__(self):
        return 'Terminal()'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
