"""Chain assembly.

A :class:`Chain` owns an ordered list of protocol nodes, top layer first,
with a :class:`Terminal` closing each end. The nodes themselves only hold
weak references to their neighbors; the chain's list is what keeps them
alive. Chains are assembled in one step by :class:`ChainBuilder` and
validated before they are handed back, so a half-linked chain is never
visible to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Tuple

from .. import config
from ..errors import InvalidArgument, MissingLink
from ..pdu import PDU
from . import factory
from .base import Protocol, Terminal
from .udp import UDPProtocol


logger = logging.getLogger(__name__)


class Chain:

    def __init__(self, layers):

        layers = list(layers)

        if len(layers) == 0:
            raise InvalidArgument('chain: at least one layer is required')

        for layer in layers:
            if not isinstance(layer, Protocol):
                raise InvalidArgument(f"chain: layer must be a Protocol, not {type(layer).__name__}")

        # A node belongs to one chain only. Relinking a node that another
        # chain already uses would silently break that chain.

        if len(set(map(id, layers))) != len(layers):
            raise InvalidArgument('chain: the same layer appears more than once')

        for layer in layers:
            if layer.next is not None or layer.previous is not None:
                raise InvalidArgument(f"chain: {layer.name} layer is already linked; use copy() for a second chain")

        nodes: List[Protocol] = [Terminal()] + layers + [Terminal()]

        for upper, lower in zip(nodes, nodes[1:]):
            upper.set_next(lower)
            lower.set_previous(upper)

        self._nodes = nodes
        self.validate()


    def __len__(self) -> int:
        return len(self._nodes) - 2

    def __iter__(self) -> Iterator[Protocol]:
        return iter(self.layers)

    def __repr__(self):
        return f"Chain({list(self.layers)!r})"


    @property
    def layers(self) -> Tuple[Protocol, ...]:
        return tuple(self._nodes[1:-1])

    @property
    def top(self) -> Protocol:
        return self._nodes[0]

    @property
    def bottom(self) -> Protocol:
        return self._nodes[-1]


    def validate(self) -> None:
        """Raise :class:`MissingLink` unless every layer points at its neighbors."""

        nodes = self._nodes

        for index in range(1, len(nodes) - 1):
            layer = nodes[index]

            if layer.previous is not nodes[index - 1]:
                raise MissingLink(f"chain: layer {index - 1} ({layer.name}) is not linked to the layer above it")

            if layer.next is not nodes[index + 1]:
                raise MissingLink(f"chain: layer {index - 1} ({layer.name}) is not linked to the layer below it")


    # Data path
    def encapsulate(self, data: bytes) -> bytes:
        return self._nodes[1].encapsulate(data)

    def decapsulate(self, data: bytes) -> bytes:
        return self._nodes[-2].decapsulate(data)

    def send(self, pdu: PDU) -> bytes:
        if not isinstance(pdu, PDU):
            raise InvalidArgument(f"chain: expected a PDU, not {type(pdu).__name__}")
        return self.encapsulate(pdu.to_bytes())


    def copy(self) -> Chain:
        """Return an independent chain built from copies of every layer."""
        return Chain([layer.copy() for layer in self.layers])


class ChainBuilder:

    def __init__(self):
        self._layers: List[Protocol] = []
        self._built = False

    # Layers, top first
    def add(self, node: Protocol):
        if not isinstance(node, Protocol):
            raise InvalidArgument(f"chain: layer must be a Protocol, not {type(node).__name__}")
        self._layers.append(node)
        return self

    def udp(self, mss: int, source, destination):
        return self.add(UDPProtocol(mss, source, destination))

    # Finalize
    def build(self) -> Chain:

        if not self._layers:
            raise InvalidArgument('chain: no layers specified')

        # The first chain gets the nodes that were added; every later build
        # gets fresh copies of them.

        if self._built:
            layers = [layer.copy() for layer in self._layers]
        else:
            layers = self._layers

        chain = Chain(layers)
        self._built = True
        logger.debug("assembled chain: %s", ' / '.join(layer.name for layer in chain))

        return chain


def from_config(description: Dict[str, Any]) -> Chain:
    """Build a chain from a stack description: ``{"layers": [...]}``, top layer first."""

    if not isinstance(description, dict):
        raise InvalidArgument(f"stack description must be an object, not {type(description).__name__}")

    try:
        blocks = description['layers']
    except KeyError:
        raise InvalidArgument("stack description has no 'layers' field")

    if not isinstance(blocks, list):
        raise InvalidArgument("stack description 'layers' must be a list")

    builder = ChainBuilder()
    for block in blocks:
        builder.add(factory.create(block))

    return builder.build()


def load(name: str) -> Chain:
    """Build a chain from the named stack description on disk."""
    return from_config(config.load(name))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
