"""Construct protocol nodes from the layer blocks of a stack description."""

from __future__ import annotations

from typing import Any, Callable, Dict

from ..errors import InvalidArgument
from .base import Protocol
from .udp import UDPProtocol


_protocols: Dict[str, Callable[[Dict[str, Any]], Protocol]] = {}


def register(name: str, builder: Callable[[Dict[str, Any]], Protocol]) -> None:
    """Make *builder* available under the protocol *name* (case-insensitive)."""
    _protocols[name.lower()] = builder


def names():
    return tuple(sorted(_protocols.keys()))


def create(block: Dict[str, Any]) -> Protocol:
    """Return an unlinked node for one layer block, e.g. ``{"protocol": "udp", ...}``."""

    if not isinstance(block, dict):
        raise InvalidArgument(f"layer description must be an object, not {type(block).__name__}")

    try:
        name = block['protocol']
    except KeyError:
        raise InvalidArgument("layer description has no 'protocol' field")

    if not isinstance(name, str):
        raise InvalidArgument(f"protocol name must be a string: {name!r}")

    try:
        builder = _protocols[name.lower()]
    except KeyError:
        raise InvalidArgument(f"unknown protocol: {name!r}")

    return builder(block)


register('udp', UDPProtocol.from_config)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
