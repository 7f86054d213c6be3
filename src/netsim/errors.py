"""Error taxonomy shared by every layer of the simulated stack.

The kinds are deliberately disjoint: none of them subclasses another, so a
malformed frame is never mistaken for a missing link.
"""


class NetsimError(Exception):
    """Base class for all netsim errors."""


class InvalidArgument(NetsimError, ValueError):
    """An empty buffer, an out-of-range field, or a malformed address."""


class MissingLink(NetsimError):
    """A node was asked to forward data to a neighbor that is not linked."""


class MalformedFrame(NetsimError, ValueError):
    """A buffer could not be parsed into well-formed segments."""


class InternalFailure(NetsimError, RuntimeError):
    """Unexpected failure while assembling an output buffer."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
