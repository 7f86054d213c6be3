""" Base class for fixed-width binary addresses. An :class:`Address` is an
    immutable value: the string form is validated once, at construction,
    and the raw bytes never change afterwards.
"""

import functools

from ..errors import InvalidArgument


@functools.total_ordering
class Address:
    """ Subclasses must set :attr:`size` to the width of the address in
        bytes, and implement :func:`parse` and :func:`format` to convert
        between the human-readable form and the raw bytes. Equality,
        ordering and hashing are all based on the raw bytes; two addresses
        of different subclasses never compare equal.

        :ivar size: The number of bytes in the raw representation.
    """

    size = None

    __slots__ = ('_raw',)

    def __init__(self, value):

        if value is None:
            raise InvalidArgument(type(self).__name__ + ': address cannot be None')

        raw = self.parse(value)

        if len(raw) != self.size:
            raise InvalidArgument("%s: expected %d bytes, parse produced %d" % (type(self).__name__, self.size, len(raw)))

        self._raw = bytes(raw)


    @classmethod
    def parse(cls, value):
        """ Convert *value* to the raw bytes of this address, raising
            :class:`InvalidArgument` if it is not valid.
        """

        raise NotImplementedError('parse() must be implemented by the subclass')


    @classmethod
    def format(cls, raw):
        """ Convert *raw* bytes back into the human-readable form accepted
            by :func:`parse`.
        """

        raise NotImplementedError('format() must be implemented by the subclass')


    @classmethod
    def from_bytes(cls, raw):
        """ Build a new instance from exactly :attr:`size` raw bytes.
        """

        if raw is None:
            raise InvalidArgument(cls.__name__ + '.from_bytes: input is None')

        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise InvalidArgument("%s.from_bytes: bytes expected, not %s" % (cls.__name__, type(raw).__name__))

        raw = bytes(raw)

        if len(raw) != cls.size:
            raise InvalidArgument("%s.from_bytes: %d bytes expected but received %d" % (cls.__name__, cls.size, len(raw)))

        return cls(cls.format(raw))


    def to_bytes(self):
        return self._raw


    def __str__(self):
        return self.format(self._raw)


    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, str(self))


    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw


    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._raw < other._raw


    def __hash__(self):
        return hash((type(self).__name__, self._raw))


    def __setattr__(self, name, value):
        if hasattr(self, '_raw'):
            raise AttributeError(type(self).__name__ + ' instances are immutable')
        object.__setattr__(self, name, value)


# end of class Address


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
