""" IPv4 addresses with an associated subnet mask.
"""

from ..errors import InvalidArgument
from .address import Address


def _octets(text, what='address'):
    """ Parse a dotted-decimal string into four bytes. Empty octets, extra
        or missing octets, and octets outside 0-255 are all rejected.
    """

    if not isinstance(text, str):
        raise InvalidArgument('IPv4 %s must be a string, not %s' % (what, type(text).__name__))

    parts = text.strip().split('.')

    if len(parts) != 4:
        raise InvalidArgument("invalid IPv4 %s: must contain exactly 4 octets, got %d in %r" % (what, len(parts), text))

    octets = bytearray()

    for index,part in enumerate(parts, 1):
        if part == '':
            raise InvalidArgument("octet #%d is empty in %r" % (index, text))

        if not part.isdigit() or not part.isascii():
            raise InvalidArgument("octet #%d is not a valid integer: %r" % (index, part))

        value = int(part)
        if value > 255:
            raise InvalidArgument("octet #%d out of range (0-255): %d" % (index, value))

        octets.append(value)

    return bytes(octets)


def _prefix(mask):
    """ Accept either a prefix length (0-32) or a dotted-decimal netmask,
        and return the prefix length.
    """

    if isinstance(mask, bool):
        raise InvalidArgument('invalid IPv4 mask: ' + repr(mask))

    if isinstance(mask, int):
        if mask < 0 or mask > 32:
            raise InvalidArgument('IPv4 prefix out of range (0-32): ' + str(mask))
        return mask

    value = int.from_bytes(_octets(mask, 'mask'), 'big')

    # A valid netmask is a run of ones followed by a run of zeros; the
    # inverted mask is then one less than a power of two.

    inverted = ~value & 0xFFFFFFFF
    if inverted & (inverted + 1):
        raise InvalidArgument('IPv4 mask is not contiguous: ' + repr(mask))

    return bin(value).count('1')


class IPv4(Address):
    """ An IPv4 *address* in dotted-decimal notation, paired with a subnet
        *mask* given either as a prefix length (24) or as a dotted-decimal
        netmask ('255.255.255.0'). The mask plays no part in equality or
        ordering; two instances with the same address are equal.
    """

    size = 4

    __slots__ = ('_prefix',)

    def __init__(self, address, mask=32):

        # The prefix must be in place before Address.__init__() stores the
        # raw bytes; the instance is frozen after that.

        self._prefix = _prefix(mask)
        Address.__init__(self, address)


    @classmethod
    def parse(cls, value):
        return _octets(value)


    @classmethod
    def format(cls, raw):
        return '.'.join(str(octet) for octet in raw)


    @classmethod
    def from_bytes(cls, raw, mask=32):

        if raw is None:
            raise InvalidArgument('IPv4.from_bytes: input is None')

        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise InvalidArgument("%s.from_bytes: bytes expected, not %s" % (cls.__name__, type(raw).__name__))

        raw = bytes(raw)

        if len(raw) != cls.size:
            raise InvalidArgument("IPv4.from_bytes: 4 bytes expected but received %d" % (len(raw)))

        return cls(cls.format(raw), mask)


    def __repr__(self):
        return "IPv4(%r, %d)" % (str(self), self._prefix)


    @property
    def prefix(self):
        return self._prefix


    @property
    def mask(self):
        """ The subnet mask in dotted-decimal notation.
        """

        return self.format(self._mask_int(self._prefix).to_bytes(4, 'big'))


    @property
    def network(self):
        """ The network address: this address with the host bits cleared.
        """

        value = int.from_bytes(self._raw, 'big') & self._mask_int(self._prefix)
        return IPv4(self.format(value.to_bytes(4, 'big')), self._prefix)


    @staticmethod
    def _mask_int(prefix):
        if prefix == 0:
            return 0
        return (0xFFFFFFFF << (32 - prefix)) & 0xFFFFFFFF


    def in_subnet(self, base, prefix):
        """ Return True if this address falls within *base*/*prefix*.
        """

        prefix = _prefix(prefix)
        mask = self._mask_int(prefix)

        mine = int.from_bytes(self._raw, 'big')
        theirs = int.from_bytes(_octets(base), 'big')

        return mine & mask == theirs & mask


    def is_loopback(self):
        return self.in_subnet('127.0.0.0', 8)


    def is_multicast(self):
        return self.in_subnet('224.0.0.0', 4)


    def is_broadcast(self):
        return self._raw == b'\xff\xff\xff\xff'


    def is_private(self):
        return self.in_subnet('10.0.0.0', 8) \
            or self.in_subnet('172.16.0.0', 12) \
            or self.in_subnet('192.168.0.0', 16)


    def is_link_local(self):
        return self.in_subnet('169.254.0.0', 16)


    def is_unspecified(self):
        return self._raw == b'\x00\x00\x00\x00'


# end of class IPv4


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
