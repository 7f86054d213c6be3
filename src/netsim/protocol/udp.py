""" UDP layer of the simulated stack: the :class:`UDPSegment` wire format,
    and the :class:`UDPProtocol` chain node that segments payloads on the
    way down and reassembles them on the way up.

    Every segment is an 8-byte header followed by the payload::

        offset  size  field
        0       2     source port           (big-endian uint16)
        2       2     destination port      (big-endian uint16)
        4       2     sequence number       (big-endian uint16)
        6       2     segment length, bits  (big-endian uint16)
        8       n     payload

    The length field counts the whole segment, header included, in bits.
    It is the only framing information: a buffer of back-to-back segments
    carries no delimiters, and is split apart using the length alone.
"""

import logging
import struct

from ..addresses import Port
from ..errors import InvalidArgument, MalformedFrame, InternalFailure
from .base import Protocol


logger = logging.getLogger(__name__)

_header = struct.Struct('!HHHH')

HEADER_LENGTH = _header.size
HEADER_BITS = HEADER_LENGTH * 8
MAX_SEQUENCE = 0xFFFF
MAX_LENGTH_BITS = 0xFFFF
MAX_PAYLOAD = MAX_LENGTH_BITS // 8 - HEADER_LENGTH


def _port(value, what):

    if value is None:
        raise InvalidArgument('UDP: ' + what + ' port cannot be None')

    if isinstance(value, Port):
        return value

    return Port(value)


def _port_header(segment, what):
    """ Check that *segment* is a buffer holding at least the two port
        fields, and return it as bytes.
    """

    if segment is None or not isinstance(segment, (bytes, bytearray, memoryview)):
        raise InvalidArgument('UDP: a bytes segment is required to extract the ' + what + ' port')

    if len(segment) < 4:
        raise InvalidArgument('UDP: segment too short to extract ' + what + ' port')

    return bytes(segment[0:4])


class UDPSegment:
    """ One framed unit of the UDP wire format. The length field is always
        derived from the payload; it cannot be set independently.

        :ivar source: The source :class:`Port`.
        :ivar destination: The destination :class:`Port`.
        :ivar sequence: Position of this segment in the original payload.
        :ivar payload: The bytes carried by this segment, possibly empty.
    """

    def __init__(self, source, destination, sequence, payload):

        if isinstance(sequence, bool) or not isinstance(sequence, int):
            raise InvalidArgument('UDP: sequence number must be an integer')

        if sequence < 0 or sequence > MAX_SEQUENCE:
            raise InvalidArgument('UDP: sequence number out of range: ' + str(sequence))

        if payload is None:
            raise InvalidArgument('UDP: segment payload cannot be None')

        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise InvalidArgument('UDP: segment payload must be bytes, not ' + type(payload).__name__)

        payload = bytes(payload)

        if len(payload) > MAX_PAYLOAD:
            raise InvalidArgument("UDP: segment payload of %d bytes exceeds the %d byte maximum" % (len(payload), MAX_PAYLOAD))

        self.source = _port(source, 'source')
        self.destination = _port(destination, 'destination')
        self.sequence = sequence
        self.payload = payload


    def __repr__(self):
        return "UDPSegment(%s, %s, %d, %r)" % (self.source, self.destination, self.sequence, self.payload)


    def __eq__(self, other):
        if not isinstance(other, UDPSegment):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()


    __hash__ = None


    @property
    def length(self):
        """ Total length of the segment in bits, header included.
        """

        return (HEADER_LENGTH + len(self.payload)) * 8


    def header(self):
        """ Return the 8 header bytes for this segment.
        """

        source = self.source.number
        destination = self.destination.number

        return _header.pack(source, destination, self.sequence, self.length)


    def to_bytes(self):
        return self.header() + self.payload


    @classmethod
    def from_bytes(cls, data):
        """ Parse exactly one segment from *data*. The buffer must hold the
            header plus precisely the number of payload bytes the length
            field declares; anything else raises :class:`MalformedFrame`.
        """

        if data is None:
            raise MalformedFrame('UDP: segment buffer is None')

        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgument('UDP: segment buffer must be bytes, not ' + type(data).__name__)

        data = bytes(data)

        if len(data) < HEADER_LENGTH:
            raise MalformedFrame("UDP: segment of %d bytes is shorter than the %d byte header" % (len(data), HEADER_LENGTH))

        source, destination, sequence, bits = _header.unpack_from(data)
        total = check_length(bits)

        if len(data) != total:
            raise MalformedFrame("UDP: segment declares %d bytes but buffer holds %d" % (total, len(data)))

        return cls(Port(source), Port(destination), sequence, data[HEADER_LENGTH:])


# end of class UDPSegment


def check_length(bits):
    """ Validate a length-in-bits header field and return the total segment
        length in bytes.
    """

    if bits % 8 != 0:
        raise MalformedFrame('UDP: segment length not a multiple of 8: ' + str(bits))

    if bits < HEADER_BITS:
        raise MalformedFrame('UDP: invalid segment length (too small): ' + str(bits))

    return bits // 8


def split(data):
    """ Split a buffer of back-to-back segments into a list of
        :class:`UDPSegment` instances, in the order they appear in the
        buffer. The whole buffer must be consumed: trailing bytes too short
        to hold a header are a :class:`MalformedFrame`, the same as a
        truncated payload.
    """

    segments = list()
    view = memoryview(data)
    offset = 0
    remaining = len(view)

    while remaining > 0:
        if remaining < HEADER_LENGTH:
            raise MalformedFrame("UDP: %d trailing bytes cannot form a segment header" % (remaining))

        bits = _header.unpack_from(view, offset)[3]
        total = check_length(bits)

        if total > remaining:
            raise MalformedFrame("UDP: truncated segment, expected payload=%d bytes but only %d remain" % (total - HEADER_LENGTH, remaining - HEADER_LENGTH))

        segment = UDPSegment.from_bytes(view[offset:offset + total])
        segments.append(segment)

        offset += total
        remaining -= total

    return segments


class UDPProtocol(Protocol):
    """ The UDP node of a protocol chain.

        Going down, :func:`encapsulate` splits the upper-layer payload into
        chunks of at most *mss* bytes and gives each one a header with an
        increasing sequence number, starting from zero. Going up,
        :func:`decapsulate` frames a buffer of concatenated segments using
        their length fields, sorts them by sequence number, and joins the
        payloads back together. Segments may arrive in any order; gaps and
        duplicate sequence numbers are passed through as they are.

        :ivar mss: Maximum segment size: the largest payload, in bytes,
                   carried by a single segment.
        :ivar source: The :class:`Port` stamped as the source of every
                      outgoing segment.
        :ivar destination: The :class:`Port` stamped as the destination.
    """

    name = 'UDP'

    def __init__(self, mss, source, destination):

        Protocol.__init__(self)

        if isinstance(mss, bool) or not isinstance(mss, int):
            raise InvalidArgument('UDP: segment size must be an integer')

        if mss <= 0:
            raise InvalidArgument('UDP: segment size must be positive')

        if mss > MAX_PAYLOAD:
            raise InvalidArgument("UDP: segment size %d exceeds the %d byte maximum" % (mss, MAX_PAYLOAD))

        self.mss = mss
        self.source = _port(source, 'source')
        self.destination = _port(destination, 'destination')


    def __repr__(self):
        return "UDPProtocol(%d, %s, %s)" % (self.mss, self.source, self.destination)


    def segment(self, upper):
        """ Return the list of :class:`UDPSegment` instances that
            :func:`encapsulate` would put on the wire for *upper*.
        """

        upper = self._check_payload(upper, 'encapsulation')
        mss = self.mss

        count = -(-len(upper) // mss)
        if count > MAX_SEQUENCE + 1:
            raise InvalidArgument("UDP: payload of %d bytes needs %d segments, at most %d can be numbered" % (len(upper), count, MAX_SEQUENCE + 1))

        segments = list()

        for sequence,offset in enumerate(range(0, len(upper), mss)):
            chunk = upper[offset:offset + mss]
            segment = UDPSegment(self.source, self.destination, sequence, chunk)
            segments.append(segment)

        return segments


    def encapsulate(self, upper):

        segments = self.segment(upper)
        below = self._require_next()

        # Segment fields are range-checked at construction; a packing error
        # here means a segment was altered after it was built.

        try:
            buffer = b''.join(segment.to_bytes() for segment in segments)
        except struct.error as e:
            raise InternalFailure('UDP: failed to assemble segments: ' + str(e))

        logger.debug("%s: %d bytes in %d segment(s), mss %d", self.name, len(upper), len(segments), self.mss)

        return below.encapsulate(buffer)


    def decapsulate(self, lower):

        lower = self._check_payload(lower, 'decapsulation')
        above = self._require_previous()

        segments = split(lower)
        segments.sort(key=lambda segment: segment.sequence)

        buffer = b''.join(segment.payload for segment in segments)

        logger.debug("%s: reassembled %d bytes from %d segment(s)", self.name, len(buffer), len(segments))

        return above.decapsulate(buffer)


    def extract_source(self, segment):
        """ Return the source :class:`Port` of a single raw segment without
            parsing the rest of it.
        """

        segment = _port_header(segment, 'source')
        return Port.from_bytes(segment[0:2])


    def extract_destination(self, segment):
        """ Return the destination :class:`Port` of a single raw segment
            without parsing the rest of it.
        """

        segment = _port_header(segment, 'destination')
        return Port.from_bytes(segment[2:4])


    def copy(self):
        return UDPProtocol(self.mss, self.source, self.destination)


    @classmethod
    def from_config(cls, block):
        """ Build a node from a layer block of a stack description, for
            example ``{"protocol": "udp", "mss": 4, "source": "5000",
            "destination": "80"}``.
        """

        try:
            mss = block['mss']
            source = block['source']
            destination = block['destination']
        except KeyError as e:
            raise InvalidArgument('UDP: layer description is missing ' + str(e))

        return cls(mss, source, destination)


# end of class UDPProtocol


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
