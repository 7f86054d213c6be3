""" Protocol data units: anything that can be handed to the top of a chain
    as a raw byte sequence.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

from .errors import InvalidArgument


class PDU(ABC):
    """Minimal contract for a protocol data unit."""

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Return the raw byte form of this unit."""


class RawPDU(PDU):
    """ A PDU that is nothing more than the bytes it was given.
    """

    def __init__(self, data: bytes):

        if data is None or len(data) == 0:
            raise InvalidArgument('RawPDU: data cannot be None or empty')

        self.data = bytes(data)


    def to_bytes(self) -> bytes:
        return self.data


class HTTPMethod(enum.Enum):
    GET = 'GET'
    HEAD = 'HEAD'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'


class HTTPRequest(PDU):
    """ A minimal HTTP/1.0 request. The header carries the request line and
        the ``Host`` field; POST requests also declare ``Content-Length``.
        The body follows the blank line that ends the header.
    """

    version = 'HTTP/1.0'

    def __init__(self, method: HTTPMethod, path: str, host: str, content: bytes = b''):

        if path is None or host is None or content is None:
            raise InvalidArgument('HTTPRequest: path, host and content cannot be None')

        try:
            method = HTTPMethod(method)
        except ValueError:
            raise InvalidArgument('HTTPRequest: unknown method ' + repr(method))

        self.method = method
        self.path = path
        self.host = host
        self.content = bytes(content)


    def header(self) -> bytes:

        lines = list()
        lines.append(f"{self.method.value} {self.path} {self.version}")
        lines.append(f"Host: {self.host}")

        if self.method is HTTPMethod.POST:
            lines.append(f"Content-Length: {len(self.content)}")

        lines.append('')
        lines.append('')

        try:
            return '\r\n'.join(lines).encode('ascii')
        except UnicodeEncodeError:
            raise InvalidArgument('HTTPRequest: path and host must be ASCII')


    def to_bytes(self) -> bytes:
        return self.header() + self.content


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
