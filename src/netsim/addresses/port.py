""" Transport-layer port numbers.
"""

import re

from ..errors import InvalidArgument
from .address import Address


_decimal = re.compile(r'[+-]?[0-9]+')


class Port(Address):
    """ A transport-layer port in the range 0 to 65535, stored as two
        big-endian bytes. The *value* can be a decimal string, such as
        ``'8080'``, or a plain integer.
    """

    size = 2
    minimum = 0
    maximum = 0xFFFF

    __slots__ = ()

    @classmethod
    def parse(cls, value):

        # bool is a subclass of int, but True is not a port number.

        if isinstance(value, bool):
            raise InvalidArgument('invalid port: ' + repr(value))

        if isinstance(value, int):
            number = value
        elif isinstance(value, str):
            stripped = value.strip()
            if _decimal.fullmatch(stripped) is None:
                raise InvalidArgument('invalid port format: ' + repr(value))
            number = int(stripped)
        else:
            raise InvalidArgument('invalid port type: ' + type(value).__name__)

        if number < cls.minimum or number > cls.maximum:
            raise InvalidArgument('port out of range: ' + str(number))

        return number.to_bytes(cls.size, 'big')


    @classmethod
    def format(cls, raw):
        return str(int.from_bytes(raw, 'big'))


    @property
    def number(self):
        """ The port as an integer.
        """

        return int.from_bytes(self._raw, 'big')


# end of class Port


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
