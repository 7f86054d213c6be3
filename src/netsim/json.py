''' Wrapper module around :mod:`orjson` providing the equivalent of
    :func:`json.loads` and :func:`json.dumps` for stack descriptions.
'''

import orjson


# orjson.dumps returns bytes; everything that writes through this module
# expects bytes in return, including the pretty-printed variant.

def dumps(value, pretty=False):

    if pretty:
        option = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS
    else:
        option = None

    return orjson.dumps(value, option=option)


loads = orjson.loads
JSONDecodeError = orjson.JSONDecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
