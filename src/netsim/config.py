""" Stack descriptions stored on disk. A stack description is a JSON
    document listing the layers of a chain, top layer first::

        {"layers": [{"protocol": "udp", "mss": 4, "source": "5000", "destination": "80"}]}

    Descriptions live in the ``stack`` subdirectory of the configuration
    directory, one file per stack, named after the stack.
"""

import logging
import os

from . import json
from .errors import InvalidArgument


logger = logging.getLogger(__name__)


def directory(default=None):
    """ Return the directory holding the ``stack`` subdirectory of stack
        descriptions. An absolute *default* replaces the current choice;
        otherwise ``NETSIM_HOME`` is used if set, then ``~/.netsim``. The
        answer is cached after the first call. Nothing is created here:
        :func:`save` creates directories as it needs them.
    """

    if default is not None:
        default = str(default)

        if not os.path.isabs(default):
            raise ValueError('the default directory must be an absolute path')

        os.environ['NETSIM_HOME'] = default
        directory.found = default
        return default

    if directory.found is None:
        found = os.environ.get('NETSIM_HOME')

        if found is None:
            found = os.path.join(os.path.expanduser('~'), '.netsim')

        directory.found = found

    return directory.found

directory.found = None



def filename(name):
    """ Return the full path for the stack description *name*. Anything that
        already looks like a JSON file path is returned as-is.
    """

    name = str(name)

    if name.endswith('.json'):
        return name

    if name == '' or os.sep in name or name.startswith('.'):
        raise InvalidArgument('invalid stack name: ' + repr(name))

    return os.path.join(directory(), 'stack', name + '.json')



def load(name):
    """ Load and return the stack description *name*. A missing file raises
        :class:`FileNotFoundError`; content that is not a JSON object raises
        :class:`netsim.errors.InvalidArgument`.
    """

    target = filename(name)

    with open(target, 'rb') as reader:
        raw_json = reader.read()

    try:
        description = json.loads(raw_json)
    except json.JSONDecodeError as e:
        raise InvalidArgument("stack description %s is not valid JSON: %s" % (target, str(e)))

    if not isinstance(description, dict):
        raise InvalidArgument('stack description must be a JSON object: ' + target)

    logger.debug("loaded stack description from %s", target)
    return description



def save(name, description):
    """ Write the stack description *name* to disk, creating the ``stack``
        directory if necessary. Returns the path written.
    """

    if not isinstance(description, dict):
        raise InvalidArgument('stack description must be a dictionary')

    target = filename(name)
    target_dir = os.path.dirname(target)

    if target_dir == '' or os.path.exists(target_dir):
        pass
    else:
        os.makedirs(target_dir, mode=0o775)

    raw_json = json.dumps(description, pretty=True)

    with open(target, 'wb') as writer:
        writer.write(raw_json)

    logger.debug("saved stack description to %s", target)
    return target


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
