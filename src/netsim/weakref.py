""" Non-owning references between adjacent protocol nodes. A node only
    knows its neighbors by weak reference; whatever assembled the chain
    holds the strong references.
"""

import weakref


def link(node):
    """ Return a weak reference to the supplied *node*. The reference does
        not keep the node alive: once the assembler lets go of it, the link
        resolves to None.
    """

    return weakref.ref(node)


def resolve(reference):
    """ Dereference a link created by :func:`link`. Returns None if the link
        was never set, or if the referenced node no longer exists.
    """

    if reference is None:
        return None

    return reference()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
