import weakref


def ref(thing):
    """ Return a weak reference to the supplied object. None is passed
        through as a reference that always dereferences to None, so the
        caller can treat "never attached" and "attached, but since
        collected" the same way.
    """

    if thing is None:
        return _dead

    return weakref.ref(thing)



def _dead():
    return None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
