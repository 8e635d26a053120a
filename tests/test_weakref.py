import mboard


class Referenced:
    pass


def test_persistent_object():
    thing = Referenced()

    reference = mboard.weakref.ref(thing)
    assert callable(reference)
    assert reference() is thing


def test_removed_object():
    thing = Referenced()

    reference = mboard.weakref.ref(thing)
    del thing

    assert reference() is None


def test_none():
    """ A reference to nothing is still a callable reference.
    """

    reference = mboard.weakref.ref(None)
    assert callable(reference)
    assert reference() is None


def test_motherboard_reference():

    motherboard = mboard.Motherboard()
    reference = mboard.weakref.ref(motherboard)

    assert reference() is motherboard

    del motherboard
    assert reference() is None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
