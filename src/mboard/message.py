""" A class representation of a routed message: the identifier of the
    recipient :class:`mboard.Device`, the port on that device, and a
    binary-string payload.
"""

from . import errors


alphabet = frozenset('01')


class Message:
    """ The :class:`Message` is an immutable container for the three fields
        that matter to the routing layers: the *recipient* device identifier,
        the *port* the receiving :class:`mboard.Application` is listening on,
        and the *payload*, a non-empty string of '0' and '1' characters.

        Calling the class directly performs no validation whatsoever; this is
        intended for internal use, or for payloads that are known to be good.
        Anything derived from untrusted input should go through :func:`create`
        instead.
    """

    __slots__ = ('_recipient', '_port', '_payload')

    def __init__(self, recipient, port, payload):

        object.__setattr__(self, '_recipient', recipient)
        object.__setattr__(self, '_port', port)
        object.__setattr__(self, '_payload', payload)


    def __setattr__(self, name, value):
        raise AttributeError('Message instances are immutable')


    def __delattr__(self, name):
        raise AttributeError('Message instances are immutable')


    def __eq__(self, other):

        if isinstance(other, Message):
            pass
        else:
            return NotImplemented

        mine = (self._recipient, self._port, self._payload)
        theirs = (other._recipient, other._port, other._payload)
        return mine == theirs


    def __hash__(self):
        return hash((self._recipient, self._port, self._payload))


    def __repr__(self):
        return 'Message(%r, %r, %r)' % (self._recipient, self._port, self._payload)


    @property
    def recipient(self):
        return self._recipient


    @property
    def port(self):
        return self._port


    @property
    def payload(self):
        return self._payload


    @classmethod
    def create(cls, recipient, port, payload):
        return create(recipient, port, payload)


# end of class Message



def create(recipient, port, payload):
    """ Validate the *payload* and return a new :class:`Message`. This is the
        only routing operation that raises on bad input: there is no boolean
        return value to carry the failure, so an
        :class:`mboard.errors.InvalidPayload` is raised if the payload is
        empty, whitespace, or anything other than a binary string.
    """

    if validate(payload) == True:
        return Message(recipient, port, payload)

    if isinstance(payload, str) and payload.strip() == '':
        raise errors.InvalidPayload('payload cannot be empty or only whitespace')

    raise errors.InvalidPayload('payload must be a binary string: ' + repr(payload))



def validate(payload):
    """ Return True if *payload* is a non-empty string made up solely of the
        characters '0' and '1'.
    """

    if payload is None:
        raise ValueError('the payload must be specified')

    if isinstance(payload, str):
        pass
    else:
        return False

    if payload == '':
        return False

    return alphabet.issuperset(payload)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
