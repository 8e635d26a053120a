import logging

from . import errors
from . import message

logger = logging.getLogger(__name__)


class Application:
    """ An :class:`Application` is the endpoint that actually produces and
        consumes payloads. It lives on exactly one :class:`mboard.Device`
        for its entire lifetime, and listens on at most one port of that
        device at a time.

        The developer is expected to subclass the :class:`Application` class
        and implement the :func:`receive` and :func:`receive_broadcast`
        methods; the routing layers guarantee correct delivery up to those
        calls, and nothing beyond them.

        If *port* is specified the application will :func:`bind` to it as
        part of initialization. The optional *name* is only used to make log
        messages more readable.
    """

    def __init__(self, device, port=None, name=None):

        if device is None:
            raise ValueError('an application must be created on a device')

        if name is None:
            name = self.__class__.__name__

        self.name = name
        self._device = device

        if port is not None:
            self.bind(port)


    def __repr__(self):
        return '%s on %r' % (self.name, self._device)


    @property
    def device(self):
        return self._device


    @property
    def port(self):
        """ The port this application is listening on, or None.
        """

        return self._device.port_of(self)


    def bind(self, port):
        """ Listen on *port* of this application's device. Returns False if
            the port is already taken, or if this application is already
            listening on a port; moving to a new port requires a call to
            :func:`unbind` first.
        """

        return self._device.register(port, self)


    def unbind(self):
        """ Stop listening on the current port. Returns False if this
            application was not listening on any port.
        """

        return self._device.release(self)


    def bound(self):
        return self._device.connected(self)


    def _check_bound(self):

        if self.bound():
            pass
        else:
            logger.warning("%r is not listening on a port, it will not be able to receive replies", self)


    def send(self, message):
        """ Send *message* via this application's device. The return value
            is the result of :func:`mboard.Device.send`. It is legal, though
            unusual, to send while not listening on a port; a warning will be
            logged, since any reply cannot be delivered.
        """

        if message is None:
            raise ValueError('the message must be specified')

        self._check_bound()
        return self._device.send(message)


    def broadcast(self, payload):
        """ Broadcast *payload* via this application's device. Returns False
            if the payload is not a binary string; otherwise the return value
            is the result of :func:`mboard.Device.broadcast`.
        """

        if message.validate(payload) == False:
            error = 'payload is not a binary string: %r' % (payload,)
            return errors.report(logger, errors.InvalidPayload(error))

        self._check_bound()
        return self._device.broadcast(payload)


    def receive(self, message):
        """ Handle a unicast *message* delivered to this application's port.
        """

        raise NotImplementedError('subclass must implement receive()')


    def receive_broadcast(self, payload):
        """ Handle a broadcast *payload*.
        """

        raise NotImplementedError('subclass must implement receive_broadcast()')


# end of class Application


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
