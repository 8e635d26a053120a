import logging
import threading

from . import errors
from . import message
from . import weakref

logger = logging.getLogger(__name__)


class Device:
    """ A :class:`Device` is a routable node. It is known to a
        :class:`mboard.Motherboard` by its unique *identifier*, and it
        multiplexes any number of :class:`mboard.Application` instances
        across numbered ports, one application per port and one port per
        application.

        A Device exists independently of any Motherboard; :func:`attach` is
        the only way to establish the link, and only the Motherboard can undo
        it (see :func:`mboard.Motherboard.detach_device`). The Device holds a
        weak reference to its Motherboard, never a strong one: the Motherboard
        owns the table entry, the Device merely uses the reference to pass
        outbound traffic upstream.

        The *broadcast* flag determines whether the Motherboard will include
        this Device when fanning out a broadcast payload.
    """

    def __init__(self, identifier, broadcast=False):

        if identifier is None:
            raise ValueError('the device identifier must be specified')

        self._identifier = identifier
        self._broadcast = bool(broadcast)
        self._motherboard = weakref.ref(None)

        # The port table is tracked in both directions; the second dictionary
        # is what enforces the one-port-per-application constraint. Both are
        # protected by the same lock.

        self._ports = dict()
        self._applications = dict()
        self._ports_lock = threading.Lock()

        # Changes to the identifier, and to the Motherboard link, are
        # serialized with this lock. A Motherboard acquires it before its own
        # table lock, never after.

        self._identity_lock = threading.Lock()


    def __repr__(self):
        return 'Device(%r)' % (self._identifier,)


    @property
    def identifier(self):
        return self._identifier


    @property
    def motherboard(self):
        """ The :class:`mboard.Motherboard` this Device is attached to, or
            None if it is not attached to anything.
        """

        return self._motherboard()


    def attached(self):
        return self._motherboard() is not None


    def attach(self, motherboard):
        """ Attach this Device to the provided *motherboard*. Returns False if
            the Motherboard already has a Device with this identifier, or if
            this Device is already attached somewhere; the conditions are
            checked by :func:`mboard.Motherboard.attach_device`, which does
            the actual work.

            There is no corresponding detach method on the Device. Once
            attached, only the Motherboard can remove the Device.
        """

        if motherboard is None:
            raise ValueError('the motherboard must be specified')

        return motherboard.attach_device(self)


    def set_identifier(self, identifier):
        """ Change the identifier for this Device. An unattached Device can
            change its identifier freely. An attached Device can only change
            it to an identifier not already known to its Motherboard, and
            the Motherboard performs the swap of its table entry as a single
            step; if the new identifier is taken nothing changes and False is
            returned.
        """

        if identifier is None:
            raise ValueError('the device identifier must be specified')

        self._identity_lock.acquire()

        try:
            motherboard = self._motherboard()

            if motherboard is None:
                self._identifier = identifier
                return True

            return motherboard._rename(self, identifier)
        finally:
            self._identity_lock.release()


    def wants_broadcast(self):
        return self._broadcast


    def set_wants_broadcast(self, broadcast):
        self._broadcast = bool(broadcast)


    def register(self, port, application):
        """ Register *application* as the listener on *port*. Returns False,
            and logs a :class:`mboard.errors.PortConflict`, if another
            application already occupies the port, or if this application
            is already registered on any port of this Device: an application
            must :func:`release` its current port before taking a new one.
        """

        if application is None:
            raise ValueError('the application must be specified')

        error = None

        with self._ports_lock:
            try:
                existing = self._ports[port]
            except KeyError:
                pass
            else:
                error = "port %s on %r is already taken by %r" % (port, self, existing)

            if error is None:
                try:
                    bound = self._applications[application]
                except KeyError:
                    pass
                else:
                    error = "%r is already listening on port %s of %r, it cannot also listen on port %s" % (application, bound, self, port)

            if error is None:
                self._ports[port] = application
                self._applications[application] = port
                return True

        return errors.report(logger, errors.PortConflict(error))


    def unregister(self, port):
        """ Remove whatever application is listening on *port*. Returns False
            if there was nothing to remove.
        """

        with self._ports_lock:
            try:
                application = self._ports.pop(port)
            except KeyError:
                return False

            del self._applications[application]

        return True


    def release(self, application):
        """ Remove *application* from whichever port it occupies. Returns
            False if it was not registered on this Device.
        """

        with self._ports_lock:
            try:
                port = self._applications.pop(application)
            except KeyError:
                return False

            del self._ports[port]

        return True


    def port_of(self, application):
        """ Return the port *application* is listening on, or None.
        """

        with self._ports_lock:
            try:
                return self._applications[application]
            except KeyError:
                return None


    def connected(self, application):
        return self.port_of(application) is not None


    def ports(self):
        """ Return a copy of the port table, mapping port to application.
        """

        with self._ports_lock:
            return dict(self._ports)


    def applications(self):
        """ Return a copy of the reverse port table, mapping application to
            port.
        """

        with self._ports_lock:
            return dict(self._applications)


    def route(self, message):
        """ Deliver an inbound *message* to the application listening on
            ``message.port``. Returns False, and logs a
            :class:`mboard.errors.NoListener`, if there is no such
            application.

            The lock is not held while the application handles the message;
            the handler is free to send messages of its own.
        """

        if message is None:
            raise ValueError('the message must be specified')

        port = message.port

        with self._ports_lock:
            try:
                application = self._ports[port]
            except KeyError:
                application = None

        if application is None:
            error = 'no application is listening on port %s of %r' % (port, self)
            return errors.report(logger, errors.NoListener(error))

        application.receive(message)
        return True


    def receive_broadcast(self, payload):
        """ Handle a broadcast *payload* delivered by the Motherboard. The
            default behavior is to pass it along to every application
            registered on this Device. Subclasses can override this method to
            filter or consume broadcasts at the device level.

            An exception raised by one application is logged and does not
            prevent delivery to the others.
        """

        with self._ports_lock:
            applications = list(self._ports.values())

        for application in applications:
            try:
                application.receive_broadcast(payload)
            except Exception:
                logger.exception('%r failed to handle a broadcast', application)
                continue


    def send(self, message):
        """ Send an outbound *message* upstream to the Motherboard. Returns
            False, and logs a :class:`mboard.errors.NotAttached`, if this
            Device is not attached; otherwise the return value is whatever
            :func:`mboard.Motherboard.route_unicast` returns.
        """

        if message is None:
            raise ValueError('the message must be specified')

        motherboard = self._motherboard()

        if motherboard is None:
            error = '%r is not attached to a motherboard, cannot send %r' % (self, message)
            return errors.report(logger, errors.NotAttached(error))

        return motherboard.route_unicast(message)


    def broadcast(self, payload):
        """ Broadcast *payload* to every Device on the Motherboard that wants
            broadcasts. The payload must be a binary string.
        """

        if message.validate(payload) == False:
            error = 'payload is not a binary string: %r' % (payload,)
            return errors.report(logger, errors.InvalidPayload(error))

        motherboard = self._motherboard()

        if motherboard is None:
            error = '%r is not attached to a motherboard, cannot broadcast' % (self,)
            return errors.report(logger, errors.NotAttached(error))

        return motherboard.route_broadcast(payload)


# end of class Device


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
