import logging
import threading

from . import errors
from . import message
from . import weakref

logger = logging.getLogger(__name__)


class Motherboard:
    """ The :class:`Motherboard` is the routing fabric connecting any number
        of :class:`mboard.Device` instances. It owns the authoritative table
        mapping device identifiers to devices; unicast messages are resolved
        against that table by recipient identifier, and broadcast payloads
        are fanned out to every attached device that opts in to receiving
        them.

        The Motherboard does not own the devices themselves. A device removed
        via :func:`detach_device` carries on existing, and can be attached
        again, here or elsewhere.

        All access to the device table is serialized with a lock. The lock is
        never held while a device or application handles a message.
    """

    def __init__(self):

        self._devices = dict()
        self._devices_lock = threading.Lock()


    def __repr__(self):
        return 'Motherboard: ' + repr(self.devices())


    def __len__(self):

        with self._devices_lock:
            return len(self._devices)


    def __contains__(self, identifier):
        return self.has_device(identifier)


    def __getitem__(self, identifier):

        with self._devices_lock:
            try:
                return self._devices[identifier]
            except KeyError:
                error = 'no device with identifier %r is attached' % (identifier,)
                raise KeyError(error)


    def attach_device(self, device):
        """ Attach *device* to this Motherboard. Returns False, logging a
            :class:`mboard.errors.DeviceIdConflict`, if another device is
            already attached with the same identifier; likewise returns False,
            logging a :class:`mboard.errors.AlreadyAttached`, if the device
            is already attached to a motherboard. On success the device's
            back-reference is set so that it can send messages.
        """

        if device is None:
            raise ValueError('the device must be specified')

        # Lock order: the device's identity lock first, then the table lock.
        # Device.set_identifier() acquires them in the same order.

        device._identity_lock.acquire()
        self._devices_lock.acquire()

        try:
            identifier = device.identifier

            if identifier in self._devices:
                error = 'a device with identifier %r is already attached to this motherboard' % (identifier,)
                error = errors.DeviceIdConflict(error)
            elif device._motherboard() is not None:
                error = '%r is already attached to a motherboard' % (device,)
                error = errors.AlreadyAttached(error)
            else:
                self._devices[identifier] = device
                device._motherboard = weakref.ref(self)
                error = None
        finally:
            self._devices_lock.release()
            device._identity_lock.release()

        if error is None:
            return True
        else:
            return errors.report(logger, error)


    def detach_device(self, identifier):
        """ Remove the device attached with *identifier*. Returns False if
            there is no such device. The device's back-reference is cleared;
            it is no longer attached to anything.
        """

        with self._devices_lock:
            try:
                device = self._devices.pop(identifier)
            except KeyError:
                return False

            device._motherboard = weakref.ref(None)

        return True


    def has_device(self, identifier):

        with self._devices_lock:
            return identifier in self._devices


    def devices(self):
        """ Return a copy of the device table, mapping identifier to device.
        """

        with self._devices_lock:
            return dict(self._devices)


    def _rename(self, device, identifier):
        """ Move *device* to a new *identifier* as a single operation. This is
            invoked by :func:`mboard.Device.set_identifier`, which already
            holds the device's identity lock.
        """

        with self._devices_lock:
            if identifier in self._devices:
                error = 'cannot change %r to identifier %r, another device on this motherboard already has it' % (device, identifier)
                error = errors.DeviceIdConflict(error)
            else:
                old = device._identifier

                try:
                    current = self._devices[old]
                except KeyError:
                    current = None

                # The device may have been detached while the caller was
                # acquiring the table lock. In that case there is no entry
                # to move, the identifier simply changes.

                if current is device:
                    del self._devices[old]
                    self._devices[identifier] = device

                device._identifier = identifier
                error = None

        if error is None:
            return True
        else:
            return errors.report(logger, error)


    def route_unicast(self, message):
        """ Deliver *message* to the device matching ``message.recipient``.
            Returns False, logging a :class:`mboard.errors.NoSuchRecipient`,
            if no such device is attached; otherwise returns the result of
            :func:`mboard.Device.route`.
        """

        if message is None:
            raise ValueError('the message must be specified')

        recipient = message.recipient

        with self._devices_lock:
            try:
                device = self._devices[recipient]
            except KeyError:
                device = None

        if device is None:
            error = 'no device with identifier %r is attached to this motherboard' % (recipient,)
            return errors.report(logger, errors.NoSuchRecipient(error))

        return device.route(message)


    def route_broadcast(self, payload):
        """ Fan out *payload* to every attached device that wants broadcasts.
            Returns False, logging a :class:`mboard.errors.InvalidPayload`, if
            the payload is not a binary string. Otherwise the return value is
            always True: delivery is best-effort, and an exception raised by
            any one device's handler is logged without interrupting delivery
            to the rest.
        """

        if message.validate(payload) == False:
            error = 'payload is not a binary string: %r' % (payload,)
            return errors.report(logger, errors.InvalidPayload(error))

        with self._devices_lock:
            devices = list(self._devices.values())

        for device in devices:
            if device.wants_broadcast() == False:
                continue

            try:
                device.receive_broadcast(payload)
            except Exception:
                logger.exception('%r failed to handle a broadcast', device)
                continue

        return True


# end of class Motherboard


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
