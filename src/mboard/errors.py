""" Exception classes describing the ways a routing operation can fail.

    With the exception of :func:`mboard.message.create`, none of these are
    raised in normal operation: the expected failure paths return False and
    hand an instance to :func:`report`, which logs it as a warning. The class
    name is attached to the log record as the *reason* attribute, so a
    handler can filter on the kind of failure without parsing the text.
"""


class RoutingError(Exception):
    """ Base class for all routing failures. """
    pass


class InvalidPayload(RoutingError, ValueError):
    """ The payload is empty, only whitespace, or not a binary string. """
    pass


class PortConflict(RoutingError):
    pass


class DeviceIdConflict(RoutingError):
    pass


class AlreadyAttached(RoutingError):
    pass


class NotAttached(RoutingError):
    pass


class NoSuchRecipient(RoutingError):
    pass


class NoListener(RoutingError):
    pass



def report(logger, error):
    """ Log the *error* instance as a warning on the supplied *logger*.
        Always returns False, so that a failing operation can end with
        ``return errors.report(logger, error)``.
    """

    reason = type(error).__name__
    logger.warning('%s: %s', reason, error, extra={'reason': reason})
    return False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
