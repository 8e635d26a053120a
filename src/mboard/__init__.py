""" Python implementation of a three-layer message routing stack.
    Applications listen on numbered ports of a Device; Devices are attached
    under unique identifiers to a Motherboard; the Motherboard routes unicast
    messages by (identifier, port) and fans out broadcast payloads.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Utility components.

from . import errors
from . import weakref

# Primary public-facing interfaces.

from . import message
from .message import Message
from .application import Application
from .device import Device
from .motherboard import Motherboard

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
