import pytest

import mboard
import unitapp


@pytest.fixture
def motherboard():
    return mboard.Motherboard()


@pytest.fixture
def pair(motherboard):
    """ Two attached devices, identifiers 1 and 2, each with a recording
        application listening on port 2.
    """

    sender = mboard.Device(1)
    receiver = mboard.Device(2)

    sender.attach(motherboard)
    receiver.attach(motherboard)

    outbound = unitapp.Recorder(sender, port=2)
    inbound = unitapp.Recorder(receiver, port=2)

    return outbound, inbound

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
