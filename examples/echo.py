""" Minimal demonstration of the routing stack: two devices on one
    motherboard, an application on each, a unicast exchange and a broadcast.
    Run with the package installed; diagnostics are printed to stderr.
"""

import logging

import mboard


class Printer(mboard.Application):

    def receive(self, message):
        print('%r received %r' % (self, message))


    def receive_broadcast(self, payload):
        print('%r received broadcast %r' % (self, payload))


# end of class Printer



def main():

    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    motherboard = mboard.Motherboard()

    left = mboard.Device(1, broadcast=True)
    right = mboard.Device(2, broadcast=True)
    left.attach(motherboard)
    right.attach(motherboard)

    sender = Printer(left, port=80, name='sender')
    receiver = Printer(right, port=80, name='receiver')

    sender.send(mboard.message.create(2, 80, '101'))
    sender.send(mboard.message.create(3, 80, '101'))
    receiver.broadcast('0110')

    right.set_identifier(3)
    sender.send(mboard.message.create(3, 80, '111'))


if __name__ == '__main__':
    main()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
