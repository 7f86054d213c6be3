""" Send an HTTP request down a two-layer UDP stack and back up a peer
    stack built from the same description, printing what crosses the wire.
"""

import logging

import netsim


description = {
    'layers': [
        {'protocol': 'udp', 'mss': 32, 'source': '49152', 'destination': '80'},
        {'protocol': 'udp', 'mss': 48, 'source': '49153', 'destination': '8080'},
    ],
}


def main():

    logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    sender = netsim.protocol.chain.from_config(description)
    receiver = sender.copy()

    request = netsim.HTTPRequest(netsim.HTTPMethod.POST, '/submit', 'www.example.com', b'name=value&other=thing')
    wire = sender.send(request)

    for segment in netsim.protocol.udp.split(wire):
        print(segment)

    received = receiver.decapsulate(wire)
    print(received.decode('ascii'))


if __name__ == '__main__':
    main()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
