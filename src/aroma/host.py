""" Metadata describing the machine a message is sent from. Each value is
    produced by a zero-argument callable so that applications, and tests,
    can substitute their own.
"""

import logging
import platform
import socket


logger = logging.getLogger(__name__)


def get_hostname():
    """ Return the local hostname, or an empty string if it cannot be
        determined.
    """

    try:
        return socket.gethostname()
    except OSError:
        logger.warning('Could not determine hostname', exc_info=True)
        return ''


def get_ipv4_address():
    """ Return the IPv4 address the local hostname resolves to, or an empty
        string if it cannot be determined.
    """

    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError:
        logger.warning('Could not determine IPv4 address', exc_info=True)
        return ''


def get_operating_system():
    return platform.system()



class HostInfo:
    """ A bundle of the three suppliers a :class:`aroma.client.Client` uses
        to populate outgoing messages. Any supplier left as None uses the
        default implementation from this module.
    """

    def __init__(self, hostname=None, ipv4_address=None, operating_system=None):

        self._hostname = hostname or get_hostname
        self._ipv4_address = ipv4_address or get_ipv4_address
        self._operating_system = operating_system or get_operating_system


    def hostname(self):
        return self._hostname() or ''


    def ipv4_address(self):
        return self._ipv4_address() or ''


    def operating_system(self):
        return self._operating_system() or ''


# end of class HostInfo


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
