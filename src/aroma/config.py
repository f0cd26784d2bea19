""" Default values and limits for the Aroma client. Anything a caller needs
    to change at runtime is set via :class:`aroma.client.Builder`.
"""

from .endpoint import TcpEndpoint


# Where messages go unless the caller says otherwise.

PRODUCTION_HOSTNAME = 'application-srv.aroma.tech'
PRODUCTION_PORT = 7010
PRODUCTION_ENDPOINT = TcpEndpoint(PRODUCTION_HOSTNAME, PRODUCTION_PORT)

# Title length bounds; the maximum is exclusive.

MIN_TITLE_LENGTH = 3
MAX_TITLE_LENGTH = 40

# Timeouts, in seconds.

CONNECT_TIMEOUT = 45
CALL_TIMEOUT = 30
HTTP_TIMEOUT = 30

DEFAULT_WORKERS = 1


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
