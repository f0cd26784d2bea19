""" Python client for Aroma. Build a message with a fluent, immutable
    request, and send it to the Aroma application service without waiting
    for it to be delivered::

        import aroma

        client = aroma.create(token)
        client.begin().titled('Deploy').with_body('v{} deployed', version).send()
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Utility components.

from . import errors
from . import json
from .errors import AromaError, ValidationError, ConfigurationError, OperationFailedError, NetworkError

# Submodules used by multiple other components.

from . import protocol
from . import config
from .priority import Priority
from .endpoint import Endpoint, TcpEndpoint, HttpEndpoint
from .host import HostInfo
from . import transport

# Primary public-facing interfaces.

from .request import Request
from .client import Client, Builder
from . import noop


def create(application_token):
    """ Return a :class:`Client` for the application identified by
        *application_token*, sending to the production service from a
        single background worker.
    """

    if not isinstance(application_token, str) or application_token == '':
        raise ValidationError('Application Token cannot be empty')

    return new_builder().with_application_token(application_token).build()


def new_builder():
    """ Return a :class:`Builder` for a more fine-tuned :class:`Client`.
    """

    return Builder()


def create_noop():
    """ Return a client that does absolutely nothing with the messages sent
        to it. This is useful for testing, or for turning delivery off,
        without changing any code that sends messages.
    """

    return noop.INSTANCE

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
