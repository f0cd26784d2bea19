""" Exceptions raised by the Aroma client. Errors detected before a message
    is handed to a background worker are raised directly to the caller;
    errors detected during delivery are logged and discarded.
"""


class AromaError(Exception):
    """Base class for all Aroma client errors."""


class ValidationError(AromaError, ValueError):
    """ A caller-supplied value violates a constraint: a title that is too
        short or too long, a missing argument, an empty token or hostname,
        an invalid port.
    """


class ConfigurationError(AromaError):
    """A client or provider was assembled in an unusable state."""


class OperationFailedError(AromaError):
    """ A remote call failed, or an endpoint could not be handled. Only
        raised inside the delivery path.
    """


class NetworkError(OperationFailedError):
    """The transport to the remote service could not be established."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
