"""Resolve an :class:`aroma.endpoint.Endpoint` into a live connection.

The provider holds a supplier rather than an endpoint, so the endpoint is
looked up again on every call; it selects the wire variant matching the
endpoint's *kind* and returns a connection that is already open.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .. import config
from ..endpoint import Endpoint
from ..errors import ConfigurationError, OperationFailedError, ValidationError
from .base import Connection
from .http import HttpConnection
from .zmq import ZmqConnection


logger = logging.getLogger(__name__)


class TransportProvider:
    """Factory for :class:`Connection` instances.

    A supplier that cannot currently produce an endpoint is rejected here,
    at construction, rather than on the first dispatch.
    """

    def __init__(
        self,
        endpoint_supplier: Callable[[], Optional[Endpoint]],
        connect_timeout: float = config.CONNECT_TIMEOUT,
        call_timeout: float = config.CALL_TIMEOUT,
    ):
        if not callable(endpoint_supplier):
            raise ValidationError("endpoint supplier must be callable")

        if endpoint_supplier() is None:
            raise ConfigurationError("endpoint supplier returned None")

        self.endpoint_supplier = endpoint_supplier
        self.connect_timeout = connect_timeout
        self.call_timeout = call_timeout

    def __call__(self) -> Connection:
        return self.resolve()

    def resolve(self) -> Connection:
        endpoint = self.endpoint_supplier()
        if endpoint is None:
            raise OperationFailedError("missing endpoint")

        kind = getattr(endpoint, "kind", None)
        logger.debug("Resolving %s endpoint %s", kind, endpoint)

        if kind == "tcp":
            return self._from_tcp(endpoint)

        if kind == "http":
            return self._from_http(endpoint)

        raise OperationFailedError(f"Endpoint not supported: {endpoint!r}")

    def _from_tcp(self, endpoint) -> ZmqConnection:
        connection = ZmqConnection(
            endpoint.hostname,
            endpoint.port,
            connect_timeout=self.connect_timeout,
            call_timeout=self.call_timeout,
        )
        connection.open()
        return connection

    def _from_http(self, endpoint) -> HttpConnection:
        connection = HttpConnection(endpoint.url, timeout=self.call_timeout)
        connection.open()
        return connection
