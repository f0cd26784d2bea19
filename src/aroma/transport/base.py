"""Connection interface.

This is the (small) contract that wire variants should follow. It lives
outside :mod:`aroma.protocol` so the protocol remains transport-agnostic.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..protocol.message import SendMessageRequest


logger = logging.getLogger(__name__)


class Connection(ABC):
    """Minimal contract for a live connection to the application service.

    A connection is resolved for a single dispatch and closed by the same
    unit of work; it is never shared between concurrent calls.
    """

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection/socket."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection/socket."""

    @abstractmethod
    def send(self, message: SendMessageRequest) -> None:
        """Deliver one message, raising OperationFailedError on failure."""

    @property
    def is_open(self) -> bool:
        """Whether the connection is currently established."""
        return False

    def __enter__(self) -> Connection:
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def close_quietly(connection) -> None:
    """Close *connection*, logging rather than raising any failure."""

    if connection is None:
        return

    try:
        connection.close()
    except Exception:
        logger.warning("Failed to close connection %r", connection, exc_info=True)

