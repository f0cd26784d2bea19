"""ZeroMQ connection to the application service.

This is the TCP wire variant: one DEALER socket per connection, messages
framed as binary multipart frames (see :mod:`.framing`), one reply expected
for every message sent.
"""

from __future__ import annotations

import atexit
import logging
import time
import uuid
from typing import Optional

import zmq
import zmq.utils.monitor

from ... import config
from ...errors import NetworkError, OperationFailedError
from ...protocol import Message, SEND, SendMessageRequest
from ..base import Connection
from .framing import from_frames, to_frames


logger = logging.getLogger(__name__)

zmq_context = zmq.Context()


class ZmqConnection(Connection):
    """Send messages via a ZeroMQ DEALER socket and wait for each reply.

    :func:`open` does not return until the TCP connection is established,
    the connection is refused, or *connect_timeout* seconds elapse; the
    latter two raise :class:`NetworkError` and leave no socket behind.
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        connect_timeout: float = config.CONNECT_TIMEOUT,
        call_timeout: float = config.CALL_TIMEOUT,
    ):
        self.hostname = hostname
        self.port = int(port)
        self.connect_timeout = connect_timeout
        self.call_timeout = call_timeout
        self.socket: Optional[zmq.Socket] = None

    @property
    def address(self) -> str:
        return f"tcp://{self.hostname}:{self.port}"

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def __repr__(self) -> str:
        return f"ZmqConnection({self.address})"

    def open(self) -> None:
        if self.socket is not None:
            return

        socket = zmq_context.socket(zmq.DEALER)
        socket.setsockopt(zmq.LINGER, 0)
        socket.setsockopt(zmq.CONNECT_TIMEOUT, int(self.connect_timeout * 1000))
        socket.identity = uuid.uuid4().bytes

        events = zmq.EVENT_CONNECTED | zmq.EVENT_CONNECT_RETRIED
        monitor = socket.get_monitor_socket(events)

        try:
            try:
                socket.connect(self.address)
                self._wait_connected(monitor)
            finally:
                socket.disable_monitor()
                monitor.close()
        except zmq.ZMQError as exc:
            socket.close()
            logger.error("Failed to open TCP port at %s", self.address, exc_info=True)
            raise NetworkError(f"Failed to connect to: {self.address}") from exc
        except NetworkError:
            socket.close()
            logger.error("Failed to open TCP port at %s", self.address)
            raise

        self.socket = socket
        logger.debug("Connected to %s", self.address)

    def _wait_connected(self, monitor: zmq.Socket) -> None:
        deadline = time.monotonic() + self.connect_timeout

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise NetworkError(
                    f"Failed to connect to: {self.address}: no connection in {self.connect_timeout:.2f} sec"
                )

            if monitor.poll(int(remaining * 1000)) == 0:
                continue

            event = zmq.utils.monitor.recv_monitor_message(monitor)
            event_code = event['event']

            if event_code == zmq.EVENT_CONNECTED:
                return

            if event_code == zmq.EVENT_CONNECT_RETRIED:
                # libzmq would keep retrying in the background; a single
                # failed attempt is enough to call this connection dead.
                raise NetworkError(f"Failed to connect to: {self.address}: connection refused")

    def close(self) -> None:
        socket = self.socket
        if socket is None:
            return

        self.socket = None
        socket.close(linger=0)

    def send(self, message: SendMessageRequest) -> None:
        if self.socket is None:
            raise NetworkError(f"not connected to {self.address}")

        request = Message(SEND, message.to_dict())
        timeout = int(self.call_timeout * 1000)

        try:
            self.socket.send_multipart(to_frames(request))

            if self.socket.poll(timeout) == 0:
                raise OperationFailedError(
                    f"{SEND} @ {self.address}: no response in {self.call_timeout:.2f} sec"
                )

            parts = self.socket.recv_multipart()
        except zmq.ZMQError as exc:
            raise NetworkError(f"{SEND} @ {self.address}: {exc}") from exc

        try:
            response = from_frames(parts)
        except ValueError as exc:
            raise OperationFailedError(f"{SEND} @ {self.address}: malformed response") from exc

        if response.id != request.id:
            raise OperationFailedError(
                f"{SEND} @ {self.address}: response id {response.id} does not match request id {request.id}"
            )

        error = response.error
        if error:
            raise OperationFailedError(
                f"{SEND} @ {self.address}: {error.get('type', 'Exception')}: {error.get('text', '')}"
            )


def _cleanup() -> None:
    zmq_context.destroy(linger=0)


atexit.register(_cleanup)
