"""HTTP connection to the application service.

This is the HTTP wire variant: each message is POSTed as a JSON envelope,

    {"version": ..., "id": ..., "op": "SEND", "payload": {...}}

and the exchange succeeds if the service answers with a 2xx status and no
error object in its (optional) JSON reply.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ... import config
from ... import json
from ...endpoint import validate_url
from ...errors import NetworkError, OperationFailedError
from ...protocol import Message, SEND, SendMessageRequest, VERSION
from ..base import Connection


logger = logging.getLogger(__name__)

USER_AGENT = "aroma-client/1.0"


def encode_envelope(msg: Message) -> bytes:
    envelope = {
        "version": VERSION.decode(),
        "id": msg.id,
        "op": msg.type,
        "payload": msg.payload,
    }
    return json.dumps(envelope)


class HttpConnection(Connection):
    """POST messages to *url* with an :class:`httpx.Client`.

    The optional *transport* is handed to httpx unchanged; tests use it to
    substitute an :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        url: str,
        timeout: float = config.HTTP_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport
        self.client: Optional[httpx.Client] = None

    @property
    def is_open(self) -> bool:
        return self.client is not None

    def __repr__(self) -> str:
        return f"HttpConnection({self.url})"

    def open(self) -> None:
        if self.client is not None:
            return

        try:
            validate_url(self.url)
            self.client = httpx.Client(
                timeout=self.timeout,
                transport=self.transport,
                headers={"User-Agent": USER_AGENT},
            )
        except (ValueError, httpx.HTTPError) as exc:
            logger.error("Failed to create connection to endpoint: %s", self.url)
            raise NetworkError(f"Failed to connect to: {self.url}") from exc

        logger.debug("Created HTTP client for %s", self.url)

    def close(self) -> None:
        client = self.client
        if client is None:
            return

        self.client = None
        client.close()

    def send(self, message: SendMessageRequest) -> None:
        if self.client is None:
            raise NetworkError(f"not connected to {self.url}")

        request = Message(SEND, message.to_dict())

        try:
            response = self.client.post(
                self.url,
                content=encode_envelope(request),
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise OperationFailedError(
                f"{SEND} @ {self.url}: HTTP {exc.response.status_code}"
            ) from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"{SEND} @ {self.url}: {exc}") from exc

        error = _reply_error(response)
        if error:
            raise OperationFailedError(
                f"{SEND} @ {self.url}: {error.get('type', 'Exception')}: {error.get('text', '')}"
            )


def _reply_error(response: httpx.Response) -> Optional[dict]:
    """Return the error object from a JSON reply, if there is one."""

    if not response.content:
        return None

    content_type = response.headers.get("Content-Type", "")
    if "json" not in content_type:
        return None

    try:
        reply = json.loads(response.content)
    except json.JSONDecodeError as exc:
        raise OperationFailedError(f"{SEND} @ {response.url}: malformed response") from exc

    if not isinstance(reply, dict):
        return None

    error = reply.get("error")
    if isinstance(error, dict):
        return error
    if error:
        return {"text": str(error)}
    return None
