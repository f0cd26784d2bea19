"""ZMQ multipart framing for protocol messages.

Request/Response (DEALER<->ROUTER)
    (optional routing prefix...), version, id, type, payload_json
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ... import json
from ...protocol import Message, REP, VERSION


def to_frames(msg: Message) -> Tuple[bytes, ...]:
    """Encode a protocol Message to ZMQ multipart frames."""

    return (
        VERSION,
        msg.id.encode(),
        msg.type.encode(),
        msg.encapsulate(),
    )


def from_frames(parts: Sequence[bytes]) -> Message:
    """Decode DEALER/ROUTER parts into a protocol Message.

    A ROUTER socket prepends an identity frame; if present it is dropped
    here, the caller is expected to have kept it if it needs to reply.
    """

    if not parts:
        raise ValueError("empty message")

    # We expect either:
    #   [version, id, type, payload]
    # or
    #   [ident, version, id, type, payload]
    if len(parts) > 4:
        parts = parts[-4:]

    if len(parts) < 4:
        raise ValueError(f"expected 4 frames, received {len(parts)}")

    their_version, msg_id, msg_type, payload_bytes = parts
    msg_id = msg_id.decode()

    if their_version != VERSION:
        # Version mismatch: represent as an error payload.
        err = {
            "type": "RuntimeError",
            "text": f"message is Aroma protocol {their_version!r}, recipient expects {VERSION!r}",
        }
        return Message(REP, {"error": err}, id=msg_id)

    payload = None
    if payload_bytes not in (b"", None):
        payload = json.loads(payload_bytes)

    return Message(msg_type.decode(), payload, id=msg_id)
