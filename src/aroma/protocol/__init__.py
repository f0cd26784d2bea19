from . import fields
from . import message

from .fields import REP, SEND, Urgency, VERSION
from .message import Message, SendMessageRequest


"""
Aroma Protocol Layer
====================

This package defines the transport-agnostic messages exchanged with the
Aroma application service.

The protocol layer MUST NOT depend on any transport implementation
(e.g. ZeroMQ, HTTP).

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Client Facade (client.py)
    begin() / dispatch() / convenience senders
    Adds token, host metadata, timestamp

    │
    ▼
Wire Message (message.py)
    SendMessageRequest: the notification itself
    Message: typed envelope (SEND, REP) with an id

    │
    ▼
Field Vocabulary (fields.py)
    Protocol version, message types, Urgency

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Transport Provider
    Picks a wire variant from an Endpoint

Framing
    Maps Message <-> multipart frames (ZeroMQ) or a JSON body (HTTP)

Transport
    Moves bytes

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
