"""ZeroMQ (TCP) wire variant."""

from .connection import ZmqConnection
