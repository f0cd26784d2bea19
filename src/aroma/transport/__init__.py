"""Transport layer implementations."""

from .base import Connection, close_quietly
from .provider import TransportProvider
