"""HTTP wire variant."""

from .connection import HttpConnection
