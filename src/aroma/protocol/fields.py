"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

import enum


# This is the version of the on-the-wire protocol implemented here; the
# version is identified by a single byte.

VERSION = b'a'

SEND = 'SEND'
REP = 'REP'


class Urgency(enum.IntEnum):
    """Severity values as they appear on the wire."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
