""" The client-facing :class:`Priority` of a message. Callers only ever see
    :class:`Priority`; the wire-level :class:`aroma.protocol.fields.Urgency`
    is reached through :meth:`Priority.to_wire`, so changes to the wire
    schema stay out of application code.
"""

import enum

from .protocol.fields import Urgency


class Priority(enum.Enum):
    """ How urgent a message is.

        LOW messages are an FYI: a new user signed up, a post was flagged.

        MEDIUM messages are considered important.

        HIGH messages typically indicate show-stopping events, such as a
        database going down or a lost network connection. They can also be
        very good news, such as a customer spending a significant amount of
        money.
    """

    LOW = 'LOW'
    MEDIUM = 'MEDIUM'
    HIGH = 'HIGH'

    def to_wire(self):
        """ Return the :class:`Urgency` this priority is sent as.
        """

        return _to_wire[self]


_to_wire = {
    Priority.LOW: Urgency.LOW,
    Priority.MEDIUM: Urgency.MEDIUM,
    Priority.HIGH: Urgency.HIGH,
}


def _check_mapping():
    """ Every :class:`Priority` must map to exactly one :class:`Urgency`,
        and no two priorities may share one.
    """

    missing = set(Priority) - set(_to_wire)
    if missing:
        names = ', '.join(sorted(member.name for member in missing))
        raise RuntimeError('Priority values with no wire mapping: ' + names)

    if len(set(_to_wire.values())) != len(_to_wire):
        raise RuntimeError('Priority wire mapping is not one-to-one')


_check_mapping()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
