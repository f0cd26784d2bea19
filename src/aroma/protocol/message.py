""" A class representation of an Aroma message, and of the payload carried
    by a message sent to the application service.
"""

import itertools
import threading

from .. import json
from .fields import REP, SEND, Urgency


class Message:
    """ The :class:`Message` provides a very thin encapsulation of what it
        means to be a message in an Aroma context, independent of how it is
        framed for any particular transport.

        The fields are the message *type*, the *payload* of the message (a
        JSON-compatible dictionary, or None), and an identification string
        unique to this correspondence. Outgoing SEND messages are assigned
        an id automatically; a reply carries the id of the message it is
        replying to.

        :ivar payload: The dictionary carried by the message, if any.
        :ivar valid_types: A set of valid strings for the message type.
    """

    valid_types = set((SEND, REP))

    def __init__(self, type, payload=None, id=None):

        if type not in self.valid_types:
            raise ValueError('invalid message type: ' + repr(type))

        if id is None:
            if type == SEND:
                id = _id_next()
            else:
                raise ValueError('a reply must carry the id of its request')

        self.id = id
        self.type = type
        self.payload = payload

        self._encapsulated = None


    def __repr__(self):
        return 'Message(%r, %r, id=%r)' % (self.type, self.payload, self.id)


    @property
    def error(self):
        """ The error description carried by a reply, or None. An error is a
            dictionary with 'type' and 'text' keys.
        """

        if not self.payload:
            return None

        return self.payload.get('error')


    def encapsulate(self):
        ''' Return the JSON encoding of the payload as bytes; an absent
            payload is encoded as empty bytes. Calling this method multiple
            times will return the cached encapsulation rather than generate
            it anew.
        '''

        if self._encapsulated is not None:
            return self._encapsulated

        if self.payload is None:
            encapsulated = b''
        else:
            encapsulated = json.dumps(self.payload)

        self._encapsulated = encapsulated
        return encapsulated


# end of class Message



class SendMessageRequest:
    """ The fully populated notification that goes over the wire. Built
        fresh for every dispatch by :class:`aroma.client.Client`, and never
        modified afterwards.
    """

    fields = (
        'application_token',
        'title',
        'body',
        'urgency',
        'time_of_message',
        'hostname',
        'device_name',
        'operating_system_name',
        'ipv4_address',
    )

    __slots__ = fields

    def __init__(self, application_token, title, body, urgency, time_of_message,
                 hostname='', device_name='', operating_system_name='', ipv4_address=''):

        urgency = Urgency(urgency)
        time_of_message = int(time_of_message)

        values = (application_token, title, body, urgency, time_of_message,
                  hostname, device_name, operating_system_name, ipv4_address)

        for name, value in zip(self.fields, values):
            object.__setattr__(self, name, value)


    def __setattr__(self, name, value):
        raise AttributeError('SendMessageRequest is immutable')


    def __eq__(self, other):
        if not isinstance(other, SendMessageRequest):
            return NotImplemented
        return self.to_dict() == other.to_dict()


    def __hash__(self):
        return hash(tuple(getattr(self, name) for name in self.fields))


    def __repr__(self):
        contents = ', '.join('%s=%r' % (name, getattr(self, name)) for name in self.fields)
        return 'SendMessageRequest(' + contents + ')'


    def to_dict(self):
        """ Return the JSON-compatible dictionary representation; the
            urgency is represented by its integer wire value.
        """

        values = dict()
        for name in self.fields:
            values[name] = getattr(self, name)

        values['urgency'] = int(self.urgency)
        return values


    @classmethod
    def from_dict(cls, values):
        """ The inverse of :func:`to_dict`. Missing metadata fields default
            to empty strings; missing required fields raise KeyError.
        """

        kwargs = dict()
        for name in cls.fields:
            try:
                kwargs[name] = values[name]
            except KeyError:
                if name in ('hostname', 'device_name', 'operating_system_name', 'ipv4_address'):
                    continue
                raise

        return cls(**kwargs)


# end of class SendMessageRequest


_id_min = 0
_id_max = 0xFFFFFFFF
_id_lock = threading.Lock()
_id_ticker = itertools.count(_id_min)


def _id_next():
    """ Return the next message identification string, eight hexadecimal
        digits, for subroutines to use when constructing a message.
    """

    global _id_ticker

    with _id_lock:
        id = next(_id_ticker)

        if id >= _id_max:
            _id_ticker = itertools.count(_id_min)

    return '%08x' % (id)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
