""" The :class:`Request` is how a message is put together before it is sent.
    A :class:`Request` is immutable: every method that changes a field
    returns a new :class:`Request`, and the instance it was called on is left
    untouched, so a partially built request can be kept and reused::

        base = client.begin().titled('Nightly build')
        base.with_body('build {} passed', number).send()
        base.with_body('build {} failed', number, error).with_priority(Priority.HIGH).send()
"""

import traceback

from . import config
from .errors import ValidationError
from .priority import Priority


class Request:
    """ A message under construction, bound to the client that will
        eventually :func:`send` it.
    """

    __slots__ = ('_client', '_title', '_body', '_priority')

    def __init__(self, client, title='', body='', priority=Priority.LOW):

        if client is None:
            raise ValidationError('client cannot be None')

        if not isinstance(title, str):
            raise ValidationError('title must be a string')

        if not isinstance(body, str):
            raise ValidationError('body must be a string')

        if not isinstance(priority, Priority):
            raise ValidationError('priority must be a Priority')

        object.__setattr__(self, '_client', client)
        object.__setattr__(self, '_title', title)
        object.__setattr__(self, '_body', body)
        object.__setattr__(self, '_priority', priority)


    def __setattr__(self, name, value):
        raise AttributeError('Request is immutable')


    def __repr__(self):
        return 'Request(priority=%s, title=%r, body=%r)' % (self._priority.name, self._title, self._body)


    @property
    def client(self):
        return self._client

    @property
    def title(self):
        return self._title

    @property
    def body(self):
        return self._body

    @property
    def priority(self):
        return self._priority


    def titled(self, title):
        """ Return a new :class:`Request` with the given *title*. The title
            must be at least three characters long, and shorter than forty.
        """

        if title is None:
            raise ValidationError('title cannot be None')

        if not isinstance(title, str):
            raise ValidationError('title must be a string')

        if title == '':
            raise ValidationError('title cannot be empty')

        if len(title) < config.MIN_TITLE_LENGTH:
            raise ValidationError('title too short')

        if len(title) >= config.MAX_TITLE_LENGTH:
            raise ValidationError('title too long')

        return Request(self._client, title, self._body, self._priority)

    with_title = titled


    def with_body(self, text, *args):
        """ Return a new :class:`Request` with the given body *text*. Any
            *args* are substituted into '{}' placeholders in the text, in
            order; see :func:`format_body` for the details.
        """

        if text is None:
            raise ValidationError('body cannot be None')

        if not isinstance(text, str):
            raise ValidationError('body must be a string')

        body = format_body(text, args)
        return Request(self._client, self._title, body, self._priority)


    def with_priority(self, level):
        """ Return a new :class:`Request` with the given :class:`Priority`.
        """

        if level is None:
            raise ValidationError('priority cannot be None')

        if not isinstance(level, Priority):
            raise ValidationError('priority must be a Priority, not ' + type(level).__name__)

        return Request(self._client, self._title, self._body, level)


    def send(self):
        """ Hand this request to the client for delivery. This method returns
            immediately; delivery happens in the background, and a delivery
            failure is logged rather than raised here.
        """

        self._client.dispatch(self)


# end of class Request



_placeholder = '{}'
_escape = '\\'


def format_body(text, args):
    """ Substitute *args* into the '{}' placeholders in *text*, in order.

        A placeholder preceded by a backslash is emitted as a literal '{}';
        a placeholder preceded by two backslashes emits one backslash and is
        then substituted as usual. Placeholders left over once the arguments
        run out are left as they are.

        If the last argument is an exception, and it was not consumed by a
        placeholder, its traceback is appended to the result on a new line.
    """

    if not args:
        return text

    throwable = None
    if isinstance(args[-1], BaseException):
        throwable = args[-1]

    pieces = list()
    start = 0
    used = 0

    while used < len(args):
        found = text.find(_placeholder, start)
        if found == -1:
            break

        if found > 0 and text[found - 1] == _escape:
            if found > 1 and text[found - 2] == _escape:
                pieces.append(text[start:found - 1])
                pieces.append(str(args[used]))
                used += 1
            else:
                pieces.append(text[start:found - 1])
                pieces.append(_placeholder)
        else:
            pieces.append(text[start:found])
            pieces.append(str(args[used]))
            used += 1

        start = found + len(_placeholder)

    pieces.append(text[start:])
    body = ''.join(pieces)

    if throwable is not None and used < len(args):
        body = body + '\n' + describe_exception(throwable)

    return body


def describe_exception(exception):
    """ Return the traceback text for *exception*, ending with its class name
        and message.
    """

    lines = traceback.format_exception(type(exception), exception, exception.__traceback__)
    return ''.join(lines).rstrip('\n')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
