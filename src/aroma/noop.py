""" A client that does absolutely nothing with the messages it is given.
    Swap it in for a real :class:`aroma.client.Client` to turn delivery off
    without touching any call sites; nothing here validates, raises, or goes
    anywhere near the network.
"""

from .priority import Priority



class DoNothingRequest:
    """ Stands in for :class:`aroma.request.Request`. Every method returns
        the same shared instance.
    """

    __slots__ = ()

    title = ''
    body = ''
    priority = Priority.LOW
    client = None

    def __repr__(self):
        return 'DoNothingRequest()'

    def titled(self, title):
        return self

    with_title = titled

    def with_body(self, text, *args):
        return self

    def with_priority(self, level):
        return self

    def send(self):
        pass


# end of class DoNothingRequest



class DoNothingClient:
    """ Stands in for :class:`aroma.client.Client`. It holds no state; use
        the shared :data:`INSTANCE` rather than creating more.
    """

    __slots__ = ()

    def __repr__(self):
        return 'DoNothingClient()'

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        pass

    # Assignments to these are accepted and forgotten.

    hostname = property(lambda self: '', lambda self, value: None)
    device_name = property(lambda self: '', lambda self, value: None)
    body_prefix = property(lambda self: '', lambda self, value: None)
    body_suffix = property(lambda self: '', lambda self, value: None)

    def begin(self):
        return REQUEST

    def dispatch(self, request):
        pass

    def send_message(self, priority, title, body='', *args):
        pass

    def send_low_priority_message(self, title, body='', *args):
        pass

    def send_medium_priority_message(self, title, body='', *args):
        pass

    def send_high_priority_message(self, title, body='', *args):
        pass

    def close(self, wait=True):
        pass


# end of class DoNothingClient


REQUEST = DoNothingRequest()
INSTANCE = DoNothingClient()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
