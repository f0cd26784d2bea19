""" Descriptions of how to reach the Aroma application service. An
    :class:`Endpoint` is a tagged value: the *kind* attribute identifies
    which wire variant the :class:`aroma.transport.provider.TransportProvider`
    should use, and each subclass carries the fields that variant needs.
"""

from __future__ import annotations

import httpx

from .errors import ValidationError


minimum_port = 1
maximum_port = 65535


class Endpoint:
    """ Base class for all endpoint descriptors. The base class has no
        *kind* of its own and cannot be instantiated directly.
    """

    kind: str | None = None

    __slots__ = ()

    def __init__(self) -> None:
        if self.kind is None:
            raise ValidationError('endpoint kind is not set')

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _fields(self) -> tuple:
        raise NotImplementedError

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash((self.kind,) + self._fields())


class TcpEndpoint(Endpoint):
    """ Reach the service over a raw TCP connection at *hostname*:*port*.
    """

    kind = 'tcp'

    __slots__ = ('hostname', 'port')

    def __init__(self, hostname: str, port: int) -> None:
        super().__init__()

        if not isinstance(hostname, str) or hostname.strip() == '':
            raise ValidationError('hostname cannot be empty')

        port = validate_port(port)

        object.__setattr__(self, 'hostname', hostname)
        object.__setattr__(self, 'port', port)

    def _fields(self) -> tuple:
        return (self.hostname, self.port)

    def __repr__(self) -> str:
        return f"TcpEndpoint(hostname={self.hostname!r}, port={self.port})"

    def __str__(self) -> str:
        return f"tcp://{self.hostname}:{self.port}"


class HttpEndpoint(Endpoint):
    """ Reach the service by POSTing JSON to *url*.
    """

    kind = 'http'

    __slots__ = ('url',)

    def __init__(self, url: str) -> None:
        super().__init__()

        url = validate_url(url)
        object.__setattr__(self, 'url', url)

    def _fields(self) -> tuple:
        return (self.url,)

    def __repr__(self) -> str:
        return f"HttpEndpoint(url={self.url!r})"

    def __str__(self) -> str:
        return self.url


def validate_port(port) -> int:
    """ Return *port* as an int if it is a usable TCP port number, otherwise
        raise :class:`ValidationError`. Booleans are not port numbers.
    """

    if isinstance(port, bool) or not isinstance(port, int):
        raise ValidationError(f"invalid port: {port!r}")

    if port < minimum_port or port > maximum_port:
        raise ValidationError(f"port out of range [{minimum_port}, {maximum_port}]: {port}")

    return port


def validate_url(url) -> str:
    """ Return *url* unchanged if it is an absolute http or https URL with a
        host component, otherwise raise :class:`ValidationError`.
    """

    if not isinstance(url, str) or url.strip() == '':
        raise ValidationError('url cannot be empty')

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ValidationError(f"invalid url: {url!r}") from exc

    if parsed.scheme not in ('http', 'https'):
        raise ValidationError(f"url must use http or https: {url!r}")

    if not parsed.host:
        raise ValidationError(f"url is missing a host: {url!r}")

    return url


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
