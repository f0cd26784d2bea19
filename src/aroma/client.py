""" The :class:`Client` is the principal interface for sending messages to
    the Aroma application service. A client is safe to share between
    threads; each call to :func:`Client.begin` starts an independent
    :class:`aroma.request.Request`, and each message sent is delivered on a
    background worker with a connection of its own.

    Delivery is best-effort. Once a message has been handed to a worker,
    any failure to deliver it is logged and discarded; returning from
    :func:`aroma.request.Request.send` does not mean the message arrived.
"""

import concurrent.futures
import logging
import time

from . import config
from .endpoint import HttpEndpoint, TcpEndpoint
from .errors import ConfigurationError, ValidationError
from .host import HostInfo
from .priority import Priority
from .protocol.message import SendMessageRequest
from .request import Request
from .transport.base import close_quietly
from .transport.provider import TransportProvider


logger = logging.getLogger(__name__)


class Client:
    """ Send messages on behalf of the application identified by
        *application_token*.

        The *connection_provider* is a zero-argument callable returning an
        open connection (normally a
        :class:`aroma.transport.provider.TransportProvider`); it is invoked
        once per message, on a worker drawn from *executor*. The *host*
        argument is a :class:`aroma.host.HostInfo`; the default describes
        the local machine.

        Most callers should use :func:`aroma.create` or
        :func:`aroma.new_builder` rather than constructing a client directly.
    """

    def __init__(self, connection_provider, executor, application_token, host=None, owns_executor=False):

        if not callable(connection_provider):
            raise ConfigurationError('connection provider must be callable')

        if executor is None:
            raise ConfigurationError('missing executor')

        if not isinstance(application_token, str) or application_token == '':
            raise ConfigurationError('token is missing')

        if host is None:
            host = HostInfo()

        self.connection_provider = connection_provider
        self.executor = executor
        self.application_token = application_token
        self.host = host
        self.owns_executor = owns_executor

        self._operating_system = host.operating_system()
        self._hostname = host.hostname()
        self._device_name = host.hostname()
        self._ipv4_address = host.ipv4_address()

        self.body_prefix = ''
        self.body_suffix = ''


    def __repr__(self):
        return 'Client(%r)' % (self.connection_provider)


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    @property
    def hostname(self):
        """ The hostname reported with every message. Defaults to the local
            hostname; may be overridden with any non-empty string.
        """

        return self._hostname

    @hostname.setter
    def hostname(self, value):
        if not isinstance(value, str) or value == '':
            raise ValidationError('hostname cannot be empty')
        self._hostname = value


    @property
    def device_name(self):
        """ The device name reported with every message. Defaults to the
            local hostname; may be overridden with any non-empty string.
        """

        return self._device_name

    @device_name.setter
    def device_name(self, value):
        if not isinstance(value, str) or value == '':
            raise ValidationError('device name cannot be empty')
        self._device_name = value


    @property
    def body_prefix(self):
        """ Text prepended to the body of every message sent. """
        return self._body_prefix

    @body_prefix.setter
    def body_prefix(self, value):
        self._body_prefix = '' if value is None else str(value)


    @property
    def body_suffix(self):
        """ Text appended to the body of every message sent. """
        return self._body_suffix

    @body_suffix.setter
    def body_suffix(self, value):
        self._body_suffix = '' if value is None else str(value)


    def begin(self):
        """ Begin a new message. The returned :class:`Request` has an empty
            title and body, and :attr:`Priority.LOW`.
        """

        return Request(self, '', '', Priority.LOW)


    def dispatch(self, request):
        """ Build the wire message for *request* and hand it to a background
            worker for delivery. Returns immediately.
        """

        message = self.build_message(request)

        try:
            self.executor.submit(self._deliver, message)
        except RuntimeError:
            # The executor has been shut down.
            logger.warning("Discarding message %r, the client is closed", message.title)


    def build_message(self, request):
        """ Return the :class:`SendMessageRequest` that would be sent for
            *request*, stamped with the current time.
        """

        if request is None:
            raise ValidationError('request cannot be None')

        if request.title == '':
            raise ValidationError('title is required')

        body = self._body_prefix + request.body + self._body_suffix
        now = int(time.time() * 1000)

        return SendMessageRequest(
            application_token=self.application_token,
            title=request.title,
            body=body,
            urgency=request.priority.to_wire(),
            time_of_message=now,
            hostname=self._hostname,
            device_name=self._device_name,
            operating_system_name=self._operating_system,
            ipv4_address=self._ipv4_address,
        )


    def _deliver(self, message):
        """ The unit of work run on the executor. Every failure is logged
            here and goes no further; the connection, once resolved, is
            always closed.
        """

        try:
            connection = self.connection_provider()
        except Exception:
            logger.error("Failed to connect to the Aroma application service", exc_info=True)
            return

        if connection is None:
            logger.error("Connection provider returned None, message %r dropped", message.title)
            return

        try:
            connection.send(message)
            logger.debug("Successfully sent message to the Aroma application service")
        except Exception:
            logger.error("Failed to send message to the Aroma application service", exc_info=True)
        finally:
            close_quietly(connection)


    def send_message(self, priority, title, body='', *args):
        """ Convenience method to send a message in one call.
        """

        if priority is None:
            raise ValidationError('priority cannot be None')

        if not title:
            raise ValidationError('title cannot be empty')

        request = self.begin().with_priority(priority).titled(title)

        if body:
            request = request.with_body(body, *args)

        request.send()


    def send_low_priority_message(self, title, body='', *args):
        self.send_message(Priority.LOW, title, body, *args)


    def send_medium_priority_message(self, title, body='', *args):
        self.send_message(Priority.MEDIUM, title, body, *args)


    def send_high_priority_message(self, title, body='', *args):
        self.send_message(Priority.HIGH, title, body, *args)


    def close(self, wait=True):
        """ Stop accepting messages. If the executor was created by this
            client it is shut down: with *wait* True the call blocks until
            queued messages have been delivered (or have failed), otherwise
            queued messages are cancelled. Messages already being delivered
            always run to completion.
        """

        if self.owns_executor:
            self.executor.shutdown(wait=wait, cancel_futures=not wait)


# end of class Client



class Builder:
    """ Assemble a :class:`Client` with non-default settings::

            client = aroma.new_builder() \\
                .with_application_token(token) \\
                .with_endpoint('aroma.example.com', 7010) \\
                .build()

        Every ``with_`` method validates its argument immediately, and
        returns the builder so calls can be chained.
    """

    def __init__(self):

        self.application_token = ''
        self.endpoint = config.PRODUCTION_ENDPOINT
        self.executor = None
        self.host = None
        self.connect_timeout = config.CONNECT_TIMEOUT
        self.call_timeout = config.CALL_TIMEOUT


    def with_application_token(self, application_token):
        """ Set the token identifying the sending application.
        """

        if not isinstance(application_token, str) or application_token == '':
            raise ValidationError('application token cannot be empty')

        self.application_token = application_token
        return self


    def with_endpoint(self, hostname, port):
        """ Send to an Aroma service at *hostname*:*port* over TCP, instead
            of the production service.
        """

        self.endpoint = TcpEndpoint(hostname, port)
        return self


    def with_http_endpoint(self, url):
        """ Send to an Aroma service by POSTing to *url*.
        """

        self.endpoint = HttpEndpoint(url)
        return self


    def with_async_executor(self, executor):
        """ Use *executor* for delivery instead of a private single-threaded
            pool. The caller remains responsible for shutting it down.
        """

        if executor is None:
            raise ValidationError('executor cannot be None')

        self.executor = executor
        return self


    def with_host_info(self, host):
        if host is None:
            raise ValidationError('host info cannot be None')

        self.host = host
        return self


    def with_connect_timeout(self, seconds):
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)) or seconds <= 0:
            raise ValidationError('connect timeout must be a positive number of seconds')

        self.connect_timeout = seconds
        return self


    def build(self):
        """ Return a new :class:`Client`. Raises :class:`ConfigurationError`
            if the builder is missing a token or an endpoint.
        """

        if self.application_token == '':
            raise ConfigurationError('missing application token')

        endpoint = self.endpoint
        if endpoint is None:
            raise ConfigurationError('missing endpoint')

        provider = TransportProvider(
            lambda: endpoint,
            connect_timeout=self.connect_timeout,
            call_timeout=self.call_timeout,
        )

        executor = self.executor
        owns_executor = False

        if executor is None:
            executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=config.DEFAULT_WORKERS,
                thread_name_prefix='aroma',
            )
            owns_executor = True

        return Client(provider, executor, self.application_token, self.host, owns_executor)


# end of class Builder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
