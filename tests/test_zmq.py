import aroma
import pytest
import time

from aroma.protocol import SendMessageRequest, Urgency
from aroma.transport.zmq import ZmqConnection


def sample():
    return SendMessageRequest('token', 'Title', 'Body', Urgency.LOW, int(time.time() * 1000))


def test_send(collector):

    connection = ZmqConnection('127.0.0.1', collector.port, connect_timeout=5, call_timeout=5)
    connection.open()
    assert connection.is_open

    message = sample()
    connection.send(message)
    connection.close()

    assert connection.is_open == False
    assert collector.wait(1) == [message]


def test_context_manager(collector):

    with ZmqConnection('127.0.0.1', collector.port, connect_timeout=5) as connection:
        assert connection.is_open
        connection.send(sample())

    assert connection.is_open == False


def test_error_reply(collector):

    collector.error = {'type': 'InvalidTokenException', 'text': 'unknown token'}

    with ZmqConnection('127.0.0.1', collector.port, connect_timeout=5) as connection:
        with pytest.raises(aroma.OperationFailedError) as caught:
            connection.send(sample())

    assert 'unknown token' in str(caught.value)
    assert not isinstance(caught.value, aroma.NetworkError)


def test_version_mismatch(collector):

    collector.version = b'z'

    with ZmqConnection('127.0.0.1', collector.port, connect_timeout=5) as connection:
        with pytest.raises(aroma.OperationFailedError):
            connection.send(sample())


def test_no_reply(collector):

    collector.silent = True

    with ZmqConnection('127.0.0.1', collector.port, connect_timeout=5, call_timeout=0.2) as connection:
        with pytest.raises(aroma.OperationFailedError):
            connection.send(sample())


def test_refused(closed_port):

    timeout = 3
    connection = ZmqConnection('127.0.0.1', closed_port, connect_timeout=timeout)

    begin = time.time()

    with pytest.raises(aroma.NetworkError):
        connection.open()

    elapsed = time.time() - begin

    # Whether the refusal is noticed directly or the connect times out, the
    # attempt has to be bounded by the connect timeout.

    assert elapsed < timeout + 1
    assert connection.is_open == False
    assert connection.socket is None


def test_unreachable():

    # Nothing answers on this address, so neither a connection nor a
    # refusal arrives before the connect timeout.

    timeout = 0.5
    connection = ZmqConnection('10.255.255.1', 7010, connect_timeout=timeout)

    begin = time.time()

    with pytest.raises(aroma.NetworkError) as caught:
        connection.open()

    elapsed = time.time() - begin

    assert elapsed < timeout + 1
    assert '10.255.255.1' in str(caught.value)
    assert connection.is_open == False


def test_send_unopened():

    connection = ZmqConnection('127.0.0.1', 7010)

    with pytest.raises(aroma.NetworkError):
        connection.send(sample())

    # Closing something that was never opened is harmless.

    connection.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
