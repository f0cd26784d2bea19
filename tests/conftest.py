import concurrent.futures
import os
import pytest
import socket
import sys
import unittest.mock

sys.path.insert(0, os.path.dirname(__file__))

import aroma
import unitcollector


@pytest.fixture
def collector():

    collector = unitcollector.Collector()

    yield collector

    collector.stop()


@pytest.fixture
def closed_port():

    # Bind to an ephemeral port and let it go again; nothing should be
    # listening there for the duration of the test.

    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(('127.0.0.1', 0))
    port = probe.getsockname()[1]
    probe.close()

    return port


@pytest.fixture
def host():
    return aroma.HostInfo(lambda: 'unit-host', lambda: '10.1.2.3', lambda: 'UnitOS')


@pytest.fixture
def connection():
    return unittest.mock.Mock(spec=aroma.transport.Connection)


@pytest.fixture
def client(connection, host):

    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
    client = aroma.Client(lambda: connection, executor, 'unit-token', host=host, owns_executor=True)

    yield client

    client.close()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
