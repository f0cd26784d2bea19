import aroma
import concurrent.futures
import pytest
import unittest.mock

from aroma.endpoint import HttpEndpoint, TcpEndpoint


def test_defaults():

    builder = aroma.new_builder()

    assert builder.endpoint == aroma.config.PRODUCTION_ENDPOINT
    assert builder.application_token == ''
    assert builder.executor is None


def test_chaining():

    builder = aroma.new_builder()

    assert builder.with_application_token('token') is builder
    assert builder.with_endpoint('localhost', 7010) is builder
    assert builder.with_http_endpoint('http://localhost/') is builder
    assert builder.with_connect_timeout(1.5) is builder
    assert builder.with_host_info(aroma.HostInfo()) is builder


def test_invalid_arguments():

    builder = aroma.new_builder()

    with pytest.raises(aroma.ValidationError):
        builder.with_application_token('')

    with pytest.raises(aroma.ValidationError):
        builder.with_application_token(None)

    with pytest.raises(aroma.ValidationError):
        builder.with_endpoint('', 7010)

    with pytest.raises(aroma.ValidationError):
        builder.with_endpoint('localhost', 0)

    with pytest.raises(aroma.ValidationError):
        builder.with_endpoint('localhost', 65536)

    with pytest.raises(aroma.ValidationError):
        builder.with_http_endpoint('not a url')

    with pytest.raises(aroma.ValidationError):
        builder.with_async_executor(None)

    with pytest.raises(aroma.ValidationError):
        builder.with_host_info(None)

    for timeout in (0, -1, None, '45', True):
        with pytest.raises(aroma.ValidationError):
            builder.with_connect_timeout(timeout)

    # Nothing above should have stuck.

    assert builder.endpoint == aroma.config.PRODUCTION_ENDPOINT


def test_missing_token():

    with pytest.raises(aroma.ConfigurationError):
        aroma.new_builder().build()

    with pytest.raises(aroma.ConfigurationError):
        aroma.new_builder().with_endpoint('localhost', 7010).build()


def test_missing_endpoint():

    builder = aroma.new_builder().with_application_token('token')
    builder.endpoint = None

    with pytest.raises(aroma.ConfigurationError):
        builder.build()


def test_build():

    client = aroma.new_builder() \
        .with_application_token('token') \
        .with_endpoint('aroma.example.com', 7011) \
        .with_connect_timeout(3) \
        .build()

    try:
        assert isinstance(client, aroma.Client)
        assert client.application_token == 'token'
        assert client.owns_executor

        provider = client.connection_provider
        assert provider.endpoint_supplier() == TcpEndpoint('aroma.example.com', 7011)
        assert provider.connect_timeout == 3
    finally:
        client.close()


def test_build_http():

    client = aroma.new_builder() \
        .with_application_token('token') \
        .with_http_endpoint('https://aroma.example.com/send') \
        .build()

    try:
        supplier = client.connection_provider.endpoint_supplier
        assert supplier() == HttpEndpoint('https://aroma.example.com/send')
    finally:
        client.close()


def test_build_executor():

    executor = unittest.mock.Mock(spec=concurrent.futures.Executor)

    client = aroma.new_builder() \
        .with_application_token('token') \
        .with_async_executor(executor) \
        .build()

    assert client.executor is executor
    assert client.owns_executor == False

    client.close()
    executor.shutdown.assert_not_called()

    client.begin().titled('Title').send()
    executor.submit.assert_called_once()


def test_create():

    client = aroma.create('token')

    try:
        assert client.application_token == 'token'
        assert client.connection_provider.endpoint_supplier() == aroma.config.PRODUCTION_ENDPOINT
    finally:
        client.close()

    with pytest.raises(aroma.ValidationError):
        aroma.create('')

    with pytest.raises(aroma.ValidationError):
        aroma.create(None)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
