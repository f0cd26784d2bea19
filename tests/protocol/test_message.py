import aroma
import pytest
import time

from aroma.protocol import Message, REP, SEND, SendMessageRequest, Urgency


def sample(**overrides):

    fields = dict()
    fields['application_token'] = 'token'
    fields['title'] = 'Title'
    fields['body'] = 'Body'
    fields['urgency'] = Urgency.MEDIUM
    fields['time_of_message'] = 1700000000000
    fields['hostname'] = 'host'
    fields['device_name'] = 'device'
    fields['operating_system_name'] = 'Linux'
    fields['ipv4_address'] = '10.0.0.1'
    fields.update(overrides)

    return SendMessageRequest(**fields)


def test_ids():

    first = Message(SEND)
    second = Message(SEND)

    assert first.id != second.id
    assert len(first.id) == 8
    int(first.id, 16)


def test_types():

    with pytest.raises(ValueError):
        Message('GET')

    # A reply has to say what it is replying to.

    with pytest.raises(ValueError):
        Message(REP)

    reply = Message(REP, id='0000002a')
    assert reply.id == '0000002a'
    assert reply.error is None


def test_error():

    reply = Message(REP, {'error': {'type': 'KeyError', 'text': 'bad token'}}, id='00000001')
    assert reply.error['type'] == 'KeyError'
    assert reply.error['text'] == 'bad token'


def test_encapsulate():

    message = Message(SEND, {'value': 44})
    encapsulated = message.encapsulate()

    assert isinstance(encapsulated, bytes)
    assert aroma.json.loads(encapsulated) == {'value': 44}
    assert message.encapsulate() is encapsulated

    assert Message(SEND).encapsulate() == b''


def test_send_message_request():

    message = sample(urgency=3)

    assert message.urgency is Urgency.HIGH
    assert message.title == 'Title'

    with pytest.raises(AttributeError):
        message.title = 'changed'

    with pytest.raises(ValueError):
        sample(urgency=12)


def test_dict():

    message = sample()
    values = message.to_dict()

    assert values['urgency'] == 2
    assert values['time_of_message'] == 1700000000000
    assert set(values) == set(SendMessageRequest.fields)

    decoded = aroma.json.loads(aroma.json.dumps(values))
    assert SendMessageRequest.from_dict(decoded) == message


def test_dict_defaults():

    values = sample().to_dict()
    del values['hostname']
    del values['ipv4_address']

    message = SendMessageRequest.from_dict(values)
    assert message.hostname == ''
    assert message.ipv4_address == ''

    del values['title']

    with pytest.raises(KeyError):
        SendMessageRequest.from_dict(values)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
