import pytest

import mboard
from mboard import errors


def test_validate():

    for payload in ('0', '1', '01', '100', '1111111', '0' * 500):
        assert mboard.message.validate(payload) == True

    for payload in ('', ' ', '2', '10 1', '0|1', 'abc', '101\n', ' 101'):
        assert mboard.message.validate(payload) == False

    # Non-strings are not binary strings, even if they look like one.

    assert mboard.message.validate(101) == False
    assert mboard.message.validate(b'101') == False
    assert mboard.message.validate(['1', '0']) == False

    with pytest.raises(ValueError):
        mboard.message.validate(None)


def test_create():

    message = mboard.message.create(2, 3, '101')

    assert message.recipient == 2
    assert message.port == 3
    assert message.payload == '101'

    same = mboard.Message.create(2, 3, '101')
    assert same == message


def test_create_invalid():

    with pytest.raises(errors.InvalidPayload) as raised:
        mboard.message.create(1, 1, '')
    assert 'whitespace' in str(raised.value)

    with pytest.raises(errors.InvalidPayload) as raised:
        mboard.message.create(1, 1, '   ')
    assert 'whitespace' in str(raised.value)

    with pytest.raises(errors.InvalidPayload) as raised:
        mboard.message.create(1, 1, 'not binary')
    assert 'binary' in str(raised.value)

    with pytest.raises(errors.InvalidPayload):
        mboard.message.create(1, 1, 101)

    # InvalidPayload is also a ValueError, a precondition failure is only
    # a ValueError.

    with pytest.raises(ValueError):
        mboard.message.create(1, 1, 'xyz')

    with pytest.raises(ValueError) as raised:
        mboard.message.create(1, 1, None)
    assert not isinstance(raised.value, errors.InvalidPayload)


def test_raw_constructor():
    """ The plain constructor does no checking at all.
    """

    message = mboard.Message(1, 1, 'not binary')
    assert message.payload == 'not binary'


def test_immutable():

    message = mboard.Message(1, 2, '11')

    with pytest.raises(AttributeError):
        message.payload = '00'

    with pytest.raises(AttributeError):
        message.recipient = 5

    with pytest.raises(AttributeError):
        message.extra = True

    with pytest.raises(AttributeError):
        del message.port

    assert message == mboard.Message(1, 2, '11')


def test_equality():

    message = mboard.Message(1, 2, '11')

    assert message == mboard.Message(1, 2, '11')
    assert message != mboard.Message(2, 2, '11')
    assert message != mboard.Message(1, 3, '11')
    assert message != mboard.Message(1, 2, '10')
    assert message != (1, 2, '11')

    assert hash(message) == hash(mboard.Message(1, 2, '11'))
    assert len(set((message, mboard.Message(1, 2, '11')))) == 1

    repr(message)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
