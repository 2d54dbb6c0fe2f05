import pytest

from uprotocol import CallOptions, TIMEOUT_DEFAULT


def test_default():

    options = CallOptions.DEFAULT
    assert options.timeout == TIMEOUT_DEFAULT
    assert options.token is None
    assert options == CallOptions.new_builder().build()
    assert hash(options) == hash(CallOptions.new_builder().build())


def test_timeout_and_token():

    options = CallOptions.new_builder().with_timeout(30).with_token('someToken').build()
    assert options.timeout == 30
    assert options.token == 'someToken'


def test_token_only():

    options = CallOptions.new_builder().with_token('someToken').build()
    assert options.timeout == TIMEOUT_DEFAULT
    assert options.token == 'someToken'


def test_token_trimmed():

    options = CallOptions.new_builder().with_token('  someToken\n').build()
    assert options.token == 'someToken'


def test_blank_token():

    for token in ('', '   ', '\t\n', None):
        options = CallOptions.new_builder().with_token(token).build()
        assert options.timeout == TIMEOUT_DEFAULT
        assert options.token is None


def test_timeout_only():

    options = CallOptions.new_builder().with_timeout(30).build()
    assert options.timeout == 30
    assert options.token is None


def test_non_positive_timeout():

    for timeout in (-3, 0, None):
        options = CallOptions.new_builder().with_timeout(timeout).build()
        assert options.timeout == TIMEOUT_DEFAULT
        assert options.token is None


def test_equality():

    first = CallOptions.new_builder().with_timeout(30).with_token('a').build()
    second = CallOptions.new_builder().with_token(' a ').with_timeout(30).build()
    assert first == second
    assert hash(first) == hash(second)

    assert first != CallOptions.new_builder().with_timeout(31).with_token('a').build()
    assert first != CallOptions.new_builder().with_timeout(30).with_token('b').build()
    assert first != (30, 'a')


def test_direct_construction():

    options = CallOptions(timeout=-3, token='   ')
    assert options.timeout == TIMEOUT_DEFAULT
    assert options.token is None
    assert options == CallOptions.DEFAULT

    options = CallOptions(timeout=30, token=' someToken ')
    assert options == CallOptions.new_builder().with_timeout(30).with_token('someToken').build()


def test_immutable():

    with pytest.raises(AttributeError):
        CallOptions.DEFAULT.timeout = 5


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
