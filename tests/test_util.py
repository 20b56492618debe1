'''
Error helper tests
'''

from rpn4.util import RPNError, ParseError, wrap_user_errors

from pytest import raises


@wrap_user_errors('Cannot halve {0}')
def halve(n):
    if n == 'rpn':
        raise ParseError('passed through')
    return int(n) / 2


def test_wrapped_result():
    assert halve('4') == 2.0


def test_wraps_other_errors():
    with raises(RPNError, match='Cannot halve x') as info:
        halve('x')
    assert isinstance(info.value.args[1], ValueError)


def test_passes_rpn_errors_through():
    with raises(ParseError, match='passed through'):
        halve('rpn')


def test_parse_error_is_both():
    assert issubclass(ParseError, RPNError)
    assert issubclass(ParseError, ValueError)
