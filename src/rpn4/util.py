from functools import wraps


class RPNError(Exception):
    pass


class ParseError(RPNError, ValueError):
    '''
    Text that should have been a number (or a record of them) isn't.
    '''
    pass


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts exceptions to RPNErrors.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
