from functools import wraps


class CalcError(Exception):
    pass


class DivisionByZero(ArithmeticError):
    '''
    Right-hand operand of a division was zero.

    Never escapes the engine; transitions turn it into the error state.
    '''


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions to CalcErrors.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise CalcError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
