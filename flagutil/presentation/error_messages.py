from flagutil.domain.errors import FlagValueError


def format_invalid_value(raw: str, flag: str, exc: Exception) -> str:
    """Map a validation failure to the message shown for a bad flag value.

    Example: invalid value "foo" for flag -h: address foo: missing port in address
    """
    if isinstance(exc, FlagValueError):
        reason = str(exc)
    else:
        reason = f"{type(exc).__name__}: {exc}"
    return f'invalid value "{raw}" for flag {flag}: {reason}'
