from __future__ import annotations

import errno
from typing import Any, Mapping, Optional, Protocol, TypeGuard

_PRIMITIVES = (str, bytes, bool, int, float, complex)


class ErrorWithCode(Protocol):
    code: str


def _code_of(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get("code")
    return getattr(value, "code", None)


def is_error_with_code(value: Any) -> TypeGuard[ErrorWithCode]:
    """Return True when `value` is an object carrying a string `code`."""
    if value is None or isinstance(value, _PRIMITIVES):
        return False
    try:
        code = _code_of(value)
    except Exception:
        return False
    return isinstance(code, str)


def error_code(value: Any) -> Optional[str]:
    """
    Return a symbolic error code for `value`, if one can be derived.

    An explicit string `code` wins. Otherwise an OSError is mapped through its errno,
    so FileNotFoundError yields "ENOENT".
    """
    if is_error_with_code(value):
        return _code_of(value)
    if isinstance(value, OSError) and value.errno is not None:
        return errno.errorcode.get(value.errno)
    return None


def normalize_error(value: Any) -> Exception:
    if isinstance(value, Exception):
        return value
    return Exception(str(value))
