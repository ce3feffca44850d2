"""Small helpers shared across check-modules components."""

from check_modules.core.errors import ErrorWithCode, error_code, is_error_with_code, normalize_error

__all__ = ["ErrorWithCode", "error_code", "is_error_with_code", "normalize_error"]
