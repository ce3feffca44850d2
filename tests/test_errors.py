import unittest

from check_modules.core.errors import error_code, is_error_with_code, normalize_error


class _Coded:
    def __init__(self, code) -> None:
        self.code = code


class _CodedError(Exception):
    code = "EPERM"


class IsErrorWithCodeTests(unittest.TestCase):
    def test_returns_false_for_non_objects(self) -> None:
        self.assertFalse(is_error_with_code(None))
        self.assertFalse(is_error_with_code("string"))
        self.assertFalse(is_error_with_code(123))
        self.assertFalse(is_error_with_code(True))

    def test_returns_false_for_objects_without_code(self) -> None:
        self.assertFalse(is_error_with_code({}))
        self.assertFalse(is_error_with_code({"foo": "bar"}))
        self.assertFalse(is_error_with_code(object()))
        self.assertFalse(is_error_with_code(ValueError("boom")))

    def test_returns_false_if_code_is_not_a_string(self) -> None:
        self.assertFalse(is_error_with_code({"code": None}))
        self.assertFalse(is_error_with_code({"code": 123}))
        self.assertFalse(is_error_with_code({"code": {}}))
        self.assertFalse(is_error_with_code(_Coded(2)))

    def test_returns_true_for_errors_with_string_code(self) -> None:
        self.assertTrue(is_error_with_code({"code": "ENOENT"}))
        self.assertTrue(is_error_with_code({"code": "other-string"}))
        self.assertTrue(is_error_with_code(_Coded("ENOENT")))
        self.assertTrue(is_error_with_code(_CodedError()))

    def test_narrowed_value_exposes_code(self) -> None:
        value: object = _Coded("EACCES")
        if is_error_with_code(value):
            self.assertEqual(value.code, "EACCES")
        else:
            self.fail("expected a coded value")


class ErrorCodeTests(unittest.TestCase):
    def test_maps_oserror_errno_to_symbolic_name(self) -> None:
        self.assertEqual(error_code(FileNotFoundError(2, "No such file or directory")), "ENOENT")

    def test_explicit_code_wins(self) -> None:
        self.assertEqual(error_code(_CodedError()), "EPERM")

    def test_returns_none_without_code(self) -> None:
        self.assertIsNone(error_code(ValueError("boom")))
        self.assertIsNone(error_code(OSError("no errno")))
        self.assertIsNone(error_code(None))


class NormalizeErrorTests(unittest.TestCase):
    def test_keeps_exceptions(self) -> None:
        exc = ValueError("boom")
        self.assertIs(normalize_error(exc), exc)

    def test_wraps_other_values(self) -> None:
        wrapped = normalize_error("boom")
        self.assertIsInstance(wrapped, Exception)
        self.assertEqual(str(wrapped), "boom")


if __name__ == "__main__":
    unittest.main()
