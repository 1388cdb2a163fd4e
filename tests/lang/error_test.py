import contextlib
import io
import unittest

from derangements.lang.error import ErrorHandler, GenericException, InvalidInput


class GenericExceptionTestCase(unittest.TestCase):

    def test_message(self):
        error = GenericException("'{}' could not be opened", "words.json")
        self.assertIn("words.json", error.msg)
        self.assertIn("could not be opened", str(error))
        self.assertEqual("words.json", error.expr)
        self.assertEqual(len("words.json"), error.end)

    def test_invalid_input(self):
        error = InvalidInput("can only encode single uppercase letters, got '{}'", "'a'")
        self.assertIsInstance(error, GenericException)
        self.assertEqual("'a'", error.expr)


class ErrorHandlerTestCase(unittest.TestCase):

    def run_handler(self, exc, fatal=False):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with ErrorHandler(fatal=fatal):
                raise exc
        return stderr.getvalue()

    def test_generic_exception(self):
        output = self.run_handler(GenericException("'{}' is not a JSON array of words", "x.json"))
        self.assertIn("error: ", output)
        self.assertIn("is not a JSON array of words", output)

    def test_subclass(self):
        output = self.run_handler(InvalidInput("can only encode -1, 0, or 1 as an ordering, got '{}'", "2"))
        self.assertIn("as an ordering", output)

    def test_recursion_error(self):
        output = self.run_handler(RecursionError())
        self.assertIn("maximum recursion depth exceeded", output)

    def test_fatal(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as context:
                with ErrorHandler():
                    raise GenericException("keyboard interrupt")
        self.assertEqual(1, context.exception.code)

    def test_unknown_error_propagates(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(IndexError):
                with ErrorHandler(fatal=False):
                    raise IndexError("string index {out} of range")
        self.assertIn("[internal]", stderr.getvalue())
        self.assertIn("unknown error", stderr.getvalue())

    def test_traceback(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with ErrorHandler(fatal=False) as error_handler:
                error_handler.register_file("words.json")
                raise GenericException("'{}' could not be opened", "words.json", diagnosis=False)
        self.assertIn("File 'words.json'", stderr.getvalue())
        self.assertEqual([], error_handler.traceback)


if __name__ == '__main__':
    unittest.main()
