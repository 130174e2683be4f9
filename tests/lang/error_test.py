import io
import unittest
from contextlib import redirect_stdout

from lamcalc.lang.error import ErrorHandler, GenericException, LambdaSyntaxError


class GenericExceptionTestCase(unittest.TestCase):

    def test_span(self):
        error = GenericException("'{}' is bad", "abcdef")
        self.assertEqual(("abcdef", 0, 6), (error.expr, error.start, error.end))

        error = GenericException("'{}' has '{}'", ("abcdef", "cd"), start=2, end=4)
        self.assertEqual(("abcdef", 2, 4), (error.expr, error.start, error.end))
        self.assertIn("has", error.msg)

    def test_no_exprs(self):
        error = GenericException("keyboard interrupt")
        self.assertEqual(("", "keyboard interrupt"), (error.expr, error.msg))


class ErrorHandlerTestCase(unittest.TestCase):

    def test_diagnose(self):
        diagnosis = ErrorHandler.diagnose(GenericException("{}", "abcdef", start=2, end=4))
        source, carets = diagnosis.split("\n")
        self.assertTrue(source.startswith("  ab"), source)
        self.assertTrue(source.endswith("ef"), source)
        self.assertTrue(carets.startswith("    "), carets)
        self.assertIn("^~", carets)

    def test_diagnose_empty_span(self):
        diagnosis = ErrorHandler.diagnose(GenericException("{}", "(x", start=2, end=2))
        self.assertIn("^", diagnosis.split("\n")[1])

    def test_non_fatal(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with ErrorHandler(fatal=False):
                raise LambdaSyntaxError("'{}' has unexpected {}", ("x )", "')'"), start=2, end=3)
        self.assertIn("error: ", out.getvalue())
        self.assertIn("unexpected", out.getvalue())
        self.assertIn("^", out.getvalue())

    def test_fatal(self):
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                with ErrorHandler(fatal=True):
                    raise GenericException("'{}' could not be opened", "nope.lc", diagnosis=False)
        self.assertEqual(1, context.exception.code)

    def test_recursion_error(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with ErrorHandler(fatal=False):
                raise RecursionError()
        self.assertIn("recursion depth", out.getvalue())

    def test_internal_error(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(ZeroDivisionError):
                with ErrorHandler(fatal=False):
                    raise ZeroDivisionError("{oops}")
        self.assertIn("[internal]", out.getvalue())

    def test_traceback(self):
        handler = ErrorHandler(fatal=False)
        handler.register_file("<in>")
        handler.register_file("lib.lc")
        handler.register_line("<in>", ':load "lib.lc"', 1)
        handler.register_line("lib.lc", "x )", 3)

        out = io.StringIO()
        with redirect_stdout(out):
            handler.throw(GenericException("'{}' is bad", "x )"))
        self.assertIn("Traceback:", out.getvalue())
        self.assertIn("File 'lib.lc', line 3:", out.getvalue())
        self.assertEqual((None, None), handler.traceback["lib.lc"])

    def test_warn_location(self):
        handler = ErrorHandler(fatal=False)
        handler.register_file("lib.lc")
        handler.register_line("lib.lc", "x", 7)

        out = io.StringIO()
        with redirect_stdout(out):
            handler.warn("binding {} overwritten", "x", diagnosis=False)
        self.assertIn("lib.lc:7: ", out.getvalue())
        self.assertIn("warning: ", out.getvalue())

    def test_register_step(self):
        out = io.StringIO()
        with redirect_stdout(out):
            ErrorHandler(trace=False).register_step("β", 1, "x")
        self.assertEqual("", out.getvalue())

        with redirect_stdout(out):
            ErrorHandler(trace=True).register_step("β", 1, "x y")
        self.assertIn("β1: ", out.getvalue())
        self.assertIn("x y", out.getvalue())


if __name__ == '__main__':
    unittest.main()
