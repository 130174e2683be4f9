import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from lamcalc.main import main, parse_args


class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.dir = tempfile.TemporaryDirectory()
        self.out = io.StringIO()

    def tearDown(self):
        self.dir.cleanup()

    def write(self, text):
        path = os.path.join(self.dir.name, "script.lc")
        with open(path, "w", encoding="utf-8") as file:
            file.write(text)
        return path

    def test_parse_args(self):
        args = parse_args([])
        self.assertEqual((None, 1000, "normal", False, False),
                         (args.file, args.limit, args.strategy, args.prelude, args.trace))

        args = parse_args(["-l", "10", "-s", "applicative", "-p", "-t", "a.lc"])
        self.assertEqual(("a.lc", 10, "applicative", True, True),
                         (args.file, args.limit, args.strategy, args.prelude, args.trace))

        with redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, parse_args, ["--strategy", "lazy"])

    def test_script(self):
        path = self.write("id = λx. x\nid (succ 2)\n")
        with redirect_stdout(self.out):
            main(["--prelude", path])
        self.assertIn("λf. λx. f (f (f x))\n", self.out.getvalue())

    def test_script_limit(self):
        path = self.write("(λx. x x) (λx. x x)\n")
        with redirect_stdout(self.out):
            main(["--limit", "4", "--trace", path])
        self.assertIn("β4: ", self.out.getvalue())
        self.assertNotIn("β5: ", self.out.getvalue())
        self.assertIn("warning: ", self.out.getvalue())

    def test_script_error_is_fatal(self):
        path = self.write("x\n(λx. x\n")
        with redirect_stdout(self.out):
            with self.assertRaises(SystemExit) as context:
                main([path])
        self.assertEqual(1, context.exception.code)
        self.assertIn("error: ", self.out.getvalue())

    def test_invalid_limit_is_fatal(self):
        with redirect_stdout(self.out):
            with self.assertRaises(SystemExit) as context:
                main(["--limit", "-3", self.write("x\n")])
        self.assertEqual(1, context.exception.code)

    def test_shell(self):
        with mock.patch("sys.stdin", io.StringIO("id = λx. x\nid q\n:exit\n")):
            with redirect_stdout(self.out):
                main([])
        self.assertIn("q\n", self.out.getvalue())


if __name__ == '__main__':
    unittest.main()
