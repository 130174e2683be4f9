import io
import unittest
from contextlib import redirect_stdout

from lamcalc.lang.error import ErrorHandler
from lamcalc.lang.session import Session
from lamcalc.lang.shell import Shell


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.shell = Shell(Session(ErrorHandler(fatal=False)))
        self.out = io.StringIO()

    def onecmd(self, line):
        with redirect_stdout(self.out):
            return self.shell.onecmd(line)

    def test_reduce(self):
        self.assertFalse(self.onecmd("id = λx. x"))
        self.assertFalse(self.onecmd("id z"))
        self.assertIn("z\n", self.out.getvalue())
        self.assertEqual([], self.shell.sess.results)

    def test_lambda_first(self):
        self.onecmd("(λx y. x) a b")
        self.onecmd("\\x. (λy. y) x")
        self.assertIn("a\n", self.out.getvalue())
        self.assertIn("λx. x\n", self.out.getvalue())

    def test_continuation(self):
        self.onecmd("(x")
        self.assertEqual(Shell.secondary_prompt, self.shell.prompt)
        self.assertEqual("", self.out.getvalue())

        self.onecmd("y)")
        self.assertEqual(Shell._tmp_prompt, self.shell.prompt)
        self.assertIn("x y\n", self.out.getvalue())

    def test_errors_are_reported(self):
        self.assertFalse(self.onecmd("x )"))
        self.assertFalse(self.onecmd("f = λx. f x"))
        self.assertFalse(self.onecmd(":strategy lazy"))
        self.assertEqual(3, self.out.getvalue().count("error: "))
        self.assertNotIn("f", self.shell.sess.binds)

        self.onecmd("f = λx. x")
        self.assertIn("f", self.shell.sess.binds)

    def test_limit(self):
        self.onecmd(":limit 3")
        self.onecmd("(λx. x x) (λx. x x)")
        self.assertEqual(3, self.shell.sess.limit)
        self.assertIn("warning: ", self.out.getvalue())

    def test_exit(self):
        self.assertTrue(self.onecmd(":exit"))
        self.assertTrue(self.onecmd("exit"))
        self.assertTrue(self.onecmd("EOF"))

    def test_exit_and_help_as_names(self):
        self.assertFalse(self.onecmd("exit = λx. x"))
        self.assertFalse(self.onecmd("help = λx. x"))
        self.assertEqual(["exit", "help"], list(self.shell.sess.binds))

    def test_help(self):
        self.onecmd("help")
        self.assertIn("Welcome", self.out.getvalue())
        self.assertIn(":limit", self.out.getvalue())

    def test_emptyline(self):
        self.onecmd("x")
        self.out = io.StringIO()
        self.assertFalse(self.onecmd(""))
        self.assertEqual("", self.out.getvalue())


if __name__ == '__main__':
    unittest.main()
