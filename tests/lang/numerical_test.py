import unittest

from lamcalc.lang.lexical import parse_term
from lamcalc.lang.numerical import cnumber, number
from lamcalc.pure.term import Abstraction, Variable


class NumericalTestCase(unittest.TestCase):

    def test_cnumber(self):
        should_fail = [-2, 0.3, 4.0, 14.2, "3", True]
        for case in should_fail:
            self.assertRaises(ValueError, cnumber, case)

        should_pass = {
            0: Abstraction("f", Abstraction("x", Variable("x"))),
            3: parse_term("λf.λx.f (f (f (x)))"),
        }
        for case, result in should_pass.items():
            self.assertEqual(result, cnumber(case))

    def test_number(self):
        should_fail = ["λf.λx.f f", "λf.λx.x f x", "λx.λx.x", "x", "λf.f", "λf.λx.g x", "λf.λx.(λy.y) x"]
        for case in should_fail:
            self.assertIsNone(number(parse_term(case)), case)

        should_pass = [(3, "λf.λx.f (f (f (x)))"), (0, "λf.λx.x"), (1, "λs z. s z"), (0, "λt f. f")]
        for result, case in should_pass:
            self.assertEqual(result, number(parse_term(case)), case)

        for num in range(10):
            self.assertEqual(num, number(cnumber(num)))


if __name__ == '__main__':
    unittest.main()
