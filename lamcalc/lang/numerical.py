"""Natural numbers encoded as Church numerals. Note that operations are not implemented here (see PLUS, MULT etc. in
lamcalc/pure/prelude.py), so numbers stay pure λ-terms all the way through reduction.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from lamcalc.pure.term import Abstraction, Application, Variable


def cnumber(num):
    """Returns the Church numeral λf. λx. f (... (f x)) of natural number num (cnum = Church numeral)."""
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise ValueError(f"expected natural number, got '{num}'")

    body = Variable("x")
    for _ in range(num):
        body = Application(Variable("f"), body)
    return Abstraction("f", Abstraction("x", body))


def number(cnum):
    """Returns the natural number that cnum encodes, or None if cnum isn't a Church numeral. Any names may be used for
    the two binders, as long as they differ.
    """
    if not isinstance(cnum, Abstraction) or not isinstance(cnum.body, Abstraction):
        return None

    f, x = cnum.param, cnum.body.param
    if f == x:
        return None

    num = 0
    nth_body = cnum.body.body
    while isinstance(nth_body, Application):
        if nth_body.function != Variable(f):
            return None
        nth_body = nth_body.argument
        num += 1

    return num if nth_body == Variable(x) else None
