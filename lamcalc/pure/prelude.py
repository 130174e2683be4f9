"""Standard combinators, Church booleans and Church arithmetic, ready to be bound in a session (see --prelude).

Note that numerals themselves are not in here: any natural number typed in a term is already a Church numeral (see
lamcalc/lang/numerical.py).
"""

from .term import Variable, abstraction, application


def _v(name):
    return Variable(name)


# combinators
ID = abstraction("x", _v("x"))
CONST = abstraction(["x", "y"], _v("x"))
COMPOSE = abstraction(["f", "g", "x"], application(_v("f"), application(_v("g"), _v("x"))))
FLIP = abstraction(["f", "x", "y"], application(_v("f"), _v("y"), _v("x")))
SUB = abstraction(["x", "y", "z"], application(_v("x"), _v("z"), application(_v("y"), _v("z"))))
DUP = abstraction(["f", "x"], application(_v("f"), _v("x"), _v("x")))
APP_SELF = abstraction("x", application(_v("x"), _v("x")))
APP_REV = abstraction(["x", "y"], application(_v("y"), _v("x")))
OMEGA = application(APP_SELF, APP_SELF)
FIX_LAZY = abstraction("f", application(
    abstraction("x", application(_v("f"), application(_v("x"), _v("x")))),
    abstraction("x", application(_v("f"), application(_v("x"), _v("x")))),
))
FIX_STRICT = abstraction("f", application(
    abstraction("x", application(_v("f"), abstraction("y", application(_v("x"), _v("x"), _v("y"))))),
    abstraction("x", application(_v("f"), abstraction("y", application(_v("x"), _v("x"), _v("y"))))),
))
_TURING = abstraction(["x", "y"], application(_v("y"), application(_v("x"), _v("x"), _v("y"))))
FIX_TURING = application(_TURING, _TURING)
UNIVERSAL = abstraction("x", application(_v("x"), SUB, CONST))

# booleans
TRU = abstraction(["t", "f"], _v("t"))
FLS = abstraction(["t", "f"], _v("f"))
IF_THEN_ELSE = abstraction(["c", "t", "e"], application(_v("c"), _v("t"), _v("e")))
NOT = abstraction("b", application(IF_THEN_ELSE, _v("b"), FLS, TRU))
AND = abstraction(["l", "r"], application(_v("l"), _v("r"), FLS))
OR = abstraction(["l", "r"], application(_v("l"), TRU, _v("r")))

# arithmetic on Church numerals
SUCC = abstraction(["n", "f", "x"], application(_v("f"), application(_v("n"), _v("f"), _v("x"))))
PLUS = abstraction(["m", "n", "f", "x"], application(_v("m"), _v("f"), application(_v("n"), _v("f"), _v("x"))))
MULT = abstraction(["m", "n", "f"], application(_v("m"), application(_v("n"), _v("f"))))
PRED = abstraction(["n", "f", "x"], application(
    _v("n"),
    abstraction(["g", "h"], application(_v("h"), application(_v("g"), _v("f")))),
    abstraction("u", _v("x")),
    abstraction("u", _v("u")),
))
IS_ZERO = abstraction("n", application(_v("n"), abstraction("x", FLS), TRU))

PRELUDE = {
    "id": ID,
    "const": CONST,
    "compose": COMPOSE,
    "flip": FLIP,
    "sub": SUB,
    "dup": DUP,
    "app-self": APP_SELF,
    "app-rev": APP_REV,
    "omega": OMEGA,
    "fix-lazy": FIX_LAZY,
    "fix-strict": FIX_STRICT,
    "fix-turing": FIX_TURING,
    "universal": UNIVERSAL,
    "tru": TRU,
    "fls": FLS,
    "if-then-else": IF_THEN_ELSE,
    "not": NOT,
    "and": AND,
    "or": OR,
    "succ": SUCC,
    "plus": PLUS,
    "mult": MULT,
    "pred": PRED,
    "is-zero": IS_ZERO,
}
