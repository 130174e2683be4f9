"""Pure lambda calculus terms.

The `pure` directory contains the pure lambda calculus: terms, substitution and beta reduction. Nothing in here reads
or prints anything- parsing lives in lamcalc/lang/lexical.py.

Formally, pure lambda calculus can be defined as

```
<λ-term> ::= <name>                     ; "variable"
           | "λ" <name> "." <λ-term>    ; "abstraction"
                                        ; - binds <name> within the body
           | <λ-term> <λ-term>          ; "application"
                                        ; - associating by left: abcd = ((((a) b) c) d)
```

Terms are immutable trees and compare structurally with ==. Two terms that only differ in the names of their bound
variables are alpha-equivalent (see alpha_equal) but not equal.

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from abc import ABC, abstractmethod
from functools import reduce as fold

__all__ = [
    "Term", "Variable", "Abstraction", "Application", "abstraction", "application", "free_variables", "substitute",
    "alpha_equal", "fresh_name",
]

SUBS = ["₀", "₁", "₂", "₃", "₄", "₅", "₆", "₇", "₈", "₉"]


def split(name):
    """Splits name into its base and subscript. Returns -1 as the subscript if name has none."""
    subscript = ""
    while name and name[-1] in SUBS:
        subscript = str(SUBS.index(name[-1])) + subscript
        name = name[:-1]
    return name, int(subscript) if subscript else -1


def subscript(name, num):
    """Returns name with subscript num, e.g. subscript("x", 12) == "x₁₂"."""
    return name + "".join(SUBS[int(digit)] for digit in str(num))


def fresh_name(name, used):
    """Returns the first name like name (same base, next free subscript) that is not in used. Always terminates since
    used is finite.
    """
    base, num = split(name)
    candidate = subscript(base, num + 1)
    while candidate in used:
        num += 1
        candidate = subscript(base, num + 1)
    return candidate


class Term(ABC):
    """Superclass of the three kinds of λ-term. Terms are never mutated after construction."""

    _free = None

    @abstractmethod
    def _compute_free(self):
        """This method should return a frozenset of the names that occur free in this term."""

    @abstractmethod
    def substitute(self, name, replacement):
        """Returns this term with every free occurence of name replaced by replacement (self[name := replacement]).
        Bound variables are renamed where needed so that no free variable of replacement gets captured.
        """

    @abstractmethod
    def _alpha_equals(self, other, env, other_env, depth):
        """Alpha-equivalence helper. env/other_env map bound names to the depth of their binder."""

    @property
    def is_redex(self):
        """Whether or not this term is an application of an abstraction."""
        return False

    def free_variables(self):
        """Names occuring free in this term. Computed once, then cached."""
        if self._free is None:
            self._free = self._compute_free()
        return self._free

    def alpha_equals(self, other):
        """Whether or not this term and other are equal up to renaming of bound variables."""
        return self._alpha_equals(other, {}, {}, 0)

    def __call__(self, argument):
        """Applies this term to argument: f(x) == Application(f, x)."""
        return Application(self, argument)

    def __str__(self):
        return self.display()

    @abstractmethod
    def display(self):
        """Returns this term in surface syntax, e.g. '(λx. x x) (λx. x x)'."""


class Variable(Term):
    """Reference to a binder (or a free name, if nothing binds it)."""

    def __init__(self, name):
        self.name = name

    def _compute_free(self):
        return frozenset([self.name])

    def substitute(self, name, replacement):
        if self.name == name:
            return replacement  # terms are immutable, so no copy is needed
        return self

    def _alpha_equals(self, other, env, other_env, depth):
        if not isinstance(other, Variable):
            return False
        if self.name in env or other.name in other_env:
            return env.get(self.name) == other_env.get(other.name)
        return self.name == other.name

    def display(self):
        return self.name

    def __repr__(self):
        return f"Variable({self.name!r})"

    def __eq__(self, other):
        return isinstance(other, Variable) and self.name == other.name

    def __hash__(self):
        return hash(("Variable", self.name))


class Abstraction(Term):
    """λparam.body: binds param within body."""

    def __init__(self, param, body):
        self.param = param
        self.body = body

    def _compute_free(self):
        return self.body.free_variables() - {self.param}

    def substitute(self, name, replacement):
        if self.param == name or name not in self.free_variables():
            return self  # name is shadowed, or there is nothing to replace

        param, body = self.param, self.body
        replacement_free = replacement.free_variables()
        if param in replacement_free:
            # param would capture a free variable of replacement, so rename it first
            new_param = fresh_name(param, replacement_free | body.free_variables())
            body = body.substitute(param, Variable(new_param))
            param = new_param

        return Abstraction(param, body.substitute(name, replacement))

    def _alpha_equals(self, other, env, other_env, depth):
        if not isinstance(other, Abstraction):
            return False
        env = {**env, self.param: depth}
        other_env = {**other_env, other.param: depth}
        return self.body._alpha_equals(other.body, env, other_env, depth + 1)

    def display(self):
        return f"λ{self.param}. {self.body.display()}"

    def __repr__(self):
        return f"Abstraction({self.param!r}, {self.body!r})"

    def __eq__(self, other):
        return isinstance(other, Abstraction) and self.param == other.param and self.body == other.body

    def __hash__(self):
        return hash(("Abstraction", self.param, self.body))


class Application(Term):
    """Application of function to argument."""

    def __init__(self, function, argument):
        self.function = function
        self.argument = argument

    @property
    def is_redex(self):
        return isinstance(self.function, Abstraction)

    def contract(self):
        """Beta-contracts this redex: (λp.b) a becomes b[p := a]."""
        if not self.is_redex:
            raise ValueError(f"'{self}' is not a redex")
        return self.function.body.substitute(self.function.param, self.argument)

    def _compute_free(self):
        return self.function.free_variables() | self.argument.free_variables()

    def substitute(self, name, replacement):
        if name not in self.free_variables():
            return self
        return Application(self.function.substitute(name, replacement), self.argument.substitute(name, replacement))

    def _alpha_equals(self, other, env, other_env, depth):
        if not isinstance(other, Application):
            return False
        return (self.function._alpha_equals(other.function, env, other_env, depth)
                and self.argument._alpha_equals(other.argument, env, other_env, depth))

    def display(self):
        function = self.function.display()
        if isinstance(self.function, Abstraction):
            function = f"({function})"

        argument = self.argument.display()
        if not isinstance(self.argument, Variable):
            argument = f"({argument})"

        return f"{function} {argument}"

    def __repr__(self):
        return f"Application({self.function!r}, {self.argument!r})"

    def __eq__(self, other):
        return (isinstance(other, Application) and self.function == other.function
                and self.argument == other.argument)

    def __hash__(self):
        return hash(("Application", self.function, self.argument))


def abstraction(params, body):
    """Curried abstraction over several params: abstraction(["x", "y"], b) == λx.λy.b. params may be a single name."""
    if isinstance(params, str):
        params = [params]
    return fold(lambda term, param: Abstraction(param, term), reversed(list(params)), body)


def application(*terms):
    """Left-associative application: application(a, b, c) == (a b) c."""
    if not terms:
        raise ValueError("application needs at least one term")
    return fold(Application, terms)


def free_variables(term):
    """Set of names that occur free in term."""
    return set(term.free_variables())


def substitute(term, name, replacement):
    """Capture-avoiding substitution term[name := replacement]. Never modifies term."""
    return term.substitute(name, replacement)


def alpha_equal(term, other):
    """Whether or not term and other are alpha-equivalent."""
    return term.alpha_equals(other)
