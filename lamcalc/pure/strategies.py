"""Concrete beta reduction strategies.

Both strategies walk the tree depth-first, function before argument, and rebuild only the path down to the contracted
redex. They differ in where they stop:
- normal order contracts the leftmost outermost redex. If a term has a normal form, normal order finds it.
- applicative order contracts the leftmost innermost redex, i.e. function and argument are normalized before the
  redex around them is contracted. It can loop forever on an argument that would have been thrown away.

Source: http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from .reduction import Strategy
from .term import Abstraction, Application

__all__ = ["NormalOrder", "ApplicativeOrder", "STRATEGIES", "get_strategy"]


class NormalOrder(Strategy):
    """Leftmost outermost reduction."""
    name = "normal"

    def step(self, term):
        if isinstance(term, Abstraction):
            body = self.step(term.body)
            return None if body is None else Abstraction(term.param, body)

        if isinstance(term, Application):
            if term.is_redex:
                return term.contract()

            function = self.step(term.function)
            if function is not None:
                return Application(function, term.argument)

            argument = self.step(term.argument)
            if argument is not None:
                return Application(term.function, argument)

        return None


class ApplicativeOrder(Strategy):
    """Leftmost innermost reduction."""
    name = "applicative"

    def step(self, term):
        if isinstance(term, Abstraction):
            body = self.step(term.body)
            return None if body is None else Abstraction(term.param, body)

        if isinstance(term, Application):
            function = self.step(term.function)
            if function is not None:
                return Application(function, term.argument)

            argument = self.step(term.argument)
            if argument is not None:
                return Application(term.function, argument)

            if term.is_redex:
                return term.contract()

        return None


STRATEGIES = {strategy.name: strategy for strategy in (NormalOrder, ApplicativeOrder)}


def get_strategy(name):
    """Returns a new strategy given its name. Raises ValueError if there is no such strategy."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"unknown strategy '{name}' (expected one of: {', '.join(STRATEGIES)})") from None
