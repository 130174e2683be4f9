"""Beta reduction: the strategy contract and the step-limited driver.

A Strategy only knows how to find and contract one redex (step). Everything about looping, counting and giving up
after too many steps is done here, once, for every strategy- see reduce. Concrete strategies are in strategies.py.
"""

from abc import ABC, abstractmethod
from collections import namedtuple

Reduction = namedtuple("Reduction", ["term", "steps", "exhausted"])
Reduction.__doc__ = """Result of reduce. exhausted is True if the step limit ran out before a normal form was reached."""


class Strategy(ABC):
    """Superclass for beta reduction strategies. Subclasses only need to implement step."""
    name = None

    @abstractmethod
    def step(self, term):
        """This method should contract exactly one redex of term, chosen by this strategy's search order, and return
        the new term. It should return None if term is in normal form.
        """

    def reduce(self, term, limit, on_step=None):
        """Shortcut for reduce(term, self, limit, on_step)."""
        return reduce(term, self, limit, on_step)

    def reductions(self, term):
        """Lazily yields every term of the reduction sequence of term (term itself excluded). Does not stop on its own
        if term has no normal form.
        """
        term = self.step(term)
        while term is not None:
            yield term
            term = self.step(term)

    def is_normal(self, term):
        """Whether or not term has no redex left under this strategy."""
        return self.step(term) is None

    def __repr__(self):
        return f"{type(self).__name__}()"


def reduce(term, strategy, limit, on_step=None):
    """Beta-reduces term with strategy, at most limit times. Returns a Reduction(term, steps, exhausted).

    exhausted is False only if the returned term is in normal form: a term that reaches normal form on exactly the
    last allowed step is not reported as exhausted. on_step(steps, term) is called after every step, if given.
    """
    if limit < 0:
        raise ValueError(f"reduction limit must be a natural number, got {limit}")

    steps = 0
    while steps < limit:
        reduced = strategy.step(term)
        if reduced is None:
            return Reduction(term, steps, False)

        term = reduced
        steps += 1
        if on_step is not None:
            on_step(steps, term)

    return Reduction(term, steps, not strategy.is_normal(term))
