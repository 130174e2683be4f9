"""Pure lambda calculus: terms, capture-avoiding substitution and beta reduction strategies."""

from .reduction import Reduction, Strategy, reduce
from .strategies import STRATEGIES, ApplicativeOrder, NormalOrder, get_strategy
from .term import (Abstraction, Application, Term, Variable, abstraction, alpha_equal, application, free_variables,
                   fresh_name, substitute)
