"""Pure untyped lambda calculus interpreter.

Basic program flow:
    1. Parser: lamcalc/lang/lexical.py turns a line of text into a term, a binding or a REPL command
    2. Session: lamcalc/lang/session.py replaces bound names in a term with their definitions
    3. Reduction: lamcalc/pure beta-reduces the term with the session's strategy, up to the session's step limit
"""

__version__ = "0.1.0"
