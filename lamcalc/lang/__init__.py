"""lamcalc language: parsing, sessions, the interactive shell and error reporting around the pure lambda calculus."""
