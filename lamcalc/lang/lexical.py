"""Lexical analysis for lamcalc: tokenizes a line of text and parses it into statements. Note that this module does
not provide file reading (see session.py), but rather parsing of arbitrary single lines.

All grammar can be loosely defined as follows:

```
<line>        ::= <command> | <binding> (";" <binding>)* [";"] | <λ-term>
<command>     ::= ":exit"                     ; leaves the shell
                | ":limit" [<number>]         ; shows/sets the beta reduction limit
                | ":strategy" [<name>]        ; shows/sets the reduction strategy ("normal", "applicative")
                | ":binds"                    ; lists bindings
                | ":load" <string>            ; runs a script file
<binding>     ::= <name> "=" <λ-term>         ; only reduced if used later on

<λ-term>      ::= "λ" <name>+ "." <λ-term>    ; "\" can be used instead of "λ"; λx y.M = λx.λy.M
                | <atom>+ ["λ" ...]           ; application, associating by left; a trailing λ-term is greedy
<atom>        ::= <name> | <number> | "(" <λ-term> ")"

<comment>     ::= "#" <char>*
```

A <number> inside a λ-term is read as its Church numeral (see numerical.py). A <name> is any run of characters other
than whitespace and reserved characters that does not start with a digit: x, x₁, if-then-else and K' are all names.
"""

import re
from collections import namedtuple
from dataclasses import dataclass, field

from lamcalc.lang.error import LambdaSyntaxError
from lamcalc.lang.numerical import cnumber
from lamcalc.pure.term import Term, Variable, abstraction

RESERVED = 'λ\\.()=;:#"'

TOKENS = [
    ("LAMBDA", r"[λ\\]"),
    ("DOT", r"\."),
    ("OPEN", r"\("),
    ("CLOSE", r"\)"),
    ("EQUALS", r"="),
    ("SEMICOLON", r";"),
    ("COLON", r":"),
    ("NUMBER", r"[0-9]+"),
    ("STRING", r'"[^"]*"'),
    ("NAME", r"[^\s{0}0-9][^\s{0}]*".format(re.escape(RESERVED))),
    ("COMMENT", r"#.*"),
    ("WHITESPACE", r"\s+"),
    ("UNKNOWN", r"."),
]
TOKEN_RE = re.compile("|".join(f"(?P<{kind}>{pattern})" for kind, pattern in TOKENS))

Token = namedtuple("Token", ["kind", "text", "start", "end"])


def tokenize(line):
    """Yields every Token in line, including WHITESPACE, COMMENT and UNKNOWN tokens. Never raises."""
    for match in TOKEN_RE.finditer(line):
        yield Token(match.lastgroup, match.group(), match.start(), match.end())


def strip_comment(line):
    """Returns line without its trailing comment, if any."""
    for token in tokenize(line):
        if token.kind == "COMMENT":
            return line[:token.start]
    return line


def is_continued(line):
    """Whether or not line opens more parentheses than it closes, i.e. continues on the next line."""
    balance = 0
    for token in tokenize(line):
        if token.kind == "OPEN":
            balance += 1
        elif token.kind == "CLOSE":
            balance -= 1
    return balance > 0


class Grammar:
    """Superclass for everything a line can parse to. expr is the source text the statement was parsed from."""

    def __str__(self):
        return self.expr


@dataclass
class ExecStmt(Grammar):
    """A λ-term to be reduced and printed."""
    term: Term
    expr: str = field(default="", compare=False)


@dataclass
class BindStmt(Grammar):
    """Binding statement: <name> = <λ-term>."""
    name: str
    term: Term
    expr: str = field(default="", compare=False)


@dataclass
class ExitCmd(Grammar):
    expr: str = field(default=":exit", compare=False)


@dataclass
class LimitCmd(Grammar):
    """Gets the reduction limit if limit is None, sets it otherwise."""
    limit: int = None
    expr: str = field(default=":limit", compare=False)


@dataclass
class StrategyCmd(Grammar):
    """Gets the reduction strategy if name is None, sets it otherwise."""
    name: str = None
    expr: str = field(default=":strategy", compare=False)


@dataclass
class BindsCmd(Grammar):
    expr: str = field(default=":binds", compare=False)


@dataclass
class LoadCmd(Grammar):
    path: str
    expr: str = field(default=":load", compare=False)


class Parser:
    """Recursive descent parser over the tokens of a single line."""
    ATOMS = ("NAME", "NUMBER", "OPEN")

    def __init__(self, line):
        self.line = line
        self.tokens = [token for token in tokenize(line) if token.kind not in ("WHITESPACE", "COMMENT")]
        self.tokens.append(Token("EOF", "", len(line), len(line)))
        self.pos = 0

        for token in self.tokens:
            if token.kind == "UNKNOWN":
                msg = "'{}' contains illegal character '{}'"
                raise LambdaSyntaxError(msg, (line, token.text), start=token.start, end=token.end)

    def peek(self, offset=0):
        return self.tokens[min(self.pos + offset, len(self.tokens) - 1)]

    def advance(self):
        token = self.peek()
        self.pos += 1
        return token

    def expect(self, kind, expected):
        """Consumes and returns the next token if it is of kind, raises LambdaSyntaxError otherwise."""
        if self.peek().kind != kind:
            self.error(self.peek(), expected)
        return self.advance()

    def error(self, token, expected):
        found = "end of line" if token.kind == "EOF" else f"'{token.text}'"
        msg = "'{}' has unexpected {}, expected " + expected
        raise LambdaSyntaxError(msg, (self.line, found), start=token.start, end=token.end)

    def source(self, start_token):
        """Source text from start_token up to the last consumed token."""
        return self.line[start_token.start:self.tokens[self.pos - 1].end].strip()

    def parse_line(self):
        """Parses the whole line into a list of Grammar objects. An empty line gives an empty list."""
        if self.peek().kind == "EOF":
            stmts = []
        elif self.peek().kind == "COLON":
            stmts = [self.parse_command()]
        elif self.peek().kind == "NAME" and self.peek(1).kind == "EQUALS":
            stmts = self.parse_bindings()
        else:
            start = self.peek()
            term = self.parse_term()
            stmts = [ExecStmt(term, self.source(start))]

        self.expect("EOF", "end of line")
        return stmts

    def parse_command(self):
        start = self.expect("COLON", "':'")
        name = self.expect("NAME", "a command name").text

        if name == "exit":
            cmd = ExitCmd()
        elif name == "limit":
            limit = int(self.advance().text) if self.peek().kind == "NUMBER" else None
            cmd = LimitCmd(limit)
        elif name == "strategy":
            strategy = self.advance().text if self.peek().kind == "NAME" else None
            cmd = StrategyCmd(strategy)
        elif name == "binds":
            cmd = BindsCmd()
        elif name == "load":
            cmd = LoadCmd(self.expect("STRING", "a quoted file path").text[1:-1])
        else:
            token = self.tokens[self.pos - 1]
            msg = "'{}' has unknown command '{}'"
            raise LambdaSyntaxError(msg, (self.line, name), start=token.start, end=token.end)

        cmd.expr = self.source(start)
        return cmd

    def parse_bindings(self):
        stmts = []
        while True:
            start = self.expect("NAME", "a name")
            self.expect("EQUALS", "'='")
            term = self.parse_term()
            stmts.append(BindStmt(start.text, term, self.source(start)))

            if self.peek().kind != "SEMICOLON":
                break
            self.advance()
            if self.peek().kind == "EOF":
                break
        return stmts

    def parse_term(self):
        if self.peek().kind == "LAMBDA":
            return self.parse_abstraction()
        return self.parse_application()

    def parse_abstraction(self):
        self.expect("LAMBDA", "'λ'")
        params = [self.expect("NAME", "a parameter name").text]
        while self.peek().kind == "NAME":
            params.append(self.advance().text)
        self.expect("DOT", "'.'")
        return abstraction(params, self.parse_term())

    def parse_application(self):
        term = self.parse_atom()
        while self.peek().kind in Parser.ATOMS + ("LAMBDA",):
            if self.peek().kind == "LAMBDA":
                return term(self.parse_abstraction())  # abstraction bodies are greedy, nothing can follow
            term = term(self.parse_atom())
        return term

    def parse_atom(self):
        token = self.peek()
        if token.kind == "NAME":
            self.advance()
            return Variable(token.text)
        elif token.kind == "NUMBER":
            self.advance()
            return cnumber(int(token.text))
        elif token.kind == "OPEN":
            self.advance()
            term = self.parse_term()
            if self.peek().kind != "CLOSE":
                self.error(self.peek(), f"')' to close '(' at column {token.start + 1}")
            self.advance()
            return term
        self.error(token, "a λ-term")


def parse(line):
    """Parses line into a list of Grammar objects (empty if line is blank). Raises LambdaSyntaxError."""
    return Parser(line).parse_line()


def parse_term(line):
    """Parses line, which must hold exactly one λ-term, into a Term. Raises LambdaSyntaxError."""
    parser = Parser(line)
    term = parser.parse_term()
    parser.expect("EOF", "end of line")
    return term
