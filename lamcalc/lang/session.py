"""Session control for lamcalc. Holds the bindings, reduction limit and strategy of either the command-line shell or a
script file, and executes parsed statements against them.
"""

from lamcalc.lang.error import GenericException
from lamcalc.lang.lexical import (BindsCmd, BindStmt, ExecStmt, ExitCmd, LimitCmd, LoadCmd, StrategyCmd, is_continued,
                                  parse, strip_comment)
from lamcalc.lang.numerical import number
from lamcalc.pure.prelude import PRELUDE
from lamcalc.pure.strategies import STRATEGIES, get_strategy


class Session:
    """Governs a lamcalc session, with control over the names bound in it."""
    SH_FILE = "<in>"  # command-line interpreter filename
    DEFAULT_LIMIT = 1000
    DEFAULT_STRATEGY = "normal"

    def __init__(self, error_handler, path=SH_FILE, cmd_line=True, limit=DEFAULT_LIMIT, strategy=DEFAULT_STRATEGY,
                 prelude=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path            # used for error messages
        self.cmd_line = cmd_line    # whether or not in command-line mode

        self.binds = {}             # dict of name: Term bound in the current session
        self.results = []           # Reductions that were not popped yet
        self.exited = False         # set by :exit

        self.limit = Session.check_limit(limit)
        self.strategy = Session.load_strategy(strategy)

        if prelude:
            self.binds.update(PRELUDE)

        if self.cmd_line:
            self.error_handler.fatal = False

    @staticmethod
    def check_limit(limit):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise GenericException("reduction limit must be a natural number, got '{}'", str(limit), diagnosis=False)
        return limit

    @staticmethod
    def load_strategy(name):
        try:
            return get_strategy(name)
        except ValueError:
            msg = "'{}' is not a reduction strategy (expected one of: {})"
            raise GenericException(msg, (name, ", ".join(STRATEGIES)), diagnosis=False)

    @staticmethod
    def preprocess_line(line, prev=""):
        """Preprocesses a line from a file or command-line: strips comments and joins it to prev, the text of the lines
        it continues (if any). Returns updated line and whether or not a line continuation is necessary.
        """
        line = strip_comment(line).strip()
        if prev:
            line = f"{prev} {line}".strip()
        return line, is_continued(line)

    def add(self, line, line_num=None, path=None):
        """Parses line and executes every statement in it."""
        path = path or self.path
        self.error_handler.register_line(path, line, line_num)  # in case error is raised

        for stmt in parse(line):
            self.execute(stmt)

        self.error_handler.remove_line(path)  # error was not raised

    def execute(self, stmt):
        """Executes a single statement/command given by the parser."""
        if isinstance(stmt, ExecStmt):
            self.reduce(stmt.term, stmt.expr)

        elif isinstance(stmt, BindStmt):
            self.bind(stmt.name, stmt.term, stmt.expr)

        elif isinstance(stmt, LimitCmd):
            if stmt.limit is not None:
                self.limit = Session.check_limit(stmt.limit)
                self.error_handler.info("reduction limit set to {}", str(self.limit))
            else:
                self.error_handler.info("reduction limit is {}", str(self.limit))

        elif isinstance(stmt, StrategyCmd):
            if stmt.name is not None:
                self.strategy = Session.load_strategy(stmt.name)
                self.error_handler.info("reduction strategy set to {}", self.strategy.name)
            else:
                self.error_handler.info("reduction strategy is {}", self.strategy.name)

        elif isinstance(stmt, BindsCmd):
            for name, term in self.binds.items():
                print(f"{name} = {term}")

        elif isinstance(stmt, LoadCmd):
            self.run_file(stmt.path)

        elif isinstance(stmt, ExitCmd):
            self.exited = True

    def dependencies(self, term):
        """Names that term refers to, directly or through bindings. Unbound names are included."""
        seen = set()
        to_visit = list(term.free_variables())
        while to_visit:
            name = to_visit.pop()
            if name not in seen:
                seen.add(name)
                if name in self.binds:
                    to_visit.extend(self.binds[name].free_variables())
        return seen

    def bind(self, name, term, expr=""):
        """Binds name to term. Bindings that would (indirectly) refer to themselves are rejected."""
        if name in self.dependencies(term):
            msg = "'{}' makes binding '{}' refer to itself, recursive bindings are not supported"
            raise GenericException(msg, (expr or str(term), name))

        overwritten = name in self.binds
        self.binds[name] = term

        self.error_handler.info("binding {} added", name)
        if overwritten:
            self.error_handler.warn("binding {} overwritten", name, diagnosis=False)

    def resolve(self, term, expanding=()):
        """Replaces every bound name that occurs free in term by its (resolved) definition. Names that are not bound
        are left alone as free variables. expanding holds the names currently being resolved, for cycle detection.
        """
        for name in sorted(term.free_variables()):
            if name not in self.binds:
                continue
            if name in expanding:
                cycle = " -> ".join(expanding + (name,))
                raise GenericException("binding '{}' is cyclic ({})", (name, cycle), diagnosis=False)
            term = term.substitute(name, self.resolve(self.binds[name], expanding + (name,)))
        return term

    def reduce(self, term, expr=""):
        """Resolves bindings in term, beta-reduces it and prints the result. Returns the Reduction."""
        resolved = self.resolve(term)
        reduction = self.strategy.reduce(
            resolved, self.limit, lambda num, step: self.error_handler.register_step("β", num, step)
        )
        self.results.append(reduction)

        self.error_handler.info("reduced {} times", str(reduction.steps))
        print(reduction.term)

        num = number(reduction.term)
        if num is not None:
            self.error_handler.info("result is the Church numeral {}", str(num))
        if reduction.exhausted:
            msg = "'{}' reached the reduction limit of {}, possibly divergent term"
            self.error_handler.warn(msg, (expr or str(term), self.limit))

        return reduction

    def run_file(self, path):
        """Executes every line of the script at path in this session."""
        try:
            with open(path, "r", encoding="utf-8") as file:
                lines = file.readlines()
        except OSError:
            raise GenericException("'{}' could not be opened", path, diagnosis=False)

        self.error_handler.register_file(path)

        prev, prev_num = "", None
        for line_num, line in enumerate(lines, start=1):
            line, add_to_prev = Session.preprocess_line(line, prev)
            if add_to_prev:
                prev, prev_num = line, prev_num or line_num
                continue

            self.add(line, prev_num or line_num, path)
            prev, prev_num = "", None

            if self.exited:
                break

        if prev:
            self.add(prev, prev_num, path)  # raises: parentheses were never closed

        del self.error_handler.traceback[path]

    def pop(self):
        """Pops the oldest Reduction that was not popped yet."""
        return self.results.pop(0)
