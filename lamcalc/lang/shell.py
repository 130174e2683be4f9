"""Handles interactive/command-line mode for the lamcalc interpreter. Uses cmd as backend."""

import cmd

from lamcalc.lang.session import Session


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell."""
    intro = "Lambda calculus interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary lamcalc line. Returns True (stop the loop) once the session has exited."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line, add_to_prev = Session.preprocess_line(line, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                self.sess.add(line, self.line_num)
                self.sess.results.clear()  # already printed by the session

        return self.sess.exited

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        if arg:
            return self.default(f"help {arg}")

        print("Welcome to the lamcalc interpreter!\n\n"
              "Type a λ-term (write 'λ' or '\\') to beta-reduce it, e.g. '(λx y. x) a b'. \n"
              "Bind a term to a name with 'id = λx.x'; bound names are replaced by their \n"
              "terms before reduction, so 'id y' reduces to 'y'. Numbers are Church numerals.\n\n"
              "Commands:\n"
              "  :limit [N]          show/set the maximum number of reduction steps\n"
              "  :strategy [NAME]    show/set the reduction strategy (normal, applicative)\n"
              "  :binds              list bindings\n"
              "  :load \"FILE\"        run a script file\n"
              "  :exit               exit the interpreter")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            return self.default(f"exit {arg}")
        return True
