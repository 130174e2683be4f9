"""Runs lamcalc scripts, or the interactive shell if no script is given. Also uses error handling context manager.
Called from the lamcalc console script.
"""

import argparse

from lamcalc.lang.error import ErrorHandler
from lamcalc.lang.session import Session
from lamcalc.lang.shell import Shell
from lamcalc.pure.strategies import STRATEGIES


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="lamcalc", description="Pure untyped lambda calculus interpreter.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("-l", "--limit", type=int, default=Session.DEFAULT_LIMIT,
                        help=f"maximum number of beta reduction steps per term (default: {Session.DEFAULT_LIMIT})")
    parser.add_argument("-s", "--strategy", choices=sorted(STRATEGIES), default=Session.DEFAULT_STRATEGY,
                        help=f"reduction strategy (default: {Session.DEFAULT_STRATEGY})")
    parser.add_argument("-p", "--prelude", action="store_true", help="bind standard combinators, booleans and "
                                                                     "numeral operations on startup")
    parser.add_argument("-t", "--trace", action="store_true", help="print every reduction step")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs lamcalc interpreter. Called from lamcalc console script."""
    args = parse_args(argv)

    with ErrorHandler(trace=args.trace) as error_handler:
        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, limit=args.limit, strategy=args.strategy,
                           prelude=args.prelude)
            sess.run_file(args.file)

        else:
            sess = Session(error_handler, Session.SH_FILE, cmd_line=True, limit=args.limit, strategy=args.strategy,
                           prelude=args.prelude)
            Shell(sess).cmdloop()


if __name__ == "__main__":
    main()
