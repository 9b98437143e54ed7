"""Uses the minilisp reader and evaluator to interpret .lisp files/run in command-line mode. Also uses error handling
context manager. Called from the minilisp console script.
"""

import argparse

from minilisp.lang.error import ErrorHandler
from minilisp.lang.shell import Shell
from minilisp.lang.session import Session


def main(argv=None):
    """Runs minilisp interpreter. Called from minilisp console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="minilisp")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        args = parser.parse_args(argv)

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False)
            for value in sess.run():
                print(value)

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()
