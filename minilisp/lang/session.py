"""Session control for minilisp. Feeds lines to the reader and evaluator, either from a .lisp file or from the
command-line shell, keeping one root Environment for the whole session.
"""

from minilisp.lang.error import GenericException
from minilisp.lang.numerical import standard_environment
from minilisp.pure.evaluator import evaluate
from minilisp.pure.lexical import parse


class Session:
    """Governs a minilisp session: one root Environment plus the lines waiting to be evaluated in it."""
    SH_FILE = "<in>"  # command-line interpreter filename
    COMMENT = ";;"

    def __init__(self, error_handler, path, cmd_line):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.env = standard_environment()
        self.to_exec = {}  # dict of line num: (line, expression) to evaluate

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    lines = file.readlines()
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for line_num, line in enumerate(lines):
                self.add(Session.preprocess_line(line), line_num + 1)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename", diagnosis=False)

    @staticmethod
    def preprocess_line(line):
        """Strips comments and surrounding whitespace from a line. Must be called before calling add."""
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]
        return line.strip()

    def add(self, line, line_num):
        """Parses line and queues it for evaluation. Blank lines are skipped."""
        if not line:
            return

        self.error_handler.register_line(self.path, line, line_num)  # in case error is raised
        self.to_exec[line_num] = (line, parse(line))
        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Evaluates queued lines in order, yielding every result that isn't None (define and set! produce None).
        Lines are dequeued even if they raise.
        """
        for line_num, (line, expr) in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, line, line_num)

            try:
                value = evaluate(expr, self.env)
            finally:
                del self.to_exec[line_num]

            self.error_handler.remove_line(self.path)
            if value is not None:
                yield value
