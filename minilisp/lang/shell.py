"""Handles interactive/command-line mode for the minilisp interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """minilisp interpreter shell. One expression per line."""
    intro = "minilisp interpreter :: Python backend\nType 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def default(self, line):
        """Evaluates an arbitrary minilisp expression and prints its value."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            self.sess.add(self.sess.preprocess_line(line), self.line_num)

            for value in self.sess.run():
                print(value)

    def completedefault(self, text, *ignored):
        """Completes names bound in the session's root Environment."""
        return [name for name in self.sess.env.names() if name.startswith(text)]

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the minilisp interpreter!\n\n"
              "Each line is read as one expression and evaluated. The special forms are quote, \n"
              "if, define, set! and lambda; the only builtins are + - * /. Zero and () are \n"
              "false, everything else is true.\n\n"
              "Try it out by typing '(define sq (lambda (x) (* x x)))', then '(sq 7)'.\n"
              "'env' lists the current bindings and 'exit' leaves the interpreter.")

    def do_env(self, arg):
        """Lists bindings in the session's root Environment."""
        for name, value in self.sess.env.bindings.items():
            print(f"{name}: {value}")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
