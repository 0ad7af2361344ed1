"""Line-based read-eval-print shell for golp. Uses cmd as backend."""

import cmd
import logging
import sys

from golp import config
from golp.debug_utils.pprint import to_lisp_string
from golp.interpreter import Interpreter
from golp.types.errors import GolpError
from golp.types.nil import Nil

logger = logging.getLogger(__name__)


class Shell(cmd.Cmd):
    """Golp interpreter shell."""
    intro = "golp :: a tiny Lisp\nType 'exit' or press Ctrl-D to quit."

    def __init__(self, interp=None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp if interp is not None else Interpreter()
        self.prompt = config.get_prompt()

    def default(self, line):
        """Evaluates one expression and prints its value."""
        # cmd.Cmd would exit on an uncaught exception, so report and keep the session
        try:
            result = self.interp.eval(line)
        except (GolpError, RecursionError) as ex:
            logger.debug("evaluation failed: %s", line, exc_info=True)
            self.stdout.write(f"error: {ex}\n")
            return
        if result is not Nil:
            self.stdout.write(to_lisp_string(result) + "\n")

    def onecmd(self, line):
        # Every line except the shell commands is Lisp; `(exit)` etc. must not
        # be split into a command name by cmd's identifier parsing.
        stripped = line.strip()
        if stripped in ("exit", "EOF"):
            return super().onecmd(stripped)
        if not stripped:
            return self.emptyline()
        return self.default(line)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True


def main() -> int:
    logging.basicConfig(level=config.get_log_level())
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
    Shell().cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
