"""Error handling for derangements. Only GenericExceptions should be encountered during a run: if another type of error
is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a derangements error. exprs are the snippets
    substituted into msg; exprs[0] should be the offending value.
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)


class InvalidInput(GenericException):
    """Raised when a native value lies outside the domain of the encoder it was given to."""


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print custom derangements errors."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = []

    def register_file(self, path):
        """Registers path in traceback. Should be called before a file is read."""
        self.traceback.append(path)

    def remove_file(self, path):
        """Removes path from traceback. Should be called after a file is read successfully."""
        self.traceback.remove(path)

    @staticmethod
    def diagnose(error):
        """Returns offending part of error.expr highlighted and bolded."""
        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, 1)
        diagnosis += colored(error.expr[error.start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Prints error, which must be a GenericException, prefixed by the files being read when it was raised."""
        error_msg = ""
        for path in self.traceback:
            error_msg += f"  File '{path}':\n"

        if error_msg:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=sys.stderr)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error), file=sys.stderr)

        if self.fatal:
            sys.exit(1)
        self.traceback = []  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum recursion depth exceeded while evaluating terms"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
