
class GolpError(Exception):
    """ Base class for all Golp errors"""
    pass

class GolpSyntaxError(GolpError):
    """ Raised when the reader cannot build a complete expression"""

class GolpUnexpectedEOF(GolpSyntaxError):
    """ Raised when tokens run out before an expression (or list) is complete"""

class GolpUnexpectedCloseParen(GolpSyntaxError):
    """ Raised when a ')' appears where an expression should begin"""

class GolpTypeMismatch(GolpError):
    """ Raised when an operation receives a value of the wrong type"""

class GolpNotCallable(GolpTypeMismatch):
    """ Raised when the head of an application is not a procedure"""

class GolpUnboundVariable(GolpError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

class GolpArityError(GolpError):
    """ Raised when a special form receives the wrong number of arguments"""

class GolpInvalidSymbol(GolpError):
    """ Raised when a symbol is required but something else was supplied"""
