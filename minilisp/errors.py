

class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class MiniLispLexError(MiniLispError):
    """ Raised when the source text cannot be split into tokens"""

class MiniLispSyntaxError(MiniLispError):
    """ Raised when the token stream is not a well formed expression"""

class MiniLispEvalError(MiniLispError):
    """ Raised when evaluation of an expression fails"""

class MiniLispUnboundSymbol(MiniLispEvalError):
    """ Raised when a symbol is used before it is bound"""

class MiniLispInvalidSymbol(MiniLispEvalError):
    """ Raised when something other than a symbol is used as a name"""

class MiniLispArityError(MiniLispEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MiniLispTypeError(MiniLispEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MiniLispLoadError(MiniLispEvalError):
    """ Raised when a source file cannot be read by `load`"""

class MiniLispRecursionError(MiniLispEvalError):
    """ Raised when evaluation nests deeper than the configured limit"""
