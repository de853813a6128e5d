
class LsonError(Exception):
    """ Base class for all LSON errors"""
    pass

class LsonUnboundName(LsonError):
    """ Raised when a name is bound neither locally nor globally"""
    pass

class LsonAlreadyDefined(LsonError):
    """ Raised when def or defmacro tries to rebind an existing name"""

class LsonArityError(LsonError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class LsonTooManyArguments(LsonArityError):
    """ Raised when a function receives more arguments than it has parameters"""

class LsonTooFewArguments(LsonArityError):
    """ Raised when a function receives fewer arguments than it has parameters"""

class LsonTypeError(LsonError):
    """ Raised when a value has the wrong shape, e.g. a non-list where a list is required"""

class LsonInvalidKeyType(LsonTypeError):
    """ Raised when a mapping is applied to a non-string key"""

class LsonDestructureError(LsonError):
    """ Raised when a parameter pattern does not match its argument"""

class LsonNotAFunction(LsonError):
    """ Raised when applying a value that is not callable"""

class LsonUndefinedBuiltin(LsonError):
    """ Raised when a builtin reference names no known primitive"""

class LsonArithmeticError(LsonError):
    """ Raised on division by zero"""

class LsonRecursionError(LsonError):
    """ Raised when evaluation nests deeper than the host stack allows"""

class LsonExpansionTooDeep(LsonRecursionError):
    """ Raised when macro expansion exceeds the configured depth"""

class LsonDecodeError(LsonError):
    """ Raised when program text is not valid JSON"""
