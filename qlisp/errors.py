

class QlispError(Exception):
    """ Base class for all qlisp errors"""
    pass

class QlispSyntaxError(QlispError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position

class QlispInvalidSymbol(QlispError):
    """ Raised when a non-symbol is used as an environment key"""
    pass

class QlispUnboundSymbol(QlispError):
    """ Raised when a symbol is looked up before it is bound"""
    pass

class QlispArityError(QlispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class QlispTypeError(QlispError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class QlispValueError(QlispError):
    """ Raised when an argument has the right type but an unusable value (e.g. an empty list)"""

class QlispZeroDivisionError(QlispError):
    """ Raised when dividing or taking a remainder by zero"""

class QlispPreludeError(QlispError):
    """ Raised when the prelude evaluates to an error value"""
