class SchemerError(Exception):
    """ Base class for all Schemer errors"""

    kind = "Error"

    def describe(self) -> str:
        """ Message prefixed with the error kind, as shown to users"""
        return f"{self.kind}: {self}"


class SchemerSyntaxError(SchemerError):
    """ Raised when source text cannot be tokenized or parsed"""

    kind = "SyntaxError"

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def describe(self) -> str:
        if self.line is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} (line: {self.line}, column: {self.column})"


class SchemerRuntimeError(SchemerError):
    """ Raised when evaluation fails"""

    kind = "RuntimeError"


class SchemerUnboundSymbol(SchemerRuntimeError):
    """ Raised when a symbol is used or set before it is bound"""


class SchemerArityError(SchemerRuntimeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""


class SchemerTypeError(SchemerRuntimeError):
    """ Raised when an operand has the wrong type or shape"""


class SchemerDuplicateDefinition(SchemerRuntimeError):
    """ Raised when a name is defined twice in the same scope"""


class SchemerUserError(SchemerRuntimeError):
    """ Raised by the `error` procedure"""
