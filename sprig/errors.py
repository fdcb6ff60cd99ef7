class SprigError(Exception):
    """Base class for errors reported back to the submitter."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LexError(SprigError):
    """Raised by the lexer for unterminated strings and stray characters."""


class ParseError(SprigError):
    """Raised by the parser when an expected token or expression is missing."""


class SprigRuntimeError(SprigError):
    """Raised during evaluation: undefined variables and bad operands."""
