from __future__ import annotations


class LispiError(Exception):
    """ Base class for all lispi errors"""
    pass

class LispiUnresolvedSymbol(LispiError):
    """ Raised when a symbol is bound in neither the local nor the global scope"""
    pass

class LispiNotCallable(LispiError):
    """ Raised when the head of a list does not evaluate to a function"""

class LispiEmptyCall(LispiError):
    """ Raised when an empty list is evaluated"""

class LispiArityError(LispiError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, message: str, expected: int | None = None, actual: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual

class LispiTypeError(LispiError):
    """ Raised when an operand has the wrong value type"""

class LispiMalformedForm(LispiError):
    """ Raised when a special form has an invalid shape"""

class LispiImportError(LispiError):
    """ Raised when an imported file cannot be read or parsed"""

class LispiSyntaxError(LispiError):
    """ Raised when there is a syntax error"""

class LispiOverflowError(LispiError):
    """ Raised when an integer result leaves the signed 64-bit range"""
