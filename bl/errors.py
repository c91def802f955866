class BlError(Exception):
    """ Base class for all bl errors"""
    pass

class BlSyntaxError(BlError):
    """ Raised when the reader meets malformed input"""

class EndOfInput(BlError):
    """ Raised when the line source has no more input"""

class InvariantViolation(BlError):
    """ Raised when an internal invariant is broken; fatal to the REPL"""
