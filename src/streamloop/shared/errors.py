"""
Error Classes

Two families: errors about input text (StreamLoopError) and defects in the
calling code (StreamLoopImplementationError). Lifecycle misuse of a variable
placeholder is always the latter.
"""

from typing import Optional


class StreamLoopError(Exception):
    """Base exception for errors caused by input handed to streamloop"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class TypeTextError(StreamLoopError):
    """
    Type text that could not be parsed into a semantic type.

    Raised by ``parse_type``; ``column`` is 1-based when the parser reported one.
    """
    def __init__(self, message: str, text: str, column: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.column = column

    def __str__(self):
        if self.column is not None:
            pointer = " " * (self.column - 1) + "^"
            return f"{self.message}\n  {self.text}\n  {pointer}"
        return f"{self.message}: {self.text!r}"


class StreamLoopImplementationError(Exception):
    """
    Error in the code driving streamloop (not in user input).

    Use this for internal defects:
    - Invalid internal state
    - Calls made in the wrong order

    Never catch and retry these; the in-progress transformation is broken.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class VariableLifecycleError(StreamLoopImplementationError):
    """A variable placeholder or naming session was used out of lifecycle order"""

    TYPE_ALREADY_RESOLVED = "E0101"
    REGISTER_BEFORE_TYPE = "E0102"
    ALREADY_REGISTERED = "E0103"
    NAME_BEFORE_REGISTER = "E0104"
    TYPE_BEFORE_RESOLVE = "E0105"
    CANDIDATES_CLOSED = "E0106"
    SESSION_DISCARDED = "E0107"
