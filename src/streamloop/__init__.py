"""
streamloop: deferred naming of the locals a stream-to-loop rewrite introduces.
"""

__version__ = "0.1.0"

from .naming import (
    NamingSession, NameRegistry, StreamVariable, StubVariable, VariableState, STUB,
    TypeNamingOracle, JavaStyleNamingOracle,
)
from .frontend import parse_type
from .shared import StreamLoopError, TypeTextError, StreamLoopImplementationError, VariableLifecycleError
