"""
Deferred naming of the locals introduced by a stream-to-loop rewrite.
"""

from .candidates import NameCandidateSet
from .oracle import TypeNamingOracle, JavaStyleNamingOracle
from .registry import NameRegistry
from .variable import StreamVariable, StubVariable, VariableState, STUB
from .session import NamingSession
from .words import pluralize, unpluralize, unpluralize_name, camel_suffixes, split_camel_case
