#!/usr/bin/env python3
"""
Tests for StreamVariable

Lifecycle ordering, candidate priority and the stub variable.
"""

import pytest

from streamloop.naming import StreamVariable, StubVariable, VariableState, STUB, NameRegistry
from streamloop.shared.errors import VariableLifecycleError, StreamLoopImplementationError
from streamloop.shared.types import ClassType, STRING, INT, VOID


LIST_OF_STRING = ClassType("List", (STRING,))


def _registered(ty, registry, oracle, best=(), other=()):
    variable = StreamVariable(ty)
    for name in best:
        variable.add_best_name_candidate(name)
    for name in other:
        variable.add_other_name_candidate(name)
    variable.add_candidates_from_type(oracle)
    variable.register(registry)
    return variable


class TestLifecycle:
    """Forward-only lifecycle and its faults"""

    def test_construction_is_created_state(self):
        """A fresh variable has no candidates and is in CREATED state"""
        variable = StreamVariable(INT)
        assert variable.state is VariableState.CREATED
        assert not variable.is_registered

    def test_candidate_moves_to_gathering(self):
        """The first candidate moves CREATED to GATHERING"""
        variable = StreamVariable(INT)
        variable.add_other_name_candidate("count")
        assert variable.state is VariableState.GATHERING

    def test_full_lifecycle(self, registry, oracle):
        """Created -> Gathering -> Typed -> Registered"""
        variable = StreamVariable(LIST_OF_STRING)
        variable.add_best_name_candidate("names")
        variable.add_candidates_from_type(oracle)
        assert variable.state is VariableState.TYPED
        assert variable.type_text == "List<String>"
        variable.register(registry)
        assert variable.state is VariableState.REGISTERED
        assert variable.name == "names"
        assert variable.declaration == "List<String> names"

    def test_resolve_type_twice_faults(self, oracle):
        """Type resolution is exactly-once"""
        variable = StreamVariable(INT)
        variable.add_candidates_from_type(oracle)
        with pytest.raises(VariableLifecycleError) as exc_info:
            variable.add_candidates_from_type(oracle)
        assert exc_info.value.error_code == VariableLifecycleError.TYPE_ALREADY_RESOLVED

    def test_resolve_type_after_register_faults(self, registry, oracle):
        """Type resolution after registration is still a second resolution"""
        variable = _registered(INT, registry, oracle)
        with pytest.raises(VariableLifecycleError) as exc_info:
            variable.resolve_type(oracle)
        assert exc_info.value.error_code == VariableLifecycleError.TYPE_ALREADY_RESOLVED

    def test_register_before_resolve_faults(self, registry):
        """Registration requires a resolved type"""
        variable = StreamVariable(INT)
        variable.add_best_name_candidate("x")
        with pytest.raises(VariableLifecycleError) as exc_info:
            variable.register(registry)
        assert exc_info.value.error_code == VariableLifecycleError.REGISTER_BEFORE_TYPE
        assert registry.used_names == []

    def test_register_twice_faults(self, registry, oracle):
        """Registration is exactly-once and the name stays the same"""
        variable = _registered(INT, registry, oracle, best=["x"])
        with pytest.raises(VariableLifecycleError) as exc_info:
            variable.register(registry)
        assert exc_info.value.error_code == VariableLifecycleError.ALREADY_REGISTERED
        assert variable.name == "x"
        assert registry.used_names == ["x"]

    def test_name_before_register_faults(self, oracle):
        """Name is not observable until registration, even once typed"""
        variable = StreamVariable(INT)
        with pytest.raises(VariableLifecycleError):
            variable.name
        variable.add_candidates_from_type(oracle)
        with pytest.raises(VariableLifecycleError) as exc_info:
            variable.name
        assert exc_info.value.error_code == VariableLifecycleError.NAME_BEFORE_REGISTER

    def test_type_text_before_resolve_faults(self):
        """Type text is not observable until type resolution"""
        variable = StreamVariable(INT)
        with pytest.raises(VariableLifecycleError) as exc_info:
            variable.type_text
        assert exc_info.value.error_code == VariableLifecycleError.TYPE_BEFORE_RESOLVE

    def test_declaration_before_register_faults(self, oracle):
        """Declaration needs both type text and name"""
        variable = StreamVariable(INT)
        variable.add_candidates_from_type(oracle)
        assert variable.type_text == "int"
        with pytest.raises(VariableLifecycleError):
            variable.declaration

    def test_candidates_after_type_resolution_fault(self, oracle):
        """Gathering closes once the type is resolved"""
        variable = StreamVariable(INT)
        variable.add_candidates_from_type(oracle)
        with pytest.raises(VariableLifecycleError) as exc_info:
            variable.add_best_name_candidate("x")
        assert exc_info.value.error_code == VariableLifecycleError.CANDIDATES_CLOSED

    def test_candidates_after_register_fault(self, registry, oracle):
        """Gathering stays closed after registration"""
        variable = _registered(INT, registry, oracle)
        with pytest.raises(VariableLifecycleError):
            variable.add_other_name_candidate("y")

    def test_lifecycle_error_is_implementation_error(self):
        """Lifecycle faults are defects in the caller, rendered with their code"""
        variable = StreamVariable(INT)
        with pytest.raises(StreamLoopImplementationError) as exc_info:
            variable.name
        assert str(exc_info.value).startswith("[E0104]")


class TestCandidatePriority:
    """Ordered candidate list handed to the registry"""

    def test_explicit_beats_heuristic(self, registry, empty_oracle):
        """Explicit candidate wins even when added after a heuristic one"""
        variable = _registered(INT, registry, empty_oracle, best=["item"], other=["element"])
        assert variable.name == "item"

    def test_heuristic_when_explicit_collides(self, empty_oracle):
        """A colliding explicit name falls back to the heuristic"""
        registry = NameRegistry(reserved=["item"])
        variable = _registered(INT, registry, empty_oracle, best=["item"], other=["element"])
        assert variable.name == "element"

    def test_type_candidates_come_last(self, oracle):
        """Type-based names follow existing heuristics"""
        registry = NameRegistry(reserved=["element"])
        variable = _registered(LIST_OF_STRING, registry, oracle, other=["element"])
        assert variable.name == "list"

    def test_default_when_no_candidates(self, registry, empty_oracle):
        """No candidates and no type suggestions give the generic default"""
        variable = _registered(ClassType("Foo"), registry, empty_oracle)
        assert variable.name == "val"

    def test_default_is_disambiguated(self, empty_oracle):
        """The generic default goes through collision resolution like any name"""
        registry = NameRegistry(reserved=["val"])
        variable = _registered(ClassType("Foo"), registry, empty_oracle)
        assert variable.name == "val1"

    def test_empty_candidate_gives_default(self, registry, empty_oracle):
        variable = _registered(ClassType("Foo"), registry, empty_oracle, best=[""])
        assert variable.name == "val"

    def test_duplicates_are_absorbed(self, fixed_oracle):
        """Duplicate candidates never reach the registry twice"""
        seen = []

        class RecordingRegistry(NameRegistry):
            def register_var_name(self, variants):
                seen.append(list(variants))
                return super().register_var_name(variants)

        variable = StreamVariable(INT)
        variable.add_best_name_candidate("x")
        variable.add_best_name_candidate("x")
        variable.add_other_name_candidate("y")
        variable.add_other_name_candidate("x")
        variable.add_other_name_candidate("y")
        variable.add_candidates_from_type(fixed_oracle(["y", "z", "x"]))
        variable.register(RecordingRegistry())
        assert seen == [["x", "y", "z"]]

    def test_oracle_called_once_with_semantic_type(self, fixed_oracle, registry):
        """The oracle sees the semantic type exactly once"""
        oracle = fixed_oracle(["list"])
        variable = _registered(LIST_OF_STRING, registry, oracle)
        assert oracle.calls == [LIST_OF_STRING]
        assert variable.name == "list"

    def test_aliases(self, registry, oracle):
        """add_explicit_candidate / add_heuristic_candidate / resolve_type are the same operations"""
        variable = StreamVariable(INT)
        variable.add_heuristic_candidate("count")
        variable.add_explicit_candidate("n")
        variable.resolve_type(oracle)
        variable.register(registry)
        assert variable.declaration == "int n"


class TestScenarios:
    """End-to-end naming scenarios"""

    def test_explicit_name_survives_type_suggestions(self, registry, oracle):
        """List<String> with explicit and heuristic 'x' commits 'x'"""
        variable = StreamVariable(LIST_OF_STRING)
        variable.add_best_name_candidate("x")
        variable.add_other_name_candidate("x")
        assert oracle.suggest_names(LIST_OF_STRING) == ["list", "strings"]
        variable.add_candidates_from_type(oracle)
        variable.register(registry)
        assert variable.name == "x"

    def test_two_variables_same_candidate(self, registry, empty_oracle):
        """The second 'x' is disambiguated to 'x1'"""
        first = _registered(STRING, registry, empty_oracle, best=["x"])
        second = _registered(STRING, registry, empty_oracle, best=["x"])
        assert first.name == "x"
        assert second.name == "x1"

    def test_no_candidates_at_all(self, registry, empty_oracle):
        """Empty candidates and empty oracle fall back to 'val'"""
        variable = _registered(ClassType("Foo"), registry, empty_oracle)
        assert variable.declaration == "Foo val"

    def test_many_registrations_are_distinct(self, registry, oracle):
        """N registrations give N distinct names"""
        variables = [_registered(STRING, registry, oracle, best=["s"]) for _ in range(12)]
        names = [v.name for v in variables]
        assert len(set(names)) == 12


class TestRendering:
    """Diagnostic rendering"""

    def test_unregistered_repr_lists_candidates(self):
        """Unregistered variables render their candidate sets"""
        variable = StreamVariable(INT)
        variable.add_best_name_candidate("a")
        variable.add_other_name_candidate("b")
        assert repr(variable) == "###(unregistered: ['a']|['b'])###"

    def test_registered_renders_name(self, registry, oracle):
        variable = _registered(INT, registry, oracle, best=["n"])
        assert str(variable) == "n"


class TestStub:
    """Stub variable accepts everything and names nothing"""

    def test_stub_accepts_any_sequence(self, registry, oracle):
        """No call on the stub faults, in any order, any number of times"""
        for _ in range(2):
            STUB.register(registry)
            STUB.add_candidates_from_type(oracle)
            STUB.add_best_name_candidate("x")
            STUB.add_other_name_candidate("y")
            STUB.resolve_type(oracle)
            STUB.add_explicit_candidate("z")
            STUB.add_heuristic_candidate("w")
        assert registry.used_names == []

    def test_stub_never_named(self, registry, oracle):
        """Queries return the diagnostic marker; the stub is never registered"""
        STUB.register(registry)
        assert not STUB.is_registered
        assert STUB.name == "###STUB###"
        assert STUB.type_text == "###STUB###"
        assert STUB.declaration == "###STUB###"
        assert str(STUB) == "###STUB###"

    def test_stub_is_a_stream_variable(self):
        """Callers hold the stub through the same interface"""
        assert isinstance(STUB, StreamVariable)
        assert isinstance(StubVariable(), StreamVariable)

    def test_stub_does_not_consult_oracle(self, fixed_oracle):
        oracle = fixed_oracle(["x"])
        StubVariable().add_candidates_from_type(oracle)
        assert oracle.calls == []


if __name__ == "__main__":
    pytest.main([__file__])
