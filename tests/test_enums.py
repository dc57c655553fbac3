"""Property-based tests for the enums and error types.

"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localizemessages import (
    LocalizeError,
    LocalizeKeyError,
    LocalizerConfigurationError,
    ResourceNotFoundError,
)
from localizemessages.enums import CultureMatchMode, KeyScope, LoadStatus

ALL_ENUMS = (KeyScope, CultureMatchMode, LoadStatus)


class TestEnumProperties:
    """Invariants shared by every StrEnum."""

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS)
    def test_str_returns_value(self, enum_cls: type) -> None:
        """Property: str() of a member is its value."""
        for member in enum_cls:
            assert str(member) == member.value
            assert member.value

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS)
    def test_values_unique(self, enum_cls: type) -> None:
        """Property: no two members share a value."""
        values = [member.value for member in enum_cls]
        assert len(values) == len(set(values))

    @given(st.sampled_from(list(KeyScope)))
    def test_key_scope_round_trip(self, scope: KeyScope) -> None:
        """Property: KeyScope(value) returns the member."""
        event(f"scope={scope}")
        assert KeyScope(scope.value) is scope

    def test_expected_members(self) -> None:
        """Every key scope and match mode is present."""
        assert {scope.value for scope in KeyScope} == {
            "just_key",
            "method_only",
            "class_only",
            "class_and_method",
        }
        assert set(CultureMatchMode) == {CultureMatchMode.PREFIX, CultureMatchMode.EXACT}
        assert LoadStatus.NOT_FOUND == "not_found"


class TestErrors:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Errors share LocalizeError and the matching builtin bases."""
        assert issubclass(LocalizeKeyError, LocalizeError)
        assert issubclass(LocalizerConfigurationError, ValueError)
        assert issubclass(ResourceNotFoundError, KeyError)

    def test_resource_not_found_message(self) -> None:
        """The message names the key and is not quoted like a KeyError."""
        error = ResourceNotFoundError("Greeting")
        assert error.name == "Greeting"
        assert str(error) == "There was no entry with the name 'Greeting' in the dictionary."
