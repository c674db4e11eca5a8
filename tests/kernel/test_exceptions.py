"""Tests for the standin exception hierarchy."""

from standin.kernel.exceptions import ConfigurationException, StandinException
from standin.registry.exceptions import (
    InvalidPositionError,
    RegistryException,
    SubstituteExhaustedError,
    TypeResolutionError,
)
from standin.registry.types import Pathway


class TestStandinException:
    def test_basic_creation(self):
        exc = StandinException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = StandinException("not found", code="NOT_FOUND", context={"type_id": "T"})
        assert exc.code == "NOT_FOUND"
        assert exc.context["type_id"] == "T"

    def test_context_not_shared(self):
        exc = StandinException("a")
        exc.context["key"] = "value"
        assert StandinException("b").context == {}


class TestHierarchy:
    def test_registry_errors_are_standin_errors(self):
        assert issubclass(RegistryException, StandinException)
        assert issubclass(TypeResolutionError, RegistryException)
        assert issubclass(SubstituteExhaustedError, RegistryException)
        assert issubclass(InvalidPositionError, RegistryException)

    def test_builtin_bases(self):
        assert issubclass(TypeResolutionError, LookupError)
        assert issubclass(SubstituteExhaustedError, IndexError)
        assert issubclass(InvalidPositionError, ValueError)
        assert issubclass(ConfigurationException, ValueError)


class TestRegistryErrorMessages:
    def test_type_resolution_message(self):
        exc = TypeResolutionError("app.Mailr", suggestions=["app.Mailer"])
        assert "No constructible type registered as 'app.Mailr'" in str(exc)
        assert "Similar registered types: app.Mailer" in str(exc)
        assert exc.code == "TYPE_RESOLUTION"

    def test_type_resolution_builder_context(self):
        exc = TypeResolutionError("Q", reason="Type 'Q' has no builder 'create'", builder="create")
        assert str(exc) == "Type 'Q' has no builder 'create'"
        assert exc.context == {"type_id": "Q", "builder": "create"}

    def test_exhausted_message(self):
        exc = SubstituteExhaustedError(Pathway.PLAIN, "T", 2, [0, 1])
        assert "position 2" in str(exc)
        assert exc.context == {"pathway": "object", "type_id": "T", "position": 2, "registered": [0, 1]}

    def test_invalid_position_message(self):
        exc = InvalidPositionError("T", -1)
        assert "-1" in str(exc)
        assert exc.code == "INVALID_POSITION"
