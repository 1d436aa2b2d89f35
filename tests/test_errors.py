"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from gep.core.errors import (
    AdapterError,
    ConfigurationError,
    EvaluationError,
    GepError,
    LinkFunctionNotFoundError,
    ParallelExecutionError,
    RegistryError,
    SerializationError,
)

ALL_SUBCLASSES = [
    EvaluationError,
    LinkFunctionNotFoundError,
    SerializationError,
    ConfigurationError,
    RegistryError,
    AdapterError,
    ParallelExecutionError,
]


class TestExceptionHierarchy:
    """Verify the exception hierarchy structure."""

    def test_base_is_exception(self) -> None:
        assert issubclass(GepError, Exception)

    def test_base_not_builtin_value_error(self) -> None:
        assert not issubclass(GepError, ValueError)

    @pytest.mark.parametrize("exc_cls", ALL_SUBCLASSES)
    def test_subclass_of_base(self, exc_cls: type[GepError]) -> None:
        assert issubclass(exc_cls, GepError)

    @pytest.mark.parametrize("exc_cls", ALL_SUBCLASSES)
    def test_instantiable_without_args(self, exc_cls: type[GepError]) -> None:
        exc = exc_cls()
        assert isinstance(exc, exc_cls)

    @pytest.mark.parametrize("exc_cls", ALL_SUBCLASSES)
    def test_catchable_as_base(self, exc_cls: type[GepError]) -> None:
        with pytest.raises(GepError):
            raise exc_cls()

    def test_link_not_found_is_evaluation_error(self) -> None:
        assert issubclass(LinkFunctionNotFoundError, EvaluationError)

    def test_parallel_execution_is_adapter_error(self) -> None:
        assert issubclass(ParallelExecutionError, AdapterError)


class TestLinkFunctionNotFoundError:
    def test_message_names_symbol(self) -> None:
        exc = LinkFunctionNotFoundError("Foo")
        assert str(exc) == "Unable to find linking function: Foo"
        assert exc.link_func == "Foo"

    @pytest.mark.parametrize(
        "exc_cls", [SerializationError, ConfigurationError, RegistryError, AdapterError]
    )
    def test_instantiable_with_message(self, exc_cls: type[GepError]) -> None:
        msg = "test error message"
        assert str(exc_cls(msg)) == msg
