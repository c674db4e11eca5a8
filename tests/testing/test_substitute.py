"""Tests for the substitute() helper."""

from unittest.mock import MagicMock

import pytest

from standin.registry import Pathway, Registry, TypeCatalog, use_registry
from standin.testing import substitute


class Mailer:
    def send(self, to: str) -> None:
        raise AssertionError("real mailer must not run in tests")


class TestSubstitute:
    def test_creates_spec_mock_for_class(self, standin_registry):
        mock = substitute(Mailer)
        assert isinstance(mock, MagicMock)
        assert standin_registry.construct(Mailer) is mock
        with pytest.raises(AttributeError):
            mock.not_a_method  # noqa: B018

    def test_uses_given_instance(self, standin_registry):
        fake = object()
        assert substitute("app.Mailer", fake) is fake
        assert standin_registry.construct("app.Mailer") is fake

    def test_explicit_spec(self, standin_registry):
        mock = substitute("app.Mailer", spec=Mailer)
        assert hasattr(mock, "send")

    def test_named_and_positioned(self, standin_registry):
        first = substitute("app.Query", named=True, position=0)
        second = substitute("app.Query", named=True, position=1)
        assert standin_registry.construct_named("app.Query") is first
        assert standin_registry.construct_named("app.Query") is second
        assert not standin_registry.has_substitute(Pathway.PLAIN, "app.Query")

    def test_explicit_registry(self):
        registry = Registry(catalog=TypeCatalog())
        mock = substitute(Mailer, registry=registry)
        assert registry.construct(Mailer) is mock

    def test_registers_with_active_registry(self):
        with use_registry() as registry:
            mock = substitute(Mailer)
            assert registry.construct(Mailer) is mock

    def test_mock_records_calls_from_production_code(self, standin_registry):
        mock = substitute(Mailer)

        def signup(email: str) -> None:
            standin_registry.construct(Mailer).send(email)

        signup("ada@example.com")
        mock.send.assert_called_once_with("ada@example.com")
