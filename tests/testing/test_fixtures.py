"""Tests for StandinTestCase and the pytest plugin fixtures."""

from standin.registry import Pathway, Registry, TypeCatalog, default_registry, get_registry
from standin.testing import StandinTestCase


class Clock:
    def now(self) -> str:
        return "real"


class TestStandinTestCase(StandinTestCase):
    def test_registry_is_installed(self):
        assert isinstance(self.registry, Registry)
        assert get_registry() is self.registry
        assert self.registry is not default_registry()

    def test_substitutes_are_served(self):
        self.registry.inject_object(Clock, "fake")
        assert self.registry.construct(Clock) == "fake"

    def test_teardown_resets_and_uninstalls(self):
        case = StandinTestCase()
        case.setup_method()
        registry = case.registry
        registry.inject_object(Clock, "fake")
        case.teardown_method()
        assert get_registry() is not registry
        assert not registry.has_substitute(Pathway.PLAIN, Clock)
        assert isinstance(registry.construct(Clock), Clock)


class TestPluginFixtures:
    def test_standin_registry_is_active(self, standin_registry):
        assert get_registry() is standin_registry

    def test_standin_catalog(self, standin_registry, standin_catalog):
        assert isinstance(standin_catalog, TypeCatalog)
        assert standin_catalog is standin_registry.catalog

    def test_default_registry_substitute_set(self):
        default_registry().inject_object("plugin.Autoreset", "stub")
        assert default_registry().construct("plugin.Autoreset") == "stub"

    def test_default_registry_reset_after_previous_test(self):
        assert not default_registry().has_substitute(Pathway.PLAIN, "plugin.Autoreset")
