"""Tests for DefaultLocalizerFactory and SimpleLocalizerFactory.

Python 3.13+.
"""

import logging
import threading

import pytest

from localizemessages import (
    DefaultLocalizer,
    DefaultLocalizerFactory,
    DefaultLocalizerOptions,
    InMemoryLocalizationRecorder,
    LocalizerConfigurationError,
    SimpleLocalizerFactory,
    just_this_localize_key,
)
from localizemessages.resources import DictStringLocalizerFactory
from localizemessages.testing import StubDefaultLocalizer


class Errors:
    """Resource class."""


class Labels:
    """Resource class."""


@pytest.fixture
def string_factory() -> DictStringLocalizerFactory:
    """Shared in-memory resources for every resource type."""
    return DictStringLocalizerFactory(
        {"Required": "Obligatoire", "SimpleLocalizer(Save)": "Enregistrer"},
        raise_on_missing=False,
    )


class TestDefaultLocalizerFactory:
    """Test creation, stubs and caching."""

    def test_creates_default_localizer(self, string_factory: DictStringLocalizerFactory) -> None:
        """A configured factory creates a DefaultLocalizer for the resource."""
        factory = DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        localizer = factory.create(Errors)
        assert isinstance(localizer, DefaultLocalizer)
        assert localizer.resource_type is Errors
        key = just_this_localize_key("Required", Errors)
        assert localizer.localize_string_message(key, "Required", culture="fr") == "Obligatoire"

    def test_cached_per_resource(self, string_factory: DictStringLocalizerFactory) -> None:
        """The same resource type returns the same localizer instance."""
        factory = DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        assert factory.create(Errors) is factory.create(Errors)
        assert factory.create(Errors) is not factory.create(Labels)

    def test_cache_is_per_factory(self, string_factory: DictStringLocalizerFactory) -> None:
        """Two factories do not share localizers."""
        options = DefaultLocalizerOptions("en")
        first = DefaultLocalizerFactory(options, string_factory)
        second = DefaultLocalizerFactory(options, string_factory)
        assert first.create(Errors) is not second.create(Errors)

    def test_none_resource_gives_stub(self, string_factory: DictStringLocalizerFactory) -> None:
        """Resource type None means localization is not set up."""
        factory = DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        assert isinstance(factory.create(None), StubDefaultLocalizer)

    def test_no_string_factory_gives_stub(self) -> None:
        """Without a StringLocalizerFactory every resource gets a stub."""
        factory = DefaultLocalizerFactory(DefaultLocalizerOptions("en"))
        assert isinstance(factory.create(Errors), StubDefaultLocalizer)

    def test_no_options_is_configuration_error(
        self, string_factory: DictStringLocalizerFactory
    ) -> None:
        """Localization set up without options fails loudly."""
        factory = DefaultLocalizerFactory(None, string_factory)
        with pytest.raises(LocalizerConfigurationError, match="DefaultLocalizerOptions"):
            factory.create(Errors)

    def test_no_options_without_resources_still_stub(self) -> None:
        """Stubs do not need options."""
        assert isinstance(DefaultLocalizerFactory(None).create(Errors), StubDefaultLocalizer)

    def test_registered_constructor(self, string_factory: DictStringLocalizerFactory) -> None:
        """A registered constructor builds the localizer for its resource type."""
        calls: list[str] = []

        def build(options, string_localizer, logger):
            calls.append(logger.name)
            return DefaultLocalizer(
                options, string_localizer, resource_type="Custom", logger=logger
            )

        factory = DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        factory.register(Errors, build)
        localizer = factory.create(Errors)
        assert localizer.resource_type == "Custom"
        assert factory.create(Errors) is localizer
        assert calls == ["localizemessages.localization.default.Errors"]

    def test_register_none_rejected(self, string_factory: DictStringLocalizerFactory) -> None:
        """register() requires a resource type and a constructor."""
        factory = DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        with pytest.raises(TypeError):
            factory.register(None, DefaultLocalizer)  # type: ignore[arg-type]

    def test_per_resource_logger(
        self, string_factory: DictStringLocalizerFactory, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Missing-resource warnings name the resource's logger."""
        factory = DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        key = just_this_localize_key("Unknown", Errors)
        with caplog.at_level(logging.WARNING):
            factory.create(Errors).localize_string_message(key, "Unknown", culture="fr")
        assert [record.name for record in caplog.records] == [
            "localizemessages.localization.default.Errors"
        ]

    def test_recorder_passed_to_localizers(
        self, string_factory: DictStringLocalizerFactory
    ) -> None:
        """Every created localizer records into the factory's recorder."""
        recorder = InMemoryLocalizationRecorder()
        factory = DefaultLocalizerFactory(
            DefaultLocalizerOptions("en"), string_factory, recorder=recorder
        )
        key = just_this_localize_key("Required", Errors)
        factory.create(Errors).localize_string_message(key, "Required", culture="fr")
        factory.create(Labels).localize_string_message(key, "Required", culture="en")
        assert [entry.resource_class_name for entry in recorder.entries] == ["Errors", "Labels"]

    def test_concurrent_create_returns_one_instance(
        self, string_factory: DictStringLocalizerFactory
    ) -> None:
        """Concurrent first use still creates a single localizer."""
        factory = DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        results: list[object] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(factory.create(Errors))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(result) for result in results}) == 1


class TestSimpleLocalizerFactory:
    """Test SimpleLocalizerFactory."""

    def test_create(self, string_factory: DictStringLocalizerFactory) -> None:
        """The created SimpleLocalizer uses the resource's DefaultLocalizer."""
        factory = SimpleLocalizerFactory(
            DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        )
        simple = factory.create(Labels)
        assert simple.options.resource_type is Labels
        assert simple.localize_string("Save", Labels, culture="fr") == "Enregistrer"

    def test_none_resource_returns_inline(
        self, string_factory: DictStringLocalizerFactory
    ) -> None:
        """Without a resource the inline message is returned."""
        factory = SimpleLocalizerFactory(
            DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory)
        )
        assert factory.create(None).localize_string("Save", Labels, culture="fr") == "Save"

    def test_prefix_passed_through(self, string_factory: DictStringLocalizerFactory) -> None:
        """The key prefix setting reaches the created localizer."""
        factory = SimpleLocalizerFactory(
            DefaultLocalizerFactory(DefaultLocalizerOptions("en"), string_factory),
            prefix_key_string=None,
        )
        assert factory.create(Labels).make_key("Save") == "Save"
