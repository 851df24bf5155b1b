# tests\adapters\test_container.py
from deinflector.adapters.tables.loader import JsonTableSource
from deinflector.core.use_cases import LanguageRegistry, LookupCandidates
from deinflector.shared.config import Settings
from deinflector.shared.container import Container


def test_registry_is_shared_between_use_cases():
    container = Container()

    first = container.lookup_candidates_use_case()
    second = container.lookup_candidates_use_case()

    assert isinstance(first, LookupCandidates)
    assert first is not second
    assert first.registry is second.registry
    assert isinstance(container.table_source(), JsonTableSource)


def test_registry_honours_enabled_languages(mock_source):
    container = Container()
    container.config.ENABLED_LANGUAGES.from_value(["en"])
    container.config.EAGER_LOAD.from_value(False)

    with container.table_source.override(mock_source):
        registry = container.language_registry()

        assert isinstance(registry, LanguageRegistry)
        assert registry.languages == ["en"]
        assert registry.available() == []
        assert "walk" in container.lookup_candidates_use_case().execute("en", "walked")
        mock_source.load_descriptor.assert_not_called()

    assert not container.table_source.overridden


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ENABLED_LANGUAGES", '["ko", "en"]')
    monkeypatch.setenv("EAGER_LOAD", "false")
    monkeypatch.setenv("LOG_FORMAT", "console")

    settings = Settings()

    assert settings.ENABLED_LANGUAGES == ["ko", "en"]
    assert settings.EAGER_LOAD is False
    assert settings.LOG_FORMAT == "console"
    assert settings.TABLES_DIR is None
