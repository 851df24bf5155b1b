# deinflector/shared/container.py
from dependency_injector import containers, providers

from deinflector.shared.config import settings
from deinflector.adapters.tables.loader import JsonTableSource
from deinflector.core.use_cases.load_languages import LanguageRegistry, LoadLanguages
from deinflector.core.use_cases.lookup_candidates import LookupCandidates


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Assembles settings -> table source -> language registry -> use cases.
    Create one per process at startup and pass it (or the registry) to
    whatever performs lookups.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)
    table_source = providers.Singleton(
        JsonTableSource,
        tables_dir=config.TABLES_DIR,
    )

    # 3. Language Registry (Singleton: descriptors are built once and shared)
    language_registry = providers.Singleton(
        LanguageRegistry,
        source=table_source,
        languages=config.ENABLED_LANGUAGES,
        eager=config.EAGER_LOAD,
    )

    # 4. Use Cases (stateless, new instance per call)
    load_languages_use_case = providers.Factory(
        LoadLanguages,
        registry=language_registry,
    )

    lookup_candidates_use_case = providers.Factory(
        LookupCandidates,
        registry=language_registry,
    )
