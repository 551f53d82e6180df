"""Dependency container wiring for the application."""

from dataclasses import dataclass

from athlete_nutrition.config import Settings
from athlete_nutrition.services.analyzer import NutritionAnalyzer
from athlete_nutrition.services.knowledge_base import (
    KnowledgeBase,
    load_knowledge_base,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    knowledge_base: KnowledgeBase
    analyzer: NutritionAnalyzer


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    knowledge_base = load_knowledge_base()
    analyzer = NutritionAnalyzer(
        knowledge_base=knowledge_base,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        knowledge_base=knowledge_base,
        analyzer=analyzer,
    )
