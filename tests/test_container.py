"""Tests for container wiring."""

from athlete_nutrition.config import Settings
from athlete_nutrition.containers import build_container


def test_build_container_creates_analyzer(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.analyzer.knowledge_base is container.knowledge_base
    assert container.analyzer.debug is False


def test_debug_setting_reaches_analyzer() -> None:
    container = build_container(Settings(debug=True))

    assert container.analyzer.debug is True
