"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from athlete_nutrition.api.app import create_app
from athlete_nutrition.config import Settings
from athlete_nutrition.containers import AppContainer, build_container
from athlete_nutrition.services.knowledge_base import (
    KnowledgeBase,
    load_knowledge_base,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", max_description_length=80)


@pytest.fixture
def knowledge_base() -> KnowledgeBase:
    return load_knowledge_base()


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
