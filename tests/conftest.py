"""Shared fixtures"""

from pathlib import Path

import pytest


DATA_PATH = Path(__file__).parent.parent / "data" / "knowledge_base.yaml"


@pytest.fixture
def knowledge_base():
    from diagnosa.knowledge_base import get_default_knowledge_base
    return get_default_knowledge_base()


@pytest.fixture
def engine(knowledge_base):
    from diagnosa.inference import NaiveBayesEngine
    return NaiveBayesEngine(knowledge_base)


@pytest.fixture
def kb_path():
    return DATA_PATH


@pytest.fixture
def manager(engine):
    from diagnosa.api.dependencies import engine_manager

    engine_manager.reset()
    engine_manager.set_engine(engine)
    yield engine_manager
    engine_manager.reset()


@pytest.fixture
def client(manager):
    from fastapi.testclient import TestClient
    from diagnosa.api import app

    with TestClient(app) as client:
        yield client
