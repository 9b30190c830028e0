import logging

import pytest

from foodie.catalogue import Catalogue
from foodie.config import CatalogueConfig
from foodie.observability.hooks import DemoHooks
from foodie.observability.logging import ROOT_LOGGER_NAME
from foodie.patterns.creational.singleton import ConfigManager


@pytest.fixture(autouse=True)
def fresh_singleton():
    ConfigManager.reset_instance()
    yield
    ConfigManager.reset_instance()


@pytest.fixture(autouse=True)
def restore_foodie_logger():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.fixture
def hooks():
    return DemoHooks()


@pytest.fixture
def config():
    return CatalogueConfig()


@pytest.fixture
def catalogue(config, hooks):
    return Catalogue(config=config, hooks=hooks, session_id="test-session")
