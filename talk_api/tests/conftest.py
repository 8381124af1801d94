"""Shared fixtures: a throwaway data directory and a TestClient bound to it."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from talk_api.app import create_app
from talk_api.config import ServerConfig

from corpus import write_corpus


@pytest.fixture
def data_dir(tmp_path) -> Path:
    return write_corpus(tmp_path / "data")


@pytest.fixture
def config(data_dir) -> ServerConfig:
    return ServerConfig(data_dir=data_dir, random_seed=42, log_level="WARNING")


@pytest.fixture
def client(config):
    with TestClient(create_app(config)) as c:
        yield c
